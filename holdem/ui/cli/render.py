"""德州扑克CLI渲染模块.

这个模块负责欢迎界面等静态文字的渲染，以及把核心层的输出行写到终端.
"""

from typing import List

import click

RULE = "---------------------------------------------------"


class CLIRenderer:
    """CLI渲染器.

    所有渲染方法都是纯函数，返回文本行.
    """

    @staticmethod
    def render_welcome() -> List[str]:
        """渲染欢迎界面和基本规则.

        Returns:
            欢迎界面的文本行
        """
        return [
            RULE,
            "           Welcome to Texas Hold'em Poker!",
            RULE,
            "In this game, you will be playing against AI",
            "Players in a classic poker setting. Use your ",
            "skill and a bit of luck to win chips and ",
            "become the ultimate poker champion!",
            "",
            RULE,
            "",
            "Basic Rules:",
            "1. Each player is dealt two cards, known as hole cards.",
            "2. There are five community cards dealt in three stages: ",
            "   the Flop (3 cards), the Turn (1 card), and the River (1 card).",
            "3. Players use their hole cards and the community cards ",
            "   to make the best possible hand.",
            "4. Betting occurs before the Flop, after the Flop, ",
            "   after the Turn, and after the River.",
            "5. You can bet, call, raise, check or fold.",
            "6. The goal is to win chips by having the best hand ",
            "   or convincing other players to fold.",
            RULE,
            "Let's get started!",
            RULE,
            "",
        ]

    @staticmethod
    def render_error(message: str) -> str:
        return f"Error: {message}"


class ClickOutput:
    """把显示行写到终端的输出端口."""

    def emit(self, line: str) -> None:
        click.echo(line)
