"""德州扑克CLI输入处理模块.

这个模块用click读取人类玩家的原始输入，实现ActionProvider端口.
输入的合法性校验由核心层的HumanActionReader负责，这里只负责读取.
"""

from typing import Callable, List, Optional

import click

from ...controller.config import MAX_PLAYERS


class ClickActionProvider:
    """基于click的人类玩家输入端口.

    提示文字由核心层写到输出端口，这里只读取一行回答.
    """

    def read_action(self, player_name: str) -> str:
        return click.prompt("", prompt_suffix="", type=str)

    def read_amount(self, player_name: str) -> str:
        return click.prompt("", prompt_suffix="", type=str)

    def confirm(self, question: str) -> bool:
        """询问是/否问题.

        Raises:
            click.Abort: 用户取消输入
        """
        return click.confirm(question, default=False)


def prompt_load_game() -> bool:
    return click.confirm("Do you want to load a saved game?", default=False)


def prompt_human_names(max_players: int = MAX_PLAYERS,
                       bot_names: Optional[Callable[[int], List[str]]] = None) -> List[str]:
    """读取人类玩家数量和名称.

    名称不能为空、不能重复，也不能与补位的自动玩家同名，否则重新输入.

    Args:
        max_players: 座位上限
        bot_names: 根据人类玩家数量生成自动玩家名称，通常是 GameConfig.bot_names

    Returns:
        人类玩家名称列表，可以为空（全部由自动玩家组成）
    """
    count = click.prompt(
        f"Enter the number of human players (max {max_players})",
        type=click.IntRange(0, max_players),
    )
    reserved = set(bot_names(count)) if bot_names else set()
    names: List[str] = []
    while len(names) < count:
        name = click.prompt(f"Enter name for player {len(names) + 1}", type=str).strip()
        if not name or name in names or name in reserved:
            click.echo("Invalid name. Please enter a unique, non-empty name.")
            continue
        names.append(name)
    return names
