"""德州扑克CLI游戏入口.

这个模块把click命令行、控制器和终端输入输出端口组装在一起.
"""

import logging
import sys
import time
from typing import Optional

import click

from ...controller import GameConfig, GameController
from ...core.exceptions import ExhaustedDeckError
from .input_handler import ClickActionProvider, prompt_human_names, prompt_load_game
from .render import CLIRenderer, ClickOutput


class TexasHoldemCLI:
    """德州扑克CLI游戏界面.

    提供欢迎界面、读档或新建玩家名单、游戏主循环和赛后报告.
    """

    def __init__(self, config: GameConfig, logger: Optional[logging.Logger] = None):
        """初始化CLI游戏.

        Args:
            config: 游戏配置
            logger: 日志记录器
        """
        self.config = config
        self.logger = logger or logging.getLogger(__name__)
        self.output = ClickOutput()
        self.controller = GameController(
            config=config,
            action_provider=ClickActionProvider(),
            output=self.output,
            logger=self.logger,
        )

    def run(self) -> None:
        """运行完整游戏."""
        for line in CLIRenderer.render_welcome():
            self.output.emit(line)
        if self.config.welcome_delay > 0:
            time.sleep(self.config.welcome_delay)

        if not (prompt_load_game() and self._load_roster()):
            names = prompt_human_names(self.config.max_players, self.config.bot_names)
            self.controller.setup_new_game(names)

        self.controller.show_rankings("Player Rankings (before the game):")
        self.controller.run()
        self.controller.final_report()
        self._show_player_details()

    def _show_player_details(self) -> None:
        for player in self.controller.seated_players:
            self.output.emit("")
            for line in self.controller.player_details(player.name):
                self.output.emit(line)

    def _load_roster(self) -> bool:
        # 读档失败或人数不足时改为新建
        if not self.controller.load_game():
            return False
        if len(self.controller.roster) < 2:
            self.output.emit("Saved game has fewer than two players. Starting a new game.")
            return False
        return True


@click.command()
@click.option('--seed', type=int, default=None, help='随机种子，用于可重现的游戏')
@click.option('--fast', is_flag=True, help='关闭所有节奏延迟')
@click.option('--save-path', default=GameConfig.save_path, show_default=True, help='存档文件路径')
@click.option('--log-level', default='WARNING', show_default=True,
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='日志级别')
def main(seed: Optional[int], fast: bool, save_path: str, log_level: str) -> None:
    """CLI游戏主入口."""
    logging.basicConfig(level=getattr(logging, log_level.upper()), format='%(name)s: %(message)s')
    logger = logging.getLogger("holdem")

    overrides = dict(save_path=save_path, random_seed=seed)
    config = GameConfig.headless(**overrides) if fast else GameConfig(**overrides)

    try:
        TexasHoldemCLI(config, logger).run()
    except ExhaustedDeckError as e:
        logger.error(f"牌堆耗尽: {e}")
        click.echo(CLIRenderer.render_error(str(e)), err=True)
        sys.exit(1)
    except click.Abort:
        click.echo("\n游戏被中断")
        sys.exit(130)


if __name__ == "__main__":
    main()
