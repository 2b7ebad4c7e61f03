"""
游戏配置相关类的实现
包含座位上限、筹码、自动玩家参数、平分策略和节奏延迟
"""

from dataclasses import dataclass
from typing import List, Optional

from ..core.enums import TiePolicy
from ..core.exceptions import GameConfigError
from ..persistence.state_store import DEFAULT_SAVE_PATH

MAX_PLAYERS = 6


@dataclass
class GameConfig:
    """
    游戏配置类
    包含所有游戏相关的设置参数
    """
    # 座位和筹码设置
    max_players: int = MAX_PLAYERS     # 最大座位数
    starting_chips: int = 1000         # 初始筹码
    bot_name_prefix: str = "Bot"       # 自动玩家名称前缀，名称为"Bot <n>"

    # 自动玩家设置
    bot_bet_amount: int = 50           # 自动玩家加注金额
    bluff_amount: int = 20             # 诈唬追加金额
    strength_threshold: int = 5        # 超过该分数必定加注

    # 结算规则
    tie_policy: TiePolicy = TiePolicy.SPLIT
    legacy_ranking_tree: bool = False  # 排名按旧版插入树顺序显示

    # 节奏延迟（秒），仅影响显示
    reveal_delay: float = 1
    showdown_delay: float = 2
    welcome_delay: float = 3

    # 存档与调试
    save_path: str = DEFAULT_SAVE_PATH
    random_seed: Optional[int] = None  # 随机种子，用于可重现的游戏

    def __post_init__(self):
        """验证配置的有效性"""
        if not 2 <= self.max_players <= MAX_PLAYERS:
            raise GameConfigError(f"座位数必须在2到{MAX_PLAYERS}之间: {self.max_players}")

        if self.starting_chips <= 0:
            raise GameConfigError(f"初始筹码必须大于0: {self.starting_chips}")

        if self.bot_bet_amount <= 0 or self.bluff_amount <= 0:
            raise GameConfigError(
                f"自动玩家下注金额必须大于0: bet={self.bot_bet_amount}, bluff={self.bluff_amount}"
            )

        if min(self.reveal_delay, self.showdown_delay, self.welcome_delay) < 0:
            raise GameConfigError("延迟不能为负数")

        if not self.bot_name_prefix:
            raise GameConfigError("自动玩家名称前缀不能为空")

    def bot_names(self, human_count: int) -> List[str]:
        """
        生成填满剩余座位的自动玩家名称

        Raises:
            GameConfigError: 人类玩家数量超出范围时
        """
        if not 0 <= human_count <= self.max_players:
            raise GameConfigError(f"人类玩家数量必须在0到{self.max_players}之间: {human_count}")
        return [f"{self.bot_name_prefix} {i + 1}" for i in range(self.max_players - human_count)]

    def is_bot_name(self, name: str) -> bool:
        """旧存档没有控制方式字段，读档时用名称前缀确定一次"""
        return name.startswith(self.bot_name_prefix)

    @classmethod
    def headless(cls, **overrides) -> 'GameConfig':
        """
        创建无延迟的配置，用于自动化测试
        """
        settings = dict(reveal_delay=0, showdown_delay=0, welcome_delay=0)
        settings.update(overrides)
        return cls(**settings)
