"""
单手牌的共享状态.

记录底池、当前下注额、行动历史以及公共牌翻牌进度.
同一时刻只有一个行动者修改这些字段.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .cards import Card, format_cards
from .enums import ActionType, Street

MAX_COMMUNITY_CARDS = 5


@dataclass(frozen=True)
class ActionRecord:
    """
    行动历史中的一条记录.

    Attributes:
        street: 发生行动的下注轮
        player_name: 行动玩家
        action_type: 最终执行的行动类型（可能已经降级）
        amount: 本次行动实际放入底池的筹码
        description: 人类可读的描述
    """

    street: Street
    player_name: str
    action_type: ActionType
    amount: int
    description: str

    def __str__(self) -> str:
        return self.description


@dataclass
class RoundState:
    """
    一手牌的底池与下注状态.

    每手牌开始时创建，摊牌后丢弃。pot 可以由上一手无人获胜时结转的筹码初始化.

    同一手牌的四个下注轮共用一个实例，current_bet 和 pot 跨轮保留。
    因此底池守恒按整手牌计算：pot 等于初始结转筹码加上各轮 wagers_for(street) 之和.
    """

    pot: int = 0
    current_bet: int = 0
    street: Street = Street.PRE_FLOP
    action_history: List[ActionRecord] = field(default_factory=list)
    community_cards: List[Card] = field(default_factory=list)
    contributions: Dict[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.pot < 0:
            raise ValueError(f"底池不能为负数: {self.pot}")
        if self.current_bet < 0:
            raise ValueError(f"当前下注不能为负数: {self.current_bet}")

    @property
    def revealed_count(self) -> int:
        return len(self.community_cards)

    def reveal(self, card: Card) -> bool:
        """
        翻开一张公共牌.

        Returns:
            bool: 已满5张时不再翻牌并返回False
        """
        if len(self.community_cards) >= MAX_COMMUNITY_CARDS:
            return False
        self.community_cards.append(card)
        return True

    def add_to_pot(self, player_name: str, amount: int) -> None:
        """把玩家的下注放入底池并记入本手贡献."""
        self.pot += amount
        self.contributions[player_name] = self.contributions.get(player_name, 0) + amount

    def record(self, player_name: str, action_type: ActionType, amount: int,
               description: str) -> ActionRecord:
        """追加一条行动记录并返回它."""
        entry = ActionRecord(self.street, player_name, action_type, amount, description)
        self.action_history.append(entry)
        return entry

    def history_for(self, street: Optional[Street] = None) -> List[ActionRecord]:
        """返回某一轮（或全部）的行动记录."""
        if street is None:
            return list(self.action_history)
        return [entry for entry in self.action_history if entry.street == street]

    def wagers_for(self, street: Street) -> int:
        """某一轮内所有行动放入底池的筹码总和."""
        return sum(entry.amount for entry in self.history_for(street))

    def community_str(self) -> str:
        return format_cards(self.community_cards)

    def take_pot(self) -> int:
        """取走整个底池并清零."""
        amount = self.pot
        self.pot = 0
        return amount
