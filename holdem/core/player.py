"""
德州扑克玩家状态管理.

包含玩家的基本信息、筹码、底牌、弃牌状态和生涯统计.
人类/自动控制方式在创建时通过ControlType显式确定.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

from .cards import Card, format_cards
from .enums import ControlType

if TYPE_CHECKING:
    from ..ai.base import AutomatedStrategy

HOLE_CARD_SLOTS = 2


@dataclass(eq=False)
class Player:
    """
    德州扑克玩家类.

    管理玩家的筹码、两张底牌、弃牌状态以及 games_won / hands_played /
    hands_won 统计。名称在同一局游戏内唯一.
    """

    name: str
    chips: int = 1000
    control: ControlType = ControlType.HUMAN
    strategy: Optional["AutomatedStrategy"] = None
    hole_cards: List[Optional[Card]] = field(
        default_factory=lambda: [None] * HOLE_CARD_SLOTS
    )
    folded: bool = False
    games_won: int = 0
    hands_played: int = 0
    hands_won: int = 0

    def __post_init__(self) -> None:
        """
        验证玩家数据的有效性.

        Raises:
            ValueError: 当玩家数据无效时
        """
        if not self.name:
            raise ValueError("玩家名称不能为空")

        if self.chips < 0:
            raise ValueError(f"筹码数量不能为负数: {self.chips}")

        for counter in ("games_won", "hands_played", "hands_won"):
            if getattr(self, counter) < 0:
                raise ValueError(f"{counter}不能为负数: {getattr(self, counter)}")

        if len(self.hole_cards) != HOLE_CARD_SLOTS:
            raise ValueError(f"底牌必须恰好有{HOLE_CARD_SLOTS}个位置: {len(self.hole_cards)}")

        if self.control == ControlType.AUTOMATED and self.strategy is None:
            raise ValueError(f"自动玩家{self.name}必须配置策略")

    @classmethod
    def human(cls, name: str, chips: int = 1000) -> "Player":
        """创建人类控制的玩家."""
        return cls(name=name, chips=chips, control=ControlType.HUMAN)

    @classmethod
    def automated(cls, name: str, strategy: "AutomatedStrategy", chips: int = 1000) -> "Player":
        """创建由策略控制的自动玩家."""
        return cls(name=name, chips=chips, control=ControlType.AUTOMATED, strategy=strategy)

    @property
    def is_automated(self) -> bool:
        return self.control == ControlType.AUTOMATED

    def can_act(self) -> bool:
        """
        检查玩家本轮是否可以行动.

        Returns:
            bool: 未弃牌且仍有筹码时返回True
        """
        return not self.folded and self.chips > 0

    def can_afford(self, amount: int) -> bool:
        return self.chips >= amount

    def receive_card(self, card: Card, index: int) -> None:
        """
        把一张牌放入指定底牌位置.

        Args:
            card: 发到的牌
            index: 底牌位置，0或1

        Raises:
            IndexError: 当位置超出两张底牌范围时
        """
        if not 0 <= index < HOLE_CARD_SLOTS:
            raise IndexError(f"底牌位置超出范围: {index}")
        self.hole_cards[index] = card

    def dealt_cards(self) -> List[Card]:
        """返回已经发到的底牌."""
        return [card for card in self.hole_cards if card is not None]

    def pay(self, amount: int) -> int:
        """
        从筹码中扣除下注金额.

        Args:
            amount: 扣除金额，调用方保证不超过当前筹码

        Returns:
            int: 实际扣除的金额

        Raises:
            ValueError: 当金额为负数或超过筹码时
        """
        if amount < 0:
            raise ValueError(f"下注金额不能为负数: {amount}")
        if amount > self.chips:
            raise ValueError(f"{self.name}筹码不足: 需要{amount}, 拥有{self.chips}")
        self.chips -= amount
        return amount

    def add_chips(self, amount: int) -> None:
        """
        增加玩家的筹码.

        Raises:
            ValueError: 当金额为负数时
        """
        if amount < 0:
            raise ValueError(f"增加的筹码数量不能为负数: {amount}")
        self.chips += amount

    def fold(self) -> None:
        self.folded = True

    def reset_for_new_hand(self) -> None:
        """
        为新一手牌重置玩家状态.

        清空底牌并取消弃牌标记.
        """
        self.hole_cards = [None] * HOLE_CARD_SLOTS
        self.folded = False

    def hand_str(self, hidden: bool = False) -> str:
        """
        获取底牌的显示字符串.

        Args:
            hidden: 是否隐藏底牌

        Returns:
            str: 如"Alice's hand: 2 of Hearts, King of Clubs"
        """
        if hidden:
            return f"{self.name}'s hand: [Hidden]"
        return f"{self.name}'s hand: {format_cards(self.dealt_cards())}"

    def statistics_lines(self) -> List[str]:
        """返回该玩家的统计信息行."""
        return [
            f"Player Statistics for {self.name}:",
            f"Chips: {self.chips}",
            f"Games Won: {self.games_won}",
            f"Hands Played: {self.hands_played}",
            f"Hands Won: {self.hands_won}",
        ]

    def __str__(self) -> str:
        status = " [folded]" if self.folded else ""
        return f"{self.name}: {self.chips} chips{status}"

    def __repr__(self) -> str:
        return f"Player(name='{self.name}', chips={self.chips}, control={self.control.name})"
