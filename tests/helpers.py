"""测试辅助工具: 造牌、固定策略和可预知顺序的洗牌器."""

from itertools import cycle
from typing import Iterable, List, Sequence

from holdem.core import ActionType, Card, Player, Rank, Suit


def card(rank: str, suit: str = "Spades") -> Card:
    """用显示名称造一张牌，如 card("Ace", "Hearts")."""
    return Card(Rank(rank), Suit(suit))


def cards(*labels: str) -> List[Card]:
    """用 "Ace/Hearts" 形式的字符串造多张牌."""
    result = []
    for label in labels:
        rank, suit = label.split("/")
        result.append(card(rank, suit))
    return result


class FixedStrategy:
    """按给定顺序循环返回行动的自动策略."""

    def __init__(self, *actions: ActionType) -> None:
        self._actions = cycle(actions or (ActionType.CALL,))
        self.calls = 0
        self.seen_community: List[int] = []

    def choose_action(self, player: Player, community_cards: Sequence[Card]) -> ActionType:
        self.calls += 1
        self.seen_community.append(len(community_cards))
        return next(self._actions)


class StackedShuffle:
    """洗牌时把指定的牌按顺序放到牌堆顶部."""

    def __init__(self, top_cards: Iterable[Card]) -> None:
        self._top = list(top_cards)

    def shuffle(self, deck_cards: List[Card]) -> None:
        rest = [c for c in deck_cards if c not in self._top]
        deck_cards[:] = self._top + rest


def bot(name: str, *actions: ActionType, chips: int = 1000) -> Player:
    return Player.automated(name, FixedStrategy(*actions), chips)
