"""
扑克牌相关的核心数据结构.

包含Card和Deck类。Deck采用固定52张牌加发牌游标的方式，一次洗牌周期内每张牌只发一次.
"""

import random
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .enums import Suit, Rank, get_all_suits, get_all_ranks
from .exceptions import ExhaustedDeckError

DECK_SIZE = 52


@dataclass(frozen=True)
class Card:
    """
    表示一张扑克牌.

    不可变数据类，包含点数和花色.

    Examples:
        >>> str(Card(Rank.ACE, Suit.SPADES))
        'Ace of Spades'
    """

    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        """
        验证扑克牌数据的有效性.

        Raises:
            TypeError: 当花色或点数类型无效时
        """
        if not isinstance(self.rank, Rank):
            raise TypeError(f"点数必须是Rank类型，实际: {type(self.rank)}")
        if not isinstance(self.suit, Suit):
            raise TypeError(f"花色必须是Suit类型，实际: {type(self.suit)}")

    def __str__(self) -> str:
        """
        返回扑克牌的字符串表示.

        Returns:
            str: 格式为"<点数> of <花色>"的字符串
        """
        return f"{self.rank.value} of {self.suit.value}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"


def format_cards(cards: Iterable[Card]) -> str:
    """
    将一组牌格式化为逗号分隔的字符串.

    Args:
        cards: 要显示的牌

    Returns:
        str: 如"2 of Hearts, King of Clubs"
    """
    return ", ".join(str(card) for card in cards)


class Deck:
    """
    表示一副扑克牌.

    持有固定的52张牌和一个发牌游标。洗牌只打乱顺序，不移动游标；
    reset只把游标拨回0，不重新洗牌。调用方负责在每手牌前按
    reset -> shuffle -> deal 的顺序使用.

    Attributes:
        _cards: 52张牌的当前排列
        _cursor: 下一张待发牌的位置，取值范围[0, 52]
        _rng: 随机数生成器
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        """
        初始化牌组.

        Args:
            rng: 随机数生成器，用于洗牌操作。如果为None，使用默认随机数生成器
        """
        self._rng = rng or random.Random()
        self._cards: List[Card] = [
            Card(rank, suit)
            for suit in get_all_suits()
            for rank in get_all_ranks()
        ]
        self._cursor = 0

    def shuffle(self) -> None:
        """洗牌，对全部52张牌做均匀随机排列."""
        self._rng.shuffle(self._cards)

    def deal_card(self) -> Card:
        """
        发一张牌并推进游标.

        Returns:
            Card: 发出的牌

        Raises:
            ExhaustedDeckError: 当52张牌都已发出时
        """
        if self._cursor >= DECK_SIZE:
            raise ExhaustedDeckError("No cards left in the deck.")
        card = self._cards[self._cursor]
        self._cursor += 1
        return card

    def deal_cards(self, count: int) -> List[Card]:
        """
        发多张牌.

        Args:
            count: 要发的牌数

        Returns:
            List[Card]: 发出的牌列表

        Raises:
            ValueError: 当count为负数时
            ExhaustedDeckError: 当牌组中的牌不足时
        """
        if count < 0:
            raise ValueError("Count must be non-negative")
        return [self.deal_card() for _ in range(count)]

    def reset(self) -> None:
        """游标归零，不重新洗牌."""
        self._cursor = 0

    @property
    def cursor(self) -> int:
        """下一张待发牌的位置."""
        return self._cursor

    @property
    def cards_remaining(self) -> int:
        """
        获取剩余牌数.

        Returns:
            int: 本轮洗牌周期中尚未发出的牌数
        """
        return DECK_SIZE - self._cursor

    def __len__(self) -> int:
        return self.cards_remaining

    def __repr__(self) -> str:
        return f"Deck(cursor={self._cursor}, cards_remaining={self.cards_remaining})"
