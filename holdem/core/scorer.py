"""
手牌强度计分器.

简化的计分模型：只统计点数重复次数，一对加2分，三条加6分，四条加10分.
不识别顺子、同花，也不比较高牌.
"""

from collections import Counter
from typing import Dict, Iterable, Sequence

from .cards import Card
from .enums import Rank

PAIR_SCORE = 2
TRIPLE_SCORE = 6
QUAD_SCORE = 10

_FREQUENCY_SCORES: Dict[int, int] = {
    2: PAIR_SCORE,
    3: TRIPLE_SCORE,
    4: QUAD_SCORE,
}


def count_ranks(cards: Iterable[Card]) -> Dict[Rank, int]:
    """
    统计各点数出现的次数.

    Args:
        cards: 参与统计的牌

    Returns:
        Dict[Rank, int]: 点数到出现次数的映射
    """
    return Counter(card.rank for card in cards)


def score_hand(hole_cards: Sequence[Card], community_cards: Sequence[Card] = ()) -> int:
    """
    计算底牌加可见公共牌的强度分数.

    Args:
        hole_cards: 玩家的两张底牌
        community_cards: 已翻开的公共牌（0到5张）

    Returns:
        int: 各点数按出现次数计分后的总和

    Examples:
        一对加一个三条得 2 + 6 = 8 分.
    """
    tally = count_ranks(list(hole_cards) + list(community_cards))
    return sum(_FREQUENCY_SCORES.get(frequency, 0) for frequency in tally.values())
