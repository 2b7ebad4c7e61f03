"""
游戏相关枚举定义模块.

包含模拟器中使用的所有枚举类型，如花色、点数、行动类型、下注街道和玩家控制方式等.
"""

from enum import Enum
from typing import List


class Suit(Enum):
    """
    扑克牌花色枚举.

    值即为显示用的英文名称，如 "Hearts".
    """

    HEARTS = "Hearts"      # 红桃
    DIAMONDS = "Diamonds"  # 方块
    CLUBS = "Clubs"        # 梅花
    SPADES = "Spades"      # 黑桃


class Rank(Enum):
    """
    扑克牌点数枚举.

    13种符号化点数，值为显示名称。计分只关心点数是否相同，不比较大小.
    """

    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "Jack"
    QUEEN = "Queen"
    KING = "King"
    ACE = "Ace"


class ActionType(Enum):
    """
    玩家行动类型枚举.

    BLUFF 只对自动玩家开放.
    """

    BET = "bet"            # 下注
    RAISE = "raise"        # 加注
    CALL = "call"          # 跟注
    CHECK = "check"        # 过牌
    FOLD = "fold"          # 弃牌
    BLUFF = "bluff"        # 诈唬（固定20筹码加注）


class Street(Enum):
    """
    下注街道枚举.

    每手牌依次经历四轮下注，revealed_cards 表示该轮开始前需要翻开的公共牌数.
    """

    PRE_FLOP = ("pre_flop", 0, "Betting Round Begins")
    FLOP = ("flop", 3, "Betting Round 2 Begins")
    TURN = ("turn", 1, "Betting Round 3 Begins")
    RIVER = ("river", 1, "Final Betting Round Begins")

    def __init__(self, key: str, revealed_cards: int, banner: str) -> None:
        self.key = key
        self.revealed_cards = revealed_cards
        self.banner = banner


class ControlType(Enum):
    """
    玩家控制方式枚举.

    在创建玩家时确定一次，之后不再根据名称推断.
    """

    HUMAN = "human"
    AUTOMATED = "automated"


class TiePolicy(Enum):
    """
    摊牌平分策略枚举.
    """

    SPLIT = "split"            # 最高分并列者平分底池
    FIRST_SEEN = "first_seen"  # 座位顺序中第一个达到最高分的玩家独得


# Utility functions for enums
def get_all_suits() -> List[Suit]:
    """Get all card suits.

    Returns:
        List of all Suit enum values.
    """
    return list(Suit)


def get_all_ranks() -> List[Rank]:
    """Get all card ranks.

    Returns:
        List of all Rank enum values.
    """
    return list(Rank)


def get_betting_streets() -> List[Street]:
    """Get the four betting streets in play order."""
    return list(Street)
