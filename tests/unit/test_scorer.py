"""
计分器单元测试.
"""

import pytest

from holdem.core import PAIR_SCORE, QUAD_SCORE, TRIPLE_SCORE, score_hand
from helpers import cards


@pytest.mark.unit
@pytest.mark.fast
class TestScoreHand:
    """手牌计分测试类."""

    def test_no_repeats_scores_zero(self):
        """测试没有重复点数时得0分."""
        assert score_hand(cards("2/Hearts", "3/Clubs"), cards("9/Spades", "King/Diamonds")) == 0

    def test_pair(self):
        """测试一对得2分."""
        assert score_hand(cards("Ace/Hearts", "Ace/Spades")) == PAIR_SCORE

    def test_triple_from_board(self):
        """测试底牌与公共牌组成三条得6分."""
        hole = cards("7/Hearts", "7/Spades")
        board = cards("7/Clubs", "2/Diamonds", "9/Hearts")
        assert score_hand(hole, board) == TRIPLE_SCORE

    def test_quad(self):
        """测试四条得10分."""
        hole = cards("Queen/Hearts", "Queen/Spades")
        board = cards("Queen/Clubs", "Queen/Diamonds")
        assert score_hand(hole, board) == QUAD_SCORE

    def test_pair_plus_triple_is_additive(self):
        """测试一对加三条得8分."""
        hole = cards("5/Hearts", "5/Spades")
        board = cards("Jack/Clubs", "Jack/Diamonds", "Jack/Hearts")
        assert score_hand(hole, board) == PAIR_SCORE + TRIPLE_SCORE

    def test_two_pairs(self):
        """测试两对得4分."""
        hole = cards("5/Hearts", "8/Spades")
        board = cards("5/Clubs", "8/Diamonds", "King/Hearts")
        assert score_hand(hole, board) == 2 * PAIR_SCORE

    def test_empty_board(self):
        """测试公共牌为空时只计底牌."""
        assert score_hand(cards("2/Hearts", "3/Hearts")) == 0
