"""
自动玩家策略单元测试.
"""

import random

import pytest

from holdem.ai import AUTOMATED_ACTIONS, AutomatedStrategy, HeuristicAI, HeuristicAIConfig
from holdem.core import ActionType, Player
from helpers import cards


def _bot_with_hand(strategy, hole):
    player = Player.automated("Bot 1", strategy)
    for index, c in enumerate(hole):
        player.receive_card(c, index)
    return player


@pytest.mark.unit
@pytest.mark.fast
class TestHeuristicAI:
    """启发式策略测试类."""

    def test_implements_protocol(self):
        """测试实现自动策略协议."""
        assert isinstance(HeuristicAI(), AutomatedStrategy)

    def test_strong_hand_always_raises(self):
        """测试分数超过阈值时必定加注."""
        ai = HeuristicAI(rng=random.Random(0))
        player = _bot_with_hand(ai, cards("Ace/Hearts", "Ace/Spades"))
        board = cards("Ace/Clubs", "Ace/Diamonds")
        for _ in range(20):
            assert ai.choose_action(player, board) == ActionType.RAISE
        assert ai.decision_count == 20

    def test_threshold_is_strict(self):
        """测试分数等于阈值时不保证加注."""
        ai = HeuristicAI(HeuristicAIConfig(strength_threshold=6), rng=random.Random(1))
        player = _bot_with_hand(ai, cards("Ace/Hearts", "Ace/Spades"))
        board = cards("Ace/Clubs")
        actions = {ai.choose_action(player, board) for _ in range(200)}
        assert actions == set(AUTOMATED_ACTIONS)

    def test_weak_hand_picks_from_automated_actions(self):
        """测试弱牌从四种行动中随机选择."""
        ai = HeuristicAI(rng=random.Random(3))
        player = _bot_with_hand(ai, cards("2/Hearts", "9/Spades"))
        for _ in range(50):
            assert ai.choose_action(player, []) in AUTOMATED_ACTIONS

    def test_seed_reproducible(self):
        """测试相同种子得到相同决策序列."""
        hole = cards("2/Hearts", "9/Spades")
        ai1 = HeuristicAI(HeuristicAIConfig(seed=11))
        ai2 = HeuristicAI(HeuristicAIConfig(seed=11))
        p1, p2 = _bot_with_hand(ai1, hole), _bot_with_hand(ai2, hole)
        assert [ai1.choose_action(p1, []) for _ in range(10)] == [ai2.choose_action(p2, []) for _ in range(10)]
