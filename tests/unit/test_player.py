"""
玩家单元测试.
"""

import pytest

from holdem.core import ActionType, ControlType, Player
from helpers import FixedStrategy, card


@pytest.mark.unit
@pytest.mark.fast
class TestPlayer:
    """玩家测试类."""

    def setup_method(self):
        """测试前设置."""
        self.player = Player.human("Alice")

    def test_defaults(self):
        """测试默认筹码和统计."""
        assert self.player.chips == 1000
        assert self.player.control == ControlType.HUMAN
        assert not self.player.folded
        assert (self.player.games_won, self.player.hands_played, self.player.hands_won) == (0, 0, 0)

    def test_automated_requires_strategy(self):
        """测试自动玩家必须配置策略."""
        with pytest.raises(ValueError):
            Player("Bot 1", control=ControlType.AUTOMATED)
        bot = Player.automated("Bot 1", FixedStrategy(ActionType.CALL))
        assert bot.is_automated

    def test_validation(self):
        """测试无效数据被拒绝."""
        with pytest.raises(ValueError):
            Player("")
        with pytest.raises(ValueError):
            Player("Bob", chips=-1)

    def test_can_act(self):
        """测试弃牌或没有筹码的玩家不能行动."""
        assert self.player.can_act()
        self.player.fold()
        assert not self.player.can_act()
        broke = Player.human("Bob", chips=0)
        assert not broke.can_act()

    def test_pay_and_add_chips(self):
        """测试扣除和增加筹码."""
        assert self.player.pay(300) == 300
        assert self.player.chips == 700
        self.player.add_chips(50)
        assert self.player.chips == 750

    def test_pay_more_than_chips_rejected(self):
        """测试扣除超过持有的筹码被拒绝."""
        with pytest.raises(ValueError):
            self.player.pay(1001)
        assert self.player.chips == 1000

    def test_receive_card_slots(self):
        """测试底牌只有两个位置."""
        self.player.receive_card(card("Ace", "Hearts"), 0)
        self.player.receive_card(card("King", "Hearts"), 1)
        assert len(self.player.dealt_cards()) == 2
        with pytest.raises(IndexError):
            self.player.receive_card(card("2", "Hearts"), 2)

    def test_reset_for_new_hand(self):
        """测试新手牌清空底牌和弃牌状态."""
        self.player.receive_card(card("Ace", "Hearts"), 0)
        self.player.fold()
        self.player.reset_for_new_hand()
        assert not self.player.folded
        assert self.player.dealt_cards() == []

    def test_hand_str(self):
        """测试底牌显示和隐藏."""
        self.player.receive_card(card("Ace", "Hearts"), 0)
        self.player.receive_card(card("10", "Clubs"), 1)
        assert self.player.hand_str() == "Alice's hand: Ace of Hearts, 10 of Clubs"
        assert self.player.hand_str(hidden=True) == "Alice's hand: [Hidden]"

    def test_statistics_lines(self):
        """测试玩家统计信息."""
        self.player.games_won = 2
        lines = self.player.statistics_lines()
        assert lines[0] == "Player Statistics for Alice:"
        assert "Games Won: 2" in lines
