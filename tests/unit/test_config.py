"""
游戏配置单元测试.
"""

import pytest

from holdem.controller import GameConfig, MAX_PLAYERS
from holdem.core import GameConfigError, TiePolicy


@pytest.mark.unit
@pytest.mark.fast
class TestGameConfig:
    """游戏配置测试类."""

    def test_defaults(self):
        """测试默认配置."""
        config = GameConfig()
        assert config.max_players == MAX_PLAYERS == 6
        assert config.starting_chips == 1000
        assert config.bot_bet_amount == 50
        assert config.bluff_amount == 20
        assert config.tie_policy == TiePolicy.SPLIT
        assert (config.reveal_delay, config.showdown_delay, config.welcome_delay) == (1, 2, 3)
        assert config.save_path == "poker_game_state.txt"

    def test_headless_has_no_delays(self):
        """测试无延迟配置."""
        config = GameConfig.headless(starting_chips=200)
        assert (config.reveal_delay, config.showdown_delay, config.welcome_delay) == (0, 0, 0)
        assert config.starting_chips == 200

    @pytest.mark.parametrize("overrides", [
        {"max_players": 7},
        {"max_players": 1},
        {"starting_chips": 0},
        {"bot_bet_amount": 0},
        {"bluff_amount": -20},
        {"reveal_delay": -1},
        {"bot_name_prefix": ""},
    ])
    def test_invalid_config(self, overrides):
        """测试无效配置被拒绝."""
        with pytest.raises(GameConfigError):
            GameConfig(**overrides)

    def test_bot_names_fill_remaining_seats(self):
        """测试自动玩家填满剩余座位."""
        config = GameConfig()
        assert config.bot_names(4) == ["Bot 1", "Bot 2"]
        assert config.bot_names(6) == []
        assert len(config.bot_names(0)) == 6
        with pytest.raises(GameConfigError):
            config.bot_names(7)

    def test_is_bot_name(self):
        """测试按名称前缀识别旧存档中的自动玩家."""
        config = GameConfig()
        assert config.is_bot_name("Bot 3")
        assert not config.is_bot_name("Alice")
