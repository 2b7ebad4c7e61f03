"""
CLI单元测试.

使用click的CliRunner驱动命令行入口和输入处理器.
"""

import pytest
from click.testing import CliRunner

from holdem.controller import GameConfig
from holdem.core import ActionProvider, ExhaustedDeckError, OutputSink
from holdem.ui.cli import CLIRenderer, ClickActionProvider, ClickOutput
from holdem.ui.cli import cli_game
from holdem.ui.cli.input_handler import prompt_human_names


@pytest.mark.unit
@pytest.mark.fast
class TestClickPorts:
    """终端输入输出端口测试类."""

    def setup_method(self):
        """测试前设置."""
        self.runner = CliRunner()

    def test_implements_ports(self):
        """测试实现输入输出端口协议."""
        assert isinstance(ClickActionProvider(), ActionProvider)
        assert isinstance(ClickOutput(), OutputSink)

    def test_reads_raw_answers(self):
        """测试读取原始行动、金额和确认."""
        provider = ClickActionProvider()
        with self.runner.isolation(input="Call\n42\ny\nn\n"):
            assert provider.read_action("Alice") == "Call"
            assert provider.read_amount("Alice") == "42"
            assert provider.confirm("Continue?") is True
            assert provider.confirm("Save?") is False

    def test_prompt_human_names_rejects_duplicates(self):
        """测试重复的玩家名称需要重新输入."""
        with self.runner.isolation(input="2\nAlice\nAlice\nBob\n"):
            assert prompt_human_names() == ["Alice", "Bob"]

    def test_prompt_human_names_rejects_bot_names(self):
        """测试与补位自动玩家同名的名称需要重新输入."""
        bot_names = GameConfig().bot_names
        with self.runner.isolation(input="1\nBot 1\nBot 6\nAlice\n"):
            assert prompt_human_names(bot_names=bot_names) == ["Bot 6"]
        with self.runner.isolation(input="1\nBot 1\nAlice\n"):
            assert prompt_human_names(bot_names=bot_names) == ["Alice"]

    def test_prompt_human_names_range(self):
        """测试人类玩家数量超出范围时重新输入."""
        with self.runner.isolation(input="9\n0\n"):
            assert prompt_human_names() == []

    def test_welcome_screen(self):
        """测试欢迎界面."""
        lines = CLIRenderer.render_welcome()
        assert "           Welcome to Texas Hold'em Poker!" in lines
        assert "Let's get started!" in lines


@pytest.mark.unit
class TestMainCommand:
    """命令行入口测试类."""

    def setup_method(self):
        """测试前设置."""
        self.runner = CliRunner()

    def test_bots_only_game_exits_after_one_hand(self, tmp_path):
        """测试全部由自动玩家组成的游戏，第一手后退出."""
        save_path = str(tmp_path / "save.txt")
        result = self.runner.invoke(
            cli_game.main, ["--fast", "--seed", "7", "--save-path", save_path],
            input="n\n0\nn\n",
        )
        assert result.exit_code == 0, result.output
        assert "Welcome to Texas Hold'em Poker!" in result.output
        assert "Number of bots: 6" in result.output
        assert "Player Rankings (before the game):" in result.output
        assert "Betting Round Begins" in result.output
        assert "Player Statistics:" in result.output

    def test_load_missing_save_falls_back_to_new_game(self, tmp_path):
        """测试存档不存在时改为新建游戏."""
        save_path = str(tmp_path / "missing.txt")
        result = self.runner.invoke(
            cli_game.main, ["--fast", "--seed", "3", "--save-path", save_path],
            input="y\n0\nn\n",
        )
        assert result.exit_code == 0, result.output
        assert "Unable to load game state." in result.output
        assert "Number of bots: 6" in result.output

    def test_load_saved_game(self, tmp_path):
        """测试读取存档继续游戏."""
        save = tmp_path / "save.txt"
        save.write_text("Bot 1 500 1 2 1\nBot 2 500 0 2 1\n")
        result = self.runner.invoke(
            cli_game.main, ["--fast", "--seed", "5", "--save-path", str(save)],
            input="y\nn\n",
        )
        assert result.exit_code == 0, result.output
        assert "Game state loaded successfully." in result.output
        assert "Bot 1 -> Chips: 500" in result.output

    def test_exhausted_deck_exits_non_zero(self, tmp_path, monkeypatch):
        """测试牌堆耗尽时以非零状态退出."""
        def exhausted(self):
            raise ExhaustedDeckError("No cards left in the deck.")

        monkeypatch.setattr(cli_game.TexasHoldemCLI, "run", exhausted)
        result = self.runner.invoke(cli_game.main, ["--fast", "--save-path", str(tmp_path / "s.txt")])
        assert result.exit_code == 1

    def test_invalid_log_level(self):
        """测试无效的日志级别."""
        result = self.runner.invoke(cli_game.main, ["--log-level", "LOUD"])
        assert result.exit_code == 2

    def test_bot_name_for_human_is_reprompted(self, tmp_path):
        """测试人类玩家输入自动玩家名称时重新输入而不是崩溃."""
        result = self.runner.invoke(
            cli_game.main, ["--fast", "--seed", "2", "--save-path", str(tmp_path / "s.txt")],
            input="n\n1\nBot 1\nAlice\n",
        )
        # 输入结束后以中断退出，而不是名称冲突的异常
        assert result.exit_code in (0, 130), result.output
        assert "Invalid name. Please enter a unique, non-empty name." in result.output
        assert "Number of bots: 5" in result.output

    def test_duplicate_names_in_save_fall_back_to_new_game(self, tmp_path):
        """测试存档名称重复时提示并改为新建游戏."""
        save = tmp_path / "save.txt"
        save.write_text("Bot 1 500 0 1 0\nBot 1 500 0 1 0\n")
        result = self.runner.invoke(
            cli_game.main, ["--fast", "--seed", "3", "--save-path", str(save)],
            input="y\n0\nn\n",
        )
        assert result.exit_code == 0, result.output
        assert "Unable to load game state." in result.output
        assert "Number of bots: 6" in result.output

    def test_player_details_after_game(self, tmp_path):
        """测试赛后输出每位玩家的详细统计."""
        result = self.runner.invoke(
            cli_game.main, ["--fast", "--seed", "7", "--save-path", str(tmp_path / "s.txt")],
            input="n\n0\nn\n",
        )
        assert result.exit_code == 0, result.output
        for i in range(1, 7):
            assert f"Player Statistics for Bot {i}:" in result.output
        assert "Hands Played: 1" in result.output
