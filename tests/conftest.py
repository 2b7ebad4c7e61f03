"""
测试配置 - pytest配置文件

提供通用fixture:
- 无延迟的游戏配置
- 内存输出端口
- 固定随机数生成器
"""

import random

import pytest

from holdem.controller import GameConfig
from holdem.core import BufferedOutput, RoundState


@pytest.fixture
def headless_config(tmp_path):
    """无延迟、存档写入临时目录的配置"""
    return GameConfig.headless(save_path=str(tmp_path / "poker_game_state.txt"))


@pytest.fixture
def output():
    """内存输出端口"""
    return BufferedOutput()


@pytest.fixture
def rng():
    """固定种子的随机数生成器"""
    return random.Random(42)


@pytest.fixture
def round_state():
    """空的手牌状态"""
    return RoundState()
