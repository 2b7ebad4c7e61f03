"""德州扑克CLI用户界面模块.

这个包提供命令行界面的实现，包括：
- 游戏入口命令
- 渲染器（欢迎界面和输出端口）
- 输入处理器（基于click的人类玩家输入）
"""

from .input_handler import ClickActionProvider
from .render import CLIRenderer, ClickOutput

__all__ = [
    'ClickActionProvider',
    'CLIRenderer',
    'ClickOutput',
]
