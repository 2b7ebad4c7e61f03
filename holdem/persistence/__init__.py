"""
存档持久化模块.

提供玩家记录的文本格式读写.
"""

from .state_store import GameStateStore, PlayerRecord, DEFAULT_SAVE_PATH

__all__ = ['GameStateStore', 'PlayerRecord', 'DEFAULT_SAVE_PATH']
