"""
Game loop controller for the Texas Hold'em simulator.
"""

from .config import GameConfig, MAX_PLAYERS
from .decorators import logged_action
from .game_controller import GameController, HandSummary

__all__ = ['GameController', 'HandSummary', 'GameConfig', 'MAX_PLAYERS', 'logged_action']
