"""
Automated player strategies.

This package provides strategy implementations used by automated seats.
"""

from .base import AutomatedStrategy
from .heuristic_ai import HeuristicAI, HeuristicAIConfig, AUTOMATED_ACTIONS

__all__ = ['AutomatedStrategy', 'HeuristicAI', 'HeuristicAIConfig', 'AUTOMATED_ACTIONS']
