"""
Heuristic strategy for automated players.

A strong hand (score above a fixed threshold) always raises; anything else
picks uniformly among raise, call, fold and bluff.
"""

import logging
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Sequence, Tuple

from ..core.cards import Card
from ..core.enums import ActionType
from ..core.scorer import score_hand

if TYPE_CHECKING:
    from ..core.player import Player

logger = logging.getLogger(__name__)

AUTOMATED_ACTIONS: Tuple[ActionType, ...] = (
    ActionType.RAISE,
    ActionType.CALL,
    ActionType.FOLD,
    ActionType.BLUFF,
)


@dataclass
class HeuristicAIConfig:
    """Configuration for the heuristic strategy.

    Attributes:
        name: Name of the strategy
        strength_threshold: Scores strictly above this always raise
        seed: Optional seed for reproducible decisions
    """
    name: str = "HeuristicAI"
    strength_threshold: int = 5
    seed: Optional[int] = None


class HeuristicAI:
    """Threshold-then-random strategy."""

    def __init__(self, config: Optional[HeuristicAIConfig] = None,
                 rng: Optional[random.Random] = None):
        """Initialize the strategy.

        Args:
            config: Optional configuration parameters
            rng: Random generator; seeded from config.seed when omitted
        """
        self.config = config or HeuristicAIConfig()
        self._random = rng or random.Random(self.config.seed)
        self.decision_count = 0

    def choose_action(self, player: "Player", community_cards: Sequence[Card]) -> ActionType:
        self.decision_count += 1
        strength = score_hand(player.dealt_cards(), community_cards)
        if strength > self.config.strength_threshold:
            action = ActionType.RAISE
        else:
            action = self._random.choice(AUTOMATED_ACTIONS)
        logger.debug(f"{player.name} strength={strength} -> {action.value}")
        return action
