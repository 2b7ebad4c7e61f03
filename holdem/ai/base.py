"""
Base strategy interface for automated players.

This module defines the protocol that all automated strategies must implement.
"""

from typing import TYPE_CHECKING, Protocol, Sequence, runtime_checkable

from ..core.cards import Card
from ..core.enums import ActionType

if TYPE_CHECKING:
    from ..core.player import Player


@runtime_checkable
class AutomatedStrategy(Protocol):
    """Automated strategy interface protocol.

    Only the action type is chosen here; the betting engine decides the
    amounts (fixed raise size, fixed bluff increment) and downgrades anything
    the player cannot afford.
    """

    def choose_action(self, player: "Player", community_cards: Sequence[Card]) -> ActionType:
        """Pick an action given the player's hole cards and the visible board.

        Args:
            player: The acting automated player
            community_cards: Community cards revealed so far

        Returns:
            One of RAISE, CALL, FOLD, BLUFF
        """
        ...
