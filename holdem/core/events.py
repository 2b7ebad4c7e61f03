"""
Event system for the Texas Hold'em simulator.

This module provides an event bus that lets observers (display, reports,
tests) follow a game without touching the betting engine.
"""

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional


class EventType(Enum):
    """Types of events that can be emitted by the game."""

    # Hand lifecycle events
    HAND_STARTED = "hand_started"
    CARDS_DEALT = "cards_dealt"
    COMMUNITY_REVEALED = "community_revealed"
    ROUND_COMPLETED = "round_completed"

    # Player action events
    PLAYER_ACTION = "player_action"
    PLAYER_ELIMINATED = "player_eliminated"

    # Pot events
    POT_AWARDED = "pot_awarded"
    POT_CARRIED_OVER = "pot_carried_over"

    # Game lifecycle events
    GAME_ENDED = "game_ended"


@dataclass
class GameEvent:
    """Represents a game event with associated data.

    Attributes:
        event_type: The type of event
        data: Event-specific data
        timestamp: When the event occurred
    """

    event_type: EventType
    data: Dict[str, Any]
    timestamp: Optional[float] = None

    def __post_init__(self):
        """Set timestamp if not provided."""
        if self.timestamp is None:
            self.timestamp = time.time()


# Type alias for event listeners
EventListener = Callable[[GameEvent], None]


class EventBus:
    """Event bus for managing game events and listeners.

    Listener failures are logged and do not interrupt the game.
    """

    def __init__(self, logger: Optional[logging.Logger] = None, max_history: int = 1000):
        """Initialize the event bus.

        Args:
            logger: Optional logger for debugging events
            max_history: Number of events kept in history
        """
        self._listeners: Dict[EventType, List[EventListener]] = {}
        self._logger = logger or logging.getLogger(__name__)
        self._event_history: List[GameEvent] = []
        self._max_history = max_history

    def subscribe(self, event_type: EventType, listener: EventListener) -> None:
        """Subscribe a listener to an event type."""
        self._listeners.setdefault(event_type, []).append(listener)
        self._logger.debug(f"Subscribed listener to {event_type.value}")

    def unsubscribe(self, event_type: EventType, listener: EventListener) -> bool:
        """Unsubscribe a listener from an event type.

        Returns:
            True if the listener was found and removed, False otherwise
        """
        try:
            self._listeners.get(event_type, []).remove(listener)
        except ValueError:
            return False
        self._logger.debug(f"Unsubscribed listener from {event_type.value}")
        return True

    def emit(self, event: GameEvent) -> None:
        """Emit an event to all subscribed listeners."""
        self._event_history.append(event)
        if len(self._event_history) > self._max_history:
            self._event_history.pop(0)

        listeners = self._listeners.get(event.event_type, [])
        self._logger.debug(f"Emitting {event.event_type.value} to {len(listeners)} listeners")

        for listener in listeners:
            try:
                listener(event)
            except Exception as e:
                self._logger.error(f"Error in event listener: {e}")

    def emit_simple(self, event_type: EventType, **data) -> None:
        """Emit a simple event with data as keyword arguments."""
        self.emit(GameEvent(event_type=event_type, data=data))

    def get_event_history(self, event_type: Optional[EventType] = None,
                          limit: Optional[int] = None) -> List[GameEvent]:
        """Get event history, optionally filtered by type and limited."""
        events = self._event_history
        if event_type is not None:
            events = [e for e in events if e.event_type == event_type]
        if limit is not None:
            events = events[-limit:]
        return list(events)

    def clear_history(self) -> None:
        self._event_history.clear()
