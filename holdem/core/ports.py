"""
Ports between the core engine and its external collaborators.

The engine blocks on an ActionProvider whenever a human seat has to act and
writes every human-readable line to an OutputSink. The console implementations
live in holdem.ui.cli; the scripted/buffered versions here let tests drive a
whole game headlessly.
"""

from collections import deque
from typing import Deque, Iterable, List, Protocol, runtime_checkable


@runtime_checkable
class ActionProvider(Protocol):
    """Synchronous request/response boundary for human decisions."""

    def read_action(self, player_name: str) -> str:
        """Return the raw action token typed by the player.

        Args:
            player_name: Name of the player whose turn it is

        Returns:
            One of Bet, Raise, Call, Check, Fold (anything else is re-prompted)
        """
        ...

    def read_amount(self, player_name: str) -> str:
        """Return the raw bet amount typed by the player."""
        ...

    def confirm(self, question: str) -> bool:
        """Ask a yes/no question."""
        ...


@runtime_checkable
class OutputSink(Protocol):
    """Receives human-readable display lines."""

    def emit(self, line: str) -> None:
        ...


class ScriptedActionProvider:
    """Action provider fed from pre-recorded answers.

    Tokens, amounts and confirmations are consumed in order from separate
    queues. Running out of scripted answers raises IndexError so a test never
    blocks.
    """

    def __init__(self, actions: Iterable[str] = (), amounts: Iterable[str] = (),
                 confirmations: Iterable[bool] = ()) -> None:
        self._actions: Deque[str] = deque(actions)
        self._amounts: Deque[str] = deque(str(a) for a in amounts)
        self._confirmations: Deque[bool] = deque(confirmations)
        self.prompts: List[str] = []

    def read_action(self, player_name: str) -> str:
        self.prompts.append(f"action:{player_name}")
        if not self._actions:
            raise IndexError(f"No scripted action left for {player_name}")
        return self._actions.popleft()

    def read_amount(self, player_name: str) -> str:
        self.prompts.append(f"amount:{player_name}")
        if not self._amounts:
            raise IndexError(f"No scripted amount left for {player_name}")
        return self._amounts.popleft()

    def confirm(self, question: str) -> bool:
        self.prompts.append(f"confirm:{question}")
        if not self._confirmations:
            return False
        return self._confirmations.popleft()


class BufferedOutput:
    """Output sink that keeps every emitted line in memory."""

    def __init__(self) -> None:
        self.lines: List[str] = []

    def emit(self, line: str) -> None:
        self.lines.append(line)

    def text(self) -> str:
        return "\n".join(self.lines)

    def clear(self) -> None:
        self.lines.clear()
