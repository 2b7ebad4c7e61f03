"""
Human action input parsing for the betting engine.

Turns raw tokens from an ActionProvider into validated Actions and re-prompts
on anything invalid. Invalid input never escapes this module.
"""

import logging
from typing import Dict, Optional, Tuple

from .enums import ActionType
from .exceptions import InvalidInputError
from .ports import ActionProvider, OutputSink

logger = logging.getLogger(__name__)

HUMAN_MENU: Dict[str, ActionType] = {
    "Bet": ActionType.BET,
    "Raise": ActionType.RAISE,
    "Call": ActionType.CALL,
    "Check": ActionType.CHECK,
    "Fold": ActionType.FOLD,
}

ACTION_PROMPT = "{name}, it's your turn. Enter your action (Bet, Raise, Call, Check, Fold): "
AMOUNT_PROMPT = "Enter bet amount: "


def parse_action_token(token: str) -> ActionType:
    """Parse a case-sensitive menu token.

    Args:
        token: Raw text entered by the player

    Returns:
        The matching ActionType

    Raises:
        InvalidInputError: If the token is not one of the menu entries
    """
    action_type = HUMAN_MENU.get(token.strip() if token else "")
    if action_type is None:
        raise InvalidInputError(f"Invalid action token: {token!r}")
    return action_type


def parse_bet_amount(raw: str) -> int:
    """Parse a strictly positive integer amount.

    Raises:
        InvalidInputError: If the text is not an integer or is not positive
    """
    try:
        amount = int(str(raw).strip())
    except (TypeError, ValueError):
        raise InvalidInputError(f"Bet amount is not a number: {raw!r}") from None
    if amount <= 0:
        raise InvalidInputError(f"Bet amount must be positive: {amount}")
    return amount


class HumanActionReader:
    """Blocks on the provider until a syntactically valid action is entered."""

    def __init__(self, provider: ActionProvider, output: OutputSink) -> None:
        self._provider = provider
        self._output = output

    def read(self, player_name: str, available_chips: int) -> Tuple[ActionType, int]:
        """Read one action for a human player.

        Bet/Raise amounts above the available chips are capped to the
        available chips.

        Args:
            player_name: Name of the acting player
            available_chips: Chips the player can still wager

        Returns:
            (action_type, amount) where amount is 0 for non-wager actions
        """
        action_type = self._read_action_type(player_name)
        if action_type not in (ActionType.BET, ActionType.RAISE):
            return action_type, 0

        amount = self._read_amount(player_name)
        if amount > available_chips:
            self._output.emit("You don't have enough chips. Betting all your chips instead.")
            amount = available_chips
        return action_type, amount

    def _read_action_type(self, player_name: str) -> ActionType:
        while True:
            self._output.emit(ACTION_PROMPT.format(name=player_name))
            token = self._provider.read_action(player_name)
            try:
                return parse_action_token(token)
            except InvalidInputError as e:
                logger.debug(f"重新提示 {player_name}: {e}")
                self._output.emit("Invalid action. Please try again.")

    def _read_amount(self, player_name: str) -> int:
        self._output.emit(AMOUNT_PROMPT)
        amount: Optional[int] = None
        while amount is None:
            raw = self._provider.read_amount(player_name)
            try:
                amount = parse_bet_amount(raw)
            except InvalidInputError as e:
                logger.debug(f"重新提示 {player_name} 下注金额: {e}")
                self._output.emit("Invalid input. Please enter a valid positive bet amount: ")
        return amount
