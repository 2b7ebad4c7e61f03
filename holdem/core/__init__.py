"""
Core game logic for the Texas Hold'em simulator.

This package contains the betting-round state machine and hand-resolution
engine: cards, players, turn order, pot accounting, scoring, showdown,
elimination and the ranking / interaction structures.
"""

import random
from typing import Optional, Sequence

from .enums import (
    Suit, Rank, ActionType, Street, ControlType, TiePolicy,
    get_all_suits, get_all_ranks, get_betting_streets,
)
from .exceptions import (
    PokerGameError, ExhaustedDeckError, InvalidInputError,
    PersistenceUnavailableError, GameConfigError,
)
from .cards import Card, Deck, DECK_SIZE, format_cards
from .scorer import score_hand, count_ranks, PAIR_SCORE, TRIPLE_SCORE, QUAD_SCORE
from .player import Player
from .turn_queue import TurnQueue
from .round_state import RoundState, ActionRecord, MAX_COMMUNITY_CARDS
from .ports import ActionProvider, OutputSink, ScriptedActionProvider, BufferedOutput
from .human_input import HumanActionReader, parse_action_token, parse_bet_amount, HUMAN_MENU
from .betting import Action, BettingEngine, BettingPhase, BettingRound, BettingRules
from .showdown import ShowdownResolver, ShowdownResult
from .side_pot import SidePot, SidePotLedger
from .interaction_graph import InteractionGraph, Interaction
from .ranking import RankingTree, RankingNode, sorted_snapshot
from .roster import Roster, EliminationResult, merge_sort_by_chips
from .events import EventBus, EventType, GameEvent


# Convenience functions for common operations
def new_deck(shuffle: bool = True, rng: Optional[random.Random] = None) -> Deck:
    """Create a new deck of cards.

    Args:
        shuffle: Whether to shuffle the deck after creation.
        rng: Optional random generator for reproducible shuffles.

    Returns:
        A new deck of cards.
    """
    deck = Deck(rng=rng)
    if shuffle:
        deck.shuffle()
    return deck


def ranking_snapshot(players: Sequence[Player]) -> RankingTree:
    """Build a fresh ranking tree from the players in roster order."""
    return RankingTree.build(players)


__all__ = [
    # Enums
    'Suit', 'Rank', 'ActionType', 'Street', 'ControlType', 'TiePolicy',

    # Exceptions
    'PokerGameError', 'ExhaustedDeckError', 'InvalidInputError',
    'PersistenceUnavailableError', 'GameConfigError',

    # Core classes
    'Card', 'Deck', 'Player', 'TurnQueue', 'RoundState', 'ActionRecord', 'Roster',

    # Scoring and resolution
    'score_hand', 'count_ranks', 'ShowdownResolver', 'ShowdownResult',

    # Betting
    'Action', 'BettingEngine', 'BettingPhase', 'BettingRound', 'BettingRules',
    'HumanActionReader', 'parse_action_token', 'parse_bet_amount', 'HUMAN_MENU',

    # Ports
    'ActionProvider', 'OutputSink', 'ScriptedActionProvider', 'BufferedOutput',

    # Observation structures
    'SidePot', 'SidePotLedger', 'InteractionGraph', 'Interaction',
    'RankingTree', 'RankingNode', 'sorted_snapshot', 'EliminationResult', 'merge_sort_by_chips',

    # Events
    'EventBus', 'EventType', 'GameEvent',

    # Constants
    'DECK_SIZE', 'MAX_COMMUNITY_CARDS', 'PAIR_SCORE', 'TRIPLE_SCORE', 'QUAD_SCORE',

    # Convenience functions
    'new_deck', 'ranking_snapshot', 'format_cards',
    'get_all_suits', 'get_all_ranks', 'get_betting_streets',
]
