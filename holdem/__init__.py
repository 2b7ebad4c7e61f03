"""
Texas Hold'em simulator.

Betting-round state machine, pot accounting, simplified hand scoring,
showdown, elimination and the game loop that drives them, with a click CLI.
"""

__version__ = "1.0.0"
