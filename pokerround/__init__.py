"""
pokerround - Hold'em / Omaha Round Simulator

A small poker round engine with:
- Pure Python round core (deck, participants, betting, showdown)
- FastAPI HTTP layer driving explicit round instances

Usage:
    from pokerround.core import create_round, Action, Street
"""

__version__ = "0.1.0"

from pokerround.core.card import Card, Deck
from pokerround.core.player import Participant
from pokerround.core.game import PokerRound, create_round
from pokerround.core.hand import HandCategory, evaluate_hand

__all__ = [
    "Card",
    "Deck",
    "Participant",
    "PokerRound",
    "create_round",
    "HandCategory",
    "evaluate_hand",
    "__version__",
]
