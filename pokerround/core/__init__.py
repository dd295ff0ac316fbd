"""
pokerround Core - Pure Python Poker Round Logic

This module contains all round logic without any network dependencies.
"""

from pokerround.core.card import Card, Deck, Rank, Suit
from pokerround.core.player import Participant
from pokerround.core.hand import HandCategory, HandValue, evaluate_hand
from pokerround.core.rules import Action, ActionType, Street, Variant
from pokerround.core.game import PokerRound, ShowdownResult, create_round
from pokerround.core.errors import PokerError

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "Participant",
    "HandCategory",
    "HandValue",
    "evaluate_hand",
    "Action",
    "ActionType",
    "Street",
    "Variant",
    "PokerRound",
    "ShowdownResult",
    "create_round",
    "PokerError",
]
