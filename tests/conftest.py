"""
Pytest configuration and shared fixtures for pokerround tests.
"""

import random

import pytest
from pokerround.core.card import Card, Deck, Rank, Suit
from pokerround.core.player import Participant
from pokerround.core.game import PokerRound, create_round


@pytest.fixture
def rng():
    """Seeded random source for reproducible shuffles."""
    return random.Random(1234)


@pytest.fixture
def deck(rng):
    """Create a fresh shuffled deck."""
    d = Deck(rng=rng)
    d.shuffle()
    return d


@pytest.fixture
def unshuffled_deck():
    """Create a fresh deck in canonical order."""
    return Deck()


@pytest.fixture
def sample_participant():
    """Create a sample participant with 1000 chips."""
    return Participant(name="You", chips=1000, seat=0)


@pytest.fixture
def holdem_round(rng) -> PokerRound:
    """Hold'em table with 2 opponents, not started."""
    return create_round("Holdem", 2, rng=rng)


@pytest.fixture
def started_round(holdem_round) -> PokerRound:
    """Hold'em table with 2 opponents after start_round()."""
    holdem_round.start_round()
    return holdem_round


@pytest.fixture
def river_round(started_round) -> PokerRound:
    """Started round advanced to the river."""
    started_round.advance_street("flop")
    started_round.advance_street("turn")
    started_round.advance_street("river")
    return started_round


@pytest.fixture
def wheel_pool():
    """Wheel straight (A-2-3-4-5) with two blanks."""
    return [
        Card(Rank.ACE, Suit.HEARTS),
        Card(Rank.TWO, Suit.HEARTS),
        Card(Rank.THREE, Suit.DIAMONDS),
        Card(Rank.FOUR, Suit.CLUBS),
        Card(Rank.FIVE, Suit.SPADES),
        Card(Rank.NINE, Suit.SPADES),
        Card(Rank.KING, Suit.DIAMONDS),
    ]
