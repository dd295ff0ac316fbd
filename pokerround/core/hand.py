"""
Hand Evaluation for a poker round.

This module evaluates a pool of cards (hole cards plus community cards) and
returns a hand category with a single tiebreak rank. Only five categories are
ranked; full houses, quads and straight flushes fall into the first category
below that matches.

Hand Rankings (best to worst):
1. Flush: 5+ cards of one suit, tiebreak = highest card of that suit
2. Straight: 5 consecutive ranks, tiebreak = top of the straight
3. Three of a Kind: 3+ cards of one rank
4. Pair: 2+ cards of one rank
5. High Card: tiebreak = highest card

Note: Ace can be low in A-2-3-4-5 straight (wheel), which ranks Five high.
"""

from __future__ import annotations
from typing import Iterable, List, NamedTuple, Optional
from enum import IntEnum
from collections import Counter

from pokerround.core.card import Card, Rank, Suit, RANK_LABELS


class HandCategory(IntEnum):
    """Hand categories, higher value = stronger hand."""
    FLUSH = 5
    STRAIGHT = 4
    THREE_OF_A_KIND = 3
    PAIR = 2
    HIGH_CARD = 1


# Category names for display
HAND_CATEGORY_NAMES = {
    HandCategory.FLUSH: "Flush",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.THREE_OF_A_KIND: "Three of a Kind",
    HandCategory.PAIR: "Pair",
    HandCategory.HIGH_CARD: "High Card",
}

WHEEL_RANKS = frozenset({Rank.ACE, Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE})
STRAIGHT_LENGTH = 5
FLUSH_LENGTH = 5


class HandValue(NamedTuple):
    """
    Result of evaluating a pool.

    Tuples compare by category first, then tiebreak rank, so
    ``max(values)`` picks the stronger hand.
    """
    category: HandCategory
    tiebreak: Rank

    @property
    def name(self) -> str:
        return HAND_CATEGORY_NAMES[self.category]

    @property
    def tiebreak_label(self) -> str:
        """Tiebreak rank as a face value: '2'..'10', 'Jack'..'Ace'."""
        return RANK_LABELS[self.tiebreak]

    def to_dict(self) -> dict:
        return {
            "category": self.category.name,
            "name": self.name,
            "tiebreak": self.tiebreak_label,
            "description": get_hand_description(self),
        }


def evaluate_hand(cards: Iterable[Card]) -> HandValue:
    """
    Evaluate a pool of cards.

    The pool is any number of cards (normally 7 for Hold'em at showdown);
    categories are tried from strongest to weakest and the first match wins.

    Args:
        cards: Hole cards plus community cards

    Returns:
        HandValue(category, tiebreak)

    Raises:
        ValueError: If the pool is empty
    """
    cards = list(cards)
    if not cards:
        raise ValueError("Cannot evaluate an empty pool")

    flush_high = _find_flush(cards)
    if flush_high is not None:
        return HandValue(HandCategory.FLUSH, flush_high)

    rank_counts = Counter(c.rank for c in cards)

    straight_high = _find_straight(rank_counts.keys())
    if straight_high is not None:
        return HandValue(HandCategory.STRAIGHT, straight_high)

    trips = _first_rank_with_count(rank_counts, 3)
    if trips is not None:
        return HandValue(HandCategory.THREE_OF_A_KIND, trips)

    pair = _first_rank_with_count(rank_counts, 2)
    if pair is not None:
        return HandValue(HandCategory.PAIR, pair)

    return HandValue(HandCategory.HIGH_CARD, max(rank_counts))


def _find_flush(cards: List[Card]) -> Optional[Rank]:
    """
    Find a flush among the cards.

    Suits are checked in enumeration order and the first suit with enough
    cards is used, even if a later suit holds a higher flush.

    Returns:
        Highest rank of the flush suit, or None
    """
    suit_counts = Counter(c.suit for c in cards)
    for suit in Suit:
        if suit_counts[suit] >= FLUSH_LENGTH:
            return max(c.rank for c in cards if c.suit == suit)
    return None


def _find_straight(ranks: Iterable[Rank]) -> Optional[Rank]:
    """
    Find the highest straight among the ranks.

    Every run of 5 neighbouring distinct ranks is checked; it is a straight
    when its top and bottom ranks are exactly 4 apart.

    Returns:
        Top rank of the best straight (Five for the wheel), or None
    """
    unique_ranks = sorted(set(ranks))
    best = None

    for i in range(len(unique_ranks) - STRAIGHT_LENGTH + 1):
        window = unique_ranks[i:i + STRAIGHT_LENGTH]
        if window[-1] - window[0] == STRAIGHT_LENGTH - 1 and len(set(window)) == STRAIGHT_LENGTH:
            best = window[-1]

    if best is None and WHEEL_RANKS.issubset(unique_ranks):
        best = Rank.FIVE

    return best


def _first_rank_with_count(rank_counts: Counter, count: int) -> Optional[Rank]:
    """Get the first rank, in enumeration order, seen at least ``count`` times."""
    for rank in Rank:
        if rank_counts[rank] >= count:
            return rank
    return None


def compare_hands(cards1: Iterable[Card], cards2: Iterable[Card]) -> int:
    """
    Compare two pools.

    Returns:
        1 if cards1 wins, -1 if cards2 wins, 0 if tie
    """
    value1 = evaluate_hand(cards1)
    value2 = evaluate_hand(cards2)

    if value1 > value2:
        return 1
    elif value1 < value2:
        return -1
    else:
        return 0


def get_hand_description(value: HandValue) -> str:
    """Get a human-readable description of an evaluated hand."""
    rank = _rank_name(value.tiebreak)

    if value.category == HandCategory.FLUSH:
        return f"Flush, {rank} high"
    elif value.category == HandCategory.STRAIGHT:
        if value.tiebreak == Rank.FIVE:
            return "Straight, Five high (Wheel)"
        return f"Straight, {rank} high"
    elif value.category == HandCategory.THREE_OF_A_KIND:
        return f"Three of a Kind, {_plural(rank)}"
    elif value.category == HandCategory.PAIR:
        return f"Pair of {_plural(rank)}"
    else:
        return f"High Card, {rank}"


def _plural(name: str) -> str:
    return f"{name}es" if name == "Six" else f"{name}s"


def _rank_name(rank: Rank) -> str:
    """Get the name of a rank."""
    names = {
        Rank.TWO: "Two", Rank.THREE: "Three", Rank.FOUR: "Four",
        Rank.FIVE: "Five", Rank.SIX: "Six", Rank.SEVEN: "Seven",
        Rank.EIGHT: "Eight", Rank.NINE: "Nine", Rank.TEN: "Ten",
        Rank.JACK: "Jack", Rank.QUEEN: "Queen", Rank.KING: "King",
        Rank.ACE: "Ace"
    }
    return names[rank]
