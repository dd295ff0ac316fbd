"""
Round Rules and Constants.

This module defines the fixed rules of a simulated round:

1. Variants: Hold'em deals 2 hole cards per seat, Omaha deals 4.

2. Blinds: seat 0 always posts the small blind and seat 1 the big blind.
   There is no dealer button and no partial (all-in) blind.

3. Streets: preflop -> flop -> turn -> river -> showdown, strictly forward.
   The flop deals 3 community cards, the turn and river deal 1 each.

4. Raises: a raise names the absolute total bet for the street and must be
   strictly above the current table bet. There is no minimum raise size.
"""

from __future__ import annotations
from enum import Enum
from dataclasses import dataclass
from typing import Optional, Union

from pokerround.core.errors import (
    InvalidActionError,
    InvalidRaiseError,
    InvalidVariantError,
    InvalidStreetTransitionError,
)


class Variant(Enum):
    """Supported game variants."""
    HOLDEM = "Holdem"
    OMAHA = "Omaha"

    @classmethod
    def parse(cls, value: Union[str, "Variant"]) -> "Variant":
        """Accept a Variant or its name ("Holdem", "omaha", ...)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for variant in cls:
                if variant.value.lower() == value.strip().lower():
                    return variant
        raise InvalidVariantError(
            f"Invalid game type {value!r}, choose 'Holdem' or 'Omaha'"
        )

    @property
    def hole_cards(self) -> int:
        return HOLE_CARDS[self]


class Street(Enum):
    """Betting streets of a round, in order."""
    PREFLOP = "preflop"
    FLOP = "flop"
    TURN = "turn"
    RIVER = "river"
    SHOWDOWN = "showdown"

    @classmethod
    def parse(cls, value: Union[str, "Street"]) -> "Street":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidStreetTransitionError(f"Unknown street: {value!r}") from None


class ActionType(Enum):
    """Possible participant actions."""
    FOLD = "fold"
    CALL = "call"
    RAISE = "raise"

    @classmethod
    def parse(cls, value: Union[str, "ActionType"]) -> "ActionType":
        """Parse an action tag, case-insensitively."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidActionError(
            f"Invalid action {value!r}, choose 'call', 'raise', or 'fold'"
        )


@dataclass(frozen=True)
class Action:
    """
    A single participant action.

    ``amount`` is only meaningful for RAISE, where it is the total bet the
    participant wants to have committed this street.
    """
    type: ActionType
    amount: Optional[int] = None

    def __post_init__(self):
        if self.amount is not None and (isinstance(self.amount, bool) or not isinstance(self.amount, int)):
            raise InvalidRaiseError(f"Raise amount must be a whole number of chips, got {self.amount!r}")

    @classmethod
    def fold(cls) -> Action:
        return cls(ActionType.FOLD)

    @classmethod
    def call(cls) -> Action:
        return cls(ActionType.CALL)

    @classmethod
    def raise_to(cls, amount: int) -> Action:
        if amount is None:
            raise InvalidRaiseError("Raise requires an amount")
        return cls(ActionType.RAISE, amount)

    @classmethod
    def parse(cls, action: Union[str, ActionType, Action], amount: Optional[int] = None) -> Action:
        """Build an Action from a tag and optional amount."""
        if isinstance(action, cls):
            return action
        action_type = ActionType.parse(action)
        if action_type == ActionType.RAISE:
            return cls.raise_to(amount)
        return cls(action_type)

    def __str__(self) -> str:
        if self.type == ActionType.RAISE:
            return f"raise to {self.amount}"
        return self.type.value


@dataclass(frozen=True)
class BlindStructure:
    """Blind structure for a round."""
    small_blind: int
    big_blind: int

    def __post_init__(self):
        if self.small_blind < 0 or self.big_blind < 0:
            raise ValueError("Blinds cannot be negative")


# Default game settings
DEFAULT_SMALL_BLIND = 10
DEFAULT_BIG_BLIND = 20
DEFAULT_STARTING_CHIPS = 1000
MIN_OPPONENTS = 1
MAX_OPPONENTS = 7

PRIMARY_NAME = "You"
OPPONENT_NAME = "Opponent {index}"

# Seats that post the blinds
SMALL_BLIND_SEAT = 0
BIG_BLIND_SEAT = 1

# Cards per variant and per street
HOLE_CARDS = {
    Variant.HOLDEM: 2,
    Variant.OMAHA: 4,
}
STREET_CARDS = {
    Street.FLOP: 3,
    Street.TURN: 1,
    Street.RIVER: 1,
}

STREET_ORDER = (
    Street.PREFLOP,
    Street.FLOP,
    Street.TURN,
    Street.RIVER,
    Street.SHOWDOWN,
)


def next_street(street: Street) -> Optional[Street]:
    """
    Get the street that follows ``street``.

    Returns:
        The successor, or None after showdown
    """
    index = STREET_ORDER.index(street)
    if index + 1 < len(STREET_ORDER):
        return STREET_ORDER[index + 1]
    return None


def is_dealing_street(street: Street) -> bool:
    """Check if moving to ``street`` deals community cards."""
    return street in STREET_CARDS
