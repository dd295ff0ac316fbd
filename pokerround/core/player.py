"""
Participant class for a poker round.

Manages per-seat state including:
- Chip stack
- Hole cards
- Amount committed in the current street
- Active flag (cleared on fold)
"""

from __future__ import annotations
from typing import List, Dict, Any
from dataclasses import dataclass, field

from pokerround.core.card import Card
from pokerround.core.errors import InsufficientChipsError


@dataclass
class Participant:
    """
    A seat in the round.

    Attributes:
        name: Display name ("You", "Opponent 1", ...)
        chips: Current chip count
        seat: Seat position at the table (0-indexed, 0 is the primary seat)
        hole_cards: The participant's private cards
        active: False once the participant has folded
        committed: Amount bet in the current street
    """
    name: str
    chips: int
    seat: int = 0
    hole_cards: List[Card] = field(default_factory=list)
    active: bool = True
    committed: int = 0

    def reset_for_round(self) -> None:
        """Reset participant state for a new round."""
        self.active = True
        self.committed = 0
        self.hole_cards = []

    def reset_for_street(self) -> None:
        """Reset the committed amount for a new street (flop, turn, river)."""
        self.committed = 0

    def receive_card(self, card: Card) -> None:
        """Add a hole card. Duplicates are the deck's concern."""
        self.hole_cards.append(card)

    def commit_bet(self, amount: int) -> int:
        """
        Move chips from the stack into this street's commitment.

        The pot is not touched here; the caller adds the returned amount.

        Args:
            amount: Chips to commit

        Returns:
            The committed amount

        Raises:
            ValueError: If amount is negative or not an integer
            InsufficientChipsError: If amount exceeds the stack
        """
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise ValueError(f"Bet amount must be a whole number of chips, got {amount!r}")
        if amount < 0:
            raise ValueError(f"Bet amount cannot be negative: {amount}")
        if amount > self.chips:
            raise InsufficientChipsError(
                f"{self.name} does not have enough chips to bet {amount} (has {self.chips})"
            )

        self.chips -= amount
        self.committed += amount
        return amount

    def fold(self) -> None:
        """Fold for the rest of the round."""
        self.active = False
        self.hole_cards = []
        self.committed = 0

    def to_dict(self, hide_cards: bool = True) -> Dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Args:
            hide_cards: If True, don't include hole cards
        """
        result = {
            "name": self.name,
            "seat": self.seat,
            "chips": self.chips,
            "committed": self.committed,
            "active": self.active,
        }

        if not hide_cards:
            result["cards"] = [card.to_dict() for card in self.hole_cards]

        return result

    def to_public_dict(self) -> Dict[str, Any]:
        """Get public information (visible to all seats)."""
        return self.to_dict(hide_cards=True)

    def to_private_dict(self) -> Dict[str, Any]:
        """Get private information (only for this seat)."""
        return self.to_dict(hide_cards=False)

    def __repr__(self) -> str:
        return (
            f"Participant({self.name}, chips={self.chips}, "
            f"committed={self.committed}, active={self.active})"
        )

    def __str__(self) -> str:
        hand = ", ".join(card.long_str for card in self.hole_cards)
        return f"{self.name}: {self.chips} chips, Bet: {self.committed}, Hand: [{hand}]"
