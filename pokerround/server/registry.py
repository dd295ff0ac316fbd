"""
Round registry for the HTTP layer.

Holds the rounds created through the API, keyed by id. The registry lives on
``app.state`` and is handed to each route explicitly.
"""

from __future__ import annotations
from typing import Dict, Optional, Any
import logging

from pokerround.core.game import PokerRound, create_round


logger = logging.getLogger(__name__)


class RoundRegistry:
    """
    Keeps track of open rounds.

    Usage:
        registry = RoundRegistry()
        round_id = registry.create("Holdem", opponent_count=2)
        poker_round = registry.get(round_id)
        registry.remove(round_id)
    """

    def __init__(self):
        self.rounds: Dict[str, PokerRound] = {}
        self._round_counter = 0

    def create(self, variant: str, opponent_count: int, **options: Any) -> str:
        """Create a table and return its id."""
        poker_round = create_round(variant, opponent_count, **options)

        self._round_counter += 1
        round_id = f"round-{self._round_counter}"
        self.rounds[round_id] = poker_round
        logger.info(f"Created {round_id}: {poker_round.variant.value} with {opponent_count} opponents")

        return round_id

    def get(self, round_id: str) -> Optional[PokerRound]:
        """Get a round by id."""
        return self.rounds.get(round_id)

    def remove(self, round_id: str) -> bool:
        """Drop a round. Returns False if it did not exist."""
        if self.rounds.pop(round_id, None) is None:
            return False
        logger.info(f"Removed {round_id}")
        return True

    def __len__(self) -> int:
        return len(self.rounds)

    def __contains__(self, round_id: str) -> bool:
        return round_id in self.rounds
