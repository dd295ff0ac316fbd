"""
Poker Round Engine - State Machine Implementation.

This module implements the core round logic for Hold'em and Omaha.
It handles:
- Round state management (streets: preflop, flop, turn, river, showdown)
- Participant actions (fold, call, raise)
- Blind posting from seats 0 and 1
- Community card dealing per street
- Showdown winner determination

Every operation either applies fully or raises before changing any state.
"""

from __future__ import annotations
from typing import List, Dict, Optional, Any, Union
from dataclasses import dataclass
import logging
import random

from pokerround.core.card import Card, Deck
from pokerround.core.player import Participant
from pokerround.core.hand import HandValue, evaluate_hand, get_hand_description
from pokerround.core.errors import (
    EmptyDeckError,
    InactiveParticipantError,
    InsufficientChipsError,
    InvalidActionError,
    InvalidOpponentCountError,
    InvalidRaiseError,
    InvalidStreetTransitionError,
    PrematureShowdownError,
    RoundNotStartedError,
    UnknownSeatError,
)
from pokerround.core.rules import (
    Action, ActionType, BlindStructure, Street, Variant,
    next_street, is_dealing_street,
    DEFAULT_BIG_BLIND, DEFAULT_SMALL_BLIND, DEFAULT_STARTING_CHIPS,
    MIN_OPPONENTS, MAX_OPPONENTS, PRIMARY_NAME, OPPONENT_NAME,
    SMALL_BLIND_SEAT, BIG_BLIND_SEAT, STREET_CARDS,
)


logger = logging.getLogger(__name__)


@dataclass
class ShowdownResult:
    """Outcome of a showdown."""
    winner: Optional[Participant]
    hand: Optional[HandValue]
    description: str

    @property
    def has_winner(self) -> bool:
        return self.winner is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "winner": self.winner.name if self.winner else None,
            "seat": self.winner.seat if self.winner else None,
            "hand": self.hand.to_dict() if self.hand else None,
            "description": self.description,
        }


class PokerRound:
    """
    Poker round engine implementing a state machine.

    Usage:
        poker_round = create_round("Holdem", opponent_count=2)
        poker_round.start_round()

        poker_round.apply_action(0, Action.call())
        poker_round.apply_action(1, Action.raise_to(60))
        ...
        poker_round.advance_street(Street.FLOP)
        ...
        result = poker_round.determine_winner()
    """

    def __init__(
        self,
        variant: Union[str, Variant] = Variant.HOLDEM,
        opponent_count: int = 1,
        small_blind: int = DEFAULT_SMALL_BLIND,
        big_blind: int = DEFAULT_BIG_BLIND,
        starting_chips: int = DEFAULT_STARTING_CHIPS,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize a new table.

        Args:
            variant: "Holdem" or "Omaha"
            opponent_count: Number of opponents next to the primary seat (1-7)
            small_blind: Small blind amount, posted by seat 0
            big_blind: Big blind amount, posted by seat 1
            starting_chips: Starting stack for each participant
            rng: Random source for the deck shuffle
        """
        self.variant = Variant.parse(variant)

        if isinstance(opponent_count, bool) or not isinstance(opponent_count, int):
            raise InvalidOpponentCountError(f"Opponent count must be an integer, got {opponent_count!r}")
        if not MIN_OPPONENTS <= opponent_count <= MAX_OPPONENTS:
            raise InvalidOpponentCountError(
                f"Number of opponents must be between {MIN_OPPONENTS} and {MAX_OPPONENTS}, "
                f"got {opponent_count}"
            )

        self.blinds = BlindStructure(small_blind=small_blind, big_blind=big_blind)
        self.starting_chips = starting_chips

        names = [PRIMARY_NAME] + [
            OPPONENT_NAME.format(index=i) for i in range(1, opponent_count + 1)
        ]
        self.participants: List[Participant] = [
            Participant(name=name, chips=starting_chips, seat=seat)
            for seat, name in enumerate(names)
        ]

        # Round state
        self.deck = Deck(rng=rng)
        self.community_cards: List[Card] = []
        self.street = Street.PREFLOP
        self.pot = 0
        self.table_bet = 0
        self.round_number = 0
        self.result: Optional[ShowdownResult] = None

        # Event log for the current round
        self.history: List[Dict[str, Any]] = []

    @property
    def small_blind(self) -> int:
        return self.blinds.small_blind

    @property
    def big_blind(self) -> int:
        return self.blinds.big_blind

    @property
    def num_participants(self) -> int:
        """Number of seats at the table."""
        return len(self.participants)

    @property
    def primary(self) -> Participant:
        """The primary ("You") seat."""
        return self.participants[0]

    @property
    def active_participants(self) -> List[Participant]:
        """Participants who have not folded."""
        return [p for p in self.participants if p.active]

    @property
    def total_chips(self) -> int:
        """Chips in all stacks plus the pot."""
        return sum(p.chips for p in self.participants) + self.pot

    def get_participant(self, seat_index: int) -> Participant:
        """Get the participant at ``seat_index``."""
        if isinstance(seat_index, bool) or not 0 <= seat_index < self.num_participants:
            raise UnknownSeatError(f"No seat {seat_index} (table has {self.num_participants})")
        return self.participants[seat_index]

    def start_round(self) -> None:
        """
        Start a new round.

        Shuffles a fresh deck, deals hole cards to every seat and posts the
        blinds from seats 0 and 1.

        Raises:
            InsufficientChipsError: If a blind poster cannot cover the blind
        """
        sb_player = self.participants[SMALL_BLIND_SEAT]
        bb_player = self.participants[BIG_BLIND_SEAT]
        for player, blind in ((sb_player, self.small_blind), (bb_player, self.big_blind)):
            if player.chips < blind:
                logger.debug(f"Cannot start round: {player.name} short for blind {blind}")
                raise InsufficientChipsError(
                    f"{player.name} does not have enough chips to post the {blind} blind"
                )

        self.round_number += 1
        logger.info(f"Starting round #{self.round_number} ({self.variant.value})")

        # Reset for new round
        self.deck.reset()
        self.deck.shuffle()
        self.pot = 0
        self.community_cards = []
        self.street = Street.PREFLOP
        self.table_bet = self.big_blind
        self.result = None
        self.history = []

        for player in self.participants:
            player.reset_for_round()

        self._log_action("ROUND_START", {
            "round_number": self.round_number,
            "variant": self.variant.value,
            "participants": self.num_participants,
        })

        self._deal_hole_cards()
        self._post_blinds()

    def _deal_hole_cards(self) -> None:
        """Deal hole cards to every seat, one participant at a time."""
        for player in self.participants:
            for _ in range(self.variant.hole_cards):
                player.receive_card(self.deck.draw())

    def _post_blinds(self) -> None:
        """Post small and big blinds."""
        sb_player = self.participants[SMALL_BLIND_SEAT]
        bb_player = self.participants[BIG_BLIND_SEAT]

        self.pot += sb_player.commit_bet(self.small_blind)
        self.pot += bb_player.commit_bet(self.big_blind)

        logger.debug(f"Blinds posted: SB={self.small_blind} BB={self.big_blind}")
        self._log_action("BLINDS", {
            "small_blind": self.small_blind,
            "big_blind": self.big_blind,
        })

    def apply_action(
        self,
        seat_index: int,
        action: Union[Action, ActionType, str],
        amount: Optional[int] = None,
    ) -> int:
        """
        Process a participant action.

        Args:
            seat_index: Seat of the acting participant
            action: Action, ActionType or tag ("fold", "call", "raise")
            amount: Total street bet for RAISE (ignored otherwise)

        Returns:
            Chips moved into the pot by this action

        Raises:
            UnknownSeatError: If the seat does not exist
            InactiveParticipantError: If the participant has folded
            InvalidActionError: If the action tag is unknown
            InvalidRaiseError: If a raise is missing or not above the table bet
            InsufficientChipsError: If the participant cannot cover the action
            RoundNotStartedError: If no round has been started yet
        """
        self._require_started()
        player = self.get_participant(seat_index)
        if not player.active:
            raise InactiveParticipantError(f"{player.name} is not active")

        if not isinstance(action, Action):
            action = Action.parse(action, amount)

        added = self._execute_action(player, action)

        logger.debug(f"{player.name}: {action} (pot {self.pot})")
        self._log_action("ACTION", {
            "seat": player.seat,
            "player": player.name,
            "move": action.type.value,
            "amount": added,
            "table_bet": self.table_bet,
        })
        return added

    def _execute_action(self, player: Participant, action: Action) -> int:
        """Execute the specified action for the participant."""
        if action.type == ActionType.FOLD:
            player.fold()
            return 0

        elif action.type == ActionType.CALL:
            call_amount = self.table_bet - player.committed
            if call_amount <= 0:
                return 0
            added = player.commit_bet(call_amount)
            self.pot += added
            return added

        elif action.type == ActionType.RAISE:
            if action.amount is None:
                raise InvalidRaiseError("Raise requires an amount")
            if action.amount <= self.table_bet:
                raise InvalidRaiseError(
                    f"Raise amount must be higher than current bet ({self.table_bet})"
                )
            added = player.commit_bet(action.amount - player.committed)
            self.pot += added
            self.table_bet = action.amount
            return added

        raise InvalidActionError(f"Unknown action: {action.type}")

    def advance_street(self, target: Union[Street, str, None] = None) -> List[Card]:
        """
        Move to the next street and deal its community cards.

        Args:
            target: Street to move to; must follow the current one.
                    None means the next street.

        Returns:
            The community cards dealt

        Raises:
            InvalidStreetTransitionError: If target is not the next dealing street
            EmptyDeckError: If the deck cannot supply the cards
            RoundNotStartedError: If no round has been started yet
        """
        self._require_started()
        expected = next_street(self.street)
        target = expected if target is None else Street.parse(target)

        if target != expected or not is_dealing_street(target):
            raise InvalidStreetTransitionError(
                f"Cannot move from {self.street.value} to {target.value if target else None}"
            )

        count = STREET_CARDS[target]
        if self.deck.remaining_count() < count:
            raise EmptyDeckError(
                f"Cannot deal the {target.value}: only {self.deck.remaining_count()} cards remain"
            )

        dealt = self.deck.deal(count)
        self.community_cards.extend(dealt)
        self.street = target

        self.table_bet = 0
        for player in self.participants:
            player.reset_for_street()

        logger.debug(f"Dealt {target.value}: {' '.join(str(c) for c in dealt)}")
        self._log_action("STREET", {"cards": [str(c) for c in dealt]})
        return dealt

    def _require_started(self) -> None:
        if self.round_number == 0:
            raise RoundNotStartedError("No round in progress, call start_round() first")

    def evaluate(self, participant: Participant) -> HandValue:
        """Evaluate a participant's hole cards with the community cards."""
        return evaluate_hand(participant.hole_cards + self.community_cards)

    def determine_winner(self) -> ShowdownResult:
        """
        Determine the showdown winner among active participants.

        Ties go to the earliest seat holding the best hand. The pot stays
        where it is; paying it out is the caller's decision.

        Raises:
            PrematureShowdownError: If the river has not been dealt
            RoundNotStartedError: If no round has been started yet
        """
        self._require_started()
        if self.street == Street.SHOWDOWN and self.result is not None:
            return self.result
        if self.street != Street.RIVER:
            raise PrematureShowdownError(
                f"Cannot determine a winner during the {self.street.value}"
            )

        best_player: Optional[Participant] = None
        best_hand: Optional[HandValue] = None

        for player in self.active_participants:
            hand = self.evaluate(player)
            if best_hand is None or hand > best_hand:
                best_player = player
                best_hand = hand

        if best_player is None:
            result = ShowdownResult(winner=None, hand=None, description="No active participants")
        else:
            result = ShowdownResult(
                winner=best_player,
                hand=best_hand,
                description=get_hand_description(best_hand),
            )

        self.result = result
        self.street = Street.SHOWDOWN

        logger.info(
            f"Round #{self.round_number} showdown: "
            f"{best_player.name if best_player else 'no winner'} ({result.description})"
        )
        self._log_action("SHOWDOWN", result.to_dict())
        return result

    def get_state(self, for_seat: Optional[int] = 0) -> Dict[str, Any]:
        """
        Get the current round state.

        Args:
            for_seat: If specified, include hole cards for this seat

        Returns:
            Round state dictionary
        """
        public_info = {
            "variant": self.variant.value,
            "round_number": self.round_number,
            "street": self.street.value,
            "pot": self.pot,
            "table_bet": self.table_bet,
            "small_blind": self.small_blind,
            "big_blind": self.big_blind,
            "community_cards": [c.to_dict() for c in self.community_cards],
            "participants": [p.to_public_dict() for p in self.participants],
            "deck_remaining": self.deck.remaining_count(),
        }

        private_info: Dict[str, Any] = {}
        if for_seat is not None:
            player = self.get_participant(for_seat)
            private_info = {
                "seat": player.seat,
                "hand": [c.to_dict() for c in player.hole_cards],
                "to_call": max(0, self.table_bet - player.committed),
            }

        return {
            "public_info": public_info,
            "private_info": private_info,
        }

    def _log_action(self, action: str, details: Dict[str, Any]) -> None:
        """Log an event to the round history."""
        self.history.append({
            "action": action,
            "street": self.street.value,
            **details
        })

    def __str__(self) -> str:
        lines = [
            f"Game Type: {self.variant.value}",
            f"Pot: {self.pot} chips",
            f"Current Bet: {self.table_bet} chips",
            f"Community Cards: [{', '.join(c.long_str for c in self.community_cards)}]",
            f"Current Round: {self.street.value}",
            "Players:",
        ]
        lines.extend(f"  {p}" for p in self.participants)
        return "\n".join(lines)


def create_round(
    variant: Union[str, Variant],
    opponent_count: int,
    **options: Any,
) -> PokerRound:
    """
    Create a table for ``variant`` with ``opponent_count`` opponents.

    Raises:
        InvalidVariantError: If the variant is not Holdem or Omaha
        InvalidOpponentCountError: If opponent_count is outside 1-7
    """
    return PokerRound(variant=variant, opponent_count=opponent_count, **options)
