"""
Pydantic schemas for API request/response validation.
"""

from typing import List, Optional
from pydantic import BaseModel, Field

from pokerround.core.rules import (
    DEFAULT_BIG_BLIND, DEFAULT_SMALL_BLIND, DEFAULT_STARTING_CHIPS,
    MIN_OPPONENTS, MAX_OPPONENTS,
)


# ============= Request Schemas =============

class CreateRoundRequest(BaseModel):
    """Request to create a table and start its first round."""
    variant: str = Field(default="Holdem", description="Holdem or Omaha")
    opponent_count: int = Field(ge=MIN_OPPONENTS, le=MAX_OPPONENTS, default=1)
    small_blind: int = Field(ge=0, default=DEFAULT_SMALL_BLIND)
    big_blind: int = Field(ge=0, default=DEFAULT_BIG_BLIND)
    starting_chips: int = Field(ge=0, default=DEFAULT_STARTING_CHIPS)


class ActionRequest(BaseModel):
    """Request to apply a participant action."""
    seat: int = Field(default=0, ge=0)
    action: str = Field(..., description="Action: fold, call, raise")
    amount: Optional[int] = Field(default=None, ge=0, description="Total street bet for raise")


class StreetRequest(BaseModel):
    """Request to advance to a street (the next one if omitted)."""
    street: Optional[str] = Field(default=None, description="flop, turn or river")


# ============= Response Schemas =============

class CardSchema(BaseModel):
    """Card representation."""
    rank: str
    suit: str
    text: str
    color: str


class ParticipantPublicSchema(BaseModel):
    """Public participant information (visible to all)."""
    name: str
    seat: int
    chips: int
    committed: int
    active: bool


class PublicInfoSchema(BaseModel):
    """Public round information."""
    variant: str
    round_number: int
    street: str
    pot: int
    table_bet: int
    small_blind: int
    big_blind: int
    community_cards: List[CardSchema]
    participants: List[ParticipantPublicSchema]
    deck_remaining: int


class PrivateInfoSchema(BaseModel):
    """Private information for the requested seat."""
    seat: Optional[int] = None
    hand: List[CardSchema] = []
    to_call: int = 0


class RoundStateSchema(BaseModel):
    """Complete round state."""
    round_id: str
    public_info: PublicInfoSchema
    private_info: PrivateInfoSchema


class ActionResultSchema(BaseModel):
    """Result of an action."""
    success: bool = True
    action: str
    amount: int
    pot: int
    table_bet: int


class HandSchema(BaseModel):
    """Evaluated hand."""
    category: str
    name: str
    tiebreak: str
    description: str


class ShowdownSchema(BaseModel):
    """Showdown result."""
    winner: Optional[str] = None
    seat: Optional[int] = None
    hand: Optional[HandSchema] = None
    description: str
    pot: int


class ErrorSchema(BaseModel):
    """Error response."""
    error: str
    detail: Optional[str] = None
