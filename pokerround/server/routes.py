"""
HTTP API Routes for pokerround.

Each route resolves its round from the registry on ``app.state`` and calls
the core synchronously. Core errors are turned into 400 responses by the
handler registered in ``app.py``.
"""

from typing import Dict, Any, Optional
from fastapi import APIRouter, Depends, HTTPException, Request

from pokerround.core.errors import PokerError
from pokerround.core.game import PokerRound
from pokerround.server.registry import RoundRegistry
from pokerround.server.schemas import (
    CreateRoundRequest, ActionRequest, StreetRequest,
    RoundStateSchema, ActionResultSchema, ShowdownSchema, ErrorSchema,
)

router = APIRouter()

# Core errors rendered by the handler in app.py
ERROR_RESPONSES = {400: {"model": ErrorSchema}}


def get_registry(request: Request) -> RoundRegistry:
    """Get the registry owned by the running application."""
    return request.app.state.registry


def get_round(round_id: str, registry: RoundRegistry = Depends(get_registry)) -> PokerRound:
    """Get the round addressed by the path."""
    poker_round = registry.get(round_id)
    if poker_round is None:
        raise HTTPException(status_code=404, detail=f"Round {round_id} not found")
    return poker_round


def _state(round_id: str, poker_round: PokerRound, seat: Optional[int] = 0) -> Dict[str, Any]:
    return {"round_id": round_id, **poker_round.get_state(for_seat=seat)}


@router.post("/rounds", response_model=RoundStateSchema, status_code=201, responses=ERROR_RESPONSES)
async def create_round(
    req: CreateRoundRequest,
    registry: RoundRegistry = Depends(get_registry),
) -> Dict[str, Any]:
    """
    Create a table and start its first round.

    Deals hole cards and posts blinds.
    """
    round_id = registry.create(
        req.variant,
        req.opponent_count,
        small_blind=req.small_blind,
        big_blind=req.big_blind,
        starting_chips=req.starting_chips,
    )
    poker_round = registry.get(round_id)
    try:
        poker_round.start_round()
    except PokerError:
        registry.remove(round_id)
        raise
    return _state(round_id, poker_round)


@router.get("/rounds/{round_id}", response_model=RoundStateSchema, responses=ERROR_RESPONSES)
async def get_round_state(
    round_id: str,
    seat: Optional[int] = 0,
    poker_round: PokerRound = Depends(get_round),
) -> Dict[str, Any]:
    """
    Get the current round state.

    Hole cards are included for ``seat`` only (the primary seat by default).
    """
    return _state(round_id, poker_round, seat)


@router.post("/rounds/{round_id}/start", response_model=RoundStateSchema, responses=ERROR_RESPONSES)
async def start_round(
    round_id: str,
    poker_round: PokerRound = Depends(get_round),
) -> Dict[str, Any]:
    """Start a new round at the same table."""
    poker_round.start_round()
    return _state(round_id, poker_round)


@router.post("/rounds/{round_id}/actions", response_model=ActionResultSchema, responses=ERROR_RESPONSES)
async def take_action(
    req: ActionRequest,
    poker_round: PokerRound = Depends(get_round),
) -> Dict[str, Any]:
    """Apply an action for a seat."""
    added = poker_round.apply_action(req.seat, req.action, req.amount)
    return {
        "success": True,
        "action": req.action.strip().lower(),
        "amount": added,
        "pot": poker_round.pot,
        "table_bet": poker_round.table_bet,
    }


@router.post("/rounds/{round_id}/street", response_model=RoundStateSchema, responses=ERROR_RESPONSES)
async def advance_street(
    round_id: str,
    req: Optional[StreetRequest] = None,
    poker_round: PokerRound = Depends(get_round),
) -> Dict[str, Any]:
    """Advance to the next street and deal its community cards."""
    poker_round.advance_street(req.street if req else None)
    return _state(round_id, poker_round)


@router.post("/rounds/{round_id}/showdown", response_model=ShowdownSchema, responses=ERROR_RESPONSES)
async def showdown(poker_round: PokerRound = Depends(get_round)) -> Dict[str, Any]:
    """Determine the winner after the river."""
    result = poker_round.determine_winner()
    return {**result.to_dict(), "pot": poker_round.pot}


@router.delete("/rounds/{round_id}")
async def delete_round(
    round_id: str,
    registry: RoundRegistry = Depends(get_registry),
) -> Dict[str, Any]:
    """Drop a round."""
    if not registry.remove(round_id):
        raise HTTPException(status_code=404, detail=f"Round {round_id} not found")
    return {"success": True, "message": f"Round {round_id} removed"}
