"""Game API routes."""

from __future__ import annotations

import os

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from solitaire_engine.commands import command_from_name
from web.api.session_manager import SessionClosedError, session_manager

router = APIRouter(tags=["games"])


# Request/Response models
class CreateGameRequest(BaseModel):
    """Request to create a new game."""

    seed: int | None = Field(None, description="Random seed for reproducibility")


class CommandRequest(BaseModel):
    """Request to apply a command."""

    command: str = Field(
        ...,
        description=(
            "move_cursor, cycle_foundation, toggle_select, commit_to_foundation, "
            "draw_from_deck, retrieve_from_deck or quit"
        ),
    )
    direction: str | None = Field(
        None,
        description="up/down/left/right for move_cursor, forward/backward for cycle_foundation",
    )


class GameStateResponse(BaseModel):
    """Game state response."""

    game_id: str
    tableau: list[list[dict]]
    foundation_tops: list[dict | None]
    deck_count: int
    deck_top: dict | None
    cursor: list[int]
    selected: list[int] | None
    focused_foundation: int
    should_quit: bool


def _default_seed() -> int | None:
    value = os.environ.get("SOLITAIRE_SEED")
    return int(value) if value else None


# REST Endpoints


@router.post("/games", response_model=GameStateResponse)
async def create_game(request: CreateGameRequest):
    """Create a new game session."""
    seed = request.seed if request.seed is not None else _default_seed()
    session = session_manager.create_session(seed=seed)
    return session.to_client_state()


@router.get("/games", response_model=list[dict])
async def list_games():
    """List all active game sessions."""
    return session_manager.list_sessions()


@router.get("/games/{game_id}", response_model=GameStateResponse)
async def get_game(game_id: str):
    """Get current state of a game."""
    session = session_manager.get_session(game_id)
    if not session:
        raise HTTPException(status_code=404, detail="Game not found")

    return session.to_client_state()


@router.get("/games/{game_id}/history")
async def get_history(game_id: str):
    """Get the commands applied to a game so far."""
    session = session_manager.get_session(game_id)
    if not session:
        raise HTTPException(status_code=404, detail="Game not found")

    return {"commands": session.history()}


@router.post("/games/{game_id}/commands", response_model=GameStateResponse)
def apply_command(game_id: str, request: CommandRequest):
    """Apply a command to a game."""
    session = session_manager.get_session(game_id)
    if not session:
        raise HTTPException(status_code=404, detail="Game not found")

    try:
        command = command_from_name(request.command, request.direction)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        return session.apply(command)
    except SessionClosedError:
        raise HTTPException(status_code=400, detail="Game has been quit")


@router.delete("/games/{game_id}")
async def delete_game(game_id: str):
    """Delete a game session."""
    if session_manager.delete_session(game_id):
        return {"deleted": True}
    raise HTTPException(status_code=404, detail="Game not found")
