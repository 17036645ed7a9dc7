"""Game session management for the web API."""

from __future__ import annotations

import logging
import threading
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING

from solitaire_engine.executor import execute_command
from solitaire_engine.game import Game
from solitaire_engine.render import FACE_DOWN

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from solitaire_engine.cards import Card
    from solitaire_engine.commands import Command


class SessionClosedError(Exception):
    """Raised when a command is sent to a game that has been quit."""

    pass


@dataclass
class GameSession:
    """An active game session."""

    id: str
    game: Game
    created_at: datetime
    seed: int | None = None
    command_history: list[dict] = field(default_factory=list)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def apply(self, command: Command) -> dict:
        """Apply one command and return the resulting client state.

        Raises:
            SessionClosedError: If the game has already been quit.
        """
        with self._lock:
            if self.game.should_quit:
                raise SessionClosedError(f"Game {self.id} has been quit")
            execute_command(self.game, command)
            self.command_history.append({
                "command": command.command_type.name,
                "description": str(command),
                "cursor": list(self.game.cursor),
                "timestamp": datetime.now().isoformat(),
            })
            return self._client_state()

    def to_client_state(self) -> dict:
        """Convert game state to client-friendly format."""
        with self._lock:
            return self._client_state()

    def history(self) -> list[dict]:
        """Copy of the commands applied so far."""
        with self._lock:
            return list(self.command_history)

    def summary(self) -> dict:
        """Short description used when listing sessions."""
        with self._lock:
            return {
                "id": self.id,
                "created_at": self.created_at.isoformat(),
                "seed": self.seed,
                "commands": len(self.command_history),
                "deck_count": len(self.game.board.deck),
                "should_quit": self.game.should_quit,
            }

    def _client_state(self) -> dict:
        game = self.game
        snapshot = game.board.snapshot()
        return {
            "game_id": self.id,
            "tableau": [[_card_to_dict(c) for c in column] for column in snapshot.tableau],
            "foundation_tops": [
                _card_to_dict(c) if c is not None else None for c in snapshot.foundation_tops
            ],
            "deck_count": snapshot.deck_count,
            "deck_top": _card_to_dict(snapshot.deck_top) if snapshot.deck_top else None,
            "cursor": list(game.cursor),
            "selected": list(game.selected) if game.selected is not None else None,
            "focused_foundation": game.focused_foundation,
            "should_quit": game.should_quit,
        }


def _card_to_dict(card: Card) -> dict:
    """Convert a Card to a dictionary, hiding face-down cards."""
    if not card.face_up:
        return {"face_up": False, "display": FACE_DOWN}
    return {
        "face_up": True,
        "rank": card.rank.ordinal,
        "rank_symbol": card.rank.symbol,
        "rank_name": card.rank.name,
        "suit": card.suit.value,
        "suit_symbol": card.suit.symbol,
        "suit_name": card.suit.name,
        "is_red": card.is_red,
        "display": str(card),
    }


class GameSessionManager:
    """Manages all active game sessions."""

    def __init__(self):
        self._sessions: dict[str, GameSession] = {}

    def create_session(self, seed: int | None = None) -> GameSession:
        """Create a new game session."""
        session_id = str(uuid.uuid4())
        session = GameSession(
            id=session_id,
            game=Game.new(seed=seed),
            created_at=datetime.now(),
            seed=seed,
        )
        self._sessions[session_id] = session
        logger.info("Created game %s (seed=%s)", session_id, seed)
        return session

    def get_session(self, session_id: str) -> GameSession | None:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def delete_session(self, session_id: str) -> bool:
        """Delete a session."""
        if session_id in self._sessions:
            del self._sessions[session_id]
            logger.info("Deleted game %s", session_id)
            return True
        return False

    def list_sessions(self) -> list[dict]:
        """List all active sessions."""
        return [s.summary() for s in self._sessions.values()]


# Global session manager instance
session_manager = GameSessionManager()
