"""Klondike solitaire engine."""

from solitaire_engine.cards import Card, Rank, Suit
from solitaire_engine.deck import Deck, create_deck
from solitaire_engine.board import Board, BoardSnapshot, create_board
from solitaire_engine.commands import (
    Command,
    CommitToFoundation,
    Cycle,
    CycleFoundation,
    Direction,
    DrawFromDeck,
    MoveCursor,
    Quit,
    RetrieveFromDeck,
    ToggleSelect,
)
from solitaire_engine.errors import EmptyDeckError, SolitaireError, UnknownCommandError
from solitaire_engine.executor import execute_command
from solitaire_engine.game import Game

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "Deck",
    "create_deck",
    "Board",
    "BoardSnapshot",
    "create_board",
    "Command",
    "CommitToFoundation",
    "Cycle",
    "CycleFoundation",
    "Direction",
    "DrawFromDeck",
    "MoveCursor",
    "Quit",
    "RetrieveFromDeck",
    "ToggleSelect",
    "EmptyDeckError",
    "SolitaireError",
    "UnknownCommandError",
    "execute_command",
    "Game",
]
