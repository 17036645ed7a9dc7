"""Command execution for solitaire."""

from __future__ import annotations

import logging

from solitaire_engine.commands import (
    Command,
    CommitToFoundation,
    CycleFoundation,
    DrawFromDeck,
    MoveCursor,
    Quit,
    RetrieveFromDeck,
    ToggleSelect,
)
from solitaire_engine.errors import UnknownCommandError
from solitaire_engine.game import Game

logger = logging.getLogger(__name__)


def execute_command(game: Game, command: Command) -> Game:
    """Apply a command to the game in place.

    Illegal moves are ignored and leave the game unchanged. The cursor is
    re-clamped afterwards since any command may have shrunk a column.

    Args:
        game: Game to update.
        command: Command to apply.

    Returns:
        The same game, for chaining.

    Raises:
        UnknownCommandError: If the command type is not recognised.
    """
    logger.debug("Executing %s", command)

    match command:
        case MoveCursor(direction=direction):
            game.move_cursor(direction)
        case CycleFoundation(cycle=cycle):
            game.cycle_foundation(cycle)
        case ToggleSelect():
            game.toggle_select()
        case CommitToFoundation():
            game.commit_to_foundation()
        case DrawFromDeck():
            game.draw_from_deck()
        case RetrieveFromDeck():
            game.retrieve_from_deck()
        case Quit():
            game.quit()
        case _:
            raise UnknownCommandError(f"Unknown command type: {type(command)}")

    game.clamp_cursor()
    return game


def execute_commands(game: Game, commands: list[Command]) -> Game:
    """Apply commands in order, stopping early after a quit."""
    for command in commands:
        execute_command(game, command)
        if game.should_quit:
            break
    return game
