"""Command-line interface for solitaire."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import TYPE_CHECKING, TextIO

from dotenv import load_dotenv

from solitaire_engine.commands import (
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
from solitaire_engine.executor import execute_command
from solitaire_engine.game import Game
from solitaire_engine.render import format_board

if TYPE_CHECKING:
    from solitaire_engine.commands import Command

KEY_BINDINGS: dict[str, Command] = {
    "k": MoveCursor(Direction.UP),
    "up": MoveCursor(Direction.UP),
    "j": MoveCursor(Direction.DOWN),
    "down": MoveCursor(Direction.DOWN),
    "h": MoveCursor(Direction.LEFT),
    "left": MoveCursor(Direction.LEFT),
    "l": MoveCursor(Direction.RIGHT),
    "right": MoveCursor(Direction.RIGHT),
    "tab": CycleFoundation(Cycle.FORWARD),
    "backtab": CycleFoundation(Cycle.BACKWARD),
    "space": ToggleSelect(),
    "s": ToggleSelect(),
    "enter": CommitToFoundation(),
    "e": CommitToFoundation(),
    "w": DrawFromDeck(),
    "r": RetrieveFromDeck(),
    "q": Quit(),
}

HELP_TEXT = """Keys (one per line, several may be separated by spaces):
  h/j/k/l or left/down/up/right .. move cursor
  space or s ..................... select / place
  enter or e ..................... move card to focused foundation
  tab / backtab .................. change focused foundation
  w .............................. draw a card
  r .............................. retrieve the drawn card onto the cursor column
  q .............................. quit"""


def parse_keys(line: str) -> list[Command]:
    """Translate a line of key names into commands.

    Unknown keys are skipped.
    """
    commands = []
    for key in line.split():
        command = KEY_BINDINGS.get(key.lower())
        if command is not None:
            commands.append(command)
    return commands


def play_interactive(
    seed: int | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> Game:
    """Play a game reading key commands line by line."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    game = Game.new(seed=seed)

    print("\nWelcome to Solitaire!", file=stdout)
    print(HELP_TEXT, file=stdout)

    while not game.should_quit:
        print("", file=stdout)
        print(format_board(game.board, game), file=stdout)
        print("\n> ", end="", file=stdout)
        stdout.flush()

        line = stdin.readline()
        if not line:
            break

        commands = parse_keys(line)
        if not commands and line.strip():
            print("Unknown key. Type q to quit.", file=stdout)
            continue

        for command in commands:
            execute_command(game, command)
            if game.should_quit:
                break

    print("Goodbye!", file=stdout)
    return game


def show_deal(seed: int | None = None) -> None:
    """Print a freshly dealt board."""
    game = Game.new(seed=seed)
    print(format_board(game.board))


def _default_seed() -> int | None:
    value = os.environ.get("SOLITAIRE_SEED")
    return int(value) if value else None


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the CLI."""
    load_dotenv()

    parser = argparse.ArgumentParser(description="Klondike solitaire")
    parser.add_argument(
        "--log-level",
        default=os.environ.get("SOLITAIRE_LOG_LEVEL", "WARNING"),
        help="Logging level (DEBUG, INFO, WARNING, ...)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    play_parser = subparsers.add_parser("play", help="Play a game in the terminal")
    play_parser.add_argument("--seed", type=int, default=_default_seed(), help="Random seed")

    deal_parser = subparsers.add_parser("deal", help="Print a new deal")
    deal_parser.add_argument("--seed", type=int, default=_default_seed(), help="Random seed")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "play":
        play_interactive(seed=args.seed)
    elif args.command == "deal":
        show_deal(seed=args.seed)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
