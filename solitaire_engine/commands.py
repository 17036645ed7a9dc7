"""Command types accepted by the solitaire engine."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, IntEnum, auto


class CommandType(IntEnum):
    """Type of command."""

    MOVE_CURSOR = auto()
    CYCLE_FOUNDATION = auto()
    TOGGLE_SELECT = auto()
    COMMIT_TO_FOUNDATION = auto()
    DRAW_FROM_DECK = auto()
    RETRIEVE_FROM_DECK = auto()
    QUIT = auto()


class Direction(str, Enum):
    """Cursor movement direction."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class Cycle(str, Enum):
    """Foundation focus cycling direction."""

    FORWARD = "forward"
    BACKWARD = "backward"


@dataclass(frozen=True, slots=True)
class Command(ABC):
    """Base class for all commands."""

    @property
    @abstractmethod
    def command_type(self) -> CommandType:
        """The type of this command."""
        ...

    @abstractmethod
    def __str__(self) -> str:
        """Human-readable command description."""
        ...


@dataclass(frozen=True, slots=True)
class MoveCursor(Command):
    """Move the tableau cursor one step."""

    direction: Direction

    @property
    def command_type(self) -> CommandType:
        return CommandType.MOVE_CURSOR

    def __str__(self) -> str:
        return f"Move cursor {self.direction.value}"


@dataclass(frozen=True, slots=True)
class CycleFoundation(Command):
    """Change which foundation is focused."""

    cycle: Cycle = Cycle.FORWARD

    @property
    def command_type(self) -> CommandType:
        return CommandType.CYCLE_FOUNDATION

    def __str__(self) -> str:
        return f"Cycle foundation {self.cycle.value}"


@dataclass(frozen=True, slots=True)
class ToggleSelect(Command):
    """Arm a source card, or move the armed cards to the cursor."""

    @property
    def command_type(self) -> CommandType:
        return CommandType.TOGGLE_SELECT

    def __str__(self) -> str:
        return "Toggle selection"


@dataclass(frozen=True, slots=True)
class CommitToFoundation(Command):
    """Send the card under the cursor to the focused foundation."""

    @property
    def command_type(self) -> CommandType:
        return CommandType.COMMIT_TO_FOUNDATION

    def __str__(self) -> str:
        return "Commit to foundation"


@dataclass(frozen=True, slots=True)
class DrawFromDeck(Command):
    """Cycle the draw pile."""

    @property
    def command_type(self) -> CommandType:
        return CommandType.DRAW_FROM_DECK

    def __str__(self) -> str:
        return "Draw"


@dataclass(frozen=True, slots=True)
class RetrieveFromDeck(Command):
    """Place the top of the draw pile on the cursor's column."""

    @property
    def command_type(self) -> CommandType:
        return CommandType.RETRIEVE_FROM_DECK

    def __str__(self) -> str:
        return "Retrieve from deck"


@dataclass(frozen=True, slots=True)
class Quit(Command):
    """Stop the game loop."""

    @property
    def command_type(self) -> CommandType:
        return CommandType.QUIT

    def __str__(self) -> str:
        return "Quit"


def command_from_name(name: str, direction: str | None = None) -> Command:
    """Build a command from its snake_case name.

    Args:
        name: Command name, e.g. ``"move_cursor"`` or ``"draw_from_deck"``.
        direction: Direction for ``move_cursor`` (up/down/left/right) or
            ``cycle_foundation`` (forward/backward, defaults to forward).

    Raises:
        ValueError: If the name or direction is not recognised.
    """
    match name.strip().lower():
        case "move_cursor":
            if direction is None:
                raise ValueError("move_cursor requires a direction")
            return MoveCursor(Direction(direction.lower()))
        case "cycle_foundation":
            return CycleFoundation(Cycle((direction or "forward").lower()))
        case "toggle_select":
            return ToggleSelect()
        case "commit_to_foundation":
            return CommitToFoundation()
        case "draw_from_deck":
            return DrawFromDeck()
        case "retrieve_from_deck":
            return RetrieveFromDeck()
        case "quit":
            return Quit()
        case _:
            raise ValueError(f"Unknown command: {name}")
