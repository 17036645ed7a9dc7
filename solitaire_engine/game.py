"""Cursor and selection state for a game of solitaire."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from solitaire_engine.board import FOUNDATION_COUNT, Board, create_board
from solitaire_engine.commands import Cycle, Direction

logger = logging.getLogger(__name__)


@dataclass
class Game:
    """A board plus the player's cursor over it.

    Attributes:
        board: The board being played
        cursor: (column, row) of the tableau cell under the cursor
        selected: Armed source cell for a tableau move, if any
        focused_foundation: Foundation that receives committed cards
        should_quit: Set once a quit command has been processed
    """

    board: Board
    cursor: tuple[int, int] = (0, 0)
    selected: tuple[int, int] | None = None
    focused_foundation: int = 0
    should_quit: bool = field(default=False)

    @classmethod
    def new(cls, seed: int | None = None) -> Game:
        return cls(board=create_board(seed=seed))

    # Navigation

    def move_cursor(self, direction: Direction) -> None:
        match direction:
            case Direction.UP:
                self.on_up()
            case Direction.DOWN:
                self.on_down()
            case Direction.LEFT:
                self.on_left()
            case Direction.RIGHT:
                self.on_right()

    def on_up(self) -> None:
        col, row = self.cursor
        if row > 0:
            self.cursor = (col, row - 1)

    def on_down(self) -> None:
        col, row = self.cursor
        if row + 1 < self.board.column_length(col):
            self.cursor = (col, row + 1)

    def on_left(self) -> None:
        col, row = self.cursor
        if col > 0:
            self.cursor = (col - 1, self._clamped_row(col - 1, row))

    def on_right(self) -> None:
        col, row = self.cursor
        if col < len(self.board.tableau) - 1:
            self.cursor = (col + 1, self._clamped_row(col + 1, row))

    def cycle_foundation(self, cycle: Cycle) -> None:
        step = 1 if cycle is Cycle.FORWARD else -1
        self.focused_foundation = (self.focused_foundation + step) % FOUNDATION_COUNT

    # Card actions

    def toggle_select(self) -> None:
        """Arm the cell under the cursor, or move the armed run onto the cursor's column.

        The selection is cleared after the second call whether or not the
        move was allowed.
        """
        if self.selected is None:
            self.selected = self.cursor
            return

        source = self.board.get_card(*self.selected)
        target = self.board.get_card(*self.cursor)

        if source is None:
            logger.debug("Nothing to move at %s", self.selected)
        elif target is None or source.can_move_over(target):
            self.board.move_card(self.selected, self.cursor)
        else:
            logger.debug("Ignored move of %s onto %s", source, target)

        self.selected = None

    def commit_to_foundation(self) -> None:
        if not self.board.add_to_foundation(self.cursor, self.focused_foundation):
            logger.debug(
                "Card at %s not accepted by foundation %d",
                self.cursor,
                self.focused_foundation,
            )
        self.clamp_cursor()

    def draw_from_deck(self) -> None:
        if self.board.deck.is_empty():
            logger.debug("Draw ignored: deck is empty")
            return
        self.board.draw_card()

    def retrieve_from_deck(self) -> None:
        """Deal the top of the draw pile onto the column under the cursor.

        An empty cell takes any card. An occupied face-up cell takes the deck
        top only if it can be stacked over the cell's card.
        """
        col, row = self.cursor
        deck = self.board.deck
        top = deck.top
        if top is None:
            logger.debug("Retrieve ignored: deck is empty")
            return

        current = self.board.get_card(col, row)
        if current is None or (current.face_up and top.can_move_over(current)):
            self.board.tableau[col].append(deck.deal())
        else:
            logger.debug("Retrieve ignored: %s cannot go over %s", top, current)

    def quit(self) -> None:
        self.should_quit = True

    # Cursor bookkeeping

    def clamp_cursor(self) -> None:
        """Pull the cursor row back inside its column."""
        col, row = self.cursor
        self.cursor = (col, self._clamped_row(col, row))

    def _clamped_row(self, col: int, row: int) -> int:
        length = self.board.column_length(col)
        if length <= row:
            return max(length - 1, 0)
        return row
