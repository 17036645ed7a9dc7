"""Plain-text rendering of cards and boards."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from solitaire_engine.board import Board
    from solitaire_engine.cards import Card
    from solitaire_engine.game import Game

FACE_DOWN = "** *"
CELL_WIDTH = 8
EMPTY_CELL = " " * CELL_WIDTH


def card_label(card: Card) -> str:
    """Rank and suit glyph for a face-up card, a placeholder otherwise."""
    if not card.face_up:
        return FACE_DOWN
    return f"{card.rank.symbol}{card.suit.symbol}"


def format_card(card: Card | None) -> str:
    """Fixed-width cell for a card, e.g. ``[ 10 ♥ ]``."""
    if card is None:
        return "[      ]"
    if not card.face_up:
        return f"[ {FACE_DOWN} ]"
    return f"[{card.rank.symbol:>3} {card.suit.symbol} ]"


def format_board(board: Board, game: Game | None = None) -> str:
    """Format a board for display.

    When a game is given, the focused foundation is marked with ``^`` under
    it, the cursor cell is wrapped in ``>`` ``<`` and the selected cell in
    ``*``.
    """
    snapshot = board.snapshot()
    lines = []

    deck_top = format_card(snapshot.deck_top) if snapshot.deck_top else "(empty)"
    lines.append(f"Deck: {snapshot.deck_count} left | Top: {deck_top}")

    lines.append(" ".join(format_card(top) for top in snapshot.foundation_tops))
    if game is not None:
        markers = [
            "^".center(CELL_WIDTH) if i == game.focused_foundation else EMPTY_CELL
            for i in range(len(snapshot.foundation_tops))
        ]
        lines.append(" ".join(markers).rstrip())
    lines.append("")

    cursor = game.cursor if game is not None else None
    selected = game.selected if game is not None else None

    height = max((len(column) for column in snapshot.tableau), default=0)
    # An empty column still shows the cursor on its first row.
    if cursor is not None:
        height = max(height, 1)

    for row in range(height):
        cells = []
        for col, column in enumerate(snapshot.tableau):
            card = column[row] if row < len(column) else None
            if card is None and (col, row) != cursor:
                cells.append(EMPTY_CELL)
                continue
            cell = format_card(card)
            if (col, row) == selected:
                cell = f"*{cell}*"
            elif (col, row) == cursor:
                cell = f">{cell}<"
            else:
                cell = f" {cell} "
            cells.append(cell)
        lines.append(" ".join(_pad(cell) for cell in cells).rstrip())

    return "\n".join(lines)


def _pad(cell: str) -> str:
    return cell.ljust(CELL_WIDTH + 2)
