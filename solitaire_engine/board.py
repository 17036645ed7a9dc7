"""Board model: tableau columns, foundation piles and the draw pile."""

from __future__ import annotations

from dataclasses import dataclass, field

from solitaire_engine.cards import Card, Rank
from solitaire_engine.deck import Deck

TABLEAU_COLUMNS = 7
FOUNDATION_COUNT = 4


@dataclass(frozen=True, slots=True)
class BoardSnapshot:
    """Read-only view of a board for rendering.

    Attributes:
        tableau: Each tableau column, bottom card first
        foundation_tops: Top card of each foundation, or None if empty
        deck_count: Cards left in the draw pile
        deck_top: Card on top of the draw pile, if any
    """

    tableau: tuple[tuple[Card, ...], ...]
    foundation_tops: tuple[Card | None, ...]
    deck_count: int
    deck_top: Card | None


def can_place_on_foundation(card: Card, foundation: list[Card]) -> bool:
    """Whether ``card`` may be added to ``foundation``.

    An empty foundation only takes an Ace. Otherwise the card must match the
    suit of the top card and rank exactly one above it.
    """
    if not foundation:
        return card.rank is Rank.ACE
    top = foundation[-1]
    return card.suit == top.suit and card.rank.ordinal == top.rank.ordinal + 1


@dataclass
class Board:
    """Mutable game board.

    Attributes:
        tableau: The seven cascading columns, bottom card first
        foundations: The four foundation piles, Ace first
        deck: Remaining draw pile
    """

    tableau: list[list[Card]]
    foundations: list[list[Card]] = field(
        default_factory=lambda: [[] for _ in range(FOUNDATION_COUNT)]
    )
    deck: Deck = field(default_factory=lambda: Deck([]))

    def get_card(self, col: int, row: int) -> Card | None:
        """Return the tableau card at (col, row), or None if there is none."""
        if not 0 <= col < len(self.tableau):
            return None
        column = self.tableau[col]
        if not 0 <= row < len(column):
            return None
        return column[row]

    def column_length(self, col: int) -> int:
        if not 0 <= col < len(self.tableau):
            return 0
        return len(self.tableau[col])

    def move_card(self, from_pos: tuple[int, int], to_pos: tuple[int, int]) -> None:
        """Move the cards from ``from_pos`` to the end of its column onto ``to_pos``'s column.

        The run keeps its order. The new top card of the source column, if
        any, is turned face-up. Legality is the caller's responsibility.
        """
        from_col, from_row = from_pos
        to_col, _ = to_pos

        source = self.tableau[from_col]
        run = source[from_row:]
        del source[from_row:]
        self.tableau[to_col].extend(run)

        self._expose_top(from_col)

    def add_to_foundation(self, cursor: tuple[int, int], foundation_index: int) -> bool:
        """Move the card at ``cursor`` onto a foundation if the rules allow it.

        Returns:
            True if the card was moved, False if the state is unchanged.
        """
        col, row = cursor
        card = self.get_card(col, row)
        if card is None:
            return False

        foundation = self.foundations[foundation_index]
        if not can_place_on_foundation(card, foundation):
            return False

        del self.tableau[col][row]
        foundation.append(card)
        self._expose_top(col)
        return True

    # Foundations are the "objective" piles.
    add_to_objective = add_to_foundation

    def draw_card(self) -> None:
        """Cycle the draw pile to expose a new top card.

        Raises:
            EmptyDeckError: If the draw pile is empty.
        """
        self.deck.rotate_cards()

    def snapshot(self) -> BoardSnapshot:
        return BoardSnapshot(
            tableau=tuple(tuple(column) for column in self.tableau),
            foundation_tops=tuple(pile[-1] if pile else None for pile in self.foundations),
            deck_count=len(self.deck),
            deck_top=self.deck.top,
        )

    def all_cards(self) -> list[Card]:
        """Every card on the board, wherever it currently lies."""
        cards = list(self.deck)
        for column in self.tableau:
            cards.extend(column)
        for pile in self.foundations:
            cards.extend(pile)
        return cards

    def _expose_top(self, col: int) -> None:
        column = self.tableau[col]
        if column:
            column[-1].set_visible()


def create_board(deck: Deck | None = None, seed: int | None = None) -> Board:
    """Deal a new game.

    Args:
        deck: Optional pre-ordered deck. If None, creates and shuffles a new deck.
        seed: Random seed for shuffling (only used if deck is None).

    Returns:
        Board with column i holding i + 1 cards, only the last one face-up.
    """
    if deck is None:
        deck = Deck()
        deck.shuffle(seed)

    tableau: list[list[Card]] = [[] for _ in range(TABLEAU_COLUMNS)]
    for col in range(TABLEAU_COLUMNS):
        for row in range(col + 1):
            card = deck.deal()
            if card is None:
                break
            if row == col:
                card.set_visible()
            tableau[col].append(card)

    return Board(tableau=tableau, deck=deck)
