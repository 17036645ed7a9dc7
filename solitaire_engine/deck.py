"""Draw pile for Klondike solitaire."""

from __future__ import annotations

import random
from typing import Iterator

from solitaire_engine.cards import Card, Rank, Suit
from solitaire_engine.errors import EmptyDeckError


def create_deck() -> list[Card]:
    """Create a standard 52-card deck, face-down, in (suit, rank) order."""
    return [Card(rank, suit) for suit in Suit for rank in Rank]


class Deck:
    """Ordered draw pile; the last card of the sequence is the top.

    Cards leave the deck only through :meth:`deal`. :meth:`rotate_cards`
    cycles the pile so that a new card becomes the visible top, which is how
    the waste pile is simulated.
    """

    def __init__(self, cards: list[Card] | None = None) -> None:
        self._cards: list[Card] = create_deck() if cards is None else list(cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __repr__(self) -> str:
        return f"Deck({len(self._cards)} cards)"

    def is_empty(self) -> bool:
        return len(self._cards) == 0

    @property
    def cards(self) -> tuple[Card, ...]:
        """Read-only view of the pile, bottom first."""
        return tuple(self._cards)

    @property
    def top(self) -> Card | None:
        """The card that would be dealt next, if any."""
        return self._cards[-1] if self._cards else None

    def last(self) -> Card | None:
        return self.top

    def shuffle(self, seed: int | None = None) -> None:
        """Shuffle the pile in place."""
        rng = random.Random(seed)
        rng.shuffle(self._cards)

    def deal(self) -> Card | None:
        """Remove and return the top card, or None if the deck is empty."""
        if not self._cards:
            return None
        return self._cards.pop()

    def rotate_cards(self) -> None:
        """Move the top card to the bottom and turn the new top face-up.

        Raises:
            EmptyDeckError: If the deck has no cards.
        """
        if not self._cards:
            raise EmptyDeckError("Cannot rotate an empty deck")
        self._cards.insert(0, self._cards.pop())
        self._cards[-1].set_visible()
