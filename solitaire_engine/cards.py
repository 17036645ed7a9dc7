"""Card, Suit, and Rank models for Klondike solitaire."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class Suit(IntEnum):
    """Card suits in canonical deck order."""

    SPADES = 0
    HEARTS = 1
    CLUBS = 2
    DIAMONDS = 3

    def __str__(self) -> str:
        return self.symbol

    @property
    def symbol(self) -> str:
        return {
            Suit.SPADES: "♠",
            Suit.HEARTS: "♥",
            Suit.CLUBS: "♣",
            Suit.DIAMONDS: "♦",
        }[self]

    @property
    def is_red(self) -> bool:
        return self in (Suit.HEARTS, Suit.DIAMONDS)


class Rank(IntEnum):
    """Card ranks (Ace through King)."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def __str__(self) -> str:
        return self.symbol

    @property
    def ordinal(self) -> int:
        """Position used for adjacency checks (Ace=1 .. King=13)."""
        return _RANK_ORDINALS[self]

    @property
    def symbol(self) -> str:
        if self is Rank.ACE:
            return "A"
        elif self.ordinal <= 10:
            return str(self.ordinal)
        else:
            return self.name[0]


_RANK_ORDINALS: dict[Rank, int] = {
    Rank.ACE: 1,
    Rank.TWO: 2,
    Rank.THREE: 3,
    Rank.FOUR: 4,
    Rank.FIVE: 5,
    Rank.SIX: 6,
    Rank.SEVEN: 7,
    Rank.EIGHT: 8,
    Rank.NINE: 9,
    Rank.TEN: 10,
    Rank.JACK: 11,
    Rank.QUEEN: 12,
    Rank.KING: 13,
}


@dataclass(slots=True)
class Card:
    """A playing card.

    Identity is the (rank, suit) pair; ``face_up`` is the only state that
    changes during a game and does not take part in equality.
    """

    rank: Rank
    suit: Suit
    face_up: bool = field(default=False, compare=False)

    @property
    def key(self) -> tuple[Suit, Rank]:
        return (self.suit, self.rank)

    @property
    def is_red(self) -> bool:
        return self.suit.is_red

    def set_visible(self) -> None:
        """Turn the card face-up."""
        self.face_up = True

    def can_move_over(self, target: Card) -> bool:
        """Whether this card may be stacked on ``target`` in the tableau.

        Both cards must be face-up, of different colours, and this card must
        rank exactly one below the target.
        """
        if not self.face_up or not target.face_up:
            return False
        if self.is_red == target.is_red:
            return False
        return self.rank.ordinal == target.rank.ordinal - 1

    def __repr__(self) -> str:
        state = "up" if self.face_up else "down"
        return f"Card({self.rank.name}, {self.suit.name}, {state})"

    def __str__(self) -> str:
        return f"{self.rank.symbol}{self.suit.symbol}"
