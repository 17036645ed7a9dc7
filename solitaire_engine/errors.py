"""Exceptions raised by the solitaire engine."""


class SolitaireError(Exception):
    """Base class for engine errors."""

    pass


class EmptyDeckError(SolitaireError):
    """Raised when an operation needs a card from an empty deck."""

    pass


class UnknownCommandError(SolitaireError):
    """Raised when a command object is not recognised by the executor."""

    pass
