"""Exceptions raised by the hand evaluation core."""


class PokerError(ValueError):
    """Base class for all evaluation errors."""
    pass


class ParseError(PokerError):
    """Raised when a card token cannot be parsed."""
    pass


class InvalidHandError(PokerError):
    """Raised when a hand is not exactly five distinct cards."""
    pass


class EmptyInputError(PokerError):
    """Raised when a showdown is requested with no hands."""
    pass
