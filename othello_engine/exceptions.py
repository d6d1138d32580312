"""Exceptions raised by the Othello engine.

Only precondition violations are raised. An illegal move request is an
ordinary outcome and is returned as a ``Rejected`` value by the engine.
"""


class OthelloError(Exception):
    """Base class for engine errors."""


class OutOfRangeError(OthelloError, IndexError):
    """A coordinate outside the board was passed to a board operation."""

    def __init__(self, row: int, col: int) -> None:
        super().__init__(f"Coordinate ({row}, {col}) is outside the board.")
        self.row = row
        self.col = col


class InvalidNamesError(OthelloError, ValueError):
    """A game was started without both player names."""

    def __init__(self, missing: list[str]) -> None:
        super().__init__(f"Player name(s) missing for: {', '.join(missing)}.")
        self.missing = missing


class GamePhaseError(OthelloError, RuntimeError):
    """An operation was attempted in a phase that does not allow it."""
