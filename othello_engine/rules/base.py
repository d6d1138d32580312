"""Abstract base classes for Othello game rules."""

from abc import ABC, abstractmethod

from ..board import Board
from ..types import Move, Player


class InitializeBoard(ABC):
    """Abstract base class for board initialization rules."""

    @staticmethod
    @abstractmethod
    def init_board() -> Board:
        """Return the starting board."""
        pass


class ValidationRule(ABC):
    """Abstract base class for move validation rules."""

    @staticmethod
    @abstractmethod
    def is_valid(board: Board, row: int, col: int, player: Player) -> bool:
        """Check if ``player`` may place a piece at (row, col)."""
        pass


class UpdateRule(ABC):
    """Abstract base class for board update rules."""

    @staticmethod
    @abstractmethod
    def update(board: Board, row: int, col: int, player: Player) -> tuple[Board, frozenset[Move]]:
        """Return the board after ``player`` moves at (row, col), and the flipped cells."""
        pass
