from ..board import Board, initialize_board
from .base import InitializeBoard


class ClassicInitialization(InitializeBoard):
    """Classic Othello initialization with 4 pieces in the center.

    Starting position: W[d4, e5], B[e4, d5].
    """

    @staticmethod
    def init_board() -> Board:
        """Return the classic Othello starting position."""
        return initialize_board()
