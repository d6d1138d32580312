from ..board import Board, with_move
from ..types import Move, Player
from .base import UpdateRule
from .validation import captured_cells


class StandardFlankingUpdateRule(UpdateRule):
    """Standard Othello update rule that flips flanked opponent pieces."""

    @staticmethod
    def update(board: Board, row: int, col: int, player: Player) -> tuple[Board, frozenset[Move]]:
        """Place piece and flip all flanked opponent pieces to the mover's color."""
        flipped = captured_cells(board, row, col, player)
        return with_move(board, row, col, player, flipped), flipped
