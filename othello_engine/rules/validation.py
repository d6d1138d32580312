from ..board import Board, check_bounds, is_in_board
from ..constants import DIRECTIONS, EMPTY
from ..types import Move, Player
from .base import ValidationRule


def captured_cells(board: Board, row: int, col: int, player: Player) -> frozenset[Move]:
    """Return every opponent piece a ``player`` piece at (row, col) would flip.

    Walks outward in each of the 8 directions collecting opponent pieces. A run
    is captured only when it ends on one of ``player``'s own pieces; running into
    an empty cell or off the board discards it. The target cell is assumed to be
    empty.
    """
    check_bounds(row, col)
    opponent = -player
    captured: set[Move] = set()

    for dx, dy in DIRECTIONS:
        nx, ny = row + dx, col + dy
        candidates: list[Move] = []
        while is_in_board(nx, ny):
            cell = board[nx, ny]
            if cell == opponent:
                candidates.append((nx, ny))
            elif cell == player:
                captured.update(candidates)
                break
            else:
                break
            nx, ny = nx + dx, ny + dy

    return frozenset(captured)


class AvailableRule(ValidationRule):
    """Checks if the move is made on an empty square."""

    @staticmethod
    def is_valid(board: Board, row: int, col: int, player: Player) -> bool:
        """Check if the square at (row, col) is empty."""
        check_bounds(row, col)
        return board[row, col] == EMPTY


class StandardFlankingValidationRule(ValidationRule):
    """Checks if the move captures at least one opponent piece in any direction."""

    @staticmethod
    def is_valid(board: Board, row: int, col: int, player: Player) -> bool:
        """Check if the move flanks at least one opponent piece."""
        return len(captured_cells(board, row, col, player)) > 0
