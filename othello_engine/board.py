"""Board representation and cell-level operations.

A board is an 8x8 ``numpy`` int8 array holding ``EMPTY``, ``BLACK`` or ``WHITE``.
Every board returned from this module is read-only: operations that change the
position build a fresh array, so a caller can keep a reference to an older
board for diffing or animation without it changing underneath them.
"""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np
import numpy.typing as npt

from .constants import BLACK, BOARD_DIM, EMPTY, WHITE
from .exceptions import OutOfRangeError
from .types import Move, Player, Score

Board = npt.NDArray[np.int8]

_CELL_CHARS = {BLACK: "B", WHITE: "W", EMPTY: "."}
_CHAR_CELLS = {v: k for k, v in _CELL_CHARS.items()}


def _freeze(board: Board) -> Board:
    board.flags.writeable = False
    return board


def is_in_board(row: int, col: int) -> bool:
    """Check if coordinates are within the board boundaries."""
    return 0 <= row < BOARD_DIM and 0 <= col < BOARD_DIM


def check_bounds(row: int, col: int) -> None:
    """Raise ``OutOfRangeError`` unless (row, col) is on the board."""
    if not is_in_board(row, col):
        raise OutOfRangeError(row, col)


def empty_board() -> Board:
    return _freeze(np.full((BOARD_DIM, BOARD_DIM), EMPTY, dtype=np.int8))


def initialize_board() -> Board:
    """Return the standard starting position.

    Starting position: W[d4, e5], B[e4, d5], i.e. white on (3, 3) and (4, 4),
    black on (3, 4) and (4, 3). All other squares are empty.
    """
    board = np.full((BOARD_DIM, BOARD_DIM), EMPTY, dtype=np.int8)
    mid = BOARD_DIM // 2
    board[mid - 1, mid - 1] = WHITE
    board[mid, mid] = WHITE
    board[mid - 1, mid] = BLACK
    board[mid, mid - 1] = BLACK
    return _freeze(board)


def cell_at(board: Board, row: int, col: int) -> Player | None:
    """Return the player occupying (row, col), or None if the cell is empty."""
    check_bounds(row, col)
    value = int(board[row, col])
    if value == EMPTY:
        return None
    return Player(value)


def with_move(
    board: Board, row: int, col: int, player: Player, flipped_cells: Iterable[Move]
) -> Board:
    """Return a copy of ``board`` with (row, col) and ``flipped_cells`` set to ``player``.

    Legality is not checked here; the input board is left untouched.
    """
    cells = [(row, col), *flipped_cells]
    for r, c in cells:
        check_bounds(r, c)

    new_board = board.copy()
    for r, c in cells:
        new_board[r, c] = player
    return _freeze(new_board)


def count_pieces(board: Board) -> Score:
    """Count the pieces of each color on the board."""
    return Score(black=int(np.sum(board == BLACK)), white=int(np.sum(board == WHITE)))


def is_full(board: Board) -> bool:
    return not bool(np.any(board == EMPTY))


def parse_board(rows: Iterable[str]) -> Board:
    """Build a board from text rows of ``B``, ``W`` and ``.``.

    Whitespace inside a row is ignored, so both ``"..BW...."`` and
    ``". . B W . . . ."`` are accepted.
    """
    grid = ["".join(row.split()) for row in rows]
    if len(grid) != BOARD_DIM or any(len(row) != BOARD_DIM for row in grid):
        raise ValueError(f"Board text must be {BOARD_DIM} rows of {BOARD_DIM} cells.")

    board = np.full((BOARD_DIM, BOARD_DIM), EMPTY, dtype=np.int8)
    for i, row in enumerate(grid):
        for j, char in enumerate(row):
            if char not in _CHAR_CELLS:
                raise ValueError(f"Unknown cell character {char!r} at ({i}, {j}).")
            board[i, j] = _CHAR_CELLS[char]
    return _freeze(board)


def board_to_rows(board: Board) -> list[str]:
    """Inverse of :func:`parse_board`, without separators."""
    return ["".join(_CELL_CHARS[int(v)] for v in row) for row in board]
