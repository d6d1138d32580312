"""Pytest configuration and fixtures for othello_engine tests."""

from collections.abc import Callable
from dataclasses import replace

import matplotlib
import pytest

matplotlib.use("Agg")

from othello_engine.board import Board, initialize_board, parse_board  # noqa: E402
from othello_engine.engine import (  # noqa: E402
    GameSession,
    entry_session,
    legal_moves,
    new_session,
)
from othello_engine.types import GamePhase, Player  # noqa: E402

# Black to move. After black plays c1 (0, 2) white has no legal move and must pass;
# black still has f8 (7, 5).
PASS_ROWS = [
    "BW......",
    "........",
    "........",
    "........",
    "........",
    "........",
    "........",
    "......WB",
]

# Black to move. Black's only move c1 (0, 2) removes the last white piece.
DEADLOCK_ROWS = [
    "BW......",
    "........",
    "........",
    "........",
    "........",
    "........",
    "........",
    "........",
]

# Black to move at a1 (0, 0), flipping b1; the board fills up at 32-32.
TIE_ROWS = [
    ".WBBWWWW",
    "BBBBWWWW",
    "BBBBWWWW",
    "BBBBWWWW",
    "BBBBWWWW",
    "BBBBWWWW",
    "BBBBWWWW",
    "BBBBWWWW",
]


@pytest.fixture
def board() -> Board:
    """Fresh starting board."""
    return initialize_board()


@pytest.fixture
def entry() -> GameSession:
    """Session waiting for player names."""
    return entry_session()


@pytest.fixture
def session() -> GameSession:
    """Session ready to play, black to move."""
    return new_session("Ada", "Grace")


@pytest.fixture
def session_from_rows() -> Callable[..., GameSession]:
    """Factory for a PLAYING session on an arbitrary position."""

    def _make(rows: list[str], player: Player = Player.BLACK) -> GameSession:
        board = parse_board(rows)
        return replace(
            new_session("Ada", "Grace"),
            board=board,
            current_player=player,
            phase=GamePhase.PLAYING,
            legal_moves=legal_moves(board, player),
        )

    return _make
