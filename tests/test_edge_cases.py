"""Invariants checked over whole random games."""

import numpy as np
import pytest

from othello_engine.board import is_full
from othello_engine.constants import EMPTY, NUM_CELLS
from othello_engine.engine import (
    Applied,
    GameSession,
    Rejected,
    attempt_move,
    is_legal_move,
    legal_moves,
    new_session,
)
from othello_engine.rules.validation import captured_cells
from othello_engine.types import FinishReason, GamePhase, Outcome

SEEDS = range(8)


def _random_move(session: GameSession, rng: np.random.Generator) -> tuple[int, int]:
    moves = sorted(session.legal_moves)
    return moves[rng.integers(len(moves))]


def _random_illegal_empty(
    session: GameSession, rng: np.random.Generator
) -> tuple[int, int] | None:
    empties = [
        (int(r), int(c))
        for r, c in zip(*np.nonzero(session.board == EMPTY), strict=True)
        if (int(r), int(c)) not in session.legal_moves
    ]
    if not empties:
        return None
    return empties[rng.integers(len(empties))]


@pytest.mark.parametrize("seed", SEEDS)
class TestRandomGames:
    """Play seeded random games to completion and check every step."""

    def test_move_invariants(self, seed: int) -> None:
        rng = np.random.default_rng(seed)
        session = new_session("Ada", "Grace")

        while session.phase is GamePhase.PLAYING:
            mover = session.current_player
            row, col = _random_move(session, rng)
            expected_flips = captured_cells(session.board, row, col, mover)
            before = session.score
            old_board = session.board.copy()

            outcome = attempt_move(session, row, col)
            assert isinstance(outcome, Applied)
            new = outcome.session

            # The move and its captures are applied together
            assert outcome.flipped == expected_flips
            assert len(outcome.flipped) >= 1
            after = new.score
            assert after.total == before.total + 1
            assert after.of(mover) == before.of(mover) + 1 + len(expected_flips)
            assert after.of(mover.opponent) == before.of(mover.opponent) - len(expected_flips)

            # Old board is unchanged
            assert np.array_equal(session.board, old_board)

            # No cell is ever emptied
            assert not np.any((old_board != EMPTY) & (new.board == EMPTY))

            if new.phase is GamePhase.PLAYING:
                if outcome.passed:
                    assert new.current_player is mover
                    assert legal_moves(new.board, mover.opponent) == frozenset()
                else:
                    assert new.current_player is mover.opponent
                assert new.legal_moves == legal_moves(new.board, new.current_player)
                assert len(new.legal_moves) > 0

            session = new

        assert session.outcome in set(Outcome)
        if session.finish_reason is FinishReason.BOARD_FULL:
            assert is_full(session.board)
            assert session.score.total == NUM_CELLS
        else:
            assert session.finish_reason is FinishReason.NO_MOVES
            assert not is_full(session.board)
            for player in (session.current_player, session.current_player.opponent):
                assert legal_moves(session.board, player) == frozenset()

    def test_rejections_never_change_state(self, seed: int) -> None:
        rng = np.random.default_rng(seed)
        session = new_session("Ada", "Grace")

        while session.phase is GamePhase.PLAYING:
            illegal = _random_illegal_empty(session, rng)
            if illegal is not None:
                assert not is_legal_move(session.board, *illegal, session.current_player)
                outcome = attempt_move(session, *illegal)
                assert isinstance(outcome, Rejected)
                assert outcome.session is session

            session = attempt_move(session, *_random_move(session, rng)).session

    def test_legality_matches_captures(self, seed: int) -> None:
        """is_legal_move is true exactly on empty cells with a non-empty capture set."""
        rng = np.random.default_rng(seed)
        session = new_session("Ada", "Grace")

        for _ in range(20):
            if session.phase is not GamePhase.PLAYING:
                break
            for player in (session.current_player, session.current_player.opponent):
                for r in range(8):
                    for c in range(8):
                        empty = session.board[r, c] == EMPTY
                        expected = empty and len(captured_cells(session.board, r, c, player)) > 0
                        assert is_legal_move(session.board, r, c, player) == expected
            session = attempt_move(session, *_random_move(session, rng)).session
