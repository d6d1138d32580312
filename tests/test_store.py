"""Tests for the single-writer session store."""

import threading

from othello_engine.engine import Applied, GameSession, Rejected, new_session
from othello_engine.store import SessionStore
from othello_engine.types import Player, RejectReason


class TestSessionStore:
    """Test SessionStore."""

    def test_submit_applies_move(self, session: GameSession) -> None:
        store = SessionStore(session)
        outcome = store.submit(2, 3)
        assert isinstance(outcome, Applied)
        assert store.session is outcome.session
        assert store.session.current_player is Player.WHITE

    def test_rejected_move_keeps_session(self, session: GameSession) -> None:
        store = SessionStore(session)
        outcome = store.submit(0, 0)
        assert isinstance(outcome, Rejected)
        assert outcome.reason is RejectReason.NO_CAPTURE
        assert store.session is session

    def test_stale_snapshot_rejected(self, session: GameSession) -> None:
        store = SessionStore(session)
        seen = store.session
        store.submit(2, 3, expected=seen)

        outcome = store.submit(3, 2, expected=seen)
        assert isinstance(outcome, Rejected)
        assert outcome.reason is RejectReason.STALE_SESSION
        assert outcome.session is store.session

    def test_concurrent_submissions_apply_once(self, session: GameSession) -> None:
        """Many threads racing on the same snapshot: exactly one wins."""
        store = SessionStore(session)
        seen = store.session
        results = []
        barrier = threading.Barrier(8)

        def worker() -> None:
            barrier.wait()
            results.append(store.submit(2, 3, player=Player.BLACK, expected=seen))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        applied = [r for r in results if isinstance(r, Applied)]
        assert len(applied) == 1
        rejected = [r for r in results if isinstance(r, Rejected)]
        assert all(r.reason is RejectReason.STALE_SESSION for r in rejected)
        assert store.session.score.total == 5

    def test_reset(self, session: GameSession) -> None:
        store = SessionStore(session)
        store.submit(2, 3)
        fresh = new_session("Lin", "Max")
        store.reset(fresh)
        assert store.session is fresh
