"""Single-writer holder for a live game session.

Sessions are immutable, but a presentation layer that receives moves from
several sources (threads, request handlers) still needs the read of the
current session, the move and the swap to the new session to happen as one
step. :class:`SessionStore` serializes that behind a lock.
"""

from __future__ import annotations

import logging
import threading

from .engine import Applied, GameSession, MoveOutcome, Rejected, attempt_move
from .types import Player, RejectReason

logger = logging.getLogger(__name__)


class SessionStore:
    """Holds the current session and applies moves to it one at a time."""

    def __init__(self, session: GameSession) -> None:
        self._session = session
        self._lock = threading.Lock()

    @property
    def session(self) -> GameSession:
        with self._lock:
            return self._session

    def submit(
        self,
        row: int,
        col: int,
        player: Player | None = None,
        expected: GameSession | None = None,
    ) -> MoveOutcome:
        """Attempt a move against the current session.

        If ``expected`` is given and is no longer the current session (another
        move got in first), the request is rejected with
        ``RejectReason.STALE_SESSION`` instead of being applied to a board the
        caller has not seen.
        """
        with self._lock:
            current = self._session
            if expected is not None and expected is not current:
                logger.debug("Rejected move (%s, %s) against a stale session.", row, col)
                return Rejected(session=current, reason=RejectReason.STALE_SESSION)

            outcome = attempt_move(current, row, col, player)
            if isinstance(outcome, Applied):
                self._session = outcome.session
            return outcome

    def reset(self, session: GameSession) -> None:
        """Replace the held session, e.g. to start a new game."""
        with self._lock:
            self._session = session
