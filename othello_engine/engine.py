"""Game sessions: turn order, forced passes, termination and move outcomes.

A :class:`GameSession` is an immutable value. Every operation here returns a new
session (or the same one, for a rejected move) instead of changing the one it
was given, so callers decide when to swap in the new state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

import numpy as np

from .board import Board, count_pieces, is_full, is_in_board
from .constants import EMPTY, SQUARES, move2tuple
from .exceptions import GamePhaseError, InvalidNamesError
from .rules.base import InitializeBoard, UpdateRule, ValidationRule
from .rules.initialization import ClassicInitialization
from .rules.update import StandardFlankingUpdateRule
from .rules.validation import AvailableRule, StandardFlankingValidationRule
from .types import FinishReason, GamePhase, Move, Outcome, Player, RejectReason, Score

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuleSet:
    """The rules a session is played under."""

    initialization_rule: type[InitializeBoard]
    validation_rules: tuple[type[ValidationRule], ...]
    update_rule: type[UpdateRule]


CLASSIC_RULES = RuleSet(
    initialization_rule=ClassicInitialization,
    validation_rules=(AvailableRule, StandardFlankingValidationRule),
    update_rule=StandardFlankingUpdateRule,
)


def is_legal_move(
    board: Board, row: int, col: int, player: Player, rules: RuleSet = CLASSIC_RULES
) -> bool:
    """Check if ``player`` may place a piece at (row, col).

    Rules are checked in order and stop at the first failure, so the emptiness
    check guards the capture scan.
    """
    return all(rule.is_valid(board, row, col, player) for rule in rules.validation_rules)


def legal_moves(board: Board, player: Player, rules: RuleSet = CLASSIC_RULES) -> frozenset[Move]:
    """Return all squares where ``player`` may legally move."""
    return frozenset(
        move2tuple[s] for s in SQUARES if is_legal_move(board, *move2tuple[s], player, rules)
    )


def decide_outcome(score: Score) -> Outcome:
    """The result of a finished game with the given score."""
    if score.black > score.white:
        return Outcome.BLACK_WINS
    if score.white > score.black:
        return Outcome.WHITE_WINS
    return Outcome.TIE


@dataclass(frozen=True, eq=False)
class GameSession:
    """One play-through: board, player to move, phase and player names.

    ``legal_moves`` always holds the moves available to ``current_player`` on
    ``board`` and is empty outside the PLAYING phase.
    """

    board: Board
    current_player: Player = Player.BLACK
    phase: GamePhase = GamePhase.ENTRY
    black_name: str = ""
    white_name: str = ""
    legal_moves: frozenset[Move] = frozenset()
    finish_reason: FinishReason | None = None
    rules: RuleSet = field(default=CLASSIC_RULES, repr=False)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameSession):
            return NotImplemented
        return (
            np.array_equal(self.board, other.board)
            and self.current_player == other.current_player
            and self.phase == other.phase
            and self.black_name == other.black_name
            and self.white_name == other.white_name
            and self.legal_moves == other.legal_moves
            and self.finish_reason == other.finish_reason
            and self.rules == other.rules
        )

    @property
    def names(self) -> dict[Player, str]:
        return {Player.BLACK: self.black_name, Player.WHITE: self.white_name}

    def name_of(self, player: Player) -> str:
        return self.names[player]

    @property
    def score(self) -> Score:
        return count_pieces(self.board)

    @property
    def outcome(self) -> Outcome | None:
        """The game result once FINISHED, otherwise None."""
        if self.phase is not GamePhase.FINISHED:
            return None
        return decide_outcome(self.score)


@dataclass(frozen=True)
class Applied:
    """A move was accepted.

    ``passed`` lists players who had no legal move afterwards and were skipped.
    """

    session: GameSession
    move: Move
    flipped: frozenset[Move]
    passed: tuple[Player, ...] = ()

    @property
    def accepted(self) -> bool:
        return True


@dataclass(frozen=True)
class Rejected:
    """A move was refused. ``session`` is the unchanged input session."""

    session: GameSession
    reason: RejectReason

    @property
    def accepted(self) -> bool:
        return False


MoveOutcome = Applied | Rejected


@dataclass(frozen=True, eq=False)
class SessionView:
    """Read-only snapshot of a session for rendering."""

    board: Board
    current_player: Player
    score: Score
    legal_moves: frozenset[Move]
    phase: GamePhase
    names: dict[Player, str]
    outcome: Outcome | None = None
    finish_reason: FinishReason | None = None

    @property
    def winner(self) -> Player | None:
        return self.outcome.winner if self.outcome is not None else None


def entry_session(rules: RuleSet = CLASSIC_RULES) -> GameSession:
    """Return a session in the ENTRY phase, waiting for player names."""
    return GameSession(board=rules.initialization_rule.init_board(), rules=rules)


def with_name(session: GameSession, player: Player, name: str) -> GameSession:
    """Set the display name of ``player`` while the session is in ENTRY."""
    if session.phase is not GamePhase.ENTRY:
        raise GamePhaseError(
            f"Player names can only be set during entry (phase is {session.phase.value})."
        )
    if Player(player) is Player.BLACK:
        return replace(session, black_name=name)
    return replace(session, white_name=name)


def _resolve_turn(
    board: Board, player: Player, rules: RuleSet
) -> tuple[Player, frozenset[Move], tuple[Player, ...], FinishReason | None]:
    """Work out who moves next on ``board`` when it is nominally ``player``'s turn.

    Returns the player to move, their legal moves, the players that were
    forced to pass, and a finish reason if the game is over.
    """
    if is_full(board):
        return player, frozenset(), (), FinishReason.BOARD_FULL

    moves = legal_moves(board, player, rules)
    if moves:
        return player, moves, (), None

    other = player.opponent
    other_moves = legal_moves(board, other, rules)
    if other_moves:
        return other, other_moves, (player,), None

    return player, frozenset(), (), FinishReason.NO_MOVES


def _finish_or_continue(
    session: GameSession, board: Board, player: Player
) -> tuple[GameSession, tuple[Player, ...]]:
    next_player, moves, passed, finish_reason = _resolve_turn(board, player, session.rules)
    for p in passed:
        logger.debug("%s has no legal moves and passes.", p.label)

    next_session = replace(
        session,
        board=board,
        current_player=next_player,
        legal_moves=moves,
        phase=GamePhase.FINISHED if finish_reason is not None else GamePhase.PLAYING,
        finish_reason=finish_reason,
    )
    if finish_reason is not None:
        logger.info(
            "Game over (%s): %s, score %d-%d.",
            finish_reason.value,
            next_session.outcome.value,
            next_session.score.black,
            next_session.score.white,
        )
    return next_session, passed


def start_game(session: GameSession) -> GameSession:
    """Move a session from ENTRY to PLAYING with black to move.

    Raises:
        InvalidNamesError: If either player name is empty or blank.
        GamePhaseError: If the session is not in ENTRY.
    """
    if session.phase is not GamePhase.ENTRY:
        raise GamePhaseError(f"Game already started (phase is {session.phase.value}).")

    missing = [p.label for p in Player if not session.name_of(p).strip()]
    if missing:
        raise InvalidNamesError(missing)

    logger.info("Starting game: %s (black) vs %s (white).", session.black_name, session.white_name)
    next_session, _ = _finish_or_continue(session, session.board, Player.BLACK)
    return next_session


def new_session(black_name: str, white_name: str, rules: RuleSet = CLASSIC_RULES) -> GameSession:
    """Create a session for the two named players, ready to play."""
    session = entry_session(rules)
    session = with_name(session, Player.BLACK, black_name)
    session = with_name(session, Player.WHITE, white_name)
    return start_game(session)


def _reject(session: GameSession, reason: RejectReason, row: int, col: int) -> Rejected:
    logger.debug("Rejected move (%s, %s): %s.", row, col, reason.value)
    return Rejected(session=session, reason=reason)


def attempt_move(
    session: GameSession, row: int, col: int, player: Player | None = None
) -> MoveOutcome:
    """Play a piece for the player to move at (row, col).

    ``player`` is optional; when given it must be the player whose turn it is.
    Illegal requests return :class:`Rejected` carrying the untouched session.
    """
    if session.phase is not GamePhase.PLAYING:
        return _reject(session, RejectReason.GAME_NOT_PLAYING, row, col)
    if player is not None and Player(player) is not session.current_player:
        return _reject(session, RejectReason.OUT_OF_TURN, row, col)
    if not is_in_board(row, col):
        return _reject(session, RejectReason.OUT_OF_RANGE, row, col)
    if session.board[row, col] != EMPTY:
        return _reject(session, RejectReason.NOT_EMPTY, row, col)
    if (row, col) not in session.legal_moves:
        return _reject(session, RejectReason.NO_CAPTURE, row, col)

    mover = session.current_player
    board, flipped = session.rules.update_rule.update(session.board, row, col, mover)
    logger.debug("%s plays (%d, %d), flipping %d.", mover.label, row, col, len(flipped))

    next_session, passed = _finish_or_continue(session, board, mover.opponent)
    return Applied(session=next_session, move=(row, col), flipped=flipped, passed=passed)


def current_view(session: GameSession) -> SessionView:
    """Snapshot of everything a presentation layer needs to draw the game."""
    return SessionView(
        board=session.board,
        current_player=session.current_player,
        score=session.score,
        legal_moves=session.legal_moves,
        phase=session.phase,
        names=session.names,
        outcome=session.outcome,
        finish_reason=session.finish_reason,
    )
