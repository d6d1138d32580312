"""Value types shared by the board, rules and engine modules."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import NamedTuple

from .constants import BLACK, WHITE

Move = tuple[int, int]


class Player(IntEnum):
    """A side in the game. The value is the cell encoding used on the board."""

    BLACK = BLACK
    WHITE = WHITE

    @property
    def opponent(self) -> Player:
        """The other player."""
        return Player(-self.value)

    @property
    def label(self) -> str:
        return self.name.lower()


class GamePhase(Enum):
    ENTRY = "entry"
    PLAYING = "playing"
    FINISHED = "finished"


class FinishReason(Enum):
    """Why a game entered the FINISHED phase."""

    BOARD_FULL = "board full"
    NO_MOVES = "no legal moves for either player"


class Outcome(Enum):
    BLACK_WINS = "black wins"
    WHITE_WINS = "white wins"
    TIE = "tie"

    @property
    def winner(self) -> Player | None:
        """The winning player, or None for a tie."""
        if self is Outcome.BLACK_WINS:
            return Player.BLACK
        if self is Outcome.WHITE_WINS:
            return Player.WHITE
        return None


class RejectReason(Enum):
    """Why a move request left the session unchanged."""

    OUT_OF_TURN = "out of turn"
    NOT_EMPTY = "cell is not empty"
    NO_CAPTURE = "move captures nothing"
    GAME_NOT_PLAYING = "game is not in progress"
    OUT_OF_RANGE = "coordinate is off the board"
    STALE_SESSION = "session has already moved on"


class Score(NamedTuple):
    black: int
    white: int

    @property
    def total(self) -> int:
        return self.black + self.white

    def of(self, player: Player) -> int:
        """Piece count for ``player``."""
        return self.black if player is Player.BLACK else self.white
