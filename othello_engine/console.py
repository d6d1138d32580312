"""Terminal front end: name entry, move prompts and result display."""

from __future__ import annotations

import logging
from collections.abc import Callable

from .board import check_bounds
from .constants import move2tuple
from .engine import (
    CLASSIC_RULES,
    Applied,
    GameSession,
    RuleSet,
    attempt_move,
    current_view,
    entry_session,
    start_game,
    with_name,
)
from .exceptions import InvalidNamesError, OutOfRangeError
from .render import format_board, format_status
from .types import GamePhase, Move, Player

logger = logging.getLogger(__name__)

QUIT_COMMANDS = {"q", "quit", "exit"}


def parse_square(text: str) -> Move:
    """Parse a square given as a name (``d3``) or as ``row,col`` (``2,3``).

    Raises:
        ValueError: If the text is neither form or names a square off the board.
    """
    cleaned = text.strip().lower()
    if cleaned in move2tuple:
        return move2tuple[cleaned]

    parts = cleaned.replace(",", " ").split()
    if len(parts) != 2:
        raise ValueError(f"Could not read a square from {text!r}; use e.g. 'd3' or '2,3'.")
    try:
        row, col = int(parts[0]), int(parts[1])
    except ValueError as e:
        raise ValueError(f"Could not read a square from {text!r}; use e.g. 'd3' or '2,3'.") from e

    try:
        check_bounds(row, col)
    except OutOfRangeError as e:
        raise ValueError(str(e)) from e
    return row, col


def enter_names(
    read: Callable[[str], str],
    black_name: str | None = None,
    white_name: str | None = None,
    rules: RuleSet = CLASSIC_RULES,
) -> GameSession:
    """Collect both player names and start the game.

    Names passed in are used as-is; missing or blank ones are prompted for
    until a non-blank name is given.
    """
    session = entry_session(rules)
    given = {Player.BLACK: black_name, Player.WHITE: white_name}
    for player in Player:
        if given[player]:
            session = with_name(session, player, given[player])

    while True:
        try:
            return start_game(session)
        except InvalidNamesError as e:
            logger.debug("Name entry incomplete: %s", e)
            for player in Player:
                if not session.name_of(player).strip():
                    name = read(f"{player.label.title()} player name: ")
                    session = with_name(session, player, name)


def play(
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
    black_name: str | None = None,
    white_name: str | None = None,
    rules: RuleSet = CLASSIC_RULES,
) -> GameSession:
    """Run a game in the terminal and return the last session.

    The game ends when it is finished, when the player types ``quit`` or when
    input runs out.
    """
    try:
        session = enter_names(read, black_name, white_name, rules)
    except EOFError:
        return entry_session(rules)

    while session.phase is GamePhase.PLAYING:
        view = current_view(session)
        write(format_board(view.board, view.legal_moves))
        write(format_status(view))

        player = session.current_player
        try:
            text = read(f"{session.name_of(player)} ({player.label}) to move: ")
        except EOFError:
            return session
        if text.strip().lower() in QUIT_COMMANDS:
            return session

        try:
            row, col = parse_square(text)
        except ValueError as e:
            write(str(e))
            continue

        outcome = attempt_move(session, row, col)
        if not isinstance(outcome, Applied):
            write(f"Invalid move: {outcome.reason.value}.")
            continue

        session = outcome.session
        for passed in outcome.passed:
            write(f"{session.name_of(passed)} has no legal moves and passes.")

    view = current_view(session)
    write(format_board(view.board))
    write(format_status(view))
    return session
