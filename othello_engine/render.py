"""Text and matplotlib rendering of boards and session views."""

from __future__ import annotations

import logging
from collections.abc import Collection

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes

from .board import Board
from .constants import BLACK, BOARD_DIM, WHITE, letters, number
from .engine import SessionView
from .types import GamePhase, Move, Outcome

logger = logging.getLogger(__name__)

LEGAL_MARK = "*"


def format_board(board: Board, legal_moves: Collection[Move] = ()) -> str:
    """Format the board as text, marking ``legal_moves`` with ``*``.

    Columns are labelled a-h and rows 1-8, matching the square names accepted
    by the console.
    """
    lines = ["  " + " ".join(letters[:BOARD_DIM])]
    for i in range(BOARD_DIM):
        cells = []
        for j in range(BOARD_DIM):
            if board[i, j] == BLACK:
                cells.append("B")
            elif board[i, j] == WHITE:
                cells.append("W")
            elif (i, j) in legal_moves:
                cells.append(LEGAL_MARK)
            else:
                cells.append(".")
        lines.append(number[i] + " " + " ".join(cells))
    return "\n".join(lines)


def format_status(view: SessionView) -> str:
    """Describe whose turn it is and the score, or the result once finished."""
    black, white = view.names.values()
    score_line = f"Score - {black}: {view.score.black} | {white}: {view.score.white}"

    if view.phase is GamePhase.ENTRY:
        return "Waiting for player names."
    if view.phase is GamePhase.PLAYING:
        player = view.current_player
        return f"Current player: {view.names[player]} ({player.label})\n{score_line}"

    if view.outcome is Outcome.TIE:
        result = "Game over! It's a tie."
    else:
        result = f"Game over! Winner: {view.names[view.winner]}"
    return f"{result}\n{score_line}"


def plot_board(
    board: Board,
    ax: Axes | None = None,
    legal_moves: Collection[Move] = (),
    move: Move | None = None,
    flipped: Collection[Move] = (),
) -> Axes:
    """Plot the board.

    The board is shown as a grid with black or white circles in the appropriate
    places. Legal moves are shaded green, the last move blue and the cells it
    flipped light blue.
    """
    if board.shape != (BOARD_DIM, BOARD_DIM):
        raise ValueError(f"Board must have shape ({BOARD_DIM}, {BOARD_DIM}), got {board.shape}")

    if ax is None:
        _fig, ax = plt.subplots()

    ax.set_aspect("equal")
    ax.set_xlim(0, BOARD_DIM)
    ax.set_ylim(0, BOARD_DIM)

    background = plt.Rectangle((0, 0), BOARD_DIM, BOARD_DIM, color="forestgreen", zorder=0)
    ax.add_artist(background)

    for i, j in legal_moves:
        rect = plt.Rectangle((j, i), 1, 1, fill=True, color="limegreen", alpha=0.7)
        ax.add_artist(rect)

    for i, j in flipped:
        rect = plt.Rectangle((j, i), 1, 1, fill=True, color="lightsteelblue", alpha=0.7)
        ax.add_artist(rect)

    if move is not None:
        move_rect = plt.Rectangle(
            (move[1], move[0]), 1, 1, fill=True, color="cornflowerblue", alpha=0.7
        )
        ax.add_artist(move_rect)

    for x, y in np.ndindex(BOARD_DIM, BOARD_DIM):
        if board[x, y] == BLACK:
            circle = plt.Circle((y + 0.5, x + 0.5), 0.4, color="black", ec="black", lw=1)
            ax.add_artist(circle)
        elif board[x, y] == WHITE:
            circle = plt.Circle((y + 0.5, x + 0.5), 0.4, color="white", ec="black", lw=1)
            ax.add_artist(circle)

    ax.invert_yaxis()
    ax.axis("off")
    outline = plt.Rectangle((0, 0), BOARD_DIM, BOARD_DIM, edgecolor="black", facecolor="none")
    ax.add_artist(outline)

    for i in range(1, BOARD_DIM):
        ax.axhline(i, color="black", lw=0.5)
        ax.axvline(i, color="black", lw=0.5)

    # Column labels a-h, row labels 1-8
    for i in range(BOARD_DIM):
        ax.text(i + 0.5, -0.5, letters[i], ha="center", va="center", fontsize=12)
        ax.text(-0.5, i + 0.5, number[i], ha="center", va="center", fontsize=12)

    return ax


def plot_view(view: SessionView, ax: Axes | None = None) -> Axes:
    """Plot a session view with its legal moves and the score as the title."""
    ax = plot_board(view.board, ax=ax, legal_moves=view.legal_moves)
    black, white = view.names.values()
    ax.set_title(f"{black} {view.score.black} - {view.score.white} {white}")
    logger.debug("Plotted board in phase %s.", view.phase.value)
    return ax
