"""Play a game of Othello in the terminal.

Example:
    python scripts/play.py --black Ada --white Grace --plot final.png
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import matplotlib.pyplot as plt

from othello_engine.console import play
from othello_engine.engine import current_view
from othello_engine.render import plot_view

logger = logging.getLogger(__name__)


def main(args: argparse.Namespace) -> None:
    session = play(black_name=args.black, white_name=args.white)
    logger.info("Final score: %d-%d (%s).", *session.score, session.phase.value)

    if args.plot is not None:
        args.plot.parent.mkdir(parents=True, exist_ok=True)
        fig, ax = plt.subplots(figsize=(6, 6))
        plot_view(current_view(session), ax=ax)
        fig.savefig(args.plot, bbox_inches="tight")
        plt.close(fig)
        logger.info("Saved final board to %s", args.plot)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Play Othello between two players.")
    parser.add_argument("--black", type=str, default=None, help="Black player's name")
    parser.add_argument("--white", type=str, default=None, help="White player's name")
    parser.add_argument(
        "--plot",
        type=Path,
        default=None,
        help="If set, save an image of the final board to this path",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug-level logging",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        main(args)
    except KeyboardInterrupt:
        logger.info("Interrupted.")
    except Exception:
        logger.exception("Game failed.")
        sys.exit(1)
