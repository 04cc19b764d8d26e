#!/usr/bin/env python3
"""Sliding Puzzle Game.

Usage::

    python main.py                  # Rich terminal
    python main.py -f pygame        # Pygame GUI
    python main.py -f pyqt --seed 7 # PyQt GUI, reproducible shuffle
"""

import importlib
import logging
import random
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

logger = logging.getLogger("sliding_tiles")


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"
    pygame = "pygame"
    pyqt = "pyqt"


class LogLevel(StrEnum):
    debug = "DEBUG"
    info = "INFO"
    warning = "WARNING"
    error = "ERROR"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
    Frontend.pygame: "frontend.gui.pygame.app",
    Frontend.pyqt: "frontend.gui.pyqt.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=level.value,
        format="%(name)s: %(message)s",
        handlers=[RichHandler(show_path=False, rich_tracebacks=True)],
        force=True,
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="Frontend to launch.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed the shuffle for a reproducible starting board.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.warning, "--log-level",
        case_sensitive=False,
        help="Logging verbosity.",
    ),
) -> None:
    """Sliding Puzzle Game."""
    _configure_logging(log_level)

    from backend.engine.gameplay import GamePlay
    from backend.engine.gamestate import PuzzleState

    game = GamePlay(PuzzleState(rng=random.Random(seed)))
    logger.info("launching %s frontend (seed=%s)", frontend.value, seed)

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(game)


if __name__ == "__main__":
    app()
