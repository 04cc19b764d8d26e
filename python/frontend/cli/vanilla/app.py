"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print, ANSI codes) for rendering and line input.
"""

from __future__ import annotations

import logging
import sys

from backend.engine.gameplay import GamePlay
from backend.models.board import Board
from frontend.cli.input_handler import read_command

logger = logging.getLogger(__name__)


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_C = "\033[36;1m"    # bold cyan
_DIM = "\033[2m"     # dim
_R = "\033[0m"       # reset


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> str:
    """Return an ANSI-coloured text representation of the board."""
    width = len(str(board.size - 1))  # widest label
    cell_w = width + 2  # padding
    sep = "+" + (("-" * cell_w + "+") * board.cols)

    lines: list[str] = [sep]
    for r in range(board.rows):
        cells: list[str] = []
        for c in range(board.cols):
            index = board.tile_at((r, c))
            if index == board.empty_index:
                cells.append(f"{_DIM} {'·':>{width}} {_R}")
            elif board.is_tile_correct(index):
                cells.append(f"{_G} {index + 1:>{width}} {_R}")
            else:
                cells.append(f" {index + 1:>{width}} ")
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


# -- screens ------------------------------------------------------------------


def _show_game(game: GamePlay, status: str = "") -> None:
    _clear()
    board = game.board
    print(f"  {_C}=== Sliding Puzzle ({board.rows}×{board.cols}) ==={_R}")
    print()
    print(_render_board(board))
    print()
    if game.show_overlay:
        print(f"  {_G}★ You have won :) ★{_R}")
        print(f"  {_C}R{_R}: play again  |  {_C}Q{_R}: quit")
    else:
        print(
            f"  {_C}1-{board.size - 1}{_R}: slide tile  |  "
            f"{_C}R{_R}: reset  |  "
            f"{_C}Q{_R}: quit"
        )
    if status:
        print(f"  {status}")


def _prompt() -> str:
    return input("  > ")


# -- game loop ----------------------------------------------------------------


def _play(game: GamePlay) -> None:
    status = ""
    while True:
        _show_game(game, status)
        status = ""
        action, index = read_command(game.board.size, _prompt)

        if action == "quit":
            print("\n  Goodbye!\n")
            return
        elif action == "reset":
            game.new_game()
        elif action == "move" and index is not None:
            if not game.move(index)():
                status = f"{_DIM}Tile {index + 1} can't move.{_R}"
        elif action == "help":
            status = f"{_DIM}Type a tile number next to the gap to slide it.{_R}"


# -- public entry point -------------------------------------------------------


def run(game: GamePlay | None = None) -> None:
    """Launch the vanilla CLI."""
    logger.info("starting vanilla frontend")
    _play(game if game is not None else GamePlay())
