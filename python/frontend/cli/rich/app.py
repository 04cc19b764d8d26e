"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same
command parser and backend as the vanilla CLI.
"""

from __future__ import annotations

import logging

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import GamePlay
from backend.models.board import Board
from frontend.cli.input_handler import read_command

logger = logging.getLogger(__name__)

console = Console()


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.cols):
        table.add_column(width=width + 1, justify="center")

    for r in range(board.rows):
        cells: list[str] = []
        for c in range(board.cols):
            index = board.tile_at((r, c))
            if index == board.empty_index:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(index):
                cells.append(f"[bold green]{index + 1:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{index + 1:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


# -- screens ------------------------------------------------------------------


def _draw_game(game: GamePlay, status: str = "") -> None:
    console.clear()

    board = game.board
    board_table = _render_board(board)

    controls = Text()
    controls.append(f"  1-{board.size - 1}", style="bold cyan")
    controls.append("  slide tile   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  reset   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    panel = Panel(
        Align.center(board_table),
        title=f"[bold cyan]Sliding Puzzle  {board.rows}×{board.cols}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


def _draw_win(game: GamePlay) -> None:
    console.clear()

    board = game.board
    congrats = Text()
    congrats.append("\n  ★ ", style="bold yellow")
    congrats.append("You have won :)", style="bold green")
    congrats.append(" ★\n", style="bold yellow")

    controls = Text()
    controls.append("  R", style="bold cyan")
    controls.append("  play again   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    panel = Panel(
        Group(Align.center(_render_board(board)), Align.center(congrats)),
        title=f"[bold green]Sliding Puzzle  {board.rows}×{board.cols}[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(controls))


def _prompt() -> str:
    return Prompt.ask("[bold cyan]>[/bold cyan]", console=console, default="")


# -- game loop ----------------------------------------------------------------


def _play(game: GamePlay) -> None:
    status = ""
    while True:
        if game.show_overlay:
            _draw_win(game)
        else:
            _draw_game(game, status)
        status = ""

        action, index = read_command(game.board.size, _prompt)

        if action == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
        elif action == "reset":
            game.new_game()
        elif action == "move" and index is not None:
            if not game.move(index)():
                status = f"[yellow]Tile {index + 1} can't move.[/yellow]"
        elif action == "help":
            status = "[dim]Type a tile number next to the gap to slide it.[/dim]"


# -- public entry point -------------------------------------------------------


def run(game: GamePlay | None = None) -> None:
    """Launch the Rich CLI."""
    logger.info("starting rich frontend")
    _play(game if game is not None else GamePlay())
