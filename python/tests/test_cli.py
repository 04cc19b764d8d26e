"""Terminal frontend and entry-point tests driven by scripted input."""

from __future__ import annotations

import builtins
from collections.abc import Iterator

import pytest
from typer.testing import CliRunner

from backend.engine.gameplay import GamePlay
from backend.models.board import Board
from frontend.cli.input_handler import parse_command, read_command
from frontend.cli.vanilla import app as vanilla
from main import app

runner = CliRunner()


# -- helpers ------------------------------------------------------------------


def _feed(monkeypatch: pytest.MonkeyPatch, lines: list[str]) -> None:
    it: Iterator[str] = iter(lines)

    def fake_input(prompt: str = "") -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr(builtins, "input", fake_input)


# -- command parsing ----------------------------------------------------------


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1", ("move", 0)),
        (" 35 ", ("move", 34)),
        ("36", ("", None)),
        ("0", ("", None)),
        ("q", ("quit", None)),
        ("R", ("reset", None)),
        ("?", ("help", None)),
        ("left", ("", None)),
    ],
)
def test_parse_command(raw: str, expected: tuple) -> None:
    assert parse_command(raw, 36) == expected


def test_read_command_treats_eof_as_quit() -> None:
    def closed() -> str:
        raise EOFError

    assert read_command(36, closed) == ("quit", None)


# -- vanilla frontend ---------------------------------------------------------


def test_vanilla_slides_tile_to_win(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    game = GamePlay.from_board(Board.solved(2, 2).swapped(2))
    _feed(monkeypatch, ["2", "3", "q"])

    vanilla.run(game)

    assert game.is_won
    out = capsys.readouterr().out
    assert "can't move" in out
    assert "You have won :)" in out
    assert "Goodbye" in out


def test_vanilla_reset_starts_new_game(monkeypatch: pytest.MonkeyPatch) -> None:
    game = GamePlay.from_board(Board.solved(2, 2).swapped(2))
    game.move(2)()
    assert game.state.history
    _feed(monkeypatch, ["r"])

    vanilla.run(game)

    assert game.state.history == ()


# -- entry point --------------------------------------------------------------


def test_main_runs_vanilla_frontend() -> None:
    result = runner.invoke(app, ["-f", "vanilla", "--seed", "3"], input="q\n")
    assert result.exit_code == 0, result.output
    assert "Sliding Puzzle (6×6)" in result.output
    assert "Goodbye" in result.output


def test_main_rejects_unknown_frontend() -> None:
    result = runner.invoke(app, ["-f", "curses"])
    assert result.exit_code != 0
