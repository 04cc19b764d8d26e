"""Board model tests — construction, lookups, and swaps."""

from __future__ import annotations

import pytest

from backend.models.board import Board, Direction


# -- construction -------------------------------------------------------------


def test_solved_board_is_row_major_on_columns() -> None:
    board = Board.solved(2, 3)
    assert board.positions == ((0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2))
    assert board.empty_pos == (1, 2)
    assert board.empty_index == 5


@pytest.mark.parametrize("rows, cols", [(0, 3), (3, 0), (1, 1), (-1, 4)])
def test_solved_rejects_degenerate_grid(rows: int, cols: int) -> None:
    with pytest.raises(ValueError, match="at least one tile"):
        Board.solved(rows, cols)


def test_from_positions_accepts_permutation() -> None:
    board = Board.from_positions(2, 2, [(0, 0), (0, 1), (1, 1), (1, 0)])
    assert board.empty_pos == (1, 0)
    assert board.is_permutation()


@pytest.mark.parametrize(
    "positions",
    [
        [(0, 0), (0, 0), (1, 0), (1, 1)],  # duplicate
        [(0, 0), (0, 1), (1, 0), (2, 2)],  # off-grid
        [(0, 0), (0, 1), (1, 0)],  # too short
    ],
    ids=["duplicate", "off-grid", "short"],
)
def test_from_positions_rejects_non_permutation(positions: list) -> None:
    with pytest.raises(ValueError, match="not a permutation"):
        Board.from_positions(2, 2, positions)


# -- queries ------------------------------------------------------------------


def test_tile_at_is_inverse_of_positions() -> None:
    board = Board.from_positions(2, 2, [(1, 1), (0, 0), (1, 0), (0, 1)])
    for index, pos in enumerate(board.positions):
        assert board.tile_at(pos) == index
    assert board.tile_at((2, 0)) is None


def test_tiles_skips_empty_slot() -> None:
    board = Board.solved(3, 3)
    tiles = list(board.tiles())
    assert len(tiles) == 8
    assert all(index != board.empty_index for index, _ in tiles)


def test_is_tile_correct() -> None:
    board = Board.solved(2, 2).swapped(2)
    assert board.is_tile_correct(0)
    assert board.is_tile_correct(1)
    assert not board.is_tile_correct(2)


def test_equality_ignores_cached_lookup() -> None:
    assert Board.solved(3, 3) == Board.solved(3, 3)
    assert Board.solved(3, 3) != Board.solved(3, 3).swapped(7)


# -- transitions --------------------------------------------------------------


def test_swapped_returns_new_board() -> None:
    board = Board.solved(2, 2)
    moved = board.swapped(2)
    assert board.positions[2] == (1, 0)
    assert moved.positions[2] == (1, 1)
    assert moved.empty_pos == (1, 0)
    assert moved.tile_at((1, 0)) == 3


def test_direction_offsets_point_at_sliding_tile() -> None:
    assert Direction.UP.offset == (1, 0)
    assert Direction.DOWN.offset == (-1, 0)
    assert Direction.LEFT.offset == (0, 1)
    assert Direction.RIGHT.offset == (0, -1)
