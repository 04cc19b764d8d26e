"""Shuffle generator tests — random walks from the solved state."""

from __future__ import annotations

import random

import pytest

from backend.engine.gamegenerator import GameGenerator, random_walk
from backend.engine.gamestate import PuzzleState
from backend.models.board import Board, Direction
from backend.settings import MAX_SHUFFLE_MOVES


@pytest.mark.parametrize("seed", range(10))
def test_walk_length_within_bounds(seed: int) -> None:
    walk = random_walk(random.Random(seed))
    assert 0 <= len(walk) <= MAX_SHUFFLE_MOVES
    assert all(isinstance(d, Direction) for d in walk)


def test_walk_can_be_empty() -> None:
    assert random_walk(random.Random(0), max_moves=0) == []


def test_walk_is_deterministic_for_a_seed() -> None:
    assert random_walk(random.Random(99)) == random_walk(random.Random(99))


def test_walk_uses_all_directions() -> None:
    seen = {d for s in range(20) for d in random_walk(random.Random(s), max_moves=50)}
    assert seen == set(Direction)


def test_solved_matches_board_model() -> None:
    assert GameGenerator.solved(4, 5) == Board.solved(4, 5)


class _Recorder:
    """Stands in for a state; accepts every other slide."""

    def __init__(self) -> None:
        self.seen: list[Direction] = []

    def move_in_direction(self, direction: Direction) -> bool:
        self.seen.append(direction)
        return len(self.seen) % 2 == 0


def test_scramble_counts_accepted_moves() -> None:
    recorder = _Recorder()
    applied = GameGenerator.scramble(recorder, random.Random(5))  # type: ignore[arg-type]

    assert recorder.seen == random_walk(random.Random(5))
    assert applied == len(recorder.seen) // 2


@pytest.mark.parametrize("seed", [5, 17, 256])
def test_new_game_applies_every_in_bounds_step(seed: int) -> None:
    board = Board.solved(3, 3)
    for direction in random_walk(random.Random(seed)):
        er, ec = board.empty_pos
        dr, dc = direction.offset
        if board.in_bounds((er + dr, ec + dc)):
            board = board.swapped(board.tile_at((er + dr, ec + dc)))

    state = PuzzleState(rows=3, cols=3, rng=random.Random(seed))
    assert state.board == board
    assert state.history == ()
