"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from backend.models.board import Board, Direction
from backend.settings import MAX_SHUFFLE_MOVES

if TYPE_CHECKING:
    from backend.engine.gamestate import PuzzleState

logger = logging.getLogger(__name__)

_DIRECTIONS: tuple[Direction, ...] = tuple(Direction)


def random_walk(
    rng: random.Random, max_moves: int = MAX_SHUFFLE_MOVES
) -> list[Direction]:
    """Return a random sequence of slide directions.

    The length is uniform in ``[0, max_moves]``; an empty walk is a valid
    result and leaves the board solved.
    """
    count = rng.randint(0, max_moves)
    return [rng.choice(_DIRECTIONS) for _ in range(count)]


class GameGenerator:
    """Creates solvable puzzles by random-walking from the solved state."""

    @staticmethod
    def solved(rows: int, cols: int) -> Board:
        """Return the goal-state board (blank bottom-right)."""
        return Board.solved(rows, cols)

    @staticmethod
    def scramble(state: PuzzleState, rng: random.Random) -> int:
        """Scramble *state* in-place; returns the number of moves applied.

        Off-grid directions are refused by the state and count as no-ops.
        """
        walk = random_walk(rng)
        applied = sum(1 for direction in walk if state.move_in_direction(direction))
        logger.debug("random walk of %d steps, %d applied", len(walk), applied)
        return applied
