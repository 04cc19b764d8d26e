"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

import logging
import random

from backend.engine.gamegenerator import GameGenerator
from backend.models.board import Board, Direction, Snapshot
from backend.settings import COLS, ROWS

logger = logging.getLogger(__name__)


class PuzzleState:
    """Holds the current board and mediates every move applied to it.

    Two modes: while shuffling, moves skip the history and the
    frozen-when-solved rule; otherwise a solved board refuses all moves.
    """

    def __init__(
        self,
        rows: int = ROWS,
        cols: int = COLS,
        rng: random.Random | None = None,
    ) -> None:
        self._winner_board = Board.solved(rows, cols)
        self._rng = rng if rng is not None else random.Random()
        self._board = self._winner_board
        self._history: list[Board] = []
        self._shuffling = False
        self.start_new_game()

    @classmethod
    def from_board(
        cls, board: Board, rng: random.Random | None = None
    ) -> PuzzleState:
        """Create a state around an existing board, skipping the shuffle.

        Raises ValueError if *board* is not a permutation of its grid.
        """
        if not board.is_permutation():
            raise ValueError(
                f"Positions are not a permutation of the "
                f"{board.rows}×{board.cols} grid."
            )
        obj = object.__new__(cls)
        obj._winner_board = Board.solved(board.rows, board.cols)
        obj._rng = rng if rng is not None else random.Random()
        obj._board = board
        obj._history = []
        obj._shuffling = False
        return obj

    # -- properties -----------------------------------------------------------

    @property
    def winner_board(self) -> Board:
        return self._winner_board

    @property
    def rows(self) -> int:
        return self._winner_board.rows

    @property
    def cols(self) -> int:
        return self._winner_board.cols

    @property
    def board(self) -> Board:
        return self._board

    @property
    def history(self) -> tuple[Board, ...]:
        return tuple(self._history)

    @property
    def shuffling(self) -> bool:
        return self._shuffling

    # -- lifecycle ------------------------------------------------------------

    def start_new_game(self) -> None:
        """Reset to the solved board, then scramble it with random moves."""
        self._board = GameGenerator.solved(self.rows, self.cols)
        self._history = []
        self._shuffling = True
        try:
            applied = GameGenerator.scramble(self, self._rng)
        finally:
            self._shuffling = False
        logger.debug(
            "new %d×%d game, %d shuffle moves", self.rows, self.cols, applied
        )

    # -- queries --------------------------------------------------------------

    def is_winner(self) -> bool:
        return self._board.positions == self._winner_board.positions

    def can_move_tile(self, index: int) -> bool:
        """True if tile *index* sits right next to the empty slot."""
        if index < 0 or index >= self._board.size:
            return False
        tr, tc = self._board.positions[index]
        er, ec = self._board.empty_pos
        return abs(tr - er) + abs(tc - ec) == 1

    def get_snapshot(self) -> Snapshot:
        return Snapshot(board=self._board, winner=self.is_winner())

    # -- moves ----------------------------------------------------------------

    def move_tile(self, index: int) -> bool:
        """Slide tile *index* into the empty slot.

        Returns True if the move was applied.
        """
        if not self._shuffling and self.is_winner():
            logger.debug("move %d refused: board already solved", index)
            return False
        if not self.can_move_tile(index):
            if not self._shuffling:
                logger.debug("move %d refused: not next to the empty slot", index)
            return False

        if not self._shuffling:
            self._history.append(self._board)
        self._board = self._board.swapped(index)
        return True

    def move_in_direction(self, direction: Direction) -> bool:
        """Slide whichever tile can move in *direction*.

        E.g. ``Direction.UP`` moves the tile **below** the empty slot upward.
        Off-grid sources fall back to the empty index, which is refused.
        """
        er, ec = self._board.empty_pos
        dr, dc = direction.offset
        index = self._board.tile_at((er + dr, ec + dc))
        if index is None:
            index = self._board.empty_index
        return self.move_tile(index)
