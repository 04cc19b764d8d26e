"""Presentation adapter — turns user input into puzzle moves."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

from backend.engine.gamestate import PuzzleState
from backend.models.board import Board, Position, Snapshot

logger = logging.getLogger(__name__)


class GamePlay:
    """Orchestrates a single game session for a frontend.

    Holds the latest snapshot of the puzzle; every mutating call refreshes
    it so frontends only ever read from :attr:`snapshot`.
    """

    def __init__(self, state: PuzzleState | None = None) -> None:
        self.state = state if state is not None else PuzzleState()
        self.snapshot: Snapshot = self.state.get_snapshot()

    @classmethod
    def from_board(cls, board: Board) -> GamePlay:
        """Create a game session from an existing board (no shuffle)."""
        return cls(PuzzleState.from_board(board))

    # -- input ----------------------------------------------------------------

    def new_game(self) -> None:
        self.state.start_new_game()
        self._refresh()

    def move(self, index: int) -> Callable[[], bool]:
        """Return a click handler that slides tile *index*.

        The handler returns True if the tile actually moved.
        """

        def handler() -> bool:
            moved = self.state.move_tile(index)
            self._refresh()
            return moved

        return handler

    # -- queries --------------------------------------------------------------

    @property
    def board(self) -> Board:
        return self.snapshot.board

    @property
    def is_won(self) -> bool:
        return self.snapshot.winner

    @property
    def show_overlay(self) -> bool:
        return self.snapshot.winner and not self.state.shuffling

    def tiles(self) -> Iterator[tuple[int, str, Position]]:
        """Yield ``(index, label, position)`` for each visible tile."""
        for index, pos in self.snapshot.board.tiles():
            yield index, str(index + 1), pos

    # -- helpers --------------------------------------------------------------

    def _refresh(self) -> None:
        was_won = self.snapshot.winner
        self.snapshot = self.state.get_snapshot()
        if self.snapshot.winner and not was_won:
            logger.info("puzzle solved")
