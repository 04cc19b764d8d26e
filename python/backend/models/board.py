"""Board model for the sliding puzzle game."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import StrEnum

Position = tuple[int, int]


class Direction(StrEnum):
    """Direction a *tile* slides into the empty slot."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def offset(self) -> Position:
        """Offset from the empty slot to the tile that will slide.

        UP   → tile at (er+1, ec) moves up
        DOWN → tile at (er-1, ec) moves down
        LEFT → tile at (er, ec+1) moves left
        RIGHT→ tile at (er, ec-1) moves right
        """
        return _OFFSETS[self]


_OFFSETS: dict[Direction, Position] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}


@dataclass(frozen=True)
class Board:
    """Represents the sliding puzzle board.

    ``positions[i]`` is the grid cell occupied by tile *i*. The last index
    is the empty slot.
    """

    rows: int
    cols: int
    positions: tuple[Position, ...]
    _lookup: dict[Position, int] = field(
        init=False, repr=False, compare=False, hash=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "_lookup", {pos: i for i, pos in enumerate(self.positions)}
        )

    # -- construction helpers -------------------------------------------------

    @classmethod
    def solved(cls, rows: int, cols: int) -> Board:
        """Return the goal-state board (tile *i* at ``divmod(i, cols)``)."""
        if rows < 1 or cols < 1 or rows * cols < 2:
            raise ValueError(
                f"A board needs at least one tile, got {rows}×{cols}."
            )
        return cls(
            rows=rows,
            cols=cols,
            positions=tuple(divmod(i, cols) for i in range(rows * cols)),
        )

    @classmethod
    def from_positions(
        cls, rows: int, cols: int, positions: Iterable[Position]
    ) -> Board:
        """Create a board from an explicit tile → position list.

        Example::

            Board.from_positions(2, 2, [(0, 0), (0, 1), (1, 1), (1, 0)])
        """
        board = cls(
            rows=rows,
            cols=cols,
            positions=tuple((int(r), int(c)) for r, c in positions),
        )
        if not board.is_permutation():
            raise ValueError(
                f"Positions are not a permutation of the {rows}×{cols} grid."
            )
        return board

    # -- queries --------------------------------------------------------------

    @property
    def size(self) -> int:
        return self.rows * self.cols

    @property
    def empty_index(self) -> int:
        return len(self.positions) - 1

    @property
    def empty_pos(self) -> Position:
        return self.positions[-1]

    def in_bounds(self, pos: Position) -> bool:
        r, c = pos
        return 0 <= r < self.rows and 0 <= c < self.cols

    def tile_at(self, pos: Position) -> int | None:
        """Index of whatever occupies *pos* (the empty index included)."""
        return self._lookup.get(pos)

    def is_permutation(self) -> bool:
        """Check every grid cell is occupied exactly once."""
        if len(self.positions) != self.size:
            return False
        return len(self._lookup) == self.size and all(
            self.in_bounds(pos) for pos in self.positions
        )

    def is_tile_correct(self, index: int) -> bool:
        """Check if tile *index* is in its goal position."""
        return self.positions[index] == divmod(index, self.cols)

    def tiles(self) -> Iterator[tuple[int, Position]]:
        """Yield ``(index, position)`` for every real tile."""
        for i, pos in enumerate(self.positions[:-1]):
            yield i, pos

    # -- transitions ----------------------------------------------------------

    def swapped(self, index: int) -> Board:
        """Return a new board with tile *index* and the empty slot exchanged."""
        positions = list(self.positions)
        positions[index], positions[-1] = positions[-1], positions[index]
        return Board(rows=self.rows, cols=self.cols, positions=tuple(positions))


@dataclass(frozen=True)
class Snapshot:
    """What the presentation layer gets to see after each update."""

    board: Board
    winner: bool
