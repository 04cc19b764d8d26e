"""Viewport-driven tile geometry shared by the GUI frontends."""

from __future__ import annotations

from dataclasses import dataclass

from backend.models.board import Position
from backend.settings import (
    COLS,
    MAX_TILE_SIZE,
    MIN_TILE_SIZE,
    ROWS,
    TILE_SPACING,
)


def clamp(value: float, low: float, high: float) -> float:
    return low if value <= low else high if value >= high else value


@dataclass(frozen=True)
class TileLayout:
    """Pixel geometry of the board for one viewport size.

    Recomputed on every resize; never touches puzzle state.
    """

    tile_px: int
    rows: int = ROWS
    cols: int = COLS
    spacing: int = TILE_SPACING

    @classmethod
    def from_viewport(
        cls, width: float, height: float, rows: int = ROWS, cols: int = COLS
    ) -> TileLayout:
        per_col = clamp(width / cols, MIN_TILE_SIZE, MAX_TILE_SIZE)
        per_row = clamp(height / rows, MIN_TILE_SIZE, MAX_TILE_SIZE)
        tile_px = int(min(per_col, per_row)) - TILE_SPACING
        return cls(tile_px=tile_px, rows=rows, cols=cols)

    # -- geometry -------------------------------------------------------------

    @property
    def pitch(self) -> int:
        return self.tile_px + self.spacing

    @property
    def font_px(self) -> int:
        return self.tile_px // 2

    @property
    def board_px(self) -> tuple[int, int]:
        """Return (width, height) of the board area."""
        return (
            self.cols * self.pitch + self.spacing,
            self.rows * self.pitch + self.spacing,
        )

    def tile_rect(self, pos: Position) -> tuple[int, int, int, int]:
        """Return (left, top, width, height) relative to the board origin."""
        r, c = pos
        return (
            c * self.pitch + self.spacing,
            r * self.pitch + self.spacing,
            self.tile_px,
            self.tile_px,
        )

    def hit(self, x: float, y: float) -> Position | None:
        """Grid cell under a board-relative point, or None in gaps/outside."""
        if x < self.spacing or y < self.spacing:
            return None
        c, dx = divmod(int(x) - self.spacing, self.pitch)
        r, dy = divmod(int(y) - self.spacing, self.pitch)
        if not (0 <= r < self.rows and 0 <= c < self.cols):
            return None
        if dx >= self.tile_px or dy >= self.tile_px:
            return None
        return r, c
