"""Tile layout tests — viewport clamping and hit-testing."""

from __future__ import annotations

import pytest

from backend.engine.gameplay.layout import TileLayout, clamp
from backend.settings import MAX_TILE_SIZE, MIN_TILE_SIZE, TILE_SPACING


@pytest.mark.parametrize(
    "value, expected", [(10, 50), (50, 50), (75, 75), (100, 100), (400, 100)]
)
def test_clamp(value: float, expected: float) -> None:
    assert clamp(value, 50, 100) == expected


@pytest.mark.parametrize(
    "width, height, tile_px",
    [
        (2000, 2000, MAX_TILE_SIZE - TILE_SPACING),
        (100, 100, MIN_TILE_SIZE - TILE_SPACING),
        (480, 2000, 80 - TILE_SPACING),  # width-bound
        (2000, 420, 70 - TILE_SPACING),  # height-bound
    ],
)
def test_tile_size_from_viewport(width: int, height: int, tile_px: int) -> None:
    layout = TileLayout.from_viewport(width, height, rows=6, cols=6)
    assert layout.tile_px == tile_px


def test_non_square_grid_uses_matching_axes() -> None:
    layout = TileLayout.from_viewport(400, 900, rows=3, cols=5)
    assert layout.tile_px == 80 - TILE_SPACING
    assert layout.board_px == (5 * 80 + TILE_SPACING, 3 * 80 + TILE_SPACING)


def test_tile_rect_and_hit_agree() -> None:
    layout = TileLayout(tile_px=40, rows=3, cols=4, spacing=5)
    for r in range(3):
        for c in range(4):
            x, y, w, h = layout.tile_rect((r, c))
            assert (w, h) == (40, 40)
            assert layout.hit(x, y) == (r, c)
            assert layout.hit(x + w - 1, y + h - 1) == (r, c)


@pytest.mark.parametrize("point", [(0, 0), (2, 20), (47, 20), (500, 20), (20, -3)])
def test_hit_misses_gaps_and_outside(point: tuple[int, int]) -> None:
    layout = TileLayout(tile_px=40, rows=3, cols=4, spacing=5)
    assert layout.hit(*point) is None


def test_font_scales_with_tile() -> None:
    assert TileLayout(tile_px=90).font_px == 45
