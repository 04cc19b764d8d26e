"""Board and layout constants.

The grid size is fixed at build time; frontends read these values instead
of taking them as options.
"""

ROWS = 6
COLS = 6
TILES_COUNT = ROWS * COLS
EMPTY_INDEX = TILES_COUNT - 1

# Layout (px)
TILE_SIZE = 100
TILE_SPACING = 5
MIN_TILE_SIZE = 50
MAX_TILE_SIZE = 100

MAX_SHUFFLE_MOVES = 1000
