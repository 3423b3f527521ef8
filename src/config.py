"""Shared constants for the tile pathfinding demo. All world-wide configuration lives here."""

# --- Grid ---
GRID_WIDTH = 10
GRID_HEIGHT = 10

# The fixed 10x10 world. '.' = grass (walkable), 'X' = tree (blocked).
# Row-major: cell index = x + y * GRID_WIDTH.
DEFAULT_LAYOUT = """
...X.XX.X.
.X.....X.X
....X....X
...X.XX...
..........
.X........
.......X.X
..X.X.....
........X.
XX...X....
"""

# --- Player ---
PLAYER_START_INDEX = 0  # top-left corner

# --- Movement costs ---
# Integer, scaled by 1000 to avoid floats.
CARDINAL_COST = 1000
DIAGONAL_COST = 1414  # ~1000 * sqrt(2)

# --- Target selection ---
MAX_TARGET_ATTEMPTS = 50  # random picks before giving up
DEFAULT_SEED = 42
