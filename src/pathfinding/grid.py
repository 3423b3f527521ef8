"""Grid model shared by both search engines.

Immutable after construction. Cells are stored in a flat tuple, row-major:
walkable[x + y * width]. Out-of-range queries answer "not walkable"
instead of raising.
"""

from __future__ import annotations

import textwrap
from collections.abc import Sequence

from src.config import (
    CARDINAL_COST,
    DEFAULT_LAYOUT,
    DIAGONAL_COST,
    GRID_HEIGHT,
    GRID_WIDTH,
)

WALKABLE_CHAR = "."
BLOCKED_CHAR = "X"

# Compass order: N, S, E, W, then NE, SE, SW, NW. Screen coords, y grows down.
# (dx, dy, cost)
_CARDINAL_STEPS = [
    (0, -1, CARDINAL_COST),
    (0, 1, CARDINAL_COST),
    (1, 0, CARDINAL_COST),
    (-1, 0, CARDINAL_COST),
]
_DIAGONAL_STEPS = [
    (1, -1, DIAGONAL_COST),
    (1, 1, DIAGONAL_COST),
    (-1, 1, DIAGONAL_COST),
    (-1, -1, DIAGONAL_COST),
]


class Grid:
    """Fixed-size rectangular grid with per-cell walkability."""

    __slots__ = ("_width", "_height", "_walkable")

    def __init__(self, width: int, height: int, walkable: Sequence[bool]) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        if len(walkable) != width * height:
            raise ValueError(
                f"Expected {width * height} cells for a {width}x{height} grid, "
                f"got {len(walkable)}"
            )
        self._width = width
        self._height = height
        self._walkable: tuple[bool, ...] = tuple(bool(w) for w in walkable)

    @classmethod
    def open(cls, width: int, height: int) -> Grid:
        """Fully walkable grid."""
        return cls(width, height, [True] * (width * height))

    @classmethod
    def from_ascii(cls, text: str) -> Grid:
        """Parse ASCII art into a Grid. '.' = walkable, 'X' = blocked.

        Leading/trailing blank lines and common indentation are stripped.
        All rows must have the same length.
        """
        lines = textwrap.dedent(text).strip().splitlines()
        if not lines:
            raise ValueError("Empty grid layout")
        width = len(lines[0])
        cells: list[bool] = []
        for y, line in enumerate(lines):
            if len(line) != width:
                raise ValueError(
                    f"Row {y} has {len(line)} cells, expected {width}"
                )
            for x, ch in enumerate(line):
                if ch == WALKABLE_CHAR:
                    cells.append(True)
                elif ch == BLOCKED_CHAR:
                    cells.append(False)
                else:
                    raise ValueError(f"Unknown cell {ch!r} at ({x}, {y})")
        return cls(width, len(lines), cells)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> int:
        """Total number of cells."""
        return self._width * self._height

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._walkable == other._walkable
        )

    def __hash__(self) -> int:
        return hash((self._width, self._height, self._walkable))

    def __repr__(self) -> str:
        return f"Grid({self._width}x{self._height})"

    # --- Index conversion ---

    def to_index(self, x: int, y: int) -> int:
        return x + y * self._width

    def from_index(self, index: int) -> tuple[int, int]:
        return index % self._width, index // self._width

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def contains(self, index: int) -> bool:
        """Whether index names a cell of this grid. Non-integers never do."""
        return isinstance(index, int) and 0 <= index < self.size

    # --- Walkability ---

    def is_walkable(self, index: int) -> bool:
        """Out-of-range indices are never walkable."""
        if not self.contains(index):
            return False
        return self._walkable[index]

    def is_walkable_at(self, x: int, y: int) -> bool:
        """Coordinate form of is_walkable. Out-of-bounds returns False."""
        if not self.in_bounds(x, y):
            return False
        return self._walkable[self.to_index(x, y)]

    # --- Adjacency ---

    def neighbor_costs(self, index: int, allow_diagonals: bool) -> list[tuple[int, int]]:
        """Walkable neighbours of index with their step cost, in compass order.

        A diagonal step is refused only when both orthogonal cells it passes
        between are blocked. Returns [] for out-of-range or blocked cells.
        """
        if not self.is_walkable(index):
            return []
        x, y = self.from_index(index)
        result: list[tuple[int, int]] = []
        for dx, dy, cost in _CARDINAL_STEPS:
            nx, ny = x + dx, y + dy
            if self.is_walkable_at(nx, ny):
                result.append((self.to_index(nx, ny), cost))
        if allow_diagonals:
            for dx, dy, cost in _DIAGONAL_STEPS:
                nx, ny = x + dx, y + dy
                if not self.is_walkable_at(nx, ny):
                    continue
                # No squeezing between two blocked corners
                if not self.is_walkable_at(nx, y) and not self.is_walkable_at(x, ny):
                    continue
                result.append((self.to_index(nx, ny), cost))
        return result

    def neighbors(self, index: int, allow_diagonals: bool) -> list[int]:
        """Walkable neighbour indices of index, in compass order."""
        return [n for n, _cost in self.neighbor_costs(index, allow_diagonals)]

    def walkable_indices(self) -> list[int]:
        return [i for i, w in enumerate(self._walkable) if w]

    def to_ascii(self) -> str:
        rows = []
        for y in range(self._height):
            row = self._walkable[y * self._width:(y + 1) * self._width]
            rows.append("".join(WALKABLE_CHAR if w else BLOCKED_CHAR for w in row))
        return "\n".join(rows)


def default_grid() -> Grid:
    """The fixed 10x10 world from config."""
    grid = Grid.from_ascii(DEFAULT_LAYOUT)
    if grid.width != GRID_WIDTH or grid.height != GRID_HEIGHT:
        raise ValueError(
            f"DEFAULT_LAYOUT is {grid.width}x{grid.height}, "
            f"expected {GRID_WIDTH}x{GRID_HEIGHT}"
        )
    return grid
