"""Map builders and independent checks shared by the pathfinding tests."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

from src.pathfinding.grid import Grid


def open_map(width: int = 20, height: int = 20) -> Grid:
    """Fully walkable map."""
    return Grid.open(width, height)


def map_with_wall(width: int = 20, height: int = 20) -> Grid:
    """Vertical wall at x=10 from y=0 to y=14, gap from y=15 down."""
    cells = [True] * (width * height)
    for y in range(15):
        cells[10 + y * width] = False
    return Grid(width, height, cells)


def boxed_in(width: int = 20, height: int = 20, cx: int = 5, cy: int = 5) -> Grid:
    """Open map with a ring of blocked cells around (cx, cy)."""
    cells = [True] * (width * height)
    for dy in range(-1, 2):
        for dx in range(-1, 2):
            if dx != 0 or dy != 0:
                cells[(cx + dx) + (cy + dy) * width] = False
    return Grid(width, height, cells)


def flood_fill(grid: Grid, start: int) -> dict[int, int]:
    """4-way BFS on raw coordinates. Maps reachable cell -> step count."""
    sx, sy = start % grid.width, start // grid.width
    steps = {start: 0}
    queue = deque([(sx, sy)])
    while queue:
        x, y = queue.popleft()
        for nx, ny in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
            if not (0 <= nx < grid.width and 0 <= ny < grid.height):
                continue
            index = nx + ny * grid.width
            if index in steps or not grid.is_walkable(index):
                continue
            steps[index] = steps[x + y * grid.width] + 1
            queue.append((nx, ny))
    return steps


def assert_valid_route(grid: Grid, start: int, path: Sequence[int], allow_diagonals: bool) -> None:
    """Every step moves to an adjacent walkable cell."""
    current = start
    for index in path:
        assert grid.is_walkable(index), f"route enters blocked cell {index}"
        assert index in grid.neighbors(current, allow_diagonals), (
            f"route jumps from {current} to {index}"
        )
        current = index
