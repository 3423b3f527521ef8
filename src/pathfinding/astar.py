"""A* search over Grid cell indices.

The diagonal flag arrives with each query and picks both the move set and
the estimate: with 4-way movement the remaining cost is the Manhattan
distance times CARDINAL_COST; with 8-way movement it is the octile
distance, pairing the shorter axis with DIAGONAL_COST steps. Neither ever
exceeds the true remaining cost, and both stay consistent under the grid's
edge costs, so the route is final as soon as the target leaves the heap.

Heap entries are (f, g, index): equal f goes to lower g, then lower index.
"""

from __future__ import annotations

import heapq

from src.config import CARDINAL_COST, DIAGONAL_COST
from src.pathfinding.base import Pathfinder, reconstruct_path
from src.pathfinding.grid import Grid


def heuristic(grid: Grid, index: int, target: int, allow_diagonals: bool) -> int:
    """Lower bound on the remaining cost from index to target."""
    x, y = grid.from_index(index)
    gx, gy = grid.from_index(target)
    dx = abs(x - gx)
    dy = abs(y - gy)
    if not allow_diagonals:
        return (dx + dy) * CARDINAL_COST
    # Octile: diagonals cover the shorter axis, straight steps the rest
    short, long = min(dx, dy), max(dx, dy)
    return short * DIAGONAL_COST + (long - short) * CARDINAL_COST


class AStarPathfinder(Pathfinder):
    """Heuristic best-first search. Takes the diagonal flag per query."""

    name = "astar"

    def _search(
        self, start: int, target: int, allow_diagonals: bool
    ) -> tuple[list[int], int] | None:
        grid = self.grid

        # open set: (f_cost, g_cost, index)
        start_h = heuristic(grid, start, target, allow_diagonals)
        open_set: list[tuple[int, int, int]] = [(start_h, 0, start)]
        came_from: dict[int, int] = {}
        g_costs: dict[int, int] = {start: 0}
        closed: set[int] = set()

        while open_set:
            _f, g, current = heapq.heappop(open_set)

            if current in closed:
                continue  # stale entry, a cheaper route was finalized first
            closed.add(current)

            if current == target:
                return reconstruct_path(came_from, start, target), g

            for neighbor, cost in grid.neighbor_costs(current, allow_diagonals):
                if neighbor in closed:
                    continue
                new_g = g + cost
                if new_g < g_costs.get(neighbor, new_g + 1):
                    g_costs[neighbor] = new_g
                    came_from[neighbor] = current
                    f = new_g + heuristic(grid, neighbor, target, allow_diagonals)
                    heapq.heappush(open_set, (f, new_g, neighbor))

        return None  # no path found
