"""Pathfinder interface shared by the A* and Dijkstra engines.

The base class owns everything both engines agree on: rejecting queries
that can't have a route, timing the search, and shaping the result.
Subclasses only implement the search loop itself.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod

from src.pathfinding.grid import Grid
from src.pathfinding.result import PathFailure, PathResult

logger = logging.getLogger(__name__)


class Pathfinder(ABC):
    """Abstract shortest-path engine over a Grid.

    Never raises on bad queries: every failure is an empty PathResult
    carrying a PathFailure.
    """

    name = "pathfinder"

    def __init__(self, grid: Grid) -> None:
        self.grid = grid

    def find_path(self, start: int, target: int, allow_diagonals: bool = False) -> PathResult:
        """Find a shortest route from start to target (cell indices).

        The returned path excludes start and includes target.
        """
        failure = self.check_query(start, target)
        if failure is not None:
            logger.debug(
                "%s %r -> %r rejected: %s", self.name, start, target, failure.name
            )
            return PathResult(failure=failure)

        began = time.perf_counter()
        found = self._search(start, target, allow_diagonals)
        duration_ms = (time.perf_counter() - began) * 1000.0

        if found is None:
            logger.debug(
                "%s %d -> %d unreachable (%.3f ms)", self.name, start, target, duration_ms
            )
            return PathResult(duration_ms=duration_ms, failure=PathFailure.UNREACHABLE)

        path, cost = found
        logger.debug(
            "%s %d -> %d: %d steps, cost %d (%.3f ms)",
            self.name, start, target, len(path), cost, duration_ms,
        )
        return PathResult(path=tuple(path), duration_ms=duration_ms, cost=cost)

    def check_query(self, start: int, target: int) -> PathFailure | None:
        """Classify a query that cannot produce a route, or None if it can."""
        if not self.grid.contains(start) or not self.grid.contains(target):
            return PathFailure.INVALID_INDEX
        if start == target:
            return PathFailure.DEGENERATE
        if not self.grid.is_walkable(target):
            return PathFailure.BLOCKED_TARGET
        if not self.grid.is_walkable(start):
            return PathFailure.BLOCKED_START
        return None

    @abstractmethod
    def _search(
        self, start: int, target: int, allow_diagonals: bool
    ) -> tuple[list[int], int] | None:
        """Run the search on a pre-validated query.

        Returns (path, cost) with the path excluding start, or None if
        target can't be reached.
        """
        ...


def reconstruct_path(came_from: dict[int, int], start: int, target: int) -> list[int]:
    """Walk parent links back from target, then reverse. Start excluded."""
    path: list[int] = []
    current = target
    while current != start:
        path.append(current)
        current = came_from[current]
    path.reverse()
    return path
