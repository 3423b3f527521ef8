"""Dijkstra (uniform-cost) pathfinding over a precomputed adjacency graph.

The graph maps every walkable cell to its (neighbor, cost) edges. It is
built once with diagonals disabled and only changes through rebuild(),
which clears it and reconstructs it under the new diagonal policy. There
is no incremental update. Do not call find_path() while a rebuild is
running on the same instance.
"""

from __future__ import annotations

import heapq
import logging

from src.pathfinding.base import Pathfinder, reconstruct_path
from src.pathfinding.grid import Grid
from src.pathfinding.result import PathResult

logger = logging.getLogger(__name__)


class DijkstraPathfinder(Pathfinder):
    """Uniform-cost search. The diagonal policy lives in the graph, not the query."""

    name = "dijkstra"

    def __init__(self, grid: Grid, allow_diagonals: bool = False) -> None:
        super().__init__(grid)
        self._allow_diagonals = allow_diagonals
        self._graph: dict[int, tuple[tuple[int, int], ...]] = {}
        self._build()

    @property
    def allow_diagonals(self) -> bool:
        """Diagonal policy the current graph was built with."""
        return self._allow_diagonals

    @property
    def edge_count(self) -> int:
        return sum(len(edges) for edges in self._graph.values())

    def edges(self, index: int) -> tuple[tuple[int, int], ...]:
        """(neighbor, cost) pairs for index in the current graph."""
        return self._graph.get(index, ())

    def rebuild(self, allow_diagonals: bool) -> None:
        """Reset the graph and reconstruct it with the given diagonal policy."""
        self._graph.clear()
        self._allow_diagonals = allow_diagonals
        self._build()

    def _build(self) -> None:
        for index in self.grid.walkable_indices():
            self._graph[index] = tuple(
                self.grid.neighbor_costs(index, self._allow_diagonals)
            )
        logger.info(
            "Built dijkstra graph: diagonals=%s, %d nodes, %d edges",
            self._allow_diagonals, len(self._graph), self.edge_count,
        )

    def find_path(
        self, start: int, target: int, allow_diagonals: bool | None = None
    ) -> PathResult:
        """Search the current graph.

        Passing allow_diagonals rebuilds the graph first if it differs from
        the current policy. Leaving it as None searches the graph as is.
        """
        if allow_diagonals is not None and allow_diagonals != self._allow_diagonals:
            self.rebuild(allow_diagonals)
        return super().find_path(start, target, self._allow_diagonals)

    def _search(
        self, start: int, target: int, allow_diagonals: bool
    ) -> tuple[list[int], int] | None:
        # queue: (distance, index)
        queue: list[tuple[int, int]] = [(0, start)]
        distances: dict[int, int] = {start: 0}
        came_from: dict[int, int] = {}
        settled: set[int] = set()

        while queue:
            dist, current = heapq.heappop(queue)

            if current in settled:
                continue
            settled.add(current)

            if current == target:
                return reconstruct_path(came_from, start, target), dist

            for neighbor, cost in self._graph.get(current, ()):
                if neighbor in settled:
                    continue
                new_dist = dist + cost
                if new_dist < distances.get(neighbor, new_dist + 1):
                    distances[neighbor] = new_dist
                    came_from[neighbor] = current
                    heapq.heappush(queue, (new_dist, neighbor))

        return None
