"""Pathfinding service: the single entry point for the UI and renderer.

Owns one Grid and one engine per Algorithm. Callers check targets with
is_valid_target(), then ask for a route with find_path(); nothing else
about the engines is exposed.
"""

from __future__ import annotations

from src.pathfinding.astar import AStarPathfinder
from src.pathfinding.dijkstra import DijkstraPathfinder
from src.pathfinding.grid import Grid, default_grid
from src.pathfinding.result import Algorithm, PathResult


class PathfindingService:
    """Dispatches path queries to the A* or Dijkstra engine."""

    def __init__(self, grid: Grid | None = None) -> None:
        self._grid = grid if grid is not None else default_grid()
        self._astar = AStarPathfinder(self._grid)
        self._dijkstra = DijkstraPathfinder(self._grid)

    @property
    def grid(self) -> Grid:
        return self._grid

    def is_valid_target(self, index: int) -> bool:
        """In range and walkable."""
        return self._grid.is_walkable(index)

    def set_diagonal_policy(self, allow_diagonals: bool) -> None:
        """Rebuild the Dijkstra graph. A* takes the flag per query instead."""
        self._dijkstra.rebuild(allow_diagonals)

    def find_path(
        self,
        start: int,
        target: int,
        algorithm: Algorithm | str = Algorithm.ASTAR,
        allow_diagonals: bool | None = None,
    ) -> PathResult:
        """Route from start to target (cell indices) with the chosen algorithm.

        Leaving allow_diagonals as None means 4-way movement for A* and the
        policy last set with set_diagonal_policy() for Dijkstra. For Dijkstra,
        a flag that differs from the graph's current policy triggers a
        rebuild before searching.

        Raises:
            ValueError: algorithm is not a known Algorithm tag.
        """
        algorithm = Algorithm(algorithm)
        if algorithm is Algorithm.DIJKSTRA:
            return self._dijkstra.find_path(start, target, allow_diagonals)
        return self._astar.find_path(start, target, bool(allow_diagonals))
