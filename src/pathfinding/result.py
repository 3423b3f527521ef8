"""Search results, failure kinds, and algorithm tags."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class Algorithm(Enum):
    """Which search engine answers a query."""
    ASTAR = "astar"
    DIJKSTRA = "dijkstra"


class PathFailure(IntEnum):
    """Why a query produced an empty path. Checked in this order."""
    INVALID_INDEX = 1   # start or target outside the grid
    DEGENERATE = 2      # start == target
    BLOCKED_TARGET = 3  # target is an obstacle
    BLOCKED_START = 4   # start is an obstacle
    UNREACHABLE = 5     # both walkable, no connecting route


@dataclass(frozen=True, slots=True)
class PathResult:
    """Outcome of a single path query.

    Attributes:
        path: Cell indices to visit, start excluded, target included.
            Empty when no route was produced.
        duration_ms: Wall-clock time spent searching (monotonic clock).
            Zero when the query was rejected before searching.
        cost: Summed integer edge cost of the path.
        failure: None on success, otherwise the reason the path is empty.
    """
    path: tuple[int, ...] = ()
    duration_ms: float = 0.0
    cost: int = 0
    failure: PathFailure | None = None

    @property
    def found(self) -> bool:
        return self.failure is None

    @property
    def steps(self) -> int:
        return len(self.path)
