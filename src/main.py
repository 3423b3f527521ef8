"""Tile pathfinding entry point.

Usage:
    Fixed target:   python -m src.main --target 4
    Dijkstra:       python -m src.main --target 44 --algorithm dijkstra
    Diagonals:      python -m src.main --target 99 --diagonals
    Random target:  python -m src.main --random-target --seed 7
    Show route:     python -m src.main --target 44 --show-map
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from src.config import DEFAULT_SEED, PLAYER_START_INDEX
from src.pathfinding.grid import BLOCKED_CHAR, Grid
from src.pathfinding.result import Algorithm, PathResult
from src.pathfinding.service import PathfindingService
from src.pathfinding.targets import pick_random_target

logger = logging.getLogger(__name__)

START_CHAR = "S"
ROUTE_CHAR = "*"


def render_route(grid: Grid, start: int, path: Sequence[int]) -> str:
    """ASCII map with the start cell and route marked."""
    rows = [list(line) for line in grid.to_ascii().splitlines()]
    for index in path:
        x, y = grid.from_index(index)
        rows[y][x] = ROUTE_CHAR
    if grid.contains(start):
        x, y = grid.from_index(start)
        if rows[y][x] != BLOCKED_CHAR:
            rows[y][x] = START_CHAR
    return "\n".join("".join(row) for row in rows)


def format_result(algorithm: Algorithm, start: int, target: int, result: PathResult) -> str:
    if not result.found:
        return f"{algorithm.value}: no path {start} -> {target} ({result.failure.name})"
    route = " ".join(str(i) for i in result.path)
    return (
        f"{algorithm.value}: {start} -> {target} [{route}] "
        f"{result.steps} steps, cost {result.cost}, {result.duration_ms:.3f} ms"
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Grid pathfinding demo (A* / Dijkstra)")
    parser.add_argument(
        "--algorithm", choices=[a.value for a in Algorithm], default=Algorithm.ASTAR.value,
        help="Search algorithm (default: astar)",
    )
    parser.add_argument(
        "--diagonals", action="store_true",
        help="Allow 8-directional movement",
    )
    parser.add_argument(
        "--start", type=int, default=PLAYER_START_INDEX, metavar="INDEX",
        help=f"Start cell index (default: {PLAYER_START_INDEX})",
    )
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument(
        "--target", type=int, metavar="INDEX",
        help="Target cell index",
    )
    group.add_argument(
        "--random-target", action="store_true",
        help="Pick a random valid target",
    )
    parser.add_argument(
        "--seed", type=int, default=DEFAULT_SEED,
        help=f"Seed for --random-target (default: {DEFAULT_SEED})",
    )
    parser.add_argument(
        "--show-map", action="store_true",
        help="Print the grid with the route marked",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        service = PathfindingService()
        algorithm = Algorithm(args.algorithm)
    except ValueError as e:
        parser.error(str(e))

    if args.random_target:
        target = pick_random_target(service, args.start, args.seed)
        if target is None:
            print("No valid target found")
            return 1
        logger.info("Random target %d (seed %d)", target, args.seed)
    else:
        target = args.target

    result = service.find_path(args.start, target, algorithm, args.diagonals)
    print(format_result(algorithm, args.start, target, result))
    if args.show_map:
        print(render_route(service.grid, args.start, result.path))
    return 0 if result.found else 1


if __name__ == "__main__":
    sys.exit(main())
