"""Random target selection.

Uses a local LCG for random number generation (NOT Python's random module)
so a given seed always picks the same target.
"""

from __future__ import annotations

from src.config import MAX_TARGET_ATTEMPTS
from src.pathfinding.service import PathfindingService


def _lcg_next(state: int) -> tuple[int, int]:
    """Single step of LCG PRNG. Returns (new_state, raw_value)."""
    state = (state * 1664525 + 1013904223) & 0xFFFFFFFF
    return state, state


def pick_random_target(
    service: PathfindingService,
    current: int,
    seed: int,
    max_attempts: int = MAX_TARGET_ATTEMPTS,
) -> int | None:
    """Pick a random cell other than current that passes is_valid_target.

    Draws up to max_attempts candidates. Returns None if none of them
    qualified, in which case the caller should stay put.

    Args:
        service: Service whose grid and validity check to use.
        current: Cell the player occupies now.
        seed: PRNG seed.
        max_attempts: Number of draws before giving up.
    """
    rng = seed & 0xFFFFFFFF
    size = service.grid.size
    for _ in range(max_attempts):
        rng, val = _lcg_next(rng)
        candidate = (val >> 8) % size  # low LCG bits cycle with a short period
        if candidate != current and service.is_valid_target(candidate):
            return candidate
    return None
