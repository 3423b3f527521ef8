"""Tests for random target selection."""

from src.pathfinding.grid import Grid
from src.pathfinding.service import PathfindingService
from src.pathfinding.targets import pick_random_target


class TestPickRandomTarget:
    def test_target_is_valid_and_not_current(self, service):
        for seed in range(20):
            target = pick_random_target(service, current=0, seed=seed)
            assert target is not None
            assert target != 0
            assert service.is_valid_target(target)

    def test_same_seed_same_target(self, service):
        assert pick_random_target(service, 0, seed=7) == pick_random_target(service, 0, seed=7)

    def test_seeds_spread_over_grid(self, service):
        targets = {pick_random_target(service, 0, seed=seed) for seed in range(50)}
        assert len(targets) > 10

    def test_gives_up_when_nothing_qualifies(self):
        service = PathfindingService(Grid.from_ascii("""
            .X
            XX
        """))
        assert pick_random_target(service, current=0, seed=1) is None

    def test_zero_attempts(self, service):
        assert pick_random_target(service, 0, seed=1, max_attempts=0) is None
