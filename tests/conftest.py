"""Shared test fixtures for the pathfinding tests."""

from __future__ import annotations

import pytest

from src.pathfinding.grid import Grid, default_grid
from src.pathfinding.service import PathfindingService


@pytest.fixture
def world() -> Grid:
    """The fixed 10x10 world."""
    return default_grid()


@pytest.fixture
def service() -> PathfindingService:
    """A service over the fixed 10x10 world."""
    return PathfindingService()
