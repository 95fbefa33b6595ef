"""
Pytest configuration and fixtures for lifegrid tests.
"""

import numpy as np
import pytest

from lifegrid.config import Config
from lifegrid.engine import GameOfLife
from lifegrid.grid import GLIDER


@pytest.fixture
def default_config() -> Config:
    """Default configuration for tests."""
    return Config()


@pytest.fixture
def fast_config() -> Config:
    """Default board without pacing, for driver tests."""
    return Config(delay_ms=0)


@pytest.fixture
def engine() -> GameOfLife:
    """Empty 10x10 engine."""
    return GameOfLife(10, 10)


@pytest.fixture
def glider_engine(engine: GameOfLife) -> GameOfLife:
    """10x10 engine seeded with a glider at the top-left corner."""
    engine.set_grid(GLIDER)
    return engine


@pytest.fixture
def blinker_grid() -> np.ndarray:
    """Horizontal blinker at row 5, columns 4-6 on a 10x10 board."""
    grid = np.zeros((10, 10), dtype=bool)
    grid[5, 4:7] = True
    return grid
