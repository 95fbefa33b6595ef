"""
lifegrid - Conway's Game of Life

A fixed-size, non-wrapping Game of Life engine with a console renderer.
"""

__version__ = "0.1.0"

from .config import Config
from .engine import GameOfLife
from .grid import GLIDER, BLINKER, BLOCK, create_empty_grid
from .rendering import format_grid, render

__all__ = [
    "Config",
    "GameOfLife",
    "GLIDER",
    "BLINKER",
    "BLOCK",
    "create_empty_grid",
    "format_grid",
    "render",
    "__version__",
]
