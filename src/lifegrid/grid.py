"""
Grid representation and seed patterns for lifegrid.

A grid is a 2-D numpy boolean array of shape [rows, cols], indexed
grid[row, col]. True is an alive cell, False a dead one.
"""

from typing import Any

import numpy as np


# (drow, dcol) for the eight Moore neighbours, row-major order
NEIGHBOUR_OFFSETS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


def create_empty_grid(rows: int, cols: int) -> np.ndarray:
    """
    Create an all-dead grid.

    Args:
        rows: Number of rows
        cols: Number of columns

    Returns:
        Boolean array [rows, cols] filled with False
    """
    if rows < 1 or cols < 1:
        raise ValueError(f"grid dimensions must be positive, got {rows}x{cols}")
    return np.zeros((rows, cols), dtype=bool)


def as_grid(data: Any) -> np.ndarray:
    """
    Coerce nested sequences or arrays into a boolean grid.

    Any truthy value (1, True, non-zero) becomes an alive cell.

    Args:
        data: 2-D array-like

    Returns:
        Boolean array with the same shape as data
    """
    grid = np.asarray(data).astype(bool)
    if grid.ndim != 2:
        raise ValueError(f"grid must be 2-D, got {grid.ndim} dimension(s)")
    return grid


def place_pattern(
    target: np.ndarray,
    pattern: Any,
    row: int = 0,
    col: int = 0,
) -> tuple[int, int]:
    """
    Copy a pattern into a grid with its top-left corner at (row, col).

    Only the region where pattern and target overlap is written. Cells of
    the target outside that region keep their values; cells of the pattern
    that fall beyond the target are dropped.

    Args:
        target: Grid to write into (modified in place)
        pattern: 2-D array-like of cells
        row: Target row of the pattern's top-left cell
        col: Target column of the pattern's top-left cell

    Returns:
        (rows, cols) extent that was actually copied
    """
    pattern = as_grid(pattern)
    H, W = target.shape

    if row < 0 or col < 0:
        raise ValueError(f"pattern origin must be non-negative, got ({row}, {col})")

    h = max(0, min(pattern.shape[0], H - row))
    w = max(0, min(pattern.shape[1], W - col))

    target[row:row + h, col:col + w] = pattern[:h, :w]
    return (h, w)


def cells_to_grid(cells: set[tuple[int, int]], rows: int, cols: int) -> np.ndarray:
    """Build a grid of the given size with the listed (row, col) cells alive."""
    grid = create_empty_grid(rows, cols)
    for r, c in cells:
        grid[r, c] = True
    return grid


def alive_cells(grid: np.ndarray) -> set[tuple[int, int]]:
    """Set of (row, col) coordinates of alive cells."""
    return {(int(r), int(c)) for r, c in zip(*np.nonzero(grid))}


# Classic patterns, anchored at their own top-left corner

# Translates by (+1, +1) every 4 generations
GLIDER = as_grid([
    [0, 1, 0],
    [0, 0, 1],
    [1, 1, 1],
])

# Period-2 oscillator
BLINKER = as_grid([
    [1, 1, 1],
])

# Still life
BLOCK = as_grid([
    [1, 1],
    [1, 1],
])

PATTERNS = {
    "glider": GLIDER,
    "blinker": BLINKER,
    "block": BLOCK,
    "empty": as_grid([[0]]),
}


def get_pattern(name: str) -> np.ndarray:
    """
    Look up a named seed pattern.

    Args:
        name: Registered pattern name

    Returns:
        Copy of the pattern grid
    """
    try:
        return PATTERNS[name].copy()
    except KeyError:
        raise ValueError(f"unknown pattern {name!r}, expected one of {sorted(PATTERNS)}") from None
