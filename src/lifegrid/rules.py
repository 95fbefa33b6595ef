"""
Conway's Game of Life transition rule (B3/S23) on a finite grid.

Neighbours outside [0, rows) x [0, cols) are absent: they never count as
alive and the board does not wrap around.
"""

from typing import Optional

import numpy as np

from .grid import NEIGHBOUR_OFFSETS


# Birth on exactly 3 neighbours, survival on 2 or 3
BIRTH = frozenset({3})
SURVIVAL = frozenset({2, 3})


def count_alive_neighbours(grid: np.ndarray, row: int, col: int) -> int:
    """
    Count alive neighbours of a single cell.

    Args:
        grid: Current grid
        row: Cell row
        col: Cell column

    Returns:
        Number of alive cells among the (up to) eight in-range neighbours
    """
    H, W = grid.shape
    alive = 0
    for dr, dc in NEIGHBOUR_OFFSETS:
        r = row + dr
        c = col + dc
        if 0 <= r < H and 0 <= c < W and grid[r, c]:
            alive += 1
    return alive


def evolve_cell(alive: bool, neighbours: int) -> bool:
    """
    Next state of one cell.

    An alive cell survives with 2 or 3 neighbours, a dead cell is born
    with exactly 3.
    """
    if alive:
        return neighbours in SURVIVAL
    return neighbours in BIRTH


def neighbour_counts(grid: np.ndarray) -> np.ndarray:
    """
    Alive-neighbour count for every cell.

    The grid is padded with one ring of dead cells so that each offset in
    NEIGHBOUR_OFFSETS becomes a plain slice; the padding is what drops
    out-of-range neighbours.

    Args:
        grid: Boolean grid [H, W]

    Returns:
        Integer array [H, W] of counts in 0..8
    """
    H, W = grid.shape
    padded = np.pad(grid.astype(np.uint8), 1, mode="constant", constant_values=0)

    counts = np.zeros((H, W), dtype=np.uint8)
    for dr, dc in NEIGHBOUR_OFFSETS:
        counts += padded[1 + dr:1 + dr + H, 1 + dc:1 + dc + W]

    return counts


def next_generation(grid: np.ndarray, out: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Apply the rule to every cell simultaneously.

    Every next state is derived from the given grid only; the input is
    never modified, so no cell sees a partially updated neighbourhood.

    Args:
        grid: Current generation [H, W]
        out: Optional array of the same shape to write the result into

    Returns:
        Next generation (out, if given)
    """
    counts = neighbour_counts(grid)

    born = ~grid & np.isin(counts, list(BIRTH))
    survive = grid & np.isin(counts, list(SURVIVAL))

    if out is None:
        return born | survive

    if out.shape != grid.shape:
        raise ValueError(f"out shape {out.shape} does not match grid shape {grid.shape}")
    np.logical_or(born, survive, out=out)
    return out
