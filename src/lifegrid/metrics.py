"""
Metrics and stop predicates for lifegrid runs.
"""

from typing import Callable, Optional

import numpy as np


def population(grid: np.ndarray) -> int:
    """
    Count alive cells.

    Args:
        grid: Boolean grid

    Returns:
        Number of alive cells
    """
    return int(np.count_nonzero(grid))


def is_empty(grid: np.ndarray) -> bool:
    """True when no cell is alive."""
    return not grid.any()


def bounding_box(grid: np.ndarray) -> Optional[tuple[int, int, int, int]]:
    """
    Smallest box containing every alive cell.

    Args:
        grid: Boolean grid

    Returns:
        (min_row, min_col, max_row, max_col), inclusive, or None for an
        empty grid
    """
    rows, cols = np.nonzero(grid)
    if rows.size == 0:
        return None
    return (int(rows.min()), int(cols.min()), int(rows.max()), int(cols.max()))


StopPredicate = Callable[[np.ndarray, np.ndarray], bool]


def _stop_if_empty(previous: np.ndarray, current: np.ndarray) -> bool:
    return is_empty(current)


def _stop_if_static(previous: np.ndarray, current: np.ndarray) -> bool:
    return bool(np.array_equal(previous, current))


def make_stop_predicate(policy: str) -> Optional[StopPredicate]:
    """
    Build an early-stop predicate for a named policy.

    Predicates receive the grid before and after an update and return True
    when the run should end.

    Args:
        policy: "never", "empty" or "static"

    Returns:
        Predicate, or None for "never"
    """
    if policy == "never":
        return None
    if policy == "empty":
        return _stop_if_empty
    if policy == "static":
        return _stop_if_static
    raise ValueError(f"stop policy must be one of ('never', 'empty', 'static'), got {policy}")
