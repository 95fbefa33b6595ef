"""
Game of Life engine.

Owns the current grid and a working grid, and advances the automaton one
generation at a time.
"""

from typing import Any, Callable, Optional

import numpy as np
from tqdm import tqdm

from .grid import as_grid, create_empty_grid, place_pattern
from .metrics import StopPredicate, population
from .rules import next_generation


class GameOfLife:
    """
    Fixed-size Game of Life on a finite (non-wrapping) board.

    The board shape is chosen at construction and never changes.

    get_grid() hands out the engine's own current grid, not a copy. Code
    that writes to it bypasses the rule; the engine does not protect its
    state against such external mutation. Use view() for read-only access.

    Attributes:
        generation: Number of updates applied since construction or reset
    """

    def __init__(self, rows: int, cols: int):
        """
        Initialize engine with all-dead grids.

        Args:
            rows: Number of rows
            cols: Number of columns
        """
        self._current = create_empty_grid(rows, cols)
        self._working = create_empty_grid(rows, cols)
        self.generation = 0

    @property
    def shape(self) -> tuple[int, int]:
        """Grid dimensions (rows, cols)."""
        return self._current.shape

    @property
    def population(self) -> int:
        """Number of alive cells in the current grid."""
        return population(self._current)

    def set_grid(self, g: Any, strict: bool = False) -> None:
        """
        Replace the current grid's contents with g, cell by cell.

        g is aligned at the top-left corner. Only the overlapping region is
        copied: cells of the current grid outside it keep their values, and
        cells of g beyond the board are ignored. The contents are copied, so
        later changes to g do not reach the engine.

        Args:
            g: 2-D array-like of cells
            strict: If True, require g to have exactly the board's shape
        """
        g = as_grid(g)
        if strict and g.shape != self.shape:
            raise ValueError(f"grid shape {g.shape} does not match engine shape {self.shape}")
        place_pattern(self._current, g)

    def get_grid(self) -> np.ndarray:
        """
        Current grid, by reference.

        The same array object is returned for the engine's whole lifetime;
        update() rewrites it in place.
        """
        return self._current

    def view(self) -> np.ndarray:
        """Read-only view of the current grid."""
        view = self._current.view()
        view.flags.writeable = False
        return view

    def update(self) -> None:
        """
        Advance by one generation.

        The next generation is computed from the current grid into the
        working grid, then copied over the current grid in one step.
        """
        next_generation(self._current, out=self._working)
        np.copyto(self._current, self._working)
        self.generation += 1

    def step(self, n: int = 1) -> None:
        """Apply update() n times."""
        for _ in range(n):
            self.update()

    def run(
        self,
        steps: int,
        callback: Optional[Callable[["GameOfLife"], None]] = None,
        callback_interval: int = 1,
        show_progress: bool = False,
        stop_when: Optional[StopPredicate] = None,
    ) -> int:
        """
        Run the engine for multiple generations.

        Args:
            steps: Maximum number of updates
            callback: Optional function called after every callback_interval updates
            callback_interval: How often to call callback
            show_progress: Whether to show a progress bar on stderr
            stop_when: Optional predicate (previous, current) -> bool ending the run early

        Returns:
            Number of updates performed
        """
        iterator = range(steps)
        if show_progress:
            iterator = tqdm(iterator, desc="Generations")

        performed = 0
        for i in iterator:
            previous = self._current.copy() if stop_when is not None else None
            self.update()
            performed += 1

            if callback is not None and (i + 1) % callback_interval == 0:
                callback(self)

            if stop_when is not None and stop_when(previous, self._current):
                break

        return performed

    def reset(self) -> None:
        """Clear both grids and the generation counter."""
        self._current.fill(False)
        self._working.fill(False)
        self.generation = 0

    def get_state_dict(self) -> dict:
        """Get serializable state dictionary."""
        return {
            "generation": self.generation,
            "shape": list(self.shape),
            "grid": self._current.tolist(),
        }
