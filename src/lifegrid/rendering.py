"""
Text rendering of lifegrid boards.

Each row is printed as its cell markers, every marker followed by one
space, and the whole board is followed by a blank line.
"""

import sys
from typing import Optional, TextIO

import numpy as np


MARKERS = {
    "numeric": ("0", "1"),
    "bool": ("false", "true"),
}


def format_grid(grid: np.ndarray, style: str = "numeric") -> str:
    """
    Format a grid as text.

    Args:
        grid: Boolean grid [H, W]
        style: "numeric" (1/0) or "bool" (true/false)

    Returns:
        One line per row plus a trailing blank line
    """
    if style not in MARKERS:
        raise ValueError(f"style must be one of {tuple(MARKERS)}, got {style}")
    dead, alive = MARKERS[style]

    lines = []
    for row in grid:
        lines.append("".join(f"{alive if cell else dead} " for cell in row) + "\n")
    lines.append("\n")
    return "".join(lines)


def render(engine: "GameOfLife", stream: Optional[TextIO] = None, style: str = "numeric") -> None:
    """
    Write the engine's current grid to a text stream.

    Args:
        engine: Engine to render
        stream: Output stream (defaults to sys.stdout)
        style: Marker style, see format_grid
    """
    if stream is None:
        stream = sys.stdout
    stream.write(format_grid(engine.view(), style=style))
    stream.flush()
