"""
Tests for text rendering.
"""

import io

import pytest

from lifegrid.engine import GameOfLife
from lifegrid.grid import cells_to_grid
from lifegrid.rendering import format_grid, render


class TestFormatGrid:
    """Tests for grid formatting."""

    def test_numeric(self):
        """Numeric style writes 1/0, each followed by a space, then a blank line."""
        grid = cells_to_grid({(0, 1), (1, 0)}, 2, 3)

        assert format_grid(grid) == "0 1 0 \n1 0 0 \n\n"

    def test_bool(self):
        """Bool style writes true/false markers."""
        grid = cells_to_grid({(0, 0)}, 1, 2)

        assert format_grid(grid, style="bool") == "true false \n\n"

    def test_line_structure(self):
        """One line per row, one token per column."""
        text = format_grid(cells_to_grid(set(), 4, 6))
        lines = text.split("\n")

        assert lines[:4] == ["0 0 0 0 0 0 "] * 4
        assert lines[4:] == ["", ""]

    def test_unknown_style(self):
        """Unknown styles are rejected."""
        with pytest.raises(ValueError, match="style"):
            format_grid(cells_to_grid(set(), 1, 1), style="emoji")


class TestRender:
    """Tests for engine rendering."""

    def test_render_to_stream(self, glider_engine):
        """render writes the engine's current grid."""
        out = io.StringIO()

        render(glider_engine, out)

        lines = out.getvalue().split("\n")
        assert lines[0] == "0 1 0 0 0 0 0 0 0 0 "
        assert lines[1] == "0 0 1 0 0 0 0 0 0 0 "
        assert lines[2] == "1 1 1 0 0 0 0 0 0 0 "
        assert lines[10] == ""

    def test_render_defaults_to_stdout(self, capsys):
        """render writes to stdout by default."""
        render(GameOfLife(1, 2))

        assert capsys.readouterr().out == "0 0 \n\n"
