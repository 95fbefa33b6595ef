"""
Command-line driver for lifegrid.

Usage:
    python -m lifegrid.main
    python -m lifegrid.main --pattern blinker --generations 10
    python -m lifegrid.main --rows 20 --cols 40 --delay-ms 0 --stop-when static

Without arguments this prints a glider on a 10x10 board for 100
generations, 50 ms apart.
"""

import argparse
import sys
import time
from typing import Optional, TextIO

from .config import Config, RENDER_STYLES, STOP_POLICIES
from .engine import GameOfLife
from .grid import PATTERNS, create_empty_grid, get_pattern, place_pattern
from .metrics import make_stop_predicate
from .rendering import render


def seed(engine: GameOfLife, pattern: str = "glider") -> None:
    """
    Install a named pattern at the top-left corner of the board.

    The pattern is laid out on a board-sized scratch grid (clamped if it
    is larger than the board) and handed to the engine by value.

    Args:
        engine: Engine to seed
        pattern: Registered pattern name
    """
    layout = create_empty_grid(*engine.shape)
    place_pattern(layout, get_pattern(pattern))
    engine.set_grid(layout)


def run(config: Config, stream: Optional[TextIO] = None) -> GameOfLife:
    """
    Seed an engine and print every generation.

    Generation 0 is printed first, then config.generations updates are
    applied, each followed by a render and a pause of config.delay_ms.

    Args:
        config: Run configuration
        stream: Output stream for rendered grids (defaults to sys.stdout)

    Returns:
        The engine in its final state
    """
    engine = GameOfLife(config.rows, config.cols)
    seed(engine, config.pattern)
    render(engine, stream, style=config.style)

    stop_when = make_stop_predicate(config.stop_when)

    def show(e: GameOfLife) -> None:
        render(e, stream, style=config.style)
        time.sleep(config.delay_seconds)

    engine.run(config.generations, callback=show, stop_when=stop_when)
    return engine


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser with all options."""
    parser = argparse.ArgumentParser(
        description="lifegrid - Conway's Game of Life on a fixed-size board",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    # Grid options
    parser.add_argument(
        "--rows", type=int, default=10,
        help="Number of grid rows"
    )
    parser.add_argument(
        "--cols", type=int, default=10,
        help="Number of grid columns"
    )

    # Loop options
    parser.add_argument(
        "--generations", type=int, default=100,
        help="Number of generations after the seed"
    )
    parser.add_argument(
        "--delay-ms", type=int, default=50, dest="delay_ms",
        help="Pause between generations in milliseconds"
    )
    parser.add_argument(
        "--stop-when", type=str, default="never", dest="stop_when",
        choices=list(STOP_POLICIES),
        help="End the run early when the board is empty or stops changing"
    )

    # Seed and output options
    parser.add_argument(
        "--pattern", type=str, default="glider",
        choices=sorted(PATTERNS),
        help="Seed pattern placed at the top-left corner"
    )
    parser.add_argument(
        "--style", type=str, default="numeric",
        choices=list(RENDER_STYLES),
        help="Cell markers: numeric (1/0) or bool (true/false)"
    )
    parser.add_argument(
        "--verbose", action="store_true",
        help="Print a run banner and summary to stderr"
    )

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = Config.from_args(args)
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        print("lifegrid", file=sys.stderr)
        print(f"  Grid: {config.rows}x{config.cols}", file=sys.stderr)
        print(f"  Generations: {config.generations}", file=sys.stderr)
        print(f"  Pattern: {config.pattern}", file=sys.stderr)
        print(file=sys.stderr)

    engine = run(config)

    if args.verbose:
        print(
            f"Finished after {engine.generation} generation(s), "
            f"population {engine.population}",
            file=sys.stderr,
        )

    return 0


if __name__ == "__main__":
    sys.exit(main())
