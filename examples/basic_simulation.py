#!/usr/bin/env python3
"""
Basic lifegrid example.

This script demonstrates:
1. Creating an engine and seeding it with classic patterns
2. Stepping it with a progress bar and a periodic callback
3. Measuring the board with the metrics helpers
"""

from lifegrid import GameOfLife, GLIDER, BLINKER, format_grid
from lifegrid.grid import place_pattern
from lifegrid.metrics import bounding_box, make_stop_predicate


def main():
    print("=" * 60)
    print("lifegrid - Conway's Game of Life")
    print("Basic Simulation Example")
    print("=" * 60)
    print()

    # A glider in the top-left corner and a blinker further down
    engine = GameOfLife(16, 24)
    layout = engine.get_grid().copy()
    place_pattern(layout, GLIDER)
    place_pattern(layout, BLINKER, row=12, col=18)
    engine.set_grid(layout)

    print("Initial state:")
    print(f"  Population: {engine.population}")
    print(f"  Bounding box: {bounding_box(engine.get_grid())}")
    print(format_grid(engine.view()))

    # Run
    print("Running for 40 generations...")

    def progress_callback(e: GameOfLife):
        print(f"  Generation {e.generation}: population={e.population}")

    engine.run(
        steps=40,
        callback=progress_callback,
        callback_interval=10,
        show_progress=True,
        stop_when=make_stop_predicate("empty"),
    )
    print()

    print("Final state:")
    print(f"  Population: {engine.population}")
    print(f"  Bounding box: {bounding_box(engine.get_grid())}")
    print(format_grid(engine.view()))

    print("To watch the classic demo, run:")
    print("  python -m lifegrid.main")
    print()


if __name__ == "__main__":
    main()
