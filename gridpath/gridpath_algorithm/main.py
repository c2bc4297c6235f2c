import logging

from .constants import ROWS, COLS, START, ALGORITHM_NAMES
from .envs import create_test_environment
from .grid import Grid
from .result import PathNotFound
from .search import run_search


def run_console_test(rows=ROWS, cols=COLS):
    print("=== Grid Pathfinding Console Test ===")
    grid = Grid(rows, cols, START)
    grid.add_obstacles(create_test_environment(rows, cols))
    print(f"Grid: {rows}x{cols}, obstacles: {len(grid.obstacles())}")
    print()
    print(f"{'Algorithm':<10} {'Visited':>8} {'Path':>6}  Status")

    results = {}
    for algorithm, name in ALGORITHM_NAMES.items():
        result = run_search(grid, algorithm)
        results[algorithm] = result
        try:
            result.raise_for_status()
            status = "found"
        except PathNotFound as e:
            status = str(e)
        print(f"{name:<10} {len(result.visited):>8} {result.path_length:>6}  {status}")
    return results


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    run_console_test()
