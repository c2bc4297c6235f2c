import logging
from typing import Optional, Tuple

from .constants import ROWS, COLS, START, OBSTACLE_PROBABILITY, ALGORITHM_NAMES
from .grid import Grid
from .result import SearchResult
from .search import run_search

logger = logging.getLogger(__name__)


class SearchSession:
    """Owns one grid and allows a single search run at a time.

    `is_running` is raised by `run` and stays up until the presentation layer
    calls `finish` (end of replay) or `clear`. While it is up, new runs and
    obstacle edits are rejected.
    """

    def __init__(self, rows: int = ROWS, cols: int = COLS,
                 start: Tuple[int, int] = START, end: Optional[Tuple[int, int]] = None):
        self.grid = Grid(rows, cols, start, end)
        self.is_running = False
        self.last_result: Optional[SearchResult] = None

    def run(self, algorithm: str, **options) -> Optional[SearchResult]:
        if self.is_running:
            logger.warning("Search already in progress, ignoring %s", algorithm)
            return None

        self.is_running = True
        try:
            result = run_search(self.grid, algorithm, **options)
        except Exception:
            self.is_running = False
            raise

        self.last_result = result
        logger.info("%s finished: %d nodes visited, %s",
                    ALGORITHM_NAMES[algorithm], len(result.visited),
                    f"path of {result.path_length}" if result.found else "no path")
        return result

    def finish(self):
        self.is_running = False

    # ---------- grid edits ----------
    def toggle_obstacle(self, row: int, col: int) -> bool:
        if self.is_running:
            return False
        return self.grid.toggle_obstacle(row, col)

    def generate_random_maze(self, probability: float = OBSTACLE_PROBABILITY, seed=None) -> bool:
        if self.is_running:
            return False
        self.grid.generate_random_maze(probability, seed=seed)
        self.last_result = None
        return True

    def clear(self):
        self.is_running = False
        self.last_result = None
        self.grid.clear()
