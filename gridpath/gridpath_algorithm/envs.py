from typing import List, Tuple

from .constants import ROWS, COLS


def create_test_environment(rows: int = ROWS, cols: int = COLS) -> List[Tuple[int, int]]:
    """Obstacle cells of a test environment: vertical walls with alternating gaps"""
    obstacles = []
    for wall_index, col in enumerate(range(3, cols - 1, 4)):
        # gap at the bottom for even walls, at the top for odd ones
        gap = rows - 2 if wall_index % 2 == 0 else 1
        for r in range(rows):
            if abs(r - gap) > 1:
                obstacles.append((r, col))
    return obstacles


def create_blocked_start_environment(start: Tuple[int, int] = (0, 0),
                                     rows: int = ROWS, cols: int = COLS) -> List[Tuple[int, int]]:
    """Every neighbour of `start` is an obstacle"""
    r, c = start
    cells = [(r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)]
    return [(nr, nc) for nr, nc in cells if 0 <= nr < rows and 0 <= nc < cols]


def create_perimeter_environment() -> List[Tuple[int, int]]:
    """3x3 grid, start (0,0), end (2,2): only the left/bottom border is open"""
    return [(0, 1), (1, 1)]
