from typing import Tuple

from .constants import INFINITY


class Node:
    """Search-state record for one grid cell"""

    def __init__(self, row: int, col: int, is_start=False, is_end=False):
        # Position in the grid, fixed for the lifetime of the node
        self.row = row
        self.col = col
        self.is_start = is_start
        self.is_end = is_end
        self.is_obstacle = False
        self.is_visited = False
        self.is_path = False
        self.distance = INFINITY         # cost from start
        self.heuristic = INFINITY        # Manhattan estimate to end (A*)
        self.previous_node = None        # predecessor in the search tree

    @property
    def position(self) -> Tuple[int, int]:
        return (self.row, self.col)

    def reset(self):
        """Forget everything a search run wrote into the node"""
        self.is_visited = False
        self.is_path = False
        self.distance = INFINITY
        self.heuristic = INFINITY
        self.previous_node = None

    def __eq__(self, other):
        if not isinstance(other, Node):
            return NotImplemented
        return (self.row, self.col) == (other.row, other.col)

    def __hash__(self):
        return hash((self.row, self.col))

    def __repr__(self):
        return f"Node({self.row}, {self.col})"
