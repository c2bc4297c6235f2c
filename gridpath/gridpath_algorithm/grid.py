import logging
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .constants import (ROWS, COLS, START, DIR4, OBSTACLE_PROBABILITY,
                        EMPTY, OBSTACLE, START_CELL, END_CELL, VISITED, PATH)
from .node import Node

logger = logging.getLogger(__name__)


class Grid:
    """Fixed-size rectangular grid of Nodes with one start and one end"""

    def __init__(self, rows: int = ROWS, cols: int = COLS,
                 start: Tuple[int, int] = START, end: Optional[Tuple[int, int]] = None):
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}")
        if end is None:
            end = (rows - 1, cols - 1)
        for name, (r, c) in (('start', start), ('end', end)):
            if not (0 <= r < rows and 0 <= c < cols):
                raise ValueError(f"{name} {(r, c)} is outside a {rows}x{cols} grid")

        self.rows = rows
        self.cols = cols
        self.start = tuple(start)
        self.end = tuple(end)
        self.nodes: List[List[Node]] = []
        self.create_nodes()

    def create_nodes(self):
        """(Re)build every node with default state; obstacles are dropped"""
        self.nodes = [
            [Node(r, c, is_start=(r, c) == self.start, is_end=(r, c) == self.end)
             for c in range(self.cols)]
            for r in range(self.rows)
        ]

    # ---------- access ----------
    def get_node(self, row: int, col: int) -> Optional[Node]:
        if 0 <= row < self.rows and 0 <= col < self.cols:
            return self.nodes[row][col]
        return None

    @property
    def start_node(self) -> Node:
        return self.nodes[self.start[0]][self.start[1]]

    @property
    def end_node(self) -> Node:
        return self.nodes[self.end[0]][self.end[1]]

    def __iter__(self) -> Iterator[Node]:
        for row in self.nodes:
            yield from row

    def obstacles(self) -> List[Tuple[int, int]]:
        return [node.position for node in self if node.is_obstacle]

    # ---------- state ----------
    def reset_search_state(self, clear_obstacles=False):
        for node in self:
            node.reset()
            if clear_obstacles:
                node.is_obstacle = False

    def clear(self):
        self.create_nodes()

    def set_obstacle(self, row: int, col: int, value: bool) -> bool:
        """Set the obstacle flag; start and end cells are left alone"""
        node = self.get_node(row, col)
        if node is None or node.is_start or node.is_end:
            return False
        node.is_obstacle = value
        return True

    def toggle_obstacle(self, row: int, col: int) -> bool:
        node = self.get_node(row, col)
        if node is None:
            return False
        return self.set_obstacle(row, col, not node.is_obstacle)

    def add_obstacles(self, positions):
        for r, c in positions:
            self.set_obstacle(r, c, True)

    def generate_random_maze(self, probability: float = OBSTACLE_PROBABILITY, seed=None):
        """Every free cell independently becomes an obstacle with `probability`"""
        rng = np.random.default_rng(seed)
        mask = rng.random((self.rows, self.cols)) < probability
        for node in self:
            if node.is_start or node.is_end:
                continue
            node.is_obstacle = bool(mask[node.row, node.col])
        logger.debug("Random maze: %d obstacles on %dx%d grid",
                     len(self.obstacles()), self.rows, self.cols)

    # ---------- snapshot ----------
    def to_array(self, include_search_state=True) -> np.ndarray:
        """Cell-state matrix; start and end win over everything else"""
        cells = np.full((self.rows, self.cols), EMPTY, dtype=np.int8)
        for node in self:
            if node.is_obstacle:
                cells[node.row, node.col] = OBSTACLE
            elif include_search_state and node.is_path:
                cells[node.row, node.col] = PATH
            elif include_search_state and node.is_visited:
                cells[node.row, node.col] = VISITED
        cells[self.start] = START_CELL
        if self.end != self.start:
            cells[self.end] = END_CELL
        return cells


def create_grid(rows: int = ROWS, cols: int = COLS,
                start: Tuple[int, int] = START, end: Optional[Tuple[int, int]] = None) -> Grid:
    return Grid(rows, cols, start, end)


def neighbors(node: Node, grid: Grid) -> List[Node]:
    """Up to four adjacent nodes in the order up, down, left, right"""
    result = []
    for dr, dc in DIR4:
        neighbor = grid.get_node(node.row + dr, node.col + dc)
        if neighbor is not None:
            result.append(neighbor)
    return result
