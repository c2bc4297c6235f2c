"""
Grid search algorithms: Dijkstra, A*, BFS and DFS.

Every algorithm expects a grid whose search state has been reset, writes
`is_visited`, `distance`, `heuristic` and `previous_node` into the nodes, and
returns a SearchResult holding the nodes in the order they were expanded.
A failed search is not an error here: the partial visited order comes back
with `found=False` so it can still be replayed.
"""

import heapq
import itertools
import logging
from collections import deque
from typing import List

from .constants import DIJKSTRA, ASTAR, BFS, DFS
from .grid import Grid, neighbors
from .node import Node
from .path import reconstruct_path, mark_path
from .result import SearchResult

logger = logging.getLogger(__name__)


def heuristic(node_a: Node, node_b: Node) -> int:
    """Manhattan distance"""
    return abs(node_a.row - node_b.row) + abs(node_a.col - node_b.col)


def update_unvisited_neighbors(node: Node, grid: Grid, strict=False) -> List[Node]:
    """Relax the open neighbours of `node` with unit edge cost.

    Without `strict` the neighbour is overwritten even when it already holds
    a shorter distance. On a 4-connected grid that only ever swaps the
    predecessor between routes of equal length.
    """
    updated = []
    for neighbor in neighbors(node, grid):
        if neighbor.is_visited or neighbor.is_obstacle:
            continue
        distance = node.distance + 1
        if strict and distance >= neighbor.distance:
            continue
        neighbor.distance = distance
        neighbor.previous_node = node
        updated.append(neighbor)
    return updated


def dijkstra(grid: Grid, strict_relaxation=False) -> SearchResult:
    start, end = grid.start_node, grid.end_node
    visited_order = []
    counter = itertools.count()

    start.distance = 0
    open_heap = [(start.distance, next(counter), start)]

    while open_heap:
        distance, _, node = heapq.heappop(open_heap)
        # skip entries superseded by a later relaxation
        if node.is_visited or distance != node.distance:
            continue

        node.is_visited = True
        visited_order.append(node)
        if node == end:
            return SearchResult(DIJKSTRA, visited_order, found=True)

        for neighbor in update_unvisited_neighbors(node, grid, strict=strict_relaxation):
            heapq.heappush(open_heap, (neighbor.distance, next(counter), neighbor))

    return SearchResult(DIJKSTRA, visited_order, found=False)


def astar(grid: Grid) -> SearchResult:
    start, end = grid.start_node, grid.end_node
    visited_order = []
    counter = itertools.count()

    start.distance = 0
    start.heuristic = heuristic(start, end)
    open_heap = [(start.distance + start.heuristic, next(counter), start)]

    while open_heap:
        _, _, current = heapq.heappop(open_heap)
        if current.is_visited:
            continue

        current.is_visited = True
        visited_order.append(current)
        if current == end:
            return SearchResult(ASTAR, visited_order, found=True)

        for neighbor in neighbors(current, grid):
            if neighbor.is_visited or neighbor.is_obstacle:
                continue
            tentative_g = current.distance + 1
            if tentative_g < neighbor.distance:
                neighbor.distance = tentative_g
                neighbor.heuristic = heuristic(neighbor, end)
                neighbor.previous_node = current
                heapq.heappush(open_heap, (neighbor.distance + neighbor.heuristic,
                                           next(counter), neighbor))

    return SearchResult(ASTAR, visited_order, found=False)


def bfs(grid: Grid) -> SearchResult:
    start, end = grid.start_node, grid.end_node
    visited_order = []

    queue = deque([start])
    start.is_visited = True

    while queue:
        node = queue.popleft()
        visited_order.append(node)
        if node == end:
            return SearchResult(BFS, visited_order, found=True)

        # mark on enqueue so no node enters the queue twice
        for neighbor in neighbors(node, grid):
            if not neighbor.is_visited and not neighbor.is_obstacle:
                neighbor.is_visited = True
                neighbor.previous_node = node
                queue.append(neighbor)

    return SearchResult(BFS, visited_order, found=False)


def dfs(grid: Grid) -> SearchResult:
    start, end = grid.start_node, grid.end_node
    visited_order = []

    stack = [start]
    start.is_visited = True

    while stack:
        node = stack.pop()
        visited_order.append(node)
        if node == end:
            return SearchResult(DFS, visited_order, found=True)

        for neighbor in neighbors(node, grid):
            if not neighbor.is_visited and not neighbor.is_obstacle:
                neighbor.is_visited = True
                neighbor.previous_node = node
                stack.append(neighbor)

    return SearchResult(DFS, visited_order, found=False)


ALGORITHMS = {
    DIJKSTRA: dijkstra,
    ASTAR: astar,
    BFS: bfs,
    DFS: dfs,
}


def run_search(grid: Grid, algorithm: str, **options) -> SearchResult:
    """Reset the grid, run `algorithm` and attach the reconstructed path"""
    try:
        search = ALGORITHMS[algorithm]
    except KeyError:
        raise ValueError(f"Unknown algorithm {algorithm!r}, "
                         f"expected one of {sorted(ALGORITHMS)}") from None

    grid.reset_search_state()
    result = search(grid, **options)
    if result.found:
        result.path = reconstruct_path(grid)
        mark_path(result.path)

    logger.debug("%s: visited=%d found=%s path=%d",
                 algorithm, len(result.visited), result.found, result.path_length)
    return result
