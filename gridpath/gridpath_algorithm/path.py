from typing import List, Optional

from .grid import Grid
from .node import Node


def reconstruct_path(grid: Grid, end: Optional[Node] = None) -> List[Node]:
    """Walk predecessor links back from the end node.

    The start node has no predecessor, so it is never part of the returned
    path; an end node without a predecessor yields an empty list.
    """
    current = end if end is not None else grid.end_node
    path = []
    while current is not None and current.previous_node is not None:
        path.append(current)
        current = current.previous_node
    path.reverse()
    return path


def mark_path(path: List[Node]):
    for node in path:
        node.is_path = True
