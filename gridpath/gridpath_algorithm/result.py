from dataclasses import dataclass, field
from typing import List

from .node import Node


class PathNotFound(Exception):
    """The search exhausted its frontier without reaching the end node"""

    def __init__(self, result):
        self.result = result
        self.visited = result.visited
        super().__init__(
            "No path could be found between the start and end nodes. Please try again!")


@dataclass
class SearchResult:
    algorithm: str
    visited: List[Node] = field(default_factory=list)
    found: bool = False
    path: List[Node] = field(default_factory=list)

    @property
    def path_length(self) -> int:
        return len(self.path)

    def raise_for_status(self):
        if not self.found:
            raise PathNotFound(self)
        return self
