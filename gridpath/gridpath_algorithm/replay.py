import itertools
from dataclasses import dataclass
from typing import List

from .node import Node
from .result import SearchResult

VISITED_STEP = 'visited'
PATH_STEP = 'path'


@dataclass(frozen=True)
class ReplayStep:
    kind: str
    node: Node
    index: int


class Replay:
    """One-shot stream of a search result: visited order, then path order.

    The consumer decides the pace. Once exhausted the replay stays exhausted.
    """

    def __init__(self, result: SearchResult):
        self.result = result
        self.total = len(result.visited) + len(result.path)
        self.position = 0
        self._steps = self._generate()

    def _generate(self):
        for i, node in enumerate(self.result.visited):
            yield ReplayStep(VISITED_STEP, node, i)
        for i, node in enumerate(self.result.path):
            yield ReplayStep(PATH_STEP, node, i)

    @property
    def done(self) -> bool:
        return self.position >= self.total

    def __iter__(self):
        return self

    def __next__(self) -> ReplayStep:
        step = next(self._steps)
        self.position += 1
        return step

    def take(self, count: int) -> List[ReplayStep]:
        return list(itertools.islice(self, max(0, count)))
