# mazepath/core/astar.py
#!/usr/bin/env python3
"""
A*: one expansion per step() for animation.

Heuristic:
- Manhattan for 4-connected grids, unit step cost (admissible + consistent).

Frontier:
- PriorityQueue ranked by g + h, read from the live g table at compare time.
- A cell whose g improves is pushed only if it is not already queued; its queued
  entry picks up the new g on the next dequeue. There is no closed set: a popped
  cell whose g later drops would be pushed and expanded again. With a consistent
  heuristic that never happens on a unit-cost grid.
"""

from dataclasses import dataclass, field
from math import inf
from typing import Dict, List, Optional

from mazepath.core.grid_utils import heuristic, neighbors
from mazepath.core.priority_queue import PriorityQueue
from mazepath.core.search import SearchAlgo
from mazepath.core.types import Coordinate


@dataclass
class AStarAlgo(SearchAlgo):
    name: str = "A*"

    g: Dict[Coordinate, float] = field(default_factory=dict)
    open_pq: Optional[PriorityQueue] = None

    def _f(self, c: Coordinate) -> float:
        return self.g.get(c, inf) + heuristic(c, self.goal)

    def _seed(self) -> None:
        self.g.clear()
        self.g[self.start] = 0
        self.open_pq = PriorityQueue(lambda a, b: self._f(a) < self._f(b))
        self.open_pq.enqueue(self.start)

    def _pop(self) -> Optional[Coordinate]:
        return self.open_pq.dequeue()

    def _open_size(self) -> int:
        return len(self.open_pq) if self.open_pq is not None else 0

    def _expand(self, u: Coordinate) -> List[Coordinate]:
        opened_now: List[Coordinate] = []
        for v in neighbors(u, self.grid):
            alt = self.g.get(u, inf) + 1
            if alt < self.g.get(v, inf):
                self.g[v] = alt
                self.parent[v] = u
                if not self.open_pq.contains(lambda p: p == v):
                    self.open_pq.enqueue(v)
                    opened_now.append(v)
        return opened_now
