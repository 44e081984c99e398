# mazepath/core/best_first.py
#!/usr/bin/env python3
"""
Greedy best-first search.

Ranks the frontier by Manhattan distance to the goal only, so it heads straight
for the goal and often expands far fewer cells than BFS, but the path it returns
is not guaranteed to be shortest. Equal-h cells come out in push order.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Set

from mazepath.core.grid_utils import heuristic, neighbors
from mazepath.core.priority_queue import PriorityQueue
from mazepath.core.search import SearchAlgo
from mazepath.core.types import Coordinate


@dataclass
class BestFirstAlgo(SearchAlgo):
    name: str = "Best-First"

    open_pq: Optional[PriorityQueue] = None
    seen: Set[int] = field(default_factory=set)     # packed Coordinate.key

    def _seed(self) -> None:
        goal = self.goal
        self.seen.clear()
        self.open_pq = PriorityQueue(lambda a, b: heuristic(a, goal) < heuristic(b, goal))
        self.open_pq.enqueue(self.start)
        self.seen.add(self.start.key(self.grid.cols))

    def _pop(self) -> Optional[Coordinate]:
        return self.open_pq.dequeue()

    def _open_size(self) -> int:
        return len(self.open_pq) if self.open_pq is not None else 0

    def _expand(self, u: Coordinate) -> List[Coordinate]:
        opened_now: List[Coordinate] = []
        for v in neighbors(u, self.grid):
            k = v.key(self.grid.cols)
            if k not in self.seen:
                self.seen.add(k)      # mark on push, never revisit
                self.parent[v] = u
                self.open_pq.enqueue(v)
                opened_now.append(v)
        return opened_now
