# mazepath/core/bfs.py
#!/usr/bin/env python3
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List, Optional, Set

from mazepath.core.grid_utils import neighbors
from mazepath.core.search import SearchAlgo
from mazepath.core.types import Coordinate


@dataclass
class BFSAlgo(SearchAlgo):
    """Breadth-first search: FIFO frontier, cells marked seen when first queued."""

    name: str = "BFS"

    queue: Deque[Coordinate] = field(default_factory=deque)
    seen: Set[int] = field(default_factory=set)     # packed Coordinate.key

    def _seed(self) -> None:
        self.queue.clear()
        self.seen.clear()
        self.queue.append(self.start)
        self.seen.add(self.start.key(self.grid.cols))

    def _pop(self) -> Optional[Coordinate]:
        return self.queue.popleft() if self.queue else None

    def _open_size(self) -> int:
        return len(self.queue)

    def _expand(self, u: Coordinate) -> List[Coordinate]:
        opened_now: List[Coordinate] = []
        for v in neighbors(u, self.grid):
            k = v.key(self.grid.cols)
            if k not in self.seen:
                self.seen.add(k)
                self.parent[v] = u
                self.queue.append(v)
                opened_now.append(v)
        return opened_now
