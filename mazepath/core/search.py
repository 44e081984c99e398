# mazepath/core/search.py
#!/usr/bin/env python3
"""
Step-wise search skeleton shared by A*, BFS and Best-First.

Implements the algorithm API the viewer drives:
- init(grid, start, goal) - reset() - step() -> StepResult
- run() -> PathResult drives step() until the search finishes

One step() is one expansion: dequeue a frontier cell, append it to the
visitation trace, goal-check it, then let the strategy push its neighbors.
Subclasses supply the frontier discipline via _seed / _pop / _expand / _open_size.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from mazepath.core.grid_utils import reconstruct_path
from mazepath.core.types import Coordinate, Grid, PathResult, StepResult


@dataclass
class SearchAlgo:
    name: str = "search"

    # Internal state
    grid: Optional[Grid] = None
    start: Optional[Coordinate] = None
    goal: Optional[Coordinate] = None
    parent: Dict[Coordinate, Optional[Coordinate]] = field(default_factory=dict)
    trace: List[Coordinate] = field(default_factory=list)     # expansion order
    closed_set: Set[Coordinate] = field(default_factory=set)
    popped_count: int = 0
    done: bool = False
    no_path: bool = False

    # -------------------- lifecycle --------------------

    def init(self, grid: Grid, start: Coordinate, goal: Coordinate) -> None:
        self.grid = grid
        self.start = Coordinate(*start)
        self.goal = Coordinate(*goal)
        self.reset()

    def reset(self) -> None:
        """Clear all state and seed the frontier with the start cell."""
        if self.grid is None:
            return
        self.parent.clear()
        self.trace.clear()
        self.closed_set.clear()
        self.popped_count = 0
        self.done = False
        self.no_path = False
        self.parent[self.start] = None
        self._seed()

    # -------------------- strategy hooks --------------------

    def _seed(self) -> None:
        raise NotImplementedError

    def _pop(self) -> Optional[Coordinate]:
        raise NotImplementedError

    def _expand(self, u: Coordinate) -> List[Coordinate]:
        """Push u's neighbors per the strategy; return the newly opened cells."""
        raise NotImplementedError

    def _open_size(self) -> int:
        raise NotImplementedError

    # -------------------- main stepping logic --------------------

    @property
    def finished(self) -> bool:
        return self.done or self.no_path

    def path(self) -> List[Coordinate]:
        return reconstruct_path(self.parent, self.goal) if self.done else []

    def step(self) -> StepResult:
        if self.grid is None:
            return StepResult(status="idle", metrics={"algo": self.name})

        if self.done:
            path = self.path()
            return StepResult(status="done", path=path,
                              metrics=self._metrics(path_len=len(path)))

        if self.no_path:
            return StepResult(status="no_path", metrics=self._metrics())

        u = self._pop()
        if u is None:
            self.no_path = True
            return StepResult(status="no_path", metrics=self._metrics())

        self.popped_count += 1
        self.trace.append(u)
        self.closed_set.add(u)

        # stop when the goal is popped, not when it is first pushed
        if u == self.goal:
            self.done = True
            path = self.path()
            return StepResult(status="done", closed=[u], current=u, path=path,
                              metrics=self._metrics(path_len=len(path)))

        opened_now = self._expand(u)
        return StepResult(status="running", opened=opened_now, closed=[u], current=u,
                          metrics=self._metrics())

    def run(self) -> PathResult:
        """Step until the goal is expanded or the frontier is exhausted."""
        while not self.finished:
            self.step()
        return self.result()

    def result(self) -> PathResult:
        return PathResult(path=tuple(self.path()), visited=tuple(self.trace), algorithm=self.name)

    # -------------------- metrics --------------------

    def _metrics(self, path_len: int = 0) -> dict:
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "open_size": self._open_size(),
            "closed_count": len(self.closed_set),
            "path_len": path_len,
        }
