# mazepath/core/replay.py
#!/usr/bin/env python3
"""
Frame-by-frame replay of a finished search.

Frames are the visitation trace first, then the solution path. Each advance()
reveals one more frame; cell_states() paints the revealed frames over a copy of
the maze using the presentation tags (VISITED, SOLUTION, START, END). Start and
end keep their own tags and are never painted as visited.
"""

from dataclasses import dataclass
from typing import List, Set, Tuple

from mazepath.core.types import CellType, Coordinate, Grid, PathResult

VISITED = "visited"
SOLUTION = "solution"


@dataclass
class Replay:
    grid: Grid
    start: Coordinate
    end: Coordinate
    result: PathResult
    cursor: int = 0       # frames revealed so far

    @property
    def frames(self) -> List[Tuple[str, Coordinate]]:
        return ([(VISITED, c) for c in self.result.visited] +
                [(SOLUTION, c) for c in self.result.path])

    @property
    def total_frames(self) -> int:
        return len(self.result.visited) + len(self.result.path)

    @property
    def finished(self) -> bool:
        return self.cursor >= self.total_frames

    @property
    def phase(self) -> str:
        """'exploring' while the trace plays, then 'solution', then 'done'."""
        if self.finished:
            return "done"
        return "exploring" if self.cursor < len(self.result.visited) else "solution"

    def advance(self, n: int = 1) -> bool:
        """Reveal up to n more frames; returns False once everything is shown."""
        self.cursor = min(self.total_frames, self.cursor + max(0, n))
        return not self.finished

    def skip_to_end(self) -> None:
        self.cursor = self.total_frames

    def rewind(self) -> None:
        self.cursor = 0

    def visited_cells(self) -> Set[Coordinate]:
        shown = self.result.visited[:self.cursor]
        return {c for c in shown if c != self.start and c != self.end}

    def solution_cells(self) -> List[Coordinate]:
        shown = max(0, self.cursor - len(self.result.visited))
        return list(self.result.path[:shown])

    def cell_states(self) -> Grid:
        out = self.grid.copy()
        for c in self.visited_cells():
            out.set(c, CellType.VISITED)
        for c in self.solution_cells():
            out.set(c, CellType.SOLUTION)
        out.set(self.start, CellType.START)
        out.set(self.end, CellType.END)
        return out
