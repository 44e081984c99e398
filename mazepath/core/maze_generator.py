# mazepath/core/maze_generator.py
#!/usr/bin/env python3
"""
Perfect-maze generation by randomized recursive backtracking (randomized DFS carving).

Cells at odd (row, col) are rooms, everything else starts as wall. Carving moves
two cells at a time and opens the wall cell in between, so the carved rooms and
passages form a spanning tree: exactly one route between any two path cells.

Randomness comes from a caller-owned `random.Random` so mazes are reproducible.
"""

import logging
import random
from typing import List, Optional, Set

from mazepath.core.errors import MazeConfigError
from mazepath.core.types import CellType, Coordinate, Grid, Maze

logger = logging.getLogger(__name__)

# two-cell hops: up, down, left, right
CARVE_STEPS = ((-2, 0), (2, 0), (0, -2), (0, 2))


def normalize_dimension(n: int) -> int:
    """Even sizes grow by one; carving needs odd sizes to keep a wall border."""
    return n + 1 if n % 2 == 0 else n


def _validate(rows: int, cols: int) -> None:
    for label, n in (("rows", rows), ("cols", cols)):
        if isinstance(n, bool) or not isinstance(n, int):
            raise MazeConfigError(f"{label} must be an integer, got {n!r}")
        if n <= 0:
            raise MazeConfigError(f"{label} must be positive, got {n}")
        if normalize_dimension(n) < 3:
            raise MazeConfigError(f"{label} must be at least 2, got {n}")


def generate_maze(rows: int, cols: int,
                  rng: Optional[random.Random] = None,
                  seed: Optional[int] = None) -> Maze:
    """
    Carve a maze of (normalized) rows x cols.

    Start is fixed at (1, 1) and end at (rows-2, cols-2); both are Path on return.
    Pass `rng`, or `seed` to build one; with neither a fresh unseeded source is used.
    """
    _validate(rows, cols)
    rows = normalize_dimension(rows)
    cols = normalize_dimension(cols)
    if rng is None:
        rng = random.Random(seed)

    grid = Grid.filled(rows, cols, CellType.WALL)
    start = Coordinate(1, 1)
    end = Coordinate(rows - 2, cols - 2)

    visited: Set[Coordinate] = set()
    stack: List[Coordinate] = []

    def carve(p: Coordinate) -> None:
        grid.set(p, CellType.PATH)
        visited.add(p)
        stack.append(p)

    carve(start)
    while stack:
        cur = stack[-1]
        candidates = [
            Coordinate(cur.row + dr, cur.col + dc)
            for dr, dc in CARVE_STEPS
            if grid.in_bounds((cur.row + dr, cur.col + dc))
            and Coordinate(cur.row + dr, cur.col + dc) not in visited
        ]
        rng.shuffle(candidates)
        if candidates:
            nxt = candidates[0]
            # open the wall cell between cur and nxt
            grid.set(((cur.row + nxt.row) // 2, (cur.col + nxt.col) // 2), CellType.PATH)
            carve(nxt)
        else:
            stack.pop()

    # start/end must be walkable whatever the carve produced
    grid.set(start, CellType.PATH)
    grid.set(end, CellType.PATH)

    logger.debug(f"Generated {rows}x{cols} maze: {len(visited)} rooms, "
                 f"{grid.count(CellType.PATH)} path cells")
    return Maze(grid=grid, start=start, end=end)
