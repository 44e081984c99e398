# mazepath/core/grid_utils.py
#!/usr/bin/env python3
"""Neighbor enumeration, Manhattan heuristic and path reconstruction shared by all searches."""

from typing import Dict, List, Optional

from mazepath.core.types import Coordinate, Grid

# up, down, left, right; order fixes tie-breaking in every search
DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def neighbors(cell: Coordinate, grid: Grid) -> List[Coordinate]:
    """Return in-bounds, non-wall 4-connected neighbors of `cell`."""
    r, c = cell
    out: List[Coordinate] = []
    for dr, dc in DIRECTIONS:
        n = Coordinate(r + dr, c + dc)
        if grid.in_bounds(n) and not grid.is_wall(n):
            out.append(n)
    return out


def heuristic(a: Coordinate, b: Coordinate) -> int:
    """Manhattan distance; admissible and consistent on unit-cost 4-connected grids."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def reconstruct_path(came_from: Dict[Coordinate, Optional[Coordinate]], end: Coordinate) -> List[Coordinate]:
    """Walk predecessors back from `end` to the start (parent None), then reverse."""
    if end not in came_from:
        return []
    path: List[Coordinate] = []
    cur: Optional[Coordinate] = end
    while cur is not None:
        path.append(cur)
        cur = came_from[cur]
    path.reverse()
    return path
