# mazepath/core/pathfinding.py
#!/usr/bin/env python3
"""
Pathfinding entry point.

    find_path(grid, start, end, Algorithm.BFS) -> PathResult(path, visited)

`path` runs start..end inclusive and is empty when `end` is unreachable;
`visited` is the expansion order, filled in either way.
"""

import logging
from enum import Enum
from typing import Dict, Tuple, Type, Union

from mazepath.core.astar import AStarAlgo
from mazepath.core.best_first import BestFirstAlgo
from mazepath.core.bfs import BFSAlgo
from mazepath.core.errors import MazeConfigError, UnknownAlgorithmError
from mazepath.core.search import SearchAlgo
from mazepath.core.types import Coordinate, Grid, PathResult

logger = logging.getLogger(__name__)


class Algorithm(str, Enum):
    ASTAR = "A*"
    BFS = "BFS"
    BEST_FIRST = "Best-First"


ALGORITHMS: Dict[Algorithm, Type[SearchAlgo]] = {
    Algorithm.ASTAR: AStarAlgo,
    Algorithm.BFS: BFSAlgo,
    Algorithm.BEST_FIRST: BestFirstAlgo,
}


def resolve_algorithm(algorithm: Union[Algorithm, str]) -> Algorithm:
    """
    Map a selector to an Algorithm.

    Accepts an Algorithm member or its value ("A*", "BFS", "Best-First").

    Raises:
        UnknownAlgorithmError: If the selector names no known strategy
    """
    try:
        return Algorithm(algorithm)
    except (ValueError, TypeError):
        available = ", ".join(a.value for a in Algorithm)
        raise UnknownAlgorithmError(
            f"Unknown algorithm {algorithm!r}. Available: {available}"
        ) from None


def get_algorithm(algorithm: Union[Algorithm, str]) -> SearchAlgo:
    """Fresh, un-initialized step-wise search object for `algorithm`."""
    algo = resolve_algorithm(algorithm)
    return ALGORITHMS[algo](name=algo.value)


def _check_point(grid: Grid, label: str, p: Tuple[int, int]) -> Coordinate:
    try:
        c = Coordinate(*p)
    except TypeError as ex:
        raise MazeConfigError(f"{label} must be a (row, col) pair, got {p!r}") from ex
    if any(isinstance(v, bool) or not isinstance(v, int) for v in c):
        raise MazeConfigError(f"{label} must have integer row and col, got {p!r}")
    if not grid.in_bounds(c):
        raise MazeConfigError(f"{label} {c} out of bounds for {grid.rows}x{grid.cols} grid")
    return c


def find_path(grid: Grid,
              start: Tuple[int, int],
              end: Tuple[int, int],
              algorithm: Union[Algorithm, str]) -> PathResult:
    """
    Run one search to completion.

    Raises:
        UnknownAlgorithmError: Bad selector (never falls back to a default)
        MazeConfigError: start or end outside the grid
    """
    algo = get_algorithm(algorithm)
    s = _check_point(grid, "start", start)
    e = _check_point(grid, "end", end)

    algo.init(grid, s, e)
    result = algo.run()

    if result.found:
        logger.debug(f"{algo.name}: path of {result.length} cells, "
                     f"{len(result.visited)} expansions")
    else:
        logger.debug(f"{algo.name}: no path from {s} to {e} "
                     f"after {len(result.visited)} expansions")
    return result
