"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import pytest

from mazepath.core.maze_generator import generate_maze
from mazepath.core.types import Coordinate, Grid, Maze


@pytest.fixture
def open_grid() -> Grid:
    """5x5 grid: wall border around a fully open 3x3 interior."""
    return Grid.from_strings([
        "#####",
        "#...#",
        "#...#",
        "#...#",
        "#####",
    ])


@pytest.fixture
def walled_goal_grid() -> Grid:
    """Goal at (2, 5) is boxed in by walls; 8 cells reachable from (1, 1)."""
    return Grid.from_strings([
        "#######",
        "#...###",
        "#.#.#.#",
        "#...###",
        "#######",
    ])


@pytest.fixture
def seeded_maze() -> Maze:
    """A reproducible 21x31 maze."""
    return generate_maze(21, 31, seed=1234)


@pytest.fixture
def corner_points():
    return Coordinate(1, 1), Coordinate(3, 3)
