"""Unit tests for grid types, neighbors, heuristic and path reconstruction."""

import pytest

from mazepath.core.errors import MazeConfigError
from mazepath.core.grid_utils import heuristic, neighbors, reconstruct_path
from mazepath.core.types import CellType, Coordinate, Grid


class TestGrid:
    def test_from_strings_round_trip(self):
        lines = ["###", "#.#", "###"]
        grid = Grid.from_strings(lines)
        assert (grid.rows, grid.cols) == (3, 3)
        assert grid.get((1, 1)) == CellType.PATH
        assert grid.is_wall((0, 0))
        assert grid.to_strings() == lines

    def test_ragged_rows_rejected(self):
        with pytest.raises(MazeConfigError):
            Grid.from_strings(["###", "##"])

    def test_unknown_character_rejected(self):
        with pytest.raises(MazeConfigError):
            Grid.from_strings(["#x#"])

    def test_copy_is_independent(self, open_grid):
        dup = open_grid.copy()
        dup.set((1, 1), CellType.WALL)
        assert open_grid.get((1, 1)) == CellType.PATH

    def test_coordinate_packed_key(self):
        cols = 7
        keys = {Coordinate(r, c).key(cols) for r in range(5) for c in range(cols)}
        assert len(keys) == 5 * cols
        assert Coordinate(2, 3).key(cols) == 17


class TestNeighbors:
    def test_order_is_up_down_left_right(self, open_grid):
        assert neighbors(Coordinate(2, 2), open_grid) == [
            (1, 2), (3, 2), (2, 1), (2, 3),
        ]

    def test_walls_and_bounds_filtered(self, open_grid):
        assert neighbors(Coordinate(1, 1), open_grid) == [(2, 1), (1, 2)]
        assert neighbors(Coordinate(0, 0), open_grid) == []

    def test_heuristic_is_manhattan(self):
        assert heuristic(Coordinate(1, 1), Coordinate(4, 5)) == 7
        assert heuristic(Coordinate(3, 3), Coordinate(3, 3)) == 0


class TestReconstructPath:
    def test_follows_parents_to_start(self):
        came_from = {
            Coordinate(1, 1): None,
            Coordinate(1, 2): Coordinate(1, 1),
            Coordinate(2, 2): Coordinate(1, 2),
        }
        assert reconstruct_path(came_from, Coordinate(2, 2)) == [(1, 1), (1, 2), (2, 2)]

    def test_start_only(self):
        assert reconstruct_path({Coordinate(1, 1): None}, Coordinate(1, 1)) == [(1, 1)]

    def test_unreached_end_gives_empty(self):
        assert reconstruct_path({Coordinate(1, 1): None}, Coordinate(3, 3)) == []
