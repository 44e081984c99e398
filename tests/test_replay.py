"""Unit tests for frame-by-frame replay of search results."""

from mazepath.core.pathfinding import Algorithm, find_path
from mazepath.core.replay import SOLUTION, VISITED, Replay
from mazepath.core.types import CellType, Coordinate


def _replay(grid, start, end, algo=Algorithm.BFS):
    return Replay(grid, start, end, find_path(grid, start, end, algo))


class TestFrames:
    def test_visited_frames_before_solution_frames(self, open_grid, corner_points):
        replay = _replay(open_grid, *corner_points)
        kinds = [kind for kind, _ in replay.frames]

        n_visited = len(replay.result.visited)
        assert kinds[:n_visited] == [VISITED] * n_visited
        assert kinds[n_visited:] == [SOLUTION] * replay.result.length
        assert replay.total_frames == len(kinds)

    def test_phases(self, open_grid, corner_points):
        replay = _replay(open_grid, *corner_points)
        assert replay.phase == "exploring"

        replay.advance(len(replay.result.visited))
        assert replay.phase == "solution"

        assert replay.advance(10_000) is False
        assert replay.finished
        assert replay.phase == "done"

        replay.rewind()
        assert replay.cursor == 0


class TestCellStates:
    def test_start_and_end_never_marked_visited(self, open_grid, corner_points):
        start, end = corner_points
        replay = _replay(open_grid, start, end)
        replay.advance(len(replay.result.visited))

        visited = replay.visited_cells()
        assert start not in visited
        assert end not in visited

        states = replay.cell_states()
        assert states.get(start) == CellType.START
        assert states.get(end) == CellType.END

    def test_solution_painted_over_visited(self, open_grid, corner_points):
        start, end = corner_points
        replay = _replay(open_grid, start, end)
        replay.skip_to_end()

        states = replay.cell_states()
        for c in replay.result.path[1:-1]:
            assert states.get(c) == CellType.SOLUTION
        # base grid untouched
        assert open_grid.get(Coordinate(2, 2)) == CellType.PATH

    def test_no_path_replay_only_explores(self, walled_goal_grid):
        start, end = Coordinate(1, 1), Coordinate(2, 5)
        replay = _replay(walled_goal_grid, start, end, Algorithm.ASTAR)
        replay.skip_to_end()

        assert replay.solution_cells() == []
        assert replay.total_frames == len(replay.result.visited)
        assert replay.cell_states().count(CellType.SOLUTION) == 0
        assert replay.cell_states().count(CellType.VISITED) == 7
