"""
Viewer and headless-runner tests.

pygame runs with the dummy video driver, so no window opens. Skipped if
pygame is not installed.
"""

import logging
import os

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

pygame = pytest.importorskip("pygame")

from mazepath import config  # noqa: E402
from mazepath.app import viewer  # noqa: E402
from mazepath.core.pathfinding import Algorithm  # noqa: E402


@pytest.fixture
def settings() -> config.Settings:
    return config.Settings(rows=11, cols=15, algorithm="BFS", seed=5, delay_ms=10)


@pytest.fixture
def view(settings):
    v = viewer.Viewer(settings)
    yield v
    pygame.quit()


class TestHeadless:
    def test_headless_logs_result(self, settings, caplog):
        with caplog.at_level(logging.INFO, logger="mazepath.app.viewer"):
            code = viewer.run_headless(settings)
        assert code == 0
        assert "Path found using BFS" in caplog.text

    def test_main_headless(self):
        assert viewer.main(["--headless", "--rows=9", "--cols=9", "--seed=1"]) == 0

    def test_main_rejects_unknown_algorithm(self):
        assert viewer.main(["--headless", "--algo=Dijkstra"]) == 1

    def test_main_rejects_bad_number(self):
        assert viewer.main(["--rows=abc"]) == 1


class TestViewer:
    def test_search_runs_to_done(self, view):
        view._toggle_run()
        assert view.state == "Running"
        steps = 0
        while view.state == "Running":
            view._do_step()
            steps += 1
        assert view.state == "Done"
        assert view.replay.finished
        assert "Length" in view.message
        # one step per expansion, then one per solution cell
        assert steps == len(view.result.visited) + view.result.length
        view._draw()

    def test_metrics_follow_live_search(self, view):
        for n in range(1, 8):
            view._do_step()
            m = view._last_metrics
            assert m["popped"] == n
            assert m["closed_count"] == len(view.closed_set) == n
            assert m["open_size"] == len(view.open_set)
        assert view.closed_set == set(view.algo.trace)
        assert view.open_set.isdisjoint(view.closed_set)
        assert view.replay is None

    def test_search_matches_find_path(self, view):
        while view.replay is None:
            view._do_step()
        m = view.maze
        expected = viewer.find_path(m.grid, m.start, m.end, view.selected_algo)
        assert view.result == expected
        assert view.closed_set == set(expected.visited)
        assert view._last_metrics["path_len"] == expected.length

    def test_step_after_done_does_nothing(self, view, caplog):
        while view.state not in ("Done", "No path"):
            view._do_step()
        cursor, message = view.replay.cursor, view.message
        with caplog.at_level(logging.INFO, logger="mazepath.app.viewer"):
            caplog.clear()
            for _ in range(3):
                view._do_step()
        assert caplog.records == []
        assert view.replay.cursor == cursor
        assert view.message == message

    def test_switch_algo_resets_search(self, view):
        view._do_step()
        assert view.algo is not None
        view._switch_algo(Algorithm.ASTAR)
        assert view.algo is None
        assert view.closed_set == set()
        assert view._last_metrics == {}
        assert view.selected_algo == Algorithm.ASTAR
        assert view._algo_buttons[Algorithm.ASTAR].active

    def test_new_maze_same_shape(self, view):
        before = view.maze.grid.to_strings()
        view._new_maze()
        after = view.maze.grid.to_strings()
        assert len(after) == len(before)
        assert view.state == "Idle"

    def test_resize_grows_and_shrinks_by_two(self, view):
        view._do_step()
        view._resize_maze(+1, 0)
        assert (view.maze.grid.rows, view.maze.grid.cols) == (13, 15)
        view._resize_maze(0, -1)
        assert (view.maze.grid.rows, view.maze.grid.cols) == (13, 13)
        assert view.state == "Idle"
        assert view.algo is None

    def test_resize_clamps_at_both_ends(self, view, settings):
        for _ in range(40):
            view._resize_maze(+1, +1)
        assert view.settings.rows == view.settings.cols == config.MAX_DIMENSION
        # even sizes are carved one larger
        assert view.maze.grid.rows == config.MAX_DIMENSION + 1
        view._draw()

        for _ in range(40):
            view._resize_maze(-1, -1)
        assert view.settings.rows == view.settings.cols == config.MIN_DIMENSION
        assert (view.maze.grid.rows, view.maze.grid.cols) == (5, 5)
        # the caller's settings are left alone
        assert (settings.rows, settings.cols) == (11, 15)

    def test_resize_buttons(self, view):
        labels = {b.label: b for b in view._buttons}
        labels["Cols +"].callback()
        labels["Rows -"].callback()
        assert (view.maze.grid.rows, view.maze.grid.cols) == (9, 17)

    def test_speed_bounds(self, view):
        for _ in range(50):
            view._bump_speed(+1)
        assert view.delay_ms == config.MIN_DELAY_MS
        for _ in range(50):
            view._bump_speed(-1)
        assert view.delay_ms == config.MAX_DELAY_MS

    def test_draw_mid_search(self, view):
        for _ in range(5):
            view._do_step()
        view._draw()
        assert len(view.algo.trace) == 5
