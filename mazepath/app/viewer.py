# mazepath/app/viewer.py
#!/usr/bin/env python3
"""
Maze Viewer: generate a maze, pick a search, watch it expand step by step

- Keyboard:
    [1]/[2]/[3]  -> select algorithm (A* / BFS / Best-First)
    [SPACE]      -> run/pause search
    [N]          -> single step
    [R]          -> reset search (same maze)
    [G]          -> generate a new maze
    [UP]/[DOWN]  -> more/fewer rows (new maze)
    [RIGHT]/[LEFT] -> more/fewer cols (new maze)
    [+]/[-]      -> faster/slower (step delay)
    [Q]/[ESC]    -> quit

Each step is one expansion of the live search; once the goal is expanded the
solution path is drawn one cell per step.

Settings come from mazepath.config (env vars, then --key=value args).
With --headless no window is opened: the result is logged instead.
"""

import dataclasses
import logging
import random
import sys
import time
from typing import Dict, List, Optional, Sequence, Set, Tuple

import pygame

from mazepath import config
from mazepath.core.errors import MazeConfigError, UnknownAlgorithmError
from mazepath.core.maze_generator import generate_maze
from mazepath.core.pathfinding import Algorithm, find_path, get_algorithm, resolve_algorithm
from mazepath.core.replay import Replay
from mazepath.core.search import SearchAlgo
from mazepath.core.types import CellType, Coordinate, Maze, PathResult

logger = logging.getLogger(__name__)

PANEL_W = 360            # right band: metrics + buttons
GRID_MARGIN = 16
CELL_SIZE_DEFAULT = 24
MIN_WIN_W, MIN_WIN_H = 640, 640
FONT_NAME = None  # default pygame font

# Colors
WHITE       = (255,255,255)
BLACK       = (  0,  0,  0)
BLUE        = ( 70,130,180)
RED         = (220, 50, 47)
BACKDROP    = ( 28, 31, 38)
WALL_DARK   = ( 34, 38, 46)
FLOOR_GRAY  = (200,200,200)
NEON_MAG_A  = (255,0,120,90)
NEON_CYAN_A = (0,200,255,70)
NEON_MINT   = (0,255,200)

CARD_BG     = (24,28,36,220)
TEXT_LIGHT  = (230,235,240)
ACCENT_GOLD = (255,210,0)
WARN_RED    = (255,120,110)

ALGO_KEYS = {
    pygame.K_1: Algorithm.ASTAR,
    pygame.K_2: Algorithm.BFS,
    pygame.K_3: Algorithm.BEST_FIRST,
}

# key -> (rows delta, cols delta), in steps of two cells
RESIZE_KEYS = {
    pygame.K_UP: (+1, 0),
    pygame.K_DOWN: (-1, 0),
    pygame.K_RIGHT: (0, +1),
    pygame.K_LEFT: (0, -1),
}


# ---------- Simple UI Button ----------
class UIButton:
    def __init__(self, label: str, rect: pygame.Rect, callback, *, togglable: bool = False):
        self.label = label
        self.rect = rect
        self.callback = callback
        self.hover = False
        self.togglable = togglable
        self.active = False

    def draw(self, screen: pygame.Surface, font: pygame.font.Font):
        lit = self.active and self.togglable
        if lit:
            bg = (58, 86, 160)
        elif self.hover:
            bg = (46, 50, 60)
        else:
            bg = (36, 40, 48)
        pygame.draw.rect(screen, bg, self.rect, border_radius=10)
        if lit:
            pygame.draw.rect(screen, (120, 170, 255), self.rect, width=2, border_radius=10)

        text = font.render(self.label, True, (235,238,242))
        screen.blit(text, text.get_rect(center=self.rect.center))

    def handle_mouse(self, event: pygame.event.Event):
        if event.type == pygame.MOUSEMOTION:
            self.hover = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.callback()


# ---------- Viewer ----------
class Viewer:
    def __init__(self, settings: config.Settings):
        pygame.init()

        # private copy: the size controls write back into it
        self.settings = dataclasses.replace(settings)
        self.rng = random.Random(settings.seed)
        self.selected_algo = resolve_algorithm(settings.algorithm)
        self.delay_ms = config.clamp_delay(settings.delay_ms)
        self.maze: Maze = generate_maze(settings.rows, settings.cols, rng=self.rng)

        self.font_small = pygame.font.Font(FONT_NAME, 14)
        self.font = pygame.font.Font(FONT_NAME, 18)
        self.font_big = pygame.font.Font(FONT_NAME, 22)

        # search state, fed by algo.step()
        self.algo: Optional[SearchAlgo] = None
        self.open_set: Set[Coordinate] = set()
        self.closed_set: Set[Coordinate] = set()
        self._last_metrics: Dict[str, object] = {}
        # built once the search finishes; reveals the solution path
        self.result: Optional[PathResult] = None
        self.replay: Optional[Replay] = None

        self.running = False
        self.clock = pygame.time.Clock()
        self.state = "Idle"
        self.message = "Press SPACE to search"
        self._last_frame_t = 0.0

        self.cell_size = self._auto_cell_size()
        grid_px_w = GRID_MARGIN*2 + self.maze.grid.cols * self.cell_size
        grid_px_h = GRID_MARGIN*2 + self.maze.grid.rows * self.cell_size
        win_w = max(MIN_WIN_W, grid_px_w + PANEL_W)
        win_h = max(MIN_WIN_H, grid_px_h)

        self.screen = pygame.display.set_mode((win_w, win_h), pygame.RESIZABLE)
        pygame.display.set_caption("Maze Pathfinding")

        self._buttons: List[UIButton] = []
        self._layout(win_w, win_h)

    # ---------- layout ----------
    def _layout(self, win_w: int, win_h: int):
        """Compute integer cell_size that fits window and center the grid."""
        grid = self.maze.grid
        avail_w = max(1, win_w - PANEL_W - 2 * GRID_MARGIN)
        avail_h = max(1, win_h - 2 * GRID_MARGIN)

        self.cell_size = int(max(6, min(avail_w // grid.cols, avail_h // grid.rows)))

        grid_plate_w = grid.cols * self.cell_size + 2 * GRID_MARGIN
        grid_plate_h = grid.rows * self.cell_size + 2 * GRID_MARGIN

        left_x = max(0, (win_w - (grid_plate_w + PANEL_W)) // 2)
        left_x = min(left_x, max(0, win_w - PANEL_W - grid_plate_w))
        top_y  = max(0, (win_h - grid_plate_h) // 2)

        self.canvas_rect = pygame.Rect(left_x, top_y, grid_plate_w, grid_plate_h)
        self._grid_origin = (self.canvas_rect.x + GRID_MARGIN,
                             self.canvas_rect.y + GRID_MARGIN)
        self._right_band = pygame.Rect(self.canvas_rect.right, 0,
                                       max(PANEL_W, win_w - self.canvas_rect.right),
                                       win_h)
        self._build_buttons()

    def _auto_cell_size(self) -> int:
        target_h = 720 - GRID_MARGIN*2
        return max(8, min(CELL_SIZE_DEFAULT, target_h // self.maze.grid.rows))

    def _on_resize(self, req_w: int, req_h: int):
        w, h = max(MIN_WIN_W, req_w), max(MIN_WIN_H, req_h)
        self.screen = pygame.display.set_mode((w, h), pygame.RESIZABLE)
        self._layout(w, h)

    def run(self):
        while True:
            self._handle_events()
            if self.running:
                self._tick_algorithm()
            self._draw()
            self.clock.tick(60)

    # ---------- stepping ----------
    def _ensure_algo(self):
        if self.algo is not None:
            return
        m = self.maze
        self.algo = get_algorithm(self.selected_algo)
        self.algo.init(m.grid, m.start, m.end)
        self.open_set = {m.start}

    def _tick_algorithm(self):
        t0 = time.time()
        if t0 - self._last_frame_t >= self.delay_ms / 1000.0:
            self._last_frame_t = t0
            self._do_step()

    def _do_step(self):
        if self.state in ("Done", "No path"):
            return
        self._ensure_algo()

        if self.replay is None:
            res = self.algo.step()
            for c in res.closed:
                self.open_set.discard(c)
                self.closed_set.add(c)
            self.open_set.update(res.opened)
            if res.metrics:
                self._last_metrics = res.metrics
            if self.algo.finished:
                self._start_solution()
        else:
            self.replay.advance()

        if self.replay is not None and self.replay.finished:
            self._finish()
        elif self.running:
            self.state = "Running"

    def _start_solution(self):
        m = self.maze
        self.result = self.algo.result()
        self.replay = Replay(m.grid, m.start, m.end, self.result)
        # the trace has already been shown live
        self.replay.advance(len(self.result.visited))
        if not self.result.found:
            logger.warning(f"No path found using {self.selected_algo.value} "
                           f"({len(self.result.visited)} cells explored)")

    def _finish(self):
        self.running = False
        if self.result.found:
            self.state = "Done"
            self.message = f"Path found using {self.selected_algo.value}. Length: {self.result.length}"
            logger.info(self.message)
        else:
            self.state = "No path"
            self.message = "No path found to the goal."
        self._refresh_active_states()

    def _toggle_run(self):
        if self.state in ("Done", "No path"):
            return
        self._ensure_algo()
        self.running = not self.running
        self.state = "Running" if self.running else "Paused"
        self._refresh_active_states()

    def _reset(self):
        self.running = False
        self.state = "Idle"
        self.message = "Press SPACE to search"
        self.algo = None
        self.open_set = set()
        self.closed_set = set()
        self._last_metrics = {}
        self.result = None
        self.replay = None
        self._refresh_active_states()

    def _new_maze(self):
        self.maze = generate_maze(self.settings.rows, self.settings.cols, rng=self.rng)
        logger.info(f"New {self.maze.grid.rows}x{self.maze.grid.cols} maze")
        self._reset()
        self._layout(*self.screen.get_size())

    def _resize_maze(self, d_rows: int, d_cols: int):
        """Grow or shrink the maze by two cells per unit, within the configured bounds."""
        s = self.settings
        s.rows = config.clamp_dimension(s.rows + 2 * d_rows)
        s.cols = config.clamp_dimension(s.cols + 2 * d_cols)
        self._new_maze()

    def _switch_algo(self, algo: Algorithm):
        self.selected_algo = algo
        self._reset()

    def _bump_speed(self, direction: int):
        # faster means a shorter delay
        self.delay_ms = config.clamp_delay(self.delay_ms - direction * config.DELAY_STEP_MS)

    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit(0)
            elif e.type == pygame.KEYDOWN:
                if e.key in (pygame.K_ESCAPE, pygame.K_q):
                    pygame.quit(); sys.exit(0)
                elif e.key == pygame.K_SPACE:
                    self._toggle_run()
                elif e.key == pygame.K_r:
                    self._reset()
                elif e.key == pygame.K_g:
                    self._new_maze()
                elif e.key == pygame.K_n:
                    self._do_step()
                elif e.key in (pygame.K_PLUS, pygame.K_EQUALS):
                    self._bump_speed(+1)
                elif e.key in (pygame.K_MINUS, pygame.K_UNDERSCORE):
                    self._bump_speed(-1)
                elif e.key in RESIZE_KEYS:
                    self._resize_maze(*RESIZE_KEYS[e.key])
                elif e.key in ALGO_KEYS:
                    self._switch_algo(ALGO_KEYS[e.key])
            elif e.type == pygame.VIDEORESIZE:
                self._on_resize(e.w, e.h)
            elif e.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN):
                for b in self._buttons:
                    b.handle_mouse(e)

    # ---------- drawing ----------
    def _draw(self):
        self.screen.fill(BACKDROP)
        self._draw_grid()
        self._draw_metrics_and_buttons()
        pygame.display.flip()

    def _cell_rect(self, cell: Tuple[int, int]) -> pygame.Rect:
        cs = self.cell_size
        ox, oy = self._grid_origin
        row, col = cell
        return pygame.Rect(ox + col*cs, oy + row*cs, cs, cs)

    def _draw_grid(self):
        grid = self.maze.grid
        cs = self.cell_size
        for row in range(grid.rows):
            for col in range(grid.cols):
                rect = self._cell_rect((row, col))
                color = WALL_DARK if grid.cells[row][col] == CellType.WALL else FLOOR_GRAY
                pygame.draw.rect(self.screen, color, rect)
                pygame.draw.rect(self.screen, BLACK, rect, 1)

        # overlays
        for cells, tint in ((self.closed_set, NEON_MAG_A), (self.open_set, NEON_CYAN_A)):
            for c in cells:
                s = pygame.Surface((cs, cs), pygame.SRCALPHA); s.fill(tint)
                self.screen.blit(s, self._cell_rect(c).topleft)

        solution = self.replay.solution_cells() if self.replay is not None else []
        if len(solution) >= 2:
            pts = [self._cell_rect(c).center for c in solution]
            glow = pygame.Surface(self.screen.get_size(), pygame.SRCALPHA)
            pygame.draw.lines(glow, (0, 255, 220, 60), False, pts, 7)
            self.screen.blit(glow, (0,0), special_flags=pygame.BLEND_ADD)
            pygame.draw.lines(self.screen, NEON_MINT, False, pts, max(2, cs // 4))

        self._draw_badge(self.maze.start, "S", BLUE)
        self._draw_badge(self.maze.end, "E", RED)

    def _draw_badge(self, cell: Coordinate, label: str, color: Tuple[int,int,int]):
        center = self._cell_rect(cell).center
        pygame.draw.circle(self.screen, color, center, max(4, self.cell_size//2 - 2))
        txt = self.font_small.render(label, True, WHITE)
        self.screen.blit(txt, txt.get_rect(center=center))

    # ---------- buttons + metrics ----------
    def _build_buttons(self):
        self._buttons.clear()
        rb = self._right_band
        x = rb.x + 16
        y = rb.y + 260  # leaves space for metrics card above
        w = max(160, rb.width - 32)
        h = 34
        gap = 8

        def row(*specs):
            """Lay out (label, callback) pairs side by side on one row."""
            nonlocal y
            each = (w - gap * (len(specs) - 1)) // len(specs)
            made = []
            for i, (label, cb) in enumerate(specs):
                btn = UIButton(label, pygame.Rect(x + i * (each + gap), y, each, h), cb)
                self._buttons.append(btn)
                made.append(btn)
            y += h + gap
            return made

        self.btn_run, = row(("Run / Pause", self._toggle_run))
        self.btn_run.togglable = True
        row(("Step Once", self._do_step))
        row(("Reset", self._reset), ("New Maze", self._new_maze))
        row(("Slower", lambda: self._bump_speed(-1)), ("Faster", lambda: self._bump_speed(+1)))
        row(("Rows -", lambda: self._resize_maze(-1, 0)), ("Rows +", lambda: self._resize_maze(+1, 0)))
        row(("Cols -", lambda: self._resize_maze(0, -1)), ("Cols +", lambda: self._resize_maze(0, +1)))

        self._algo_buttons: Dict[Algorithm, UIButton] = {}
        for algo in Algorithm:
            btn, = row((f"Algo: {algo.value}", lambda a=algo: self._switch_algo(a)))
            btn.togglable = True
            self._algo_buttons[algo] = btn

        self._refresh_active_states()

    def _refresh_active_states(self):
        if not self._buttons:
            return
        self.btn_run.active = self.running
        for algo, btn in self._algo_buttons.items():
            btn.active = algo == self.selected_algo

    def _draw_metrics_and_buttons(self):
        rb = self._right_band

        card = pygame.Surface((rb.width - 20, 240), pygame.SRCALPHA)
        pygame.draw.rect(card, CARD_BG, card.get_rect(), border_radius=14)
        self.screen.blit(card, (rb.x + 10, rb.y + 10))

        x0 = rb.x + 24
        y0 = rb.y + 18

        def line(text, big=False, color=TEXT_LIGHT):
            nonlocal y0
            f = self.font_big if big else self.font
            surf = f.render(text, True, color)
            self.screen.blit(surf, (x0, y0))
            y0 += surf.get_height() + 6

        line("Metrics", big=True, color=ACCENT_GOLD)
        grid = self.maze.grid
        m = self._last_metrics
        line(f"Maze: {grid.rows} x {grid.cols}")
        line(f"Popped: {m.get('popped', 0)}   Open: {m.get('open_size', 0)}")
        line(f"Closed: {m.get('closed_count', 0)}")
        shown = len(self.replay.solution_cells()) if self.replay is not None else 0
        line(f"Path Len: {shown} / {m.get('path_len', 0)}")
        line("-" * 26)
        line(f"Algo: {self.selected_algo.value}")
        line(f"Delay: {self.delay_ms} ms   State: {self.state}")
        line(self.message, color=WARN_RED if self.state == "No path" else TEXT_LIGHT)

        for b in self._buttons:
            b.draw(self.screen, self.font)


# ---------- headless ----------
def run_headless(settings: config.Settings) -> int:
    """Generate, search, and log the result as text. Returns a process exit code."""
    algo = resolve_algorithm(settings.algorithm)
    maze = generate_maze(settings.rows, settings.cols, seed=settings.seed)
    result = find_path(maze.grid, maze.start, maze.end, algo)

    replay = Replay(maze.grid, maze.start, maze.end, result)
    replay.skip_to_end()
    for text_row in replay.cell_states().to_strings():
        logger.info(text_row)

    if result.found:
        logger.info(f"Path found using {result.algorithm}. Length: {result.length}, "
                    f"explored {len(result.visited)} cells")
        return 0
    logger.warning(f"No path found using {result.algorithm}")
    return 2


# ---------- main ----------
def main(argv: Optional[Sequence[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    try:
        settings = config.resolve_settings(args)
    except MazeConfigError as ex:
        logging.basicConfig()
        logger.error(f"Invalid settings: {ex}")
        return 1
    config.configure_logging(settings.log_level)

    try:
        if settings.headless:
            return run_headless(settings)
        viewer = Viewer(settings)
    except (MazeConfigError, UnknownAlgorithmError) as ex:
        logger.error(f"Failed to start: {ex}")
        return 1
    viewer.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
