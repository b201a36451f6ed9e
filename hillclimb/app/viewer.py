# hillclimb/app/viewer.py
#!/usr/bin/env python3
"""
Hill Climb Viewer — grayscale elevation map + step-by-step Dijkstra

- Keyboard:
    [1]          -> search from the start marker
    [2]          -> search from every lowest cell
    [SPACE]      -> run/pause
    [N]          -> single step
    [R]          -> reset
    [+]/[-]      -> steps/sec
    [Q]/[ESC]    -> quit

Input:
- ENV: HILLCLIMB_INPUT=path
- CLI: --input=path
"""

import sys
import time
import logging
from typing import List, Tuple, Optional, Dict

import pygame

from hillclimb.app.cli import resolve_input_path, resolve_log_level
from hillclimb.app.logging_config import configure_logging
from hillclimb.core.dijkstra import DijkstraAlgo
from hillclimb.core.grid import MAX_ELEVATION, MIN_ELEVATION, GridParseError, HeightGrid, load_grid
from hillclimb.core.types import Cell

logger = logging.getLogger(__name__)

# ---------- Config ----------
PANEL_W = 360            # right band: metrics + buttons
GRID_MARGIN = 16
CELL_SIZE_DEFAULT = 24
FONT_NAME = None  # default pygame font
STEPS_PER_SEC_DEFAULT = 30

MODES = {
    "start":  "From S",
    "lowest": "From any 'a'",
}

# Colors
WHITE       = (255,255,255)
BLACK       = (  0,  0,  0)
BLUE        = ( 70,130,180)
RED         = (220, 50, 47)
NEON_CYAN_A = (0,150,255,110)
NEON_MAG_A  = (255,0,120,90)
NEON_MINT   = (0,255,200)

CARD_BG     = (24,28,36,220)
CARD_HI     = (255,255,255,18)
TEXT_LIGHT  = (230,235,240)
ACCENT_GOLD = (255,210,0)


def elevation_to_gray(e: int) -> Tuple[int, int, int]:
    v = int(round(e * 255 / MAX_ELEVATION))
    return (v, v, v)


# ---------- Simple UI Button ----------
class UIButton:
    def __init__(self, label: str, rect: pygame.Rect, callback, *, togglable: bool = False):
        self.label = label
        self.rect = rect
        self.callback = callback
        self.hover = False
        self.togglable = togglable
        self.active = False

    def set_active(self, value: bool):
        self.active = bool(value)

    def draw(self, screen: pygame.Surface, font: pygame.font.Font):
        base = pygame.Surface(self.rect.size, pygame.SRCALPHA)
        if self.active and self.togglable:
            bg = (58, 86, 160, 235)
        elif self.hover:
            bg = (46, 50, 60, 230)
        else:
            bg = (36, 40, 48, 220)
        pygame.draw.rect(base, bg, base.get_rect(), border_radius=10)
        screen.blit(base, self.rect.topleft)

        if self.active and self.togglable:
            pygame.draw.rect(screen, (120, 170, 255, 255), self.rect, width=2, border_radius=10)

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
    def __init__(self, grid: HeightGrid):
        pygame.init()

        self.grid = grid
        self.cell_size = self._auto_cell_size(grid)
        self.font_small = pygame.font.Font(FONT_NAME, 14)
        self.font = pygame.font.Font(FONT_NAME, 18)
        self.font_big = pygame.font.Font(FONT_NAME, 22)

        grid_px_w = GRID_MARGIN*2 + grid.width * self.cell_size
        grid_px_h = GRID_MARGIN*2 + grid.height* self.cell_size
        win_w = grid_px_w + PANEL_W
        win_h = max(grid_px_h, 480)

        self.screen = pygame.display.set_mode((win_w, win_h), pygame.RESIZABLE)
        pygame.display.set_caption("Hill Climb — Dijkstra")

        self._buttons: list[UIButton] = []
        self._layout(win_w, win_h)

        self.open_set: set[Cell] = set()
        self.closed_set: set[Cell] = set()
        self.path: List[Cell] = []

        self.alive = True
        self.running = False
        self.clock = pygame.time.Clock()
        self.steps_per_sec = STEPS_PER_SEC_DEFAULT
        self._last_step_t = 0.0
        self.state = "Idle"
        self.mode = "start"

        self.algo = self._make_algo(self.mode)
        self._last_metrics: Dict = {}
        self._reset_overlays()

    # ---------- layout ----------
    def _layout(self, win_w: int, win_h: int):
        """Compute integer cell_size that fits window and center the grid."""
        avail_w = max(1, win_w - PANEL_W - 2 * GRID_MARGIN)
        avail_h = max(1, win_h - 2 * GRID_MARGIN)

        cs_by_w = avail_w // self.grid.width
        cs_by_h = avail_h // self.grid.height
        self.cell_size = int(max(4, min(cs_by_w, cs_by_h)))

        grid_plate_w = self.grid.width  * self.cell_size + 2 * GRID_MARGIN
        grid_plate_h = self.grid.height * self.cell_size + 2 * GRID_MARGIN

        left_x = max(0, min((win_w - (grid_plate_w + PANEL_W)) // 2, win_w - PANEL_W - grid_plate_w))
        top_y  = max(0, (win_h - grid_plate_h) // 2)

        self.canvas_rect = pygame.Rect(left_x, top_y, grid_plate_w, grid_plate_h)
        self._grid_origin = (self.canvas_rect.x + GRID_MARGIN,
                             self.canvas_rect.y + GRID_MARGIN)
        self._right_band = pygame.Rect(self.canvas_rect.right, 0,
                                       max(PANEL_W, win_w - self.canvas_rect.right),
                                       win_h)
        self._build_buttons()

    def _auto_cell_size(self, grid: HeightGrid) -> int:
        target_h = 720 - GRID_MARGIN*2
        return max(4, min(CELL_SIZE_DEFAULT, target_h // grid.height))

    # ---------- loop ----------
    def run(self):
        while self.alive:
            self._handle_events()
            if self.running:
                self._tick_algorithm()
            if self.alive:
                self._draw()
                self.clock.tick(60)
        pygame.quit()

    def _tick_algorithm(self):
        t0 = time.time()
        if t0 - self._last_step_t >= 1.0 / max(1, self.steps_per_sec):
            self._last_step_t = t0
            self._do_step()

    def _do_step(self):
        res = self.algo.step()
        for c in res.opened: self.open_set.add(c)
        for c in res.closed:
            self.closed_set.add(c)
            self.open_set.discard(c)
        if res.path is not None: self.path = res.path
        if res.status == "done":
            self.state = "Done"; self.running = False
        elif res.status == "no_path":
            self.state = "No path"; self.running = False
        else:
            self.state = "Running" if self.running else "Idle"
        if res.metrics:
            self._last_metrics = res.metrics
        self._refresh_active_states()

    def _quit(self):
        self.alive = False
        self.running = False

    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                self._quit()
            elif e.type == pygame.KEYDOWN:
                if e.key in (pygame.K_ESCAPE, pygame.K_q):
                    self._quit()
                elif e.key == pygame.K_SPACE:
                    self._toggle_run()
                elif e.key == pygame.K_r:
                    self._reset()
                elif e.key == pygame.K_n:
                    self._do_step()
                elif e.key in (pygame.K_PLUS, pygame.K_EQUALS):
                    self._bump_speed(+1)
                elif e.key in (pygame.K_MINUS, pygame.K_UNDERSCORE):
                    self._bump_speed(-1)
                elif e.key == pygame.K_1:
                    self._switch_mode("start")
                elif e.key == pygame.K_2:
                    self._switch_mode("lowest")
            elif e.type == pygame.VIDEORESIZE:
                self.screen = pygame.display.set_mode((e.w, e.h), pygame.RESIZABLE)
                self._layout(e.w, e.h)
            elif e.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN):
                for b in self._buttons:
                    b.handle_mouse(e)

    # ---------- algorithm / mode ----------
    def _make_algo(self, mode: str) -> DijkstraAlgo:
        algo = DijkstraAlgo(name=f"Dijkstra ({MODES[mode]})")
        if mode == "lowest":
            algo.init(self.grid, self.grid.cells_at_elevation(MIN_ELEVATION))
        else:
            algo.init(self.grid)
        return algo

    def _switch_mode(self, mode: str):
        if mode not in MODES or mode == self.mode:
            return
        self.mode = mode
        self.algo = self._make_algo(mode)
        self.running = False
        self.state = "Idle"
        self._reset_overlays()
        logger.debug("Switched to %s", self.algo.name)

    def _reset_overlays(self):
        self.open_set = set(self.algo.open_set)
        self.closed_set.clear()
        self.path = []
        self._last_metrics = {
            "algo": self.algo.name,
            "popped": 0,
            "open_size": len(self.open_set),
            "closed_count": 0,
            "path_len": 0,
            "total_cost": None,
        }
        self._refresh_active_states()

    def _reset(self):
        self.running = False
        self.state = "Idle"
        self.algo.reset()
        self._reset_overlays()

    def _toggle_run(self):
        if self.state in ("Done", "No path"):
            return
        self.running = not self.running
        self.state = "Running" if self.running else "Paused"
        self._refresh_active_states()

    def _bump_speed(self, dv: int):
        self.steps_per_sec = int(max(1, min(240, self.steps_per_sec + dv)))

    # ---------- drawing ----------
    def _draw(self):
        self._draw_backdrop()
        self._draw_grid()
        self._draw_metrics_and_buttons()
        pygame.display.flip()

    def _draw_backdrop(self):
        w, h = self.screen.get_size()
        top = (24, 26, 32); bot = (36, 40, 48)
        for y in range(h):
            t = y / max(1, h-1)
            c = tuple(int(top[i] + (bot[i]-top[i]) * t) for i in range(3))
            pygame.draw.line(self.screen, c, (0, y), (w, y))

    def _cell_rect(self, cell: Cell) -> pygame.Rect:
        cs = self.cell_size
        ox, oy = self._grid_origin
        col, row = cell
        return pygame.Rect(ox + col*cs, oy + row*cs, cs, cs)

    def _draw_grid(self):
        cs = self.cell_size
        for cell in self.grid.coords():
            pygame.draw.rect(self.screen, elevation_to_gray(self.grid.elevation(cell)), self._cell_rect(cell))

        for cell in self.closed_set:
            s = pygame.Surface((cs, cs), pygame.SRCALPHA); s.fill(NEON_MAG_A)
            self.screen.blit(s, self._cell_rect(cell).topleft)
        for cell in self.open_set:
            s = pygame.Surface((cs, cs), pygame.SRCALPHA); s.fill(NEON_CYAN_A)
            self.screen.blit(s, self._cell_rect(cell).topleft)

        if len(self.path) >= 2:
            pts = [self._cell_rect(c).center for c in self.path]
            pygame.draw.lines(self.screen, NEON_MINT, False, pts, max(2, cs // 5))

        self._draw_badge(self.grid.start, BLUE, "S")
        self._draw_badge(self.grid.end, RED, "E")

    def _draw_badge(self, cell: Cell, color: Tuple[int,int,int], label: str):
        center = self._cell_rect(cell).center
        pygame.draw.circle(self.screen, color, center, max(4, self.cell_size//2 - 2))
        txt = self.font_small.render(label, True, WHITE)
        self.screen.blit(txt, txt.get_rect(center=center))

    # ---------- buttons + metrics ----------
    def _build_buttons(self):
        self._buttons.clear()
        rb = self._right_band
        x = rb.x + 16
        y = rb.y + 210  # leaves space for metrics card above
        w = max(160, rb.width - 32)
        h = 34
        gap = 8

        def add(label, cb, *, togglable=False, store_as: Optional[str] = None):
            btn = UIButton(label, pygame.Rect(x, y, w, h), cb, togglable=togglable)
            self._buttons.append(btn)
            if store_as:
                setattr(self, store_as, btn)

        add("Run / Pause", self._toggle_run, togglable=True, store_as="btn_run"); y += h + gap
        add("Step Once", self._do_step); y += h + gap
        add("Reset", self._reset);       y += h + gap

        half = (w - 8) // 2
        self._buttons.append(UIButton("Speed −", pygame.Rect(x, y, half, h), lambda: self._bump_speed(-1)))
        self._buttons.append(UIButton("Speed +", pygame.Rect(x + half + 8, y, half, h), lambda: self._bump_speed(+1)))
        y += h + gap

        add(f"Mode: {MODES['start']}",  lambda: self._switch_mode("start"),  togglable=True, store_as="btn_mode_start"); y += h + gap
        add(f"Mode: {MODES['lowest']}", lambda: self._switch_mode("lowest"), togglable=True, store_as="btn_mode_lowest")

        self._refresh_active_states()

    def _refresh_active_states(self):
        if hasattr(self, "btn_run"):
            self.btn_run.set_active(getattr(self, "running", False))
        if hasattr(self, "btn_mode_start"):
            self.btn_mode_start.set_active(getattr(self, "mode", "start") == "start")
        if hasattr(self, "btn_mode_lowest"):
            self.btn_mode_lowest.set_active(getattr(self, "mode", "start") == "lowest")

    def _draw_metrics_and_buttons(self):
        rb = self._right_band

        card = pygame.Surface((rb.width - 20, 190), pygame.SRCALPHA)
        pygame.draw.rect(card, CARD_BG, card.get_rect(), border_radius=14)
        hi = pygame.Surface((card.get_width(), 24), pygame.SRCALPHA)
        pygame.draw.rect(hi, CARD_HI, hi.get_rect(), border_radius=14)
        card.blit(hi, (0,0))
        self.screen.blit(card, (rb.x + 10, rb.y + 10))

        x0 = rb.x + 24
        y0 = rb.y + 18

        def line(text, big=False, color=TEXT_LIGHT):
            nonlocal y0
            f = self.font_big if big else self.font
            surf = f.render(text, True, color)
            self.screen.blit(surf, (x0, y0))
            y0 += surf.get_height() + 6

        m = self._last_metrics
        line("Metrics", big=True, color=ACCENT_GOLD)
        line(f"Popped: {m.get('popped', 0)}")
        line(f"Open: {m.get('open_size', 0)}")
        line(f"Closed: {m.get('closed_count', 0)}")
        if m.get("total_cost") is not None:
            line(f"Steps: {m['total_cost']}")
        line(f"State: {self.state}")
        line(f"Speed: {self.steps_per_sec} steps/s")

        for b in self._buttons:
            b.draw(self.screen, self.font)


# ---------- main ----------
def main():
    argv = sys.argv[1:]
    configure_logging(resolve_log_level(argv))
    path = resolve_input_path(argv)
    try:
        grid = load_grid(path)
    except (OSError, GridParseError) as ex:
        logger.error("Failed to load %s: %s", path, ex)
        sys.exit(1)
    Viewer(grid).run()


if __name__ == "__main__":
    main()
