#!/usr/bin/env python3
"""
Grid Search Viewer: paint obstacles, run DFS, replay what it explored

- Mouse:
    click a cell -> paint obstacle / erase (depends on the active tool)
- Keyboard:
    [1]/[2]/[3]  -> switch map
    [O]          -> tool: add obstacles
    [E]          -> tool: erase
    [SPACE]      -> start search
    [C]          -> clear search (keep obstacles)
    [R]          -> new game
    [+]/[-]      -> replay steps/sec
    [Q]/[ESC]    -> quit

Map:
- ENV: GRIDSEARCH_MAP=path/to/map.json
- CLI: --map=path/to/map.json
"""

# --- bootstrap import path so `from gridsearch...` works when run as a script ---
import sys, os, time
from pathlib import Path
_REPO_ROOT = Path(__file__).resolve().parents[2]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))
# -------------------------------------------------------------------------------

from typing import Tuple, Optional
import pygame

from gridsearch.core.board import Board
from gridsearch.core.dfs import run_traversal
from gridsearch.core.maps import load_map, default_board
from gridsearch.core.types import Cell, SquareKind, TraversalResult, GridSearchError

# ---------- Config ----------
MAP_DIR = _REPO_ROOT / "maps"
MAP_FILES = {
    "01_open_field": MAP_DIR / "01_open_field.json",
    "02_wall":       MAP_DIR / "02_wall.json",
    "03_sealed":     MAP_DIR / "03_sealed.json",
}
PANEL_W = 300            # status text + buttons, right of the grid
GRID_MARGIN = 16
CELL_SIZE_DEFAULT = 48
MIN_CELL_SIZE = 8
BUTTON_H = 36
FONT_NAME = None  # default pygame font

# Colors
WHITE       = (255,255,255)
BLACK       = (  0,  0,  0)
GREEN       = ( 46,139, 87)
PURPLE      = (128,  0,128)
YELLOW      = (255,215,  0)
EXPLORED_A  = (70,130,180,90)

PANEL_BG        = (28, 30, 38)
BUTTON_FILL     = (48, 52, 64)
BUTTON_SELECTED = (120,170,255)
TEXT_LIGHT      = (230,235,240)
TITLE_GOLD      = (255,210,0)

CELL_COLORS = {
    SquareKind.UNVISITED:     WHITE,
    SquareKind.EXPLORED:      WHITE,
    SquareKind.OBSTACLE:      BLACK,
    SquareKind.SOLUTION_PATH: YELLOW,
    SquareKind.START:         GREEN,
    SquareKind.END:           PURPLE,
}

# tool modes (what a click on a cell does)
TOOL_OBSTACLE = "obstacle"
TOOL_ERASE    = "erase"


def resolve_map_path() -> Optional[Path]:
    """--map=... wins over GRIDSEARCH_MAP; None means the built-in default board."""
    value = os.getenv("GRIDSEARCH_MAP")
    for arg in sys.argv:
        if arg.startswith("--map="):
            value = arg.split("=", 1)[1]
    return Path(value) if value else None


# ---------- Panel button ----------
class PanelButton:
    """Labelled rect in the side panel; `selected` outlines tool buttons."""
    def __init__(self, label: str, rect: pygame.Rect, on_click):
        self.label = label
        self.rect = rect
        self.on_click = on_click
        self.selected = False

    def draw(self, screen: pygame.Surface, font: pygame.font.Font):
        pygame.draw.rect(screen, BUTTON_FILL, self.rect)
        if self.selected:
            pygame.draw.rect(screen, BUTTON_SELECTED, self.rect, 2)
        text = font.render(self.label, True, TEXT_LIGHT)
        screen.blit(text, text.get_rect(center=self.rect.center))

    def click(self, pos: Tuple[int, int]) -> bool:
        if not self.rect.collidepoint(pos):
            return False
        self.on_click()
        return True


# ---------- Viewer ----------
class Viewer:
    def __init__(self, board: Board, map_key: str = "custom"):
        pygame.init()
        self.board = board
        self.selected_map_key = map_key
        self.font = pygame.font.Font(FONT_NAME, 18)
        self.font_title = pygame.font.Font(FONT_NAME, 24)

        self.tool = TOOL_OBSTACLE
        self.result: Optional[TraversalResult] = None
        self.revealed = 0                 # prefix of result.explored drawn so far
        self.state = "Idle"               # Idle | Replaying | Done | No path
        self.steps_per_sec = 20
        self._last_step_t = 0.0
        self.clock = pygame.time.Clock()

        win_w = board.width * CELL_SIZE_DEFAULT + 2 * GRID_MARGIN + PANEL_W
        win_h = max(board.height * CELL_SIZE_DEFAULT + 2 * GRID_MARGIN, 480)
        self.screen = pygame.display.set_mode((win_w, win_h), pygame.RESIZABLE)
        pygame.display.set_caption(f"Grid Search - {map_key}")
        self._fit(win_w, win_h)

    # ---------- geometry ----------
    def _fit(self, win_w: int, win_h: int):
        """Largest square cell that fits the grid left of the panel."""
        room_w = win_w - PANEL_W - 2 * GRID_MARGIN
        room_h = win_h - 2 * GRID_MARGIN
        self.cell_size = max(MIN_CELL_SIZE, min(room_w // self.board.width,
                                                room_h // self.board.height))
        self.panel_x = 2 * GRID_MARGIN + self.board.width * self.cell_size
        self._make_buttons()

    def cell_at(self, pos: Tuple[int, int]) -> Optional[Cell]:
        px, py = pos[0] - GRID_MARGIN, pos[1] - GRID_MARGIN
        if px < 0 or py < 0:
            return None
        c = (px // self.cell_size, py // self.cell_size)
        return c if self.board.in_bounds(c) else None

    def _make_buttons(self):
        x, w = self.panel_x + GRID_MARGIN, PANEL_W - 2 * GRID_MARGIN
        specs = [
            ("Start", self._start_search),
            ("Add obstacles", lambda: self._set_tool(TOOL_OBSTACLE)),
            ("Erase", lambda: self._set_tool(TOOL_ERASE)),
            ("Clear search", self._clear_search),
            ("New game", self._new_game),
            ("Slower", lambda: self._bump_speed(-5)),
            ("Faster", lambda: self._bump_speed(+5)),
        ]
        top = 200
        self.buttons = [PanelButton(label, pygame.Rect(x, top + i * (BUTTON_H + 8), w, BUTTON_H), cb)
                        for i, (label, cb) in enumerate(specs)]
        self._tool_buttons = {TOOL_OBSTACLE: self.buttons[1], TOOL_ERASE: self.buttons[2]}
        self._mark_tool()

    def _mark_tool(self):
        for tool, btn in self._tool_buttons.items():
            btn.selected = tool == self.tool

    def run(self):
        while True:
            self._handle_events()
            if self.state == "Replaying":
                self._tick_replay()
            self._draw()
            self.clock.tick(60)

    # ---------- actions ----------
    def _start_search(self):
        if self.state == "Replaying":
            return
        if self.result is not None:
            self.board.clear_search()
        self.result = run_traversal(self.board)
        self.revealed = 0
        self.state = "Replaying"

    def _tick_replay(self):
        now = time.time()
        if now - self._last_step_t < 1.0 / max(1, self.steps_per_sec):
            return
        self._last_step_t = now
        self.revealed = min(self.revealed + 1, len(self.result.explored))
        if self.revealed == len(self.result.explored):
            self.state = "Done" if self.result.solved else "No path"

    def _clear_search(self):
        self.board.clear_search()
        self.result = None
        self.revealed = 0
        self.state = "Idle"

    def _new_game(self):
        b = self.board
        b.reset(b.width, b.height, b.start, b.end)
        self._clear_search()

    def _set_tool(self, tool: str):
        self.tool = tool
        self._mark_tool()

    def _paint(self, c: Cell):
        # editing only between runs; endpoints are not paintable
        if self.state == "Replaying" or c in (self.board.start, self.board.end):
            return
        if self.result is not None:
            self._clear_search()
        kind = SquareKind.OBSTACLE if self.tool == TOOL_OBSTACLE else SquareKind.UNVISITED
        self.board.set_classification(c[0], c[1], kind)

    def _switch_map(self, key: str):
        try:
            board = load_map(MAP_FILES[key])
        except (OSError, GridSearchError) as ex:
            print(f"Failed to load map {key}: {ex}")
            return
        self.board = board
        self.selected_map_key = key
        pygame.display.set_caption(f"Grid Search - {key}")
        self._clear_search()
        self._fit(*self.screen.get_size())

    def _bump_speed(self, dv: int):
        self.steps_per_sec = max(1, min(120, self.steps_per_sec + dv))

    # ---------- events ----------
    def _handle_events(self):
        keys = {
            pygame.K_SPACE:  self._start_search,
            pygame.K_o:      lambda: self._set_tool(TOOL_OBSTACLE),
            pygame.K_e:      lambda: self._set_tool(TOOL_ERASE),
            pygame.K_c:      self._clear_search,
            pygame.K_r:      self._new_game,
            pygame.K_PLUS:   lambda: self._bump_speed(+5),
            pygame.K_EQUALS: lambda: self._bump_speed(+5),
            pygame.K_MINUS:  lambda: self._bump_speed(-5),
            pygame.K_1:      lambda: self._switch_map("01_open_field"),
            pygame.K_2:      lambda: self._switch_map("02_wall"),
            pygame.K_3:      lambda: self._switch_map("03_sealed"),
        }
        for e in pygame.event.get():
            if e.type == pygame.QUIT or (e.type == pygame.KEYDOWN and e.key in (pygame.K_ESCAPE, pygame.K_q)):
                pygame.quit(); sys.exit(0)
            elif e.type == pygame.KEYDOWN and e.key in keys:
                keys[e.key]()
            elif e.type == pygame.VIDEORESIZE:
                self.screen = pygame.display.set_mode((e.w, e.h), pygame.RESIZABLE)
                self._fit(e.w, e.h)
            elif e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                if any(b.click(e.pos) for b in self.buttons):
                    continue
                c = self.cell_at(e.pos)
                if c is not None:
                    self._paint(c)

    # ---------- drawing ----------
    def _draw(self):
        self.screen.fill(PANEL_BG)
        self._draw_grid()
        self._draw_panel()
        pygame.display.flip()

    def _visible_kind(self, x: int, y: int, revealed: set) -> SquareKind:
        """Board kind, hiding search marks the replay hasn't reached yet."""
        kind = self.board.classify(x, y)
        if self.state != "Replaying" or kind not in (SquareKind.EXPLORED, SquareKind.SOLUTION_PATH):
            return kind
        return SquareKind.EXPLORED if (x, y) in revealed else SquareKind.UNVISITED

    def _draw_grid(self):
        cs = self.cell_size
        revealed = set(self.result.explored[:self.revealed]) if self.result else set()
        overlay = pygame.Surface((cs, cs), pygame.SRCALPHA)
        overlay.fill(EXPLORED_A)

        for y in range(self.board.height):
            for x in range(self.board.width):
                kind = self._visible_kind(x, y, revealed)
                rect = pygame.Rect(GRID_MARGIN + x * cs, GRID_MARGIN + y * cs, cs, cs)
                pygame.draw.rect(self.screen, CELL_COLORS[kind], rect)
                if kind == SquareKind.EXPLORED:
                    self.screen.blit(overlay, rect.topleft)
                pygame.draw.rect(self.screen, BLACK, rect, 1)

    def _draw_panel(self):
        x, y = self.panel_x + GRID_MARGIN, GRID_MARGIN
        explored_total = len(self.result.explored) if self.result else 0
        path_len = len(self.result.path) if self.result and self.state == "Done" else 0
        rows = [
            (self.font_title, "Depth-first search", TITLE_GOLD),
            (self.font, f"State: {self.state}", TEXT_LIGHT),
            (self.font, f"Explored: {self.revealed} / {explored_total}", TEXT_LIGHT),
            (self.font, f"Path length: {path_len}", TEXT_LIGHT),
            (self.font, f"Map: {self.selected_map_key}", TEXT_LIGHT),
            (self.font, f"Replay: {self.steps_per_sec} cells/s", TEXT_LIGHT),
        ]
        for font, text, color in rows:
            surf = font.render(text, True, color)
            self.screen.blit(surf, (x, y))
            y += surf.get_height() + 8

        for b in self.buttons:
            b.draw(self.screen, self.font)


# ---------- main ----------
def main():
    path = resolve_map_path()
    if path is None:
        board, key = default_board(), "default"
    else:
        try:
            board, key = load_map(path), path.stem
        except (OSError, GridSearchError) as ex:
            print(f"Failed to load map {path}: {ex}")
            sys.exit(1)
    Viewer(board, key).run()

if __name__ == "__main__":
    main()
