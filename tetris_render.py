"""
pygame front-end for the engine snapshot.

- Pre-render one cell Surface per colour tag (plus a grey one for the paused board).
- Pre-render the static background (grid + panel frame + preview frame).
- Cache HUD text surfaces; re-render only when values change.
- Key auto-repeat (DAS/ARR) feeds the same hold detector the terminal uses.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Tuple, Optional
from tetris_config import CONFIG
from tetris_engine import GameInfo
from tetris_fsm import Action, Phase
from tetris_input import KeyboardController
from tetris_layout import Dims, compute_dims, COLS, ROWS
from tetris_overlay import Banner
from tetris_piece import BrickColor

# Colors per colour tag
COLORS: Dict[int, Tuple[int,int,int]] = {
    BrickColor.LIGHT_BLUE: (102,224,255),
    BrickColor.DARK_BLUE: (106,119,255),
    BrickColor.ORANGE: (255,158,94),
    BrickColor.YELLOW: (255,224,102),
    BrickColor.GREEN: (94,224,142),
    BrickColor.RED: (255,102,119),
    BrickColor.MAGENTA: (200,119,255),
}
COLORLESS = (120,125,150)

KEYMAP = {
    pygame.K_LEFT: Action.LEFT,
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_UP: Action.UP,
    pygame.K_DOWN: Action.DOWN,
    pygame.K_SPACE: Action.ACTION,
    pygame.K_RETURN: Action.START,
    pygame.K_KP_ENTER: Action.START,
    pygame.K_ESCAPE: Action.PAUSE,
    pygame.K_p: Action.PAUSE,
    pygame.K_q: Action.TERMINATE,
}

@dataclass
class HudCache:
    score: int = -1
    high_score: int = -1
    level: int = -1
    speed: int = -1
    score_s: Optional[pygame.Surface] = None
    high_s: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None
    speed_s: Optional[pygame.Surface] = None
    next_label: Optional[pygame.Surface] = None
    controls: Optional[list] = None

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self._make_static()
        self._make_cells()
        self.hud = HudCache()

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        grid_col = (40,50,90)
        for x in range(COLS+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(ROWS+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21,25,53), panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), panel_rect, 1)
        # Next preview frame
        self.pv_cell = max(14, int(d.cell*0.75))
        self.pv_x = d.panel_x + 12
        self.pv_y = d.panel_y + 200
        frame = pygame.Rect(self.pv_x-6, self.pv_y-6, self.pv_cell*4+12, self.pv_cell*4+12)
        pygame.draw.rect(self.bg, (15,18,40), frame)
        pygame.draw.rect(self.bg, (55,65,110), frame, 1)

    # ---------- Small cell sprites ----------
    def _make_cells(self):
        self.cell_surf: Dict[int, pygame.Surface] = {}
        self.pv_surf: Dict[int, pygame.Surface] = {}
        c = self.dims.cell
        for tag, col in list(COLORS.items()) + [(0, COLORLESS)]:
            s = pygame.Surface((c-2, c-2))
            s.fill(col)
            self.cell_surf[tag] = s
            p = pygame.Surface((self.pv_cell-2, self.pv_cell-2))
            p.fill(col)
            self.pv_surf[tag] = p

    def redraw_static(self, screen: pygame.Surface):
        screen.blit(self.bg, (0,0))

    # ---------- Board ----------
    def draw_board(self, screen: pygame.Surface, field, colorless: bool = False):
        d = self.dims
        for y, row in enumerate(field):
            for x, tag in enumerate(row):
                if tag:
                    surf = self.cell_surf[0 if colorless else tag]
                    screen.blit(surf, (d.board_x + x*d.cell + 1, d.board_y + y*d.cell + 1))

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen: pygame.Surface, info: GameInfo, colorless: bool = False):
        d = self.dims
        f = self.font
        col = (200,210,240)
        if info.score != self.hud.score:
            self.hud.score = info.score
            self.hud.score_s = f.render(f"Score: {info.score}", True, col)
        if info.high_score != self.hud.high_score:
            self.hud.high_score = info.high_score
            self.hud.high_s = f.render(f"High score: {info.high_score}", True, col)
        if info.level != self.hud.level:
            self.hud.level = info.level
            self.hud.level_s = f.render(f"Level: {info.level}", True, col)
        if info.speed != self.hud.speed:
            self.hud.speed = info.speed
            self.hud.speed_s = f.render(f"Speed: {info.speed} ms", True, col)
        if self.hud.next_label is None:
            self.hud.next_label = f.render("Next:", True, col)
        y = d.panel_y + 12
        for surf in (self.hud.score_s, self.hud.high_s, self.hud.level_s, self.hud.speed_s):
            screen.blit(surf, (d.panel_x + 12, y)); y += 28
        screen.blit(self.hud.next_label, (d.panel_x + 12, self.pv_y - 30))
        for r, row in enumerate(info.next):
            for c, tag in enumerate(row):
                if tag:
                    surf = self.pv_surf[0 if colorless else tag]
                    screen.blit(surf, (self.pv_x + c*self.pv_cell + 1, self.pv_y + r*self.pv_cell + 1))
        if not self.hud.controls:
            self.hud.controls = [
                f.render("Controls:", True, col),
                f.render("←/→ Move", True, (165,175,215)),
                f.render("↓ Drop (hold: hard)", True, (165,175,215)),
                f.render("Space Rotate", True, (165,175,215)),
                f.render("Enter Start", True, (165,175,215)),
                f.render("Esc Pause • Q Quit", True, (165,175,215)),
            ]
        y = self.pv_y + self.pv_cell*4 + 24
        for surf in self.hud.controls:
            screen.blit(surf, (d.panel_x + 12, y)); y += 20


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


class WindowView:
    def __init__(self):
        pygame.init()
        pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])
        pygame.key.set_repeat(CONFIG["DAS_MS"], CONFIG["ARR_MS"])
        self.dims = compute_dims()
        self.screen = recreate_window(self.dims)
        pygame.display.set_caption("Brick Game - Tetris")
        self.font = pygame.font.SysFont(None, 22)
        self.big_font = pygame.font.SysFont(None, 36)
        self.render = RenderAssets(self.dims, self.font)
        self.banner = Banner()
        self.keyboard = KeyboardController(KEYMAP)

    def poll(self):
        e = pygame.event.wait(CONFIG["POLL_MS"])
        if e.type == pygame.QUIT:
            return Action.TERMINATE, False
        if e.type == pygame.KEYDOWN:
            return self.keyboard.feed(e.key)
        return self.keyboard.feed(None)

    def draw(self, info: GameInfo, phase: Phase):
        colorless = info.pause == 1
        self.render.redraw_static(self.screen)
        self.render.draw_board(self.screen, info.field, colorless)
        self.render.draw_panel_hud(self.screen, info, colorless)
        self.banner.draw(self.screen, self.font, self.big_font, self.dims, phase)
        pygame.display.flip()

    def close(self):
        pygame.quit()


def run_window(engine, loop):
    view = WindowView()
    try:
        return loop(engine, view)
    finally:
        view.close()
