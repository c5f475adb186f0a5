"""
Rendering helpers for the Tetris front end.

- Pre-render one cell Surface per piece id and blit it.
- Pre-render static background (grid + panel frame) once per Dims.
- Cache HUD text surfaces; re-render only when values change.
Reads session accessors only; never mutates the session.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Tuple, Optional
from tetris_layout import Dims
from tetris_piece import Cell
from tetris_session import GameSession

COLORS: Dict[Cell, Tuple[int,int,int]] = {
    Cell.I: (102,224,255),
    Cell.J: (106,119,255),
    Cell.L: (255,158,94),
    Cell.O: (255,224,102),
    Cell.S: (94,224,142),
    Cell.T: (200,119,255),
    Cell.Z: (255,102,119),
}

@dataclass
class HudCache:
    lines: int = -1
    interval: int = -1
    title: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None
    interval_s: Optional[pygame.Surface] = None
    controls: Optional[list] = None

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.big_font = big_font
        self._make_static()
        self._make_cells()
        self.hud = HudCache()

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        pygame.draw.rect(self.bg, (0,0,0), (d.board_x, d.board_y, d.board_w, d.board_h))
        grid_col = (40,50,90)
        for x in range(d.cols+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(d.rows+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21,25,53), panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), panel_rect, 1)

    # ---------- Cell sprites: fill plus a brighter rim ----------
    def _make_cells(self):
        self.cell_surf: Dict[Cell, pygame.Surface] = {}
        c = self.dims.cell
        for t, col in COLORS.items():
            s = pygame.Surface((c-2, c-2))
            s.fill(col)
            rim = tuple(min(255, v + 60) for v in col)
            pygame.draw.rect(s, rim, (0,0,c-2,c-2), 1)
            self.cell_surf[t] = s

    def draw_cell(self, screen: pygame.Surface, t: Cell, row: int, col: int):
        if row < 0: return
        rx = self.dims.board_x + col*self.dims.cell + 1
        ry = self.dims.board_y + row*self.dims.cell + 1
        screen.blit(self.cell_surf[t], (rx, ry))

    def draw(self, screen: pygame.Surface, session: GameSession):
        screen.blit(self.bg, (0,0))
        board = session.board
        for y in range(board.height):
            for x in range(board.width):
                t = board.cell(y, x)
                if t != Cell.EMPTY: self.draw_cell(screen, t, y, x)
        if session.current is not None:
            for r, c in session.current.cells():
                self.draw_cell(screen, session.current.kind, r, c)
        self.draw_panel_hud(screen, session.lines, session.interval)
        if session.game_over:
            self.draw_banner(screen, "GAME OVER (R to Restart)")
        elif session.paused:
            self.draw_banner(screen, "PAUSED")

    def draw_banner(self, screen: pygame.Surface, text: str):
        d = self.dims
        msg = self.big_font.render(text, True, (255,220,220))
        rect = msg.get_rect(center=(d.board_x + d.board_w // 2, d.board_y + d.board_h // 2))
        screen.blit(msg, rect)

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen: pygame.Surface, lines: int, interval: int):
        d = self.dims
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("Tetris", True, (197,202,233))
        if lines != self.hud.lines:
            self.hud.lines = lines
            self.hud.lines_s = f.render(f"Lines: {lines}", True, (200,210,240))
        if interval != self.hud.interval:
            self.hud.interval = interval
            self.hud.interval_s = f.render(f"Drop: {interval} ms", True, (200,210,240))
        screen.blit(self.hud.title, (d.panel_x + 12, d.panel_y + 12))
        screen.blit(self.hud.lines_s, (d.panel_x + 12, d.panel_y + 44))
        screen.blit(self.hud.interval_s, (d.panel_x + 12, d.panel_y + 68))
        if not self.hud.controls:
            self.hud.controls = [
                f.render("Controls:", True, (200,210,240)),
                f.render("←/→ Move", True, (165,175,215)),
                f.render("↓ Soft drop", True, (165,175,215)),
                f.render("↑ Rotate", True, (165,175,215)),
                f.render("Space Hard drop", True, (165,175,215)),
                f.render("P Pause • R Restart", True, (165,175,215)),
            ]
        y = d.panel_y + 120
        for surf in self.hud.controls:
            screen.blit(surf, (d.panel_x + 12, y)); y += 20
