"""
pygame presentation adapter for the engine.

- The engine draws into a cached board surface (and a small preview surface);
  nothing touches the window until the main loop composes a frame.
- Block sprites are pre-rendered once per color id and blitted.
- HUD text surfaces are cached and re-rendered only when their text changes.
"""
from __future__ import annotations
import pygame
from typing import Dict, Optional
from tetris_layout import Dims
from tetris_overlay import Overlay

BG = (10, 13, 34)
GRID = (40, 50, 90)
PANEL = (21, 25, 53)
FRAME = (50, 60, 100)
TEXT = (200, 210, 240)
DIM_TEXT = (165, 175, 215)

CONTROLS = [
    "←/→ Move",
    "↓ Soft drop",
    "↑ Rotate",
    "Space Hard drop",
    "Enter Start",
]

class CanvasRenderer:
    """Board/preview drawing surface plus the score text and Start control."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: Optional[pygame.font.Font] = None):
        self.dims = dims
        self.font = font
        self.board_surface = pygame.Surface((dims.board_w, dims.board_h))
        self.preview_surface = pygame.Surface((dims.preview_cell * 4, dims.preview_cell * 4), pygame.SRCALPHA)
        self._cells: Dict[tuple, pygame.Surface] = {}
        self.score_text = "Score: 0"
        self._score_s: Optional[pygame.Surface] = None
        self.start_enabled = True
        self.overlay = Overlay(big_font or font, font)
        self._make_static()
        self.clear()

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill(BG)
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, PANEL, panel_rect)
        pygame.draw.rect(self.bg, FRAME, panel_rect, 1)
        frame = d.preview_rect.inflate(12, 12)
        pygame.draw.rect(self.bg, (15,18,40), frame)
        pygame.draw.rect(self.bg, (55,65,110), frame, 1)
        self.title = self.font.render("Tetris", True, (197,202,233))
        self.next_label = self.font.render("Next:", True, TEXT)
        self.controls = [self.font.render(line, True, DIM_TEXT) for line in CONTROLS]
        self.start_label = self.font.render("Start", True, (240,240,255))

    def cell_sprite(self, color: str, size: int) -> pygame.Surface:
        key = (color, size)
        s = self._cells.get(key)
        if s is None:
            s = pygame.Surface((size - 2, size - 2))
            s.fill(pygame.Color(color))
            self._cells[key] = s
        return s

    # ---------- Renderer ----------
    def clear(self):
        d = self.dims
        self.board_surface.fill((0, 0, 0))
        for x in range(d.cols + 1):
            pygame.draw.line(self.board_surface, GRID, (x*d.cell, 0), (x*d.cell, d.board_h))
        for y in range(d.rows + 1):
            pygame.draw.line(self.board_surface, GRID, (0, y*d.cell), (d.board_w, y*d.cell))
        self.preview_surface.fill((0, 0, 0, 0))

    def draw_cell(self, x: int, y: int, color: str):
        c = self.dims.cell
        self.board_surface.blit(self.cell_sprite(color, c), (x*c + 1, y*c + 1))

    def draw_preview(self, shape, color: str):
        pv = self.dims.preview_cell
        offx = (4 - len(shape[0])) // 2
        offy = (4 - len(shape)) // 2
        sprite = self.cell_sprite(color, pv)
        for y, row in enumerate(shape):
            for x, v in enumerate(row):
                if v:
                    self.preview_surface.blit(sprite, ((x + offx)*pv + 1, (y + offy)*pv + 1))

    # ---------- Hud ----------
    def show_score(self, text: str):
        if text != self.score_text:
            self.score_text = text
            self._score_s = None

    def show_game_over(self, score: int):
        self.overlay.show_game_over(score)

    def set_start_enabled(self, enabled: bool):
        self.start_enabled = enabled
        if enabled:
            self.overlay.active = True
        else:
            self.overlay.hide()

    def start_clicked(self, pos) -> bool:
        return self.start_enabled and self.dims.start_rect.collidepoint(pos)

    # ---------- Frame composition ----------
    def compose(self, screen: pygame.Surface):
        d = self.dims
        screen.blit(self.bg, (0, 0))
        screen.blit(self.board_surface, (d.board_x, d.board_y))
        if self._score_s is None:
            self._score_s = self.font.render(self.score_text, True, TEXT)
        screen.blit(self.title, (d.panel_x + 12, d.panel_y + 12))
        screen.blit(self._score_s, (d.panel_x + 12, d.panel_y + 44))
        screen.blit(self.next_label, (d.panel_x + 12, d.panel_y + 84))
        screen.blit(self.preview_surface, d.preview_rect.topleft)
        y = d.preview_rect.bottom + 24
        for surf in self.controls:
            screen.blit(surf, (d.panel_x + 12, y)); y += 20
        if self.start_enabled:
            pygame.draw.rect(screen, (60,90,170), d.start_rect, border_radius=6)
            screen.blit(self.start_label, self.start_label.get_rect(center=d.start_rect.center))
        self.overlay.draw(screen, d.board_rect)
