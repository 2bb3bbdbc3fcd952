# tetris_layout.py
from dataclasses import dataclass
import pygame
from tetris_config import CONFIG

@dataclass
class Dims:
    cols: int
    rows: int
    cell: int
    margin: int
    panel_w: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int
    panel_x: int
    panel_y: int
    preview_cell: int

    @property
    def board_rect(self) -> pygame.Rect:
        return pygame.Rect(self.board_x, self.board_y, self.board_w, self.board_h)

    @property
    def preview_rect(self) -> pygame.Rect:
        return pygame.Rect(self.panel_x + 12, self.panel_y + 110, self.preview_cell * 4, self.preview_cell * 4)

    @property
    def start_rect(self) -> pygame.Rect:
        return pygame.Rect(self.panel_x + 12, self.panel_y + self.board_h - 56, self.panel_w - 24, 40)

def compute_dims(config=CONFIG) -> Dims:
    cols, rows = int(config["COLS"]), int(config["ROWS"])
    cell = int(config["CELL_SIZE"])
    margin = 16
    panel_w = 200

    board_w = cols * cell
    board_h = rows * cell

    return Dims(
        cols=cols, rows=rows, cell=cell, margin=margin, panel_w=panel_w,
        board_w=board_w, board_h=board_h,
        total_w=margin + board_w + margin + panel_w + margin,
        total_h=margin + board_h + margin,
        board_x=margin, board_y=margin,
        panel_x=margin + board_w + margin, panel_y=margin,
        preview_cell=max(12, cell * 3 // 4),
    )
