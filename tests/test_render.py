import pygame

from tetris_config import CONFIG
from tetris_engine import Game
from tetris_layout import compute_dims
from tetris_piece import COLORS, NAMES
from tetris_render import CanvasRenderer
from tetris_rng import PieceRandom


def make_renderer():
    dims = compute_dims()
    return dims, CanvasRenderer(dims, pygame.font.Font(None, 20))


def test_dims_follow_config():
    d = compute_dims(dict(CONFIG, CELL_SIZE=20, COLS=8, ROWS=16))
    assert (d.board_w, d.board_h) == (160, 320)
    assert d.panel_x == d.board_x + d.board_w + d.margin
    assert d.total_h == d.board_h + 2 * d.margin


def test_draw_cell_paints_block(pg):
    dims, r = make_renderer()
    r.draw_cell(2, 3, COLORS[0])
    c = dims.cell
    assert r.board_surface.get_at((2*c + c//2, 3*c + c//2)) == pygame.Color(COLORS[0])
    r.clear()
    assert r.board_surface.get_at((2*c + c//2, 3*c + c//2)) == pygame.Color(0, 0, 0)


def test_preview_centers_shape(pg):
    dims, r = make_renderer()
    o = NAMES.index("O")
    r.draw_preview(((1, 1), (1, 1)), COLORS[o])
    pv = dims.preview_cell
    assert r.preview_surface.get_at((pv + pv//2, pv + pv//2)) == pygame.Color(COLORS[o])
    assert r.preview_surface.get_at((pv//2, pv//2)).a == 0


def test_hud_state(pg):
    dims, r = make_renderer()
    assert r.overlay.active and r.start_enabled
    assert r.start_clicked(dims.start_rect.center)
    r.set_start_enabled(False)
    assert not r.overlay.active
    assert not r.start_clicked(dims.start_rect.center)
    r.show_score("Score: 300")
    assert r.score_text == "Score: 300"
    r.show_game_over(300)
    r.set_start_enabled(True)
    assert r.overlay.title == "Game Over!"
    assert "Score: 300" in r.overlay.lines


def test_engine_draws_through_renderer(pg):
    dims, r = make_renderer()
    game = Game(r, r, rng=PieceRandom(7))
    game.start()
    p = game.state.piece
    c = dims.cell
    x, y = next(iter(p.cells()))
    assert r.board_surface.get_at((x*c + c//2, y*c + c//2)) == pygame.Color(p.color)
    screen = pygame.Surface((dims.total_w, dims.total_h))
    r.compose(screen)
    assert screen.get_at((dims.board_x + x*c + c//2, dims.board_y + y*c + c//2)) == pygame.Color(p.color)
