import argparse
import logging

import pygame
from tetris_config import CONFIG, apply_args
from tetris_engine import Game, NullAudio
from tetris_rng import PieceRandom
from tetris_scheduler import TickScheduler
from tetris_input import command_for, START_KEYS, QUIT_KEYS
from tetris_layout import compute_dims
from tetris_render import CanvasRenderer
from tetris_audio import MusicPlayer

log = logging.getLogger("tetris")


def get_args(argv=None):
    parser = argparse.ArgumentParser(description="Falling-block puzzle game")
    parser.add_argument("--cols", type=int, help="grid width in blocks")
    parser.add_argument("--rows", type=int, help="grid height in blocks")
    parser.add_argument("--cell_size", type=int, help="block size in pixels")
    parser.add_argument("--tick_ms", type=int, help="gravity interval in milliseconds")
    parser.add_argument("--seed", type=int, help="piece randomizer seed")
    parser.add_argument("--music_path", type=str)
    parser.add_argument("--music_volume", type=float)
    parser.add_argument("--mute", action="store_true", default=None)
    parser.add_argument("--log_level", type=str, choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def create_window(dims):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), pygame.DOUBLEBUF, vsync=1)
    except (TypeError, pygame.error):
        return pygame.display.set_mode((dims.total_w, dims.total_h), pygame.DOUBLEBUF)


def main(argv=None):
    apply_args(get_args(argv))
    logging.basicConfig(level=CONFIG["LOG_LEVEL"],
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.MOUSEBUTTONDOWN])

    dims = compute_dims()
    screen = create_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 24)
    big_font = pygame.font.SysFont(None, 42)

    render = CanvasRenderer(dims, font, big_font)
    audio = NullAudio() if CONFIG["MUTE"] else MusicPlayer(CONFIG["MUSIC_PATH"], CONFIG["MUSIC_VOLUME"])
    game = Game(render, render, audio, PieceRandom(CONFIG["SEED"]), dims.cols, dims.rows)
    ticks = TickScheduler(CONFIG["TICK_MS"])
    clock = pygame.time.Clock()

    def start():
        if game.start():
            ticks.start()

    running = True
    while running:
        clock.tick(CONFIG["FPS"])

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False
            elif e.type == pygame.KEYDOWN:
                if e.key in QUIT_KEYS:
                    running = False
                elif e.key in START_KEYS:
                    start()
                else:
                    game.handle(command_for(e.key))
            elif e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                if render.start_clicked(e.pos):
                    start()

        ticks.poll(game.tick)

        render.compose(screen)
        pygame.display.flip()

    ticks.stop()
    audio.stop()
    log.info("exiting with score %d", game.score)
    pygame.quit()


if __name__ == '__main__':
    main()
