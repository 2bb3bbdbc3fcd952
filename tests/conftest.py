import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest
import pygame

from tetris_board import new_board


@pytest.fixture
def board():
    return new_board()


@pytest.fixture
def pg():
    pygame.init()
    yield pygame
    pygame.quit()


class RecordingRenderer:
    def __init__(self):
        self.frames = 0
        self.cells = []
        self.previews = []

    def clear(self):
        self.frames += 1
        self.cells = []

    def draw_cell(self, x, y, color):
        self.cells.append((x, y, color))

    def draw_preview(self, shape, color):
        self.previews.append((shape, color))


class RecordingHud:
    def __init__(self):
        self.scores = []
        self.game_overs = []
        self.start_enabled = True

    def show_score(self, text):
        self.scores.append(text)

    def show_game_over(self, score):
        self.game_overs.append(score)

    def set_start_enabled(self, enabled):
        self.start_enabled = enabled


class RecordingAudio:
    def __init__(self):
        self.calls = []

    def play(self):
        self.calls.append("play")

    def stop(self):
        self.calls.append("stop")


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def hud():
    return RecordingHud()


@pytest.fixture
def audio():
    return RecordingAudio()
