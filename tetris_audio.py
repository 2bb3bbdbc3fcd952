"""Background music; playback problems never reach the game"""
import logging
import pygame

log = logging.getLogger(__name__)


class MusicPlayer:
    """Loops one music file through pygame.mixer.music.

    Any mixer/file failure is logged once and turns the player into a no-op.
    """
    def __init__(self, path: str, volume: float = 0.5):
        self.path = path
        self.volume = volume
        self.enabled = True
        self._loaded = False

    def _disable(self, what, err):
        log.warning("audio %s failed: %s", what, err)
        self.enabled = False

    def play(self):
        if not self.enabled: return
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
            if not self._loaded:
                pygame.mixer.music.load(self.path)
                pygame.mixer.music.set_volume(self.volume)
                self._loaded = True
            pygame.mixer.music.play(-1)
        except (pygame.error, OSError) as e:
            self._disable("playback", e)

    def stop(self):
        if not self.enabled or not self._loaded: return
        try:
            pygame.mixer.music.stop()
            pygame.mixer.music.rewind()
        except pygame.error as e:
            self._disable("stop", e)
