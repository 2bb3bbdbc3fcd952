"""Fixed-interval gravity tick source"""
from typing import Callable, Optional

import pygame


class TickScheduler:
    """Produces ticks every `interval_ms`, measured from the end of the previous tick.

    A tick that returns a falsy value stops the schedule; `start()` makes the
    first tick due right away. Late ticks run once, never catch up.
    """
    def __init__(self, interval_ms: int, clock: Callable[[], int] = pygame.time.get_ticks):
        self.interval_ms = interval_ms
        self.clock = clock
        self.due: Optional[int] = None

    @property
    def active(self) -> bool:
        return self.due is not None

    def start(self):
        self.due = self.clock()

    def stop(self):
        self.due = None

    def poll(self, tick: Callable[[], bool]) -> bool:
        """Run `tick` if it is due; returns whether it ran."""
        if self.due is None or self.clock() < self.due:
            return False
        if tick():
            self.due = self.clock() + self.interval_ms
        else:
            self.due = None
        return True
