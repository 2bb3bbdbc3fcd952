"""Uniform piece randomizer"""
import random
from typing import Optional

from tetris_piece import SHAPES


class PieceRandom:
    """Picks each of the seven shapes with equal probability, independent of history."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def next_piece(self) -> int:
        return self._rng.randrange(len(SHAPES))
