"""Piece model, shape catalog, rotation"""
from dataclasses import dataclass
from typing import List, Tuple

COLS, ROWS = 10, 20

Shape = Tuple[Tuple[int, ...], ...]

NAMES: List[str] = ["I", "J", "L", "O", "S", "T", "Z"]

SHAPES: List[Shape] = [
    ((1,1,1,1),),
    ((1,0,0),(1,1,1)),
    ((0,0,1),(1,1,1)),
    ((1,1),(1,1)),
    ((0,1,1),(1,1,0)),
    ((0,1,0),(1,1,1)),
    ((1,1,0),(0,1,1)),
]

# Color ids double as the value stored in locked grid cells
COLORS: List[str] = [
    "#FF0D72",
    "#0DC2FF",
    "#0DFF72",
    "#F538FF",
    "#FF8E0D",
    "#FFE138",
    "#3877FF",
]


def rotate_cw(m: Shape) -> Shape:
    """Column i of the source, read bottom-to-top, becomes row i."""
    return tuple(zip(*m[::-1]))


@dataclass
class Piece:
    kind: int
    shape: Shape
    color: str
    x: int
    y: int

    @property
    def name(self) -> str:
        return NAMES[self.kind]

    @property
    def width(self) -> int:
        return len(self.shape[0])

    def cells(self):
        """Yield absolute (x, y) for every occupied cell of the shape."""
        for dy, row in enumerate(self.shape):
            for dx, v in enumerate(row):
                if v:
                    yield self.x + dx, self.y + dy

    @staticmethod
    def spawn(kind: int, cols: int = COLS) -> "Piece":
        shape = SHAPES[kind]
        return Piece(kind, shape, COLORS[kind], cols // 2 - len(shape[0]) // 2, 0)
