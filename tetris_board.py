"""Grid helpers: collide, merge, sweep, drop position"""
import logging
from typing import List, Optional
from tetris_piece import Piece, COLS, ROWS

log = logging.getLogger(__name__)

# None is an empty cell, otherwise the color id of the locked block
Board = List[List[Optional[str]]]


def new_board(cols: int = COLS, rows: int = ROWS) -> Board:
    return [[None] * cols for _ in range(rows)]


def collide(board: Board, piece: Piece) -> bool:
    rows, cols = len(board), len(board[0])
    for bx, by in piece.cells():
        if bx < 0 or bx >= cols or by >= rows: return True
        if by >= 0 and board[by][bx]: return True
    return False


def merge(board: Board, piece: Piece) -> int:
    """Copy the piece's cells into the board; returns how many were dropped.

    Cells above the top row have nowhere to go and are skipped.
    """
    lost = 0
    for bx, by in piece.cells():
        if by < 0:
            lost += 1; continue
        board[by][bx] = piece.color
    if lost:
        log.warning("merged %s piece with %d cell(s) above the grid", piece.name, lost)
    return lost


def sweep(board: Board) -> int:
    """Remove full rows bottom-up, refilling from the top; returns rows cleared.

    The scan index only moves up on a row that was kept, so the row that
    slid down into a cleared slot is checked too.
    """
    cols = len(board[0])
    c = 0; y = len(board) - 1
    while y >= 0:
        if all(board[y]):
            del board[y]; board.insert(0, [None] * cols); c += 1
        else:
            y -= 1
    return c


def drop_y(board: Board, piece: Piece) -> int:
    """Lowest y the piece can rest at in its current column and rotation."""
    test = Piece(piece.kind, piece.shape, piece.color, piece.x, piece.y)
    while not collide(board, test):
        test.y += 1
    return test.y - 1
