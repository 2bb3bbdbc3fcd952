"""
Game engine: state, rules and the piece lifecycle.

The rules are plain functions over a GameState so each one can be exercised
on its own. `Game` strings them together (spawn -> move/rotate/drop -> lock
-> clear -> respawn), keeps the NotStarted/Running/GameOver lifecycle and
talks to the outside world only through the small protocols below.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Protocol

from tetris_board import Board, new_board, collide, merge, sweep, drop_y
from tetris_piece import Piece, Shape, SHAPES, COLORS, COLS, ROWS, rotate_cw
from tetris_rng import PieceRandom

log = logging.getLogger(__name__)

LINE_SCORE = 100


class Status(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    GAME_OVER = "game_over"


class Command(Enum):
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    SOFT_DROP = "soft_drop"
    ROTATE = "rotate"
    HARD_DROP = "hard_drop"


# ---------- Collaborators ----------
class Renderer(Protocol):
    def clear(self) -> None: ...
    def draw_cell(self, x: int, y: int, color: str) -> None: ...
    def draw_preview(self, shape: Shape, color: str) -> None: ...


class Hud(Protocol):
    def show_score(self, text: str) -> None: ...
    def show_game_over(self, score: int) -> None: ...
    def set_start_enabled(self, enabled: bool) -> None: ...


class AudioSink(Protocol):
    def play(self) -> None: ...
    def stop(self) -> None: ...


class NullRenderer:
    def clear(self): pass
    def draw_cell(self, x, y, color): pass
    def draw_preview(self, shape, color): pass


class NullHud:
    def show_score(self, text): pass
    def show_game_over(self, score): pass
    def set_start_enabled(self, enabled): pass


class NullAudio:
    def play(self): pass
    def stop(self): pass


# ---------- State & rules ----------
@dataclass
class GameState:
    board: Board = field(default_factory=new_board)
    piece: Optional[Piece] = None
    next_kind: Optional[int] = None
    score: int = 0
    game_over: bool = False
    started: bool = False

    @property
    def cols(self) -> int:
        return len(self.board[0])

    @property
    def rows(self) -> int:
        return len(self.board)

    def reset(self):
        self.board = new_board(self.cols, self.rows)
        self.piece = None
        self.next_kind = None
        self.score = 0
        self.game_over = False


def spawn(state: GameState, rng: PieceRandom) -> Piece:
    """Bring in the pending shape and roll the next one.

    A spawn that already overlaps locked cells flags game over; the grid is
    left untouched.
    """
    kind = state.next_kind if state.next_kind is not None else rng.next_piece()
    state.next_kind = rng.next_piece()
    state.piece = Piece.spawn(kind, state.cols)
    if collide(state.board, state.piece):
        state.game_over = True
    return state.piece


def clear_lines(state: GameState) -> int:
    cleared = sweep(state.board)
    if cleared:
        state.score += cleared * LINE_SCORE
        log.debug("cleared %d line(s), score %d", cleared, state.score)
    return cleared


def lock(state: GameState, rng: PieceRandom) -> int:
    """Merge the resting piece, clear lines, spawn the next one."""
    merge(state.board, state.piece)
    cleared = clear_lines(state)
    spawn(state, rng)
    return cleared


def move_left(state: GameState) -> bool:
    p = state.piece
    p.x -= 1
    if collide(state.board, p):
        p.x += 1; return False
    return True


def move_right(state: GameState) -> bool:
    p = state.piece
    p.x += 1
    if collide(state.board, p):
        p.x -= 1; return False
    return True


def move_down(state: GameState, rng: PieceRandom) -> bool:
    """One gravity step. Returns False when the piece locked instead."""
    p = state.piece
    p.y += 1
    if collide(state.board, p):
        p.y -= 1
        lock(state, rng)
        return False
    return True


def rotate(state: GameState) -> bool:
    """Rotate clockwise in place; rejected rotations keep the old shape."""
    p = state.piece
    previous = p.shape
    p.shape = rotate_cw(previous)
    if collide(state.board, p):
        p.shape = previous; return False
    return True


def hard_drop(state: GameState) -> int:
    """Move the piece to its resting row; returns rows travelled.

    Locking is left to the next gravity step, so the piece can still be
    shifted sideways until then.
    """
    p = state.piece
    start = p.y
    p.y = drop_y(state.board, p)
    return p.y - start


# ---------- Engine ----------
class Game:
    def __init__(self, renderer: Optional[Renderer] = None, hud: Optional[Hud] = None,
                 audio: Optional[AudioSink] = None, rng: Optional[PieceRandom] = None,
                 cols: int = COLS, rows: int = ROWS):
        self.renderer = renderer or NullRenderer()
        self.hud = hud or NullHud()
        self.audio = audio or NullAudio()
        self.rng = rng or PieceRandom()
        self.state = GameState(new_board(cols, rows))
        self._handlers = {
            Command.MOVE_LEFT: self.move_left,
            Command.MOVE_RIGHT: self.move_right,
            Command.SOFT_DROP: self.soft_drop,
            Command.ROTATE: self.rotate,
            Command.HARD_DROP: self.hard_drop,
        }

    @property
    def status(self) -> Status:
        if not self.state.started:
            return Status.NOT_STARTED
        if self.state.game_over:
            return Status.GAME_OVER
        return Status.RUNNING

    @property
    def score(self) -> int:
        return self.state.score

    # ---------- Lifecycle ----------
    def start(self) -> bool:
        if self.state.started:
            return False
        self.state.reset()
        self.state.started = True
        self.hud.set_start_enabled(False)
        self.hud.show_score("Score: 0")
        spawn(self.state, self.rng)
        log.info("game started (seed=%s)", self.rng.seed)
        self.audio.play()
        self.render()
        return True

    def tick(self) -> bool:
        """One loop iteration. Returns True while the loop should keep ticking."""
        status = self.status
        if status is Status.NOT_STARTED:
            return False
        if status is Status.GAME_OVER:
            self._finish()
            return False
        self._step_down()
        self.render()
        return True

    def _finish(self):
        final = self.state.score
        log.info("game over, final score %d", final)
        self.audio.stop()
        self.hud.show_game_over(final)
        self.state.reset()
        self.state.started = False
        self.hud.show_score("Score: 0")
        self.hud.set_start_enabled(True)
        self.render()

    def _step_down(self):
        before = self.state.score
        move_down(self.state, self.rng)
        if self.state.score != before:
            self.hud.show_score(f"Score: {self.state.score}")

    # ---------- Player commands ----------
    def _accepts_input(self) -> bool:
        return self.status is Status.RUNNING

    def move_left(self):
        if not self._accepts_input(): return
        move_left(self.state); self.render()

    def move_right(self):
        if not self._accepts_input(): return
        move_right(self.state); self.render()

    def soft_drop(self):
        if not self._accepts_input(): return
        self._step_down(); self.render()

    def rotate(self):
        if not self._accepts_input(): return
        rotate(self.state); self.render()

    def hard_drop(self):
        if not self._accepts_input(): return
        hard_drop(self.state); self.render()

    def handle(self, command) -> None:
        handler = self._handlers.get(command)
        if handler is not None:
            handler()

    # ---------- Drawing ----------
    def render(self):
        r = self.renderer
        r.clear()
        for y, row in enumerate(self.state.board):
            for x, color in enumerate(row):
                if color:
                    r.draw_cell(x, y, color)
        p = self.state.piece
        if p is not None:
            for x, y in p.cells():
                r.draw_cell(x, y, p.color)
        if self.state.next_kind is not None:
            k = self.state.next_kind
            r.draw_preview(SHAPES[k], COLORS[k])
