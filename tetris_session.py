"""Game session: spawn -> fall -> lock -> clear cycle and gravity interval.

The session never owns a timer. The caller invokes tick() at the current
`interval` and command() on input; every transition completes inside that call.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from tetris_board import Board
from tetris_config import CONFIG
from tetris_piece import Draw, Piece, random_piece, rotate_cw
from tetris_rng import LCGRandom

log = logging.getLogger(__name__)


class State(Enum):
    SPAWNING = "spawning"
    FALLING = "falling"
    LOCKING = "locking"
    LINE_CLEARING = "line_clearing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class Command(Enum):
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    SOFT_DROP = "soft_drop"
    HARD_DROP = "hard_drop"
    ROTATE = "rotate"
    TOGGLE_PAUSE = "toggle_pause"


@dataclass(frozen=True)
class Step:
    moved: bool = False
    locked: bool = False
    cleared: int = 0
    game_over: bool = False


NOTHING = Step()

# rotation fallback columns, tried in order
KICKS = (0, -1, 1)


def next_interval(interval: int, cleared: int) -> int:
    if cleared <= 0:
        return interval
    return max(CONFIG["MIN_DELAY_MS"], interval - CONFIG["DELAY_STEP_MS"] * cleared)


class GameSession:
    def __init__(self, draw: Optional[Draw] = None,
                 width: Optional[int] = None, height: Optional[int] = None,
                 interval: Optional[int] = None,
                 pause_blocks_input: Optional[bool] = None):
        self.draw = draw if draw is not None else LCGRandom(CONFIG["SEED"])
        self.board = Board(CONFIG["BOARD_WIDTH"] if width is None else width,
                           CONFIG["BOARD_HEIGHT"] if height is None else height)
        self.start_interval = interval if interval is not None else CONFIG["START_DELAY_MS"]
        if self.start_interval <= 0:
            raise ValueError(f"interval must be positive, got {self.start_interval}")
        if pause_blocks_input is None:
            pause_blocks_input = CONFIG["PAUSE_BLOCKS_INPUT"]
        self.pause_blocks_input = pause_blocks_input
        self._start()

    def _start(self):
        self.current: Optional[Piece] = None
        self.interval = self.start_interval
        self.paused = False
        self.game_over = False
        self.lines = 0
        self.pieces = 0
        self._spawn()

    @property
    def state(self) -> State:
        if self.game_over: return State.GAME_OVER
        if self.paused: return State.PAUSED
        return State.FALLING

    def reset(self):
        self.board.reset()
        self._start()
        log.info("session reset")

    # ---------- transitions ----------
    def _spawn(self) -> bool:
        shape, kind = random_piece(self.draw)
        piece = Piece.spawn(kind, shape, self.board.width)
        if not self.board.is_valid_position(piece.shape, piece.row, piece.col):
            self.current = None
            self.game_over = True
            log.info("game over: %s blocked at spawn (lines=%d, pieces=%d)",
                     kind.name, self.lines, self.pieces)
            return False
        self.current = piece
        return True

    def _lock(self) -> Step:
        p = self.current
        self.board.lock_piece(p.shape, p.kind, p.row, p.col)
        self.pieces += 1
        cleared = self.board.clear_lines()
        if cleared:
            self.lines += cleared
            old, self.interval = self.interval, next_interval(self.interval, cleared)
            if self.interval != old:
                log.debug("gravity interval %d -> %d ms", old, self.interval)
        spawned = self._spawn()
        return Step(locked=True, cleared=cleared, game_over=not spawned)

    # ---------- operations ----------
    def move(self, dx: int, dy: int) -> bool:
        if self.current is None: return False
        p = self.current.moved(dy, dx)
        if not self.board.is_valid_position(p.shape, p.row, p.col): return False
        self.current = p
        return True

    def tick(self) -> Step:
        if self.game_over or self.paused: return NOTHING
        if self.move(0, 1): return Step(moved=True)
        return self._lock()

    def soft_drop(self) -> Step:
        if self.game_over: return NOTHING
        if self.move(0, 1): return Step(moved=True)
        return self._lock()

    def hard_drop(self) -> Step:
        if self.game_over: return NOTHING
        moved = False
        while self.move(0, 1): moved = True
        step = self._lock()
        return Step(moved, step.locked, step.cleared, step.game_over)

    def rotate(self) -> bool:
        if self.current is None: return False
        shape = rotate_cw(self.current.shape)
        for dx in KICKS:
            if self.board.is_valid_position(shape, self.current.row, self.current.col + dx):
                self.current = self.current.rotated(shape, dx)
                return True
        return False

    def toggle_pause(self) -> bool:
        if self.game_over: return self.paused
        self.paused = not self.paused
        log.debug("paused" if self.paused else "resumed")
        return self.paused

    def command(self, kind: Command) -> Step:
        if not isinstance(kind, Command):
            raise ValueError(f"unknown command: {kind!r}")
        if self.game_over: return NOTHING
        if kind is Command.TOGGLE_PAUSE:
            self.toggle_pause()
            return NOTHING
        if self.paused and self.pause_blocks_input: return NOTHING
        if kind is Command.MOVE_LEFT: return Step(moved=self.move(-1, 0))
        if kind is Command.MOVE_RIGHT: return Step(moved=self.move(1, 0))
        if kind is Command.ROTATE: return Step(moved=self.rotate())
        if kind is Command.SOFT_DROP: return self.soft_drop()
        return self.hard_drop()
