"""Board: collision, lock, line clear"""
import logging
from typing import List

from tetris_piece import Cell, Shape

log = logging.getLogger(__name__)

Grid = List[List[Cell]]


class Board:
    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"board must be at least 1x1, got {width}x{height}")
        self.width = width
        self.height = height
        self.grid: Grid = self._empty_rows(height)

    def _empty_rows(self, n: int) -> Grid:
        return [[Cell.EMPTY] * self.width for _ in range(n)]

    def reset(self):
        self.grid = self._empty_rows(self.height)

    def cell(self, row: int, col: int) -> Cell:
        return self.grid[row][col]

    def rows(self) -> Grid:
        return [r[:] for r in self.grid]

    def is_empty(self) -> bool:
        return all(v == Cell.EMPTY for r in self.grid for v in r)

    def is_valid_position(self, shape: Shape, row: int, col: int) -> bool:
        for y, line in enumerate(shape):
            for x, v in enumerate(line):
                if not v: continue
                by, bx = row + y, col + x
                if bx < 0 or bx >= self.width or by >= self.height: return False
                # rows above the top are only checked against the walls
                if by >= 0 and self.grid[by][bx] != Cell.EMPTY: return False
        return True

    def lock_piece(self, shape: Shape, color_id: Cell, row: int, col: int):
        for y, line in enumerate(shape):
            for x, v in enumerate(line):
                if not v: continue
                by, bx = row + y, col + x
                if 0 <= by < self.height and 0 <= bx < self.width:
                    self.grid[by][bx] = Cell(color_id)

    def clear_lines(self) -> int:
        kept = [r for r in self.grid if any(v == Cell.EMPTY for v in r)]
        cleared = self.height - len(kept)
        if cleared:
            self.grid = self._empty_rows(cleared) + kept
            log.debug("cleared %d row(s)", cleared)
        return cleared

    def __str__(self):
        return "\n".join("".join(str(int(v)) for v in r) for r in self.grid)
