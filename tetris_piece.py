"""Piece catalog: cell ids, spawn shapes, clockwise rotation"""
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Dict, List, Tuple

Shape = List[List[int]]
Draw = Callable[[int], int]


class Cell(IntEnum):
    EMPTY = 0
    I = 1
    J = 2
    L = 3
    O = 4
    S = 5
    T = 6
    Z = 7


SHAPES: Dict[Cell, Shape] = {
    Cell.I: [[1,1,1,1]],
    Cell.J: [[2,0,0],[2,2,2]],
    Cell.L: [[0,0,3],[3,3,3]],
    Cell.O: [[4,4],[4,4]],
    Cell.S: [[0,5,5],[5,5,0]],
    Cell.T: [[6,6,6],[0,6,0]],
    Cell.Z: [[7,7,0],[0,7,7]],
}

# draw() index -> piece type
ORDER = [Cell.I, Cell.J, Cell.L, Cell.O, Cell.S, Cell.T, Cell.Z]


def check_shape(m: Shape):
    if not m or not m[0]:
        raise ValueError("shape must have at least one row and column")
    w = len(m[0])
    if any(len(r) != w for r in m):
        raise ValueError(f"shape is not rectangular: {m!r}")

for _s in SHAPES.values(): check_shape(_s)


def rotate_cw(m: Shape) -> Shape:
    """(r, c) of an h x w matrix moves to (c, h-1-r) of the w x h result."""
    return [list(r) for r in zip(*m[::-1])]


def random_piece(draw: Draw) -> Tuple[Shape, Cell]:
    i = draw(len(ORDER))
    if not 0 <= i < len(ORDER):
        raise ValueError(f"draw returned {i}, expected 0..{len(ORDER)-1}")
    t = ORDER[i]
    return [r[:] for r in SHAPES[t]], t


@dataclass(frozen=True)
class Piece:
    kind: Cell
    shape: Shape
    row: int
    col: int

    @staticmethod
    def spawn(kind: Cell, shape: Shape, width: int):
        return Piece(kind, shape, 0, width // 2 - 2)

    def moved(self, dy: int, dx: int) -> "Piece":
        return Piece(self.kind, self.shape, self.row + dy, self.col + dx)

    def rotated(self, shape: Shape, dx: int = 0) -> "Piece":
        return Piece(self.kind, shape, self.row, self.col + dx)

    def cells(self) -> List[Tuple[int, int]]:
        return [(self.row + r, self.col + c)
                for r, line in enumerate(self.shape)
                for c, v in enumerate(line) if v]
