import unittest

from tetris_piece import Cell, ORDER, Piece, SHAPES, check_shape, random_piece, rotate_cw
from tetris_rng import LCGRandom


class RotateTests(unittest.TestCase):
    def test_i_becomes_vertical(self):
        self.assertEqual(rotate_cw([[1, 1, 1, 1]]), [[1], [1], [1], [1]])

    def test_cell_mapping(self):
        t = SHAPES[Cell.T]
        out = rotate_cw(t)
        self.assertEqual(out, [[0, 6], [6, 6], [0, 6]])
        h = len(t)
        for r, row in enumerate(t):
            for c, v in enumerate(row):
                self.assertEqual(out[c][h - 1 - r], v)

    def test_four_turns_is_identity(self):
        for kind, shape in SHAPES.items():
            s = shape
            for _ in range(4):
                s = rotate_cw(s)
            self.assertEqual(s, shape, kind.name)

    def test_input_untouched(self):
        s = [[0, 5, 5], [5, 5, 0]]
        rotate_cw(s)
        self.assertEqual(s, [[0, 5, 5], [5, 5, 0]])

    def test_o_is_invariant(self):
        self.assertEqual(rotate_cw(SHAPES[Cell.O]), SHAPES[Cell.O])


class CatalogTests(unittest.TestCase):
    def test_ids_match_shapes(self):
        for kind, shape in SHAPES.items():
            ids = {v for row in shape for v in row if v}
            self.assertEqual(ids, {int(kind)})
            self.assertEqual(sum(1 for row in shape for v in row if v), 4)

    def test_random_piece_uses_draw(self):
        for i, kind in enumerate(ORDER):
            shape, got = random_piece(lambda n: i)
            self.assertEqual(got, kind)
            self.assertEqual(shape, SHAPES[kind])

    def test_random_piece_returns_copy(self):
        shape, _ = random_piece(lambda n: 3)
        shape[0][0] = 0
        self.assertEqual(SHAPES[Cell.O], [[4, 4], [4, 4]])

    def test_draw_range_is_seven(self):
        seen = []
        random_piece(lambda n: seen.append(n) or 0)
        self.assertEqual(seen, [7])

    def test_bad_draw(self):
        for bad in (-1, 7, 100):
            with self.assertRaises(ValueError):
                random_piece(lambda n: bad)

    def test_with_lcg(self):
        draw = LCGRandom(1)
        kinds = {random_piece(draw)[1] for _ in range(200)}
        self.assertEqual(kinds, set(ORDER))

    def test_check_shape(self):
        check_shape([[1]])
        for bad in ([], [[]], [[1, 1], [1]]):
            with self.assertRaises(ValueError):
                check_shape(bad)


class PieceTests(unittest.TestCase):
    def test_spawn_anchor(self):
        p = Piece.spawn(Cell.I, SHAPES[Cell.I], 10)
        self.assertEqual((p.row, p.col), (0, 3))
        self.assertEqual(Piece.spawn(Cell.I, SHAPES[Cell.I], 4).col, 0)

    def test_moved_returns_new_piece(self):
        p = Piece.spawn(Cell.T, SHAPES[Cell.T], 10)
        q = p.moved(1, -1)
        self.assertEqual((q.row, q.col), (1, 2))
        self.assertEqual((p.row, p.col), (0, 3))

    def test_cells(self):
        p = Piece(Cell.T, SHAPES[Cell.T], 5, 2)
        self.assertEqual(sorted(p.cells()), [(5, 2), (5, 3), (5, 4), (6, 3)])


if __name__ == "__main__":
    unittest.main()
