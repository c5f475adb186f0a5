import unittest

import pygame

from tetris_input import KEYMAP, RESTART_KEY, TickMediator
from tetris_piece import Cell, ORDER
from tetris_session import Command, GameSession


def session(**kw):
    return GameSession(draw=lambda n: ORDER.index(Cell.T), **kw)


class TickMediatorTests(unittest.TestCase):
    def test_ticks_follow_interval(self):
        s = session()
        m = TickMediator(s)
        self.assertEqual(m.update(499), [])
        self.assertEqual(s.current.row, 0)
        self.assertEqual(len(m.update(1)), 1)
        self.assertEqual(s.current.row, 1)
        self.assertEqual(len(m.update(1000)), 2)
        self.assertEqual(s.current.row, 3)

    def test_paused_drops_elapsed_time(self):
        s = session()
        m = TickMediator(s)
        m.update(400)
        s.toggle_pause()
        self.assertEqual(m.update(5000), [])
        self.assertEqual(s.current.row, 0)
        s.toggle_pause()
        self.assertEqual(m.update(400), [])

    def test_lock_restarts_timer(self):
        s = GameSession(draw=lambda n: 0, width=4, height=1)
        m = TickMediator(s)
        steps = m.update(1000)
        self.assertEqual(len(steps), 1)
        self.assertEqual(steps[0].cleared, 1)
        self.assertEqual(s.interval, 490)
        self.assertEqual(m.acc, 0)

    def test_keys(self):
        s = session()
        m = TickMediator(s)
        self.assertTrue(m.handle_key(pygame.K_LEFT).moved)
        self.assertEqual(s.current.col, 2)
        m.handle_key(pygame.K_p)
        self.assertTrue(s.paused)
        self.assertIsNone(m.handle_key(pygame.K_F12))

    def test_hard_drop_key(self):
        s = session()
        m = TickMediator(s)
        m.update(300)
        step = m.handle_key(pygame.K_SPACE)
        self.assertTrue(step.locked)
        self.assertEqual(m.acc, 0)

    def test_restart_key(self):
        s = session()
        m = TickMediator(s)
        m.handle_key(pygame.K_SPACE)
        self.assertIsNone(m.handle_key(RESTART_KEY))
        self.assertTrue(s.board.is_empty())
        self.assertEqual(s.pieces, 0)

    def test_keymap_covers_commands(self):
        self.assertEqual(set(KEYMAP.values()), set(Command))


if __name__ == "__main__":
    unittest.main()
