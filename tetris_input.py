"""Key and clock events -> session calls"""
from typing import List, Optional
import pygame
from tetris_session import Command, GameSession, Step

KEYMAP = {
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_DOWN: Command.SOFT_DROP,
    pygame.K_UP: Command.ROTATE,
    pygame.K_SPACE: Command.HARD_DROP,
    pygame.K_p: Command.TOGGLE_PAUSE,
}
RESTART_KEY = pygame.K_r


class TickMediator:
    def __init__(self, session: GameSession):
        self.session = session
        self.acc = 0

    def handle_key(self, key) -> Optional[Step]:
        if key == RESTART_KEY:
            self.session.reset(); self.acc = 0
            return None
        kind = KEYMAP.get(key)
        if kind is None: return None
        step = self.session.command(kind)
        if step.locked: self.acc = 0
        return step

    def update(self, dt) -> List[Step]:
        s = self.session
        if s.paused or s.game_over:
            self.acc = 0; return []
        self.acc += dt
        steps = []
        # interval may shrink after a clear, so re-read it every pass
        while self.acc >= s.interval and not s.game_over:
            self.acc -= s.interval
            step = s.tick()
            steps.append(step)
            if step.locked:
                self.acc = 0; break
        return steps
