import logging
import sys

import pygame
from tetris_config import CONFIG
from tetris_input import TickMediator
from tetris_layout import compute_dims
from tetris_render import RenderAssets
from tetris_rng import LCGRandom
from tetris_session import GameSession

log = logging.getLogger("tetris")


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])
    # held arrows repeat like the OS keyboard
    pygame.key.set_repeat(170, 50)

    rng = LCGRandom(CONFIG["SEED"])
    session = GameSession(draw=rng)
    mediator = TickMediator(session)
    log.info("new session %dx%d, rng state=%#x", session.board.width, session.board.height, rng.state)

    dims = compute_dims(session.board.width, session.board.height)
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    render = RenderAssets(dims, pygame.font.SysFont(None, 22), pygame.font.SysFont(None, 34))
    clock = pygame.time.Clock()

    while True:
        dt = clock.tick(CONFIG["FPS"])
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if e.type == pygame.KEYDOWN:
                if e.key == pygame.K_ESCAPE:
                    pygame.quit(); sys.exit()
                mediator.handle_key(e.key)
        mediator.update(dt)
        render.draw(screen, session)
        pygame.display.flip()


if __name__ == '__main__':
    main()
