
CONFIG = {
    "BOARD_WIDTH": 10,
    "BOARD_HEIGHT": 20,
    "CELL_SIZE": 30,
    "START_DELAY_MS": 500,
    "MIN_DELAY_MS": 50,
    "DELAY_STEP_MS": 10,
    "PAUSE_BLOCKS_INPUT": False,
    "SEED": None,
    "FPS": 60,
}
