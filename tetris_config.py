
COLS, ROWS = 10, 20

CONFIG = {
    "CELL_SIZE": 30,
    "MARGIN": 8,
    "TICK_MS": 500,
    "SPAWN_X": 4,
    "SPAWN_Y": 0,
    "SEED": None,
    "LOG_LEVEL": "INFO",
}
