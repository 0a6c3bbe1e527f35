
CONFIG = {
    "FIELD_ROWS": 20,
    "FIELD_COLS": 10,
    "POLL_MS": 50,
    "HOLD_MS": 75,
    "DAS_MS": 170,
    "ARR_MS": 30,
    "CELL_SIZE": 28,
    "HIGHSCORE_FILE": "highscore.txt",
    "CUSTOM_BRICKS": False,
    "SEED": None,
    "LOG_FILE": None,
    "LOG_LEVEL": "INFO",
}
