
CONFIG = {
    "COLS": 10,
    "ROWS": 20,
    "CELL_SIZE": 30,
    "TICK_MS": 1000,
    "FPS": 60,
    "SEED": None,
    "MUSIC_PATH": "tetris-theme.mp3",
    "MUSIC_VOLUME": 0.5,
    "MUTE": False,
    "LOG_LEVEL": "INFO",
}


def apply_args(args, config=CONFIG):
    """Copy command-line values that were actually given into the config."""
    for key, value in vars(args).items():
        name = key.upper()
        if name in config and value is not None:
            config[name] = value
    return config
