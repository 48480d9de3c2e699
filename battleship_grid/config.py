"""
Default game settings and logging setup for the board model.
"""

import logging
from pathlib import Path

# Grid defaults
DEFAULT_ROWS = 10
DEFAULT_COLS = 10
DEFAULT_PLAYER_COUNT = 1

# Ship length range. When only the smallest size is configured the largest
# becomes smallest + LARGEST_SHIP_OFFSET.
DEFAULT_SMALLEST_SHIP = 2
DEFAULT_LARGEST_SHIP = 5
LARGEST_SHIP_OFFSET = 5

SHIP_SIZES = [5, 4, 3, 3, 2]

# Cell markers stored in a board grid
EMPTY = 0
SHIP = 1
MISS = 2
HIT = 3

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(level=logging.INFO, log_file=None):
    """Install console (and optionally file) handlers on the package logger."""
    handlers = [logging.StreamHandler()]
    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path))

    package_logger = logging.getLogger('battleship_grid')
    package_logger.setLevel(level)
    # replace handlers from an earlier call so lines are not duplicated
    for old_handler in list(package_logger.handlers):
        package_logger.removeHandler(old_handler)
        old_handler.close()
    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
    return package_logger
