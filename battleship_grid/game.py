"""Top-level game data: configuration plus one board per player."""

import logging

from .board import Board
from .config import (
    DEFAULT_COLS,
    DEFAULT_LARGEST_SHIP,
    DEFAULT_PLAYER_COUNT,
    DEFAULT_ROWS,
    DEFAULT_SMALLEST_SHIP,
    LARGEST_SHIP_OFFSET,
)
from .errors import InvalidShipSize, Underflow

logger = logging.getLogger(__name__)


class GameState:
    """
    Holds the grid size, player count, ship-size range and the boards.

    Boards are indexed by player number. Lookups hand out copies so that
    callers never alias the boards owned here.
    """

    def __init__(self):
        self.rows = DEFAULT_ROWS
        self.cols = DEFAULT_COLS
        self.player_count = DEFAULT_PLAYER_COUNT
        self.smallest_ship = DEFAULT_SMALLEST_SHIP
        self.largest_ship = DEFAULT_LARGEST_SHIP
        self.loaded = False
        self.interactive = False
        self.filename = ""
        self._boards = []

    # ------------------------------------------------------------------ #
    # Configuration
    # ------------------------------------------------------------------ #
    @property
    def ship_sizes(self):
        return self.smallest_ship, self.largest_ship

    def configure_ship_sizes(self, smallest, largest=None):
        if largest is None:
            largest = smallest + LARGEST_SHIP_OFFSET
        if smallest <= 1 or largest <= 1 or smallest > largest:
            logger.warning("Rejected ship sizes %s-%s", smallest, largest)
            raise InvalidShipSize(smallest, largest)
        self.smallest_ship = smallest
        self.largest_ship = largest
        logger.debug("Ship sizes set to %s-%s", smallest, largest)

    def is_valid_ship_length(self, length):
        return self.smallest_ship <= length <= self.largest_ship

    @property
    def dimensions(self):
        return self.rows, self.cols

    def set_dimensions(self, rows, cols):
        self.rows = rows
        self.cols = cols
        logger.debug("Grid set to %sx%s", rows, cols)

    def set_dimension(self, value, rows=True):
        """Set only the row count (rows=True) or only the column count."""
        if rows:
            self.rows = value
        else:
            self.cols = value

    # ------------------------------------------------------------------ #
    # Players
    # ------------------------------------------------------------------ #
    def set_player_count(self, count):
        self.player_count = count

    def increment_player_count(self):
        self.player_count += 1

    def decrement_player_count(self):
        if self.player_count <= 0:
            logger.warning("Player count already at %s", self.player_count)
            raise Underflow()
        self.player_count -= 1

    # ------------------------------------------------------------------ #
    # Boards
    # ------------------------------------------------------------------ #
    @property
    def board_count(self):
        return len(self._boards)

    def add_board(self, board):
        self._boards.append(board)
        logger.debug("Added board for player %s (%s boards)",
                     board.player_number, len(self._boards))

    def new_board(self, player_name=""):
        """Create a board at the current dimensions for the next player."""
        board = Board(self.rows, self.cols)
        board.player_name = player_name
        board.player_number = len(self._boards)
        self.add_board(board)
        return board

    def last_board(self):
        if not self._boards:
            return None
        return self._boards[-1].copy()

    def pop_last_board(self):
        if not self._boards:
            return None
        return self._boards.pop()

    def board_for_player(self, player_number):
        if 0 <= player_number < len(self._boards):
            return self._boards[player_number].copy()
        return None

    def is_ready(self):
        return len(self._boards) == self.player_count

    def __repr__(self):
        return (f"GameState(size={self.rows}x{self.cols}, players={self.player_count}, "
                f"ships={self.smallest_ship}-{self.largest_ship}, boards={len(self._boards)})")
