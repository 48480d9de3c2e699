import logging
import random

import numpy as np

from .config import EMPTY, SHIP, SHIP_SIZES
from .errors import Collision, InvalidRegion, OutOfBounds, PlacementError
from .ship import Orientation, ShipRegion, in_bounds

logger = logging.getLogger(__name__)


class Board:
    """One player's grid plus the ships placed on it."""

    def __init__(self, rows=10, cols=10):
        self.rows = rows
        self.cols = cols
        self.grid = np.full((rows, cols), EMPTY, dtype=int)
        self._ships = []
        self.player_name = ""
        self.player_number = 0

    @classmethod
    def create(cls, rows, cols):
        return cls(rows, cols)

    # ------------------------------------------------------------------ #
    # Cell access
    # ------------------------------------------------------------------ #
    def _check_index(self, row, col):
        # numpy would wrap negative indices, so check explicitly
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(
                f"Cell ({row}, {col}) is outside a {self.rows}x{self.cols} board"
            )

    def set_cell(self, row, col, value):
        self._check_index(row, col)
        self.grid[row, col] = value

    def get_cell(self, row, col):
        self._check_index(row, col)
        return int(self.grid[row, col])

    def is_occupied(self, row, col):
        return self.ship_at(row, col) is not None

    # ------------------------------------------------------------------ #
    # Ships
    # ------------------------------------------------------------------ #
    @property
    def ships(self):
        """Placed regions in placement order."""
        return tuple(self._ships)

    @property
    def ship_count(self):
        return len(self._ships)

    def ship_at(self, row, col):
        self._check_index(row, col)
        for region in self._ships:
            if region.covers((col, row)):
                return region
        return None

    def _check_collision(self, region):
        for other in self._ships:
            if region.overlaps(other):
                raise Collision(region, other)

    def add_region(self, region):
        """Record an already-built region after checking it fits this board."""
        if not region.is_line():
            raise InvalidRegion(region)
        for point in (region.start, region.end):
            if not in_bounds(point, self.cols, self.rows):
                raise OutOfBounds(point)
        self._check_collision(region)

        self._ships.append(region)
        for x, y in region.cells():
            self.grid[y, x] = SHIP
        logger.debug("Player %s: ship %s placed at %s-%s",
                     self.player_number, region.ship_id, region.start, region.end)
        return region

    def place_ship(self, start, length, orientation, ship_id=None):
        """
        Place a ship with its origin at start = (x, y).

        Raises OutOfBounds, InvalidLength or Collision; the board is left
        untouched when the placement is rejected.
        """
        if ship_id is None:
            ship_id = len(self._ships)
        try:
            region = ShipRegion.construct(ship_id, start, length, orientation,
                                          self.cols, self.rows)
            return self.add_region(region)
        except PlacementError as exc:
            logger.debug("Player %s: rejected ship at %s: %s",
                         self.player_number, start, exc)
            raise

    def can_place(self, start, length, orientation):
        try:
            region = ShipRegion.construct(len(self._ships), start, length,
                                          orientation, self.cols, self.rows)
        except PlacementError:
            return False
        return not any(region.overlaps(other) for other in self._ships)

    def place_ships_randomly(self, sizes=SHIP_SIZES, rng=None, max_attempts=1000):
        """
        Randomly places ships of the given sizes without overlap.

        Either the whole fleet is placed or, when a ship does not fit within
        max_attempts, nothing is and PlacementError is raised.
        """
        rng = rng or random.Random()
        trial = self.copy()
        placed = []
        for ship_size in sizes:
            for _ in range(max_attempts):
                orientation = rng.choice([Orientation.HORIZONTAL, Orientation.VERTICAL])
                start = (rng.randrange(self.cols), rng.randrange(self.rows))
                if trial.can_place(start, ship_size, orientation):
                    placed.append(trial.place_ship(start, ship_size, orientation))
                    break
            else:
                raise PlacementError(
                    f"Could not fit a ship of size {ship_size} after {max_attempts} attempts"
                )

        self.grid = trial.grid
        self._ships = trial._ships
        return placed

    def copy(self):
        """Independent snapshot of this board."""
        new_board = Board(self.rows, self.cols)
        new_board.grid = self.grid.copy()
        new_board._ships = list(self._ships)  # regions are immutable
        new_board.player_name = self.player_name
        new_board.player_number = self.player_number
        return new_board

    def __repr__(self):
        return (f"Board(player={self.player_name!r}, number={self.player_number}, "
                f"size={self.rows}x{self.cols}, ships={len(self._ships)})")
