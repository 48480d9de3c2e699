"""
Ship placement regions.

A ship is stored as the bounding box between its start and end cells.
Coordinates are (x, y) pairs where x is the column and y is the row.
"""

import numbers
from dataclasses import dataclass
from enum import Enum

from .errors import InvalidCoordinate, InvalidLength, InvalidOrientation, OutOfBounds


class Orientation(Enum):
    HORIZONTAL = "H"
    VERTICAL = "V"

    @classmethod
    def parse(cls, value):
        """Accept an Orientation, its name, or the short codes "H"/"V"."""
        if isinstance(value, cls):
            return value
        token = str(value).strip().upper()
        for orientation in cls:
            if token in (orientation.value, orientation.name):
                return orientation
        raise InvalidOrientation(value)


def in_bounds(point, board_width, board_height):
    x, y = point
    return 0 <= x < board_width and 0 <= y < board_height


@dataclass(frozen=True)
class ShipRegion:
    """Immutable footprint of one placed ship."""

    ship_id: int
    start: tuple
    end: tuple

    @classmethod
    def construct(cls, ship_id, start, length, orientation, board_width, board_height):
        """
        Build a region from its origin, length and orientation.

        Raises InvalidLength for lengths below 1 and OutOfBounds when the
        start (checked first) or the end falls outside the board.
        """
        orientation = Orientation.parse(orientation)
        if length < 1:
            raise InvalidLength(length)

        x, y = start
        if not (isinstance(x, numbers.Integral) and isinstance(y, numbers.Integral)):
            raise InvalidCoordinate(start)
        if orientation is Orientation.HORIZONTAL:
            end = (x + length - 1, y)
        else:
            end = (x, y + length - 1)

        if not in_bounds((x, y), board_width, board_height):
            raise OutOfBounds((x, y))
        if not in_bounds(end, board_width, board_height):
            raise OutOfBounds(end)

        return cls(ship_id, (x, y), end)

    @property
    def length(self):
        return (self.end[0] - self.start[0]) + (self.end[1] - self.start[1]) + 1

    @property
    def orientation(self):
        # Single-cell ships have no real axis; report them as horizontal.
        if self.start[0] == self.end[0] and self.start[1] != self.end[1]:
            return Orientation.VERTICAL
        return Orientation.HORIZONTAL

    def is_line(self):
        """True if start <= end and the region spans at most one axis."""
        dx = self.end[0] - self.start[0]
        dy = self.end[1] - self.start[1]
        return dx >= 0 and dy >= 0 and (dx == 0 or dy == 0)

    def cells(self):
        """Covered (x, y) coordinates from start to end."""
        return [
            (x, y)
            for y in range(self.start[1], self.end[1] + 1)
            for x in range(self.start[0], self.end[0] + 1)
        ]

    def covers(self, point):
        x, y = point
        return self.start[0] <= x <= self.end[0] and self.start[1] <= y <= self.end[1]

    def overlaps(self, other):
        """True if the two bounding boxes share at least one cell."""
        x_overlap = self.start[0] <= other.end[0] and self.end[0] >= other.start[0]
        y_overlap = self.start[1] <= other.end[1] and self.end[1] >= other.start[1]
        return x_overlap and y_overlap
