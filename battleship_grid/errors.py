"""Exceptions raised by the board model."""


class BattleshipGridError(Exception):
    """Base class for every error raised by this package."""


class PlacementError(BattleshipGridError, ValueError):
    """A ship could not be placed on a board."""


class OutOfBounds(PlacementError):
    def __init__(self, point):
        self.point = tuple(point)
        super().__init__(f"Position {self.point} is out of bounds")


class Collision(PlacementError):
    def __init__(self, region, other):
        self.region = region
        self.other = other
        super().__init__(
            f"Ship {region.ship_id} at {region.start}-{region.end} overlaps "
            f"ship {other.ship_id} at {other.start}-{other.end}"
        )


class InvalidLength(PlacementError):
    def __init__(self, length):
        self.length = length
        super().__init__(f"Ship length must be at least 1, got {length}")


class InvalidRegion(PlacementError):
    def __init__(self, region):
        self.region = region
        super().__init__(
            f"Ship {region.ship_id} at {region.start}-{region.end} is not a "
            f"straight line running from start to end"
        )


class InvalidOrientation(PlacementError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"Unknown orientation: {value!r}")


class InvalidCoordinate(PlacementError):
    def __init__(self, point):
        self.point = point
        super().__init__(f"Coordinates must be integers, got {point!r}")


class ConfigError(BattleshipGridError, ValueError):
    """Game configuration was rejected."""


class InvalidShipSize(ConfigError):
    def __init__(self, smallest, largest):
        self.smallest = smallest
        self.largest = largest
        super().__init__(
            f"Ship sizes have to be larger than 1 and ordered, got {smallest}-{largest}"
        )


class Underflow(ConfigError):
    def __init__(self):
        super().__init__("Player count cannot drop below 0")
