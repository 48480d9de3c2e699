"""
Battleship Board Model Package

Per-player grids, ship placement regions and game configuration.

Available modules:
- game: GameState aggregate (configuration and boards)
- board: a single player's board
- ship: ship placement regions and orientation
- errors: exceptions raised on rejected placements and configuration
- config: defaults, cell markers and logging setup
"""

from .board import Board
from .config import EMPTY, HIT, MISS, SHIP, configure_logging
from .errors import (
    BattleshipGridError,
    Collision,
    ConfigError,
    InvalidCoordinate,
    InvalidLength,
    InvalidOrientation,
    InvalidRegion,
    InvalidShipSize,
    OutOfBounds,
    PlacementError,
    Underflow,
)
from .game import GameState
from .ship import Orientation, ShipRegion

__all__ = [
    'Board', 'GameState', 'Orientation', 'ShipRegion',
    'BattleshipGridError', 'PlacementError', 'OutOfBounds', 'Collision', 'InvalidLength',
    'InvalidRegion', 'InvalidOrientation', 'InvalidCoordinate',
    'ConfigError', 'InvalidShipSize', 'Underflow',
    'EMPTY', 'SHIP', 'MISS', 'HIT', 'configure_logging',
]
