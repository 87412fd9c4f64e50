"""Grid, door and movement rules. Nothing in here depends on a renderer."""
from .direction import Direction, from_index, invert, rotate_cw, to_index
from .entities import Goal, Player, Point
from .events import WorldEvent
from .grid import Grid, Size
from .movement import MovementEngine
from .rotation import RotationController
from .tile import Tile, closed_tile, horizontal_tile, open_tile, vertical_tile
from .world import World, advance, rotate

__all__ = [
    "Direction",
    "from_index",
    "invert",
    "rotate_cw",
    "to_index",
    "Goal",
    "Player",
    "Point",
    "WorldEvent",
    "Grid",
    "Size",
    "MovementEngine",
    "RotationController",
    "Tile",
    "closed_tile",
    "horizontal_tile",
    "open_tile",
    "vertical_tile",
    "World",
    "advance",
    "rotate",
]
