from enum import Enum, auto


class WorldEvent(Enum):
    """Events emitted by World after a state change is committed."""

    PLAYER_MOVED = auto()
    TILE_ROTATED = auto()
    PLAYER_TURNED = auto()
