from __future__ import annotations

from enum import Enum, auto


class InputAction(Enum):
    """Logical input actions.

    Keeps the game logic unaware of physical devices; key and mouse
    handlers translate to these before touching the world.
    """

    ADVANCE = auto()
    ROTATE_CELL = auto()
    QUIT = auto()


__all__ = ["InputAction"]
