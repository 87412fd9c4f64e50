from __future__ import annotations

import logging
from typing import Optional, Tuple

from ..core import World, advance, rotate
from .actions import InputAction

logger = logging.getLogger(__name__)


def cell_at(x: float, y: float, tile_size: int) -> Optional[Tuple[int, int]]:
    """Map a pixel position (origin top-left, y down) to a (row, col) cell.

    Returns None for negative coordinates, which lie off the board.
    """
    if tile_size <= 0:
        raise ValueError("tile_size must be positive")
    if x < 0 or y < 0:
        return None
    return int(y // tile_size), int(x // tile_size)


def dispatch(world: World, action: InputAction, cell: Optional[Tuple[int, int]] = None) -> bool:
    """Apply one discrete input action to the world.

    Returns True when the action changed the world. QUIT is left to the
    caller and returns False. A ROTATE_CELL without a cell, or with a cell
    off the board, is ignored; presentation layers feed it raw pointer
    positions.
    """
    if action is InputAction.ADVANCE:
        return advance(world)
    if action is InputAction.ROTATE_CELL:
        if cell is None:
            return False
        row, col = cell
        if not world.grid.in_bounds(row, col):
            logger.debug("Ignoring rotate request outside the board at (%d,%d)", row, col)
            return False
        rotate(world, row, col)
        return True
    return False


__all__ = ["cell_at", "dispatch"]
