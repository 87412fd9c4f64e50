from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .events import WorldEvent

if TYPE_CHECKING:  # pragma: no cover
    from .world import World

logger = logging.getLogger(__name__)


class RotationController:
    """Turns a tile, carrying the player along if it stands on it."""

    def rotate_cell(self, world: "World", row: int, col: int) -> None:
        """Rotate the tile at (row, col) a quarter turn clockwise.

        If the player occupies that cell its facing turns with the tile.
        Out-of-range cells raise OutOfBoundsError from the grid; nothing is
        changed in that case.
        """
        tile = world.grid.tile_at(row, col)
        tile.rotate_cw()
        logger.debug("Tile (%d,%d) rotated to %d", row, col, tile.rotation)
        world.emit(WorldEvent.TILE_ROTATED)

        player = world.player
        if player.position.x == col and player.position.y == row:
            player.rotate_cw()
            logger.debug("Player turned with its tile; now facing %s", player.facing.name)
            world.emit(WorldEvent.PLAYER_TURNED)


__all__ = ["RotationController"]
