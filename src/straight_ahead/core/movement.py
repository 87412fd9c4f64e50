from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .events import WorldEvent

if TYPE_CHECKING:  # pragma: no cover
    from .world import World

logger = logging.getLogger(__name__)


class MovementEngine:
    """Advances the player one cell when the doors on both sides line up."""

    def tick(self, world: "World") -> bool:
        """Attempt to move the player one step along its facing.

        The move is rejected, silently and without touching the player, when
        the target is off the grid, when the current tile's door in the
        facing direction is closed, or when the target tile's door facing
        back is closed. Never raises for blocked moves.

        Returns:
            True if the player moved; False if blocked.
        """
        player = world.player
        grid = world.grid
        facing = player.facing
        here = player.position
        target = player.next_position

        if target.x < 0 or target.y < 0:
            return False
        if not grid.in_bounds(target.y, target.x):
            return False
        if not grid.tile_at(here.y, here.x).is_open(facing):
            return False
        if not grid.tile_at(target.y, target.x).is_open(facing.invert()):
            return False

        player.forward()
        logger.debug("Player moves %s from (%d,%d) to (%d,%d)", facing.name, here.x, here.y, target.x, target.y)
        world.emit(WorldEvent.PLAYER_MOVED)
        return True


__all__ = ["MovementEngine"]
