from __future__ import annotations

import logging
from typing import Callable, List, Optional

from ..exceptions import OutOfBoundsError
from .entities import Goal, Player, Point
from .events import WorldEvent
from .grid import Grid
from .movement import MovementEngine
from .rotation import RotationController

logger = logging.getLogger(__name__)

Listener = Callable[[WorldEvent, "World"], None]


class World:
    """Aggregate owning the grid, the player and the goal.

    Input layers mutate it only through ``advance``/``rotate``; renderers read
    ``grid``, ``player`` and ``goal`` between events.
    """

    def __init__(self, grid: Grid, player: Player, goal: Optional[Goal] = None) -> None:
        if not grid.in_bounds(player.position.y, player.position.x):
            raise OutOfBoundsError(f"Player placed outside the grid at {player.position}")
        self.grid = grid
        self.player = player
        self.goal = goal if goal is not None else Goal(Point(grid.width - 1, grid.height - 1))
        self._listeners: List[Listener] = []
        logger.info(
            "Initialized World %dx%d, player at %s facing %s",
            grid.width,
            grid.height,
            player.position,
            player.facing.name,
        )

    def add_listener(self, listener: Listener) -> None:
        """Subscribe to world events (movement, rotation)."""
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def emit(self, event: WorldEvent) -> None:
        for l in list(self._listeners):
            try:
                l(event, self)
            except Exception as ex:  # pragma: no cover - listeners shouldn't crash the world
                logger.exception("Listener errored on %s: %s", event, ex)


def advance(world: World) -> bool:
    """Try to move the player one cell forward. Returns True if it moved."""
    return MovementEngine().tick(world)


def rotate(world: World, row: int, col: int) -> None:
    """Turn the tile at (row, col) a quarter clockwise."""
    RotationController().rotate_cell(world, row, col)


__all__ = ["World", "Listener", "advance", "rotate"]
