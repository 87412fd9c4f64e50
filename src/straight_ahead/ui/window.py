from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence, Tuple

try:
    import arcade  # type: ignore
except Exception:  # pragma: no cover - optional for test envs
    arcade = None

from ..core import Direction, World
from ..engine import GameConfig, GameEngine
from ..input import InputAction, InputMapper, cell_at, dispatch
from ..settings import Settings

logger = logging.getLogger(__name__)

OPEN_COLOR = (0, 255, 0)
CLOSED_COLOR = (255, 0, 0)
PLAYER_COLOR = (255, 0, 0)
GOAL_COLOR = (255, 0, 0)
BACKGROUND = (0, 0, 0)

Vec = Tuple[float, float]

PLAYER_TRIANGLE: Sequence[Tuple[float, float]] = ((0.0, 0.0), (30.0, 10.0), (0.0, 20.0))
GOAL_EDGE = 30.0
# Sprite pivots as fractions of a cell, measured from its top-left corner
PLAYER_ANCHOR: Vec = (0.6, 0.5)
GOAL_ANCHOR: Vec = (0.6, 0.6)


def door_edge(row: int, col: int, direction: Direction, tile_size: int) -> Tuple[Vec, Vec]:
    """Endpoints of a cell side in top-down pixels, inset by one pixel."""
    ox, oy = col * tile_size, row * tile_size
    lo, hi = 1.0, tile_size - 1.0
    if direction is Direction.NORTH:
        return (ox + lo, oy + lo), (ox + hi, oy + lo)
    if direction is Direction.EAST:
        return (ox + hi, oy + lo), (ox + hi, oy + hi)
    if direction is Direction.SOUTH:
        return (ox + lo, oy + hi), (ox + hi, oy + hi)
    return (ox + lo, oy + lo), (ox + lo, oy + hi)


def anchor(col: int, row: int, tile_size: int, fraction: Vec) -> Vec:
    """Top-down pixel position of a sprite pivot inside cell (row, col)."""
    return (col + fraction[0]) * tile_size, (row + fraction[1]) * tile_size


def transform(points: Sequence[Vec], center: Vec, pivot: Vec, angle: float) -> List[Vec]:
    """Rotate ``points`` about ``pivot`` by ``angle`` (clockwise on a y-down screen) and move the pivot to ``center``."""
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    out: List[Vec] = []
    for x, y in points:
        px, py = x - pivot[0], y - pivot[1]
        out.append((center[0] + px * cos_a - py * sin_a, center[1] + px * sin_a + py * cos_a))
    return out


class BoardWindow:
    """Arcade window that draws the board and feeds input into the core.

    Space advances the player, releasing the left mouse button turns the
    tile under the cursor, Escape closes the window. The world is only
    read while drawing.
    """

    def __init__(self, world: World, settings: Optional[Settings] = None, max_steps: Optional[int] = None):
        if arcade is None:
            raise RuntimeError("Arcade package is not installed; cannot create window")
        self.world = world
        self.settings = settings or Settings()
        self.mapper = InputMapper.default()
        self.engine = GameEngine(
            world,
            GameConfig(
                tick_rate=self.settings.tick_rate,
                max_steps=max_steps,
                goal_spin_rate=self.settings.goal_spin_rate,
            ),
        )
        ts = self.settings.tile_size
        self.width = world.grid.width * ts
        self.height = world.grid.height * ts
        self._window = arcade.Window(self.width, self.height, title=self.settings.window_title)
        arcade.set_background_color(BACKGROUND)
        self._window.on_draw = self.on_draw
        self._window.on_update = self.on_update
        self._window.on_key_press = self.on_key_press
        self._window.on_mouse_release = self.on_mouse_release
        self._key_names = {arcade.key.SPACE: "SPACE", arcade.key.ESCAPE: "ESCAPE"}
        self.engine.start()
        logger.info("Arcade window initialized (%dx%d)", self.width, self.height)

    def _flip(self, point: Vec) -> Vec:
        # Arcade's origin is bottom-left; the board is laid out top-down.
        return point[0], self.height - point[1]

    def run(self) -> None:
        arcade.run()

    def close(self) -> None:
        self.engine.stop()
        self._window.close()

    def on_draw(self) -> None:
        self._window.clear()
        ts = self.settings.tile_size
        for row, col, tile in self.world.grid.tiles():
            for direction in Direction:
                color = OPEN_COLOR if tile.is_open(direction) else CLOSED_COLOR
                start, end = door_edge(row, col, direction, ts)
                sx, sy = self._flip(start)
                ex, ey = self._flip(end)
                arcade.draw_line(sx, sy, ex, ey, color, 1)

        player = self.world.player
        center = anchor(player.position.x, player.position.y, ts, PLAYER_ANCHOR)
        triangle = transform(PLAYER_TRIANGLE, center, (15.0, 10.0), player.facing.angle)
        arcade.draw_polygon_filled([self._flip(p) for p in triangle], PLAYER_COLOR)

        goal = self.world.goal
        half = GOAL_EDGE / 2
        square = ((0.0, 0.0), (GOAL_EDGE, 0.0), (GOAL_EDGE, GOAL_EDGE), (0.0, GOAL_EDGE))
        center = anchor(goal.position.x, goal.position.y, ts, GOAL_ANCHOR)
        corners = transform(square, center, (half, half), goal.angle)
        arcade.draw_polygon_filled([self._flip(p) for p in corners], GOAL_COLOR)

    def on_update(self, delta_time: float) -> None:
        if self.engine.running:
            self.engine.update(delta_time)
        else:
            self._window.close()

    def on_key_press(self, symbol: int, modifiers: int) -> None:
        action = self.mapper.translate_key(self._key_names.get(symbol, symbol))
        if action is InputAction.QUIT:
            self.close()
        elif action is InputAction.ADVANCE:
            dispatch(self.world, action)

    def on_mouse_release(self, x: float, y: float, button: int, modifiers: int) -> None:
        if button != arcade.MOUSE_BUTTON_LEFT:
            return
        cell = cell_at(x, self.height - y, self.settings.tile_size)
        dispatch(self.world, InputAction.ROTATE_CELL, cell)


__all__ = ["BoardWindow", "anchor", "door_edge", "transform"]
