from __future__ import annotations

import logging
from importlib.resources import files as resource_files
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from .core import Direction, Goal, Grid, Player, Point, Tile, World
from .exceptions import InvalidDirectionError, LayoutError

logger = logging.getLogger(__name__)

DEFAULT_LAYOUT = "default.yaml"

# Glyph and name aliases for the common door sets.
TILE_ALIASES: Dict[str, str] = {
    "+": "NESW",
    "OPEN": "NESW",
    "-": "EW",
    "HORIZONTAL": "EW",
    "|": "NS",
    "VERTICAL": "NS",
    ".": "",
    "NONE": "",
    "CLOSED": "",
}


def parse_tile(token: Any) -> Tile:
    """Build a Tile from a layout token such as ``"+"``, ``"NE"`` or ``"|@1"``."""
    if not isinstance(token, str):
        raise LayoutError(f"tile token must be a string, got {token!r}")
    text = token.strip().upper()
    rotation = 0
    if "@" in text:
        text, _, turns = text.partition("@")
        try:
            rotation = int(turns)
        except ValueError:
            raise LayoutError(f"bad rotation in tile token {token!r}") from None
        if rotation < 0:
            raise LayoutError(f"rotation must be non-negative in tile token {token!r}")
    letters = TILE_ALIASES.get(text, text)
    open_doors: List[Direction] = []
    for letter in letters:
        try:
            open_doors.append(Direction.parse(letter))
        except InvalidDirectionError:
            raise LayoutError(f"unknown door {letter!r} in tile token {token!r}") from None
    return Tile.with_doors(*open_doors, rotation=rotation)


def _point(raw: Any, what: str) -> Point:
    if not isinstance(raw, (list, tuple)) or len(raw) != 2:
        raise LayoutError(f"{what} must be a [col, row] pair, got {raw!r}")
    try:
        return Point.from_pair(raw)
    except ValueError:
        raise LayoutError(f"{what} must hold integers, got {raw!r}") from None


def build_world(data: Dict[str, Any]) -> World:
    """Create a World from a parsed layout mapping."""
    if not isinstance(data, dict):
        raise LayoutError("layout must be a mapping")
    rows = data.get("tiles")
    if not isinstance(rows, list) or not rows:
        raise LayoutError("layout needs a non-empty 'tiles' list")
    tile_rows: List[List[Tile]] = []
    for r, row in enumerate(rows):
        if not isinstance(row, list) or not row:
            raise LayoutError(f"tiles row {r} must be a non-empty list")
        tile_rows.append([parse_tile(token) for token in row])
    try:
        grid = Grid(tile_rows)
    except ValueError as exc:
        raise LayoutError(str(exc)) from exc

    player_raw = data.get("player") or {}
    if not isinstance(player_raw, dict):
        raise LayoutError(f"player must be a mapping, got {player_raw!r}")
    start = _point(player_raw.get("position", [0, 0]), "player.position")
    try:
        facing = Direction.parse(player_raw.get("facing", "east"))
    except InvalidDirectionError as exc:
        raise LayoutError(f"player.facing: {exc}") from exc
    if not grid.in_bounds(start.y, start.x):
        raise LayoutError(f"player.position {start} is outside the {grid.width}x{grid.height} grid")

    goal_raw = data.get("goal") or {}
    if not isinstance(goal_raw, dict):
        raise LayoutError(f"goal must be a mapping, got {goal_raw!r}")
    goal_pos = _point(goal_raw.get("position", [grid.width - 1, grid.height - 1]), "goal.position")
    if not grid.in_bounds(goal_pos.y, goal_pos.x):
        raise LayoutError(f"goal.position {goal_pos} is outside the {grid.width}x{grid.height} grid")

    return World(grid, Player(start, facing), Goal(goal_pos))


def load_layout(path: Optional[Union[str, Path]] = None) -> World:
    """Load a layout from YAML.

    If path is None, loads the embedded default resource at
    straight_ahead/layouts/default.yaml.
    """
    if path is None:
        text = resource_files("straight_ahead.layouts").joinpath(DEFAULT_LAYOUT).read_text(encoding="utf-8")
        logger.debug("Loaded embedded default layout")
    else:
        try:
            with open(path, "r", encoding="utf-8") as f:
                text = f.read()
        except OSError as exc:
            raise LayoutError(f"cannot read layout {path}: {exc}") from exc
        logger.debug("Loaded layout from path: %s", path)

    try:
        raw = yaml.safe_load(text) or {}
    except yaml.YAMLError as exc:
        raise LayoutError(f"invalid YAML layout: {exc}") from exc
    world = build_world(raw)
    logger.info("Layout ready: %dx%d grid", world.grid.width, world.grid.height)
    return world


def dump_layout(world: World) -> str:
    """Serialize a world's current layout (including tile turns) back to YAML."""
    letters = "NESW"
    rows: List[List[str]] = []
    for r in range(world.grid.height):
        row: List[str] = []
        for c in range(world.grid.width):
            tile = world.grid.tile_at(r, c)
            token = "".join(letters[i] for i, d in enumerate(tile.doors) if d) or "."
            if tile.rotation:
                token = f"{token}@{tile.rotation}"
            row.append(token)
        rows.append(row)
    data = {
        "tiles": rows,
        "player": {
            "position": [world.player.position.x, world.player.position.y],
            "facing": world.player.facing.name.lower(),
        },
        "goal": {"position": [world.goal.position.x, world.goal.position.y]},
    }
    return yaml.safe_dump(data, sort_keys=False)


__all__ = ["TILE_ALIASES", "parse_tile", "build_world", "load_layout", "dump_layout"]
