from __future__ import annotations

from typing import Dict, FrozenSet, List

from ..core import Direction, World

N, E, S, W = Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST

# Box-drawing glyph for each set of effectively open doors.
DOOR_GLYPHS: Dict[FrozenSet[Direction], str] = {
    frozenset(): "·",
    frozenset({N}): "╵",
    frozenset({E}): "╶",
    frozenset({S}): "╷",
    frozenset({W}): "╴",
    frozenset({N, E}): "└",
    frozenset({N, S}): "│",
    frozenset({N, W}): "┘",
    frozenset({E, S}): "┌",
    frozenset({E, W}): "─",
    frozenset({S, W}): "┐",
    frozenset({N, E, S}): "├",
    frozenset({N, E, W}): "┴",
    frozenset({N, S, W}): "┤",
    frozenset({E, S, W}): "┬",
    frozenset({N, E, S, W}): "┼",
}

PLAYER_GLYPHS: Dict[Direction, str] = {N: "^", E: ">", S: "v", W: "<"}
GOAL_GLYPH = "*"


def render_lines(world: World) -> List[str]:
    """Draw the board as one character per cell, rows top to bottom.

    The player shows as an arrow of its facing and hides the goal if both
    share a cell.
    """
    player = world.player.position
    goal = world.goal.position
    lines: List[str] = []
    for row in range(world.grid.height):
        chars: List[str] = []
        for col in range(world.grid.width):
            if player.x == col and player.y == row:
                chars.append(PLAYER_GLYPHS[world.player.facing])
            elif goal.x == col and goal.y == row:
                chars.append(GOAL_GLYPH)
            else:
                tile = world.grid.tile_at(row, col)
                chars.append(DOOR_GLYPHS[frozenset(tile.open_directions())])
        lines.append("".join(chars))
    return lines


def describe(world: World) -> str:
    p = world.player
    return f"player at ({p.position.x},{p.position.y}) facing {p.facing.name.lower()}"


__all__ = ["DOOR_GLYPHS", "PLAYER_GLYPHS", "GOAL_GLYPH", "render_lines", "describe"]
