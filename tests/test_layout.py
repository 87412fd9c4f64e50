import textwrap
from pathlib import Path

import pytest

from straight_ahead.core import Direction, Point, advance, rotate
from straight_ahead.exceptions import LayoutError
from straight_ahead.layout import build_world, dump_layout, load_layout, parse_tile

N, E, S, W = Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST


def test_default_layout_matches_reference_board():
    world = load_layout()
    assert (world.grid.width, world.grid.height) == (4, 4)
    assert world.player.position == Point(0, 0)
    assert world.player.facing is E
    assert world.goal.position == Point(3, 3)
    assert world.grid.tile_at(0, 3).doors == (False, True, False, True)
    assert world.grid.tile_at(1, 1).doors == (True, False, True, False)
    assert world.grid.tile_at(2, 2).doors == (True, False, True, False)
    assert world.grid.tile_at(3, 0).doors == (True, True, True, True)


def test_default_board_walk():
    world = load_layout()
    # Row 0 is open up to the horizontal tile in the corner.
    for _ in range(5):
        advance(world)
    assert world.player.position == Point(3, 0)
    # Turning the corner tile turns the player south and opens it north/south.
    rotate(world, 0, 3)
    assert world.player.facing is S
    assert advance(world) is True
    assert world.player.position == Point(3, 1)


@pytest.mark.parametrize("token,open_dirs", [
    ("+", [N, E, S, W]),
    ("open", [N, E, S, W]),
    ("-", [E, W]),
    ("|", [N, S]),
    ("ne", [N, E]),
    (".", []),
    ("none", []),
])
def test_parse_tile_tokens(token, open_dirs):
    assert parse_tile(token).open_directions() == open_dirs


def test_parse_tile_rotation_suffix():
    tile = parse_tile("NS@1")
    assert tile.rotation == 1
    assert tile.open_directions() == [E, W]


@pytest.mark.parametrize("token", ["X", "N@x", "N@-1", 5, None])
def test_parse_tile_rejects_garbage(token):
    with pytest.raises(LayoutError):
        parse_tile(token)


def test_load_layout_from_file(tmp_path: Path):
    p = tmp_path / "board.yaml"
    p.write_text(
        textwrap.dedent(
            """
            tiles:
              - ["+", "-"]
              - ["|", "."]
            player:
              position: [1, 0]
              facing: west
            goal:
              position: [0, 1]
            """
        ),
        encoding="utf-8",
    )
    world = load_layout(p)
    assert (world.grid.width, world.grid.height) == (2, 2)
    assert world.player.position == Point(1, 0)
    assert world.player.facing is W
    assert world.goal.position == Point(0, 1)


@pytest.mark.parametrize("data", [
    {},
    {"tiles": []},
    {"tiles": [["+"], ["+", "+"]]},
    {"tiles": [["+"]], "player": {"position": [1, 0]}},
    {"tiles": [["+"]], "player": {"facing": "up"}},
    {"tiles": [["+"]], "goal": {"position": [0, 5]}},
    {"tiles": [["+"]], "goal": {"position": "corner"}},
    {"tiles": [["+"]], "player": [0, 0]},
    {"tiles": [["+"]], "goal": 5},
    {"tiles": [["+", "+"]], "player": {"position": [1.7, 0]}},
    {"tiles": [["+", "+"]], "goal": {"position": [0, 0.5]}},
    {"tiles": [["+", "+"]], "player": {"position": [True, 0]}},
])
def test_build_world_rejects_malformed(data):
    with pytest.raises(LayoutError):
        build_world(data)


def test_missing_or_broken_file(tmp_path: Path):
    with pytest.raises(LayoutError):
        load_layout(tmp_path / "missing.yaml")
    bad = tmp_path / "bad.yaml"
    bad.write_text("tiles: [[", encoding="utf-8")
    with pytest.raises(LayoutError):
        load_layout(bad)


def test_dump_then_load_keeps_turns(tmp_path: Path):
    world = load_layout()
    rotate(world, 1, 1)
    p = tmp_path / "saved.yaml"
    p.write_text(dump_layout(world), encoding="utf-8")
    again = load_layout(p)
    assert again.grid.tile_at(1, 1).rotation == 1
    assert again.grid.tile_at(1, 1).open_directions() == [E, W]
    assert again.player.facing is E


def test_non_mapping_sections_fail_the_cli_cleanly(tmp_path: Path):
    from straight_ahead.app import run_headless

    p = tmp_path / "board.yaml"
    p.write_text('tiles:\n  - ["+"]\nplayer: [0, 0]\n', encoding="utf-8")
    assert run_headless(max_steps=1, layout=str(p)) == 2
