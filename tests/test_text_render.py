from straight_ahead.core import Direction, rotate
from straight_ahead.layout import load_layout
from straight_ahead.ui.text import DOOR_GLYPHS, describe, render_lines


def test_default_board_rendering():
    world = load_layout()
    assert render_lines(world) == [
        ">┼┼─",
        "┼│┼┼",
        "┼┼│┼",
        "┼┼┼*",
    ]


def test_rendering_follows_effective_doors():
    world = load_layout()
    rotate(world, 1, 1)
    assert render_lines(world)[1] == "┼─┼┼"


def test_player_arrow_and_description():
    world = load_layout()
    world.player.facing = Direction.SOUTH
    assert render_lines(world)[0][0] == "v"
    assert describe(world) == "player at (0,0) facing south"


def test_every_door_combination_has_a_glyph():
    assert len(DOOR_GLYPHS) == 16
    assert len(set(DOOR_GLYPHS.values())) == 16
