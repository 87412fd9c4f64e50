import math

import pytest

from straight_ahead.core import Direction
from straight_ahead.ui.window import GOAL_ANCHOR, PLAYER_ANCHOR, anchor, door_edge, transform


def test_door_edges_trace_the_cell_outline():
    assert door_edge(0, 0, Direction.NORTH, 50) == ((1.0, 1.0), (49.0, 1.0))
    assert door_edge(0, 0, Direction.EAST, 50) == ((49.0, 1.0), (49.0, 49.0))
    assert door_edge(1, 2, Direction.SOUTH, 50) == ((101.0, 99.0), (149.0, 99.0))
    assert door_edge(1, 2, Direction.WEST, 50) == ((101.0, 51.0), (101.0, 99.0))


def test_transform_rotates_about_pivot():
    points = transform([(10.0, 0.0)], center=(100.0, 100.0), pivot=(0.0, 0.0), angle=math.pi / 2)
    assert points[0] == pytest.approx((100.0, 110.0))
    # Pivot itself lands on the center
    assert transform([(5.0, 5.0)], (20.0, 30.0), (5.0, 5.0), 1.234)[0] == pytest.approx((20.0, 30.0))


def test_sprite_pivots_match_reference_offsets():
    # 50 px cells: player pivot sits 30 px right and 25 px down, goal 30/30
    assert anchor(0, 0, 50, PLAYER_ANCHOR) == pytest.approx((30.0, 25.0))
    assert anchor(3, 3, 50, GOAL_ANCHOR) == pytest.approx((180.0, 180.0))
    assert anchor(2, 1, 50, PLAYER_ANCHOR) == pytest.approx((130.0, 75.0))
