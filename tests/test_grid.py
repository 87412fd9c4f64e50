import pytest

from straight_ahead.core import Grid, Size, Tile, closed_tile, open_tile
from straight_ahead.exceptions import OutOfBoundsError


def test_dimensions_and_bounds():
    grid = Grid.filled(3, 2, open_tile())
    assert (grid.width, grid.height) == (3, 2)
    assert grid.size == Size(3, 2)
    assert grid.in_bounds(0, 0) is True
    assert grid.in_bounds(1, 2) is True
    assert grid.in_bounds(2, 0) is False  # row == height
    assert grid.in_bounds(0, 3) is False  # col == width
    assert grid.in_bounds(-1, 0) is False


def test_tile_at_raises_out_of_bounds():
    grid = Grid.filled(2, 2, open_tile())
    with pytest.raises(OutOfBoundsError):
        grid.tile_at(2, 0)
    with pytest.raises(IndexError):
        grid.tile_at(0, -1)


def test_tiles_are_owned_not_shared():
    shared = open_tile()
    grid = Grid.filled(2, 2, shared)
    grid.tile_at(0, 0).rotate_cw()
    assert grid.tile_at(0, 1).rotation == 0
    assert shared.rotation == 0


def test_row_is_y_and_col_is_x():
    rows = [[open_tile(), closed_tile(), closed_tile()]]
    grid = Grid(rows)
    assert grid.tile_at(0, 0).doors == (True, True, True, True)
    assert grid.tile_at(0, 2).doors == (False, False, False, False)


def test_tiles_iterates_row_major():
    grid = Grid.filled(2, 2, open_tile())
    assert [(r, c) for r, c, _ in grid.tiles()] == [(0, 0), (0, 1), (1, 0), (1, 1)]


def test_ragged_or_empty_rows_rejected():
    with pytest.raises(ValueError):
        Grid([])
    with pytest.raises(ValueError):
        Grid([[open_tile()], [open_tile(), open_tile()]])
    with pytest.raises(ValueError):
        Grid.filled(0, 3, Tile((True, True, True, True)))
