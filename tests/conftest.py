import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from straight_ahead.core import Grid, Player, Point, World, open_tile  # noqa: E402


@pytest.fixture
def open_world():
    """4x4 board with every door open, player at the top-left facing east."""
    grid = Grid.filled(4, 4, open_tile())
    return World(grid, Player(Point(0, 0)))
