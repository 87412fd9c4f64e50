from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

from ..exceptions import OutOfBoundsError
from .tile import Tile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Size:
    width: int
    height: int


class Grid:
    """A fixed-size, bounds-checked 2D arrangement of door tiles.

    Cells are addressed as (row, col) where row is the y coordinate and col
    the x coordinate. The grid owns its tiles; dimensions never change after
    construction.
    """

    __slots__ = ("_w", "_h", "_tiles")

    def __init__(self, rows: Sequence[Sequence[Tile]]) -> None:
        if not rows or not rows[0]:
            raise ValueError("Grid dimensions must be positive")
        width = len(rows[0])
        for i, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"All rows must have equal width; row 0 has {width}, row {i} has {len(row)}")
        self._w = width
        self._h = len(rows)
        # Copies so two grids never share a tile.
        self._tiles: List[List[Tile]] = [[tile.copy() for tile in row] for row in rows]
        logger.debug("Initialized Grid %dx%d", self._w, self._h)

    @classmethod
    def filled(cls, width: int, height: int, tile: Tile) -> "Grid":
        if width <= 0 or height <= 0:
            raise ValueError("Grid dimensions must be positive")
        return cls([[tile for _ in range(width)] for _ in range(height)])

    @property
    def size(self) -> Size:
        return Size(self._w, self._h)

    @property
    def width(self) -> int:
        return self._w

    @property
    def height(self) -> int:
        return self._h

    def in_bounds(self, row: int, col: int) -> bool:
        """True iff 0 <= row < height and 0 <= col < width. Never raises."""
        return 0 <= row < self._h and 0 <= col < self._w

    def tile_at(self, row: int, col: int) -> Tile:
        """Return the tile at (row, col).

        Raises OutOfBoundsError (an IndexError) when the cell does not exist.
        """
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(f"Cell out of bounds: ({row}, {col}) for grid {self._w}x{self._h}")
        return self._tiles[row][col]

    def tiles(self) -> Iterator[Tuple[int, int, Tile]]:
        """Yield (row, col, tile) in row-major order."""
        for row, cells in enumerate(self._tiles):
            for col, tile in enumerate(cells):
                yield row, col, tile

    def __repr__(self) -> str:
        return f"Grid(width={self._w}, height={self._h})"


__all__ = ["Grid", "Size"]
