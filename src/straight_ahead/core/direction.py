from __future__ import annotations

import math
from enum import Enum
from typing import Tuple

from ..exceptions import InvalidDirectionError


class Direction(Enum):
    """The four cardinal directions.

    Values are unit vectors in screen coordinates: +x is East, +y is South.
    Member order doubles as the door index (0 = North, 1 = East, ...).
    """

    NORTH = (0, -1)
    EAST = (1, 0)
    SOUTH = (0, 1)
    WEST = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def index(self) -> int:
        return _ORDER.index(self)

    @property
    def angle(self) -> float:
        """Heading in radians, measured clockwise from East on a y-down screen."""
        return math.atan2(self.dy, self.dx)

    def rotate_cw(self) -> "Direction":
        return _ORDER[(self.index + 1) % 4]

    def invert(self) -> "Direction":
        return _ORDER[(self.index + 2) % 4]

    @classmethod
    def from_index(cls, index: int) -> "Direction":
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < 4:
            raise InvalidDirectionError(f"invalid direction index {index!r}")
        return _ORDER[index]

    @classmethod
    def from_vector(cls, vector: Tuple[int, int]) -> "Direction":
        """Convert a raw (dx, dy) step into a Direction.

        Raises InvalidDirectionError for anything that is not a cardinal unit step.
        """
        try:
            return cls(tuple(vector))
        except (TypeError, ValueError):
            raise InvalidDirectionError(f"invalid velocity {vector!r}") from None

    @classmethod
    def parse(cls, value: "str | Direction") -> "Direction":
        """Read a direction from config text ("north", "N", "East", ...)."""
        if isinstance(value, Direction):
            return value
        if isinstance(value, str):
            key = value.strip().upper()
            found = _NAMES.get(key)
            if found is not None:
                return found
        raise InvalidDirectionError(f"unknown direction {value!r}")


_ORDER = (Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST)

_NAMES = {d.name: d for d in _ORDER}
_NAMES.update({d.name[0]: d for d in _ORDER})


def _check(direction: Direction) -> Direction:
    if not isinstance(direction, Direction):
        raise InvalidDirectionError(f"not a direction: {direction!r}")
    return direction


def rotate_cw(direction: Direction) -> Direction:
    return _check(direction).rotate_cw()


def invert(direction: Direction) -> Direction:
    return _check(direction).invert()


def to_index(direction: Direction) -> int:
    return _check(direction).index


def from_index(index: int) -> Direction:
    return Direction.from_index(index)


__all__ = ["Direction", "rotate_cw", "invert", "to_index", "from_index"]
