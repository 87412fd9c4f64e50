from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .direction import Direction


@dataclass(frozen=True)
class Point:
    """Integer grid coordinate; x is the column and y the row."""

    x: int
    y: int

    def step(self, direction: Direction) -> "Point":
        return Point(self.x + direction.dx, self.y + direction.dy)

    @classmethod
    def from_pair(cls, pair: Any) -> "Point":
        """Build a Point from an (x, y) pair of ints. Floats and bools are rejected, not truncated."""
        if isinstance(pair, Point):
            return pair
        x, y = pair
        for v in (x, y):
            if isinstance(v, bool) or not isinstance(v, int):
                raise ValueError(f"coordinates must be integers, got {pair!r}")
        return cls(x, y)


@dataclass
class Player:
    """The walker: the cell it occupies and the way it faces.

    ``facing`` doubles as the unit step applied when the player advances.
    """

    position: Point
    facing: Direction = Direction.EAST

    def __post_init__(self) -> None:
        if not isinstance(self.facing, Direction):
            self.facing = Direction.from_vector(self.facing)
        self.position = Point.from_pair(self.position)

    @property
    def next_position(self) -> Point:
        return self.position.step(self.facing)

    def forward(self) -> None:
        self.position = self.next_position

    def rotate_cw(self) -> None:
        self.facing = self.facing.rotate_cw()


@dataclass
class Goal:
    """Decorative target square. Its angle only matters to renderers."""

    position: Point
    angle: float = 0.0

    def __post_init__(self) -> None:
        self.position = Point.from_pair(self.position)

    def spin(self, dt: float, rate: float = 2.0) -> None:
        """Advance the angle by ``rate`` radians per second over ``dt`` seconds."""
        self.angle += rate * dt


__all__ = ["Point", "Player", "Goal"]
