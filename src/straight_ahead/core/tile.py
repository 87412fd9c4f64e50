from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from ..exceptions import InvalidDirectionError
from .direction import Direction


@dataclass
class Tile:
    """A grid cell with four doors that can be turned in quarter steps.

    ``doors`` is indexed by the unrotated local direction (0 = North,
    1 = East, 2 = South, 3 = West) and never changes after creation.
    ``rotation`` counts the quarter turns applied so far and is kept
    reduced modulo 4.
    """

    doors: Tuple[bool, bool, bool, bool]
    rotation: int = 0

    def __post_init__(self) -> None:
        doors = tuple(bool(d) for d in self.doors)
        if len(doors) != 4:
            raise ValueError(f"a tile needs exactly 4 doors, got {len(doors)}")
        self.doors = doors  # type: ignore[assignment]
        if self.rotation < 0:
            raise ValueError("rotation must be non-negative")
        self.rotation %= 4

    def is_open(self, direction: Direction) -> bool:
        """Return True if the door facing the global ``direction`` is open."""
        if not isinstance(direction, Direction):
            direction = Direction.from_vector(direction)
        return self.doors[(direction.index + self.rotation) % 4]

    def rotate_cw(self) -> None:
        self.rotation = (self.rotation + 1) % 4

    def open_directions(self) -> List[Direction]:
        return [d for d in Direction if self.is_open(d)]

    @classmethod
    def with_doors(cls, *open_doors: Direction, rotation: int = 0) -> "Tile":
        """Build a tile whose listed local doors are open."""
        for d in open_doors:
            if not isinstance(d, Direction):
                raise InvalidDirectionError(f"not a direction: {d!r}")
        doors = tuple(d in open_doors for d in Direction)
        return cls(doors, rotation)  # type: ignore[arg-type]

    def copy(self) -> "Tile":
        return Tile(self.doors, self.rotation)


def open_tile() -> Tile:
    return Tile((True, True, True, True))


def horizontal_tile() -> Tile:
    return Tile((False, True, False, True))


def vertical_tile() -> Tile:
    return Tile((True, False, True, False))


def closed_tile() -> Tile:
    return Tile((False, False, False, False))


__all__ = [
    "Tile",
    "open_tile",
    "horizontal_tile",
    "vertical_tile",
    "closed_tile",
]
