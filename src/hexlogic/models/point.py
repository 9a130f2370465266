"""Grid coordinates.

Two representations are used:

- ``Point`` is an offset coordinate ``(x, y)`` = ``(column, row)`` in the
  "odd-q" vertical layout, where odd columns sit half a hex lower than even
  columns. This is the map's native storage coordinate.
- ``CubeCoord`` is a cube coordinate ``(x, y, z)`` with ``x + y + z == 0``.
  It is only an intermediate for distance and line arithmetic.

Reference: https://www.redblobgames.com/grids/hexagons/
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Point:
    """Immutable offset coordinate.

    Attributes:
        x: Column.
        y: Row.
    """

    x: int
    y: int

    # -- Arithmetic ------------------------------------------------------

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def __repr__(self) -> str:
        return f"Point({self.x},{self.y})"


@dataclass(frozen=True)
class CubeCoord:
    """Immutable cube coordinate. Always satisfies ``x + y + z == 0``."""

    x: int
    y: int
    z: int

    def __post_init__(self) -> None:
        if self.x + self.y + self.z != 0:
            raise ValueError(f"Cube coordinate must sum to zero: {self!r}")

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y
        yield self.z

    def __repr__(self) -> str:
        return f"Cube({self.x},{self.y},{self.z})"
