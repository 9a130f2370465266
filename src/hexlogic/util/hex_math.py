"""Hex math utilities — geometry functions for odd-q offset grids.

Points are stored in offset coordinates (column, row) where odd columns are
shifted half a hex down. Distance and line drawing go through cube
coordinates, where the arithmetic is uniform.

Reference: https://www.redblobgames.com/grids/hexagons/
"""

from __future__ import annotations

import math

from hexlogic.models.direction import Direction
from hexlogic.models.point import CubeCoord, Point
from hexlogic.util.errors import NonAdjacentPointsError

# Nudges applied to interpolated cube points so that samples landing exactly
# on a hex edge always round to the same side.
_LINE_EPSILON = (1e-6, 1e-6, -2e-6)


# -- Conversions ---------------------------------------------------------

def offset_to_cube(p: Point) -> CubeCoord:
    """Convert an odd-q offset coordinate to cube coordinates."""
    x = p.x
    z = p.y - (p.x - (p.x & 1)) // 2
    return CubeCoord(x, -(x + z), z)


def cube_to_offset(c: CubeCoord) -> Point:
    """Convert cube coordinates back to an odd-q offset coordinate."""
    return Point(c.x, c.z + (c.x - (c.x & 1)) // 2)


# -- Distance ------------------------------------------------------------

def cube_distance(a: CubeCoord, b: CubeCoord) -> int:
    """Hex grid distance between two cube coordinates."""
    return (abs(a.x - b.x) + abs(a.y - b.y) + abs(a.z - b.z)) // 2


def distance(p1: Point, p2: Point) -> int:
    """Minimum number of single-hex steps between two offset coordinates."""
    return cube_distance(offset_to_cube(p1), offset_to_cube(p2))


# -- Neighbors -----------------------------------------------------------

def neighbor_offset(direction: Direction | str, column: int) -> tuple[int, int]:
    """Return the ``(dx, dy)`` step towards *direction* from *column*.

    Even columns sit half a hex higher than odd ones, so the diagonal steps
    depend on the parity of the column they start from.

    Raises:
        InvalidDirectionError: if *direction* is not a hex direction.
    """
    d = Direction.coerce(direction)
    even = abs(column) % 2 == 0
    if d is Direction.NORTH:
        return 0, -1
    if d is Direction.SOUTH:
        return 0, 1
    if d is Direction.NORTH_WEST:
        return -1, -1 if even else 0
    if d is Direction.NORTH_EAST:
        return 1, -1 if even else 0
    if d is Direction.SOUTH_WEST:
        return -1, 0 if even else 1
    # SOUTH_EAST
    return 1, 0 if even else 1


def neighbor_point(direction: Direction | str, p: Point) -> Point:
    """Coordinate of the neighbor of *p* in *direction* on an unbounded grid."""
    dx, dy = neighbor_offset(direction, p.x)
    return Point(p.x + dx, p.y + dy)


def direction_between(p1: Point, p2: Point) -> Direction | None:
    """Return the direction leading from *p1* to the adjacent *p2*.

    Returns None if the points are not neighbors.
    """
    for d in Direction:
        if neighbor_point(d, p1) == p2:
            return d
    return None


# -- Line drawing --------------------------------------------------------

def _round_half_away(v: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    a = abs(v)
    whole = math.floor(a)
    # floor(a + 0.5) would round 0.49999999999999994 up.
    if a - whole >= 0.5:
        whole += 1
    return int(math.copysign(whole, v))


def round_cube(fx: float, fy: float, fz: float) -> CubeCoord:
    """Round fractional cube coordinates to the nearest hex.

    Rounding each axis on its own can break ``x + y + z == 0``, so the
    axis with the largest rounding error is recomputed from the other two.
    Ties go to x first, then y, and z last.
    """
    rx = _round_half_away(fx)
    ry = _round_half_away(fy)
    rz = _round_half_away(fz)

    x_diff = abs(rx - fx)
    y_diff = abs(ry - fy)
    z_diff = abs(rz - fz)

    if x_diff > y_diff and x_diff > z_diff:
        rx = -(ry + rz)
    elif y_diff > z_diff:
        ry = -(rx + rz)
    else:
        rz = -(rx + ry)
    return CubeCoord(rx, ry, rz)


def line(p1: Point, p2: Point) -> list[Point]:
    """Trace a straight line of hexes from *p1* to *p2* (inclusive).

    Terrain is ignored. This is a discretised line, not a path search.
    The result has ``distance(p1, p2) + 1`` points and every pair of
    consecutive points is adjacent.
    """
    n = distance(p1, p2)
    if n == 0:
        return [p1]

    a = offset_to_cube(p1)
    b = offset_to_cube(p2)
    ex, ey, ez = _LINE_EPSILON
    results: list[Point] = []
    for i in range(n + 1):
        t = i / n
        fx = a.x * (1.0 - t) + b.x * t + ex
        fy = a.y * (1.0 - t) + b.y * t + ey
        fz = a.z * (1.0 - t) + b.z * t + ez
        results.append(cube_to_offset(round_cube(fx, fy, fz)))
    return results


# -- Orientation ---------------------------------------------------------

def rotation_between(p1: Point, p2: Point) -> float:
    """Facing angle in degrees when looking from *p1* towards *p2*.

    Only defined for points whose offset deltas are all in ``{-1, 0, 1}``.
    Any step with a northward row change (``dy < 0``) yields 0.

    Raises:
        NonAdjacentPointsError: if the points are further apart.
    """
    dx = p2.x - p1.x
    dy = p2.y - p1.y
    if not (-1 <= dx <= 1 and -1 <= dy <= 1):
        raise NonAdjacentPointsError(
            f"rotation_between only works for adjacent tiles: {p1} -> {p2}"
        )
    if dx == 0 and dy == 0:
        return 0.0
    if dy == 0:
        return 60.0 if dx > 0 else 300.0
    if dy > 0:
        if dx == 0:
            return 180.0
        # dx < 0 used to compare against 240 and fall through to 0.
        return 120.0 if dx > 0 else 240.0
    # dy < 0: northward diagonals are not told apart from NORTH.
    return 0.0
