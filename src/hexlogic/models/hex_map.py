"""Hexagonal map model.

A rectangular grid of tiles stored row-major in odd-q offset coordinates.
All public queries take coordinates in map space; the map origin
``(x, y)`` is subtracted before indexing into ``tiles``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

from hexlogic.engine.tile_catalog import TileCatalog
from hexlogic.models.direction import Direction
from hexlogic.models.point import Point
from hexlogic.models.tile import Tile
from hexlogic.util.errors import MapConfigError, UnsupportedOriginError
from hexlogic.util.hex_math import neighbor_offset, neighbor_point

log = logging.getLogger(__name__)


def _require_int(document: Mapping[str, Any], key: str, default: int | None = None) -> int:
    value = document.get(key, default)
    if value is None:
        raise MapConfigError(f"Map document is missing required key {key!r}")
    if isinstance(value, bool) or not isinstance(value, int):
        raise MapConfigError(f"Map key {key!r} must be an integer, got {value!r}")
    return value


@dataclass
class HexMap:
    """The logical hex grid.

    Attributes:
        width: Number of columns. Fixed at construction.
        tiles: Row-major tiles; ``tiles[row * width + col]`` is ``(col, row)``.
        x: Origin column offset.
        y: Origin row offset.
        height: Number of rows, ``len(tiles) // width``. If the tile count is
            not a multiple of width the trailing tiles are kept in ``tiles``
            but are not reachable through any query.
    """

    width: int
    tiles: list[Tile] = field(default_factory=list)
    x: int = 0
    y: int = 0
    height: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise MapConfigError(f"Map width must be positive, got {self.width}")
        self.height = len(self.tiles) // self.width

    # -- Construction ----------------------------------------------------

    @classmethod
    def from_document(
        cls,
        document: Mapping[str, Any],
        catalog: TileCatalog,
        strict: bool = False,
    ) -> HexMap:
        """Build a map from ``{x?, y?, width, tiles: [tile_id, ...]}``.

        Every tile id is resolved through *catalog* up front, so an unknown
        id fails here rather than on first use.

        Args:
            document: Parsed map document.
            catalog: Catalog that owns the tile types.
            strict: Raise instead of warning when the tile count is not a
                multiple of the width.

        Raises:
            MapConfigError: on a missing or invalid width or tile list.
            TileNotFoundError: on a tile id unknown to *catalog*.
        """
        width = _require_int(document, "width")
        if width <= 0:
            raise MapConfigError(f"Map width must be positive, got {width}")
        raw_tiles = document.get("tiles") or []
        if not isinstance(raw_tiles, list):
            raise MapConfigError(f"Map 'tiles' must be a list, got {type(raw_tiles).__name__}")

        remainder = len(raw_tiles) % width
        if remainder:
            msg = (f"Tile count {len(raw_tiles)} is not a multiple of width {width}; "
                   f"{remainder} trailing tiles are unreachable")
            if strict:
                raise MapConfigError(msg)
            log.warning("%s", msg)

        tiles = [catalog.create_tile(str(tid)) for tid in raw_tiles]
        hex_map = cls(
            width=width,
            tiles=tiles,
            x=_require_int(document, "x", 0),
            y=_require_int(document, "y", 0),
        )
        log.info("Hex map: %dx%d (%d tiles) at origin (%d,%d)",
                 hex_map.width, hex_map.height, len(tiles), hex_map.x, hex_map.y)
        return hex_map

    def clone(self) -> HexMap:
        """Shallow copy: same scalars, same Tile objects, new tile list."""
        copy = HexMap(width=self.width, tiles=list(self.tiles), x=self.x, y=self.y)
        copy.height = self.height
        return copy

    # -- Properties ------------------------------------------------------

    @property
    def origin(self) -> Point:
        return Point(self.x, self.y)

    @property
    def size(self) -> tuple[int, int]:
        """``(width, height)``."""
        return self.width, self.height

    def __len__(self) -> int:
        return len(self.tiles)

    # -- Queries ---------------------------------------------------------

    def _local_tile(self, xx: int, yy: int) -> Tile | None:
        """Tile at origin-relative coordinates, or None out of bounds."""
        if xx < 0 or yy < 0 or xx >= self.width or yy >= self.height:
            return None
        return self.tiles[yy * self.width + xx]

    def tile_at(self, x: int, y: int) -> Tile | None:
        """Return the tile at map coordinates ``(x, y)``, or None outside the map."""
        return self._local_tile(x - self.x, y - self.y)

    def tile_at_point(self, p: Point) -> Tile | None:
        return self.tile_at(p.x, p.y)

    def neighbor(self, direction: Direction | str, x: int, y: int) -> Tile | None:
        """Return the tile next to ``(x, y)`` in *direction*, or None.

        Parity is taken from the column as given, before the origin is
        subtracted.

        Raises:
            InvalidDirectionError: if *direction* is not a hex direction.
            UnsupportedOriginError: if the map origin is not ``(0, 0)``.
        """
        if self.x != 0 or self.y != 0:
            raise UnsupportedOriginError(f"x/y values not zero ({self.x},{self.y})")
        dx, dy = neighbor_offset(direction, x)
        return self._local_tile(x - self.x + dx, y - self.y + dy)

    def neighbor_coordinates(self, direction: Direction | str, x: int, y: int) -> Point:
        """Coordinates next to ``(x, y)`` in *direction*, without bounds checks."""
        return neighbor_point(direction, Point(x, y))

    def surrounding_tiles(self, x: int, y: int) -> list[Tile]:
        """All existing neighbors of ``(x, y)`` in Direction order."""
        results: list[Tile] = []
        for d in Direction:
            tile = self.neighbor(d, x, y)
            if tile is not None:
                results.append(tile)
        return results

    def surrounding_coordinates(self, x: int, y: int) -> list[Point]:
        """Neighbor coordinates of ``(x, y)`` that fall inside the map extent."""
        results: list[Point] = []
        for d in Direction:
            p = self.neighbor_coordinates(d, x, y)
            # Both axes are bounded; negative rows used to slip through.
            if 0 <= p.x < self.width and 0 <= p.y < self.height:
                results.append(p)
        return results

    def surrounding_coordinates_of(self, p: Point) -> list[Point]:
        return self.surrounding_coordinates(p.x, p.y)
