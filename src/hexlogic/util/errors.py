"""Error types raised by the hex grid.

Out-of-bounds queries are not errors: they return ``None`` or an empty list.
Everything here signals a broken map/config pairing or a programming
mistake that has to be fixed upstream.
"""

from __future__ import annotations


class HexGridError(Exception):
    """Base class for all hex grid errors."""


class TileNotFoundError(HexGridError, KeyError):
    """A tile-type id is not present in the catalog."""

    def __init__(self, tile_id: str) -> None:
        super().__init__(tile_id)
        self.tile_id = tile_id

    def __str__(self) -> str:
        return f"Unable to find a tile with name: {self.tile_id}"


class InvalidDirectionError(HexGridError, ValueError):
    """A value that is not one of the six hex directions."""


class NonAdjacentPointsError(HexGridError, ValueError):
    """Two points were expected to be adjacent but are not."""


class CatalogLoadError(HexGridError, ValueError):
    """The tile catalog document is malformed."""


class MapConfigError(HexGridError, ValueError):
    """The hex map document is malformed."""


class UnsupportedOriginError(HexGridError, NotImplementedError):
    """The query does not support maps with a non-zero origin."""


class GridConfigError(HexGridError, ValueError):
    """The grid settings file is malformed."""
