"""Tile catalog — registry of tile-type definitions.

Loaded once from a configuration document and then shared, read-only, by
every map built from it. Reloading swaps in a completely new set of
definitions; tiles created before the reload keep pointing at the old ones.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Mapping

from hexlogic.models.tile import Tile, TileType
from hexlogic.util.errors import CatalogLoadError, TileNotFoundError

log = logging.getLogger(__name__)

DEFAULT_COST = 1.0
DEFAULT_HEIGHT = 1.0


def _parse_tile_type(tid: str, attrs: Any) -> TileType:
    """Build a single TileType from its document entry."""
    if not isinstance(attrs, Mapping):
        raise CatalogLoadError(f"Tile {tid!r}: expected a mapping, got {type(attrs).__name__}")
    if "name" not in attrs or attrs["name"] is None:
        raise CatalogLoadError(f"Tile {tid!r}: missing required key 'name'")
    try:
        cost = float(attrs.get("cost", DEFAULT_COST))
        height = float(attrs.get("height", DEFAULT_HEIGHT))
    except (TypeError, ValueError) as e:
        raise CatalogLoadError(f"Tile {tid!r}: {e}") from e
    if cost < 0:
        raise CatalogLoadError(f"Tile {tid!r}: cost must be non-negative, got {cost}")
    return TileType(id=tid, name=str(attrs["name"]), cost=cost, height=height)


class TileCatalog:
    """Tile-type database, keyed by tile id.

    Lookups and reloads are serialised by a lock, so a reload is seen
    either entirely or not at all.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._types: dict[str, TileType] = {}

    def load(self, document: Mapping[str, Any]) -> int:
        """Replace the catalog contents with the ``tiles`` table of *document*.

        Args:
            document: ``{"tiles": {id: {"name": ..., "cost"?: ..., "height"?: ...}}}``

        Returns:
            Number of tile types loaded.

        Raises:
            CatalogLoadError: if the document, the table or one of its entries
                is malformed.
                The previous contents are kept in that case.
        """
        if document is None:
            document = {}
        if not isinstance(document, Mapping):
            raise CatalogLoadError(f"Catalog document must be a mapping, got {type(document).__name__}")
        table = document.get("tiles") or {}
        if not isinstance(table, Mapping):
            raise CatalogLoadError(f"'tiles' must be a mapping, got {type(table).__name__}")

        loaded = {str(tid): _parse_tile_type(str(tid), attrs) for tid, attrs in table.items()}

        with self._lock:
            if self._types:
                log.debug("Replacing %d previously loaded tile types", len(self._types))
            self._types = loaded
        log.info("Tile catalog: %d tile types loaded", len(loaded))
        return len(loaded)

    def clear(self) -> None:
        """Remove all tile types."""
        with self._lock:
            self._types = {}

    def lookup(self, tile_id: str) -> TileType:
        """Return the tile type for *tile_id*.

        Raises:
            TileNotFoundError: if the id is unknown. There is no fallback
                tile; an unknown id means the map and config do not match.
        """
        with self._lock:
            try:
                return self._types[tile_id]
            except KeyError:
                raise TileNotFoundError(tile_id) from None

    def create_tile(self, tile_id: str) -> Tile:
        """Create a new grid cell sharing the catalog's definition."""
        return Tile(self.lookup(tile_id))

    def ids(self) -> list[str]:
        with self._lock:
            return list(self._types)

    def __contains__(self, tile_id: object) -> bool:
        with self._lock:
            return tile_id in self._types

    def __len__(self) -> int:
        with self._lock:
            return len(self._types)


_default_catalog = TileCatalog()


def default_catalog() -> TileCatalog:
    """Process-wide catalog used when no explicit one is passed."""
    return _default_catalog
