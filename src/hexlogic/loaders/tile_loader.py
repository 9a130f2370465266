"""Tile loader — parses the tile-type YAML file into a TileCatalog.

Format::

    tiles:
      grass:
        name: Grass
        cost: 1.0      # optional, default 1.0
        height: 1.0    # optional, default 1.0
"""

from __future__ import annotations

from pathlib import Path

import yaml

from hexlogic.engine.tile_catalog import TileCatalog, default_catalog


def load_tile_catalog(path: str | Path, catalog: TileCatalog | None = None) -> TileCatalog:
    """Load tile types from a YAML file.

    Args:
        path: Path to the tiles YAML file.
        catalog: Catalog to (re)load. Defaults to the process-wide catalog.

    Returns:
        The loaded catalog.
    """
    path = Path(path)
    with path.open() as f:
        data = yaml.safe_load(f) or {}
    if catalog is None:
        catalog = default_catalog()
    catalog.load(data)
    return catalog
