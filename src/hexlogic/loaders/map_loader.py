"""Map loader — parses hex map definitions into HexMap models.

Format::

    x: 0          # optional origin column
    y: 0          # optional origin row
    width: 3
    tiles:        # row-major, len(tiles) should be a multiple of width
      - grass
      - grass
      - water
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from hexlogic.engine.tile_catalog import TileCatalog
from hexlogic.models.hex_map import HexMap
from hexlogic.util.errors import MapConfigError


def load_hex_map(path: str | Path, catalog: TileCatalog, strict: bool = False) -> HexMap:
    """Load a hex map from a YAML file.

    Args:
        path: Path to the map YAML file.
        catalog: Catalog used to resolve tile ids.
        strict: Reject tile counts that are not a multiple of the width.

    Returns:
        Populated HexMap instance.
    """
    path = Path(path)
    with path.open() as f:
        data: Any = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise MapConfigError(f"{path}: expected a mapping at top level")
    return HexMap.from_document(data, catalog, strict=strict)
