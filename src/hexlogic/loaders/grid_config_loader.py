"""Grid configuration — loads runtime settings from config/grid.yaml.

Every field has a default so the tools run without the file.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

from hexlogic.util.errors import GridConfigError

log = logging.getLogger(__name__)

DEFAULT_GRID_CONFIG_PATH = "config/grid.yaml"


@dataclass
class GridConfig:
    """Paths and switches for loading a grid."""

    tiles_path: str = "config/tiles.yaml"
    map_path: str = "config/maps/default.yaml"
    strict_map_dimensions: bool = False
    log_level: str = "INFO"


def resolve_log_level(name: str) -> int:
    """Translate a level name such as ``"warning"`` into a logging level.

    Raises:
        GridConfigError: if *name* is not a known level.
    """
    level = logging.getLevelName(str(name).strip().upper())
    if not isinstance(level, int):
        raise GridConfigError(f"Unknown log_level: {name!r}")
    return level


def load_grid_config(path: str | Path = DEFAULT_GRID_CONFIG_PATH) -> GridConfig:
    """Load grid configuration from a YAML file.

    Missing keys fall back to dataclass defaults and unknown keys are
    ignored. If the file does not exist, a warning is logged and pure
    defaults are returned.
    """
    p = Path(path)
    if not p.exists():
        log.warning("Grid config not found at %s, using defaults", p)
        return GridConfig()

    with p.open() as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise GridConfigError(f"{p}: expected a mapping at top level")

    log.info("Loaded grid config from %s (%d keys)", p, len(raw))
    return GridConfig(**{
        k: v for k, v in raw.items()
        if k in GridConfig.__dataclass_fields__
    })
