"""Command line entry point.

Loads the tile catalog and a hex map, then answers a single query:

    hexlogic info
    hexlogic tile 2 1
    hexlogic neighbors 1 1
    hexlogic distance 0 0 4 2
    hexlogic line 0 0 4 2

Paths come from config/grid.yaml unless overridden with --tiles / --map.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections import Counter
from dataclasses import dataclass
from typing import Optional

from hexlogic.engine.tile_catalog import TileCatalog
from hexlogic.loaders.grid_config_loader import (
    DEFAULT_GRID_CONFIG_PATH,
    GridConfig,
    load_grid_config,
    resolve_log_level,
)
from hexlogic.loaders.map_loader import load_hex_map
from hexlogic.loaders.tile_loader import load_tile_catalog
from hexlogic.models.hex_map import HexMap
from hexlogic.models.point import Point
from hexlogic.util.errors import HexGridError
from hexlogic.util.hex_math import distance, line

log = logging.getLogger(__name__)


@dataclass
class Configuration:
    """Holds everything loaded from config files."""

    grid: GridConfig
    catalog: TileCatalog
    hex_map: HexMap


# ===================================================================
# Loading
# ===================================================================


def load_configuration(
    config_path: str = DEFAULT_GRID_CONFIG_PATH,
    tiles_path: str = "",
    map_path: str = "",
    strict: Optional[bool] = None,
    grid: Optional[GridConfig] = None,
) -> Configuration:
    """Load grid settings, the tile catalog and the map.

    Explicit arguments win over the values in the grid config file. An
    already loaded *grid* is used as-is instead of reading *config_path*.
    """
    if grid is None:
        grid = load_grid_config(config_path)
    log.info("Loading configuration …")
    if tiles_path:
        grid.tiles_path = tiles_path
    if map_path:
        grid.map_path = map_path
    if strict is not None:
        grid.strict_map_dimensions = strict

    catalog = load_tile_catalog(grid.tiles_path, TileCatalog())
    log.info("  tiles: %d types from %s", len(catalog), grid.tiles_path)

    hex_map = load_hex_map(grid.map_path, catalog, strict=grid.strict_map_dimensions)
    log.info("  map:   %dx%d from %s", hex_map.width, hex_map.height, grid.map_path)

    return Configuration(grid=grid, catalog=catalog, hex_map=hex_map)


# ===================================================================
# Commands
# ===================================================================


def _cmd_info(config: Configuration, args: argparse.Namespace) -> None:
    m = config.hex_map
    print(f"map: {m.width}x{m.height} ({len(m)} tiles) origin ({m.x},{m.y})")
    counts = Counter(t.id for t in m.tiles)
    for tid in sorted(counts):
        print(f"  {tid}: {counts[tid]}")


def _cmd_tile(config: Configuration, args: argparse.Namespace) -> None:
    tile = config.hex_map.tile_at(args.x, args.y)
    if tile is None:
        print("-")
    else:
        print(f"{tile.id} ({tile.name}) cost={tile.cost} height={tile.height}")


def _cmd_neighbors(config: Configuration, args: argparse.Namespace) -> None:
    m = config.hex_map
    for p in m.surrounding_coordinates(args.x, args.y):
        tile = m.tile_at_point(p)
        print(f"{p.x},{p.y} {tile.id if tile else '-'}")


def _cmd_distance(config: Configuration, args: argparse.Namespace) -> None:
    print(distance(Point(args.x1, args.y1), Point(args.x2, args.y2)))


def _cmd_line(config: Configuration, args: argparse.Namespace) -> None:
    for p in line(Point(args.x1, args.y1), Point(args.x2, args.y2)):
        print(f"{p.x},{p.y}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hexlogic", description="Query a logical hex map.")
    parser.add_argument("--config", default=DEFAULT_GRID_CONFIG_PATH, help="grid config YAML")
    parser.add_argument("--tiles", default="", help="tile catalog YAML (overrides config)")
    parser.add_argument("--map", default="", help="hex map YAML (overrides config)")
    parser.add_argument("--strict", action="store_true", default=None,
                        help="reject maps whose tile count is not a multiple of the width")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("info", help="map size and tile histogram").set_defaults(func=_cmd_info)

    for name, func, text in (
        ("tile", _cmd_tile, "tile at a coordinate"),
        ("neighbors", _cmd_neighbors, "in-bounds neighbor coordinates"),
    ):
        p = sub.add_parser(name, help=text)
        p.add_argument("x", type=int)
        p.add_argument("y", type=int)
        p.set_defaults(func=func)

    for name, func, text in (
        ("distance", _cmd_distance, "hex distance between two points"),
        ("line", _cmd_line, "hexes on the straight line between two points"),
    ):
        p = sub.add_parser(name, help=text)
        for arg in ("x1", "y1", "x2", "y2"):
            p.add_argument(arg, type=int)
        p.set_defaults(func=func)

    return parser


# ===================================================================
# Entry point
# ===================================================================


def main(argv: Optional[list[str]] = None) -> int:
    """Entry point for the ``hexlogic`` command."""
    args = build_parser().parse_args(argv)

    try:
        grid = load_grid_config(args.config)
        level = resolve_log_level(grid.log_level)
        logging.basicConfig(
            level=level,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
        logging.getLogger("hexlogic").setLevel(level)

        config = load_configuration(
            tiles_path=args.tiles,
            map_path=args.map,
            strict=args.strict,
            grid=grid,
        )
        args.func(config, args)
    except (HexGridError, FileNotFoundError) as e:
        log.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
