"""Tile models.

A ``TileType`` is the immutable definition of a kind of terrain, loaded once
into the ``TileCatalog``. A ``Tile`` is one grid cell; it only holds a
reference to its ``TileType``, so every cell of the same kind shares the
same definition object.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TileType:
    """Definition of a tile type.

    Attributes:
        id: Unique key in the catalog.
        name: Human-readable display name.
        cost: Movement cost to enter a tile of this type.
        height: Elevation.
    """

    id: str
    name: str
    cost: float = 1.0
    height: float = 1.0


@dataclass(frozen=True, eq=False)
class Tile:
    """A single grid cell.

    Compared by identity: two grass cells are different tiles even though
    they share one ``TileType``.
    """

    tile_type: TileType

    @property
    def id(self) -> str:
        return self.tile_type.id

    @property
    def name(self) -> str:
        return self.tile_type.name

    @property
    def cost(self) -> float:
        return self.tile_type.cost

    @property
    def height(self) -> float:
        return self.tile_type.height

    def __repr__(self) -> str:
        return f"Tile({self.tile_type.id})"
