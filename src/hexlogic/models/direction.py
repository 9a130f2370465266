"""The six hex directions."""

from __future__ import annotations

from enum import Enum

from hexlogic.util.errors import InvalidDirectionError


class Direction(Enum):
    """Neighbor directions on a vertical-column hex grid.

    Iteration order is the fixed traversal order used by the
    ``surrounding_*`` queries.
    """

    NORTH = "north"
    NORTH_EAST = "north_east"
    SOUTH_EAST = "south_east"
    SOUTH = "south"
    SOUTH_WEST = "south_west"
    NORTH_WEST = "north_west"

    @classmethod
    def coerce(cls, value: Direction | str) -> Direction:
        """Accept a member, its value or its name (case-insensitive).

        Raises:
            InvalidDirectionError: if *value* names no direction.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if key in (member.value, member.name.lower()):
                    return member
        raise InvalidDirectionError(f"Unrecognised direction: {value!r}")
