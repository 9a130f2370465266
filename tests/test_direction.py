"""Tests for Direction and Point."""

import pytest

from hexlogic.models.direction import Direction
from hexlogic.models.point import Point
from hexlogic.util.errors import InvalidDirectionError


class TestDirection:
    def test_six_directions_in_traversal_order(self):
        assert list(Direction) == [
            Direction.NORTH,
            Direction.NORTH_EAST,
            Direction.SOUTH_EAST,
            Direction.SOUTH,
            Direction.SOUTH_WEST,
            Direction.NORTH_WEST,
        ]

    @pytest.mark.parametrize("value", ["north_east", "NORTH_EAST", " North_East "])
    def test_coerce_strings(self, value):
        assert Direction.coerce(value) is Direction.NORTH_EAST

    def test_coerce_member(self):
        assert Direction.coerce(Direction.SOUTH) is Direction.SOUTH

    @pytest.mark.parametrize("value", ["east", "", 3, None])
    def test_coerce_rejects(self, value):
        with pytest.raises(InvalidDirectionError):
            Direction.coerce(value)


class TestPoint:
    def test_arithmetic(self):
        assert Point(1, 2) + Point(3, -1) == Point(4, 1)
        assert Point(1, 2) - Point(3, -1) == Point(-2, 3)

    def test_unpack(self):
        x, y = Point(5, 7)
        assert (x, y) == (5, 7)

    def test_hashable(self):
        assert len({Point(0, 0), Point(0, 0), Point(1, 0)}) == 2
