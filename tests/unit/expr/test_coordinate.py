"""Tests for coordinates and distances."""

import math

import pytest

from mathkit.errors import DimensionMismatchError
from mathkit.expr import Coordinate, distance_between


class TestCoordinate:
    """Tests for Coordinate."""

    def test_dimensions(self) -> None:
        assert Coordinate(1, 2).dimensions == 2
        assert Coordinate(1, 2, 3).dimensions == 3

    def test_distance_from_origin_2d(self) -> None:
        assert Coordinate(3, 4).distance() == 5.0

    def test_distance_from_origin_3d(self) -> None:
        assert Coordinate(1, 2, 2).distance() == 3.0

    def test_distance_between_points(self) -> None:
        assert Coordinate(1, 2).distance(Coordinate(4, 6)) == 5.0
        assert Coordinate(1, 2, 3).distance(Coordinate(4, 6, 3)) == 5.0

    def test_distance_is_symmetric(self) -> None:
        a = Coordinate(-1.5, 2.0, 7.0)
        b = Coordinate(3.0, -4.0, 0.5)
        assert distance_between(a, b) == pytest.approx(distance_between(b, a))
        assert distance_between(a, b) == pytest.approx(math.sqrt(4.5**2 + 6**2 + 6.5**2))

    def test_dimension_mismatch(self) -> None:
        with pytest.raises(DimensionMismatchError, match="2D"):
            distance_between(Coordinate(1, 2), Coordinate(1, 2, 3))

    def test_instance_distance_mismatch(self) -> None:
        with pytest.raises(ValueError):
            Coordinate(1, 2, 3).distance(Coordinate(1, 2))

    def test_origin(self) -> None:
        assert Coordinate.origin() == Coordinate(0, 0)
        assert Coordinate.origin(3) == Coordinate(0, 0, 0)
        with pytest.raises(ValueError):
            Coordinate.origin(4)

    def test_str(self) -> None:
        assert str(Coordinate(1, 2)) == "(1,2)"
        assert str(Coordinate(1.5, -2, 0.25)) == "(1.5,-2,0.25)"

    def test_equality_includes_z(self) -> None:
        assert Coordinate(1, 2, 3) != Coordinate(1, 2, 2)
        assert Coordinate(1, 2) != Coordinate(1, 2, 0)

    def test_components_stored_as_float(self) -> None:
        point = Coordinate(1, 2, 3)
        assert all(isinstance(c, float) for c in point.components)
        assert Coordinate(1, 2).z is None
