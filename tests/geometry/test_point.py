import pytest
from geometry_helpers.geometry.point import Point


class TestPoint:
    def test_create_point(self):
        p = Point(x=1.0, y=2.0)
        assert p.x == 1.0
        assert p.y == 2.0

    def test_integer_coordinates(self):
        p = Point(x=1, y=2)
        assert p == Point(x=1.0, y=2.0)

    def test_invalid_coordinates(self):
        with pytest.raises(ValueError):
            Point(x=float('nan'), y=1.0)
        with pytest.raises(ValueError):
            Point(x=1.0, y=float('inf'))

    def test_distance_to(self):
        p1 = Point(x=0.0, y=0.0)
        p2 = Point(x=3.0, y=4.0)
        assert p1.distance_to(p2) == 5.0
        assert p2.distance_to(p1) == 5.0

    def test_is_almost_equal(self):
        p1 = Point(x=1.0, y=1000.0)
        assert p1.is_almost_equal(Point(x=1.0 + 1e-12, y=1000.0 + 1e-9))
        assert not p1.is_almost_equal(Point(x=1.1, y=1000.0))
        assert p1.is_almost_equal(Point(x=1.1, y=1000.0), tolerance=0.2)

    def test_midpoint(self):
        mid = Point(x=1.0, y=2.0).midpoint(Point(x=5.0, y=6.0))
        assert mid == Point(x=3.0, y=4.0)

    def test_immutability(self):
        p = Point(x=1.0, y=2.0)
        with pytest.raises(Exception):
            p.x = 3.0

    def test_hashable(self):
        assert len({Point(x=1.0, y=2.0), Point(x=1.0, y=2.0)}) == 1

    def test_string_representation(self):
        p = Point(x=1.0, y=2.0)
        assert str(p) == "(1.0, 2.0)"
