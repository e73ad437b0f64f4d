"""
Unit tests for geometry primitives.
"""

import pytest
from podracer.core.geometry import (
    Checkpoint,
    Point,
    Vector,
    from_polar,
    to_polar,
)


class TestPoint:
    """Test Point arithmetic."""

    def test_point_addition(self):
        result = Point(3, 4) + Point(1, 2)
        assert result == Point(4, 6)

    def test_point_subtraction(self):
        result = Point(5, 7) - Point(2, 3)
        assert result == Point(3, 4)

    def test_negation(self):
        assert -Point(3, -4) == Point(-3, 4)

    def test_default_is_origin(self):
        assert Point() == Point(0, 0)

    @pytest.mark.parametrize("a,b", [
        (Point(0, 0), Point(0, 0)),
        (Point(1000, -250), Point(-16000, 9000)),
        (Point(-7, 3), Point(12, 12)),
    ])
    def test_add_then_subtract_returns_original(self, a, b):
        assert (a + b) - b == a

    def test_scale_by_one_is_identity(self):
        p = Point(1234, -5678)
        assert p * 1.0 == p

    def test_scale_truncates_toward_zero(self):
        """Scaling must truncate, never round, in both directions."""
        result = Point(7, -7) * 0.85  # 5.95, -5.95
        assert result == Point(5, -5)

    def test_scale_drag_factor(self):
        assert Point(100, 0) * 0.85 == Point(85, 0)

    def test_scale_projection(self):
        assert Point(85, 0) * 3.0 == Point(255, 0)

    def test_scale_result_is_int(self):
        result = Point(3, 3) * 0.5
        assert isinstance(result.x, int)
        assert isinstance(result.y, int)

    def test_distance(self):
        assert Point(1, 1).distance(Point(4, 5)) == 5.0

    def test_magnitude(self):
        assert Point(3, 4).magnitude() == 5.0

    def test_points_are_immutable(self):
        p = Point(1, 2)
        with pytest.raises(AttributeError):
            p.x = 5

    def test_str(self):
        assert str(Point(1000, -3)) == "1000 -3"

    def test_to_tuple(self):
        assert Point(3, 4).to_tuple() == (3, 4)


class TestPolar:
    """Test conversions between Cartesian and polar form."""

    def test_to_polar(self):
        magnitude, angle = to_polar(Point(3, 4))
        assert magnitude == 5.0
        assert angle == pytest.approx(53.1301, abs=0.001)

    def test_to_polar_negative_angle(self):
        magnitude, angle = to_polar(Point(0, -5))
        assert magnitude == 5.0
        assert angle == pytest.approx(-90.0)

    def test_to_polar_origin(self):
        assert to_polar(Point(0, 0)) == (0.0, 0.0)

    def test_from_polar_axes(self):
        assert from_polar(1000, 0) == Point(1000, 0)
        assert from_polar(1000, 90) == Point(0, 1000)
        assert from_polar(100, 180) == Point(-100, 0)

    def test_from_polar_truncates(self):
        # 1000 * sin(30 degrees) is a hair under 500
        point = from_polar(1000, 30)
        assert point.x == 866
        assert point.y in (499, 500)

    @pytest.mark.parametrize("angle", [0, 30, 45, 90, 135, 200, 300, 359])
    def test_round_trip_within_truncation_error(self, angle):
        magnitude, result_angle = to_polar(from_polar(1000, angle))
        assert magnitude == pytest.approx(1000, abs=1.5)
        assert result_angle % 360 == pytest.approx(angle, abs=0.2)


class TestVector:
    """Test the polar view over a point."""

    def test_default_is_zero(self):
        v = Vector()
        assert v.to_point() == Point(0, 0)
        assert v.magnitude == 0.0

    def test_from_point(self):
        v = Vector(Point(3, 4))
        assert v.magnitude == 5.0
        assert v.x_component() == 3
        assert v.y_component() == 4

    def test_from_polar(self):
        v = Vector.from_polar(1000.0, 90.0)
        assert v.to_point() == Point(0, 1000)
        assert v.angle == pytest.approx(90.0)

    def test_str(self):
        assert str(Vector(Point(0, 1000))) == "1000 90°"


class TestCheckpoint:
    """Test Checkpoint composition over a Point."""

    def test_radius(self):
        assert Checkpoint.RADIUS == 600

    def test_coordinates(self):
        cp = Checkpoint(Point(1000, 200))
        assert cp.x == 1000
        assert cp.y == 200

    def test_arithmetic_returns_points(self):
        cp = Checkpoint(Point(1000, 0))
        assert cp - Point(255, 0) == Point(745, 0)
        assert cp + Point(0, 10) == Point(1000, 10)
        assert -cp == Point(-1000, 0)
        assert cp * 0.5 == Point(500, 0)

    def test_point_minus_checkpoint(self):
        assert Point(0, 0) - Checkpoint(Point(1000, 0)) == Point(-1000, 0)

    def test_contains(self):
        cp = Checkpoint(Point(1000, 1000))
        assert cp.contains(Point(1000, 1600))
        assert not cp.contains(Point(1000, 1601))

    def test_str(self):
        assert str(Checkpoint(Point(1, 2))) == "1 2"
