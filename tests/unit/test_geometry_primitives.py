"""Tests for the numeric geometry helpers."""

import math

import pytest

from svg_interpolator.core.data_models import Point
from svg_interpolator.geometry.primitives import (
    angle_between,
    clamp,
    distance,
    lerp,
    mod,
    squared_distance,
    to_radians,
)


class TestDistances:
    """Test distance helpers."""

    def test_distance(self):
        """Test Euclidean distance of a 3-4-5 triangle."""
        assert distance(Point(0, 0), Point(3, 4)) == 5.0

    def test_squared_distance(self):
        """Test squared distance skips the root."""
        assert squared_distance(Point(1, 1), Point(4, 5)) == 25.0

    def test_distance_is_symmetric(self):
        """Test argument order does not matter."""
        a, b = Point(-2.5, 7), Point(3, -1)
        assert distance(a, b) == distance(b, a)


class TestScalarHelpers:
    """Test modulo, clamp, lerp and angle conversion."""

    def test_mod_of_negative_is_positive(self):
        """Test negative angles wrap into [0, 360)."""
        assert mod(-30, 360) == 330
        assert mod(370, 360) == 10
        assert mod(360, 360) == 0

    def test_to_radians(self):
        """Test degree conversion."""
        assert to_radians(180) == pytest.approx(math.pi)
        assert to_radians(-90) == pytest.approx(-math.pi / 2)

    def test_clamp(self):
        """Test values are limited to the range."""
        assert clamp(-1, 0, 1) == 0
        assert clamp(2, 0, 1) == 1
        assert clamp(0.25, 0, 1) == 0.25

    def test_lerp(self):
        """Test linear interpolation at the ends and middle."""
        assert lerp(2, 6, 0) == 2
        assert lerp(2, 6, 1) == 6
        assert lerp(2, 6, 0.5) == 4


class TestAngleBetween:
    """Test signed angles between vectors."""

    def test_quarter_turn_positive(self):
        """Test counter-clockwise rotation is positive."""
        assert angle_between(Point(1, 0), Point(0, 1)) == pytest.approx(math.pi / 2)

    def test_quarter_turn_negative(self):
        """Test clockwise rotation is negative."""
        assert angle_between(Point(1, 0), Point(0, -1)) == pytest.approx(-math.pi / 2)

    def test_opposite_vectors(self):
        """Test opposite vectors give a positive half turn."""
        assert angle_between(Point(1, 0), Point(-1, 0)) == pytest.approx(math.pi)

    def test_parallel_vectors_do_not_leave_acos_domain(self):
        """Test rounding in the cosine never raises a math domain error."""
        v = Point(0.1, 0.2)
        assert angle_between(v, Point(v.x * 3, v.y * 3)) == pytest.approx(0, abs=1e-7)
