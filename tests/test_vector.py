"""
Unit tests for the 2D vector type.
"""

import numpy as np
import pytest

from flight2d.core.vector import Vector2D

tol = 1e-9


class TestVectorArithmetic:
    """Test vector arithmetic operators."""

    def test_add_subtract(self):
        """Test addition and subtraction."""
        v1 = Vector2D(3.0, 4.0)
        v2 = Vector2D(1.0, 2.0)

        assert v1 + v2 == Vector2D(4.0, 6.0)
        assert v1 - v2 == Vector2D(2.0, 2.0)

    def test_scale_and_divide(self):
        """Test scalar multiplication from both sides and division."""
        v = Vector2D(3.0, 4.0)

        assert v * 2.0 == Vector2D(6.0, 8.0)
        assert 2.0 * v == Vector2D(6.0, 8.0)
        assert v / 2.0 == Vector2D(1.5, 2.0)
        assert -v == Vector2D(-3.0, -4.0)

    def test_divide_by_zero_fails_fast(self):
        """Test division by zero raises instead of producing inf/nan."""
        v = Vector2D(1.0, 1.0)

        with pytest.raises(ZeroDivisionError):
            v / 0.0
        with pytest.raises(ZeroDivisionError):
            v / np.float64(0.0)

    def test_immutable(self):
        """Test vectors cannot be mutated in place."""
        v = Vector2D(1.0, 2.0)
        with pytest.raises(AttributeError):
            v.x = 5.0

    def test_dot_product(self):
        """Test dot product, including perpendicular vectors."""
        assert Vector2D(3.0, 4.0).dot(Vector2D(5.0, 12.0)) == pytest.approx(63.0)
        assert Vector2D(1.0, 0.0).dot(Vector2D(0.0, 1.0)) == 0.0


class TestVectorGeometry:
    """Test magnitude, normalization, rotation and angle."""

    def test_magnitude(self):
        """Test magnitude and squared magnitude."""
        v = Vector2D(3.0, 4.0)

        assert v.magnitude() == pytest.approx(5.0)
        assert v.magnitude_squared() == pytest.approx(25.0)

    def test_normalized(self):
        """Test unit vector has length one and keeps direction."""
        n = Vector2D(3.0, 4.0).normalized()

        assert n.magnitude() == pytest.approx(1.0)
        assert n.x == pytest.approx(0.6)
        assert n.y == pytest.approx(0.8)

    def test_normalized_near_zero(self):
        """Test near-zero vectors normalize to the zero vector."""
        assert Vector2D(0.0, 0.0).normalized() == Vector2D(0.0, 0.0)
        assert Vector2D(1e-10, -1e-10).normalized() == Vector2D(0.0, 0.0)

    def test_rotation(self):
        """Test counter-clockwise rotation by 90, 180 and 270 degrees."""
        v = Vector2D(1.0, 0.0)

        v90 = v.rotated(np.pi / 2.0)
        assert v90.x == pytest.approx(0.0, abs=tol)
        assert v90.y == pytest.approx(1.0, abs=tol)

        v180 = v.rotated(np.pi)
        assert v180.x == pytest.approx(-1.0, abs=tol)
        assert v180.y == pytest.approx(0.0, abs=tol)

        v270 = v.rotated(3.0 * np.pi / 2.0)
        assert v270.x == pytest.approx(0.0, abs=tol)
        assert v270.y == pytest.approx(-1.0, abs=tol)

    def test_angle(self):
        """Test atan2 angle in (-pi, pi]."""
        assert Vector2D(1.0, 0.0).angle() == pytest.approx(0.0)
        assert Vector2D(0.0, 1.0).angle() == pytest.approx(np.pi / 2.0)
        assert Vector2D(-1.0, 0.0).angle() == pytest.approx(np.pi)
        assert Vector2D(1.0, 1.0).angle() == pytest.approx(np.pi / 4.0)
        assert Vector2D(0.0, -1.0).angle() == pytest.approx(-np.pi / 2.0)

    def test_to_array(self):
        """Test conversion to numpy."""
        assert np.array_equal(Vector2D(1.5, -2.0).to_array(), np.array([1.5, -2.0]))
