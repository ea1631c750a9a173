"""
Tests for the RK4 integrator.
"""

import pytest

from flight2d.core import RK4Integrator, Vector2D


class TestRK4Integrator:
    """Test constant-acceleration integration."""

    def test_zero_acceleration(self):
        """Test uniform motion."""
        rk4 = RK4Integrator()
        pos, vel = rk4.integrate(Vector2D(1.0, 2.0), Vector2D(3.0, -1.0),
                                 Vector2D(0.0, 0.0), 0.5)

        assert pos.x == pytest.approx(2.5)
        assert pos.y == pytest.approx(1.5)
        assert vel == Vector2D(3.0, -1.0)

    def test_constant_acceleration_from_rest(self):
        """Test x = a*t²/2 and v = a*t."""
        rk4 = RK4Integrator()
        pos, vel = rk4.integrate(Vector2D(0.0, 0.0), Vector2D(0.0, 0.0),
                                 Vector2D(10.0, 0.0), 1.0)

        assert pos.x == pytest.approx(5.0)
        assert vel.x == pytest.approx(10.0)
        assert pos.y == 0.0

    def test_split_step(self):
        """Test two half steps match one full step."""
        rk4 = RK4Integrator()
        p0, v0, a = Vector2D(3.0, 100.0), Vector2D(20.0, 5.0), Vector2D(-1.5, -9.8)

        p_full, v_full = rk4.integrate(p0, v0, a, 0.1)
        p_half, v_half = rk4.integrate(p0, v0, a, 0.05)
        p_half, v_half = rk4.integrate(p_half, v_half, a, 0.05)

        assert p_half.x == pytest.approx(p_full.x, abs=1e-6)
        assert p_half.y == pytest.approx(p_full.y, abs=1e-6)
        assert v_half.x == pytest.approx(v_full.x, abs=1e-6)
        assert v_half.y == pytest.approx(v_full.y, abs=1e-6)

    def test_free_fall(self):
        """Test one second of free fall in ten steps."""
        rk4 = RK4Integrator(dt=0.1)
        g = Vector2D(0.0, -9.80665)
        pos, vel = Vector2D(0.0, 100.0), Vector2D(0.0, 0.0)

        for _ in range(10):
            pos, vel = rk4.integrate(pos, vel, g)

        assert pos.y == pytest.approx(100.0 - 0.5 * 9.80665, abs=1e-9)
        assert vel.y == pytest.approx(-9.80665, abs=1e-9)

    def test_default_dt(self):
        """Test the integrator's own dt is used when none is passed."""
        rk4 = RK4Integrator(dt=0.016)
        pos, _ = rk4.integrate(Vector2D(0.0, 0.0), Vector2D(10.0, 0.0), Vector2D(0.0, 0.0))

        assert pos.x == pytest.approx(0.16)
