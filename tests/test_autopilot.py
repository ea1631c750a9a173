"""
Unit tests for autopilot controllers.

Tests PIDController and the airspeed / altitude hold wrappers.
"""

import pytest

from flight2d.control.autopilot import (
    PIDController,
    HoldController,
    AltitudeHoldController,
    AirspeedHoldController
)


class TestPIDController:
    """Test generic PID controller."""

    def test_initialization(self):
        """Test PID controller initialization."""
        pid = PIDController(Kp=1.0, Ki=0.1, Kd=0.01)

        assert pid.gains == (1.0, 0.1, 0.01)
        assert pid.output_limits == (-1.0, 1.0)
        assert pid.error_integral == 0.0
        assert pid.error_prev == 0.0
        assert pid.first_call is True

    def test_proportional_only(self):
        """Test pure proportional control saturates at the limit."""
        pid = PIDController(Kp=1.0, Ki=0.0, Kd=0.0, output_min=0.0, output_max=1.0)

        output = pid.update(50.0, 40.0, 0.1)

        assert output == pytest.approx(1.0)
        assert pid.p_term == pytest.approx(10.0)

    def test_integral_accumulation(self):
        """Test integral term accumulates error over time."""
        pid = PIDController(Kp=0.0, Ki=1.0, Kd=0.0, output_min=-10.0, output_max=10.0)

        outputs = [pid.update(10.0, 5.0, 0.1) for _ in range(3)]

        assert outputs == pytest.approx([0.5, 1.0, 1.5])

    def test_derivative_term(self):
        """Test derivative term responds to error rate."""
        pid = PIDController(Kp=0.0, Ki=0.0, Kd=1.0, output_min=-100.0, output_max=100.0)

        # First call: no derivative
        assert pid.update(10.0, 0.0, 0.1) == pytest.approx(0.0)

        # Error drops from 10 to 5 in 0.1 s
        assert pid.update(10.0, 5.0, 0.1) == pytest.approx(-50.0)
        assert pid.d_term == pytest.approx(-50.0)

    def test_derivative_skipped_for_zero_dt(self):
        """Test a zero time step gives no derivative kick."""
        pid = PIDController(Kp=1.0, Ki=0.0, Kd=10.0, output_min=-100.0, output_max=100.0)

        pid.update(5.0, 0.0, 0.1)
        output = pid.update(5.0, 2.0, 0.0)

        assert pid.d_term == 0.0
        assert output == pytest.approx(3.0)

    def test_output_clamped(self):
        """Test output saturation in both directions."""
        pid = PIDController(Kp=10.0, Ki=0.0, Kd=0.0, output_min=-1.0, output_max=1.0)

        assert pid.update(100.0, 0.0, 0.1) == 1.0
        assert pid.update(-100.0, 0.0, 0.1) == -1.0

    def test_zero_gains(self):
        """Test all-zero gains give zero output."""
        pid = PIDController(Kp=0.0, Ki=0.0, Kd=0.0)

        for measurement in (0.0, 10.0, -7.0):
            assert pid.update(3.0, measurement, 0.1) == 0.0

    def test_anti_windup(self):
        """Test integral is bounded during sustained saturation."""
        pid = PIDController(Kp=0.1, Ki=1.0, Kd=0.0, output_min=0.0, output_max=1.0)

        for _ in range(100):
            pid.update(100.0, 10.0, 0.1)

        max_integral = 1.0 / (1.0 + 1e-10)
        assert pid.error_integral == pytest.approx(max_integral)
        assert pid.i_term < 50.0

    def test_anti_windup_bound_for_zero_ki(self):
        """Test the integral bound becomes very large when Ki is zero."""
        pid = PIDController(Kp=0.0, Ki=0.0, Kd=0.0, output_min=0.0, output_max=1.0)

        for _ in range(100):
            pid.update(100.0, 10.0, 0.1)

        assert pid.error_integral == pytest.approx(900.0)

    def test_reset(self):
        """Test reset returns the controller to its initial behaviour."""
        pid = PIDController(Kp=0.5, Ki=0.2, Kd=0.3, output_min=-10.0, output_max=10.0)
        fresh = PIDController(Kp=0.5, Ki=0.2, Kd=0.3, output_min=-10.0, output_max=10.0)

        for _ in range(10):
            pid.update(4.0, 1.0, 0.05)
        pid.reset()

        assert pid.error_integral == 0.0
        assert pid.first_call is True
        assert (pid.p_term, pid.i_term, pid.d_term) == (0.0, 0.0, 0.0)
        assert pid.update(2.0, 0.5, 0.05) == pytest.approx(fresh.update(2.0, 0.5, 0.05))

    def test_set_output_limits(self):
        """Test changing limits keeps the accumulated integral."""
        pid = PIDController(Kp=0.0, Ki=1.0, Kd=0.0, output_min=-10.0, output_max=10.0)
        pid.update(10.0, 0.0, 0.1)

        pid.set_output_limits(0.0, 0.5)

        assert pid.output_limits == (0.0, 0.5)
        assert pid.error_integral == pytest.approx(1.0)
        assert pid.update(10.0, 0.0, 0.1) == pytest.approx(0.5)


class TestHoldControllers:
    """Test hold autopilots."""

    def test_airspeed_hold_defaults(self):
        """Test airspeed hold drives throttle in [0, 1]."""
        hold = AirspeedHoldController()

        assert hold.enabled is False
        assert hold.setpoint == 40.0
        assert (hold.Kp, hold.Ki, hold.Kd) == (0.02, 0.001, 0.01)
        assert hold.pid.output_limits == (0.0, 1.0)

        # First call has no derivative
        assert hold.update(0.0, 0.016) == pytest.approx(0.02 * 40.0 + 0.001 * 40.0 * 0.016)
        # Far above target: idle
        assert hold.update(200.0, 0.016) == 0.0

    def test_altitude_hold_defaults(self):
        """Test altitude hold drives alpha within [-10, 15] deg."""
        hold = AltitudeHoldController()

        assert hold.setpoint == 100.0
        assert hold.pid.output_limits == (-10.0, 15.0)

        output = hold.update(90.0, 0.016)
        assert output == pytest.approx(0.1 * 10.0 + 0.001 * 10.0 * 0.016)
        assert hold.error(90.0) == pytest.approx(10.0)

    def test_gain_change_rebuilds_pid(self):
        """Test edited gains take effect with the same limits and a clean state."""
        hold = HoldController(setpoint=10.0, Kp=1.0, Ki=0.0, Kd=0.0,
                              output_limits=(-5.0, 5.0))
        hold.update(8.0, 0.1)
        old_pid = hold.pid

        hold.Kp = 2.0
        output = hold.update(9.0, 0.1)

        assert hold.pid is not old_pid
        assert hold.pid.gains == (2.0, 0.0, 0.0)
        assert hold.pid.output_limits == (-5.0, 5.0)
        assert output == pytest.approx(2.0)

    def test_unchanged_gains_keep_pid(self):
        """Test the PID is reused while gains stay the same."""
        hold = AirspeedHoldController()
        pid = hold.pid

        hold.update(30.0, 0.016)
        hold.update(31.0, 0.016)

        assert hold.pid is pid

    def test_enable_resets_state(self):
        """Test engaging the hold starts from a clean PID."""
        hold = AltitudeHoldController()
        for _ in range(5):
            hold.update(50.0, 0.1)

        hold.enable()

        assert hold.enabled is True
        assert hold.pid.error_integral == 0.0
        assert hold.pid.first_call is True
        assert hold.terms == (0.0, 0.0, 0.0)

        hold.disable()
        assert hold.enabled is False
