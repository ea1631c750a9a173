"""
Autopilot Controllers

Provides PID-based flight control systems:
- Generic PID controller
- Airspeed hold (drives throttle)
- Altitude hold (drives angle of attack)
"""

from typing import Tuple

import numpy as np


class PIDController:
    """
    Generic PID (Proportional-Integral-Derivative) controller.

    output = Kp*error + Ki*integral(error) + Kd*d(error)/dt, clamped to the
    output limits. The integral is clamped to +/-(max - min)/(Ki + 1e-10),
    which grows very large for tiny Ki and so barely limits windup there.

    Parameters
    ----------
    Kp : float
        Proportional gain
    Ki : float
        Integral gain
    Kd : float
        Derivative gain
    output_min : float, optional
        Lower output saturation limit (default: -1.0)
    output_max : float, optional
        Upper output saturation limit (default: 1.0)

    Attributes
    ----------
    error_integral : float
        Accumulated integral error
    error_prev : float
        Previous error for derivative calculation
    first_call : bool
        True until the first update after construction or reset
    p_term, i_term, d_term : float
        Term contributions from the last update
    """

    def __init__(self,
                 Kp: float,
                 Ki: float,
                 Kd: float,
                 output_min: float = -1.0,
                 output_max: float = 1.0):
        """Initialize PID controller."""
        self.Kp = Kp
        self.Ki = Ki
        self.Kd = Kd
        self.output_limits = (output_min, output_max)

        self.error_integral = 0.0
        self.error_prev = 0.0
        self.first_call = True

        self.p_term = 0.0
        self.i_term = 0.0
        self.d_term = 0.0

    def update(self, setpoint: float, measurement: float, dt: float) -> float:
        """
        Compute control output.

        Parameters
        ----------
        setpoint : float
            Desired value
        measurement : float
            Current measured value
        dt : float
            Time step (seconds)

        Returns
        -------
        float
            Control output, clamped to the output limits
        """
        output_min, output_max = self.output_limits
        error = setpoint - measurement

        # Integral term with anti-windup
        self.error_integral += error * dt
        max_integral = (output_max - output_min) / (self.Ki + 1e-10)
        self.error_integral = float(np.clip(self.error_integral, -max_integral, max_integral))

        # Derivative term (skip on first call to avoid spike)
        derivative = 0.0
        if not self.first_call and dt > 1e-10:
            derivative = (error - self.error_prev) / dt
        self.first_call = False

        self.p_term = self.Kp * error
        self.i_term = self.Ki * self.error_integral
        self.d_term = self.Kd * derivative

        output = self.p_term + self.i_term + self.d_term
        output = float(np.clip(output, output_min, output_max))

        self.error_prev = error

        return output

    def reset(self):
        """Reset controller state. Gains and output limits are kept."""
        self.error_integral = 0.0
        self.error_prev = 0.0
        self.first_call = True
        self.p_term = 0.0
        self.i_term = 0.0
        self.d_term = 0.0

    def set_output_limits(self, output_min: float, output_max: float):
        """Change saturation limits without touching gains or the integral."""
        self.output_limits = (output_min, output_max)

    @property
    def gains(self) -> Tuple[float, float, float]:
        """(Kp, Ki, Kd)."""
        return self.Kp, self.Ki, self.Kd

    def __repr__(self):
        return (f"PIDController(Kp={self.Kp}, Ki={self.Ki}, Kd={self.Kd}, "
                f"output_limits={self.output_limits})")


class HoldController:
    """
    Single-loop hold autopilot wrapping a PIDController.

    Gains, setpoint and the enable flag are plain attributes the host writes
    between ticks. When the gains differ from the ones the current PID was
    built with, the next `update` rebuilds it with the new gains and the
    same output limits.

    Parameters
    ----------
    setpoint : float
        Target value of the held quantity
    Kp, Ki, Kd : float
        PID gains
    output_limits : tuple of float
        (min, max) command range
    """

    def __init__(self,
                 setpoint: float,
                 Kp: float,
                 Ki: float,
                 Kd: float,
                 output_limits: Tuple[float, float]):
        self.enabled = False
        self.setpoint = setpoint
        self.Kp = Kp
        self.Ki = Ki
        self.Kd = Kd
        self.pid = PIDController(Kp, Ki, Kd, *output_limits)

    def enable(self):
        """Engage the hold, starting from a clean PID state."""
        self.enabled = True
        self.pid.reset()

    def disable(self):
        """Disengage the hold; manual inputs take over."""
        self.enabled = False

    def update(self, measurement: float, dt: float) -> float:
        """
        Compute the command that drives `measurement` toward the setpoint.

        Parameters
        ----------
        measurement : float
            Current value of the held quantity
        dt : float
            Time step (seconds)

        Returns
        -------
        float
            Command within the output limits
        """
        gains = (self.Kp, self.Ki, self.Kd)
        if gains != self.pid.gains:
            self.pid = PIDController(*gains, *self.pid.output_limits)

        return self.pid.update(self.setpoint, measurement, dt)

    def error(self, measurement: float) -> float:
        """Setpoint minus measurement."""
        return self.setpoint - measurement

    def reset(self):
        """Reset PID state."""
        self.pid.reset()

    @property
    def terms(self) -> Tuple[float, float, float]:
        """(P, I, D) contributions from the last update."""
        return self.pid.p_term, self.pid.i_term, self.pid.d_term


class AirspeedHoldController(HoldController):
    """
    Airspeed hold autopilot.

    Commands throttle in [0, 1] to hold the target speed.

    Parameters
    ----------
    target_speed : float
        Desired airspeed (m/s)
    Kp, Ki, Kd : float
        PID gains (throttle per m/s)
    """

    def __init__(self,
                 target_speed: float = 40.0,
                 Kp: float = 0.02,
                 Ki: float = 0.001,
                 Kd: float = 0.01):
        super().__init__(target_speed, Kp, Ki, Kd, output_limits=(0.0, 1.0))


class AltitudeHoldController(HoldController):
    """
    Altitude hold autopilot.

    Commands angle of attack in degrees, limited to [-10, 15], to hold the
    target altitude.

    Parameters
    ----------
    target_altitude : float
        Desired altitude (m)
    Kp, Ki, Kd : float
        PID gains (deg per m)
    """

    def __init__(self,
                 target_altitude: float = 100.0,
                 Kp: float = 0.1,
                 Ki: float = 0.001,
                 Kd: float = 0.5):
        super().__init__(target_altitude, Kp, Ki, Kd, output_limits=(-10.0, 15.0))
