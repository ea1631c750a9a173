"""
Fixed-step RK4 integrator for 2D point-mass kinematics.

The acceleration is computed once per tick upstream and held constant over
the step, so the four stages reduce to the exact constant-acceleration
update:

    v_new = v + a*dt
    x_new = x + v*dt + 0.5*a*dt²
"""

from typing import Tuple

from .vector import Vector2D


class RK4Integrator:
    """
    4th-order Runge-Kutta integrator (fixed time step).

    Integrates position/velocity under a single frozen acceleration vector;
    it is not a general ODE solver.
    """

    def __init__(self, dt: float = 0.016):
        """
        Initialize RK4 integrator.

        Parameters:
        -----------
        dt : float
            Default fixed time step (seconds)
        """
        self.dt = dt

    def integrate(self, position: Vector2D, velocity: Vector2D,
                  acceleration: Vector2D, dt: float = None) -> Tuple[Vector2D, Vector2D]:
        """
        Advance position and velocity by one time step.

        Parameters:
        -----------
        position : Vector2D
            Current position (m)
        velocity : Vector2D
            Current velocity (m/s)
        acceleration : Vector2D
            Acceleration held constant over the step (m/s²)
        dt : float, optional
            Time step (seconds), defaults to self.dt

        Returns:
        --------
        new_position : Vector2D
            Position at t + dt
        new_velocity : Vector2D
            Velocity at t + dt
        """
        if dt is None:
            dt = self.dt

        # k1..k4 for velocity all equal `acceleration`; the weighted position
        # stages (v, v + a*dt/2, v + a*dt/2, v + a*dt) average to v + a*dt/2
        new_velocity = velocity + acceleration * dt
        new_position = position + velocity * dt + acceleration * (0.5 * dt * dt)

        return new_position, new_velocity
