"""
Per-tick simulation stepper.

One call to `SimulationStepper.step` advances a SimulationState by its fixed
time step:

1. Autopilots overwrite throttle / angle of attack when enabled
2. Density from the standard atmosphere at max(0, altitude)
3. Thrust, drag, lift and weight vectors
4. Acceleration = net force / mass, integrated with RK4
5. Ground contact constraint
6. Flight path history and clock update
"""

import logging

import numpy as np

from ..core.aerodynamics import compute_force_vectors
from ..core.integrator import RK4Integrator
from ..core.vector import Vector2D
from ..environment.atmosphere import StandardAtmosphere
from .state import SimulationState

logger = logging.getLogger(__name__)

# Ground rest: below this speed with throttle under REST_THROTTLE the
# aircraft stops
REST_SPEED = 0.1  # m/s
REST_THROTTLE = 0.01


class SimulationStepper:
    """
    Advances a SimulationState one fixed time step at a time.

    Stateless apart from its integrator, so one stepper can drive any number
    of states. Not thread-safe with respect to the state it is stepping.

    Parameters
    ----------
    integrator : RK4Integrator, optional
        Integrator to use (default: RK4Integrator)
    """

    def __init__(self, integrator: RK4Integrator = None):
        self.integrator = integrator if integrator is not None else RK4Integrator()

    def step(self, state: SimulationState):
        """
        Advance the state by state.dt. Does nothing while paused.

        Parameters
        ----------
        state : SimulationState
            State to advance in place
        """
        if state.paused:
            return

        dt = state.dt
        altitude = state.position.y
        speed = state.velocity.magnitude()

        if state.speed_hold.enabled:
            state.throttle = state.speed_hold.update(speed, dt)

        if state.altitude_hold.enabled:
            state.alpha_deg = state.altitude_hold.update(altitude, dt)

        alpha = float(np.radians(state.alpha_deg))
        rho = StandardAtmosphere.density(max(0.0, altitude))

        forces = compute_force_vectors(state.aircraft, state.velocity, alpha,
                                       state.throttle, rho, StandardAtmosphere.g)
        acceleration = forces.net / state.aircraft.mass
        state.forces = forces

        position, velocity = self.integrator.integrate(state.position, state.velocity,
                                                       acceleration, dt)
        state.position, state.velocity = self._apply_ground_constraint(
            position, velocity, state.throttle)

        # deque(maxlen) drops the oldest point once full
        state.flight_path.append((state.position.x, state.position.y))
        state.time += dt

        logger.debug("t=%.3f pos=%s vel=%s", state.time, state.position, state.velocity)

    @staticmethod
    def _apply_ground_constraint(position: Vector2D, velocity: Vector2D,
                                 throttle: float):
        """
        Keep the aircraft on or above the ground.

        Below ground: altitude clamps to 0 and downward velocity is removed;
        if the aircraft is then nearly stopped with the throttle closed it
        comes to rest.
        """
        if position.y >= 0.0:
            return position, velocity

        position = Vector2D(position.x, 0.0)
        if velocity.y < 0.0:
            velocity = Vector2D(velocity.x, 0.0)
        if velocity.magnitude() < REST_SPEED and throttle < REST_THROTTLE:
            velocity = Vector2D(0.0, 0.0)

        return position, velocity
