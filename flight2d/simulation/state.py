"""
Simulation state shared between the stepper and the host.

The host (interactive or batch) reads the state every frame for display and
writes manual control inputs, autopilot enable flags, setpoints and gains
back between ticks. Only the stepper advances the physics.
"""

import logging
from collections import deque
from dataclasses import dataclass
from pathlib import Path
from typing import NamedTuple, Optional, Union

import numpy as np

from ..control.autopilot import AirspeedHoldController, AltitudeHoldController
from ..control.trim import TrimResult, TrimSolver
from ..core.aerodynamics import ForceVectors
from ..core.aircraft import Aircraft
from ..core.vector import Vector2D
from ..environment.atmosphere import StandardAtmosphere
from ..exceptions import FlightSimError
from ..io.config import load_aircraft

logger = logging.getLogger(__name__)

# Control inputs applied by reset()
RESET_THROTTLE = 0.3
RESET_ALPHA_DEG = 5.0


class LoadStatus(NamedTuple):
    """Outcome of an aircraft reload, for display next to the load control."""

    message: str
    error: bool


@dataclass(frozen=True)
class FlightTelemetry:
    """
    Snapshot of the quantities a host displays each frame.

    Angles are degrees, speeds m/s, forces are magnitudes in N.
    """

    time: float
    distance: float
    altitude: float
    speed: float
    speed_kmh: float
    vertical_speed: float
    climb_angle_deg: float
    throttle: float
    alpha_deg: float
    thrust: float
    drag: float
    lift: float
    weight: float
    temperature_C: float
    pressure: float
    density: float
    speed_error: float
    speed_p: float
    speed_i: float
    speed_d: float
    altitude_error: float
    altitude_p: float
    altitude_i: float
    altitude_d: float


class SimulationState:
    """
    Complete state of one 2D flight simulation.

    Parameters
    ----------
    aircraft : Aircraft, optional
        Aircraft parameters (default: built-in ultralight)
    dt : float, optional
        Fixed time step (seconds)
    max_path_points : int, optional
        Capacity of the flight path history; oldest points drop first

    Attributes
    ----------
    position : Vector2D
        (distance, altitude) in m
    velocity : Vector2D
        Inertial velocity in m/s
    time : float
        Simulated time (s)
    throttle : float
        Throttle input [0, 1], overwritten by the airspeed hold when enabled
    alpha_deg : float
        Angle of attack input (deg), overwritten by the altitude hold when enabled
    paused : bool
        When True the stepper does nothing
    speed_hold : AirspeedHoldController
        Airspeed autopilot
    altitude_hold : AltitudeHoldController
        Altitude autopilot
    flight_path : deque of (x, y)
        Recent positions, bounded by max_path_points
    forces : ForceVectors
        Forces from the last tick, for inspection only
    """

    def __init__(self,
                 aircraft: Optional[Aircraft] = None,
                 dt: float = 0.016,
                 max_path_points: int = 1000):
        self.aircraft = aircraft if aircraft is not None else Aircraft()
        self.dt = dt

        self.position = Vector2D(0.0, 0.0)
        self.velocity = Vector2D(0.0, 0.0)
        self.time = 0.0

        # Control inputs
        self.throttle = 0.0
        self.alpha_deg = 0.0
        self.paused = False

        # Autopilots
        self.speed_hold = AirspeedHoldController()
        self.altitude_hold = AltitudeHoldController()

        self.max_path_points = max_path_points
        self.flight_path = deque(maxlen=max_path_points)

        self.forces = ForceVectors()

    def reset(self):
        """
        Restart the flight from the origin.

        Keeps the aircraft, autopilot settings and time step.
        """
        self.position = Vector2D(0.0, 0.0)
        self.velocity = Vector2D(0.0, 0.0)
        self.throttle = RESET_THROTTLE
        self.alpha_deg = RESET_ALPHA_DEG
        self.time = 0.0
        self.flight_path.clear()
        self.forces = ForceVectors()
        self.speed_hold.reset()
        self.altitude_hold.reset()
        logger.info("Simulation reset (aircraft: %s)", self.aircraft.name)

    def load_aircraft(self, config_file: Union[str, Path]) -> LoadStatus:
        """
        Replace the aircraft from a configuration file.

        On failure the previous aircraft stays in place.

        Parameters
        ----------
        config_file : str or Path
            Aircraft configuration file

        Returns
        -------
        LoadStatus
            "Loaded: <name>" or "Error: <reason>" with the error flag
        """
        try:
            self.aircraft = load_aircraft(config_file)
        except FlightSimError as e:
            logger.error("Aircraft reload from %s failed: %s", config_file, e)
            return LoadStatus(f"Error: {e}", True)

        return LoadStatus(f"Loaded: {self.aircraft.name}", False)

    def load_default_aircraft(self) -> LoadStatus:
        """Restore the built-in ultralight."""
        self.aircraft = Aircraft()
        return LoadStatus(f"Loaded: {self.aircraft.name}", False)

    def apply_trim(self, trim: TrimResult):
        """
        Place the aircraft in the trimmed condition.

        Sets horizontal velocity at the trim airspeed, the trim altitude,
        throttle and angle of attack, and clears the path and PID state.
        """
        self.position = Vector2D(self.position.x, trim.altitude)
        self.velocity = Vector2D(trim.airspeed, 0.0)
        self.throttle = trim.throttle
        self.alpha_deg = trim.alpha_deg
        self.flight_path.clear()
        self.speed_hold.reset()
        self.altitude_hold.reset()

    def trim_level_flight(self, airspeed: float, altitude: float,
                          solver: Optional[TrimSolver] = None) -> TrimResult:
        """
        Solve level-flight trim for the current aircraft and apply it if found.

        Parameters
        ----------
        airspeed : float
            Airspeed (m/s)
        altitude : float
            Altitude (m)
        solver : TrimSolver, optional
            Solver to use (default settings if omitted)

        Returns
        -------
        TrimResult
            The solution; the state is left untouched when it failed
        """
        solver = solver if solver is not None else TrimSolver()
        trim = solver.trim_level_flight(self.aircraft, airspeed, altitude)
        if trim.success:
            self.apply_trim(trim)
        return trim

    @property
    def speed(self) -> float:
        """Airspeed (m/s)."""
        return self.velocity.magnitude()

    @property
    def altitude(self) -> float:
        """Altitude (m)."""
        return self.position.y

    def flight_path_array(self) -> np.ndarray:
        """Flight path history as an (N, 2) array of (x, y)."""
        return np.array(self.flight_path, dtype=float).reshape(-1, 2)

    def telemetry(self) -> FlightTelemetry:
        """
        Snapshot of the current flight data.

        Returns
        -------
        FlightTelemetry
            Display quantities
        """
        speed = self.speed
        h = max(0.0, self.position.y)
        speed_p, speed_i, speed_d = self.speed_hold.terms
        alt_p, alt_i, alt_d = self.altitude_hold.terms

        return FlightTelemetry(
            time=self.time,
            distance=self.position.x,
            altitude=self.position.y,
            speed=speed,
            speed_kmh=speed * 3.6,
            vertical_speed=self.velocity.y,
            climb_angle_deg=float(np.degrees(self.velocity.angle())),
            throttle=self.throttle,
            alpha_deg=self.alpha_deg,
            thrust=self.forces.thrust.magnitude(),
            drag=self.forces.drag.magnitude(),
            lift=self.forces.lift.magnitude(),
            weight=self.forces.weight.magnitude(),
            temperature_C=StandardAtmosphere.temperature(h) - 273.15,
            pressure=StandardAtmosphere.pressure(h),
            density=StandardAtmosphere.density(h),
            speed_error=self.speed_hold.error(speed),
            speed_p=speed_p,
            speed_i=speed_i,
            speed_d=speed_d,
            altitude_error=self.altitude_hold.error(self.position.y),
            altitude_p=alt_p,
            altitude_i=alt_i,
            altitude_d=alt_d,
        )

    def __repr__(self):
        return (f"SimulationState(t={self.time:.2f} s, position={self.position}, "
                f"velocity={self.velocity}, aircraft='{self.aircraft.name}')")
