"""
Trim Calculation

Finds the angle of attack and throttle that hold steady, level flight at a
given airspeed and altitude.
"""

import logging
from dataclasses import dataclass

import numpy as np
from scipy.optimize import least_squares

from ..core.aerodynamics import compute_force_vectors
from ..core.aircraft import Aircraft
from ..core.vector import Vector2D
from ..environment.atmosphere import StandardAtmosphere

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrimResult:
    """
    Level-flight trim solution.

    Attributes
    ----------
    alpha_deg : float
        Trim angle of attack (degrees)
    throttle : float
        Trim throttle [0, 1]
    residual : float
        Magnitude of the remaining net force (N)
    success : bool
        True when the net force vanishes within tolerance
    airspeed : float
        Airspeed the trim was solved for (m/s)
    altitude : float
        Altitude the trim was solved for (m)
    """

    alpha_deg: float
    throttle: float
    residual: float
    success: bool
    airspeed: float
    altitude: float


class TrimSolver:
    """
    Trim solver for the point-mass model.

    Solves thrust*cos(alpha) = drag and thrust*sin(alpha) + lift = weight for
    horizontal velocity, with alpha and throttle bounded to their control
    ranges.

    Parameters
    ----------
    alpha_limits_deg : tuple of float, optional
        (min, max) angle of attack search range (degrees)
    tolerance : float, optional
        Acceptable residual as a fraction of aircraft weight
    """

    def __init__(self, alpha_limits_deg=(-10.0, 15.0), tolerance: float = 1e-6):
        """Initialize trim solver."""
        self.alpha_limits_deg = alpha_limits_deg
        self.tolerance = tolerance

    def trim_level_flight(self,
                          aircraft: Aircraft,
                          airspeed: float,
                          altitude: float = 0.0) -> TrimResult:
        """
        Find trim for straight and level flight.

        Parameters
        ----------
        aircraft : Aircraft
            Aircraft to trim
        airspeed : float
            Target airspeed (m/s)
        altitude : float, optional
            Target altitude (m)

        Returns
        -------
        TrimResult
            Trim angle of attack, throttle and residual
        """
        rho = StandardAtmosphere.density(max(0.0, altitude))
        g = StandardAtmosphere.g
        weight = aircraft.mass * g
        velocity = Vector2D(airspeed, 0.0)

        def residuals(x):
            alpha, throttle = x
            forces = compute_force_vectors(aircraft, velocity, alpha, throttle, rho, g)
            net = forces.net
            return np.array([net.x, net.y]) / weight

        alpha_min, alpha_max = np.radians(self.alpha_limits_deg)
        x0 = np.array([np.radians(2.0), 0.5])
        x0[0] = np.clip(x0[0], alpha_min + 1e-6, alpha_max - 1e-6)

        result = least_squares(residuals, x0,
                               bounds=([alpha_min, 0.0], [alpha_max, 1.0]),
                               xtol=1e-12, ftol=1e-12, gtol=1e-12)

        alpha_trim, throttle_trim = result.x
        residual = float(np.linalg.norm(result.fun) * weight)
        success = bool(result.success) and residual <= self.tolerance * weight

        trim = TrimResult(
            alpha_deg=float(np.degrees(alpha_trim)),
            throttle=float(throttle_trim),
            residual=residual,
            success=success,
            airspeed=airspeed,
            altitude=altitude,
        )

        if success:
            logger.info("Trimmed %s at %.1f m/s, %.0f m: alpha=%.2f deg, throttle=%.3f",
                        aircraft.name, airspeed, altitude, trim.alpha_deg, trim.throttle)
        else:
            logger.warning("No level-flight trim for %s at %.1f m/s, %.0f m "
                           "(residual %.1f N)", aircraft.name, airspeed, altitude, residual)

        return trim
