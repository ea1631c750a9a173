"""
Aerodynamic model for 2D point-mass flight dynamics.

Provides:
- Coefficient sources: legacy linear lift / parabolic drag polar, or table
- Force magnitudes: lift, drag, weight, thrust
- Force vectors in the 2D inertial frame
"""

from dataclasses import dataclass
from typing import Union

import numpy as np

from .table_aero import AeroDataTable
from .vector import Vector2D

# Speed below which the velocity direction is undefined (m/s)
MIN_SPEED = 1e-6


@dataclass(frozen=True)
class LegacyAero:
    """
    Linear lift curve with a parabolic drag polar.

    CL = CL_alpha * alpha
    CD = CD0 + k * CL²

    Attributes
    ----------
    CL_alpha : float
        Lift curve slope (1/rad)
    CD0 : float
        Zero-lift (parasitic) drag coefficient
    k : float
        Induced drag factor
    """

    CL_alpha: float
    CD0: float
    k: float


@dataclass(frozen=True)
class TableAero:
    """Coefficients interpolated from an AeroDataTable."""

    table: AeroDataTable


AeroSource = Union[LegacyAero, TableAero]


@dataclass(frozen=True)
class AeroCoefficients:
    """Lift and drag coefficients at one angle of attack."""

    CL: float
    CD: float


@dataclass(frozen=True)
class ForceVectors:
    """
    Forces acting on the aircraft during one tick (N, inertial frame).

    Attributes
    ----------
    thrust : Vector2D
        Along velocity direction rotated by angle of attack
    drag : Vector2D
        Opposite to velocity
    lift : Vector2D
        Perpendicular to velocity (velocity direction rotated +90°)
    weight : Vector2D
        Straight down
    """

    thrust: Vector2D = Vector2D()
    drag: Vector2D = Vector2D()
    lift: Vector2D = Vector2D()
    weight: Vector2D = Vector2D()

    @property
    def net(self) -> Vector2D:
        """Sum of all four forces."""
        return self.thrust + self.drag + self.lift + self.weight


def lift_coefficient(alpha: float, CL_alpha: float) -> float:
    """Linear lift coefficient, alpha in radians."""
    return CL_alpha * alpha


def drag_coefficient(CL: float, CD0: float, k: float) -> float:
    """Parabolic drag polar CD = CD0 + k*CL²."""
    return CD0 + k * CL * CL


def compute_coefficients(source: AeroSource, alpha: float) -> AeroCoefficients:
    """
    Resolve CL and CD from either coefficient source.

    Parameters
    ----------
    source : LegacyAero or TableAero
        Coefficient source of the aircraft
    alpha : float
        Angle of attack (radians)

    Returns
    -------
    AeroCoefficients
        Lift and drag coefficients
    """
    if isinstance(source, TableAero):
        return AeroCoefficients(CL=source.table.lookup_CL(alpha),
                                CD=source.table.lookup_CD(alpha))

    if isinstance(source, LegacyAero):
        CL = lift_coefficient(alpha, source.CL_alpha)
        return AeroCoefficients(CL=CL, CD=drag_coefficient(CL, source.CD0, source.k))

    raise TypeError(f"Unknown aerodynamic source: {type(source).__name__}")


def compute_lift(rho: float, V: float, S: float, CL: float) -> float:
    """Lift L = 0.5 * rho * V² * S * CL (N)."""
    return 0.5 * rho * V * V * S * CL


def compute_drag(rho: float, V: float, S: float, CD: float) -> float:
    """Drag D = 0.5 * rho * V² * S * CD (N)."""
    return 0.5 * rho * V * V * S * CD


def compute_weight(mass: float, g: float) -> float:
    """Weight W = m * g (N)."""
    return mass * g


def compute_thrust(throttle: float, max_thrust: float) -> float:
    """
    Thrust T = throttle * max_thrust (N).

    Throttle is not clamped here; keeping it in [0, 1] is up to the caller.
    """
    return throttle * max_thrust


def compute_force_vectors(aircraft, velocity: Vector2D, alpha: float,
                          throttle: float, rho: float, g: float) -> ForceVectors:
    """
    Compute the four force vectors for the current flight condition.

    Parameters
    ----------
    aircraft : Aircraft
        Mass, wing area, thrust and coefficient source
    velocity : Vector2D
        Inertial velocity (m/s)
    alpha : float
        Angle of attack (radians)
    throttle : float
        Throttle setting, expected in [0, 1]
    rho : float
        Air density (kg/m³)
    g : float
        Gravitational acceleration (m/s²)

    Returns
    -------
    ForceVectors
        Thrust, drag, lift and weight (N)

    Notes
    -----
    Below MIN_SPEED the velocity direction defaults to +x so that thrust can
    accelerate the aircraft from rest; drag is then the zero vector.
    """
    speed = velocity.magnitude()
    moving = speed > MIN_SPEED
    velocity_dir = velocity.normalized() if moving else Vector2D(1.0, 0.0)

    coeffs = compute_coefficients(aircraft.aero, alpha)

    L_mag = compute_lift(rho, speed, aircraft.S, coeffs.CL)
    D_mag = compute_drag(rho, speed, aircraft.S, coeffs.CD)
    W_mag = compute_weight(aircraft.mass, g)
    T_mag = compute_thrust(throttle, aircraft.max_thrust)

    return ForceVectors(
        thrust=velocity_dir.rotated(alpha) * T_mag,
        drag=velocity_dir * (-D_mag) if moving else Vector2D(0.0, 0.0),
        lift=velocity_dir.rotated(np.pi / 2.0) * L_mag,
        weight=Vector2D(0.0, -W_mag),
    )
