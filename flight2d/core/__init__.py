"""
Core 2D point-mass flight dynamics components.

This module provides the vector type, aerodynamic model, aircraft record and
integrator used by the simulation stepper.
"""

from .vector import Vector2D
from .table_aero import AeroDataTable
from .aerodynamics import (
    LegacyAero,
    TableAero,
    AeroCoefficients,
    ForceVectors,
    compute_coefficients,
    compute_force_vectors
)
from .aircraft import Aircraft
from .integrator import RK4Integrator

__all__ = [
    'Vector2D',
    'AeroDataTable',
    'LegacyAero',
    'TableAero',
    'AeroCoefficients',
    'ForceVectors',
    'compute_coefficients',
    'compute_force_vectors',
    'Aircraft',
    'RK4Integrator'
]
