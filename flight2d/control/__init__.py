"""
Control systems for flight simulation.

This module provides autopilot controllers and the trim solver.
"""

from .autopilot import PIDController, HoldController, AltitudeHoldController, AirspeedHoldController
from .trim import TrimSolver, TrimResult

__all__ = [
    'PIDController',
    'HoldController',
    'AltitudeHoldController',
    'AirspeedHoldController',
    'TrimSolver',
    'TrimResult'
]
