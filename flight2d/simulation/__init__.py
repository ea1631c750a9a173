"""
Simulation state, per-tick stepper and batch runner.
"""

from .state import SimulationState, FlightTelemetry, LoadStatus
from .stepper import SimulationStepper
from .runner import run_simulation

__all__ = [
    'SimulationState',
    'FlightTelemetry',
    'LoadStatus',
    'SimulationStepper',
    'run_simulation'
]
