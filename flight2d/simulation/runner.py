"""
Batch (non-interactive) simulation runner.

Drives a SimulationState with the same stepper an interactive host uses and
collects the telemetry of every tick.
"""

from dataclasses import asdict
from typing import Optional

import numpy as np
import pandas as pd

from .state import SimulationState
from .stepper import SimulationStepper


def run_simulation(state: SimulationState,
                   duration: Optional[float] = None,
                   n_steps: Optional[int] = None,
                   stepper: Optional[SimulationStepper] = None) -> pd.DataFrame:
    """
    Step a simulation forward and record its telemetry.

    Parameters
    ----------
    state : SimulationState
        State to advance in place
    duration : float, optional
        Simulated time to cover (s); rounded up to whole time steps
    n_steps : int, optional
        Number of ticks, instead of duration
    stepper : SimulationStepper, optional
        Stepper to use (default: new SimulationStepper)

    Returns
    -------
    pd.DataFrame
        One row per snapshot (the initial state plus one per tick), columns
        as in FlightTelemetry

    Examples
    --------
    >>> state = SimulationState()
    >>> state.trim_level_flight(airspeed=35.0, altitude=200.0)
    >>> history = run_simulation(state, duration=10.0)
    >>> history[['time', 'altitude', 'speed']].tail()
    """
    if (duration is None) == (n_steps is None):
        raise ValueError("Specify exactly one of duration or n_steps")

    if n_steps is None:
        n_steps = int(np.ceil(duration / state.dt - 1e-9))

    stepper = stepper if stepper is not None else SimulationStepper()

    records = [asdict(state.telemetry())]
    for _ in range(n_steps):
        stepper.step(state)
        records.append(asdict(state.telemetry()))

    return pd.DataFrame.from_records(records)
