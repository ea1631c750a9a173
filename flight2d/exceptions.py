"""
Exception types raised by the simulator.

Numeric degeneracies (near-zero speed, magnitude, gain or time step) are
never raised; they are handled in place by returning a safe default.
"""

from typing import Optional


class FlightSimError(Exception):
    """Base class for all simulator errors."""


class ConfigParseError(FlightSimError):
    """
    Aircraft configuration could not be read or a required field is invalid.

    Parameters
    ----------
    message : str
        Human-readable description
    field : str, optional
        Name of the offending configuration key (None when the file itself
        could not be read)
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class DataLoadError(FlightSimError):
    """Aerodynamic table is unreadable or contains no valid points."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path
