"""
Input/output for aircraft configuration files.
"""

from .config import (
    AircraftConfig,
    load_aircraft_config,
    load_aircraft,
    save_aircraft_config,
    discover_aircraft_configs,
    create_example_config
)

__all__ = [
    'AircraftConfig',
    'load_aircraft_config',
    'load_aircraft',
    'save_aircraft_config',
    'discover_aircraft_configs',
    'create_example_config'
]
