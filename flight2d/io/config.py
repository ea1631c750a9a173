"""
Aircraft Configuration System

Provides YAML-based configuration loading for aircraft parameters and the
optional aerodynamic table. JSON aircraft files load unchanged since YAML is
a superset of JSON.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import yaml

from ..core.aerodynamics import LegacyAero, TableAero
from ..core.aircraft import Aircraft
from ..core.table_aero import AeroDataTable
from ..exceptions import ConfigParseError, DataLoadError

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ('mass', 'S', 'CL_alpha', 'CD0', 'k', 'maxThrust')

CONFIG_SUFFIXES = ('.yaml', '.yml', '.json')


class AircraftConfig:
    """
    Aircraft configuration loaded from YAML file.

    Accepts the fields either at top level or nested under an `aircraft`
    key.

    Attributes
    ----------
    name : str
        Aircraft name
    mass : float
        Aircraft mass (kg)
    S : float
        Wing area (m²)
    CL_alpha, CD0, k : float
        Legacy lift slope (1/rad), zero-lift drag and induced drag factor
    max_thrust : float
        Maximum thrust (N)
    aero_data_file : str
        Optional aero table path, '' when absent
    base_dir : Path
        Directory relative aero table paths are resolved against

    Raises
    ------
    ConfigParseError
        If the configuration is not a mapping or a required field is
        missing or not numeric
    """

    def __init__(self, config_dict: Dict[str, Any], base_dir: Union[str, Path] = '.'):
        """
        Initialize aircraft configuration from dictionary.

        Parameters
        ----------
        config_dict : dict
            Configuration dictionary (typically from YAML)
        base_dir : str or Path, optional
            Directory for resolving a relative `aeroDataFile`
        """
        self.raw_config = config_dict
        self.base_dir = Path(base_dir)
        self._parse_config()

    def _parse_config(self):
        """Parse configuration dictionary."""
        if not isinstance(self.raw_config, dict):
            raise ConfigParseError("Aircraft configuration must be a mapping of keys to values")

        aircraft = self.raw_config.get('aircraft', self.raw_config)
        if not isinstance(aircraft, dict):
            raise ConfigParseError("'aircraft' section must be a mapping", field='aircraft')

        self.name = str(aircraft.get('name', 'Unnamed Aircraft'))

        self.mass = _parse_number(aircraft, 'mass')
        self.S = _parse_number(aircraft, 'S')
        self.CL_alpha = _parse_number(aircraft, 'CL_alpha')
        self.CD0 = _parse_number(aircraft, 'CD0')
        self.k = _parse_number(aircraft, 'k')
        self.max_thrust = _parse_number(aircraft, 'maxThrust')

        aero_file = aircraft.get('aeroDataFile', '')
        if aero_file is None:
            aero_file = ''
        if not isinstance(aero_file, str):
            raise ConfigParseError(f"'aeroDataFile' must be a string, got {aero_file!r}",
                                   field='aeroDataFile')
        self.aero_data_file = aero_file

    def create_aero_source(self):
        """
        Create the coefficient source for this configuration.

        A configured aero table that cannot be loaded falls back to the
        legacy coefficients; the failure is logged, not raised.

        Returns
        -------
        LegacyAero or TableAero
            Configured coefficient source
        """
        legacy = LegacyAero(CL_alpha=self.CL_alpha, CD0=self.CD0, k=self.k)

        if not self.aero_data_file:
            return legacy

        table_path = self.base_dir / self.aero_data_file
        try:
            return TableAero(AeroDataTable.load_csv(table_path))
        except DataLoadError as e:
            logger.warning("Aero table for %s unavailable, using legacy coefficients: %s",
                           self.name, e)
            return legacy

    def create_aircraft(self) -> Aircraft:
        """
        Create Aircraft object from configuration.

        Returns
        -------
        Aircraft
            Configured aircraft
        """
        return Aircraft(
            mass=self.mass,
            S=self.S,
            max_thrust=self.max_thrust,
            aero=self.create_aero_source(),
            name=self.name,
            aero_data_file=self.aero_data_file,
        )

    def __repr__(self):
        """String representation."""
        return (f"AircraftConfig(name='{self.name}', "
                f"mass={self.mass}, "
                f"S={self.S}, "
                f"maxThrust={self.max_thrust})")


def _parse_number(section: Dict[str, Any], key: str) -> float:
    """Read a required numeric field."""
    if key not in section:
        raise ConfigParseError(f"Key not found in configuration: {key}", field=key)

    value = section[key]
    if isinstance(value, bool):
        raise ConfigParseError(f"Failed to parse value for key '{key}': {value!r}", field=key)
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ConfigParseError(f"Failed to parse value for key '{key}': {value!r}",
                               field=key) from e


def load_aircraft_config(yaml_file: Union[str, Path]) -> AircraftConfig:
    """
    Load aircraft configuration from YAML file.

    Parameters
    ----------
    yaml_file : str or Path
        Path to YAML (or JSON) configuration file

    Returns
    -------
    AircraftConfig
        Loaded aircraft configuration

    Raises
    ------
    ConfigParseError
        If the file cannot be read or parsed, or a required field is invalid

    Examples
    --------
    >>> config = load_aircraft_config('aircraft/trainer.yaml')
    >>> aircraft = config.create_aircraft()
    """
    yaml_file = Path(yaml_file)
    try:
        with open(yaml_file, 'r') as f:
            config_dict = yaml.safe_load(f)
    except OSError as e:
        raise ConfigParseError(f"Failed to open aircraft config file: {yaml_file} "
                               f"(absolute path tried: {yaml_file.absolute()})") from e
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Invalid aircraft config file {yaml_file}: {e}") from e

    return AircraftConfig(config_dict, base_dir=yaml_file.parent)


def load_aircraft(yaml_file: Union[str, Path]) -> Aircraft:
    """
    Load an Aircraft directly from a configuration file.

    Parameters
    ----------
    yaml_file : str or Path
        Path to configuration file

    Returns
    -------
    Aircraft
        Parsed aircraft record
    """
    aircraft = load_aircraft_config(yaml_file).create_aircraft()
    logger.info("Loaded aircraft %s from %s", aircraft.name, yaml_file)
    return aircraft


def save_aircraft_config(config: AircraftConfig, yaml_file: Union[str, Path]):
    """
    Save aircraft configuration to YAML file.

    Parameters
    ----------
    config : AircraftConfig
        Aircraft configuration to save
    yaml_file : str or Path
        Output YAML file path
    """
    with open(yaml_file, 'w') as f:
        yaml.dump(config.raw_config, f, default_flow_style=False, sort_keys=False)

    logger.info("Configuration saved to: %s", yaml_file)


def discover_aircraft_configs(directory: Union[str, Path]) -> List[Tuple[str, Path]]:
    """
    List aircraft configuration files in a directory.

    Parameters
    ----------
    directory : str or Path
        Directory to scan (not recursive)

    Returns
    -------
    list of (name, path)
        Display name (file stem with underscores as spaces) and path,
        sorted by name. Empty if the directory does not exist.
    """
    directory = Path(directory)
    if not directory.is_dir():
        logger.warning("Aircraft directory not found: %s", directory)
        return []

    configs = [(path.stem.replace('_', ' '), path)
               for path in directory.iterdir()
               if path.is_file() and path.suffix.lower() in CONFIG_SUFFIXES]
    return sorted(configs)


def create_example_config(aero_data_file: Optional[str] = None) -> Dict[str, Any]:
    """
    Create example aircraft configuration dictionary.

    Parameters
    ----------
    aero_data_file : str, optional
        Aero table path to include

    Returns
    -------
    dict
        Example configuration
    """
    config = {
        'aircraft': {
            'name': 'Light Trainer',
            'mass': 1100.0,       # kg
            'S': 16.2,            # m²
            'CL_alpha': 4.9,      # 1/rad
            'CD0': 0.027,
            'k': 0.054,
            'maxThrust': 2800.0,  # N
        }
    }

    if aero_data_file:
        config['aircraft']['aeroDataFile'] = aero_data_file

    return config
