"""
International Standard Atmosphere (troposphere)

Provides atmospheric properties as a function of altitude:
- Temperature
- Pressure
- Density
- Speed of sound

Units: SI (meters, Kelvin, Pascal, kg/m³)
"""

import logging
from dataclasses import dataclass
from typing import Final

import numpy as np

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AtmosphereSample:
    """
    Atmospheric state at one altitude.

    Attributes
    ----------
    altitude : float
        Geometric altitude (m)
    temperature : float
        Static temperature (K)
    pressure : float
        Static pressure (Pa)
    density : float
        Air density (kg/m³)
    speed_of_sound : float
        Speed of sound (m/s)
    """

    altitude: float
    temperature: float
    pressure: float
    density: float
    speed_of_sound: float

    @property
    def temperature_C(self) -> float:
        """Static temperature in degrees Celsius."""
        return self.temperature - 273.15

    @property
    def pressure_hPa(self) -> float:
        """Static pressure in hectopascal."""
        return self.pressure / 100.0


class StandardAtmosphere:
    """
    ISA troposphere model.

    All properties are pure functions of altitude. The formulas are valid
    from 0 to 11,000 m; outside that range they still evaluate but are
    physically meaningless, so callers clamp or flag with `in_troposphere`.

    Notes
    -----
    - T(h) = T0 - L*h
    - p(h) = p0 * (1 - L*h/T0)^(g/(R*L))
    - rho(h) = p(h) / (R*T(h))
    - a(h) = sqrt(gamma*R*T(h))
    """

    # Sea level conditions
    T0: Final[float] = 288.15  # K
    p0: Final[float] = 101325.0  # Pa

    # Troposphere temperature lapse rate
    L: Final[float] = 0.0065  # K/m

    # Specific gas constant for air
    R: Final[float] = 287.0  # J/(kg·K)

    g: Final[float] = 9.80665  # m/s²

    # Ratio of specific heats
    gamma: Final[float] = 1.4

    # Tropopause
    h_trop: Final[float] = 11000.0  # m

    @staticmethod
    def temperature(altitude: float) -> float:
        """Static temperature (K) at altitude (m)."""
        return StandardAtmosphere.T0 - StandardAtmosphere.L * altitude

    @staticmethod
    def pressure(altitude: float) -> float:
        """Static pressure (Pa) at altitude (m)."""
        atm = StandardAtmosphere
        exponent = atm.g / (atm.R * atm.L)
        return float(atm.p0 * np.power(1.0 - atm.L * altitude / atm.T0, exponent))

    @staticmethod
    def density(altitude: float) -> float:
        """Air density (kg/m³) at altitude (m), from the ideal gas law."""
        return (StandardAtmosphere.pressure(altitude) /
                (StandardAtmosphere.R * StandardAtmosphere.temperature(altitude)))

    @staticmethod
    def speed_of_sound(altitude: float) -> float:
        """Speed of sound (m/s) at altitude (m)."""
        atm = StandardAtmosphere
        return float(np.sqrt(atm.gamma * atm.R * atm.temperature(altitude)))

    @staticmethod
    def in_troposphere(altitude: float) -> bool:
        """True when altitude lies in the model's valid range [0, 11000] m."""
        return 0.0 <= altitude <= StandardAtmosphere.h_trop

    @classmethod
    def sample(cls, altitude: float) -> AtmosphereSample:
        """
        Evaluate all properties at one altitude.

        Parameters
        ----------
        altitude : float
            Geometric altitude (m)

        Returns
        -------
        AtmosphereSample
            Temperature, pressure, density and speed of sound
        """
        if not cls.in_troposphere(altitude):
            logger.warning("Altitude %.1f m is outside the ISA troposphere (0-%.0f m)",
                           altitude, cls.h_trop)
        return AtmosphereSample(
            altitude=altitude,
            temperature=cls.temperature(altitude),
            pressure=cls.pressure(altitude),
            density=cls.density(altitude),
            speed_of_sound=cls.speed_of_sound(altitude),
        )

    @classmethod
    def mach_number(cls, velocity: float, altitude: float) -> float:
        """
        Compute Mach number.

        Parameters
        ----------
        velocity : float
            True airspeed (m/s)
        altitude : float
            Altitude (m)
        """
        return velocity / cls.speed_of_sound(altitude)

    @classmethod
    def dynamic_pressure(cls, velocity: float, altitude: float) -> float:
        """Dynamic pressure q = 0.5 * rho * V² (Pa)."""
        return 0.5 * cls.density(altitude) * velocity**2

    @classmethod
    def pressure_altitude(cls, pressure: float) -> float:
        """
        Altitude (m) at which the standard pressure equals `pressure` (Pa).

        Inverse of the troposphere pressure equation.
        """
        ratio = (pressure / cls.p0)**(cls.R * cls.L / cls.g)
        return cls.T0 * (1.0 - ratio) / cls.L
