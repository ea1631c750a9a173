"""
Aircraft parameter record.
"""

from dataclasses import dataclass, field

from .aerodynamics import AeroSource, LegacyAero, TableAero


@dataclass(frozen=True)
class Aircraft:
    """
    Fixed-wing aircraft parameters for the point-mass model.

    Replaced wholesale when a new configuration loads; never mutated.
    Defaults describe a typical ultralight.

    Attributes
    ----------
    mass : float
        Mass (kg)
    S : float
        Wing reference area (m²)
    max_thrust : float
        Thrust at full throttle (N)
    aero : LegacyAero or TableAero
        Source of lift and drag coefficients
    name : str
        Display name
    aero_data_file : str
        Path of the aero table the configuration asked for, '' if none
    """

    mass: float = 120.0
    S: float = 1.60
    max_thrust: float = 500.0
    aero: AeroSource = field(default_factory=lambda: LegacyAero(CL_alpha=5.7, CD0=0.025, k=0.04))
    name: str = "Default Ultralight"
    aero_data_file: str = ""

    @property
    def has_aero_table(self) -> bool:
        """True when coefficients come from a table."""
        return isinstance(self.aero, TableAero)

    def __repr__(self):
        model = "table" if self.has_aero_table else "legacy"
        return (f"Aircraft(name='{self.name}', mass={self.mass} kg, "
                f"S={self.S} m², max_thrust={self.max_thrust} N, aero={model})")
