"""Immutable physical and vehicle constants for a simulation run.

Example:
    >>> from lander.config import SimConstants
    >>> from lander.vehicle import LanderProperties
    >>>
    >>> heavy = SimConstants(vehicle=LanderProperties(unloaded_mass=200.0))
    >>> print(f"Max thrust: {heavy.max_thrust:.0f} N")
"""

from dataclasses import dataclass, field

from beartype import beartype

from lander.environment.mars import MARS, Planet
from lander.vehicle.properties import DEFAULT_LANDER, LanderProperties


@beartype
@dataclass(frozen=True)
class SimConstants:
    """Planet and vehicle constants shared by every tick.

    Attributes:
        planet: Central body (radius, mass, G, atmosphere extent)
        vehicle: Lander mass, geometry and limits
    """
    planet: Planet = field(default_factory=lambda: MARS)
    vehicle: LanderProperties = field(default_factory=lambda: DEFAULT_LANDER)

    @property
    def max_thrust(self) -> float:
        """Engine thrust at full throttle [N]."""
        return self.vehicle.max_thrust(self.planet)


DEFAULT_CONSTANTS = SimConstants()
