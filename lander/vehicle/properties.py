"""Lander mass and geometry properties.

The lander is a fixed dry structure plus a single propellant tank. Current
mass is a linear function of the fuel fraction:

    m = m_unloaded + fuel * capacity * density

Example:
    >>> from lander.vehicle import LanderProperties
    >>>
    >>> lander = LanderProperties()
    >>> print(f"Wet mass: {lander.mass(1.0):.0f} kg")
    >>> print(f"Dry mass: {lander.mass(0.0):.0f} kg")
"""

from dataclasses import dataclass

import numpy as np
from beartype import beartype

from lander.environment.mars import MARS, Planet

# =============================================================================
# Constants
# =============================================================================

UNLOADED_LANDER_MASS: float = 100.0  # [kg]
FUEL_CAPACITY: float = 100.0  # [l]
FUEL_DENSITY: float = 1.0  # [kg/l]
FUEL_RATE_AT_MAX_THRUST: float = 0.5  # [l/s]
LANDER_SIZE: float = 1.0  # Body radius [m]
DRAG_COEF_LANDER: float = 1.0
DRAG_COEF_CHUTE: float = 2.0
MAX_PARACHUTE_DRAG: float = 20000.0  # [N]
MAX_PARACHUTE_SPEED: float = 500.0  # [m/s]
MAX_IMPACT_DESCENT_RATE: float = 1.0  # [m/s]
MAX_IMPACT_GROUND_SPEED: float = 1.0  # [m/s]

# Max thrust as a multiple of the fully fuelled weight at the surface
THRUST_TO_WEIGHT: float = 1.5


# =============================================================================
# Lander Properties
# =============================================================================


@beartype
@dataclass(frozen=True)
class LanderProperties:
    """Fixed vehicle parameters.

    Attributes:
        unloaded_mass: Dry mass [kg]
        fuel_capacity: Tank volume [l]
        fuel_density: Propellant density [kg/l]
        fuel_rate_at_max_thrust: Propellant consumption at full throttle [l/s]
        size: Body radius, also the parachute sizing unit [m]
        drag_coef_lander: Drag coefficient of the body
        drag_coef_chute: Drag coefficient of the parachute
        max_parachute_drag: Drag load above which the parachute fails [N]
        max_parachute_speed: Speed above which the parachute fails in the atmosphere [m/s]
        max_impact_descent_rate: Largest survivable vertical touchdown speed [m/s]
        max_impact_ground_speed: Largest survivable horizontal touchdown speed [m/s]
        thrust_to_weight: Max thrust over fully fuelled surface weight
    """
    unloaded_mass: float | int = UNLOADED_LANDER_MASS
    fuel_capacity: float | int = FUEL_CAPACITY
    fuel_density: float | int = FUEL_DENSITY
    fuel_rate_at_max_thrust: float | int = FUEL_RATE_AT_MAX_THRUST
    size: float | int = LANDER_SIZE
    drag_coef_lander: float | int = DRAG_COEF_LANDER
    drag_coef_chute: float | int = DRAG_COEF_CHUTE
    max_parachute_drag: float | int = MAX_PARACHUTE_DRAG
    max_parachute_speed: float | int = MAX_PARACHUTE_SPEED
    max_impact_descent_rate: float | int = MAX_IMPACT_DESCENT_RATE
    max_impact_ground_speed: float | int = MAX_IMPACT_GROUND_SPEED
    thrust_to_weight: float | int = THRUST_TO_WEIGHT

    def __post_init__(self) -> None:
        """Store every property as float."""
        for name in self.__dataclass_fields__:
            object.__setattr__(self, name, float(getattr(self, name)))

    def mass(self, fuel: float | int) -> float:
        """Current mass for a fuel fraction [kg].

        The fraction is not clamped; callers keep it in [0, 1].
        """
        return self.unloaded_mass + fuel * self.fuel_capacity * self.fuel_density

    @property
    def full_mass(self) -> float:
        """Mass with a full tank [kg]."""
        return self.mass(1.0)

    @property
    def body_area(self) -> float:
        """Body drag reference area [m^2]."""
        return np.pi * self.size * self.size

    @property
    def chute_area(self) -> float:
        """Parachute drag reference area [m^2].

        Five square panels of side 2 * size.
        """
        return 5.0 * 2.0 * self.size * 2.0 * self.size

    def max_thrust(self, planet: Planet = MARS) -> float:
        """Engine thrust at full throttle [N]."""
        return self.thrust_to_weight * self.full_mass * planet.surface_gravity

    def fuel_burned(self, throttle: float | int, dt: float | int) -> float:
        """Fuel fraction consumed over dt at the given throttle."""
        return dt * self.fuel_rate_at_max_thrust * throttle / self.fuel_capacity


DEFAULT_LANDER = LanderProperties()
