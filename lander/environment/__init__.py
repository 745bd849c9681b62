"""Environment models for Mars lander simulation.

Provides the planet constants, point-mass gravity and the atmospheric
density profile.

Example:
    >>> from lander.environment import MARS, Atmosphere, gravity_acceleration
    >>>
    >>> atm = Atmosphere()
    >>> rho = atm.density_at_altitude(10000.0)  # kg/m^3
    >>>
    >>> g = gravity_acceleration(position)  # m/s^2
"""

from lander.environment.atmosphere import (
    Atmosphere,
    atmospheric_density,
)
from lander.environment.mars import (
    EXOSPHERE,
    GRAVITY,
    MARS,
    MARS_MASS,
    MARS_RADIUS,
    Planet,
    circular_orbit_speed,
    escape_speed,
    gravity_acceleration,
    gravity_force,
)

__all__ = [
    # Constants
    "EXOSPHERE",
    "GRAVITY",
    "MARS",
    "MARS_MASS",
    "MARS_RADIUS",
    "Planet",
    # Gravity
    "gravity_acceleration",
    "gravity_force",
    "circular_orbit_speed",
    "escape_speed",
    # Atmosphere
    "Atmosphere",
    "atmospheric_density",
]
