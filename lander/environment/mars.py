"""Planet model for Mars lander simulation.

Provides the Mars physical constants and a point-mass gravity model.
The gravity core is numba-compiled for use inside the tick loop.

Example:
    >>> from lander.environment import MARS, gravity_acceleration
    >>>
    >>> g = gravity_acceleration(position, MARS)  # [gx, gy, gz] in m/s^2
    >>> print(f"Surface gravity: {MARS.surface_gravity:.3f} m/s^2")
"""

from dataclasses import dataclass

import numpy as np
from beartype import beartype
from numba import njit
from numpy.typing import NDArray

# =============================================================================
# Constants
# =============================================================================

GRAVITY: float = 6.673e-11  # Gravitational constant [m^3/(kg*s^2)]
MARS_MASS: float = 6.42e23  # [kg]
MARS_RADIUS: float = 3386000.0  # Mean radius [m]
EXOSPHERE: float = 200000.0  # Top of the modelled atmosphere [m]


# =============================================================================
# Planet
# =============================================================================


@beartype
@dataclass(frozen=True)
class Planet:
    """Physical constants of the central body.

    Attributes:
        radius: Mean radius [m]
        mass: Planet mass [kg]
        gravitational_constant: Newton's G [m^3/(kg*s^2)]
        exosphere: Altitude above which density is zero [m]
        surface_density: Atmospheric density at zero altitude [kg/m^3]
        scale_height: Exponential density scale height [m]
    """
    radius: float | int = MARS_RADIUS
    mass: float | int = MARS_MASS
    gravitational_constant: float | int = GRAVITY
    exosphere: float | int = EXOSPHERE
    surface_density: float | int = 0.017
    scale_height: float | int = 11000.0

    def __post_init__(self) -> None:
        """Validate and store every constant as float."""
        for name in (
            "radius", "mass", "gravitational_constant",
            "exosphere", "surface_density", "scale_height",
        ):
            object.__setattr__(self, name, float(getattr(self, name)))
        if self.radius <= 0:
            raise ValueError(f"Planet radius must be positive, got {self.radius}")

    @property
    def mu(self) -> float:
        """Gravitational parameter G*M [m^3/s^2]."""
        return self.gravitational_constant * self.mass

    @property
    def surface_gravity(self) -> float:
        """Gravity magnitude at zero altitude [m/s^2]."""
        return self.mu / (self.radius * self.radius)


MARS = Planet()


# =============================================================================
# Numba-Optimized Core Functions
# =============================================================================


@njit(cache=True, fastmath=True)
def _gravity_magnitude(
    x: float, y: float, z: float,
    mu: float,
    mass: float,
) -> float:
    """Numba-optimized point-mass gravity force magnitude.

    F = mu * m / r^2
    """
    r_sq = x*x + y*y + z*z
    return mu * mass / r_sq


# =============================================================================
# Gravity
# =============================================================================


@beartype
def gravity_acceleration(
    position: NDArray[np.float64],
    planet: Planet = MARS,
) -> NDArray[np.float64]:
    """Gravitational acceleration at position.

    Args:
        position: Planet-centred position [x, y, z] [m]
        planet: Central body

    Returns:
        Acceleration vector pointing at the planet centre [m/s^2]
    """
    return gravity_force(position, 1.0, planet)


@beartype
def gravity_force(
    position: NDArray[np.float64],
    mass: float | int,
    planet: Planet = MARS,
) -> NDArray[np.float64]:
    """Gravitational force on a body of given mass.

    Args:
        position: Planet-centred position [x, y, z] [m]
        mass: Body mass [kg]
        planet: Central body

    Returns:
        Force vector [N], directed from position toward the origin

    Raises:
        ValueError: If position is at the planet centre
    """
    r = float(np.linalg.norm(position))
    if r == 0.0:
        raise ValueError("Gravity is undefined at zero distance from the planet centre")

    x, y, z = float(position[0]), float(position[1]), float(position[2])
    magnitude = _gravity_magnitude(x, y, z, planet.mu, float(mass))

    return -magnitude * position / r


@beartype
def circular_orbit_speed(radius: float | int, planet: Planet = MARS) -> float:
    """Speed of a circular orbit at the given distance from the centre [m/s]."""
    return float(np.sqrt(planet.mu / radius))


@beartype
def escape_speed(radius: float | int, planet: Planet = MARS) -> float:
    """Escape speed at the given distance from the centre [m/s]."""
    return float(np.sqrt(2.0 * planet.mu / radius))
