"""Exponential Mars atmosphere model.

Density falls off exponentially with altitude from a surface value and is
zero above the exosphere and below the surface:

    rho(h) = rho0 * exp(-h / H),   0 <= h < exosphere

Example:
    >>> from lander.environment import Atmosphere
    >>>
    >>> atm = Atmosphere()
    >>> rho = atm.density_at_altitude(10000.0)  # kg/m^3
    >>> rho = atm.density(position)           # by planet-centred position
"""

import numpy as np
from beartype import beartype
from numba import njit
from numpy.typing import NDArray

from lander.environment.mars import MARS, Planet

# =============================================================================
# Numba-Optimized Core Functions
# =============================================================================


@njit(cache=True, fastmath=True)
def _exponential_density(
    altitude: float,
    surface_density: float,
    scale_height: float,
    exosphere: float,
) -> float:
    """Numba-optimized exponential density profile."""
    if altitude < 0.0 or altitude >= exosphere:
        return 0.0
    return surface_density * np.exp(-altitude / scale_height)


# =============================================================================
# Atmosphere Model
# =============================================================================


@beartype
class Atmosphere:
    """Exponential atmosphere bound to a planet.

    Example:
        >>> atm = Atmosphere(MARS)
        >>> atm.density(np.array([0.0, -(MARS.radius + 10000.0), 0.0]))
    """

    def __init__(self, planet: Planet = MARS) -> None:
        """Initialize atmosphere model.

        Args:
            planet: Central body providing surface density, scale height and exosphere
        """
        self.planet = planet

    @beartype
    def density_at_altitude(self, altitude: float | int) -> float:
        """Air density at altitude above the surface [kg/m^3]."""
        return float(_exponential_density(
            float(altitude),
            self.planet.surface_density,
            self.planet.scale_height,
            self.planet.exosphere,
        ))

    @beartype
    def density(self, position: NDArray[np.float64]) -> float:
        """Air density at a planet-centred position [kg/m^3]."""
        altitude = float(np.linalg.norm(position)) - self.planet.radius
        return self.density_at_altitude(altitude)

    @beartype
    def in_atmosphere(self, position: NDArray[np.float64]) -> bool:
        """Check if position lies below the exosphere."""
        altitude = float(np.linalg.norm(position)) - self.planet.radius
        return bool(altitude < self.planet.exosphere)


@beartype
def atmospheric_density(position: NDArray[np.float64], planet: Planet = MARS) -> float:
    """Air density at a planet-centred position [kg/m^3]."""
    altitude = float(np.linalg.norm(position)) - planet.radius
    return float(_exponential_density(
        altitude,
        planet.surface_density,
        planet.scale_height,
        planet.exosphere,
    ))
