"""Orbital diagnostics for lander trajectories.

Conserved quantities of the two-body problem, used to judge integrator
quality and to describe the preset orbits.

Example:
    >>> from lander.orbital import specific_energy, orbital_period
    >>>
    >>> eps = specific_energy(state.position, state.velocity)
    >>> period = orbital_period(state.position, state.velocity)
"""

import numpy as np
from beartype import beartype
from numpy.typing import NDArray

from lander.environment.mars import MARS

MU_MARS: float = MARS.mu  # Gravitational parameter [m^3/s^2]


@beartype
def specific_energy(
    position: NDArray[np.float64],
    velocity: NDArray[np.float64],
    mu: float | int = MU_MARS,
) -> float:
    """Specific orbital energy v^2/2 - mu/r [J/kg]."""
    r = float(np.linalg.norm(position))
    v_sq = float(np.dot(velocity, velocity))
    return 0.5 * v_sq - mu / r


@beartype
def specific_angular_momentum(
    position: NDArray[np.float64],
    velocity: NDArray[np.float64],
) -> NDArray[np.float64]:
    """Specific angular momentum vector r x v [m^2/s]."""
    return np.cross(position, velocity)


@beartype
def eccentricity(
    position: NDArray[np.float64],
    velocity: NDArray[np.float64],
    mu: float | int = MU_MARS,
) -> float:
    """Orbital eccentricity from the state vectors."""
    h = specific_angular_momentum(position, velocity)
    e_vec = np.cross(velocity, h) / mu - position / np.linalg.norm(position)
    return float(np.linalg.norm(e_vec))


@beartype
def orbital_period(
    position: NDArray[np.float64],
    velocity: NDArray[np.float64],
    mu: float | int = MU_MARS,
) -> float | None:
    """Period of a bound orbit [s], or None for escape trajectories."""
    eps = specific_energy(position, velocity, mu)
    if eps >= 0.0:
        return None
    a = -mu / (2.0 * eps)
    return float(2.0 * np.pi * np.sqrt(a**3 / mu))
