"""Proportional descent autopilot.

Commands throttle from altitude and radial velocity so that the target
descent rate shrinks linearly toward a small margin as the lander nears the
surface:

    h = |r| - R
    v_r = (r . v) / |r|                (negative when falling)
    e = -(margin + Kh*h + v_r)
    P = Kp * e

The output is mapped onto throttle around a hover bias delta:

    P <= -delta       -> 0
    P >= 1 - delta    -> 1
    otherwise         -> delta + P

The three regions cover the real line, so the result is always in [0, 1].
The controller has no integral or derivative term and keeps no state.

Example:
    >>> from lander.gnc.control import Autopilot
    >>>
    >>> pilot = Autopilot(planet_radius=MARS.radius)
    >>> state.throttle = pilot.update(state.position, state.velocity)
"""

from dataclasses import dataclass, field

import numpy as np
from beartype import beartype
from numpy.typing import NDArray

from lander.environment.mars import MARS_RADIUS

# =============================================================================
# Gains
# =============================================================================


@beartype
@dataclass(frozen=True)
class AutopilotGains:
    """Autopilot gains.

    Attributes:
        kh: Altitude gain for the target descent rate [1/s]
        kp: Proportional gain on the descent-rate error [s/m]
        delta: Throttle bias at zero error (hover fraction)
        descent_margin: Target descent rate at zero altitude [m/s]
    """
    kh: float | int = 0.03
    kp: float | int = 0.5
    delta: float | int = 0.5
    descent_margin: float | int = 0.5

    def __post_init__(self) -> None:
        """Store every gain as float."""
        for name in ("kh", "kp", "delta", "descent_margin"):
            object.__setattr__(self, name, float(getattr(self, name)))


# =============================================================================
# Control Law
# =============================================================================


@beartype
def radial_velocity(
    position: NDArray[np.float64],
    velocity: NDArray[np.float64],
) -> float:
    """Velocity component along the radial direction [m/s].

    Positive when climbing, negative when falling.

    Raises:
        ValueError: If position is at the planet centre
    """
    r = float(np.linalg.norm(position))
    if r == 0.0:
        raise ValueError("Radial direction is undefined at the planet centre")
    return float(np.dot(position, velocity)) / r


@beartype
def throttle_from_output(p_out: float | int, delta: float | int = 0.5) -> float:
    """Map controller output onto throttle with three-region saturation."""
    if p_out <= -delta:
        return 0.0
    if p_out >= 1.0 - delta:
        return 1.0
    return float(delta + p_out)


@beartype
def descent_error(
    position: NDArray[np.float64],
    velocity: NDArray[np.float64],
    planet_radius: float | int = MARS_RADIUS,
    gains: AutopilotGains = AutopilotGains(),
) -> float:
    """Descent-rate error e = -(margin + Kh*h + v_r)."""
    altitude = float(np.linalg.norm(position)) - planet_radius
    return -(gains.descent_margin + gains.kh * altitude + radial_velocity(position, velocity))


@beartype
def autopilot_throttle(
    position: NDArray[np.float64],
    velocity: NDArray[np.float64],
    planet_radius: float | int = MARS_RADIUS,
    gains: AutopilotGains = AutopilotGains(),
) -> float:
    """Throttle command for the next tick.

    Args:
        position: Planet-centred position [m]
        velocity: Velocity [m/s]
        planet_radius: Surface radius [m]
        gains: Controller gains

    Returns:
        Throttle in [0, 1]
    """
    p_out = gains.kp * descent_error(position, velocity, planet_radius, gains)
    return throttle_from_output(p_out, gains.delta)


# =============================================================================
# Autopilot
# =============================================================================


@beartype
@dataclass
class Autopilot:
    """Stateless proportional autopilot bound to a planet radius and gains.

    Example:
        >>> pilot = Autopilot(planet_radius=3386000.0)
        >>> throttle = pilot.update(position, velocity)
    """
    planet_radius: float | int = MARS_RADIUS
    gains: AutopilotGains = field(default_factory=AutopilotGains)

    def __post_init__(self) -> None:
        self.planet_radius = float(self.planet_radius)

    @beartype
    def error(self, position: NDArray[np.float64], velocity: NDArray[np.float64]) -> float:
        """Descent-rate error at the current state."""
        return descent_error(position, velocity, self.planet_radius, self.gains)

    @beartype
    def output(self, position: NDArray[np.float64], velocity: NDArray[np.float64]) -> float:
        """Unsaturated proportional output."""
        return self.gains.kp * self.error(position, velocity)

    @beartype
    def update(self, position: NDArray[np.float64], velocity: NDArray[np.float64]) -> float:
        """Throttle command in [0, 1]."""
        return throttle_from_output(self.output(position, velocity), self.gains.delta)
