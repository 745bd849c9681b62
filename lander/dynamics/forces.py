"""Translational force model for the lander.

Net force is the sum of three terms:

- Gravity: -G*M*m / |r|^2 * r_hat
- Thrust: throttle * max thrust along body +Z, rotated to the world frame
- Drag: -v_hat * 0.5 * rho * |v|^2 * sum(Cd * A), where the sum covers the
  body and, while DEPLOYED, the parachute

Acceleration is net force divided by the current mass, which depends on the
fuel fraction. Everything here is a pure function of the state and the
constants.

Example:
    >>> from lander.dynamics.forces import compute_forces
    >>>
    >>> forces = compute_forces(state, constants)
    >>> print(f"Drag: {np.linalg.norm(forces.drag):.1f} N")
    >>> a = forces.acceleration
"""

from typing import NamedTuple

import numpy as np
from beartype import beartype
from numba import njit
from numpy.typing import NDArray

from lander.config import DEFAULT_CONSTANTS, SimConstants
from lander.dynamics.attitude import thrust_in_world_frame
from lander.dynamics.state import SimulationState
from lander.environment.atmosphere import atmospheric_density
from lander.environment.mars import gravity_force
from lander.vehicle.parachute import ParachuteStatus
from lander.vehicle.properties import LanderProperties

# =============================================================================
# Result Type
# =============================================================================


class ForceBreakdown(NamedTuple):
    """Forces acting on the lander at one instant.

    All vectors are in the planet-centred frame.
    """
    gravity: NDArray[np.float64]       # [N]
    thrust: NDArray[np.float64]        # [N]
    drag: NDArray[np.float64]          # [N]
    net: NDArray[np.float64]           # [N]
    mass: float                        # [kg]
    acceleration: NDArray[np.float64]  # [m/s^2]


# =============================================================================
# Numba-Optimized Core Functions
# =============================================================================


@njit(cache=True, fastmath=True)
def _quadratic_drag_magnitude(
    density: float,
    speed_sq: float,
    drag_area: float,
) -> float:
    """Numba-optimized quadratic drag: 0.5 * rho * v^2 * (Cd*A)."""
    return 0.5 * density * speed_sq * drag_area


# =============================================================================
# Force Terms
# =============================================================================


@beartype
def lander_mass(fuel: float | int, vehicle: LanderProperties) -> float:
    """Current lander mass for a fuel fraction [kg]."""
    return vehicle.mass(fuel)


@beartype
def drag_area(parachute_status: ParachuteStatus, vehicle: LanderProperties) -> float:
    """Combined Cd*A of the body and, when deployed, the parachute [m^2]."""
    area = vehicle.drag_coef_lander * vehicle.body_area
    if parachute_status is ParachuteStatus.DEPLOYED:
        area += vehicle.drag_coef_chute * vehicle.chute_area
    return area


@beartype
def drag_force(
    position: NDArray[np.float64],
    velocity: NDArray[np.float64],
    parachute_status: ParachuteStatus,
    constants: SimConstants = DEFAULT_CONSTANTS,
) -> NDArray[np.float64]:
    """Aerodynamic drag opposing the velocity [N].

    Returns the zero vector when the lander is at rest.
    """
    speed_sq = float(np.dot(velocity, velocity))
    if speed_sq == 0.0:
        return np.zeros(3)

    rho = atmospheric_density(position, constants.planet)
    magnitude = _quadratic_drag_magnitude(
        rho,
        speed_sq,
        drag_area(parachute_status, constants.vehicle),
    )

    return -magnitude * velocity / np.sqrt(speed_sq)


@beartype
def thrust_force(
    state: SimulationState,
    constants: SimConstants = DEFAULT_CONSTANTS,
) -> NDArray[np.float64]:
    """Engine thrust for the current throttle and orientation [N].

    An empty tank produces no thrust regardless of throttle.
    """
    if state.fuel <= 0.0:
        return np.zeros(3)
    return thrust_in_world_frame(state.throttle, state.orientation, constants.max_thrust)


# =============================================================================
# Force Model
# =============================================================================


@beartype
def compute_forces(
    state: SimulationState,
    constants: SimConstants = DEFAULT_CONSTANTS,
) -> ForceBreakdown:
    """Evaluate every force term and the resulting acceleration.

    Args:
        state: Current lander state (not modified)
        constants: Planet and vehicle constants

    Returns:
        Individual force terms, net force, mass and acceleration

    Raises:
        ValueError: If the lander is at the planet centre
    """
    mass = lander_mass(state.fuel, constants.vehicle)

    gravity = gravity_force(state.position, mass, constants.planet)
    thrust = thrust_force(state, constants)
    drag = drag_force(state.position, state.velocity, state.parachute_status, constants)

    net = gravity + thrust + drag

    return ForceBreakdown(
        gravity=gravity,
        thrust=thrust,
        drag=drag,
        net=net,
        mass=mass,
        acceleration=net / mass,
    )


@beartype
def acceleration(
    state: SimulationState,
    constants: SimConstants = DEFAULT_CONSTANTS,
) -> NDArray[np.float64]:
    """Net acceleration at the current state [m/s^2]."""
    return compute_forces(state, constants).acceleration
