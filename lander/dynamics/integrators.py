"""Fixed-step translational integrators.

Two policies are available, chosen once per run:

- EULER: semi-implicit Euler every tick
    v' = v + a*dt
    r' = r + v'*dt

- BOOTSTRAPPED_LEAPFROG: position-history (Verlet) scheme. It needs the
  position one step back, which does not exist on the first tick, so the
  first tick is a single explicit step (BOOTSTRAP):
    r' = r + v*dt + 0.5*a*dt^2
    v' = v + a*dt
  and every later tick (STEADY) uses the central-difference update:
    r' = 2*r - r_prev + a*dt^2
    v' = (r' - r_prev) / (2*dt)

The STEADY scheme is time-symmetric and holds orbital energy far better
over long horizons than Euler. Its velocity is a central difference and
lags the position by one step.

Example:
    >>> from lander.dynamics.integrators import IntegrationMethod, integrate_step
    >>>
    >>> result = integrate_step(
    ...     IntegrationMethod.BOOTSTRAPPED_LEAPFROG,
    ...     position, velocity, None, acceleration, dt=0.1,
    ... )
    >>> position, velocity = result.position, result.velocity
"""

from enum import Enum, auto
from typing import NamedTuple

import numpy as np
from beartype import beartype
from numpy.typing import NDArray

# =============================================================================
# Method / Phase Enums
# =============================================================================


class IntegrationMethod(Enum):
    """Available integration policies."""

    EULER = auto()                  # Semi-implicit Euler every tick
    BOOTSTRAPPED_LEAPFROG = auto()  # One explicit step, then Verlet


class IntegrationPhase(Enum):
    """Position-history state of the integrator."""

    BOOTSTRAP = auto()  # First tick, no previous position
    STEADY = auto()     # Previous position available


class StepResult(NamedTuple):
    """Outcome of one integration step.

    previous_position is the position the next tick should treat as one
    step back, or None when the method keeps no history.
    """
    position: NDArray[np.float64]
    velocity: NDArray[np.float64]
    previous_position: NDArray[np.float64] | None


@beartype
def integration_phase(
    time: float | int,
    previous_position: NDArray[np.float64] | None,
) -> IntegrationPhase:
    """Determine the phase from the simulation time and position history."""
    if time == 0.0 or previous_position is None:
        return IntegrationPhase.BOOTSTRAP
    return IntegrationPhase.STEADY


# =============================================================================
# Step Functions
# =============================================================================


@beartype
def euler_step(
    position: NDArray[np.float64],
    velocity: NDArray[np.float64],
    acceleration: NDArray[np.float64],
    dt: float | int,
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Semi-implicit Euler step: velocity first, then position with the new velocity."""
    new_velocity = velocity + acceleration * dt
    new_position = position + new_velocity * dt
    return new_position, new_velocity


@beartype
def bootstrap_step(
    position: NDArray[np.float64],
    velocity: NDArray[np.float64],
    acceleration: NDArray[np.float64],
    dt: float | int,
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Explicit constant-acceleration step used to seed the position history."""
    new_position = position + velocity * dt + 0.5 * acceleration * dt * dt
    new_velocity = velocity + acceleration * dt
    return new_position, new_velocity


@beartype
def leapfrog_step(
    position: NDArray[np.float64],
    previous_position: NDArray[np.float64],
    acceleration: NDArray[np.float64],
    dt: float | int,
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Central-difference (Verlet) position update with central-difference velocity."""
    new_position = 2.0 * position - previous_position + acceleration * dt * dt
    new_velocity = (new_position - previous_position) / (2.0 * dt)
    return new_position, new_velocity


# =============================================================================
# Dispatch
# =============================================================================


def _euler(position, velocity, previous_position, acceleration, dt) -> StepResult:
    new_position, new_velocity = euler_step(position, velocity, acceleration, dt)
    return StepResult(new_position, new_velocity, None)


def _bootstrapped_leapfrog(position, velocity, previous_position, acceleration, dt) -> StepResult:
    if previous_position is None:
        new_position, new_velocity = bootstrap_step(position, velocity, acceleration, dt)
    else:
        new_position, new_velocity = leapfrog_step(position, previous_position, acceleration, dt)
    # The pre-step position becomes the history for the next tick
    return StepResult(new_position, new_velocity, position.copy())


_STEPPERS = {
    IntegrationMethod.EULER: _euler,
    IntegrationMethod.BOOTSTRAPPED_LEAPFROG: _bootstrapped_leapfrog,
}


@beartype
def integrate_step(
    method: IntegrationMethod,
    position: NDArray[np.float64],
    velocity: NDArray[np.float64],
    previous_position: NDArray[np.float64] | None,
    acceleration: NDArray[np.float64],
    dt: float | int,
    phase: IntegrationPhase | None = None,
) -> StepResult:
    """Advance position and velocity by one fixed step.

    Args:
        method: Integration policy for the run
        position: Current position [m]
        velocity: Current velocity [m/s]
        previous_position: Position one step back, or None before the first tick
        acceleration: Acceleration evaluated at the current state [m/s^2]
        dt: Time step [s]
        phase: Force BOOTSTRAP or STEADY; derived from previous_position if None

    Returns:
        New position, velocity and position history
    """
    if phase is IntegrationPhase.BOOTSTRAP:
        previous_position = None
    elif phase is IntegrationPhase.STEADY and previous_position is None:
        raise ValueError("STEADY phase requires a previous position")

    return _STEPPERS[method](position, velocity, previous_position, acceleration, dt)
