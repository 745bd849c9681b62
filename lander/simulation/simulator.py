"""Fixed-step lander simulation.

One tick runs, in order:
    1. Force model: acceleration from the current state and throttle
    2. Integrator: advance position and velocity by dt
    3. Fuel consumption and clock advance
    4. Autopilot (if enabled): throttle for the *next* tick
    5. Attitude stabilization (if enabled)

`tick` is a plain function over an explicit state so that any number of
independent simulations can run side by side. `Simulator` is a thin host
wrapper that adds scenario selection, parachute handling and touchdown
detection.

Example:
    >>> from lander.simulation import Simulator
    >>>
    >>> sim = Simulator(scenario=1)
    >>> sim.state.autopilot_enabled = True
    >>> while sim.touchdown is None:
    ...     sim.tick()
    >>> print(f"Landed: {not sim.touchdown.crashed}")
"""

import logging
from dataclasses import dataclass, field
from typing import NamedTuple

import numpy as np
from beartype import beartype
from numpy.typing import NDArray

from lander.config import DEFAULT_CONSTANTS, SimConstants
from lander.dynamics.attitude import stabilize
from lander.dynamics.forces import compute_forces
from lander.dynamics.integrators import IntegrationMethod, IntegrationPhase, integrate_step
from lander.dynamics.state import SimulationState
from lander.gnc.control.autopilot import AutopilotGains, autopilot_throttle, radial_velocity
from lander.simulation.scenarios import initialize_scenario
from lander.vehicle.parachute import (
    ParachuteStatus,
    deploy_parachute,
    safe_to_deploy_parachute,
    update_parachute_status,
)

logger = logging.getLogger(__name__)

# =============================================================================
# Configuration
# =============================================================================


@beartype
@dataclass
class SimConfig:
    """Simulation configuration.

    Attributes:
        integration_method: Integration policy, fixed for each run
        constants: Planet and vehicle constants
        autopilot_gains: Gains used when the autopilot is enabled
    """
    integration_method: IntegrationMethod = IntegrationMethod.BOOTSTRAPPED_LEAPFROG
    constants: SimConstants = field(default_factory=lambda: DEFAULT_CONSTANTS)
    autopilot_gains: AutopilotGains = field(default_factory=AutopilotGains)


# =============================================================================
# Tick
# =============================================================================


@beartype
def tick(
    state: SimulationState,
    constants: SimConstants = DEFAULT_CONSTANTS,
    gains: AutopilotGains | None = None,
) -> SimulationState:
    """Advance the simulation by one fixed time step.

    Args:
        state: Simulation state, updated in place
        constants: Planet and vehicle constants
        gains: Autopilot gains (defaults used if None)

    Returns:
        The same state object, advanced by state.dt
    """
    forces = compute_forces(state, constants)
    phase = state.integration_phase

    if (
        state.integration_method is IntegrationMethod.BOOTSTRAPPED_LEAPFROG
        and phase is IntegrationPhase.BOOTSTRAP
    ):
        logger.debug(
            "Bootstrap step: position=%s velocity=%s acceleration=%s",
            state.position, state.velocity, forces.acceleration,
        )

    result = integrate_step(
        state.integration_method,
        state.position,
        state.velocity,
        state.previous_position,
        forces.acceleration,
        state.dt,
        phase,
    )
    state.previous_position = result.previous_position
    state.position = result.position
    state.velocity = result.velocity

    if state.fuel > 0.0:
        burned = constants.vehicle.fuel_burned(state.throttle, state.dt)
        state.fuel = max(state.fuel - burned, 0.0)
    state.time += state.dt

    if state.autopilot_enabled:
        state.throttle = autopilot_throttle(
            state.position,
            state.velocity,
            constants.planet.radius,
            gains or AutopilotGains(),
        )

    if state.stabilized_attitude:
        state.orientation = stabilize(state.orientation, state.position)

    return state


# =============================================================================
# Touchdown
# =============================================================================


class Touchdown(NamedTuple):
    """Conditions at the moment the lander reaches the surface."""
    time: float           # Simulation time [s]
    descent_rate: float   # Downward speed, positive when falling [m/s]
    ground_speed: float   # Horizontal speed over the surface [m/s]
    crashed: bool


@beartype
def ground_speed(
    position: NDArray[np.float64],
    velocity: NDArray[np.float64],
) -> float:
    """Horizontal speed over the surface [m/s].

    The surface is treated as non-rotating.
    """
    up = position / np.linalg.norm(position)
    horizontal = velocity - np.dot(velocity, up) * up
    return float(np.linalg.norm(horizontal))


@beartype
def check_touchdown(
    state: SimulationState,
    constants: SimConstants = DEFAULT_CONSTANTS,
) -> Touchdown | None:
    """Detect surface contact.

    Contact occurs when the altitude drops below half the lander size. The
    landing is a crash if either the descent rate or the ground speed is
    above the vehicle's limit.

    Returns:
        Touchdown conditions, or None while still flying
    """
    vehicle = constants.vehicle
    if state.altitude(constants.planet.radius) >= vehicle.size / 2.0:
        return None

    descent = -radial_velocity(state.position, state.velocity)
    speed = ground_speed(state.position, state.velocity)
    crashed = descent > vehicle.max_impact_descent_rate or speed > vehicle.max_impact_ground_speed

    return Touchdown(
        time=state.time,
        descent_rate=descent,
        ground_speed=speed,
        crashed=crashed,
    )


# =============================================================================
# Simulator
# =============================================================================


@beartype
class Simulator:
    """Host driver around `tick`.

    Holds one state, selects scenarios, enforces parachute limits after
    every tick and stops advancing once the lander has touched down.

    Example:
        >>> sim = Simulator(scenario=5)
        >>> sim.run(600.0)
        >>> if sim.deploy_parachute():
        ...     sim.run(300.0)
    """

    def __init__(self, scenario: int = 0, config: SimConfig | None = None) -> None:
        """Initialize simulator.

        Args:
            scenario: Preset index to start from
            config: Simulation configuration
        """
        self.config = config or SimConfig()
        self.scenario = scenario
        self.state = initialize_scenario(scenario, self.config.integration_method)
        self.touchdown: Touchdown | None = None

    @property
    def constants(self) -> SimConstants:
        """Constants used by every tick."""
        return self.config.constants

    def initialize(self, scenario: int) -> SimulationState:
        """Restart from a preset.

        Discards the current state, including the integrator's position
        history, so the next tick is a BOOTSTRAP tick.
        """
        self.scenario = scenario
        self.state = initialize_scenario(scenario, self.config.integration_method)
        self.touchdown = None
        return self.state

    def tick(self) -> SimulationState:
        """Advance one time step unless the lander is already down."""
        if self.touchdown is not None:
            return self.state

        tick(self.state, self.constants, self.config.autopilot_gains)

        self.state.parachute_status = update_parachute_status(
            self.state.parachute_status,
            self._parachute_safe(),
        )

        self.touchdown = check_touchdown(self.state, self.constants)
        if self.touchdown is not None:
            outcome = "Crashed" if self.touchdown.crashed else "Landed"
            logger.info(
                "%s at t=%.1fs: descent rate %.2f m/s, ground speed %.2f m/s",
                outcome,
                self.touchdown.time,
                self.touchdown.descent_rate,
                self.touchdown.ground_speed,
            )

        return self.state

    def run(self, duration: float | int) -> int:
        """Tick for a span of simulated time or until touchdown.

        Args:
            duration: Simulated time to advance [s]

        Returns:
            Number of ticks taken
        """
        n_steps = int(round(duration / self.state.dt))
        steps = 0
        for _ in range(n_steps):
            if self.touchdown is not None:
                break
            self.tick()
            steps += 1
        return steps

    def deploy_parachute(self) -> bool:
        """Try to deploy the parachute now.

        Returns:
            True if the parachute is deployed after the request
        """
        self.state.parachute_status = deploy_parachute(
            self.state.parachute_status,
            self._parachute_safe(),
        )
        return self.state.parachute_status is ParachuteStatus.DEPLOYED

    def set_throttle(self, throttle: float | int) -> None:
        """Manually command throttle, clamped to [0, 1]."""
        self.state.throttle = float(min(max(throttle, 0.0), 1.0))

    def get_state(self) -> SimulationState:
        """Get a copy of the current state."""
        return self.state.copy()

    @property
    def time(self) -> float:
        """Current simulation time [s]."""
        return self.state.time

    @property
    def altitude(self) -> float:
        """Current altitude [m]."""
        return self.state.altitude(self.constants.planet.radius)

    @property
    def descent_rate(self) -> float:
        """Downward speed, positive when falling [m/s]."""
        return -radial_velocity(self.state.position, self.state.velocity)

    def _parachute_safe(self) -> bool:
        return safe_to_deploy_parachute(
            self.state.position,
            self.state.velocity,
            self.constants.vehicle,
            self.constants.planet,
        )
