"""Preset initial conditions.

Ten scenario slots are available; 0-5 are populated and 6-9 are reserved.
Selecting a scenario builds a fresh SimulationState, which also resets the
integrator to its BOOTSTRAP phase.

Example:
    >>> from lander.simulation.scenarios import initialize_scenario, list_scenarios
    >>>
    >>> for index, description in list_scenarios():
    ...     print(index, description)
    >>> state = initialize_scenario(1)
"""

import logging
from dataclasses import dataclass

import numpy as np
from beartype import beartype

from lander.dynamics.integrators import IntegrationMethod
from lander.dynamics.state import SimulationState
from lander.environment.mars import EXOSPHERE, MARS_RADIUS
from lander.vehicle.parachute import ParachuteStatus
from lander.vehicle.properties import LANDER_SIZE

logger = logging.getLogger(__name__)

SCENARIO_SLOTS = 10


class UnsupportedScenarioError(ValueError):
    """Raised when a scenario slot has no preset."""


@beartype
@dataclass(frozen=True)
class ScenarioPreset:
    """Initial conditions for one scenario.

    Attributes:
        position: Planet-centred position [m]
        velocity: Velocity [m/s]
        orientation: xyz Euler angles [deg]
        dt: Time step [s]
        parachute_status: Initial parachute state
        stabilized_attitude: Keep the base facing the planet
        autopilot_enabled: Fly with the throttle autopilot
        description: Short human-readable summary
    """
    position: tuple[float, float, float]
    velocity: tuple[float, float, float]
    orientation: tuple[float, float, float]
    dt: float | int
    parachute_status: ParachuteStatus
    stabilized_attitude: bool
    autopilot_enabled: bool
    description: str


SCENARIOS: tuple[ScenarioPreset | None, ...] = (
    ScenarioPreset(
        position=(1.2 * MARS_RADIUS, 0.0, 0.0),
        velocity=(0.0, -3247.087385863725, 0.0),
        orientation=(0.0, 90.0, 0.0),
        dt=0.1,
        parachute_status=ParachuteStatus.NOT_DEPLOYED,
        stabilized_attitude=False,
        autopilot_enabled=False,
        description="circular orbit",
    ),
    ScenarioPreset(
        position=(0.0, -(MARS_RADIUS + 10000.0), 0.0),
        velocity=(0.0, 0.0, 0.0),
        orientation=(0.0, 0.0, 90.0),
        dt=0.1,
        parachute_status=ParachuteStatus.NOT_DEPLOYED,
        stabilized_attitude=True,
        autopilot_enabled=False,
        description="descent from 10km",
    ),
    ScenarioPreset(
        position=(0.0, 0.0, 1.2 * MARS_RADIUS),
        velocity=(3500.0, 0.0, 0.0),
        orientation=(0.0, 0.0, 90.0),
        dt=0.1,
        parachute_status=ParachuteStatus.NOT_DEPLOYED,
        stabilized_attitude=False,
        autopilot_enabled=False,
        description="elliptical orbit, thrust changes orbital plane",
    ),
    ScenarioPreset(
        position=(0.0, 0.0, MARS_RADIUS + LANDER_SIZE / 2.0),
        velocity=(0.0, 0.0, 5027.0),
        orientation=(0.0, 0.0, 0.0),
        dt=0.1,
        parachute_status=ParachuteStatus.NOT_DEPLOYED,
        stabilized_attitude=False,
        autopilot_enabled=False,
        description="polar launch at escape velocity (but drag prevents escape)",
    ),
    ScenarioPreset(
        position=(0.0, 0.0, MARS_RADIUS + 100000.0),
        velocity=(4000.0, 0.0, 0.0),
        orientation=(0.0, 90.0, 0.0),
        dt=0.1,
        parachute_status=ParachuteStatus.NOT_DEPLOYED,
        stabilized_attitude=False,
        autopilot_enabled=False,
        description="elliptical orbit that clips the atmosphere and decays",
    ),
    ScenarioPreset(
        position=(0.0, -(MARS_RADIUS + EXOSPHERE), 0.0),
        velocity=(0.0, 0.0, 0.0),
        orientation=(0.0, 0.0, 90.0),
        dt=0.1,
        parachute_status=ParachuteStatus.NOT_DEPLOYED,
        stabilized_attitude=True,
        autopilot_enabled=False,
        description="descent from 200km",
    ),
    None,
    None,
    None,
    None,
)


@beartype
def get_scenario(index: int) -> ScenarioPreset:
    """Look up a preset by slot index.

    Raises:
        UnsupportedScenarioError: If the slot is out of range or unpopulated
    """
    if not 0 <= index < len(SCENARIOS):
        raise UnsupportedScenarioError(
            f"Scenario index must be in [0, {len(SCENARIOS) - 1}], got {index}"
        )
    preset = SCENARIOS[index]
    if preset is None:
        raise UnsupportedScenarioError(f"Scenario {index} is reserved and has no preset")
    return preset


@beartype
def list_scenarios() -> list[tuple[int, str]]:
    """Populated scenario slots as (index, description) pairs."""
    return [
        (index, preset.description)
        for index, preset in enumerate(SCENARIOS)
        if preset is not None
    ]


@beartype
def initialize_scenario(
    index: int,
    method: IntegrationMethod = IntegrationMethod.BOOTSTRAPPED_LEAPFROG,
) -> SimulationState:
    """Build a fresh state from a preset.

    Fuel starts full, the throttle at zero and the clock at zero, with no
    position history, so the first tick takes the BOOTSTRAP path.

    Args:
        index: Scenario slot
        method: Integration policy for the whole run

    Returns:
        New simulation state
    """
    preset = get_scenario(index)
    logger.info("Initializing scenario %d: %s (%s)", index, preset.description, method.name)

    return SimulationState(
        position=np.array(preset.position, dtype=np.float64),
        velocity=np.array(preset.velocity, dtype=np.float64),
        orientation=np.array(preset.orientation, dtype=np.float64),
        dt=preset.dt,
        fuel=1.0,
        throttle=0.0,
        parachute_status=preset.parachute_status,
        time=0.0,
        autopilot_enabled=preset.autopilot_enabled,
        stabilized_attitude=preset.stabilized_attitude,
        integration_method=method,
        previous_position=None,
    )
