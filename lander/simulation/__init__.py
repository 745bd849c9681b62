"""Simulation module for the Mars lander.

Provides the tick function, the scenario table and a host-side simulator.

Example:
    >>> from lander.simulation import initialize_scenario, tick
    >>>
    >>> state = initialize_scenario(0)
    >>> for _ in range(1000):
    ...     tick(state)
"""

from lander.simulation.scenarios import (
    SCENARIOS,
    ScenarioPreset,
    UnsupportedScenarioError,
    get_scenario,
    initialize_scenario,
    list_scenarios,
)
from lander.simulation.simulator import (
    SimConfig,
    Simulator,
    Touchdown,
    check_touchdown,
    ground_speed,
    tick,
)

__all__ = [
    # Scenarios
    "SCENARIOS",
    "ScenarioPreset",
    "UnsupportedScenarioError",
    "get_scenario",
    "initialize_scenario",
    "list_scenarios",
    # Simulation
    "SimConfig",
    "Simulator",
    "Touchdown",
    "check_touchdown",
    "ground_speed",
    "tick",
]
