"""Lander - Fixed-step flight simulation of a Mars lander.

This package simulates the translational motion of a lander under gravity,
atmospheric and parachute drag, and throttled thrust, with an optional
proportional autopilot for soft landings.

Example:
    >>> from lander import Simulator
    >>>
    >>> sim = Simulator(scenario=1)
    >>> sim.state.autopilot_enabled = True
    >>> sim.run(1000.0)
    >>> print(f"Touchdown: {sim.touchdown}")
"""

__version__ = "0.1.0"

from lander.config import (
    DEFAULT_CONSTANTS,
    SimConstants,
)
from lander.dynamics import (
    ForceBreakdown,
    IntegrationMethod,
    IntegrationPhase,
    SimulationState,
    compute_forces,
    integrate_step,
)
from lander.environment import (
    MARS,
    Atmosphere,
    Planet,
)
from lander.gnc import (
    Autopilot,
    AutopilotGains,
)
from lander.orbital import (
    eccentricity,
    orbital_period,
    specific_angular_momentum,
    specific_energy,
)
from lander.simulation import (
    SCENARIOS,
    ScenarioPreset,
    SimConfig,
    Simulator,
    Touchdown,
    UnsupportedScenarioError,
    initialize_scenario,
    list_scenarios,
    tick,
)
from lander.telemetry import (
    FlightLog,
    record_flight,
)
from lander.vehicle import (
    LanderProperties,
    ParachuteStatus,
)

__all__ = [
    # Version
    "__version__",
    # Constants
    "DEFAULT_CONSTANTS",
    "SimConstants",
    "MARS",
    "Planet",
    "Atmosphere",
    "LanderProperties",
    # State and dynamics
    "SimulationState",
    "ParachuteStatus",
    "ForceBreakdown",
    "compute_forces",
    "IntegrationMethod",
    "IntegrationPhase",
    "integrate_step",
    # Control
    "Autopilot",
    "AutopilotGains",
    # Simulation
    "SCENARIOS",
    "ScenarioPreset",
    "UnsupportedScenarioError",
    "initialize_scenario",
    "list_scenarios",
    "tick",
    "SimConfig",
    "Simulator",
    "Touchdown",
    # Telemetry
    "FlightLog",
    "record_flight",
    # Orbital diagnostics
    "specific_energy",
    "specific_angular_momentum",
    "eccentricity",
    "orbital_period",
]
