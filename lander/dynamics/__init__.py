"""Dynamics module for lander translational motion.

This module provides the state record, the force model, the fixed-step
integrators and the attitude kinematics used to point the engine.

Example:
    >>> from lander.dynamics import SimulationState, compute_forces, integrate_step
    >>> import numpy as np
    >>>
    >>> state = SimulationState(
    ...     position=np.array([0.0, -3396000.0, 0.0]),
    ...     velocity=np.zeros(3),
    ...     orientation=np.zeros(3),
    ...     dt=0.1,
    ... )
    >>> forces = compute_forces(state)
"""

from lander.dynamics.attitude import (
    dcm_to_euler_xyz,
    euler_xyz_to_dcm,
    stabilize,
    stabilized_orientation,
    thrust_direction,
    thrust_in_world_frame,
)
from lander.dynamics.forces import (
    ForceBreakdown,
    acceleration,
    compute_forces,
    drag_area,
    drag_force,
    lander_mass,
    thrust_force,
)
from lander.dynamics.integrators import (
    IntegrationMethod,
    IntegrationPhase,
    StepResult,
    bootstrap_step,
    euler_step,
    integrate_step,
    integration_phase,
    leapfrog_step,
)
from lander.dynamics.state import (
    SimulationState,
)

__all__ = [
    # State
    "SimulationState",
    # Attitude
    "euler_xyz_to_dcm",
    "dcm_to_euler_xyz",
    "thrust_direction",
    "thrust_in_world_frame",
    "stabilized_orientation",
    "stabilize",
    # Forces
    "ForceBreakdown",
    "compute_forces",
    "acceleration",
    "drag_area",
    "drag_force",
    "lander_mass",
    "thrust_force",
    # Integration
    "IntegrationMethod",
    "IntegrationPhase",
    "StepResult",
    "integration_phase",
    "euler_step",
    "bootstrap_step",
    "leapfrog_step",
    "integrate_step",
]
