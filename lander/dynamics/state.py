"""Lander state record.

The state contains:
- Position (3): [x, y, z] in the planet-centred frame [m]
- Velocity (3): [vx, vy, vz] [m/s]
- Orientation (3): xyz Euler angles of the lander body [deg]
- Fuel fraction, throttle, parachute status
- Simulation time and the fixed time step
- Autopilot / attitude-stabilization flags
- Integration method and the one-step position history it owns

The record is mutable and passed explicitly to every tick, so independent
simulations never share state.
"""

from dataclasses import dataclass

import numpy as np
from beartype import beartype
from numpy.typing import NDArray

from lander.dynamics.integrators import IntegrationMethod, IntegrationPhase, integration_phase
from lander.vehicle.parachute import ParachuteStatus


@beartype
@dataclass
class SimulationState:
    """Mutable state of one lander simulation.

    Attributes:
        position: [x, y, z] planet-centred position [m]; magnitude must be non-zero
        velocity: [vx, vy, vz] velocity [m/s]
        orientation: xyz Euler angles [deg]
        dt: fixed time step [s]
        fuel: fuel fraction [0-1]; not clamped here
        throttle: engine throttle [0-1]
        parachute_status: parachute deployment state
        time: simulation time [s]; 0 identifies the first tick
        autopilot_enabled: recompute throttle after each tick
        stabilized_attitude: keep the lander base facing the planet
        integration_method: integration policy for the whole run
        previous_position: position one step back, None until the first tick completes
    """
    position: NDArray[np.float64]
    velocity: NDArray[np.float64]
    orientation: NDArray[np.float64]
    dt: float | int
    fuel: float | int = 1.0
    throttle: float | int = 0.0
    parachute_status: ParachuteStatus = ParachuteStatus.NOT_DEPLOYED
    time: float | int = 0.0
    autopilot_enabled: bool = False
    stabilized_attitude: bool = False
    integration_method: IntegrationMethod = IntegrationMethod.BOOTSTRAPPED_LEAPFROG
    previous_position: NDArray[np.float64] | None = None

    def __post_init__(self) -> None:
        """Validate vectors and time step."""
        self.dt = float(self.dt)
        self.fuel = float(self.fuel)
        self.throttle = float(self.throttle)
        self.time = float(self.time)
        self.position = np.asarray(self.position, dtype=np.float64)
        self.velocity = np.asarray(self.velocity, dtype=np.float64)
        self.orientation = np.asarray(self.orientation, dtype=np.float64)

        if self.position.shape != (3,):
            raise ValueError(f"Position must be shape (3,), got {self.position.shape}")
        if self.velocity.shape != (3,):
            raise ValueError(f"Velocity must be shape (3,), got {self.velocity.shape}")
        if self.orientation.shape != (3,):
            raise ValueError(f"Orientation must be shape (3,), got {self.orientation.shape}")
        if self.previous_position is not None:
            self.previous_position = np.asarray(self.previous_position, dtype=np.float64)
            if self.previous_position.shape != (3,):
                raise ValueError(
                    f"Previous position must be shape (3,), got {self.previous_position.shape}"
                )
        if self.dt <= 0:
            raise ValueError(f"Time step must be positive, got {self.dt}")

    def copy(self) -> "SimulationState":
        """Create a copy of this state."""
        return SimulationState(
            position=self.position.copy(),
            velocity=self.velocity.copy(),
            orientation=self.orientation.copy(),
            dt=self.dt,
            fuel=self.fuel,
            throttle=self.throttle,
            parachute_status=self.parachute_status,
            time=self.time,
            autopilot_enabled=self.autopilot_enabled,
            stabilized_attitude=self.stabilized_attitude,
            integration_method=self.integration_method,
            previous_position=(
                None if self.previous_position is None else self.previous_position.copy()
            ),
        )

    @property
    def integration_phase(self) -> IntegrationPhase:
        """BOOTSTRAP on the first tick, STEADY once a previous position exists.

        Only meaningful for BOOTSTRAPPED_LEAPFROG; EULER keeps no history.
        """
        return integration_phase(self.time, self.previous_position)

    @property
    def radius(self) -> float:
        """Distance from the planet centre [m]."""
        return float(np.linalg.norm(self.position))

    @property
    def speed(self) -> float:
        """Speed magnitude [m/s]."""
        return float(np.linalg.norm(self.velocity))

    def altitude(self, planet_radius: float | int) -> float:
        """Height above a spherical surface of the given radius [m]."""
        return self.radius - planet_radius
