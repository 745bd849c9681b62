"""Host-side flight telemetry.

The simulation core keeps no history beyond the integrator's previous
position. A host that wants a flight record samples the state after each
tick into a `FlightLog` and converts it to a Polars DataFrame for analysis
or export.

Example:
    >>> from lander.simulation import Simulator
    >>> from lander.telemetry import record_flight
    >>>
    >>> sim = Simulator(scenario=1)
    >>> sim.state.autopilot_enabled = True
    >>> log = record_flight(sim, 2000.0)
    >>> df = log.to_dataframe()
"""

from dataclasses import dataclass, field

import numpy as np
import polars as pl
from beartype import beartype
from numpy.typing import NDArray

from lander.dynamics.state import SimulationState
from lander.gnc.control.autopilot import radial_velocity
from lander.simulation.simulator import Simulator, ground_speed


@beartype
@dataclass
class FlightLog:
    """Sampled flight record.

    Attributes:
        planet_radius: Radius used to convert positions to altitude [m]
        samples: One row per recorded state
    """
    planet_radius: float | int
    samples: list[dict[str, float | str]] = field(default_factory=list)

    def record(self, state: SimulationState) -> None:
        """Append a snapshot of the state."""
        self.samples.append({
            "time": state.time,
            "altitude": state.altitude(self.planet_radius),
            "descent_rate": -radial_velocity(state.position, state.velocity),
            "ground_speed": ground_speed(state.position, state.velocity),
            "speed": state.speed,
            "throttle": state.throttle,
            "fuel": state.fuel,
            "parachute": state.parachute_status.name,
        })

    def __len__(self) -> int:
        return len(self.samples)

    def column(self, name: str) -> NDArray[np.float64]:
        """Numeric column as an array."""
        return np.array([sample[name] for sample in self.samples], dtype=np.float64)

    def to_dataframe(self) -> pl.DataFrame:
        """Convert to Polars DataFrame."""
        if not self.samples:
            return pl.DataFrame(schema={
                "time": pl.Float64,
                "altitude": pl.Float64,
                "descent_rate": pl.Float64,
                "ground_speed": pl.Float64,
                "speed": pl.Float64,
                "throttle": pl.Float64,
                "fuel": pl.Float64,
                "parachute": pl.String,
            })
        return pl.DataFrame(self.samples)


@beartype
def record_flight(sim: Simulator, duration: float | int, every: int = 1) -> FlightLog:
    """Fly a simulator for a span of time, sampling every n-th tick.

    The initial state and the final state are always recorded.

    Args:
        sim: Simulator to advance
        duration: Simulated time to advance [s]
        every: Sampling interval in ticks

    Returns:
        Flight log of the sampled states
    """
    if every < 1:
        raise ValueError(f"Sampling interval must be at least 1 tick, got {every}")

    log = FlightLog(planet_radius=sim.constants.planet.radius)
    log.record(sim.state)

    n_steps = int(round(duration / sim.state.dt))
    for step in range(1, n_steps + 1):
        if sim.touchdown is not None:
            break
        sim.tick()
        if step % every == 0:
            log.record(sim.state)

    if log.samples[-1]["time"] != sim.state.time:
        log.record(sim.state)

    return log
