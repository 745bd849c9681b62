#!/usr/bin/env python
"""Autopilot descent example.

Drops the lander from rest at 10 km (scenario 1) with the proportional
throttle autopilot engaged and reports the touchdown conditions. The same
descent is then flown with the Euler integrator for comparison, and both
descent profiles are written to outputs/autopilot_descent/.
"""

import logging
from pathlib import Path

import matplotlib.pyplot as plt

from lander import IntegrationMethod, SimConfig, Simulator
from lander.plotting import plot_descent
from lander.telemetry import FlightLog, record_flight

OUTPUT_DIR = Path("outputs") / "autopilot_descent"


def fly(method: IntegrationMethod) -> tuple[Simulator, FlightLog]:
    """Fly scenario 1 under autopilot until touchdown."""
    sim = Simulator(scenario=1, config=SimConfig(integration_method=method))
    sim.state.autopilot_enabled = True

    log = record_flight(sim, 2000.0, every=10)
    return sim, log


def main() -> None:
    """Run the autopilot descent example."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)

    print("=" * 60)
    print("AUTOPILOT DESCENT FROM 10 KM")
    print("=" * 60)

    for method in IntegrationMethod:
        sim, log = fly(method)
        touchdown = sim.touchdown

        print(f"\n{method.name}")
        if touchdown is None:
            print(f"   No touchdown after {sim.time:.1f} s (altitude {sim.altitude:.1f} m)")
        else:
            print(f"   Touchdown time: {touchdown.time:.1f} s")
            print(f"   Descent rate:   {touchdown.descent_rate:.3f} m/s")
            print(f"   Ground speed:   {touchdown.ground_speed:.3f} m/s")
            print(f"   Fuel remaining: {sim.state.fuel * 100:.1f} %")
            print(f"   Result:         {'CRASHED' if touchdown.crashed else 'LANDED'}")

        name = method.name.lower()
        log.to_dataframe().write_csv(OUTPUT_DIR / f"{name}.csv")
        fig = plot_descent(log, title=f"Autopilot descent ({method.name})")
        fig.savefig(OUTPUT_DIR / f"{name}.png", dpi=150, bbox_inches="tight")
        plt.close(fig)

    print(f"\nOutputs saved to: {OUTPUT_DIR}")


if __name__ == "__main__":
    main()
