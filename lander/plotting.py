"""Visualization of lander flights.

Plots built from a `FlightLog`, using matplotlib with the same palette
for every figure.
"""

import matplotlib.pyplot as plt
from beartype import beartype
from matplotlib.figure import Figure

from lander.telemetry import FlightLog

COLORS = {
    "primary": "#2E86AB",
    "secondary": "#A23B72",
    "accent": "#F18F01",
    "text": "#333333",
}

DEFAULT_FIGSIZE = (12, 8)


def _setup_style() -> None:
    """Configure matplotlib style for consistent appearance."""
    plt.rcParams.update(
        {
            "font.family": "sans-serif",
            "font.size": 11,
            "axes.titlesize": 13,
            "axes.labelsize": 11,
            "axes.edgecolor": COLORS["text"],
            "axes.labelcolor": COLORS["text"],
            "legend.fontsize": 10,
            "grid.alpha": 0.5,
        }
    )


@beartype
def plot_descent(
    log: FlightLog,
    figsize: tuple[float, float] = DEFAULT_FIGSIZE,
    title: str | None = None,
) -> Figure:
    """Plot a descent profile.

    Four panels share the time axis: altitude, descent rate, throttle and
    fuel fraction.

    Args:
        log: Recorded flight
        figsize: Figure size (width, height) in inches
        title: Optional custom title

    Returns:
        matplotlib Figure
    """
    _setup_style()

    time = log.column("time")
    fig, axes = plt.subplots(2, 2, figsize=figsize, sharex=True)
    ax_alt, ax_rate, ax_throttle, ax_fuel = axes.flat

    ax_alt.plot(time, log.column("altitude") / 1000.0, color=COLORS["primary"], linewidth=2)
    ax_alt.set_ylabel("Altitude [km]")

    ax_rate.plot(time, log.column("descent_rate"), color=COLORS["secondary"], linewidth=2)
    ax_rate.set_ylabel("Descent rate [m/s]")

    ax_throttle.plot(time, log.column("throttle"), color=COLORS["accent"], linewidth=1.5)
    ax_throttle.set_ylabel("Throttle")
    ax_throttle.set_ylim(-0.05, 1.05)

    ax_fuel.plot(time, log.column("fuel") * 100.0, color=COLORS["primary"], linewidth=2)
    ax_fuel.set_ylabel("Fuel [%]")

    for ax in axes.flat:
        ax.grid(True)
    for ax in axes[1]:
        ax.set_xlabel("Time [s]")

    fig.suptitle(title or "Descent Profile")
    fig.tight_layout()
    return fig
