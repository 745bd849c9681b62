"""Control algorithms for the Mars lander.

Provides the proportional throttle autopilot for powered descent.
"""

from lander.gnc.control.autopilot import (
    Autopilot,
    AutopilotGains,
    autopilot_throttle,
    descent_error,
    radial_velocity,
    throttle_from_output,
)

__all__ = [
    "Autopilot",
    "AutopilotGains",
    "autopilot_throttle",
    "descent_error",
    "radial_velocity",
    "throttle_from_output",
]
