"""GNC (Guidance, Navigation, Control) module for the Mars lander.

Example:
    >>> from lander.gnc.control import Autopilot
    >>>
    >>> pilot = Autopilot()
    >>> throttle = pilot.update(position, velocity)
"""

from lander.gnc.control import (
    Autopilot,
    AutopilotGains,
)

__all__ = [
    "Autopilot",
    "AutopilotGains",
]
