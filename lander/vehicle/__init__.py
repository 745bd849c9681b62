"""Vehicle models for the Mars lander.

Provides the mass model, drag reference geometry and parachute logic.

Example:
    >>> from lander.vehicle import LanderProperties, ParachuteStatus
    >>>
    >>> lander = LanderProperties()
    >>> mass = lander.mass(fuel=0.5)
"""

from lander.vehicle.parachute import (
    ParachuteStatus,
    deploy_parachute,
    parachute_drag,
    safe_to_deploy_parachute,
    update_parachute_status,
)
from lander.vehicle.properties import (
    DEFAULT_LANDER,
    LanderProperties,
)

__all__ = [
    "DEFAULT_LANDER",
    "LanderProperties",
    # Parachute
    "ParachuteStatus",
    "deploy_parachute",
    "parachute_drag",
    "safe_to_deploy_parachute",
    "update_parachute_status",
]
