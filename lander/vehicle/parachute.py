"""Parachute status and deployment safety.

The parachute moves through NOT_DEPLOYED -> DEPLOYED -> LOST and never
returns to NOT_DEPLOYED. It is lost as soon as, while deployed, its drag
load exceeds the structural limit or the lander flies too fast inside the
atmosphere.

Example:
    >>> from lander.vehicle import ParachuteStatus, safe_to_deploy_parachute
    >>>
    >>> safe = safe_to_deploy_parachute(position, velocity)
    >>> status = deploy_parachute(ParachuteStatus.NOT_DEPLOYED, safe)
"""

import logging
from enum import Enum, auto

import numpy as np
from beartype import beartype
from numpy.typing import NDArray

from lander.environment.atmosphere import atmospheric_density
from lander.environment.mars import MARS, Planet
from lander.vehicle.properties import DEFAULT_LANDER, LanderProperties

logger = logging.getLogger(__name__)


class ParachuteStatus(Enum):
    """Parachute deployment state."""

    NOT_DEPLOYED = auto()
    DEPLOYED = auto()
    LOST = auto()


@beartype
def parachute_drag(
    position: NDArray[np.float64],
    velocity: NDArray[np.float64],
    vehicle: LanderProperties = DEFAULT_LANDER,
    planet: Planet = MARS,
) -> float:
    """Drag magnitude the parachute alone would produce [N]."""
    rho = atmospheric_density(position, planet)
    speed_sq = float(np.dot(velocity, velocity))
    return 0.5 * rho * vehicle.drag_coef_chute * vehicle.chute_area * speed_sq


@beartype
def safe_to_deploy_parachute(
    position: NDArray[np.float64],
    velocity: NDArray[np.float64],
    vehicle: LanderProperties = DEFAULT_LANDER,
    planet: Planet = MARS,
) -> bool:
    """Check whether the parachute would survive at this position and velocity.

    Fails when the parachute drag exceeds the structural limit, or when the
    speed exceeds the limit below the exosphere.
    """
    if parachute_drag(position, velocity, vehicle, planet) > vehicle.max_parachute_drag:
        return False

    altitude = float(np.linalg.norm(position)) - planet.radius
    speed = float(np.linalg.norm(velocity))
    if speed > vehicle.max_parachute_speed and altitude < planet.exosphere:
        return False

    return True


@beartype
def deploy_parachute(status: ParachuteStatus, safe: bool) -> ParachuteStatus:
    """Attempt deployment.

    Only a NOT_DEPLOYED parachute can be deployed, and only when safe.
    Any other request leaves the status unchanged.
    """
    if status is not ParachuteStatus.NOT_DEPLOYED:
        return status
    if not safe:
        logger.debug("Parachute deployment refused: unsafe drag or speed")
        return status
    logger.info("Parachute deployed")
    return ParachuteStatus.DEPLOYED


@beartype
def update_parachute_status(status: ParachuteStatus, safe: bool) -> ParachuteStatus:
    """Advance the status after a tick: a deployed parachute is lost when unsafe."""
    if status is ParachuteStatus.DEPLOYED and not safe:
        logger.info("Parachute lost: drag or speed limit exceeded")
        return ParachuteStatus.LOST
    return status
