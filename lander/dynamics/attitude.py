"""Lander attitude kinematics.

Orientation is stored as xyz Euler angles in degrees. The body-to-world
rotation applies the x rotation outermost:

    R = Rx(a) @ Ry(b) @ Rz(c)

The engine fires along body +Z, so the thrust direction in the world frame
is the third column of R. Attitude stabilization points body +Z radially
outward, which keeps the lander base facing the planet centre.

Example:
    >>> from lander.dynamics.attitude import thrust_in_world_frame, stabilize
    >>>
    >>> thrust = thrust_in_world_frame(0.5, orientation, max_thrust=5000.0)
    >>> orientation = stabilize(orientation, position)
"""

import numpy as np
from beartype import beartype
from numpy.typing import NDArray

# Below this norm the first choice of perpendicular axis is degenerate
_SMALL_NUM = 1e-7


# =============================================================================
# Euler Angle Utilities
# =============================================================================


@beartype
def euler_xyz_to_dcm(orientation: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert xyz Euler angles to the body-to-world rotation matrix.

    Args:
        orientation: [a, b, c] rotations about x, y, z [deg]

    Returns:
        3x3 DCM transforming body-frame vectors into the world frame
    """
    a, b, c = np.radians(orientation)
    ca, sa = np.cos(a), np.sin(a)
    cb, sb = np.cos(b), np.sin(b)
    cc, sc = np.cos(c), np.sin(c)

    rx = np.array([
        [1.0, 0.0, 0.0],
        [0.0, ca, -sa],
        [0.0, sa, ca],
    ])
    ry = np.array([
        [cb, 0.0, sb],
        [0.0, 1.0, 0.0],
        [-sb, 0.0, cb],
    ])
    rz = np.array([
        [cc, -sc, 0.0],
        [sc, cc, 0.0],
        [0.0, 0.0, 1.0],
    ])

    return rx @ ry @ rz


@beartype
def dcm_to_euler_xyz(dcm: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert a body-to-world rotation matrix to xyz Euler angles.

    At gimbal lock (b = +/-90 deg) the z rotation is set to zero and the
    remaining freedom is assigned to x.

    Returns:
        [a, b, c] [deg]
    """
    sb = float(np.clip(dcm[0, 2], -1.0, 1.0))
    b = np.arcsin(sb)

    if abs(sb) < 1.0 - 1e-12:
        a = np.arctan2(-dcm[1, 2], dcm[2, 2])
        c = np.arctan2(-dcm[0, 1], dcm[0, 0])
    else:
        a = np.arctan2(dcm[2, 1], dcm[1, 1])
        c = 0.0

    return np.degrees(np.array([a, b, c], dtype=np.float64))


# =============================================================================
# Thrust
# =============================================================================


@beartype
def thrust_direction(orientation: NDArray[np.float64]) -> NDArray[np.float64]:
    """Unit vector of body +Z in the world frame."""
    return euler_xyz_to_dcm(orientation)[:, 2].copy()


@beartype
def thrust_in_world_frame(
    throttle: float | int,
    orientation: NDArray[np.float64],
    max_thrust: float | int,
) -> NDArray[np.float64]:
    """Engine thrust vector in the world frame [N].

    Args:
        throttle: Commanded throttle, clamped to [0, 1]
        orientation: xyz Euler angles [deg]
        max_thrust: Thrust at full throttle [N]
    """
    throttle = min(max(throttle, 0.0), 1.0)
    return throttle * max_thrust * thrust_direction(orientation)


# =============================================================================
# Stabilization
# =============================================================================


@beartype
def stabilized_orientation(position: NDArray[np.float64]) -> NDArray[np.float64]:
    """Orientation with body +Z along the outward radial direction.

    Body +Y is chosen perpendicular to the radial direction in the XY plane
    (or the XZ plane at the poles) and body +X completes the right-handed
    triad.
    """
    r = float(np.linalg.norm(position))
    if r == 0.0:
        raise ValueError("Radial direction is undefined at the planet centre")
    up = position / r

    left = np.array([-up[1], up[0], 0.0])
    if np.linalg.norm(left) < _SMALL_NUM:
        left = np.array([-up[2], 0.0, up[0]])
    left = left / np.linalg.norm(left)
    out = np.cross(left, up)

    dcm = np.column_stack([out, left, up])
    return dcm_to_euler_xyz(dcm)


@beartype
def stabilize(
    orientation: NDArray[np.float64],
    position: NDArray[np.float64],
) -> NDArray[np.float64]:
    """Apply 3-axis stabilization for one tick.

    `orientation` belongs to the per-tick stabilizer signature used by
    `tick`. This stabilizer snaps straight to the target attitude, so it
    never reads the current orientation; the result depends only on where
    the lander is.

    Args:
        orientation: Current xyz Euler angles [deg], unused
        position: Planet-centred position [m]

    Returns:
        Stabilized xyz Euler angles [deg]
    """
    return stabilized_orientation(position)
