"""Unit tests for attitude kinematics - Euler angles, thrust direction, stabilization."""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from lander.dynamics.attitude import (
    dcm_to_euler_xyz,
    euler_xyz_to_dcm,
    stabilize,
    stabilized_orientation,
    thrust_direction,
    thrust_in_world_frame,
)
from lander.environment.mars import MARS_RADIUS


class TestEulerAngles:
    """Test xyz Euler angle conversions."""

    def test_identity(self):
        """Zero angles give the identity rotation."""
        assert_allclose(euler_xyz_to_dcm(np.zeros(3)), np.eye(3), atol=1e-15)

    def test_proper_rotation(self):
        """The DCM is orthonormal with determinant +1."""
        dcm = euler_xyz_to_dcm(np.array([30.0, -45.0, 120.0]))
        assert_allclose(dcm @ dcm.T, np.eye(3), atol=1e-12)
        assert_allclose(np.linalg.det(dcm), 1.0, atol=1e-12)

    def test_roundtrip(self):
        """Angles survive conversion to DCM and back away from gimbal lock."""
        angles = np.array([25.0, -40.0, 170.0])
        recovered = dcm_to_euler_xyz(euler_xyz_to_dcm(angles))
        assert_allclose(recovered, angles, atol=1e-9)

    def test_gimbal_lock_preserves_rotation(self):
        """At b = 90 deg the recovered angles give the same rotation."""
        dcm = euler_xyz_to_dcm(np.array([10.0, 90.0, 35.0]))
        recovered = dcm_to_euler_xyz(dcm)
        assert_allclose(euler_xyz_to_dcm(recovered), dcm, atol=1e-9)


class TestThrust:
    """Test engine thrust in the world frame."""

    def test_default_orientation_fires_along_z(self):
        """With zero angles thrust is along world +Z."""
        thrust = thrust_in_world_frame(1.0, np.zeros(3), 1000.0)
        assert_allclose(thrust, [0.0, 0.0, 1000.0], atol=1e-9)

    def test_pitched_orientation_fires_along_x(self):
        """Rotating 90 deg about y points body +Z along world +X."""
        thrust = thrust_in_world_frame(0.5, np.array([0.0, 90.0, 0.0]), 1000.0)
        assert_allclose(thrust, [500.0, 0.0, 0.0], atol=1e-9)

    def test_throttle_clamped(self):
        """Throttle outside [0, 1] is clamped."""
        orientation = np.array([12.0, 34.0, 56.0])
        assert_allclose(thrust_in_world_frame(2.0, orientation, 10.0),
                        thrust_in_world_frame(1.0, orientation, 10.0))
        assert_allclose(thrust_in_world_frame(-1.0, orientation, 10.0), np.zeros(3))

    def test_integer_throttle_and_thrust(self):
        """Integer throttle and max thrust are accepted."""
        assert_allclose(thrust_in_world_frame(1, np.zeros(3), 1000),
                        [0.0, 0.0, 1000.0], atol=1e-9)

    def test_direction_is_unit(self):
        """The thrust axis is a unit vector for any orientation."""
        direction = thrust_direction(np.array([-70.0, 15.0, 200.0]))
        assert_allclose(np.linalg.norm(direction), 1.0, atol=1e-12)


class TestStabilization:
    """Test radial attitude stabilization."""

    @pytest.mark.parametrize("position", [
        [0.0, -(MARS_RADIUS + 10000.0), 0.0],
        [1.2 * MARS_RADIUS, 0.0, 0.0],
        [0.0, 0.0, MARS_RADIUS + 500.0],
        [0.0, 0.0, -MARS_RADIUS],
        [1.0e6, -2.0e6, 3.0e6],
    ])
    def test_thrust_points_radially_outward(self, position):
        """After stabilization the engine pushes straight up."""
        position = np.array(position)
        orientation = stabilized_orientation(position)

        assert_allclose(
            thrust_direction(orientation),
            position / np.linalg.norm(position),
            atol=1e-9,
        )

    def test_stabilize_replaces_orientation(self):
        """The previous orientation has no influence."""
        position = np.array([0.0, -(MARS_RADIUS + 10000.0), 0.0])
        a = stabilize(np.array([0.0, 0.0, 90.0]), position)
        b = stabilize(np.array([45.0, -10.0, 3.0]), position)
        assert_allclose(a, b)

    def test_zero_position_rejected(self):
        """The radial direction is undefined at the planet centre."""
        with pytest.raises(ValueError):
            stabilized_orientation(np.zeros(3))
