"""Unit tests for the proportional descent autopilot."""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from lander.environment.mars import MARS_RADIUS
from lander.gnc.control import (
    Autopilot,
    AutopilotGains,
    autopilot_throttle,
    descent_error,
    radial_velocity,
    throttle_from_output,
)

# =============================================================================
# Radial Velocity Tests
# =============================================================================


class TestRadialVelocity:
    """Test the radial component of velocity."""

    def test_falling_is_negative(self):
        """Moving toward the planet gives a negative rate."""
        position = np.array([0.0, -(MARS_RADIUS + 1000.0), 0.0])
        velocity = np.array([0.0, 50.0, 0.0])
        assert_allclose(radial_velocity(position, velocity), -50.0)

    def test_climbing_is_positive(self):
        """Moving away from the planet gives a positive rate."""
        position = np.array([0.0, 0.0, MARS_RADIUS])
        velocity = np.array([0.0, 0.0, 20.0])
        assert_allclose(radial_velocity(position, velocity), 20.0)

    def test_tangential_motion_is_zero(self):
        """Circular-orbit velocity has no radial component."""
        position = np.array([1.2 * MARS_RADIUS, 0.0, 0.0])
        velocity = np.array([0.0, -3247.0, 0.0])
        assert radial_velocity(position, velocity) == 0.0

    def test_zero_position_rejected(self):
        """The radial direction is undefined at the planet centre."""
        with pytest.raises(ValueError):
            radial_velocity(np.zeros(3), np.array([1.0, 0.0, 0.0]))


# =============================================================================
# Saturation Tests
# =============================================================================


class TestThrottleSaturation:
    """Test the three-region throttle mapping."""

    @pytest.mark.parametrize("p_out", [-0.5, -0.5000001, -3.0, -1e9])
    def test_lower_region_is_zero(self, p_out):
        """At or below -delta the engine is off."""
        assert throttle_from_output(p_out) == 0.0

    @pytest.mark.parametrize("p_out", [0.5, 0.5000001, 2.0, 1e9])
    def test_upper_region_is_one(self, p_out):
        """At or above 1 - delta the engine is at full throttle."""
        assert throttle_from_output(p_out) == 1.0

    @pytest.mark.parametrize("p_out", [-0.4999, -0.25, 0.0, 0.1, 0.4999])
    def test_linear_region(self, p_out):
        """Between the limits the throttle is delta + P exactly."""
        assert throttle_from_output(p_out) == 0.5 + p_out

    def test_output_always_in_unit_interval(self):
        """The mapping never leaves [0, 1]."""
        for p_out in np.linspace(-10.0, 10.0, 2001):
            throttle = throttle_from_output(float(p_out))
            assert 0.0 <= throttle <= 1.0

    def test_custom_delta(self):
        """The bias sets both limits of the linear region."""
        assert throttle_from_output(-0.2, delta=0.2) == 0.0
        assert throttle_from_output(0.8, delta=0.2) == 1.0
        assert throttle_from_output(0.3, delta=0.2) == 0.2 + 0.3

    @pytest.mark.parametrize("p_out, expected", [(-1, 0.0), (1, 1.0), (0, 0.5), (-7, 0.0)])
    def test_integer_output(self, p_out, expected):
        """Integer outputs map like their float values."""
        throttle = throttle_from_output(p_out)
        assert throttle == expected
        assert isinstance(throttle, float)

    def test_integer_delta(self):
        """An integer bias still yields a float throttle."""
        throttle = throttle_from_output(0, delta=1)
        assert throttle == 1.0
        assert isinstance(throttle, float)

    def test_integer_gains_stored_as_float(self):
        """Gains given as integers are stored as floats."""
        gains = AutopilotGains(kh=0, kp=1, delta=0, descent_margin=1)
        assert gains.kp == 1.0
        assert all(
            isinstance(value, float)
            for value in (gains.kh, gains.kp, gains.delta, gains.descent_margin)
        )


# =============================================================================
# Control Law Tests
# =============================================================================


class TestControlLaw:
    """Test the proportional control law end to end."""

    def test_error_formula(self):
        """e = -(0.5 + Kh*h + v_r) with Kh = 0.03."""
        h = 2000.0
        position = np.array([0.0, 0.0, MARS_RADIUS + h])
        velocity = np.array([0.0, 0.0, -40.0])

        expected = -(0.5 + 0.03 * h + (-40.0))
        assert_allclose(descent_error(position, velocity), expected, rtol=1e-9)

    def test_fast_fall_near_surface_saturates_high(self):
        """Falling far faster than the target commands full throttle."""
        position = np.array([0.0, -(MARS_RADIUS + 100.0), 0.0])
        velocity = np.array([0.0, 200.0, 0.0])
        assert autopilot_throttle(position, velocity) == 1.0

    def test_high_and_slow_saturates_low(self):
        """High altitude at rest commands the engine off."""
        position = np.array([0.0, -(MARS_RADIUS + 10000.0), 0.0])
        assert autopilot_throttle(position, np.zeros(3)) == 0.0

    def test_on_target_gives_hover_bias(self):
        """Descending exactly at the target rate gives throttle = delta."""
        h = 10.0
        target_rate = 0.5 + 0.03 * h
        position = np.array([MARS_RADIUS + h, 0.0, 0.0])
        velocity = np.array([-target_rate, 0.0, 0.0])
        assert_allclose(autopilot_throttle(position, velocity), 0.5, atol=1e-9)

    def test_linear_region_matches_gains(self):
        """In the linear region throttle = delta + Kp*e."""
        h = 10.0
        position = np.array([MARS_RADIUS + h, 0.0, 0.0])
        velocity = np.array([-1.0, 0.0, 0.0])
        e = -(0.5 + 0.03 * h - 1.0)
        assert_allclose(autopilot_throttle(position, velocity), 0.5 + 0.5 * e, rtol=1e-9)


class TestAutopilot:
    """Test the Autopilot wrapper."""

    def test_matches_function(self):
        """The wrapper gives the same throttle as the free function."""
        pilot = Autopilot()
        position = np.array([0.0, -(MARS_RADIUS + 300.0), 0.0])
        velocity = np.array([0.0, 8.0, 0.0])

        assert pilot.update(position, velocity) == autopilot_throttle(position, velocity)

    def test_stateless(self):
        """Repeated calls with the same inputs give the same output."""
        pilot = Autopilot()
        position = np.array([0.0, -(MARS_RADIUS + 50.0), 0.0])
        velocity = np.array([0.0, 2.0, 0.0])

        first = pilot.update(position, velocity)
        pilot.update(position * 1.001, velocity * 3.0)
        assert pilot.update(position, velocity) == first

    def test_custom_gains(self):
        """Gains flow through to the output."""
        gains = AutopilotGains(kh=0.0, kp=1.0, delta=0.5, descent_margin=0.0)
        pilot = Autopilot(planet_radius=MARS_RADIUS, gains=gains)
        position = np.array([MARS_RADIUS + 1000.0, 0.0, 0.0])
        velocity = np.array([-0.2, 0.0, 0.0])

        assert_allclose(pilot.output(position, velocity), 0.2, rtol=1e-9)
        assert_allclose(pilot.update(position, velocity), 0.7, rtol=1e-9)

    def test_integer_planet_radius(self):
        """An integer planet radius gives the same throttle as its float value."""
        pilot = Autopilot(planet_radius=3386000)
        position = np.array([0.0, -(MARS_RADIUS + 300.0), 0.0])
        velocity = np.array([0.0, 8.0, 0.0])

        assert pilot.planet_radius == MARS_RADIUS
        assert autopilot_throttle(position, velocity, 3386000) == pilot.update(position, velocity)
