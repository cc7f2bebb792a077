"""Unit tests for aircraft properties and the equations of motion."""

import numpy as np
import pytest
from beartype.roar import BeartypeCallHintViolation
from numpy.testing import assert_allclose

from sixdof.dynamics.aircraft import AircraftProperties, f16, light_fixed_wing
from sixdof.dynamics.equations import (
    AircraftDynamics,
    DynamicsConfig,
    body_accelerations,
    equations_of_motion,
    euler_angle_rates,
)
from sixdof.dynamics.rotation import BodyNedDCM
from sixdof.dynamics.state import State
from sixdof.environment import EnvironmentConfig, GravityModel

G = 9.80665


@pytest.fixture
def aircraft():
    return light_fixed_wing()


@pytest.fixture
def env():
    return EnvironmentConfig().create_environment()


def _state(velocity=(50.0, 0.0, 0.0), attitude=(0.0, 0.0, 0.0), rates=(0.0, 0.0, 0.0)):
    return State(
        position=np.array([0.0, 0.0, -1000.0]),
        velocity=np.array(velocity),
        attitude=np.array(attitude),
        angular_rate=np.array(rates),
    )


# =============================================================================
# Aircraft Properties
# =============================================================================


class TestAircraftProperties:
    """Test aircraft property validation and derived values."""

    def test_light_fixed_wing(self, aircraft):
        assert aircraft.mass == 1043.0
        assert_allclose(aircraft.aspect_ratio, 11.0**2 / 16.2)

    def test_inertia_tensor(self):
        props = f16()
        tensor = props.inertia_tensor
        assert_allclose(np.diag(tensor), [12821.0, 75674.0, 85552.0])
        assert tensor[0, 2] == -1331.0
        assert_allclose(tensor, tensor.T)

    def test_mean_chord(self):
        assert_allclose(f16().mean_chord, 27.87 / 9.14)

    def test_weight(self, aircraft):
        assert_allclose(aircraft.weight, 1043.0 * G)

    @pytest.mark.parametrize("mass", [0.0, -10.0])
    def test_rejects_nonpositive_mass(self, mass):
        with pytest.raises(ValueError, match="mass"):
            AircraftProperties(mass=mass, jxx=1.0, jyy=1.0, jzz=1.0)

    def test_rejects_nonpositive_inertia(self):
        with pytest.raises(ValueError, match="jyy"):
            AircraftProperties(mass=1.0, jxx=1.0, jyy=0.0, jzz=1.0)

    def test_rejects_indefinite_inertia(self):
        with pytest.raises(ValueError, match="positive definite"):
            AircraftProperties(mass=1.0, jxx=1.0, jyy=1.0, jzz=1.0, jxz=2.0)

    def test_rejects_bad_geometry(self):
        with pytest.raises(ValueError, match="wingspan"):
            AircraftProperties(mass=1.0, jxx=1.0, jyy=1.0, jzz=1.0, wingspan=0.0)
        with pytest.raises(ValueError, match="wing_area"):
            AircraftProperties(mass=1.0, jxx=1.0, jyy=1.0, jzz=1.0, wing_area=-1.0)


# =============================================================================
# Kinematics Helpers
# =============================================================================


class TestEulerAngleRates:
    """Test attitude-rate models."""

    def test_body_rates_passthrough(self):
        rates = euler_angle_rates(np.array([0.5, 0.3, 1.0]), np.array([0.1, 0.2, 0.3]))
        assert_allclose(rates, [0.1, 0.2, 0.3])

    def test_full_matches_body_rates_when_level(self):
        rates = euler_angle_rates(np.zeros(3), np.array([0.1, 0.2, 0.3]), "full")
        assert_allclose(rates, [0.1, 0.2, 0.3], atol=1e-15)

    def test_full_coordinated_turn(self):
        """Banked 30 deg with pure yaw rate: rates couple through roll."""
        phi = np.radians(30.0)
        rates = euler_angle_rates(
            np.array([phi, 0.0, 0.0]), np.array([0.0, 0.0, 0.1]), "full"
        )
        assert_allclose(rates, [0.0, -0.1 * np.sin(phi), 0.1 * np.cos(phi)], atol=1e-15)

    def test_full_pitched_roll_coupling(self):
        theta = np.radians(20.0)
        rates = euler_angle_rates(
            np.array([0.0, theta, 0.0]), np.array([0.0, 0.0, 0.2]), "full"
        )
        assert_allclose(rates[0], 0.2 * np.tan(theta))
        assert_allclose(rates[2], 0.2 / np.cos(theta))


class TestBodyAccelerations:
    """Test the body-axis force equations."""

    def test_gravity_only(self):
        accel = body_accelerations(
            np.zeros(3), np.zeros(3), np.array([0.0, 0.0, G]), np.zeros(3), 1000.0
        )
        assert_allclose(accel, [0.0, 0.0, G])

    def test_coriolis_terms(self):
        """u_dot = r*v - q*w, v_dot = p*w - r*u, w_dot = q*u - p*v."""
        u, v, w = 50.0, 2.0, 3.0
        p, q, r = 0.1, 0.2, 0.3
        accel = body_accelerations(
            np.array([u, v, w]), np.array([p, q, r]), np.zeros(3), np.zeros(3), 1.0
        )
        assert_allclose(accel, [r * v - q * w, p * w - r * u, q * u - p * v])

    def test_force_divided_by_mass(self):
        accel = body_accelerations(
            np.zeros(3), np.zeros(3), np.zeros(3), np.array([100.0, -50.0, 20.0]), 10.0
        )
        assert_allclose(accel, [10.0, -5.0, 2.0])


# =============================================================================
# Equations of Motion
# =============================================================================


class TestEquationsOfMotion:
    """Test the full derivative function."""

    def test_level_flight(self, aircraft, env):
        """Level, forward flight: only w accelerates, at g."""
        deriv = equations_of_motion(_state(), aircraft, env)

        assert_allclose(deriv.position_dot, [50.0, 0.0, 0.0], atol=1e-12)
        assert_allclose(deriv.velocity_dot, [0.0, 0.0, G], atol=1e-12)
        assert_allclose(deriv.attitude_dot, np.zeros(3))
        assert_allclose(deriv.angular_rate_dot, np.zeros(3))

    def test_angular_acceleration_is_zero(self, aircraft, env):
        deriv = equations_of_motion(_state(rates=(0.3, -0.2, 0.1)), aircraft, env)
        assert_allclose(deriv.angular_rate_dot, np.zeros(3))

    def test_gravity_resolved_with_dcm(self, aircraft, env):
        """Body gravity is the DCM third column scaled by g."""
        phi, theta, psi = 0.2, -0.3, 0.7
        deriv = equations_of_motion(
            _state(velocity=(0.0, 0.0, 0.0), attitude=(phi, theta, psi)), aircraft, env
        )

        expected = G * np.array([
            -np.sin(theta),
            np.sin(phi) * np.cos(theta),
            np.cos(phi) * np.cos(theta),
        ])
        assert_allclose(deriv.velocity_dot, expected, atol=1e-12)
        assert_allclose(deriv.velocity_dot, BodyNedDCM(phi, theta, psi).matrix()[:, 2] * G)
        assert_allclose(np.linalg.norm(deriv.velocity_dot), G)

    def test_gravity_independent_of_heading(self, aircraft, env):
        """Yaw does not change the body components of gravity."""
        north = equations_of_motion(_state(velocity=(0.0, 0.0, 0.0), attitude=(0.2, 0.3, 0.0)), aircraft, env)
        east = equations_of_motion(_state(velocity=(0.0, 0.0, 0.0), attitude=(0.2, 0.3, 1.5)), aircraft, env)
        assert_allclose(north.velocity_dot, east.velocity_dot, atol=1e-12)

    def test_pitch_up_decelerates(self, aircraft, env):
        """Nose up 10 deg: gravity slows forward speed by g*sin(theta)."""
        deriv = equations_of_motion(_state(attitude=(0.0, np.radians(10.0), 0.0)), aircraft, env)
        assert_allclose(deriv.velocity_dot[0], -1.703, atol=1e-3)
        assert_allclose(deriv.velocity_dot[2], G * np.cos(np.radians(10.0)))

    def test_right_bank_slides_right(self, aircraft, env):
        """Right wing down 30 deg: gravity pushes toward the right wing."""
        deriv = equations_of_motion(_state(attitude=(np.radians(30.0), 0.0, 0.0)), aircraft, env)
        assert_allclose(deriv.velocity_dot[1], 4.903, atol=1e-3)
        assert_allclose(deriv.velocity_dot[0], 0.0, atol=1e-12)

    def test_position_rate_uses_dcm(self, aircraft, env):
        attitude = (0.0, np.radians(10.0), 0.0)
        deriv = equations_of_motion(_state(attitude=attitude), aircraft, env)
        assert_allclose(deriv.position_dot, [49.240, 0.0, 8.682], atol=1e-3)

    def test_heading_east(self, aircraft, env):
        attitude = (0.0, 0.0, np.radians(90.0))
        deriv = equations_of_motion(_state(attitude=attitude), aircraft, env)
        assert_allclose(deriv.position_dot, [0.0, 50.0, 0.0], atol=1e-9)

    def test_attitude_rate_equals_body_rates(self, aircraft, env):
        deriv = equations_of_motion(_state(rates=(0.1, 0.2, 0.3)), aircraft, env)
        assert_allclose(deriv.attitude_dot, [0.1, 0.2, 0.3])

    def test_full_kinematics_config(self, aircraft, env):
        state = _state(attitude=(np.radians(30.0), 0.0, 0.0), rates=(0.0, 0.0, 0.1))
        deriv = equations_of_motion(state, aircraft, env, DynamicsConfig(euler_kinematics="full"))
        assert_allclose(deriv.attitude_dot[2], 0.1 * np.cos(np.radians(30.0)))

    def test_altitude_varying_gravity(self, aircraft):
        env = EnvironmentConfig(gravity_model=GravityModel.INVERSE_SQUARE).create_environment()
        deriv = equations_of_motion(_state(), aircraft, env)
        assert deriv.velocity_dot[2] < G

    def test_input_state_unchanged(self, aircraft, env):
        state = _state(rates=(0.1, 0.2, 0.3))
        before = state.to_array()
        equations_of_motion(state, aircraft, env)
        assert_allclose(state.to_array(), before)


class TestAircraftDynamics:
    """Test the bound dynamics model."""

    def test_matches_function(self, aircraft, env):
        dynamics = AircraftDynamics(aircraft, env)
        state = _state(attitude=(0.1, 0.2, 0.3), rates=(0.01, 0.02, 0.03))
        assert_allclose(
            dynamics.derivatives(state).to_array(),
            equations_of_motion(state, aircraft, env).to_array(),
        )

    def test_time_does_not_matter(self, aircraft, env):
        dynamics = AircraftDynamics(aircraft, env)
        state = _state()
        assert_allclose(
            dynamics.derivatives(state, 0.0).to_array(),
            dynamics.derivatives(state, 100.0).to_array(),
        )

    def test_default_config(self, aircraft, env):
        assert AircraftDynamics(aircraft, env).config.euler_kinematics == "body_rates"

    def test_rejects_unknown_kinematics(self):
        with pytest.raises(BeartypeCallHintViolation):
            DynamicsConfig(euler_kinematics="quaternion")
