"""6DOF equations of motion for a fixed-wing aircraft.

Computes the time derivative of the 12-element state from the current
state, the aircraft properties and the environment.

The equations use:
- Body-axis force equations with the Coriolis coupling terms:
    u_dot = Fx/m + gx + r*v - q*w
    v_dot = Fy/m + gy + p*w - r*u
    w_dot = Fz/m + gz + q*u - p*v
- Gravity [0, 0, g] in NED rotated into body axes, the third column of the DCM
- Position rates from the body velocity rotated into NED with the DCM
- Attitude rates from the body angular rates

External forces (aerodynamic, propulsive) and moments are not modeled:
Fx = Fy = Fz = 0 and the angular accelerations are zero, so only gravity
and kinematics drive the state.

Example:
    >>> from sixdof.dynamics import State, equations_of_motion, light_fixed_wing
    >>> from sixdof.environment import default_environment
    >>>
    >>> state = State.level_flight(altitude=1000.0, airspeed=50.0)
    >>> state_dot = equations_of_motion(state, light_fixed_wing(), default_environment())
"""

from dataclasses import dataclass
from typing import Literal

import numpy as np
from beartype import beartype
from numba import njit
from numpy.typing import NDArray

from sixdof.dynamics.aircraft import AircraftProperties
from sixdof.dynamics.rotation import BodyNedDCM
from sixdof.dynamics.state import State, StateDerivative
from sixdof.environment.environment import Environment

EulerKinematics = Literal["body_rates", "full"]

# =============================================================================
# Numba-Optimized Core Functions
# =============================================================================


@njit(cache=True)
def _euler_rates_full(
    phi: float, theta: float, p: float, q: float, r: float
) -> tuple[float, float, float]:
    """Numba-optimized 3-2-1 Euler angle kinematics.

    Singular at theta = +/-90 deg, where cos(theta) = 0.
    """
    s_phi = np.sin(phi)
    c_phi = np.cos(phi)
    c_theta = np.cos(theta)

    phi_dot = p + (q * s_phi + r * c_phi) * np.tan(theta)
    theta_dot = q * c_phi - r * s_phi
    psi_dot = (q * s_phi + r * c_phi) / c_theta

    return phi_dot, theta_dot, psi_dot


# =============================================================================
# Kinematics
# =============================================================================


@beartype
def euler_angle_rates(
    attitude: NDArray[np.float64],
    angular_rate: NDArray[np.float64],
    kinematics: EulerKinematics = "body_rates",
) -> NDArray[np.float64]:
    """Compute Euler angle rates from body angular rates.

    Args:
        attitude: [phi, theta, psi] [rad]
        angular_rate: [p, q, r] [rad/s]
        kinematics: "body_rates" takes phi_dot = p, theta_dot = q,
            psi_dot = r, which holds only near level attitude. "full" applies
            the complete transformation, singular at theta = +/-90 deg.

    Returns:
        [phi_dot, theta_dot, psi_dot] [rad/s]
    """
    if kinematics == "body_rates":
        return angular_rate.copy()

    phi_dot, theta_dot, psi_dot = _euler_rates_full(
        float(attitude[0]),
        float(attitude[1]),
        float(angular_rate[0]),
        float(angular_rate[1]),
        float(angular_rate[2]),
    )
    return np.array([phi_dot, theta_dot, psi_dot])


@beartype
def body_accelerations(
    velocity: NDArray[np.float64],
    angular_rate: NDArray[np.float64],
    gravity_body: NDArray[np.float64],
    force_body: NDArray[np.float64],
    mass: float,
) -> NDArray[np.float64]:
    """Compute translational accelerations in the body frame.

    Args:
        velocity: [u, v, w] body velocity [m/s]
        angular_rate: [p, q, r] body angular rates [rad/s]
        gravity_body: Gravity acceleration in body frame [m/s^2]
        force_body: External force in body frame [N]
        mass: Aircraft mass [kg]

    Returns:
        [u_dot, v_dot, w_dot] [m/s^2]
    """
    u, v, w = velocity
    p, q, r = angular_rate

    coriolis = np.array([
        r * v - q * w,
        p * w - r * u,
        q * u - p * v,
    ])

    return force_body / mass + gravity_body + coriolis


# =============================================================================
# Equations of Motion
# =============================================================================


@beartype
@dataclass(frozen=True)
class DynamicsConfig:
    """Configuration for the equations of motion.

    Attributes:
        euler_kinematics: Attitude-rate model, "body_rates" or "full"
    """
    euler_kinematics: EulerKinematics = "body_rates"


@beartype
def equations_of_motion(
    state: State,
    aircraft: AircraftProperties,
    environment: Environment,
    config: DynamicsConfig | None = None,
) -> StateDerivative:
    """Compute state derivatives for fixed-wing 6DOF motion.

    Pure function of its inputs; neither the state nor the environment is
    modified.

    Args:
        state: Current aircraft state
        aircraft: Mass and inertia properties
        environment: Gravity, atmosphere and wind
        config: Dynamics configuration

    Returns:
        State derivatives for integration
    """
    config = config or DynamicsConfig()
    dcm = BodyNedDCM.from_euler(state.attitude)

    # Gravity acts along NED down; its body components are the DCM third
    # column, [-sin(theta), sin(phi)*cos(theta), cos(phi)*cos(theta)] * g
    g = environment.gravity_at_altitude(state.altitude)
    gravity_body = dcm.matrix()[:, 2] * g

    force_body = np.zeros(3)

    velocity_dot = body_accelerations(
        state.velocity,
        state.angular_rate,
        gravity_body,
        force_body,
        aircraft.mass,
    )

    # No moment model: angular rates are held
    angular_rate_dot = np.zeros(3)

    position_dot = dcm.transform_from_body(state.velocity)

    attitude_dot = euler_angle_rates(
        state.attitude,
        state.angular_rate,
        config.euler_kinematics,
    )

    return StateDerivative(
        position_dot=position_dot,
        velocity_dot=velocity_dot,
        attitude_dot=attitude_dot,
        angular_rate_dot=angular_rate_dot,
    )


@beartype
class AircraftDynamics:
    """Fixed-wing 6DOF dynamics model.

    Binds an aircraft and an environment to the equations of motion so the
    integrator only needs to supply the state.

    Example:
        >>> dynamics = AircraftDynamics(light_fixed_wing(), default_environment())
        >>> state_dot = dynamics.derivatives(State.level_flight(1000.0, 50.0))
    """

    def __init__(
        self,
        aircraft: AircraftProperties,
        environment: Environment,
        config: DynamicsConfig | None = None,
    ) -> None:
        """Initialize dynamics model.

        Args:
            aircraft: Mass and inertia properties
            environment: Gravity, atmosphere and wind
            config: Dynamics configuration
        """
        self.aircraft = aircraft
        self.environment = environment
        self.config = config or DynamicsConfig()

    def derivatives(self, state: State, time: float = 0.0) -> StateDerivative:
        """Compute state derivatives.

        The equations are autonomous; ``time`` is accepted so time-dependent
        force models can share the signature.

        Args:
            state: Current aircraft state
            time: Simulation time [s]

        Returns:
            State derivatives
        """
        return equations_of_motion(state, self.aircraft, self.environment, self.config)

    def __repr__(self) -> str:
        return (
            f"AircraftDynamics(mass={self.aircraft.mass} kg, "
            f"euler_kinematics={self.config.euler_kinematics!r})"
        )
