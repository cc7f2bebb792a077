"""Dynamics module for fixed-wing 6DOF simulation.

This module provides the state representation, the body/NED rotation, the
equations of motion and the fixed-step integrator.

Example:
    >>> from sixdof.dynamics import AircraftDynamics, EulerIntegrator, State
    >>> from sixdof.dynamics import light_fixed_wing
    >>> from sixdof.environment import default_environment
    >>>
    >>> dynamics = AircraftDynamics(light_fixed_wing(), default_environment())
    >>> integrator = EulerIntegrator(dynamics)
    >>> state = State.level_flight(altitude=1000.0, airspeed=50.0)
    >>> next_state = integrator.integrate(state, time=0.0, dt=0.1)
"""

from sixdof.dynamics.aircraft import (
    AircraftProperties,
    f16,
    light_fixed_wing,
)
from sixdof.dynamics.equations import (
    AircraftDynamics,
    DynamicsConfig,
    body_accelerations,
    equations_of_motion,
    euler_angle_rates,
)
from sixdof.dynamics.integrator import (
    DerivativeModel,
    EulerIntegrator,
    Propagation,
)
from sixdof.dynamics.rotation import (
    BodyNedDCM,
    body_to_ned_matrix,
)
from sixdof.dynamics.state import (
    STATE_SIZE,
    State,
    StateDerivative,
)

__all__ = [
    # State
    "STATE_SIZE",
    "State",
    "StateDerivative",
    # Rotation
    "BodyNedDCM",
    "body_to_ned_matrix",
    # Aircraft
    "AircraftProperties",
    "light_fixed_wing",
    "f16",
    # Equations of motion
    "AircraftDynamics",
    "DynamicsConfig",
    "equations_of_motion",
    "body_accelerations",
    "euler_angle_rates",
    # Integration
    "DerivativeModel",
    "EulerIntegrator",
    "Propagation",
]
