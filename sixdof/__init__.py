"""Sixdof - Six-degree-of-freedom flight dynamics for fixed-wing aircraft.

This package propagates a 12-element aircraft state through time with the
6DOF equations of motion under gravity, a standard atmosphere and an
altitude-keyed wind field.

Example:
    >>> from sixdof import (
    ...     AircraftDynamics, EulerIntegrator, SimConfig, Simulation, State,
    ...     default_environment, light_fixed_wing,
    ... )
    >>>
    >>> dynamics = AircraftDynamics(light_fixed_wing(), default_environment())
    >>> sim = Simulation(
    ...     initial_state=State.level_flight(altitude=1000.0, airspeed=50.0),
    ...     integrator=EulerIntegrator(dynamics),
    ...     config=SimConfig(time_step=0.01, total_time=10.0, output_interval=1.0),
    ... )
    >>> result = sim.run()
    >>> print(f"Final altitude: {result.altitude[-1]:.1f} m")
"""

__version__ = "0.1.0"

# Dynamics
from sixdof.dynamics import (
    AircraftDynamics,
    AircraftProperties,
    BodyNedDCM,
    DynamicsConfig,
    EulerIntegrator,
    State,
    StateDerivative,
    equations_of_motion,
    f16,
    light_fixed_wing,
)

# Environment
from sixdof.environment import (
    AtmosphereRangeError,
    Environment,
    EnvironmentConfig,
    Gravity,
    GravityModel,
    StandardAtmosphere,
    Wind,
    WindField,
    default_environment,
)

# Simulation
from sixdof.simulation import (
    SimConfig,
    Simulation,
    SimulationResult,
)

__all__ = [
    "__version__",
    # Dynamics
    "AircraftDynamics",
    "AircraftProperties",
    "BodyNedDCM",
    "DynamicsConfig",
    "EulerIntegrator",
    "State",
    "StateDerivative",
    "equations_of_motion",
    "f16",
    "light_fixed_wing",
    # Environment
    "AtmosphereRangeError",
    "Environment",
    "EnvironmentConfig",
    "Gravity",
    "GravityModel",
    "StandardAtmosphere",
    "Wind",
    "WindField",
    "default_environment",
    # Simulation
    "SimConfig",
    "Simulation",
    "SimulationResult",
]
