"""Environment models for fixed-wing flight simulation.

Provides gravity, stratified atmosphere and altitude-keyed wind models, and
the Environment that composes them.

Example:
    >>> from sixdof.environment import Gravity, StandardAtmosphere
    >>>
    >>> grav = Gravity()
    >>> atm = StandardAtmosphere(grav)
    >>> rho = atm.density(10000.0)  # kg/m^3
    >>> g = grav.at_altitude(10000.0)  # m/s^2
"""

from sixdof.environment.atmosphere import (
    LAYERS,
    AtmosphereLayer,
    AtmosphereRangeError,
    AtmosphereResult,
    StandardAtmosphere,
)
from sixdof.environment.environment import (
    Environment,
    EnvironmentConditions,
    EnvironmentConfig,
    default_environment,
)
from sixdof.environment.gravity import (
    G0,
    Gravity,
    GravityModel,
)
from sixdof.environment.wind import (
    Wind,
    WindField,
    wrap_angle,
)

__all__ = [
    # Gravity
    "G0",
    "Gravity",
    "GravityModel",
    # Atmosphere
    "LAYERS",
    "AtmosphereLayer",
    "AtmosphereRangeError",
    "AtmosphereResult",
    "StandardAtmosphere",
    # Wind
    "Wind",
    "WindField",
    "wrap_angle",
    # Environment
    "Environment",
    "EnvironmentConditions",
    "EnvironmentConfig",
    "default_environment",
]
