"""Environment composition: gravity, atmosphere and wind.

The Environment bundles one model of each kind and answers every
environmental question the dynamics may ask at an altitude. It is built once
before a simulation starts and is not modified afterward.

Example:
    >>> from sixdof.environment import EnvironmentConfig
    >>>
    >>> config = EnvironmentConfig(wind_samples=((1000.0, 5.0, 4.5),))
    >>> env = config.create_environment()
    >>> conditions = env.conditions(500.0)
    >>> print(f"g = {conditions.gravity:.3f} m/s^2")
"""

import math
from dataclasses import dataclass
from typing import NamedTuple

from beartype import beartype

from sixdof.environment.atmosphere import AtmosphereResult, StandardAtmosphere
from sixdof.environment.gravity import G0, Gravity, GravityModel
from sixdof.environment.wind import Wind, WindField

# Unit factors for the literal default profile
FOOT = 0.3048  # [m]
KNOT = 1852.0 / 3600.0  # [m/s]


# =============================================================================
# Environment Data
# =============================================================================


class EnvironmentConditions(NamedTuple):
    """Environmental conditions at one altitude."""
    altitude: float                 # Query altitude [m]
    gravity: float                  # Gravity magnitude along Down [m/s^2]
    atmosphere: AtmosphereResult    # Temperature, pressure, density
    wind: Wind                      # Horizontal wind


# =============================================================================
# Environment
# =============================================================================


@beartype
class Environment:
    """Gravity, atmosphere and wind models queried by altitude."""

    def __init__(
        self,
        gravity: Gravity,
        atmosphere: StandardAtmosphere,
        wind: WindField,
    ) -> None:
        self.gravity = gravity
        self.atmosphere = atmosphere
        self.wind = wind

    def gravity_at_altitude(self, altitude: float) -> float:
        """Gravity magnitude at altitude [m/s^2]."""
        return self.gravity.at_altitude(altitude)

    def wind_at_altitude(self, altitude: float) -> Wind:
        """Wind at altitude."""
        return self.wind.wind_at_altitude(altitude)

    def conditions(self, altitude: float) -> EnvironmentConditions:
        """Get all environmental conditions at altitude.

        Raises:
            AtmosphereRangeError: If the altitude is below the atmosphere
        """
        return EnvironmentConditions(
            altitude=altitude,
            gravity=self.gravity.at_altitude(altitude),
            atmosphere=self.atmosphere.at_altitude(altitude),
            wind=self.wind.wind_at_altitude(altitude),
        )

    def __repr__(self) -> str:
        return (
            f"Environment(gravity={self.gravity!r}, "
            f"atmosphere={type(self.atmosphere).__name__}, wind={self.wind!r})"
        )


# =============================================================================
# Configuration
# =============================================================================


@beartype
@dataclass(frozen=True)
class EnvironmentConfig:
    """Configuration for building an Environment.

    Attributes:
        gravity_model: Gravity model type
        g0: Sea-level gravity [m/s^2]
        wind_samples: (altitude [m], speed [m/s], direction [rad]) triples
    """
    gravity_model: GravityModel = GravityModel.CONSTANT
    g0: float = G0
    wind_samples: tuple[tuple[float, float, float], ...] = ()

    def create_gravity(self) -> Gravity:
        """Create gravity model from config."""
        return Gravity(model=self.gravity_model, g0=self.g0)

    def create_atmosphere(self, gravity: Gravity) -> StandardAtmosphere:
        """Create atmosphere model from config."""
        return StandardAtmosphere(gravity)

    def create_wind_field(self) -> WindField:
        """Create and populate the wind field from config."""
        wind_field = WindField()
        for altitude, speed, direction in self.wind_samples:
            wind_field.add_sample(altitude, Wind(speed=speed, direction=direction))
        return wind_field

    def create_environment(self) -> Environment:
        """Create the complete environment from config."""
        gravity = self.create_gravity()
        return Environment(
            gravity=gravity,
            atmosphere=self.create_atmosphere(gravity),
            wind=self.create_wind_field(),
        )


@beartype
def default_environment() -> Environment:
    """Constant gravity, standard atmosphere and a light westerly profile.

    Wind samples: surface 5 kt from 260 deg, 1000 ft 10 kt from 260 deg,
    5000 ft 20 kt from 310 deg, 10000 ft 50 kt from 340 deg.
    """
    config = EnvironmentConfig(
        wind_samples=(
            (0.0, 5.0 * KNOT, math.radians(260.0)),
            (1000.0 * FOOT, 10.0 * KNOT, math.radians(260.0)),
            (5000.0 * FOOT, 20.0 * KNOT, math.radians(310.0)),
            (10000.0 * FOOT, 50.0 * KNOT, math.radians(340.0)),
        ),
    )
    return config.create_environment()
