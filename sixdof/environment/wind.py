"""Altitude-keyed wind field.

Wind is described by samples of (speed, direction) at discrete altitudes.
Queries between samples interpolate linearly in speed and along the shortest
arc in direction. Below the lowest sample the wind decays linearly to 10% of
that sample's speed at ground level; above the highest sample the highest
sample is returned unchanged. A field with a single sample applies the
decay law at every altitude.

Directions follow the meteorological convention: the direction the wind
blows FROM, clockwise from north, in radians.

Example:
    >>> import numpy as np
    >>> from sixdof.environment import Wind, WindField
    >>>
    >>> field = WindField()
    >>> field.add_sample(1000.0, Wind(speed=5.0, direction=np.radians(260.0)))
    >>> field.add_sample(3000.0, Wind(speed=10.0, direction=np.radians(280.0)))
    >>> field.wind_at_altitude(2000.0).speed
    7.5
"""

import logging
import math
from bisect import bisect_left, bisect_right
from dataclasses import dataclass

import numpy as np
from beartype import beartype
from numpy.typing import NDArray

logger = logging.getLogger(__name__)

# Fraction of the lowest sample's speed remaining at ground level
SURFACE_DECAY_FRACTION = 0.1

TWO_PI = 2.0 * math.pi


@beartype
def wrap_angle(angle: float) -> float:
    """Wrap an angle into (-pi, pi] [rad]."""
    wrapped = math.remainder(angle, TWO_PI)
    if wrapped == -math.pi:
        return math.pi
    return wrapped


# =============================================================================
# Wind Sample
# =============================================================================


@beartype
@dataclass(frozen=True)
class Wind:
    """Horizontal wind at a point.

    Attributes:
        speed: Wind speed [m/s]
        direction: Direction the wind blows from, clockwise from north [rad]
    """
    speed: float = 0.0
    direction: float = 0.0

    @property
    def is_calm(self) -> bool:
        """Check if wind speed is zero."""
        return self.speed == 0.0

    def ned_velocity(self) -> NDArray[np.float64]:
        """Velocity of the air mass in the NED frame [m/s].

        A wind from the north (direction 0) moves air toward the south.
        """
        return np.array([
            -self.speed * math.cos(self.direction),
            -self.speed * math.sin(self.direction),
            0.0,
        ])


# =============================================================================
# Wind Field
# =============================================================================


@beartype
class WindField:
    """Wind speed and direction as a function of altitude.

    Samples are kept sorted by ascending altitude; an insertion at an
    existing altitude replaces that sample. The table is meant to be filled
    before a simulation starts and treated as read-only afterward.
    """

    def __init__(self) -> None:
        self._altitudes: list[float] = []
        self._winds: list[Wind] = []

    def add_sample(self, altitude: float, wind: Wind) -> None:
        """Insert or overwrite the wind sample at an altitude.

        Args:
            altitude: Sample altitude [m]
            wind: Wind at that altitude

        Raises:
            ValueError: If the altitude or the wind speed is negative
        """
        if altitude < 0:
            raise ValueError(f"Wind sample altitude must be >= 0, got {altitude}")
        if wind.speed < 0:
            raise ValueError(f"Wind speed must be >= 0, got {wind.speed}")

        index = bisect_left(self._altitudes, altitude)
        if index < len(self._altitudes) and self._altitudes[index] == altitude:
            logger.debug("Overwriting wind sample at %.1f m", altitude)
            self._winds[index] = wind
            return

        logger.debug(
            "Adding wind sample at %.1f m: %.2f m/s from %.1f deg",
            altitude, wind.speed, math.degrees(wind.direction),
        )
        self._altitudes.insert(index, altitude)
        self._winds.insert(index, wind)

    def wind_at_altitude(self, altitude: float) -> Wind:
        """Get the wind at an altitude.

        Args:
            altitude: Query altitude [m]; negative values are clamped to 0

        Returns:
            Wind at the altitude
        """
        altitude = max(altitude, 0.0)

        if not self._altitudes:
            return Wind(speed=0.0, direction=0.0)

        if len(self._altitudes) == 1:
            return self._decayed_wind(altitude)

        if altitude >= self._altitudes[-1]:
            return self._winds[-1]

        if altitude <= self._altitudes[0]:
            return self._decayed_wind(altitude)

        upper = bisect_right(self._altitudes, altitude)
        lower = upper - 1
        alt1, alt2 = self._altitudes[lower], self._altitudes[upper]
        ratio = (altitude - alt1) / (alt2 - alt1)
        return self._interpolate(self._winds[lower], self._winds[upper], ratio)

    @staticmethod
    def _interpolate(wind1: Wind, wind2: Wind, ratio: float) -> Wind:
        """Blend two samples; direction follows the shortest arc."""
        speed = wind1.speed + (wind2.speed - wind1.speed) * ratio
        delta = wrap_angle(wind2.direction - wind1.direction)
        direction = (wind1.direction + delta * ratio) % TWO_PI
        return Wind(speed=speed, direction=direction)

    def _decayed_wind(self, altitude: float) -> Wind:
        """Linear decay from the lowest sample to 10% of it at the ground."""
        lowest_altitude = self._altitudes[0]
        lowest = self._winds[0]

        # A sample at ground level leaves nothing to decay toward.
        if lowest_altitude <= 0.0:
            return lowest

        surface_speed = lowest.speed * SURFACE_DECAY_FRACTION
        decay_rate = (lowest.speed - surface_speed) / lowest_altitude
        speed = max(surface_speed + decay_rate * altitude, 0.0)
        return Wind(speed=speed, direction=lowest.direction)

    def has_samples(self) -> bool:
        """Check if any wind sample has been added."""
        return bool(self._altitudes)

    def min_altitude(self) -> float:
        """Lowest sample altitude [m], or 0 when empty."""
        return self._altitudes[0] if self._altitudes else 0.0

    def max_altitude(self) -> float:
        """Highest sample altitude [m], or 0 when empty."""
        return self._altitudes[-1] if self._altitudes else 0.0

    def samples(self) -> tuple[tuple[float, Wind], ...]:
        """All samples as (altitude, wind) pairs in ascending altitude."""
        return tuple(zip(self._altitudes, self._winds))

    def __len__(self) -> int:
        return len(self._altitudes)

    def __repr__(self) -> str:
        return f"WindField(samples={len(self)})"
