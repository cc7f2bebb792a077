"""Stratified standard atmosphere model.

Provides temperature, pressure, and density as functions of altitude using
seven contiguous layers from the troposphere to the exosphere. Each layer
carries its own base conditions so that no layer depends on integrating
through the layers below it.

The model divides the atmosphere into layers with different lapse rates:
- Troposphere (0-11 km): -6.5 K/km lapse rate
- Tropopause (11-20 km): isothermal at 216.65 K
- Stratosphere (20-32 km): +1.0 K/km
- Stratosphere (32-47 km): +2.8 K/km
- Stratopause (47-51 km): isothermal at 270.65 K
- Mesosphere (51-71 km): -2.8 K/km
- Mesosphere (71-84.852 km): -2.0 K/km
- Exosphere (84.852 km and up): isothermal at 186.946 K

Gravity enters the barometric formulas through the gravity model, queried at
the requested altitude.

Reference: U.S. Standard Atmosphere, 1976 (NASA-TM-X-74335)

Example:
    >>> from sixdof.environment import Gravity, StandardAtmosphere
    >>>
    >>> atm = StandardAtmosphere(Gravity())
    >>> result = atm.at_altitude(11000.0)
    >>> print(f"Density: {result.density:.4f} kg/m^3")
    >>> print(f"Temperature: {result.temperature:.2f} K")
    >>> print(f"Pressure: {result.pressure:.0f} Pa")
"""

import logging
import math
from bisect import bisect_right
from dataclasses import dataclass

import numpy as np
from beartype import beartype
from numpy.typing import NDArray

from sixdof.environment.gravity import Gravity

logger = logging.getLogger(__name__)

# =============================================================================
# Constants
# =============================================================================

R_AIR = 287.0  # Specific gas constant for dry air [J/(kg·K)]


class AtmosphereRangeError(ValueError):
    """Raised when an altitude lies outside the standard atmosphere."""

    def __init__(self, altitude: float) -> None:
        super().__init__(
            f"altitude outside standard atmosphere range: {altitude} m"
        )
        self.altitude = altitude


# =============================================================================
# Layer Definitions
# =============================================================================


@dataclass(frozen=True)
class AtmosphereLayer:
    """One stratum of the standard atmosphere.

    A layer covers ``start <= altitude < end``.

    Attributes:
        name: Layer name
        start: Base altitude [m]
        end: Top altitude [m] (exclusive; infinite for the last layer)
        base_pressure: Static pressure at the base [Pa]
        base_temperature: Static temperature at the base [K]
        base_density: Density at the base [kg/m^3]
        lapse_rate: Temperature gradient [K/m]
        isothermal: True if temperature is constant through the layer
    """
    name: str
    start: float
    end: float
    base_pressure: float
    base_temperature: float
    base_density: float
    lapse_rate: float
    isothermal: bool


LAYERS: tuple[AtmosphereLayer, ...] = (
    AtmosphereLayer("troposphere", 0.0, 11000.0,
                    101325.0, 288.15, 1.225, -0.0065, False),
    AtmosphereLayer("tropopause", 11000.0, 20000.0,
                    22632.1, 216.65, 0.363918, 0.0, True),
    AtmosphereLayer("stratosphere", 20000.0, 32000.0,
                    5474.89, 216.65, 0.0880349, 0.001, False),
    AtmosphereLayer("upper stratosphere", 32000.0, 47000.0,
                    868.019, 228.65, 0.013225, 0.0028, False),
    AtmosphereLayer("stratopause", 47000.0, 51000.0,
                    110.906, 270.65, 0.00142753, 0.0, True),
    AtmosphereLayer("mesosphere", 51000.0, 71000.0,
                    66.9389, 270.65, 0.000861606, -0.0028, False),
    AtmosphereLayer("upper mesosphere", 71000.0, 84852.0,
                    3.95642, 214.65, 0.000064211, -0.002, False),
    AtmosphereLayer("exosphere", 84852.0, math.inf,
                    0.435981, 186.946, 0.00000805098, 0.0, True),
)

_LAYER_STARTS: tuple[float, ...] = tuple(layer.start for layer in LAYERS)


# =============================================================================
# Result Classes
# =============================================================================


@beartype
@dataclass(frozen=True)
class AtmosphereResult:
    """Atmospheric conditions at a given altitude.

    Attributes:
        altitude: Altitude [m]
        temperature: Static temperature [K]
        pressure: Static pressure [Pa]
        density: Air density [kg/m^3]
    """
    altitude: float
    temperature: float
    pressure: float
    density: float


# =============================================================================
# Atmosphere Model
# =============================================================================


@beartype
class StandardAtmosphere:
    """Seven-layer stratified standard atmosphere.

    Altitudes below zero raise :class:`AtmosphereRangeError`; above the base
    of the exosphere the model stays isothermal with no upper limit.

    Example:
        >>> atm = StandardAtmosphere(Gravity())
        >>> rho = atm.density(10000.0)  # Density at 10 km
        >>> T = atm.temperature(30000.0)  # Temperature at 30 km
        >>> result = atm.at_altitude(50000.0)  # All properties at 50 km
    """

    specific_gas_constant: float = R_AIR

    def __init__(self, gravity: Gravity) -> None:
        """Initialize atmosphere model.

        Args:
            gravity: Gravity model used in the barometric formulas
        """
        self.gravity = gravity

    @staticmethod
    def find_layer(altitude: float) -> AtmosphereLayer:
        """Locate the layer containing an altitude.

        Args:
            altitude: Altitude [m]

        Returns:
            The containing AtmosphereLayer

        Raises:
            AtmosphereRangeError: If the altitude is below the first layer
        """
        # Layers are contiguous, so the containing layer is the last one
        # whose base is at or below the altitude.
        index = bisect_right(_LAYER_STARTS, altitude) - 1
        if index < 0 or not altitude < LAYERS[index].end:
            logger.debug("Rejected atmosphere query at %s m", altitude)
            raise AtmosphereRangeError(altitude)
        return LAYERS[index]

    @staticmethod
    def _temperature_in_layer(altitude: float, layer: AtmosphereLayer) -> float:
        if layer.isothermal:
            return layer.base_temperature
        return layer.base_temperature + layer.lapse_rate * (altitude - layer.start)

    def _hydrostatic_ratio(
        self,
        altitude: float,
        layer: AtmosphereLayer,
        temperature: float,
        exponent_offset: float,
    ) -> float:
        """Ratio of a hydrostatic quantity to its value at the layer base.

        Pressure uses ``exponent_offset = 0``; density uses 1 in gradient
        layers, where it falls faster than pressure by one power of the
        temperature ratio.
        """
        g = self.gravity.at_altitude(altitude)
        R = self.specific_gas_constant

        if layer.isothermal:
            return math.exp(-g * (altitude - layer.start) / (R * temperature))

        exponent = -(g / (R * layer.lapse_rate) + exponent_offset)
        return (temperature / layer.base_temperature) ** exponent

    def temperature(self, altitude: float) -> float:
        """Get temperature at altitude.

        Args:
            altitude: Altitude [m]

        Returns:
            Temperature [K]
        """
        layer = self.find_layer(altitude)
        return self._temperature_in_layer(altitude, layer)

    def pressure(self, altitude: float) -> float:
        """Get static pressure at altitude.

        Args:
            altitude: Altitude [m]

        Returns:
            Pressure [Pa]
        """
        layer = self.find_layer(altitude)
        T = self._temperature_in_layer(altitude, layer)
        return layer.base_pressure * self._hydrostatic_ratio(altitude, layer, T, 0.0)

    def density(self, altitude: float) -> float:
        """Get air density at altitude.

        Args:
            altitude: Altitude [m]

        Returns:
            Density [kg/m^3]
        """
        layer = self.find_layer(altitude)
        T = self._temperature_in_layer(altitude, layer)
        return layer.base_density * self._hydrostatic_ratio(altitude, layer, T, 1.0)

    def at_altitude(self, altitude: float) -> AtmosphereResult:
        """Get all atmospheric properties at altitude.

        Args:
            altitude: Altitude [m]

        Returns:
            AtmosphereResult with temperature, pressure and density
        """
        return AtmosphereResult(
            altitude=altitude,
            temperature=self.temperature(altitude),
            pressure=self.pressure(altitude),
            density=self.density(altitude),
        )

    def profile(
        self,
        altitudes: NDArray[np.float64] | list[float],
    ) -> dict[str, NDArray[np.float64]]:
        """Get atmospheric properties over a range of altitudes.

        Args:
            altitudes: Array of altitudes [m]

        Returns:
            Dictionary with arrays of altitude, temperature, pressure, density
        """
        altitudes = np.asarray(altitudes, dtype=np.float64)

        return {
            "altitude": altitudes,
            "temperature": np.array([self.temperature(float(h)) for h in altitudes]),
            "pressure": np.array([self.pressure(float(h)) for h in altitudes]),
            "density": np.array([self.density(float(h)) for h in altitudes]),
        }
