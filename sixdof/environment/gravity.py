"""Gravity models for flat-Earth flight simulation.

Gravity is returned as a scalar magnitude acting along the navigation-frame
Down axis. Callers only ever ask for the magnitude at an altitude, so a model
that varies with altitude drops in without changing them.

Models available:
- Constant: Standard gravity regardless of altitude (reference model)
- Inverse square: Point-mass falloff with altitude above mean sea level

Example:
    >>> from sixdof.environment import Gravity, GravityModel
    >>>
    >>> grav = Gravity()
    >>> g = grav.at_altitude(1000.0)  # 9.80665 m/s^2
    >>>
    >>> grav_r2 = Gravity(model=GravityModel.INVERSE_SQUARE)
    >>> g_high = grav_r2.at_altitude(10000.0)
"""

from enum import Enum, auto

from beartype import beartype

# =============================================================================
# Constants
# =============================================================================

# Standard gravity at sea level
G0: float = 9.80665  # [m/s^2]

# Mean Earth radius (IUGG)
R_EARTH_MEAN: float = 6371008.8  # [m]


# =============================================================================
# Gravity Model Enum
# =============================================================================


class GravityModel(Enum):
    """Available gravity models."""

    CONSTANT = auto()        # Constant g
    INVERSE_SQUARE = auto()  # g0 * (R / (R + h))^2


# =============================================================================
# Gravity Class
# =============================================================================


@beartype
class Gravity:
    """Gravitational acceleration magnitude as a function of altitude.

    Example:
        >>> grav = Gravity(model=GravityModel.CONSTANT)
        >>> grav.at_altitude(5000.0)
        9.80665
    """

    def __init__(
        self,
        model: GravityModel = GravityModel.CONSTANT,
        g0: float = G0,
    ) -> None:
        """Initialize gravity model.

        Args:
            model: Gravity model type
            g0: Sea-level gravity [m/s^2]
        """
        if g0 <= 0:
            raise ValueError(f"Sea-level gravity must be positive, got {g0}")
        self.model = model
        self.g0 = g0

    def at_altitude(self, altitude: float) -> float:
        """Get gravity magnitude at altitude.

        Args:
            altitude: Altitude above the reference datum [m]

        Returns:
            Gravity magnitude [m/s^2], directed along navigation Down
        """
        if self.model == GravityModel.CONSTANT:
            return self.g0
        elif self.model == GravityModel.INVERSE_SQUARE:
            ratio = R_EARTH_MEAN / (R_EARTH_MEAN + altitude)
            return self.g0 * ratio * ratio
        else:
            raise ValueError(f"Unknown gravity model: {self.model}")

    def at_sea_level(self) -> float:
        """Get gravity magnitude at the reference datum [m/s^2]."""
        return self.at_altitude(0.0)

    def __repr__(self) -> str:
        return f"Gravity(model={self.model.name}, g0={self.g0})"
