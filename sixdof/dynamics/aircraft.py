"""Mass and geometry properties of a fixed-wing aircraft."""

from dataclasses import dataclass

import numpy as np
from beartype import beartype
from numpy.typing import NDArray

from sixdof.environment.gravity import G0


@beartype
@dataclass(frozen=True)
class AircraftProperties:
    """Rigid-body properties of a fixed-wing aircraft.

    Inertia is expressed in the body frame. For an aircraft symmetric about
    its x-z plane only the Jxz product of inertia is non-zero.

    Attributes:
        mass: Total mass [kg]
        jxx: Roll moment of inertia [kg*m^2]
        jyy: Pitch moment of inertia [kg*m^2]
        jzz: Yaw moment of inertia [kg*m^2]
        jxz: Product of inertia in the x-z plane [kg*m^2]
        wingspan: Wing span [m]
        wing_area: Reference wing area [m^2]
    """
    mass: float
    jxx: float
    jyy: float
    jzz: float
    jxz: float = 0.0
    wingspan: float = 1.0
    wing_area: float = 1.0

    def __post_init__(self) -> None:
        if self.mass <= 0:
            raise ValueError(f"mass must be positive, got {self.mass}")
        for name in ("jxx", "jyy", "jzz"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if self.jxx * self.jzz - self.jxz**2 <= 0:
            raise ValueError("inertia tensor is not positive definite (jxx*jzz <= jxz^2)")
        if self.wingspan <= 0:
            raise ValueError(f"wingspan must be positive, got {self.wingspan}")
        if self.wing_area <= 0:
            raise ValueError(f"wing_area must be positive, got {self.wing_area}")

    @property
    def inertia_tensor(self) -> NDArray[np.float64]:
        """3x3 body-frame inertia tensor [kg*m^2]."""
        return np.array([
            [self.jxx, 0.0, -self.jxz],
            [0.0, self.jyy, 0.0],
            [-self.jxz, 0.0, self.jzz],
        ])

    @property
    def mean_chord(self) -> float:
        """Mean aerodynamic chord approximated as S / b [m]."""
        return self.wing_area / self.wingspan

    @property
    def aspect_ratio(self) -> float:
        """Wing aspect ratio b^2 / S."""
        return self.wingspan**2 / self.wing_area

    @property
    def weight(self) -> float:
        """Weight at standard sea-level gravity [N]."""
        return self.mass * G0


# =============================================================================
# Reference Airframes
# =============================================================================


def light_fixed_wing() -> AircraftProperties:
    """Light single-engine trainer in the Cessna 172 class."""
    return AircraftProperties(
        mass=1043.0,
        jxx=1285.31,
        jyy=1824.93,
        jzz=2666.89,
        jxz=0.0,
        wingspan=11.0,
        wing_area=16.2,
    )


def f16() -> AircraftProperties:
    """F-16 mass properties (Stevens and Lewis, Aircraft Control and Simulation, App. A)."""
    return AircraftProperties(
        mass=9300.0,
        jxx=12821.0,
        jyy=75674.0,
        jzz=85552.0,
        jxz=1331.0,
        wingspan=9.14,
        wing_area=27.87,
    )
