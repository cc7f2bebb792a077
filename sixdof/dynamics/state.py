"""12-element state vector for fixed-wing 6DOF simulation.

The state vector contains:
- Position (3): [north, east, down] in the NED navigation frame [m]
- Velocity (3): [u, v, w] in the body frame [m/s]
- Attitude (3): [phi, theta, psi] Euler angles, 3-2-1 sequence [rad]
- Angular rate (3): [p, q, r] in the body frame [rad/s]

Total: 12 state variables

Down is negative above the reference datum, so altitude = -down.

The components are independent: Euler angles are not wrapped to a canonical
range and nothing ties velocity to attitude. States are treated as
immutable; integration always produces a new instance.
"""

from dataclasses import dataclass

import numpy as np
from beartype import beartype
from numpy.typing import NDArray

STATE_SIZE = 12

_FIELDS = ("position", "velocity", "attitude", "angular_rate")


def _as_vector(name: str, value) -> NDArray[np.float64]:
    vector = np.array(value, dtype=np.float64)
    if vector.shape != (3,):
        raise ValueError(f"{name} must be shape (3,), got {vector.shape}")
    return vector


# =============================================================================
# State Classes
# =============================================================================


@beartype
@dataclass(frozen=True, eq=False)
class State:
    """6DOF state vector for a fixed-wing aircraft.

    Attributes:
        position: [north, east, down] in NED frame [m]
        velocity: [u, v, w] in body frame [m/s]
        attitude: [phi, theta, psi] roll, pitch, yaw [rad]
        angular_rate: [p, q, r] body angular rates [rad/s]
    """
    position: NDArray[np.float64]
    velocity: NDArray[np.float64]
    attitude: NDArray[np.float64]
    angular_rate: NDArray[np.float64]

    def __post_init__(self) -> None:
        """Validate shapes and take private copies of the vectors."""
        for name in _FIELDS:
            object.__setattr__(self, name, _as_vector(name, getattr(self, name)))

    @classmethod
    def zeros(cls) -> "State":
        """State at the datum, at rest, level, with zero rates."""
        return cls.from_array(np.zeros(STATE_SIZE))

    @classmethod
    def level_flight(
        cls,
        altitude: float,
        airspeed: float,
        heading: float = 0.0,
        north: float = 0.0,
        east: float = 0.0,
    ) -> "State":
        """Create a wings-level, unaccelerated state.

        Args:
            altitude: Altitude above the datum [m]
            airspeed: Forward body velocity u [m/s]
            heading: Yaw angle psi [rad]
            north: North position [m]
            east: East position [m]
        """
        return cls(
            position=np.array([north, east, -altitude]),
            velocity=np.array([airspeed, 0.0, 0.0]),
            attitude=np.array([0.0, 0.0, heading]),
            angular_rate=np.zeros(3),
        )

    def to_array(self) -> NDArray[np.float64]:
        """Convert state to flat array for integration."""
        return np.concatenate([
            self.position,
            self.velocity,
            self.attitude,
            self.angular_rate,
        ])

    @classmethod
    def from_array(cls, arr: NDArray[np.float64]) -> "State":
        """Create state from flat array."""
        if arr.shape != (STATE_SIZE,):
            raise ValueError(f"State array must be shape ({STATE_SIZE},), got {arr.shape}")
        return cls(
            position=arr[0:3],
            velocity=arr[3:6],
            attitude=arr[6:9],
            angular_rate=arr[9:12],
        )

    @property
    def altitude(self) -> float:
        """Altitude above the datum [m]."""
        return float(-self.position[2])

    @property
    def roll(self) -> float:
        return float(self.attitude[0])

    @property
    def pitch(self) -> float:
        return float(self.attitude[1])

    @property
    def yaw(self) -> float:
        return float(self.attitude[2])

    @property
    def speed(self) -> float:
        """Body velocity magnitude [m/s]."""
        return float(np.linalg.norm(self.velocity))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, State):
            return NotImplemented
        return bool(np.array_equal(self.to_array(), other.to_array()))

    __hash__ = None


@beartype
@dataclass(frozen=True)
class StateDerivative:
    """Time derivative of the state vector.

    Attributes:
        position_dot: [north_dot, east_dot, down_dot] [m/s]
        velocity_dot: [u_dot, v_dot, w_dot] [m/s^2]
        attitude_dot: [phi_dot, theta_dot, psi_dot] [rad/s]
        angular_rate_dot: [p_dot, q_dot, r_dot] [rad/s^2]
    """
    position_dot: NDArray[np.float64]
    velocity_dot: NDArray[np.float64]
    attitude_dot: NDArray[np.float64]
    angular_rate_dot: NDArray[np.float64]

    def __post_init__(self) -> None:
        for name in ("position_dot", "velocity_dot", "attitude_dot", "angular_rate_dot"):
            object.__setattr__(self, name, _as_vector(name, getattr(self, name)))

    def to_array(self) -> NDArray[np.float64]:
        """Convert to flat array for integration."""
        return np.concatenate([
            self.position_dot,
            self.velocity_dot,
            self.attitude_dot,
            self.angular_rate_dot,
        ])
