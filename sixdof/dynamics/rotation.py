"""Body <-> North-East-Down direction cosine matrix.

The DCM is built from Euler angles with the 3-2-1 sequence: yaw about the
navigation Z axis, then pitch about the new Y axis, then roll about the new
X axis.

Sign convention:
    Aerospace yaw is positive clockwise looking down, while the trigonometric
    functions assume counter-clockwise positive angles. The matrix therefore
    evaluates sine and cosine of ``-psi``. Every consumer of the matrix
    (gravity resolution, position kinematics) goes through this one
    construction, so the flip must never be applied a second time elsewhere.

Coordinate frames:
- Body: X forward, Y right, Z down
- NED: X north, Y east, Z down

Example:
    >>> import numpy as np
    >>> from sixdof.dynamics import BodyNedDCM
    >>>
    >>> dcm = BodyNedDCM(roll=0.0, pitch=0.0, yaw=np.radians(90.0))
    >>> ned = dcm.transform_from_body(np.array([50.0, 0.0, 0.0]))
"""

import numpy as np
from beartype import beartype
from numba import njit
from numpy.typing import NDArray

# =============================================================================
# Numba-Optimized Core Functions
# =============================================================================


@njit(cache=True)
def _dcm_321(phi: float, theta: float, psi: float) -> np.ndarray:
    """Numba-optimized 3-2-1 direction cosine matrix."""
    s_phi = np.sin(phi)
    c_phi = np.cos(phi)
    s_theta = np.sin(theta)
    c_theta = np.cos(theta)

    # Aerospace yaw is clockwise-positive; evaluate the trig at -psi.
    s_psi = np.sin(-psi)
    c_psi = np.cos(-psi)

    m = np.empty((3, 3))

    m[0, 0] = c_theta * c_psi
    m[0, 1] = c_theta * s_psi
    m[0, 2] = -s_theta

    m[1, 0] = s_phi * s_theta * c_psi - c_phi * s_psi
    m[1, 1] = s_phi * s_theta * s_psi + c_phi * c_psi
    m[1, 2] = s_phi * c_theta

    m[2, 0] = c_phi * s_theta * c_psi + s_phi * s_psi
    m[2, 1] = c_phi * s_theta * s_psi - s_phi * c_psi
    m[2, 2] = c_phi * c_theta

    return m


@beartype
def body_to_ned_matrix(roll: float, pitch: float, yaw: float) -> NDArray[np.float64]:
    """Build the body-to-NED DCM for a set of Euler angles.

    Args:
        roll: Roll angle phi [rad]
        pitch: Pitch angle theta [rad]
        yaw: Yaw angle psi [rad]

    Returns:
        3x3 rotation matrix with no negative-zero entries
    """
    m = _dcm_321(roll, pitch, yaw)
    # -0.0 == 0.0, so this replaces negative zeros with positive ones
    m[m == 0.0] = 0.0
    return m


# =============================================================================
# DCM Class
# =============================================================================


@beartype
class BodyNedDCM:
    """Direction cosine matrix between the body and NED frames.

    The matrix is orthogonal by construction, so its transpose is used as
    its inverse without checking. ``is_orthogonal`` and ``determinant`` are
    diagnostics only.

    At pitch = +/-90 deg (gimbal lock) the matrix is still a valid rotation;
    roll and yaw just stop being distinguishable.

    Example:
        >>> dcm = BodyNedDCM(roll=0.0, pitch=0.0, yaw=0.0)
        >>> dcm.transform_from_body(np.array([50.0, 0.0, 0.0]))
        array([50.,  0.,  0.])
    """

    def __init__(self, roll: float, pitch: float, yaw: float) -> None:
        """Initialize from Euler angles.

        Args:
            roll: Roll angle phi [rad]
            pitch: Pitch angle theta [rad]
            yaw: Yaw angle psi [rad]
        """
        self.roll = roll
        self.pitch = pitch
        self.yaw = yaw
        self._matrix = body_to_ned_matrix(roll, pitch, yaw)

    @classmethod
    def from_euler(cls, attitude: NDArray[np.float64]) -> "BodyNedDCM":
        """Create from an attitude vector [roll, pitch, yaw] [rad]."""
        return cls(float(attitude[0]), float(attitude[1]), float(attitude[2]))

    def matrix(self) -> NDArray[np.float64]:
        """Get a copy of the body-to-NED matrix."""
        return self._matrix.copy()

    def transpose(self) -> NDArray[np.float64]:
        """Get the NED-to-body matrix."""
        return self._matrix.T.copy()

    def inverse(self) -> NDArray[np.float64]:
        """Alias for transpose(); exact for an orthogonal matrix."""
        return self.transpose()

    def transform_from_body(self, vector: NDArray[np.float64]) -> NDArray[np.float64]:
        """Transform a body-frame vector [x, y, z] to NED [north, east, down]."""
        return self._matrix @ vector

    def transform_to_body(self, vector: NDArray[np.float64]) -> NDArray[np.float64]:
        """Transform an NED vector [north, east, down] to body frame [x, y, z]."""
        return self._matrix.T @ vector

    def is_orthogonal(self, tolerance: float = 1e-10) -> bool:
        """Check M @ M.T against the identity within tolerance."""
        product = self._matrix @ self._matrix.T
        return bool(np.all(np.abs(product - np.eye(3)) <= tolerance))

    def determinant(self) -> float:
        """Determinant of the matrix; 1 for a proper rotation."""
        return float(np.linalg.det(self._matrix))

    def __repr__(self) -> str:
        return (
            f"BodyNedDCM(roll={self.roll:.6f}, pitch={self.pitch:.6f}, "
            f"yaw={self.yaw:.6f})"
        )
