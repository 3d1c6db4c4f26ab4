"""
Rotation representations.

Six families, each with an ACTIVE and a PASSIVE concrete class:

=====================  =========================  ==============================
Family                 Storage order              Rotation matrix
=====================  =========================  ==============================
RotationQuaternion     [w, x, y, z]               Hamilton, scalar first
RotationMatrix         3x3                        the matrix itself
AngleAxis              [angle, nx, ny, nz]        exp(angle·skew(n))
RotationVector         [x, y, z]                  exp(skew(v))
EulerAnglesZyx         [yaw, pitch, roll]         Rz(yaw) Ry(pitch) Rx(roll)
EulerAnglesXyz         [roll, pitch, yaw]         Rx(roll) Ry(pitch) Rz(yaw)
=====================  =========================  ==============================

The parameter-to-matrix map is the same for both usages. An ACTIVE matrix
R maps body coordinates to inertial coordinates; a PASSIVE matrix C = Rᵀ
maps inertial coordinates to body coordinates.

Examples
--------
>>> q = RotationQuaternionActive(np.cos(0.25), 0.0, 0.0, np.sin(0.25))
>>> q.to_euler_angles_zyx().yaw  # 0.5 rad about z
"""

import numpy as np

from rotdiff.base import RotationBase
from rotdiff.usage import RotationUsage
from rotdiff.utils.quaternion import (
    dcm_to_quat,
    quat_angle,
    quat_axis,
    quat_conjugate,
    quat_from_axis_angle,
    quat_normalize,
    quat_to_dcm,
    quat_to_rotvec,
    rotvec_to_quat,
)
from rotdiff.utils.rotations import euler_to_quat, quat_to_euler

# =============================================================================
# Quaternion
# =============================================================================


class RotationQuaternion(RotationBase):
    """
    Rotation as a unit quaternion [w, x, y, z].

    Parameters
    ----------
    w, x, y, z : float
        Scalar and vector components. Defaults give the identity.
    dtype : numpy dtype, optional
        Scalar type, float64 by default.

    Notes
    -----
    The components are stored as given; callers are responsible for unit
    norm (see :meth:`normalized`).
    """

    _shape = (4,)

    def __init__(self, w: float = 1.0, x: float = 0.0, y: float = 0.0, z: float = 0.0, dtype=np.float64):
        self._assign([w, x, y, z], dtype)

    @property
    def w(self):
        return self._data[0]

    @property
    def x(self):
        return self._data[1]

    @property
    def y(self):
        return self._data[2]

    @property
    def z(self):
        return self._data[3]

    @property
    def real(self):
        """Scalar part w."""
        return self._data[0]

    @property
    def imaginary(self) -> np.ndarray:
        """Vector part [x, y, z]."""
        return self._data[1:4].copy()

    def norm(self):
        return np.linalg.norm(self._data)

    def conjugated(self) -> "RotationQuaternion":
        """Quaternion with negated vector part (the inverse rotation)."""
        return type(self).from_array(quat_conjugate(self._data), self.dtype)

    def normalized(self) -> "RotationQuaternion":
        """Copy scaled to unit norm."""
        return type(self).from_array(quat_normalize(self._data), self.dtype)

    def _to_quaternion_array(self) -> np.ndarray:
        return self._data.astype(np.float64)

    @classmethod
    def _from_quaternion_array(cls, q: np.ndarray, dtype):
        return cls.from_array(q, dtype)


class RotationQuaternionActive(RotationQuaternion):
    """Quaternion rotation, ACTIVE usage."""

    usage = RotationUsage.ACTIVE


class RotationQuaternionPassive(RotationQuaternion):
    """Quaternion rotation, PASSIVE usage."""

    usage = RotationUsage.PASSIVE


# =============================================================================
# Rotation Matrix
# =============================================================================


class RotationMatrix(RotationBase):
    """
    Rotation as a 3x3 orthonormal matrix with determinant +1.

    Parameters
    ----------
    matrix : array_like, shape (3, 3), optional
        Matrix entries. Defaults to the identity.
    dtype : numpy dtype, optional
        Scalar type, float64 by default.
    """

    _shape = (3, 3)

    def __init__(self, matrix=None, dtype=np.float64):
        self._assign(np.eye(3) if matrix is None else matrix, dtype)

    @property
    def matrix(self) -> np.ndarray:
        """Copy of the matrix entries."""
        return self._data.copy()

    def determinant(self):
        return np.linalg.det(self._data)

    def transposed(self) -> "RotationMatrix":
        return type(self).from_array(self._data.T)

    def inverted(self) -> "RotationMatrix":
        return self.transposed()

    def matrix_array(self) -> np.ndarray:
        return self._data.astype(np.float64)

    def _to_quaternion_array(self) -> np.ndarray:
        return dcm_to_quat(self._data)

    @classmethod
    def _from_quaternion_array(cls, q: np.ndarray, dtype):
        return cls.from_array(quat_to_dcm(q), dtype)

    def __mul__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return type(self).from_array(self._data @ other._data)


class RotationMatrixActive(RotationMatrix):
    """Rotation matrix, ACTIVE usage."""

    usage = RotationUsage.ACTIVE


class RotationMatrixPassive(RotationMatrix):
    """Rotation matrix, PASSIVE usage."""

    usage = RotationUsage.PASSIVE


# =============================================================================
# Angle-Axis
# =============================================================================


class AngleAxis(RotationBase):
    """
    Rotation as an angle about a unit axis.

    Parameters
    ----------
    angle : float
        Rotation angle in radians.
    axis : array_like, shape (3,)
        Unit rotation axis; not renormalized.
    dtype : numpy dtype, optional
        Scalar type, float64 by default.

    Notes
    -----
    Stored as [angle, nx, ny, nz]. Conversions from other representations
    return an angle in [0, π] and the axis [1, 0, 0] for the identity.
    """

    _shape = (4,)

    def __init__(self, angle: float = 0.0, axis=(1.0, 0.0, 0.0), dtype=np.float64):
        axis = np.asarray(axis, dtype=np.float64)
        if axis.shape != (3,):
            raise ValueError(f"axis must have shape (3,), got {axis.shape}")
        self._assign(np.concatenate(([angle], axis)), dtype)

    @property
    def angle(self):
        return self._data[0]

    @property
    def axis(self) -> np.ndarray:
        return self._data[1:4].copy()

    def inverted(self) -> "AngleAxis":
        return type(self).from_array(np.concatenate(([self._data[0]], -self._data[1:4])))

    def _to_quaternion_array(self) -> np.ndarray:
        return quat_from_axis_angle(self._data[1:4], float(self._data[0]))

    @classmethod
    def _from_quaternion_array(cls, q: np.ndarray, dtype):
        return cls.from_array(np.concatenate(([quat_angle(q)], quat_axis(q))), dtype)


class AngleAxisActive(AngleAxis):
    """Angle-axis rotation, ACTIVE usage."""

    usage = RotationUsage.ACTIVE


class AngleAxisPassive(AngleAxis):
    """Angle-axis rotation, PASSIVE usage."""

    usage = RotationUsage.PASSIVE


# =============================================================================
# Rotation Vector
# =============================================================================


class RotationVector(RotationBase):
    """
    Rotation as a rotation vector v = angle·axis.

    Parameters
    ----------
    x, y, z : float
        Components. Defaults give the identity.
    dtype : numpy dtype, optional
        Scalar type, float64 by default.
    """

    _shape = (3,)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0, dtype=np.float64):
        self._assign([x, y, z], dtype)

    @property
    def x(self):
        return self._data[0]

    @property
    def y(self):
        return self._data[1]

    @property
    def z(self):
        return self._data[2]

    @property
    def vector(self) -> np.ndarray:
        return self._data.copy()

    def norm(self):
        """Rotation angle ||v||."""
        return np.linalg.norm(self._data)

    def inverted(self) -> "RotationVector":
        return type(self).from_array(-self._data)

    def _to_quaternion_array(self) -> np.ndarray:
        return rotvec_to_quat(self._data)

    @classmethod
    def _from_quaternion_array(cls, q: np.ndarray, dtype):
        return cls.from_array(quat_to_rotvec(q), dtype)


class RotationVectorActive(RotationVector):
    """Rotation vector, ACTIVE usage."""

    usage = RotationUsage.ACTIVE


class RotationVectorPassive(RotationVector):
    """Rotation vector, PASSIVE usage."""

    usage = RotationUsage.PASSIVE


# =============================================================================
# Euler Angles
# =============================================================================


class EulerAnglesZyx(RotationBase):
    """
    Rotation as ZYX Euler angles, R = Rz(yaw) Ry(pitch) Rx(roll).

    Parameters
    ----------
    yaw, pitch, roll : float
        Angles in radians, stored in this order.
    dtype : numpy dtype, optional
        Scalar type, float64 by default.

    Notes
    -----
    Singular (gimbal lock) at pitch = ±90°.
    """

    _shape = (3,)

    def __init__(self, yaw: float = 0.0, pitch: float = 0.0, roll: float = 0.0, dtype=np.float64):
        self._assign([yaw, pitch, roll], dtype)

    @property
    def yaw(self):
        return self._data[0]

    @property
    def pitch(self):
        return self._data[1]

    @property
    def roll(self):
        return self._data[2]

    def _to_quaternion_array(self) -> np.ndarray:
        yaw, pitch, roll = self._data.astype(np.float64)
        return euler_to_quat(roll, pitch, yaw, "ZYX")

    @classmethod
    def _from_quaternion_array(cls, q: np.ndarray, dtype):
        roll, pitch, yaw = quat_to_euler(q, "ZYX")
        return cls.from_array([yaw, pitch, roll], dtype)


class EulerAnglesZyxActive(EulerAnglesZyx):
    """ZYX Euler angles, ACTIVE usage."""

    usage = RotationUsage.ACTIVE


class EulerAnglesZyxPassive(EulerAnglesZyx):
    """ZYX Euler angles, PASSIVE usage."""

    usage = RotationUsage.PASSIVE


class EulerAnglesXyz(RotationBase):
    """
    Rotation as XYZ Euler angles, R = Rx(roll) Ry(pitch) Rz(yaw).

    Parameters
    ----------
    roll, pitch, yaw : float
        Angles in radians, stored in this order.
    dtype : numpy dtype, optional
        Scalar type, float64 by default.

    Notes
    -----
    Singular (gimbal lock) at pitch = ±90°.
    """

    _shape = (3,)

    def __init__(self, roll: float = 0.0, pitch: float = 0.0, yaw: float = 0.0, dtype=np.float64):
        self._assign([roll, pitch, yaw], dtype)

    @property
    def roll(self):
        return self._data[0]

    @property
    def pitch(self):
        return self._data[1]

    @property
    def yaw(self):
        return self._data[2]

    def _to_quaternion_array(self) -> np.ndarray:
        roll, pitch, yaw = self._data.astype(np.float64)
        return euler_to_quat(roll, pitch, yaw, "XYZ")

    @classmethod
    def _from_quaternion_array(cls, q: np.ndarray, dtype):
        roll, pitch, yaw = quat_to_euler(q, "XYZ")
        return cls.from_array([roll, pitch, yaw], dtype)


class EulerAnglesXyzActive(EulerAnglesXyz):
    """XYZ Euler angles, ACTIVE usage."""

    usage = RotationUsage.ACTIVE


class EulerAnglesXyzPassive(EulerAnglesXyz):
    """XYZ Euler angles, PASSIVE usage."""

    usage = RotationUsage.PASSIVE
