"""
Time derivatives of rotation representations.

Each rate family mirrors the component layout of its rotation family but is
not a rotation itself: a quaternion rate need not be unit norm, a matrix rate
is not orthonormal. A rate is only meaningful at the rotation it was taken
at, which is why every conversion takes the pair (rotation, rate).
"""

from typing import Dict

import numpy as np

from rotdiff import rotations
from rotdiff.base import RotationDiffBase
from rotdiff.usage import RotationUsage

# =============================================================================
# Quaternion Rate
# =============================================================================


class RotationQuaternionDiff(RotationDiffBase):
    """Quaternion rate [ẇ, ẋ, ẏ, ż]; no norm constraint."""

    _shape = (4,)

    def __init__(self, w: float = 0.0, x: float = 0.0, y: float = 0.0, z: float = 0.0, dtype=np.float64):
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


class RotationQuaternionDiffActive(RotationQuaternionDiff):
    usage = RotationUsage.ACTIVE


class RotationQuaternionDiffPassive(RotationQuaternionDiff):
    usage = RotationUsage.PASSIVE


# =============================================================================
# Rotation Matrix Rate
# =============================================================================


class RotationMatrixDiff(RotationDiffBase):
    """Rate of a rotation matrix, a general 3x3 matrix (zero by default)."""

    _shape = (3, 3)

    def __init__(self, matrix=None, dtype=np.float64):
        self._assign(np.zeros((3, 3)) if matrix is None else matrix, dtype)

    @property
    def matrix(self) -> np.ndarray:
        return self._data.copy()


class RotationMatrixDiffActive(RotationMatrixDiff):
    usage = RotationUsage.ACTIVE


class RotationMatrixDiffPassive(RotationMatrixDiff):
    usage = RotationUsage.PASSIVE


# =============================================================================
# Angle-Axis Rate
# =============================================================================


class AngleAxisDiff(RotationDiffBase):
    """
    Angle rate and axis rate, stored as [θ̇, ṅx, ṅy, ṅz].

    For a unit axis the axis rate is orthogonal to the axis.
    """

    _shape = (4,)

    def __init__(self, angle: float = 0.0, axis=(0.0, 0.0, 0.0), dtype=np.float64):
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


class AngleAxisDiffActive(AngleAxisDiff):
    usage = RotationUsage.ACTIVE


class AngleAxisDiffPassive(AngleAxisDiff):
    usage = RotationUsage.PASSIVE


# =============================================================================
# Rotation Vector Rate
# =============================================================================


class RotationVectorDiff(RotationDiffBase):
    """Rotation vector rate [v̇x, v̇y, v̇z]."""

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


class RotationVectorDiffActive(RotationVectorDiff):
    usage = RotationUsage.ACTIVE


class RotationVectorDiffPassive(RotationVectorDiff):
    usage = RotationUsage.PASSIVE


# =============================================================================
# Euler Angle Rates
# =============================================================================


class EulerAnglesZyxDiff(RotationDiffBase):
    """ZYX Euler angle rates, stored as [yaw rate, pitch rate, roll rate]."""

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


class EulerAnglesZyxDiffActive(EulerAnglesZyxDiff):
    usage = RotationUsage.ACTIVE


class EulerAnglesZyxDiffPassive(EulerAnglesZyxDiff):
    usage = RotationUsage.PASSIVE


class EulerAnglesXyzDiff(RotationDiffBase):
    """XYZ Euler angle rates, stored as [roll rate, pitch rate, yaw rate]."""

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


class EulerAnglesXyzDiffActive(EulerAnglesXyzDiff):
    usage = RotationUsage.ACTIVE


class EulerAnglesXyzDiffPassive(EulerAnglesXyzDiff):
    usage = RotationUsage.PASSIVE


# Rate class paired with each concrete rotation class
DIFF_TYPES: Dict[type, type] = {
    rotations.RotationQuaternionActive: RotationQuaternionDiffActive,
    rotations.RotationQuaternionPassive: RotationQuaternionDiffPassive,
    rotations.RotationMatrixActive: RotationMatrixDiffActive,
    rotations.RotationMatrixPassive: RotationMatrixDiffPassive,
    rotations.AngleAxisActive: AngleAxisDiffActive,
    rotations.AngleAxisPassive: AngleAxisDiffPassive,
    rotations.RotationVectorActive: RotationVectorDiffActive,
    rotations.RotationVectorPassive: RotationVectorDiffPassive,
    rotations.EulerAnglesZyxActive: EulerAnglesZyxDiffActive,
    rotations.EulerAnglesZyxPassive: EulerAnglesZyxDiffPassive,
    rotations.EulerAnglesXyzActive: EulerAnglesXyzDiffActive,
    rotations.EulerAnglesXyzPassive: EulerAnglesXyzDiffPassive,
}


def diff_type_for(rotation_type: type) -> type:
    """
    Rate class paired with a concrete rotation class.

    Raises
    ------
    TypeError
        If ``rotation_type`` is not a concrete rotation class.
    """
    try:
        return DIFF_TYPES[rotation_type]
    except KeyError:
        raise TypeError(f"no rate representation for {rotation_type.__name__}") from None
