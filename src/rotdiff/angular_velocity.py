"""
Angular velocity of a body relative to the inertial frame.

``LocalAngularVelocity`` holds the body rate B_ω_IB in body coordinates; it is
what every rotation-rate conversion produces and consumes. Its inertial-frame
dual ``GlobalAngularVelocity`` holds the same physical vector in inertial
coordinates, I_ω_IB = R @ B_ω_IB.

Both usages describe the same physical quantity. The usage tag only records
which rotation convention the velocity is paired with, so that an ACTIVE
velocity cannot be fed into a PASSIVE conversion by accident.
"""

import numpy as np

from rotdiff.base import AngularVelocityBase, RotationBase
from rotdiff.usage import RotationUsage


def _body_to_inertial(rotation: RotationBase) -> np.ndarray:
    """Matrix mapping body coordinates to inertial coordinates."""
    if rotation.usage is RotationUsage.ACTIVE:
        return rotation.matrix_array()
    return rotation.matrix_array().T


def _check_pair(cls, rotation: RotationBase, velocity: AngularVelocityBase, expected_family: type) -> type:
    target = cls.for_usage(rotation.usage) if cls.usage is None else cls
    if target.usage is not rotation.usage:
        raise TypeError(f"{target.__name__} cannot be paired with {type(rotation).__name__}")
    if type(velocity) is not expected_family.for_usage(rotation.usage):
        raise TypeError(f"expected a {rotation.usage.name} {expected_family.__name__}, got {type(velocity).__name__}")
    return target


class LocalAngularVelocity(AngularVelocityBase):
    """
    Body-frame angular velocity [ωx, ωy, ωz].

    Parameters
    ----------
    x, y, z : float
        Components in rad/s, zero by default.
    dtype : numpy dtype, optional
        Scalar type, float64 by default.

    Examples
    --------
    >>> q = RotationQuaternionActive()
    >>> dq = RotationQuaternionDiffActive(0.0, 0.0, 0.0, 0.5)
    >>> omega = LocalAngularVelocityActive.from_rotation_diff(q, dq)  # (0, 0, 1)
    """

    @classmethod
    def from_rotation_diff(cls, rotation: RotationBase, rate):
        """
        Angular velocity produced by a rotation and its rate.

        Called on the family class, the concrete class is picked from the
        rotation's usage.

        Parameters
        ----------
        rotation : RotationBase
            Rotation the rate is taken at.
        rate : RotationDiffBase
            Rate of the same family and usage as ``rotation``.

        Raises
        ------
        TypeError
            If no conversion is registered for the combination.
        """
        from rotdiff.conversions import convert  # noqa: PLC0415

        target = cls.for_usage(rotation.usage) if cls.usage is None else cls
        return convert(target, rotation, rate)

    def to_global(self, rotation: RotationBase) -> "GlobalAngularVelocity":
        """This velocity in inertial coordinates (see :class:`GlobalAngularVelocity`)."""
        return GlobalAngularVelocity.from_local(rotation, self)


class LocalAngularVelocityActive(LocalAngularVelocity):
    usage = RotationUsage.ACTIVE


class LocalAngularVelocityPassive(LocalAngularVelocity):
    usage = RotationUsage.PASSIVE


class GlobalAngularVelocity(AngularVelocityBase):
    """
    Inertial-frame angular velocity [ωx, ωy, ωz].

    Related to the local velocity by the body-to-inertial matrix, which is
    the stored matrix R of an ACTIVE rotation and the transpose of the
    stored matrix C of a PASSIVE one.
    """

    @classmethod
    def from_local(cls, rotation: RotationBase, local: LocalAngularVelocity) -> "GlobalAngularVelocity":
        """
        Express a local angular velocity in inertial coordinates.

        Raises
        ------
        TypeError
            If ``local`` or ``cls`` does not match the rotation's usage.
        """
        target = _check_pair(cls, rotation, local, LocalAngularVelocity)
        return target.from_array((_body_to_inertial(rotation) @ local.vector).astype(local.dtype))

    def to_local(self, rotation: RotationBase) -> LocalAngularVelocity:
        """Express this velocity in body coordinates at ``rotation``."""
        target = _check_pair(LocalAngularVelocity, rotation, self, GlobalAngularVelocity)
        return target.from_array((_body_to_inertial(rotation).T @ self.vector).astype(self.dtype))


class GlobalAngularVelocityActive(GlobalAngularVelocity):
    usage = RotationUsage.ACTIVE


class GlobalAngularVelocityPassive(GlobalAngularVelocity):
    usage = RotationUsage.PASSIVE
