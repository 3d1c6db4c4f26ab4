"""
Differential conversions between rotation rates and angular velocity.

Every supported combination is an explicit entry of ``CONVERSION_REGISTRY``,
keyed by the concrete classes involved. There is no generic fallback: a
combination without a hand-derived formula, including any pairing of an
ACTIVE object with a PASSIVE one, has no key and raises ``TypeError``.

Formula modules
---------------
quaternion : ω = 2 H(q) q̇
rotation_matrix : [ω]× = Rᵀ Ṙ
angle_axis : ω = n θ̇ + sin θ ṅ - (1 - cos θ) n × ṅ
rotation_vector : ω = J_r(v) v̇, with a small-angle series branch
euler_angles : ZYX and XYZ angle rates

Usage
-----
>>> q = RotationQuaternionActive()
>>> dq = RotationQuaternionDiffActive(0.0, 0.5, 0.0, 0.0)
>>> omega = to_local_angular_velocity(q, dq)
>>> dq_back = to_rotation_diff(q, omega)

Or look a formula up directly:
>>> key = ConversionKey(LocalAngularVelocityActive, RotationQuaternionDiffActive, RotationQuaternionActive)
>>> formula = get_conversion(*key)
"""

import logging
from typing import Callable, Dict, List, NamedTuple, overload

import numpy as np

from rotdiff.angular_velocity import (
    LocalAngularVelocity,
    LocalAngularVelocityActive,
    LocalAngularVelocityPassive,
)
from rotdiff.base import RotationBase, RotationDiffBase
from rotdiff.rotation_diffs import (
    AngleAxisDiffActive,
    AngleAxisDiffPassive,
    EulerAnglesXyzDiffActive,
    EulerAnglesXyzDiffPassive,
    EulerAnglesZyxDiffActive,
    EulerAnglesZyxDiffPassive,
    RotationMatrixDiffActive,
    RotationMatrixDiffPassive,
    RotationQuaternionDiffActive,
    RotationQuaternionDiffPassive,
    RotationVectorDiffActive,
    RotationVectorDiffPassive,
    diff_type_for,
)
from rotdiff.rotations import (
    AngleAxisActive,
    AngleAxisPassive,
    EulerAnglesXyzActive,
    EulerAnglesXyzPassive,
    EulerAnglesZyxActive,
    EulerAnglesZyxPassive,
    RotationMatrixActive,
    RotationMatrixPassive,
    RotationQuaternionActive,
    RotationQuaternionPassive,
    RotationVectorActive,
    RotationVectorPassive,
)

from . import angle_axis, euler_angles, quaternion, rotation_matrix, rotation_vector

_LOGGER: logging.Logger = logging.getLogger(__name__)


class ConversionKey(NamedTuple):
    """Concrete classes identifying one conversion formula."""

    target: type
    source: type
    rotation: type


# Local angular velocity classes
_WA = LocalAngularVelocityActive
_WP = LocalAngularVelocityPassive

# Registry mapping (target, source, rotation) classes to array formulas
# f(rotation_array, source_array) -> target_array
CONVERSION_REGISTRY: Dict[ConversionKey, Callable] = {
    # Rotation rate -> local angular velocity
    ConversionKey(_WA, RotationQuaternionDiffActive, RotationQuaternionActive): quaternion.angular_velocity_active,
    ConversionKey(_WP, RotationQuaternionDiffPassive, RotationQuaternionPassive): quaternion.angular_velocity_passive,
    ConversionKey(_WA, RotationMatrixDiffActive, RotationMatrixActive): rotation_matrix.angular_velocity_active,
    ConversionKey(_WP, RotationMatrixDiffPassive, RotationMatrixPassive): rotation_matrix.angular_velocity_passive,
    ConversionKey(_WA, AngleAxisDiffActive, AngleAxisActive): angle_axis.angular_velocity_active,
    ConversionKey(_WP, AngleAxisDiffPassive, AngleAxisPassive): angle_axis.angular_velocity_passive,
    ConversionKey(_WA, RotationVectorDiffActive, RotationVectorActive): rotation_vector.angular_velocity_active,
    ConversionKey(_WP, RotationVectorDiffPassive, RotationVectorPassive): rotation_vector.angular_velocity_passive,
    ConversionKey(_WA, EulerAnglesZyxDiffActive, EulerAnglesZyxActive): euler_angles.zyx_angular_velocity_active,
    ConversionKey(_WP, EulerAnglesZyxDiffPassive, EulerAnglesZyxPassive): euler_angles.zyx_angular_velocity_passive,
    ConversionKey(_WA, EulerAnglesXyzDiffActive, EulerAnglesXyzActive): euler_angles.xyz_angular_velocity_active,
    ConversionKey(_WP, EulerAnglesXyzDiffPassive, EulerAnglesXyzPassive): euler_angles.xyz_angular_velocity_passive,
    # Local angular velocity -> rotation rate
    ConversionKey(RotationQuaternionDiffActive, _WA, RotationQuaternionActive): quaternion.rate_active,
    ConversionKey(RotationQuaternionDiffPassive, _WP, RotationQuaternionPassive): quaternion.rate_passive,
    ConversionKey(RotationMatrixDiffActive, _WA, RotationMatrixActive): rotation_matrix.rate_active,
    ConversionKey(RotationMatrixDiffPassive, _WP, RotationMatrixPassive): rotation_matrix.rate_passive,
    ConversionKey(AngleAxisDiffActive, _WA, AngleAxisActive): angle_axis.rate_active,
    ConversionKey(AngleAxisDiffPassive, _WP, AngleAxisPassive): angle_axis.rate_passive,
    ConversionKey(RotationVectorDiffActive, _WA, RotationVectorActive): rotation_vector.rate_active,
    ConversionKey(RotationVectorDiffPassive, _WP, RotationVectorPassive): rotation_vector.rate_passive,
    ConversionKey(EulerAnglesZyxDiffActive, _WA, EulerAnglesZyxActive): euler_angles.zyx_rate_active,
    ConversionKey(EulerAnglesZyxDiffPassive, _WP, EulerAnglesZyxPassive): euler_angles.zyx_rate_passive,
    ConversionKey(EulerAnglesXyzDiffActive, _WA, EulerAnglesXyzActive): euler_angles.xyz_rate_active,
    ConversionKey(EulerAnglesXyzDiffPassive, _WP, EulerAnglesXyzPassive): euler_angles.xyz_rate_passive,
}


def get_conversion(target: type, source: type, rotation: type) -> Callable:
    """
    Get the formula converting ``source`` into ``target`` at a rotation.

    Parameters
    ----------
    target : type
        Concrete class of the result.
    source : type
        Concrete class of the input rate or angular velocity.
    rotation : type
        Concrete class of the rotation the conversion is evaluated at.

    Returns
    -------
    callable
        Array formula f(rotation_array, source_array) -> target_array.

    Raises
    ------
    TypeError
        If no formula is registered for the three classes.

    Examples
    --------
    >>> f = get_conversion(LocalAngularVelocityActive, RotationVectorDiffActive, RotationVectorActive)
    >>> omega = f(np.array([0.0, 0.0, 0.1]), np.array([0.0, 0.0, 1.0]))
    """
    key = ConversionKey(target, source, rotation)
    if key not in CONVERSION_REGISTRY:
        _LOGGER.debug("no conversion registered for %s", key)
        raise TypeError(
            f"No conversion from {getattr(source, '__name__', source)} to "
            f"{getattr(target, '__name__', target)} at {getattr(rotation, '__name__', rotation)}"
        )

    return CONVERSION_REGISTRY[key]


def list_conversions() -> List[ConversionKey]:
    """
    List all registered conversions.

    Returns
    -------
    list of ConversionKey
        Keys of ``CONVERSION_REGISTRY``.
    """
    return list(CONVERSION_REGISTRY.keys())


def convert(target: type, rotation: RotationBase, source):
    """
    Convert a rate or angular velocity into ``target`` at ``rotation``.

    Parameters
    ----------
    target : type
        Concrete class of the result.
    rotation : RotationBase
        Rotation the conversion is evaluated at.
    source : RotationDiffBase or LocalAngularVelocity
        Input value.

    Returns
    -------
    object
        Instance of ``target`` with the dtype of ``rotation``.

    Raises
    ------
    TypeError
        If no formula is registered, or if the scalar types differ.
    """
    formula = get_conversion(target, type(source), type(rotation))
    if source.dtype != rotation.dtype:
        raise TypeError(f"scalar types differ: rotation is {rotation.dtype}, {type(source).__name__} is {source.dtype}")

    result = formula(rotation.to_array(), source.to_array())
    return target.from_array(np.asarray(result), rotation.dtype)


# =============================================================================
# Entry points
# =============================================================================


@overload
def to_local_angular_velocity(
    rotation: RotationQuaternionActive, rate: RotationQuaternionDiffActive
) -> LocalAngularVelocityActive: ...
@overload
def to_local_angular_velocity(
    rotation: RotationQuaternionPassive, rate: RotationQuaternionDiffPassive
) -> LocalAngularVelocityPassive: ...
@overload
def to_local_angular_velocity(
    rotation: RotationMatrixActive, rate: RotationMatrixDiffActive
) -> LocalAngularVelocityActive: ...
@overload
def to_local_angular_velocity(
    rotation: RotationMatrixPassive, rate: RotationMatrixDiffPassive
) -> LocalAngularVelocityPassive: ...
@overload
def to_local_angular_velocity(rotation: AngleAxisActive, rate: AngleAxisDiffActive) -> LocalAngularVelocityActive: ...
@overload
def to_local_angular_velocity(
    rotation: AngleAxisPassive, rate: AngleAxisDiffPassive
) -> LocalAngularVelocityPassive: ...
@overload
def to_local_angular_velocity(
    rotation: RotationVectorActive, rate: RotationVectorDiffActive
) -> LocalAngularVelocityActive: ...
@overload
def to_local_angular_velocity(
    rotation: RotationVectorPassive, rate: RotationVectorDiffPassive
) -> LocalAngularVelocityPassive: ...
@overload
def to_local_angular_velocity(
    rotation: EulerAnglesZyxActive, rate: EulerAnglesZyxDiffActive
) -> LocalAngularVelocityActive: ...
@overload
def to_local_angular_velocity(
    rotation: EulerAnglesZyxPassive, rate: EulerAnglesZyxDiffPassive
) -> LocalAngularVelocityPassive: ...
@overload
def to_local_angular_velocity(
    rotation: EulerAnglesXyzActive, rate: EulerAnglesXyzDiffActive
) -> LocalAngularVelocityActive: ...
@overload
def to_local_angular_velocity(
    rotation: EulerAnglesXyzPassive, rate: EulerAnglesXyzDiffPassive
) -> LocalAngularVelocityPassive: ...


def to_local_angular_velocity(rotation, rate):
    """
    Body angular velocity of a rotation moving at ``rate``.

    Parameters
    ----------
    rotation : RotationBase
        Rotation the rate is taken at.
    rate : RotationDiffBase
        Rate of the same family and usage as ``rotation``.

    Returns
    -------
    LocalAngularVelocityActive or LocalAngularVelocityPassive
        Angular velocity of the rotation's usage.

    Raises
    ------
    TypeError
        If the rate does not belong to the rotation's family and usage.
    """
    return convert(LocalAngularVelocity.for_usage(rotation.usage), rotation, rate)


@overload
def to_rotation_diff(
    rotation: RotationQuaternionActive, angular_velocity: LocalAngularVelocityActive
) -> RotationQuaternionDiffActive: ...
@overload
def to_rotation_diff(
    rotation: RotationQuaternionPassive, angular_velocity: LocalAngularVelocityPassive
) -> RotationQuaternionDiffPassive: ...
@overload
def to_rotation_diff(
    rotation: RotationMatrixActive, angular_velocity: LocalAngularVelocityActive
) -> RotationMatrixDiffActive: ...
@overload
def to_rotation_diff(
    rotation: RotationMatrixPassive, angular_velocity: LocalAngularVelocityPassive
) -> RotationMatrixDiffPassive: ...
@overload
def to_rotation_diff(
    rotation: AngleAxisActive, angular_velocity: LocalAngularVelocityActive
) -> AngleAxisDiffActive: ...
@overload
def to_rotation_diff(
    rotation: AngleAxisPassive, angular_velocity: LocalAngularVelocityPassive
) -> AngleAxisDiffPassive: ...
@overload
def to_rotation_diff(
    rotation: RotationVectorActive, angular_velocity: LocalAngularVelocityActive
) -> RotationVectorDiffActive: ...
@overload
def to_rotation_diff(
    rotation: RotationVectorPassive, angular_velocity: LocalAngularVelocityPassive
) -> RotationVectorDiffPassive: ...
@overload
def to_rotation_diff(
    rotation: EulerAnglesZyxActive, angular_velocity: LocalAngularVelocityActive
) -> EulerAnglesZyxDiffActive: ...
@overload
def to_rotation_diff(
    rotation: EulerAnglesZyxPassive, angular_velocity: LocalAngularVelocityPassive
) -> EulerAnglesZyxDiffPassive: ...
@overload
def to_rotation_diff(
    rotation: EulerAnglesXyzActive, angular_velocity: LocalAngularVelocityActive
) -> EulerAnglesXyzDiffActive: ...
@overload
def to_rotation_diff(
    rotation: EulerAnglesXyzPassive, angular_velocity: LocalAngularVelocityPassive
) -> EulerAnglesXyzDiffPassive: ...


def to_rotation_diff(rotation, angular_velocity) -> RotationDiffBase:
    """
    Rate of ``rotation`` produced by a body angular velocity.

    Parameters
    ----------
    rotation : RotationBase
        Rotation the rate is taken at.
    angular_velocity : LocalAngularVelocityActive or LocalAngularVelocityPassive
        Angular velocity of the rotation's usage.

    Returns
    -------
    RotationDiffBase
        Rate in the family and usage of ``rotation``.

    Raises
    ------
    TypeError
        If ``rotation`` is not a concrete rotation or the usages differ.
    """
    return convert(diff_type_for(type(rotation)), rotation, angular_velocity)


__all__ = [
    "CONVERSION_REGISTRY",
    "ConversionKey",
    "angle_axis",
    "convert",
    "euler_angles",
    "get_conversion",
    "list_conversions",
    "quaternion",
    "rotation_matrix",
    "rotation_vector",
    "to_local_angular_velocity",
    "to_rotation_diff",
]
