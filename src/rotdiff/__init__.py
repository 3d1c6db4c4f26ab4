"""
rotdiff - Rotations, rotation rates and angular velocity.

This library provides six rotation parameterizations (quaternion, rotation
matrix, angle-axis, rotation vector, ZYX and XYZ Euler angles), their time
derivatives, and closed-form conversions between a rotation rate and the
body angular velocity. Every type exists once per usage convention
(ACTIVE / PASSIVE) so that the two conventions never mix.

Visualization utilities are available in the `rotdiff.visualization` submodule:
    from rotdiff.visualization import plot_angular_velocity
"""

__version__ = "0.1.0"

from rotdiff.angular_velocity import (
    GlobalAngularVelocity,
    GlobalAngularVelocityActive,
    GlobalAngularVelocityPassive,
    LocalAngularVelocity,
    LocalAngularVelocityActive,
    LocalAngularVelocityPassive,
)
from rotdiff.base import AngularVelocityBase, RotationBase, RotationDiffBase
from rotdiff.conversions import (
    CONVERSION_REGISTRY,
    ConversionKey,
    convert,
    get_conversion,
    list_conversions,
    to_local_angular_velocity,
    to_rotation_diff,
)
from rotdiff.rotation_diffs import (
    AngleAxisDiff,
    AngleAxisDiffActive,
    AngleAxisDiffPassive,
    EulerAnglesXyzDiff,
    EulerAnglesXyzDiffActive,
    EulerAnglesXyzDiffPassive,
    EulerAnglesZyxDiff,
    EulerAnglesZyxDiffActive,
    EulerAnglesZyxDiffPassive,
    RotationMatrixDiff,
    RotationMatrixDiffActive,
    RotationMatrixDiffPassive,
    RotationQuaternionDiff,
    RotationQuaternionDiffActive,
    RotationQuaternionDiffPassive,
    RotationVectorDiff,
    RotationVectorDiffActive,
    RotationVectorDiffPassive,
)
from rotdiff.rotations import (
    AngleAxis,
    AngleAxisActive,
    AngleAxisPassive,
    EulerAnglesXyz,
    EulerAnglesXyzActive,
    EulerAnglesXyzPassive,
    EulerAnglesZyx,
    EulerAnglesZyxActive,
    EulerAnglesZyxPassive,
    RotationMatrix,
    RotationMatrixActive,
    RotationMatrixPassive,
    RotationQuaternion,
    RotationQuaternionActive,
    RotationQuaternionPassive,
    RotationVector,
    RotationVectorActive,
    RotationVectorPassive,
)
from rotdiff.usage import RotationUsage

__all__ = [
    "CONVERSION_REGISTRY",
    "AngleAxis",
    "AngleAxisActive",
    "AngleAxisDiff",
    "AngleAxisDiffActive",
    "AngleAxisDiffPassive",
    "AngleAxisPassive",
    "AngularVelocityBase",
    "ConversionKey",
    "EulerAnglesXyz",
    "EulerAnglesXyzActive",
    "EulerAnglesXyzDiff",
    "EulerAnglesXyzDiffActive",
    "EulerAnglesXyzDiffPassive",
    "EulerAnglesXyzPassive",
    "EulerAnglesZyx",
    "EulerAnglesZyxActive",
    "EulerAnglesZyxDiff",
    "EulerAnglesZyxDiffActive",
    "EulerAnglesZyxDiffPassive",
    "EulerAnglesZyxPassive",
    "GlobalAngularVelocity",
    "GlobalAngularVelocityActive",
    "GlobalAngularVelocityPassive",
    "LocalAngularVelocity",
    "LocalAngularVelocityActive",
    "LocalAngularVelocityPassive",
    "RotationBase",
    "RotationDiffBase",
    "RotationMatrix",
    "RotationMatrixActive",
    "RotationMatrixDiff",
    "RotationMatrixDiffActive",
    "RotationMatrixDiffPassive",
    "RotationMatrixPassive",
    "RotationQuaternion",
    "RotationQuaternionActive",
    "RotationQuaternionDiff",
    "RotationQuaternionDiffActive",
    "RotationQuaternionDiffPassive",
    "RotationQuaternionPassive",
    "RotationUsage",
    "RotationVector",
    "RotationVectorActive",
    "RotationVectorDiff",
    "RotationVectorDiffActive",
    "RotationVectorDiffPassive",
    "RotationVectorPassive",
    "convert",
    "get_conversion",
    "list_conversions",
    "to_local_angular_velocity",
    "to_rotation_diff",
]
