"""
Array-level helpers for rotdiff.

Modules
-------
quaternion : Quaternion operations (scalar-first, Hamilton)
rotations : Elementary rotations, hat/vee, Euler angles
"""

from rotdiff.utils.quaternion import (
    dcm_to_quat,
    omega_matrix,
    quat_angle,
    quat_axis,
    quat_conjugate,
    quat_derivative,
    quat_from_axis_angle,
    quat_identity,
    quat_multiply,
    quat_normalize,
    quat_random,
    quat_to_dcm,
    quat_to_rotvec,
    rotvec_to_quat,
)
from rotdiff.utils.rotations import (
    dcm_to_euler,
    euler_to_dcm,
    euler_to_quat,
    quat_to_euler,
    rotx,
    roty,
    rotz,
    skew,
    skew_part,
    unskew,
)

__all__ = [
    "dcm_to_euler",
    "dcm_to_quat",
    "euler_to_dcm",
    "euler_to_quat",
    "omega_matrix",
    "quat_angle",
    "quat_axis",
    "quat_conjugate",
    "quat_derivative",
    "quat_from_axis_angle",
    "quat_identity",
    "quat_multiply",
    "quat_normalize",
    "quat_random",
    "quat_to_dcm",
    "quat_to_euler",
    "quat_to_rotvec",
    "rotvec_to_quat",
    "rotx",
    "roty",
    "rotz",
    "skew",
    "skew_part",
    "unskew",
]
