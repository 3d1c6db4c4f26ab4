"""
Rotation vector rate <-> body angular velocity.

For an ACTIVE rotation vector v with angle θ = ||v|| the body rate is
ω = J_r(v) v̇, with the right Jacobian of SO(3)

    J_r(v) = I - (1 - cos θ)/θ² [v]× + (θ - sin θ)/θ³ [v]×²

The forward map is evaluated in its expanded per-component form, which
divides by θ³. Below ``small_angle_threshold`` the coefficients are replaced
by their Taylor series, so v = 0 yields ω = v̇.

A PASSIVE rotation vector p encodes the active vector -p, hence
ω = -J_r(-p) ṗ.
"""

import logging

import numpy as np

from rotdiff.utils.rotations import skew

_LOGGER: logging.Logger = logging.getLogger(__name__)


def small_angle_threshold(dtype) -> float:
    """
    Angle below which the series coefficients are used.

    At eps**0.25 the first neglected series term is of order eps, while the
    closed form has already lost about half of the significant digits to
    cancellation.
    """
    return float(np.finfo(dtype).eps ** 0.25)


def _expanded(v: np.ndarray, dv: np.ndarray) -> np.ndarray:
    """J_r(v) dv in expanded-coefficient form, valid away from v = 0."""
    v1, v2, v3 = v
    dv1, dv2, dv3 = dv
    n = np.linalg.norm(v)

    t2 = 1 / (n * n * n)
    t3 = np.cos(n)
    t4 = np.sin(n)
    t5 = v1 * v1
    t6 = v1 * v2
    t7 = n * n
    t8 = t4 * t7
    t9 = v2 * v2
    t10 = v2 * v3
    t11 = v1 * v3
    t12 = t3 * v2
    t13 = v3 * v3

    w1 = (
        dv3 * t2 * (n * (t11 + t12 - v2) - t4 * v1 * v3)
        + dv1 * t2 * (t8 - t4 * t5 + t5 * n)
        + dv2 * t2 * (n * (t6 + v3 - t3 * v3) - t4 * v1 * v2)
    )
    w2 = (
        dv1 * t2 * (n * (t6 - v3 + t3 * v3) - t4 * v1 * v2)
        + dv2 * t2 * (t8 - t4 * t9 + t9 * n)
        + dv3 * t2 * (n * (t10 + v1 - t3 * v1) - t4 * v2 * v3)
    )
    w3 = (
        dv2 * t2 * (n * (t10 - v1 + t3 * v1) - t4 * v2 * v3)
        + dv1 * t2 * (n * (t11 - t12 + v2) - t4 * v1 * v3)
        + dv3 * t2 * (t8 - t4 * t13 + t13 * n)
    )
    return np.array([w1, w2, w3], dtype=v.dtype)


def _series(v: np.ndarray, dv: np.ndarray) -> np.ndarray:
    """J_r(v) dv from the Taylor series of its coefficients."""
    t = v @ v
    cross = np.cross(v, dv)
    return dv - (0.5 - t / 24) * cross + (1 / 6 - t / 120) * np.cross(v, cross)


def right_jacobian_times(v: np.ndarray, dv: np.ndarray) -> np.ndarray:
    """J_r(v) dv, switching to the series form near v = 0."""
    if np.linalg.norm(v) < small_angle_threshold(v.dtype):
        _LOGGER.debug("rotation vector norm %g below small-angle threshold, using series", np.linalg.norm(v))
        return _series(v, dv)
    return _expanded(v, dv)


def inverse_right_jacobian(v: np.ndarray) -> np.ndarray:
    """
    Inverse right Jacobian of SO(3).

    J_r⁻¹(v) = I + ½ [v]× + (1/θ² - (1 + cos θ)/(2 θ sin θ)) [v]×²

    Notes
    -----
    Singular at θ = 2π, where the rotation vector wraps around.
    """
    angle = np.linalg.norm(v)
    if angle < small_angle_threshold(v.dtype):
        coefficient = 1 / 12 + angle * angle / 720
    else:
        coefficient = 1 / (angle * angle) - (1 + np.cos(angle)) / (2 * angle * np.sin(angle))
    K = skew(v)
    return np.eye(3, dtype=v.dtype) + 0.5 * K + coefficient * (K @ K)


def angular_velocity_active(v: np.ndarray, dv: np.ndarray) -> np.ndarray:
    return right_jacobian_times(v, dv)


def angular_velocity_passive(p: np.ndarray, dp: np.ndarray) -> np.ndarray:
    return -right_jacobian_times(-p, dp)


def rate_active(v: np.ndarray, omega: np.ndarray) -> np.ndarray:
    return inverse_right_jacobian(v) @ omega


def rate_passive(p: np.ndarray, omega: np.ndarray) -> np.ndarray:
    return -(inverse_right_jacobian(-p) @ omega)
