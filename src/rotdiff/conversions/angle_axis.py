"""
Angle-axis rate <-> body angular velocity.

Both the rotation and its rate are stored as [θ, n] and [θ̇, ṅ]. The axis is
trusted to be unit norm and its rate orthogonal to it; neither is
renormalized.

With s = sin θ and c = cos θ the ACTIVE body rate is

    ω = n θ̇ + s ṅ - (1 - c) n × ṅ

The versine 1 - c is evaluated as 2 sin²(θ/2), which keeps its digits at
small angles.

A PASSIVE angle-axis (θ, n) encodes the transpose, i.e. the active rotation
(θ, -n), which flips the sign of every term except the last cross product.
"""

import numpy as np


def _split(array: np.ndarray):
    return array[0], array[1:4]


def _versine(angle):
    return 2.0 * np.sin(0.5 * angle) ** 2


def angular_velocity_active(aa: np.ndarray, daa: np.ndarray) -> np.ndarray:
    angle, axis = _split(aa)
    dangle, daxis = _split(daa)
    return axis * dangle + daxis * np.sin(angle) - np.cross(axis, daxis) * _versine(angle)


def angular_velocity_passive(aa: np.ndarray, daa: np.ndarray) -> np.ndarray:
    angle, axis = _split(aa)
    dangle, daxis = _split(daa)
    return -(axis * dangle + daxis * np.sin(angle) + np.cross(axis, daxis) * _versine(angle))


def rate_active(aa: np.ndarray, omega: np.ndarray) -> np.ndarray:
    """
    Angle-axis rate [θ̇, ṅ] producing ``omega``.

    Notes
    -----
    The axis rate is undefined at θ = 0, where any axis describes the
    identity; the result there is not finite.
    """
    angle, axis = _split(aa)
    s, v = np.sin(angle), _versine(angle)
    dangle = axis @ omega
    omega_perp = omega - axis * dangle
    daxis = (s * omega_perp + v * np.cross(axis, omega_perp)) / (2 * v)
    return np.concatenate(([dangle], daxis))


def rate_passive(aa: np.ndarray, omega: np.ndarray) -> np.ndarray:
    angle, axis = _split(aa)
    s, v = np.sin(angle), _versine(angle)
    dangle = -(axis @ omega)
    omega_perp = omega - axis * (axis @ omega)
    daxis = -(s * omega_perp - v * np.cross(axis, omega_perp)) / (2 * v)
    return np.concatenate(([dangle], daxis))
