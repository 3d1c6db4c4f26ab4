"""
Quaternion rate <-> body angular velocity.

For q = [w, x, y, z] the body rate satisfies q̇ = ½ q ⊗ [0, ω], which is
linear in q̇ and inverted exactly by the 3x4 matrix H(q) below. Defined for
every unit quaternion; there is no singular configuration.
"""

import numpy as np


def quaternion_rate_matrix(q: np.ndarray) -> np.ndarray:
    """
    3x4 matrix H(q) with ω = 2 H(q) q̇ for an ACTIVE quaternion.

    Parameters
    ----------
    q : np.ndarray
        Unit quaternion [w, x, y, z].

    Returns
    -------
    np.ndarray
        H(q), shape (3, 4), in the dtype of ``q``.
    """
    w, x, y, z = q
    return np.array(
        [
            [-x, w, z, -y],
            [-y, -z, w, x],
            [-z, y, -x, w],
        ],
        dtype=q.dtype,
    )


def passive_quaternion_rate_matrix(p: np.ndarray) -> np.ndarray:
    """
    3x4 matrix Hp(p) with ω = 2 Hp(p) ṗ for a PASSIVE quaternion.

    ``p`` is the conjugate of the active quaternion, so Hp(p) is H(p*) with
    the sign of the last three columns flipped.
    """
    w, x, y, z = p
    return np.array(
        [
            [x, -w, z, -y],
            [y, -z, -w, x],
            [z, y, -x, -w],
        ],
        dtype=p.dtype,
    )


def angular_velocity_active(q: np.ndarray, dq: np.ndarray) -> np.ndarray:
    """Body angular velocity ω = 2 H(q) q̇."""
    return 2 * quaternion_rate_matrix(q) @ dq


def angular_velocity_passive(p: np.ndarray, dp: np.ndarray) -> np.ndarray:
    """Body angular velocity ω = 2 Hp(p) ṗ."""
    return 2 * passive_quaternion_rate_matrix(p) @ dp


def rate_active(q: np.ndarray, omega: np.ndarray) -> np.ndarray:
    """Quaternion rate q̇ = ½ H(q)ᵀ ω."""
    return 0.5 * quaternion_rate_matrix(q).T @ omega


def rate_passive(p: np.ndarray, omega: np.ndarray) -> np.ndarray:
    """Quaternion rate ṗ = ½ Hp(p)ᵀ ω."""
    return 0.5 * passive_quaternion_rate_matrix(p).T @ omega
