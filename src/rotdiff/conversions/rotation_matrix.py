"""
Rotation matrix rate <-> body angular velocity.

ACTIVE: Ṙ = R [ω]×, hence [ω]× = Rᵀ Ṙ.
PASSIVE: C = Rᵀ and Ċ = -[ω]× C, hence [ω]× = C Ċᵀ.

The product of a near-orthonormal matrix with its rate is only approximately
skew-symmetric in floating point, so the antisymmetric part is taken before
extracting the vector.
"""

import numpy as np

from rotdiff.utils.rotations import skew, skew_part, unskew


def angular_velocity_active(R: np.ndarray, dR: np.ndarray) -> np.ndarray:
    return unskew(skew_part(R.T @ dR))


def angular_velocity_passive(C: np.ndarray, dC: np.ndarray) -> np.ndarray:
    return unskew(skew_part(C @ dC.T))


def rate_active(R: np.ndarray, omega: np.ndarray) -> np.ndarray:
    return R @ skew(omega)


def rate_passive(C: np.ndarray, omega: np.ndarray) -> np.ndarray:
    return -skew(omega) @ C
