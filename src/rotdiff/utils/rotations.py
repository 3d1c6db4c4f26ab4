"""
Rotation-matrix and Euler-angle helpers on raw numpy arrays.

Conventions
-----------
- Angles are in radians, right-hand rule
- 'ZYX' angles (roll φ, pitch θ, yaw ψ) give R = Rz(ψ) @ Ry(θ) @ Rx(φ)
- 'XYZ' angles (roll φ, pitch θ, yaw ψ) give R = Rx(φ) @ Ry(θ) @ Rz(ψ)
- R maps body coordinates to inertial coordinates: v_I = R @ v_B

References
----------
- Diebel (2006) - Representing Attitude: Euler Angles, Unit Quaternions, and Rotation Vectors
- Stevens & Lewis - Aircraft Control and Simulation
"""

from typing import Tuple

import numpy as np

from rotdiff.utils.quaternion import dcm_to_quat, quat_to_dcm

# =============================================================================
# Elementary Rotations
# =============================================================================


def rotx(angle: float) -> np.ndarray:
    """
    Elementary rotation about the x-axis.

    Examples
    --------
    >>> rotx(np.pi / 2) @ np.array([0.0, 1.0, 0.0])  # approximately [0, 0, 1]
    """
    c, s = np.cos(angle), np.sin(angle)
    return np.array([[1, 0, 0], [0, c, -s], [0, s, c]])


def roty(angle: float) -> np.ndarray:
    """Elementary rotation about the y-axis."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array([[c, 0, s], [0, 1, 0], [-s, 0, c]])


def rotz(angle: float) -> np.ndarray:
    """Elementary rotation about the z-axis."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array([[c, -s, 0], [s, c, 0], [0, 0, 1]])


# =============================================================================
# Hat / Vee
# =============================================================================


def skew(v: np.ndarray) -> np.ndarray:
    """
    Skew-symmetric (hat) matrix of a 3-vector, skew(v) @ u == v x u.

    Parameters
    ----------
    v : np.ndarray, shape (3,)
        Input vector [x, y, z].

    Returns
    -------
    np.ndarray, shape (3, 3)
        [ 0  -z   y]
        [ z   0  -x]
        [-y   x   0]

    Notes
    -----
    The dtype of a floating input is preserved.
    """
    v = np.asarray(v)
    if v.dtype.kind != "f":
        v = v.astype(np.float64)
    x, y, z = v
    zero = np.zeros((), dtype=v.dtype)
    return np.array([[zero, -z, y], [z, zero, -x], [-y, x, zero]], dtype=v.dtype)


def unskew(S: np.ndarray) -> np.ndarray:
    """
    Vector of a skew-symmetric matrix (vee), inverse of :func:`skew`.

    Only the lower-left entries are read, so S must already be skew. Use
    :func:`skew_part` first for products that are only approximately skew.
    """
    S = np.asarray(S)
    return np.array([S[2, 1], S[0, 2], S[1, 0]], dtype=S.dtype)


def skew_part(M: np.ndarray) -> np.ndarray:
    """Antisymmetric part (M - Mᵀ) / 2 of a square matrix."""
    M = np.asarray(M)
    return 0.5 * (M - M.T)


# =============================================================================
# Euler Angles
# =============================================================================


def euler_to_dcm(phi: float, theta: float, psi: float, sequence: str = "ZYX") -> np.ndarray:
    """
    Rotation matrix of roll/pitch/yaw angles.

    Parameters
    ----------
    phi : float
        Roll angle (about x).
    theta : float
        Pitch angle (about y).
    psi : float
        Yaw angle (about z).
    sequence : str, optional
        'ZYX' (default) or 'XYZ'.

    Returns
    -------
    np.ndarray, shape (3, 3)
        Rotation matrix.
    """
    sequence = sequence.upper()

    if sequence == "ZYX":
        return rotz(psi) @ roty(theta) @ rotx(phi)

    elif sequence == "XYZ":
        return rotx(phi) @ roty(theta) @ rotz(psi)

    else:
        raise NotImplementedError(f"Sequence '{sequence}' not implemented. Use 'ZYX' or 'XYZ'.")


def dcm_to_euler(C: np.ndarray, sequence: str = "ZYX") -> Tuple[float, float, float]:
    """
    Roll/pitch/yaw angles of a rotation matrix.

    Parameters
    ----------
    C : np.ndarray, shape (3, 3)
        Rotation matrix.
    sequence : str, optional
        'ZYX' (default) or 'XYZ'.

    Returns
    -------
    phi, theta, psi : float
        Roll, pitch and yaw in radians, pitch in [-π/2, π/2].

    Notes
    -----
    At pitch = ±90° only the sum or difference of roll and yaw is defined;
    the free angle (yaw for 'ZYX', roll for 'XYZ') is set to zero.
    """
    C = np.asarray(C, dtype=np.float64)
    sequence = sequence.upper()

    if sequence == "ZYX":
        # C = Rz(psi) @ Ry(theta) @ Rx(phi)
        if np.abs(C[2, 0]) >= 1.0 - 1e-10:
            psi = 0.0
            if C[2, 0] < 0:
                theta = np.pi / 2
                phi = np.arctan2(C[0, 1], C[0, 2])
            else:
                theta = -np.pi / 2
                phi = np.arctan2(-C[0, 1], -C[0, 2])
        else:
            theta = np.arcsin(-C[2, 0])
            phi = np.arctan2(C[2, 1], C[2, 2])
            psi = np.arctan2(C[1, 0], C[0, 0])

        return phi, theta, psi

    elif sequence == "XYZ":
        # C = Rx(phi) @ Ry(theta) @ Rz(psi)
        if np.abs(C[0, 2]) >= 1.0 - 1e-10:
            phi = 0.0
            theta = np.pi / 2 if C[0, 2] > 0 else -np.pi / 2
            psi = np.arctan2(C[1, 0], C[1, 1])
        else:
            theta = np.arcsin(C[0, 2])
            phi = np.arctan2(-C[1, 2], C[2, 2])
            psi = np.arctan2(-C[0, 1], C[0, 0])

        return phi, theta, psi

    else:
        raise NotImplementedError(f"Sequence '{sequence}' not implemented. Use 'ZYX' or 'XYZ'.")


def euler_to_quat(phi: float, theta: float, psi: float, sequence: str = "ZYX") -> np.ndarray:
    """Quaternion [w, x, y, z] of roll/pitch/yaw angles (via the matrix)."""
    return dcm_to_quat(euler_to_dcm(phi, theta, psi, sequence))


def quat_to_euler(q: np.ndarray, sequence: str = "ZYX") -> Tuple[float, float, float]:
    """Roll/pitch/yaw angles of a quaternion [w, x, y, z] (via the matrix)."""
    return dcm_to_euler(quat_to_dcm(q), sequence)
