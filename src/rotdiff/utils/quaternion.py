"""
Quaternion helpers on raw numpy arrays.

All functions in this module work on plain arrays and know nothing about
usage tags; the representation classes in :mod:`rotdiff.rotations` wrap them.

Convention Notes
----------------
- Scalar-first ordering: q = [w, x, y, z] = [cos(θ/2), sin(θ/2)·n]
- Hamilton product convention
- q and -q represent the same rotation
- quat_to_dcm(q) is the matrix R with R @ v == q ⊗ [0, v] ⊗ q*

References
----------
- Diebel (2006) - Representing Attitude: Euler Angles, Unit Quaternions, and Rotation Vectors
- Sola (2017) - Quaternion kinematics for the error-state Kalman filter
"""

import numpy as np


def quat_multiply(q1: np.ndarray, q2: np.ndarray) -> np.ndarray:
    """
    Hamilton product q1 ⊗ q2.

    Parameters
    ----------
    q1 : np.ndarray, shape (4,)
        Left quaternion [w, x, y, z].
    q2 : np.ndarray, shape (4,)
        Right quaternion [w, x, y, z].

    Returns
    -------
    np.ndarray, shape (4,)
        Product quaternion.

    Notes
    -----
    Expanded:
        w = w1*w2 - x1*x2 - y1*y2 - z1*z2
        x = w1*x2 + x1*w2 + y1*z2 - z1*y2
        y = w1*y2 - x1*z2 + y1*w2 + z1*x2
        z = w1*z2 + x1*y2 - y1*x2 + z1*w2
    """
    w1, x1, y1, z1 = np.asarray(q1, dtype=np.float64)
    w2, x2, y2, z2 = np.asarray(q2, dtype=np.float64)

    return np.array(
        [
            w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
            w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
            w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2,
            w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2,
        ]
    )


def quat_conjugate(q: np.ndarray) -> np.ndarray:
    """Conjugate [w, -x, -y, -z]; the inverse for unit quaternions."""
    q = np.asarray(q, dtype=np.float64)
    return np.array([q[0], -q[1], -q[2], -q[3]])


def quat_normalize(q: np.ndarray) -> np.ndarray:
    """
    Scale a quaternion to unit length.

    A (numerically) zero quaternion maps to the identity.

    Parameters
    ----------
    q : np.ndarray, shape (4,)
        Quaternion [w, x, y, z].

    Returns
    -------
    np.ndarray, shape (4,)
        Unit quaternion.
    """
    q = np.asarray(q, dtype=np.float64)
    norm = np.linalg.norm(q)
    if norm < 1e-12:
        return quat_identity()
    return q / norm


def quat_identity() -> np.ndarray:
    """Identity quaternion [1, 0, 0, 0]."""
    return np.array([1.0, 0.0, 0.0, 0.0])


def quat_to_dcm(q: np.ndarray) -> np.ndarray:
    """
    Rotation matrix of a unit quaternion.

    Parameters
    ----------
    q : np.ndarray, shape (4,)
        Unit quaternion [w, x, y, z].

    Returns
    -------
    np.ndarray, shape (3, 3)
        Rotation matrix R = (w² - ||v||²)I + 2vvᵀ + 2w·skew(v).

    Examples
    --------
    >>> quat_to_dcm(np.array([1.0, 0.0, 0.0, 0.0]))
    array([[1., 0., 0.],
           [0., 1., 0.],
           [0., 0., 1.]])
    """
    w, x, y, z = quat_normalize(q)

    xx, yy, zz = x * x, y * y, z * z
    xy, xz, yz = x * y, x * z, y * z
    wx, wy, wz = w * x, w * y, w * z

    return np.array(
        [
            [1 - 2 * (yy + zz), 2 * (xy - wz), 2 * (xz + wy)],
            [2 * (xy + wz), 1 - 2 * (xx + zz), 2 * (yz - wx)],
            [2 * (xz - wy), 2 * (yz + wx), 1 - 2 * (xx + yy)],
        ]
    )


def dcm_to_quat(C: np.ndarray) -> np.ndarray:
    """
    Quaternion of a rotation matrix (Shepperd's method).

    Parameters
    ----------
    C : np.ndarray, shape (3, 3)
        Rotation matrix.

    Returns
    -------
    np.ndarray, shape (4,)
        Unit quaternion [w, x, y, z] with w >= 0.
    """
    C = np.asarray(C, dtype=np.float64)

    # Pivot on the largest of trace and diagonal entries
    trace = np.trace(C)

    if trace > 0:
        s = 0.5 / np.sqrt(trace + 1.0)
        w = 0.25 / s
        x = (C[2, 1] - C[1, 2]) * s
        y = (C[0, 2] - C[2, 0]) * s
        z = (C[1, 0] - C[0, 1]) * s
    elif C[0, 0] > C[1, 1] and C[0, 0] > C[2, 2]:
        s = 2.0 * np.sqrt(1.0 + C[0, 0] - C[1, 1] - C[2, 2])
        w = (C[2, 1] - C[1, 2]) / s
        x = 0.25 * s
        y = (C[0, 1] + C[1, 0]) / s
        z = (C[0, 2] + C[2, 0]) / s
    elif C[1, 1] > C[2, 2]:
        s = 2.0 * np.sqrt(1.0 + C[1, 1] - C[0, 0] - C[2, 2])
        w = (C[0, 2] - C[2, 0]) / s
        x = (C[0, 1] + C[1, 0]) / s
        y = 0.25 * s
        z = (C[1, 2] + C[2, 1]) / s
    else:
        s = 2.0 * np.sqrt(1.0 + C[2, 2] - C[0, 0] - C[1, 1])
        w = (C[1, 0] - C[0, 1]) / s
        x = (C[0, 2] + C[2, 0]) / s
        y = (C[1, 2] + C[2, 1]) / s
        z = 0.25 * s

    q = np.array([w, x, y, z])
    if q[0] < 0:
        q = -q

    return quat_normalize(q)


def quat_angle(q: np.ndarray) -> float:
    """
    Rotation angle of a quaternion.

    Parameters
    ----------
    q : np.ndarray, shape (4,)
        Unit quaternion [w, x, y, z].

    Returns
    -------
    float
        Angle in radians, in [0, π].
    """
    q = quat_normalize(q)
    # arccos(|w|) loses half the digits near the identity
    return 2.0 * np.arctan2(np.linalg.norm(q[1:4]), np.abs(q[0]))


def quat_axis(q: np.ndarray) -> np.ndarray:
    """
    Rotation axis of a quaternion, matching :func:`quat_angle`.

    The axis is flipped when w < 0 so that (axis, angle) with angle in
    [0, π] reproduces the rotation. Returns [1, 0, 0] for the identity.
    """
    q = quat_normalize(q)
    if q[0] < 0:
        q = -q

    v = q[1:4]
    norm_v = np.linalg.norm(v)

    if norm_v < 1e-12:
        return np.array([1.0, 0.0, 0.0])

    return v / norm_v


def quat_from_axis_angle(axis: np.ndarray, angle: float) -> np.ndarray:
    """
    Quaternion from an axis and an angle.

    Parameters
    ----------
    axis : np.ndarray, shape (3,)
        Rotation axis. Normalized here; a zero axis yields the identity.
    angle : float
        Rotation angle in radians.

    Returns
    -------
    np.ndarray, shape (4,)
        Unit quaternion [w, x, y, z].

    Examples
    --------
    >>> quat_from_axis_angle(np.array([1.0, 0.0, 0.0]), np.pi / 2)
    array([0.70710678, 0.70710678, 0.        , 0.        ])
    """
    axis = np.asarray(axis, dtype=np.float64)

    norm = np.linalg.norm(axis)
    if norm < 1e-12:
        return quat_identity()
    axis = axis / norm

    half_angle = angle / 2.0
    return np.concatenate(([np.cos(half_angle)], np.sin(half_angle) * axis))


def quat_to_rotvec(q: np.ndarray) -> np.ndarray:
    """
    Rotation vector θ·n of a quaternion, with θ in [0, π].

    Parameters
    ----------
    q : np.ndarray, shape (4,)
        Unit quaternion [w, x, y, z].

    Returns
    -------
    np.ndarray, shape (3,)
        Rotation vector. Zero for the identity.
    """
    q = quat_normalize(q)
    if q[0] < 0:
        q = -q

    norm_v = np.linalg.norm(q[1:4])
    if norm_v < 1e-15:
        return np.zeros(3)

    # atan2 stays accurate for small angles where arccos(w) does not
    angle = 2.0 * np.arctan2(norm_v, q[0])
    return angle * q[1:4] / norm_v


def rotvec_to_quat(rotvec: np.ndarray) -> np.ndarray:
    """
    Quaternion of a rotation vector.

    Parameters
    ----------
    rotvec : np.ndarray, shape (3,)
        Rotation vector θ·n.

    Returns
    -------
    np.ndarray, shape (4,)
        Unit quaternion [w, x, y, z].
    """
    rotvec = np.asarray(rotvec, dtype=np.float64)
    angle = np.linalg.norm(rotvec)

    if angle < 1e-8:
        # sin(θ/2)/θ ≈ 1/2 - θ²/48
        return quat_normalize(np.concatenate(([1.0 - angle**2 / 8.0], (0.5 - angle**2 / 48.0) * rotvec)))

    return quat_from_axis_angle(rotvec / angle, angle)


def omega_matrix(omega: np.ndarray) -> np.ndarray:
    """
    Matrix Ω(ω) of body-rate quaternion kinematics q̇ = ½ Ω(ω) q.

    Parameters
    ----------
    omega : np.ndarray, shape (3,)
        Body-frame angular velocity [ωx, ωy, ωz].

    Returns
    -------
    np.ndarray, shape (4, 4)
        Skew-symmetric matrix
            [ 0   -ωx  -ωy  -ωz]
            [ωx    0   ωz  -ωy]
            [ωy  -ωz    0   ωx]
            [ωz   ωy  -ωx    0]
    """
    wx, wy, wz = np.asarray(omega, dtype=np.float64)

    return np.array([[0, -wx, -wy, -wz], [wx, 0, wz, -wy], [wy, -wz, 0, wx], [wz, wy, -wx, 0]])


def quat_derivative(q: np.ndarray, omega: np.ndarray) -> np.ndarray:
    """
    Quaternion rate for a body-frame angular velocity, q̇ = ½ q ⊗ [0, ω].

    Examples
    --------
    >>> quat_derivative(np.array([1.0, 0.0, 0.0, 0.0]), np.array([0.1, 0.0, 0.0]))
    array([0.  , 0.05, 0.  , 0.  ])
    """
    q = np.asarray(q, dtype=np.float64)
    return 0.5 * omega_matrix(omega) @ q


def quat_random(rng: np.random.Generator = None) -> np.ndarray:
    """
    Random unit quaternion, uniformly distributed on SO(3).

    Parameters
    ----------
    rng : np.random.Generator, optional
        Random number generator. If None, uses a fresh default generator.

    Returns
    -------
    np.ndarray, shape (4,)
        Unit quaternion [w, x, y, z].
    """
    if rng is None:
        rng = np.random.default_rng()

    # Shoemake's subgroup algorithm
    u1, u2, u3 = rng.random(3)

    return np.array(
        [
            np.sqrt(u1) * np.cos(2 * np.pi * u3),
            np.sqrt(1 - u1) * np.sin(2 * np.pi * u2),
            np.sqrt(1 - u1) * np.cos(2 * np.pi * u2),
            np.sqrt(u1) * np.sin(2 * np.pi * u3),
        ]
    )
