"""
Euler angle rates <-> body angular velocity.

ZYX angles are stored as [yaw ψ, pitch θ, roll φ] with R = Rz(ψ) Ry(θ) Rx(φ);
XYZ angles as [roll α, pitch β, yaw γ] with R = Rx(α) Ry(β) Rz(γ).

Both sequences are singular at cos(pitch) = 0 (gimbal lock). The forward map
stays finite there but loses rank; the reverse map divides by cos(pitch).

A PASSIVE set of angles describes C = Rᵀ. Its body rate is minus the
inertial rate of C, so the PASSIVE formulas are the negated inertial-frame
kinematics of the same angle sequence.
"""

import numpy as np

# =============================================================================
# ZYX
# =============================================================================


def zyx_angular_velocity_active(angles: np.ndarray, rates: np.ndarray) -> np.ndarray:
    _, pitch, roll = angles
    dyaw, dpitch, droll = rates
    s, c = np.sin(roll), np.cos(roll)
    return np.array(
        [
            droll - dyaw * np.sin(pitch),
            dpitch * c + dyaw * s * np.cos(pitch),
            -dpitch * s + dyaw * c * np.cos(pitch),
        ],
        dtype=angles.dtype,
    )


def zyx_angular_velocity_passive(angles: np.ndarray, rates: np.ndarray) -> np.ndarray:
    yaw, pitch, _ = angles
    dyaw, dpitch, droll = rates
    s, c = np.sin(yaw), np.cos(yaw)
    cp = np.cos(pitch)
    return -np.array(
        [
            -dpitch * s + droll * c * cp,
            dpitch * c + droll * s * cp,
            dyaw - droll * np.sin(pitch),
        ],
        dtype=angles.dtype,
    )


def zyx_rate_active(angles: np.ndarray, omega: np.ndarray) -> np.ndarray:
    """[yaw rate, pitch rate, roll rate] producing ``omega``."""
    _, pitch, roll = angles
    p, q, r = omega
    s, c = np.sin(roll), np.cos(roll)
    droll = p + s * np.tan(pitch) * q + c * np.tan(pitch) * r
    dpitch = c * q - s * r
    dyaw = (s * q + c * r) / np.cos(pitch)
    return np.array([dyaw, dpitch, droll], dtype=angles.dtype)


def zyx_rate_passive(angles: np.ndarray, omega: np.ndarray) -> np.ndarray:
    yaw, pitch, _ = angles
    w1, w2, w3 = -omega
    s, c = np.sin(yaw), np.cos(yaw)
    droll = (c * w1 + s * w2) / np.cos(pitch)
    dpitch = -s * w1 + c * w2
    dyaw = w3 + droll * np.sin(pitch)
    return np.array([dyaw, dpitch, droll], dtype=angles.dtype)


# =============================================================================
# XYZ
# =============================================================================


def xyz_angular_velocity_active(angles: np.ndarray, rates: np.ndarray) -> np.ndarray:
    _, pitch, yaw = angles
    droll, dpitch, dyaw = rates
    sg, cg = np.sin(yaw), np.cos(yaw)
    cb = np.cos(pitch)
    return np.array(
        [
            dpitch * sg + droll * cg * cb,
            dpitch * cg - droll * cb * sg,
            dyaw + droll * np.sin(pitch),
        ],
        dtype=angles.dtype,
    )


def xyz_angular_velocity_passive(angles: np.ndarray, rates: np.ndarray) -> np.ndarray:
    roll, pitch, _ = angles
    droll, dpitch, dyaw = rates
    sa, ca = np.sin(roll), np.cos(roll)
    cb = np.cos(pitch)
    return -np.array(
        [
            droll + dyaw * np.sin(pitch),
            dpitch * ca - dyaw * sa * cb,
            dpitch * sa + dyaw * ca * cb,
        ],
        dtype=angles.dtype,
    )


def xyz_rate_active(angles: np.ndarray, omega: np.ndarray) -> np.ndarray:
    """[roll rate, pitch rate, yaw rate] producing ``omega``."""
    _, pitch, yaw = angles
    w1, w2, w3 = omega
    sg, cg = np.sin(yaw), np.cos(yaw)
    droll = (cg * w1 - sg * w2) / np.cos(pitch)
    dpitch = sg * w1 + cg * w2
    dyaw = w3 - droll * np.sin(pitch)
    return np.array([droll, dpitch, dyaw], dtype=angles.dtype)


def xyz_rate_passive(angles: np.ndarray, omega: np.ndarray) -> np.ndarray:
    roll, pitch, _ = angles
    w1, w2, w3 = -omega
    sa, ca = np.sin(roll), np.cos(roll)
    dpitch = ca * w2 + sa * w3
    dyaw = (-sa * w2 + ca * w3) / np.cos(pitch)
    droll = w1 - dyaw * np.sin(pitch)
    return np.array([droll, dpitch, dyaw], dtype=angles.dtype)
