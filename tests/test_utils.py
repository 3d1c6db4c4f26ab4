"""
Tests for the array-level rotation helpers (quaternions, matrices, Euler angles).

These tests verify:
1. Quaternion operations and properties
2. Quaternion <-> matrix <-> rotation vector conversions
3. Hat/vee operators
4. Euler angle conversions for both sequences
5. Edge cases (gimbal lock, small angles)
"""

import numpy as np
import pytest

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

# =============================================================================
# Test: Quaternion Basic Operations
# =============================================================================


class TestQuaternionBasics:
    """Tests for basic quaternion operations."""

    def test_quat_identity(self):
        """Identity quaternion should be [1, 0, 0, 0]."""
        np.testing.assert_array_equal(quat_identity(), np.array([1.0, 0.0, 0.0, 0.0]))

    def test_quat_normalize(self):
        """Normalized quaternion should have unit length."""
        q_norm = quat_normalize(np.array([1.0, 1.0, 1.0, 1.0]))

        assert np.isclose(np.linalg.norm(q_norm), 1.0)

    def test_quat_normalize_zero(self):
        """Zero quaternion normalizes to the identity."""
        np.testing.assert_array_equal(quat_normalize(np.zeros(4)), quat_identity())

    def test_quat_conjugate(self):
        """Conjugate negates the vector part."""
        q = np.array([1.0, 2.0, 3.0, 4.0])

        np.testing.assert_array_equal(quat_conjugate(q), np.array([1.0, -2.0, -3.0, -4.0]))

    def test_conjugate_is_inverse(self, random_quaternion):
        """q * q* should be the identity for unit q."""
        q = random_quaternion()

        np.testing.assert_array_almost_equal(quat_multiply(q, quat_conjugate(q)), quat_identity())

    def test_multiply_not_commutative(self):
        """Quaternion multiplication is not commutative."""
        q1 = quat_from_axis_angle(np.array([1, 0, 0]), np.pi / 4)
        q2 = quat_from_axis_angle(np.array([0, 1, 0]), np.pi / 4)

        assert not np.allclose(quat_multiply(q1, q2), quat_multiply(q2, q1))

    def test_multiply_matches_matrix_product(self):
        """quat_to_dcm(q1 * q2) == quat_to_dcm(q1) @ quat_to_dcm(q2)."""
        q1 = quat_from_axis_angle(np.array([1, 0, 0]), np.pi / 4)
        q2 = quat_from_axis_angle(np.array([0, 1, 0]), np.pi / 3)

        np.testing.assert_array_almost_equal(quat_to_dcm(quat_multiply(q1, q2)), quat_to_dcm(q1) @ quat_to_dcm(q2))

    def test_random_is_unit(self, rng, assert_unit_quat):
        """Random quaternions should be unit norm."""
        for _ in range(20):
            assert_unit_quat(quat_random(rng))


# =============================================================================
# Test: Conversions
# =============================================================================


class TestQuaternionConversions:
    """Tests for quaternion to/from matrix, axis-angle and rotation vector."""

    def test_90_deg_rotations(self):
        """90° about each axis matches the elementary rotations."""
        test_cases = [
            (np.array([1, 0, 0]), rotx(np.pi / 2)),
            (np.array([0, 1, 0]), roty(np.pi / 2)),
            (np.array([0, 0, 1]), rotz(np.pi / 2)),
        ]

        for axis, expected in test_cases:
            np.testing.assert_array_almost_equal(quat_to_dcm(quat_from_axis_angle(axis, np.pi / 2)), expected)

    def test_dcm_quat_roundtrip(self, rng, assert_rotation):
        """DCM -> quat -> DCM should preserve the rotation."""
        for _ in range(20):
            C = quat_to_dcm(quat_random(rng))
            assert_rotation(C)
            np.testing.assert_array_almost_equal(quat_to_dcm(dcm_to_quat(C)), C)

    def test_dcm_to_quat_positive_scalar(self, rng):
        """The recovered quaternion has w >= 0."""
        for _ in range(20):
            assert dcm_to_quat(quat_to_dcm(quat_random(rng)))[0] >= 0

    def test_quat_angle_and_axis(self):
        """Angle and axis are recovered from a quaternion."""
        axis = np.array([1, 1, 1]) / np.sqrt(3)
        q = quat_from_axis_angle(axis, np.pi / 4)

        np.testing.assert_almost_equal(quat_angle(q), np.pi / 4)
        np.testing.assert_array_almost_equal(quat_axis(q), axis)

    def test_quat_axis_flips_for_negative_scalar(self):
        """-q is the same rotation, so angle and axis must not change."""
        axis = np.array([0.0, 0.6, 0.8])
        q = quat_from_axis_angle(axis, 1.0)

        np.testing.assert_almost_equal(quat_angle(-q), 1.0)
        np.testing.assert_array_almost_equal(quat_axis(-q), axis)

    @pytest.mark.parametrize("angle", [1e-7, 1e-10, 3e-4])
    def test_quat_angle_small(self, angle):
        """Small angles keep full relative precision."""
        q = quat_from_axis_angle(np.array([1.0, 0.0, 0.0]), angle)

        np.testing.assert_allclose(quat_angle(q), angle, rtol=1e-12)
        np.testing.assert_allclose(quat_angle(-q), angle, rtol=1e-12)

    def test_quat_angle_matches_rotvec(self, rng):
        """quat_angle agrees with the norm of quat_to_rotvec."""
        for _ in range(20):
            q = quat_random(rng)
            np.testing.assert_allclose(quat_angle(q), np.linalg.norm(quat_to_rotvec(q)), rtol=1e-12)

    def test_quat_axis_identity(self):
        """Identity has the conventional axis [1, 0, 0]."""
        np.testing.assert_array_equal(quat_axis(quat_identity()), np.array([1.0, 0.0, 0.0]))

    def test_rotvec_roundtrip(self, rng):
        """rotvec -> quat -> rotvec for angles below π."""
        for _ in range(20):
            v = rng.uniform(-1.5, 1.5, 3)
            np.testing.assert_allclose(quat_to_rotvec(rotvec_to_quat(v)), v, atol=1e-12)

    def test_rotvec_small_angle(self):
        """Tiny rotation vectors survive the round trip."""
        v = np.array([1e-10, -2e-10, 3e-10])

        np.testing.assert_allclose(quat_to_rotvec(rotvec_to_quat(v)), v, rtol=1e-6)

    def test_rotvec_matches_axis_angle(self):
        """Rotation vector quaternion agrees with the axis-angle quaternion."""
        axis = np.array([1.0, 2.0, 3.0]) / np.linalg.norm([1.0, 2.0, 3.0])
        angle = 0.7

        np.testing.assert_array_almost_equal(rotvec_to_quat(angle * axis), quat_from_axis_angle(axis, angle))


class TestQuaternionRotation:
    """Tests for rotating vectors with the quaternion matrix."""

    def test_rotate_90_deg_z(self):
        """90° about z should map x to y."""
        q = quat_from_axis_angle(np.array([0, 0, 1]), np.pi / 2)

        np.testing.assert_array_almost_equal(quat_to_dcm(q) @ np.array([1.0, 0.0, 0.0]), np.array([0.0, 1.0, 0.0]))

    def test_matrix_matches_sandwich_product(self, random_quaternion):
        """R @ v equals the vector part of q ⊗ [0, v] ⊗ q*."""
        q = random_quaternion()
        v = np.array([1.0, 2.0, 3.0])

        rotated = quat_multiply(quat_multiply(q, np.concatenate(([0.0], v))), quat_conjugate(q))

        np.testing.assert_array_almost_equal(quat_to_dcm(q) @ v, rotated[1:4])


class TestQuaternionKinematics:
    """Tests for the body-rate quaternion derivative."""

    def test_omega_matrix_skew_symmetric(self):
        """Omega matrix should be skew-symmetric."""
        Omega = omega_matrix(np.array([0.1, 0.2, 0.3]))

        assert Omega.shape == (4, 4)
        np.testing.assert_array_almost_equal(Omega, -Omega.T)

    def test_quat_derivative_is_right_product(self, rng):
        """q_dot = 0.5 * q ⊗ [0, ω]."""
        q = quat_random(rng)
        omega = rng.standard_normal(3)

        expected = 0.5 * quat_multiply(q, np.concatenate(([0.0], omega)))

        np.testing.assert_array_almost_equal(quat_derivative(q, omega), expected)


# =============================================================================
# Test: Hat / Vee
# =============================================================================


class TestSkewMatrix:
    """Tests for skew-symmetric matrix operations."""

    def test_skew_cross_product(self):
        """S @ u should equal v x u."""
        v = np.array([1.0, 2.0, 3.0])
        u = np.array([4.0, 5.0, 6.0])

        np.testing.assert_array_almost_equal(skew(v) @ u, np.cross(v, u))

    def test_unskew(self):
        """Unskew should recover original vector."""
        v = np.array([1.0, 2.0, 3.0])

        np.testing.assert_array_equal(unskew(skew(v)), v)

    def test_skew_preserves_float32(self):
        """A float32 vector gives a float32 matrix."""
        assert skew(np.array([1.0, 2.0, 3.0], dtype=np.float32)).dtype == np.float32

    def test_skew_part(self):
        """Antisymmetric part removes the symmetric component."""
        S = skew(np.array([0.3, -0.2, 0.1]))
        M = S + np.diag([1.0, 2.0, 3.0]) + np.ones((3, 3))

        np.testing.assert_array_almost_equal(skew_part(M), S)


# =============================================================================
# Test: Euler Angles
# =============================================================================


class TestEulerAngles:
    """Tests for Euler angle conversions."""

    @pytest.mark.parametrize("sequence", ["ZYX", "XYZ"])
    def test_euler_dcm_roundtrip(self, sequence):
        """euler -> DCM -> euler should preserve angles."""
        phi, theta, psi = np.pi / 6, np.pi / 5, np.pi / 4

        C = euler_to_dcm(phi, theta, psi, sequence)

        np.testing.assert_array_almost_equal(dcm_to_euler(C, sequence), (phi, theta, psi))

    def test_zyx_sequence(self):
        """ZYX is yaw, then pitch, then roll."""
        phi, theta, psi = 0.1, 0.2, 0.3

        np.testing.assert_array_almost_equal(euler_to_dcm(phi, theta, psi, "ZYX"), rotz(psi) @ roty(theta) @ rotx(phi))

    def test_xyz_sequence(self):
        """XYZ is roll, then pitch, then yaw."""
        phi, theta, psi = 0.1, 0.2, 0.3

        np.testing.assert_array_almost_equal(euler_to_dcm(phi, theta, psi, "XYZ"), rotx(phi) @ roty(theta) @ rotz(psi))

    def test_euler_quat_dcm_consistency(self):
        """Euler -> quat -> DCM should match Euler -> DCM."""
        phi, theta, psi = np.pi / 6, np.pi / 5, np.pi / 4

        q = euler_to_quat(phi, theta, psi)

        np.testing.assert_array_almost_equal(quat_to_dcm(q), euler_to_dcm(phi, theta, psi))
        np.testing.assert_array_almost_equal(quat_to_euler(q), (phi, theta, psi))

    def test_unknown_sequence(self):
        """Unsupported sequences raise."""
        with pytest.raises(NotImplementedError):
            euler_to_dcm(0.0, 0.0, 0.0, "ZXZ")


class TestGimbalLock:
    """Tests for gimbal lock handling."""

    @pytest.mark.parametrize("sequence", ["ZYX", "XYZ"])
    @pytest.mark.parametrize("pitch", [np.pi / 2, -np.pi / 2])
    def test_gimbal_lock_reconstructs_matrix(self, sequence, pitch):
        """At pitch = ±90° the recovered angles still give the same matrix."""
        C = euler_to_dcm(0.3, pitch, -0.5, sequence)
        phi, theta, psi = dcm_to_euler(C, sequence)

        np.testing.assert_almost_equal(theta, pitch)
        np.testing.assert_array_almost_equal(euler_to_dcm(phi, theta, psi, sequence), C)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
