"""
Pytest configuration and shared fixtures for rotdiff tests.
"""

import numpy as np
import pytest

from rotdiff.utils.quaternion import quat_random

# =============================================================================
# Random Seed Fixture
# =============================================================================


@pytest.fixture
def rng():
    """Provide a seeded random number generator for reproducibility."""
    return np.random.default_rng(42)


@pytest.fixture
def random_quaternion(rng):
    """Generate a random unit quaternion [w, x, y, z] with w >= 0."""

    def _random_quaternion():
        q = quat_random(rng)
        return q if q[0] >= 0 else -q

    return _random_quaternion


@pytest.fixture
def random_omega(rng):
    """Generate a random angular velocity vector."""

    def _random_omega(scale=1.0):
        return scale * rng.standard_normal(3)

    return _random_omega


# =============================================================================
# Tolerance Fixtures
# =============================================================================


@pytest.fixture
def atol():
    """Absolute tolerance for floating point comparisons."""
    return 1e-10


@pytest.fixture
def rtol():
    """Relative tolerance for floating point comparisons."""
    return 1e-6


# =============================================================================
# Common Test Utilities
# =============================================================================


def assert_valid_rotation_matrix(C, tol=1e-10):
    """Assert that C is a valid rotation matrix."""
    assert C.shape == (3, 3), f"Expected shape (3,3), got {C.shape}"

    # Check orthogonality: C @ C.T = I
    np.testing.assert_allclose(C @ C.T, np.eye(3), atol=tol, err_msg="Matrix is not orthogonal")

    det = np.linalg.det(C)
    np.testing.assert_allclose(det, 1.0, atol=tol, err_msg=f"Determinant is {det}, expected 1.0")


def assert_unit_quaternion(q, tol=1e-10):
    """Assert that q is a unit quaternion."""
    assert q.shape == (4,), f"Expected shape (4,), got {q.shape}"

    norm = np.linalg.norm(q)
    np.testing.assert_allclose(norm, 1.0, atol=tol, err_msg=f"Quaternion norm is {norm}, expected 1.0")


def assert_same_rotation(r1, r2, tol=1e-10):
    """Assert that two rotation objects of the same usage describe the same rotation."""
    np.testing.assert_allclose(r1.matrix_array(), r2.matrix_array(), atol=tol)


@pytest.fixture
def assert_rotation():
    """Fixture providing rotation matrix assertion."""
    return assert_valid_rotation_matrix


@pytest.fixture
def assert_unit_quat():
    """Fixture providing unit quaternion assertion."""
    return assert_unit_quaternion


@pytest.fixture
def assert_same():
    """Fixture providing rotation object comparison."""
    return assert_same_rotation


# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')")
