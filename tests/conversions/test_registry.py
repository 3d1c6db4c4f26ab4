"""
Tests for the conversion registry and its entry points.

These tests verify:
1. Every rotation family has a forward and a reverse entry per usage
2. Unregistered combinations (including usage mismatches) raise TypeError
3. Scalar types must agree
4. The classmethod entry points dispatch on the rotation's usage
"""

import logging

import numpy as np
import pytest

from rotdiff import (
    CONVERSION_REGISTRY,
    AngleAxisDiffActive,
    ConversionKey,
    EulerAnglesXyzDiffActive,
    EulerAnglesZyxActive,
    EulerAnglesZyxDiff,
    LocalAngularVelocity,
    LocalAngularVelocityActive,
    LocalAngularVelocityPassive,
    RotationMatrixActive,
    RotationMatrixDiffActive,
    RotationQuaternionActive,
    RotationQuaternionDiffActive,
    RotationQuaternionDiffPassive,
    RotationQuaternionPassive,
    RotationVectorActive,
    RotationVectorDiff,
    RotationVectorDiffPassive,
    RotationVectorPassive,
    convert,
    get_conversion,
    list_conversions,
    to_local_angular_velocity,
    to_rotation_diff,
)
from rotdiff.rotation_diffs import DIFF_TYPES, diff_type_for

# =============================================================================
# Test: Registry Contents
# =============================================================================


class TestRegistry:
    """Tests for the registry table."""

    def test_registry_size(self):
        """Six families, two usages, two directions."""
        assert len(CONVERSION_REGISTRY) == 24
        assert len(list_conversions()) == 24

    def test_every_rotation_class_registered(self):
        """Each concrete rotation class has both directions."""
        for rotation_type, diff_type in DIFF_TYPES.items():
            omega_type = LocalAngularVelocity.for_usage(rotation_type.usage)
            assert ConversionKey(omega_type, diff_type, rotation_type) in CONVERSION_REGISTRY
            assert ConversionKey(diff_type, omega_type, rotation_type) in CONVERSION_REGISTRY

    def test_keys_never_mix_usages(self):
        """All classes in one key share a usage."""
        for key in list_conversions():
            assert key.target.usage is key.source.usage is key.rotation.usage

    def test_get_conversion_returns_callable(self):
        """Lookup returns the array formula."""
        formula = get_conversion(LocalAngularVelocityActive, RotationQuaternionDiffActive, RotationQuaternionActive)

        omega = formula(np.array([1.0, 0.0, 0.0, 0.0]), np.array([0.0, 0.0, 0.0, 0.5]))

        np.testing.assert_array_almost_equal(omega, [0.0, 0.0, 1.0])


# =============================================================================
# Test: Rejected Combinations
# =============================================================================


class TestRejected:
    """Tests for combinations without a registered formula."""

    def test_usage_mismatch_rate(self):
        """An ACTIVE rotation with a PASSIVE rate does not resolve."""
        with pytest.raises(TypeError):
            to_local_angular_velocity(RotationQuaternionActive(), RotationQuaternionDiffPassive())

    def test_usage_mismatch_rotation(self):
        """A PASSIVE rotation with an ACTIVE rate does not resolve."""
        with pytest.raises(TypeError):
            to_local_angular_velocity(RotationQuaternionPassive(), RotationQuaternionDiffActive())

    def test_usage_mismatch_angular_velocity(self):
        """A PASSIVE angular velocity cannot drive an ACTIVE rotation."""
        with pytest.raises(TypeError):
            to_rotation_diff(RotationVectorActive(), LocalAngularVelocityPassive(0.0, 0.0, 1.0))

    def test_family_mismatch(self):
        """A rate of another family does not resolve."""
        with pytest.raises(TypeError):
            to_local_angular_velocity(RotationMatrixActive(), RotationQuaternionDiffActive())
        with pytest.raises(TypeError):
            to_local_angular_velocity(EulerAnglesZyxActive(), EulerAnglesXyzDiffActive())

    def test_wrong_target(self):
        """Only registered targets resolve."""
        with pytest.raises(TypeError):
            convert(AngleAxisDiffActive, RotationQuaternionActive(), LocalAngularVelocityActive())

    def test_get_conversion_message(self):
        """The error names the classes involved."""
        with pytest.raises(TypeError, match="RotationQuaternionDiffPassive"):
            get_conversion(LocalAngularVelocityActive, RotationQuaternionDiffPassive, RotationQuaternionActive)

    def test_miss_is_logged(self, caplog):
        """Registry misses are logged at debug level before raising."""
        with caplog.at_level(logging.DEBUG, logger="rotdiff.conversions"):
            with pytest.raises(TypeError):
                get_conversion(LocalAngularVelocityActive, RotationMatrixDiffActive, RotationQuaternionActive)

        assert "no conversion registered" in caplog.text

    def test_dtype_mismatch(self):
        """Rotation and rate must share a scalar type."""
        q = RotationQuaternionActive(dtype=np.float32)
        dq = RotationQuaternionDiffActive(0.0, 0.1, 0.0, 0.0, dtype=np.float64)

        with pytest.raises(TypeError, match="scalar types"):
            to_local_angular_velocity(q, dq)

    def test_diff_type_for_unknown(self):
        """Family classes have no paired rate class."""
        with pytest.raises(TypeError):
            diff_type_for(RotationVectorDiff)


# =============================================================================
# Test: Entry Points
# =============================================================================


class TestEntryPoints:
    """Tests for the classmethod entry points."""

    def test_from_rotation_diff_on_family(self):
        """The family class picks the rotation's usage."""
        omega = LocalAngularVelocity.from_rotation_diff(
            RotationVectorPassive(), RotationVectorDiffPassive(0.0, 0.0, 1.0)
        )

        assert isinstance(omega, LocalAngularVelocityPassive)
        np.testing.assert_array_almost_equal(omega.vector, [0.0, 0.0, -1.0])

    def test_from_rotation_diff_on_concrete_class(self):
        """A concrete class of the other usage does not resolve."""
        with pytest.raises(TypeError):
            LocalAngularVelocityActive.from_rotation_diff(RotationVectorPassive(), RotationVectorDiffPassive())

    def test_from_angular_velocity_on_family(self):
        """Rate family classes dispatch on the rotation's usage."""
        rotation = EulerAnglesZyxActive()
        omega = LocalAngularVelocityActive(0.1, 0.2, 0.3)

        rate = EulerAnglesZyxDiff.from_angular_velocity(rotation, omega)

        assert type(rate).__name__ == "EulerAnglesZyxDiffActive"
        np.testing.assert_array_almost_equal(rate.to_array(), [0.3, 0.2, 0.1])

    def test_to_rotation_diff_picks_paired_class(self):
        """The reverse entry point returns the rate class of the rotation."""
        rate = to_rotation_diff(RotationMatrixActive(), LocalAngularVelocityActive(0.0, 0.0, 1.0))

        assert isinstance(rate, RotationMatrixDiffActive)

    def test_result_dtype(self):
        """Results carry the rotation's scalar type."""
        q = RotationQuaternionActive(dtype=np.float32)
        dq = RotationQuaternionDiffActive(0.0, 0.0, 0.0, 0.5, dtype=np.float32)

        omega = to_local_angular_velocity(q, dq)

        assert omega.dtype == np.float32
        np.testing.assert_allclose(omega.vector, [0.0, 0.0, 1.0], atol=1e-6)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
