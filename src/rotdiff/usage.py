"""
Usage tag shared by every rotation, rotation-rate and angular-velocity type.

ACTIVE objects store the parameters of the rotation R that turns body-frame
vectors into inertial-frame vectors (v_I = R @ v_B). PASSIVE objects store
the parameters of the frame transformation C = Rᵀ, which maps inertial
coordinates of a fixed vector to body coordinates.

Each representation has one concrete class per usage, so the tag is part of
the type and two objects of different usage never meet in one expression.
"""

from enum import Enum


class RotationUsage(Enum):
    """Convention fixing what a set of rotation parameters means."""

    ACTIVE = "active"
    PASSIVE = "passive"

    def other(self) -> "RotationUsage":
        """The opposite usage."""
        return RotationUsage.PASSIVE if self is RotationUsage.ACTIVE else RotationUsage.ACTIVE
