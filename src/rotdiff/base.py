"""
Abstract base classes for rotations and rotation rates.

Every concrete representation owns a fixed-size numpy buffer and exposes only
the accessors and operators that make sense for it. Families (quaternion,
matrix, ...) derive from :class:`RotationBase` or :class:`RotationDiffBase`;
each family then has exactly one concrete subclass per :class:`RotationUsage`,
declared by setting the ``usage`` class attribute.
"""

from abc import ABC, abstractmethod
from typing import ClassVar, Dict, Optional, Tuple

import numpy as np

from rotdiff.usage import RotationUsage
from rotdiff.utils.quaternion import quat_conjugate, quat_multiply, quat_to_dcm


def as_buffer(data, shape: Tuple[int, ...], dtype=None, name: str = "data") -> np.ndarray:
    """
    Copy ``data`` into a new floating-point array of a fixed shape.

    Parameters
    ----------
    data : array_like
        Input components.
    shape : tuple of int
        Required shape.
    dtype : numpy dtype, optional
        Scalar type. Defaults to the dtype of a floating input array and to
        float64 otherwise.
    name : str
        Name used in error messages.

    Returns
    -------
    np.ndarray
        A fresh array owned by the caller.

    Raises
    ------
    TypeError
        If ``dtype`` is not a floating type.
    ValueError
        If the data does not have the required shape.
    """
    if dtype is None:
        dtype = data.dtype if isinstance(data, np.ndarray) and data.dtype.kind == "f" else np.float64

    dtype = np.dtype(dtype)
    if dtype.kind != "f":
        raise TypeError(f"dtype must be a floating type, got {dtype}")

    array = np.array(data, dtype=dtype)
    if array.shape != shape:
        raise ValueError(f"{name} must have shape {shape}, got {array.shape}")

    return array


class UsageTagged:
    """
    Mixin linking a family class to its per-usage concrete subclasses.

    A subclass that defines ``usage`` in its class body registers itself with
    the nearest ancestor family; any other subclass starts a new family.
    """

    usage: ClassVar[Optional[RotationUsage]] = None
    _variants: ClassVar[Dict[RotationUsage, type]] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if "usage" in cls.__dict__:
            for base in cls.__mro__[1:]:
                if "_variants" in base.__dict__:
                    base._variants[cls.usage] = cls
                    break
        else:
            cls._variants = {}

    @classmethod
    def for_usage(cls, usage: RotationUsage) -> type:
        """
        Concrete class of this family for the given usage.

        Raises
        ------
        TypeError
            If the family has no class for ``usage``.
        """
        try:
            return cls._variants[usage]
        except KeyError:
            raise TypeError(f"{cls.__name__} has no {usage.name} variant") from None


class ValueObject(UsageTagged):
    """Immutable-by-default holder of a fixed-size numeric buffer."""

    _shape: ClassVar[Tuple[int, ...]] = ()
    _writeable: ClassVar[bool] = False
    _data: np.ndarray

    def _assign(self, data, dtype=None):
        if self.usage is None:
            raise TypeError(
                f"{type(self).__name__} has no usage; instantiate its Active or Passive subclass instead"
            )
        buffer = as_buffer(data, self._shape, dtype, name=type(self).__name__)
        buffer.flags.writeable = self._writeable
        self._data = buffer

    @classmethod
    def from_array(cls, data, dtype=None):
        """
        Build an instance directly from its component array.

        Parameters
        ----------
        data : array_like
            Components in storage order (see the class docstring).
        dtype : numpy dtype, optional
            Scalar type; inferred from a floating array input, else float64.
        """
        obj = cls.__new__(cls)
        obj._assign(data, dtype)
        return obj

    @property
    def dtype(self) -> np.dtype:
        """Scalar type of the components."""
        return self._data.dtype

    def to_array(self) -> np.ndarray:
        """Copy of the components in storage order."""
        return self._data.copy()

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    __hash__ = None

    def __repr__(self) -> str:
        if self.dtype == np.float64:
            return f"{type(self).__name__}.from_array({self._data.tolist()!r})"
        return f"{type(self).__name__}.from_array({self._data.tolist()!r}, dtype=np.{self.dtype})"

    def __str__(self) -> str:
        return " ".join(str(value) for value in self._data.ravel())


# =============================================================================
# Rotations
# =============================================================================


class RotationBase(ValueObject, ABC):
    """
    Abstract base class of rotation representations.

    The unit quaternion is the hub for conversions: every family maps its
    parameters to and from a float64 quaternion [w, x, y, z]. These maps are
    the same for both usages; only the physical meaning of the parameters
    differs (see :mod:`rotdiff.usage`).

    Notes
    -----
    Unit norm and orthonormality are trusted and never re-validated.
    """

    # =========================================================================
    # Abstract Methods - families MUST implement these
    # =========================================================================

    @abstractmethod
    def _to_quaternion_array(self) -> np.ndarray:
        """Float64 unit quaternion [w, x, y, z] with the same rotation matrix."""

    @classmethod
    @abstractmethod
    def _from_quaternion_array(cls, q: np.ndarray, dtype):
        """Instance of ``cls`` whose rotation matrix equals that of ``q``."""

    # =========================================================================
    # Concrete Methods
    # =========================================================================

    @classmethod
    def identity(cls, dtype=np.float64):
        """The identity rotation."""
        return cls._from_quaternion_array(np.array([1.0, 0.0, 0.0, 0.0]), dtype)

    def convert_to(self, family: type):
        """
        Express this rotation in another representation of the same usage.

        Parameters
        ----------
        family : type
            A family class such as ``RotationQuaternion`` or one of its
            concrete subclasses.

        Returns
        -------
        RotationBase
            Instance of ``family.for_usage(self.usage)`` with this dtype.
        """
        target = family.for_usage(self.usage)
        if target is type(self):
            return self
        return target._from_quaternion_array(self._to_quaternion_array(), self.dtype)

    def to_quaternion(self):
        """This rotation as a quaternion."""
        from rotdiff.rotations import RotationQuaternion  # noqa: PLC0415

        return self.convert_to(RotationQuaternion)

    def to_matrix(self):
        """This rotation as a rotation matrix."""
        from rotdiff.rotations import RotationMatrix  # noqa: PLC0415

        return self.convert_to(RotationMatrix)

    def to_angle_axis(self):
        """This rotation as an angle and a unit axis."""
        from rotdiff.rotations import AngleAxis  # noqa: PLC0415

        return self.convert_to(AngleAxis)

    def to_rotation_vector(self):
        """This rotation as a rotation vector."""
        from rotdiff.rotations import RotationVector  # noqa: PLC0415

        return self.convert_to(RotationVector)

    def to_euler_angles_zyx(self):
        """This rotation as ZYX (yaw, pitch, roll) Euler angles."""
        from rotdiff.rotations import EulerAnglesZyx  # noqa: PLC0415

        return self.convert_to(EulerAnglesZyx)

    def to_euler_angles_xyz(self):
        """This rotation as XYZ (roll, pitch, yaw) Euler angles."""
        from rotdiff.rotations import EulerAnglesXyz  # noqa: PLC0415

        return self.convert_to(EulerAnglesXyz)

    def inverted(self):
        """Inverse rotation, same class."""
        return type(self)._from_quaternion_array(quat_conjugate(self._to_quaternion_array()), self.dtype)

    def as_usage(self, usage: RotationUsage):
        """
        The same physical rotation under another usage.

        Switching usage inverts the stored parameters: the passive parameters
        of a rotation R are the active parameters of Rᵀ.
        """
        if usage is self.usage:
            return self
        inverse = self.inverted()
        return self.for_usage(usage).from_array(inverse._data, self.dtype)

    def as_active(self):
        """Shorthand for ``as_usage(RotationUsage.ACTIVE)``."""
        return self.as_usage(RotationUsage.ACTIVE)

    def as_passive(self):
        """Shorthand for ``as_usage(RotationUsage.PASSIVE)``."""
        return self.as_usage(RotationUsage.PASSIVE)

    def matrix_array(self) -> np.ndarray:
        """Stored parameters as a 3x3 array (float64)."""
        return quat_to_dcm(self._to_quaternion_array())

    def rotate(self, vector) -> np.ndarray:
        """
        Apply the stored rotation matrix to a vector.

        For ACTIVE usage this rotates the vector; for PASSIVE usage it maps the
        inertial coordinates of a fixed vector to body coordinates.
        """
        vector = as_buffer(vector, (3,), self.dtype, name="vector")
        return (self.matrix_array() @ vector).astype(self.dtype)

    def inverse_rotate(self, vector) -> np.ndarray:
        """Apply the transposed stored rotation matrix to a vector."""
        vector = as_buffer(vector, (3,), self.dtype, name="vector")
        return (self.matrix_array().T @ vector).astype(self.dtype)

    def is_near(self, other: "RotationBase", tol: float = 1e-8) -> bool:
        """
        Whether two rotations of the same usage agree up to ``tol``.

        Any pair of representations can be compared; quaternions are compared
        modulo sign.
        """
        if not isinstance(other, RotationBase) or other.usage is not self.usage:
            raise TypeError(f"cannot compare {type(self).__name__} with {type(other).__name__}")
        q1 = self._to_quaternion_array()
        q2 = other._to_quaternion_array()
        return bool(min(np.linalg.norm(q1 - q2), np.linalg.norm(q1 + q2)) <= tol)

    def __mul__(self, other):
        """
        Composition ``self * other`` of stored parameters.

        Under ACTIVE usage this is "apply ``other`` first, then ``self``".
        Only operands of the same concrete class compose.
        """
        if type(other) is not type(self):
            return NotImplemented
        q = quat_multiply(self._to_quaternion_array(), other._to_quaternion_array())
        return type(self)._from_quaternion_array(q, np.result_type(self.dtype, other.dtype))


# =============================================================================
# Rotation rates
# =============================================================================


class RotationDiffBase(ValueObject):
    """
    Base class of rotation-rate representations.

    A rate has the component layout of its rotation family but is not a
    rotation; it is only meaningful together with the rotation it was taken
    at. Rates of the same concrete class form a vector space.
    """

    @classmethod
    def zero(cls, dtype=np.float64):
        """The zero rate."""
        return cls.from_array(np.zeros(cls._shape), dtype)

    @classmethod
    def from_angular_velocity(cls, rotation: RotationBase, angular_velocity):
        """
        Rate of ``rotation`` produced by a local angular velocity.

        Called on a family class, the concrete class is picked from the
        rotation's usage.

        Parameters
        ----------
        rotation : RotationBase
            Rotation the rate is taken at.
        angular_velocity : LocalAngularVelocityActive or LocalAngularVelocityPassive
            Body-frame angular velocity of the rotation's usage.

        Raises
        ------
        TypeError
            If no conversion is registered for the combination.
        """
        from rotdiff.conversions import convert  # noqa: PLC0415

        target = cls.for_usage(rotation.usage) if cls.usage is None else cls
        return convert(target, rotation, angular_velocity)

    def _combine(self, other, op):
        if type(other) is not type(self):
            return NotImplemented
        return type(self).from_array(op(self._data, other._data))

    def __add__(self, other):
        return self._combine(other, np.add)

    def __sub__(self, other):
        return self._combine(other, np.subtract)

    def __neg__(self):
        return type(self).from_array(-self._data)

    def __mul__(self, scalar):
        if not np.isscalar(scalar):
            return NotImplemented
        return type(self).from_array(self._data * self.dtype.type(scalar))

    __rmul__ = __mul__


# =============================================================================
# Angular velocities
# =============================================================================


class AngularVelocityBase(ValueObject):
    """
    Base class of angular velocity 3-vectors.

    Unlike rotations and rates, angular velocities are mutable so that
    velocity terms can be accumulated in place with ``+=`` and ``-=``.
    """

    _shape = (3,)
    _writeable = True

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0, dtype=np.float64):
        self._assign([x, y, z], dtype)

    @property
    def x(self):
        return self._data[0]

    @x.setter
    def x(self, value):
        self._data[0] = value

    @property
    def y(self):
        return self._data[1]

    @y.setter
    def y(self, value):
        self._data[1] = value

    @property
    def z(self):
        return self._data[2]

    @z.setter
    def z(self, value):
        self._data[2] = value

    @property
    def vector(self) -> np.ndarray:
        """Copy of [x, y, z]."""
        return self._data.copy()

    def norm(self):
        return np.linalg.norm(self._data)

    def set_zero(self):
        """Reset all components to zero in place and return self."""
        self._data[:] = 0.0
        return self

    def is_near(self, other: "AngularVelocityBase", tol: float = 1e-8) -> bool:
        """Whether two angular velocities of the same class agree up to ``tol``."""
        if type(other) is not type(self):
            raise TypeError(f"cannot compare {type(self).__name__} with {type(other).__name__}")
        return bool(np.linalg.norm(self._data - other._data) <= tol)

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return type(self).from_array(self._data + other._data)

    def __sub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return type(self).from_array(self._data - other._data)

    def __iadd__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        self._data += other._data
        return self

    def __isub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        self._data -= other._data
        return self

    def __neg__(self):
        return type(self).from_array(-self._data)

    def __mul__(self, scalar):
        if not np.isscalar(scalar):
            return NotImplemented
        return type(self).from_array(self._data * self.dtype.type(scalar))

    __rmul__ = __mul__
