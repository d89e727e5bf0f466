"""
===============================================================================
ROTMATH - Quaternion Value Type
===============================================================================

Quaternion primitive for 3D rotation math: construction from axis-angle and
Euler angles, conversion back to Euler angles, the Hamilton product, scalar
division, a product-based dot, angular distance, and norm.

Convention
----------
Scalar-first Hamilton convention:

    q = [w, x, y, z] = w + x*i + y*j + z*k

Construction never normalizes. Callers supply unit quaternions wherever the
result must be read as a rotation (Euler conversion, dot, angle).

Euler Angle Convention
----------------------
Intrinsic XYZ: rotate about body X by ex, then the new Y by ey, then the new
Z by ez. The equivalent rotation matrix is R = Rx(ex) * Ry(ey) * Rz(ez), so

    m13 = R[0, 2] = sin(ey)

and pitch ey = +/-90 deg is the gimbal-lock singularity of the decomposition.

Precision
---------
    Quaternion  (aliases QuaternionLF, Quat64)  - numpy.float64
    QuaternionF (aliases Quat32, Quat)          - numpy.float32

===============================================================================
"""

import logging

import numpy as np
from typing import Iterator, Sequence, Union

from rotmath.constants import DEFAULT_ATOL, GIMBAL_LOCK_THRESHOLD
from rotmath.util import clamp
from rotmath.vector3 import Vector3, Vector3F

logger = logging.getLogger(__name__)

VectorLike = Union[Vector3, Sequence[float], np.ndarray]


class Quaternion:
    """
    Quaternion with value semantics and double-precision components.

    Parameters
    ----------
    w, x, y, z : float
        Components, stored as given (no validation, no normalization).
        ``Quaternion()`` is the identity rotation. Passing another
        quaternion as the only argument copies it.

    Examples
    --------
    >>> q = Quaternion.from_axis_angle(Vector3(0.0, 0.0, 1.0), np.pi / 2)
    >>> e = q.to_euler_xyz()          # (0, 0, pi/2)
    >>> r = Quaternion()
    >>> r.from_euler_xyz(e)           # r now equals q (within rounding)
    """

    dtype = np.float64
    _vector_type = Vector3

    def __init__(self, w: Union[float, 'Quaternion'] = 1.0, x: float = 0.0,
                 y: float = 0.0, z: float = 0.0) -> None:
        if isinstance(w, Quaternion):
            self._q = np.array(w._q, dtype=self.dtype)
        else:
            self._q = np.array([w, x, y, z], dtype=self.dtype)

    # =========================================================================
    # FACTORIES
    # =========================================================================

    @classmethod
    def identity(cls) -> 'Quaternion':
        """The identity rotation [1, 0, 0, 0]."""
        return cls()

    @classmethod
    def from_axis_angle(cls, axis: VectorLike, angle: float) -> 'Quaternion':
        """
        Create a quaternion from a rotation axis and angle.

            q = [cos(angle/2), sin(angle/2) * axis]

        Parameters
        ----------
        axis : Vector3 or sequence of 3 floats
            Rotation axis. Expected to be unit length; this is not checked
            and a non-unit axis gives a quaternion that is not a rotation.
        angle : float
            Rotation angle in radians.

        Returns
        -------
        Quaternion
            Quaternion in the precision of ``cls``.
        """
        axis = cls._vector_type.of(axis)
        # Trig and products in double, rounded once when stored
        half_angle = np.float64(cls.dtype(angle)) / 2
        sin_half = np.sin(half_angle)
        return cls(np.cos(half_angle),
                   np.float64(axis.x) * sin_half,
                   np.float64(axis.y) * sin_half,
                   np.float64(axis.z) * sin_half)

    @classmethod
    def from_euler(cls, e: VectorLike) -> 'Quaternion':
        """Create a new quaternion from intrinsic XYZ Euler angles (radians)."""
        q = cls()
        q.from_euler_xyz(e)
        return q

    # =========================================================================
    # COMPONENT ACCESS
    # =========================================================================

    @property
    def w(self):
        """Scalar (real) part."""
        return self._q[0]

    @property
    def x(self):
        """First imaginary component (i-axis)."""
        return self._q[1]

    @property
    def y(self):
        """Second imaginary component (j-axis)."""
        return self._q[2]

    @property
    def z(self):
        """Third imaginary component (k-axis)."""
        return self._q[3]

    @property
    def components(self) -> np.ndarray:
        """Copy of the components as a 4-element array [w, x, y, z]."""
        return self._q.copy()

    def component(self, i: int):
        """
        Component by index: 0 -> w, 1 -> x, 2 -> y, 3 -> z.

        Raises
        ------
        IndexError
            If ``i`` is outside 0..3.
        """
        if i == 0:
            return self.w
        elif i == 1:
            return self.x
        elif i == 2:
            return self.y
        elif i == 3:
            return self.z
        raise IndexError(f"Quaternion component index out of range: {i}")

    def __getitem__(self, i: int):
        return self.component(i)

    def __iter__(self) -> Iterator:
        return iter(self._q)

    def __len__(self) -> int:
        return 4

    # =========================================================================
    # EULER ANGLE CONVERSION
    # =========================================================================

    def to_euler_xyz(self) -> Vector3:
        """
        Convert to intrinsic XYZ Euler angles.

        The quaternion is assumed to be unit length. The relevant entries of
        the equivalent rotation matrix are built from the doubled-component
        products, then:

            ey = asin(clamp(m13, -1, 1))

            |m13| <  0.9999999:  ex = atan2(-m23, m33),  ez = atan2(-m12, m11)
            |m13| >= 0.9999999:  ex = atan2(m32, m22),   ez = 0

        In the second (gimbal-lock) branch roll and yaw act about the same
        axis and only their combination is observable. All of it is assigned
        to ex, so the result is not a unique inverse of ``from_euler_xyz``
        near pitch = +/-90 deg.

        Returns
        -------
        Vector3
            (ex, ey, ez) in radians, in the precision of this quaternion.
        """
        w, x, y, z = self._q

        x2 = x + x
        y2 = y + y
        z2 = z + z
        xx = x * x2
        xy = x * y2
        xz = x * z2
        yy = y * y2
        yz = y * z2
        zz = z * z2
        wx = w * x2
        wy = w * y2
        wz = w * z2

        m11 = 1 - (yy + zz)
        m12 = xy - wz
        m13 = xz + wy
        m22 = 1 - (xx + zz)
        m23 = yz - wx
        m32 = yz + wx
        m33 = 1 - (xx + yy)

        # Clamp: rounding can push |m13| slightly past 1
        ey = np.arcsin(clamp(m13, -1.0, 1.0))

        if abs(float(m13)) < GIMBAL_LOCK_THRESHOLD:
            ex = np.arctan2(-m23, m33)
            ez = np.arctan2(-m12, m11)
        else:
            logger.debug("Gimbal lock in XYZ decomposition (|m13| = %.9f), "
                         "folding yaw into roll", abs(float(m13)))
            ex = np.arctan2(m32, m22)
            ez = self.dtype(0)

        return self._vector_type(ex, ey, ez)

    def from_euler_xyz(self, e: VectorLike) -> None:
        """
        Overwrite this quaternion from intrinsic XYZ Euler angles.

        Closed-form composition of the three half-angle axis rotations:

            x = s1*c2*c3 + c1*s2*s3
            y = c1*s2*c3 - s1*c2*s3
            z = c1*c2*s3 + s1*s2*c3
            w = c1*c2*c3 - s1*s2*s3

        where c_i, s_i are cos/sin of half of (ex, ey, ez).

        Parameters
        ----------
        e : Vector3 or sequence of 3 floats
            (ex, ey, ez) in radians.
        """
        e = self._vector_type.of(e)
        ex, ey, ez = e.components.astype(np.float64)
        dtype = self.dtype

        # Half-angle trig in double, rounded to the scalar type
        c1 = dtype(np.cos(ex / 2))
        c2 = dtype(np.cos(ey / 2))
        c3 = dtype(np.cos(ez / 2))

        s1 = dtype(np.sin(ex / 2))
        s2 = dtype(np.sin(ey / 2))
        s3 = dtype(np.sin(ez / 2))

        x = s1 * c2 * c3 + c1 * s2 * s3
        y = c1 * s2 * c3 - s1 * c2 * s3
        z = c1 * c2 * s3 + s1 * s2 * c3
        w = c1 * c2 * c3 - s1 * s2 * s3

        self._q[:] = (w, x, y, z)

    # =========================================================================
    # ALGEBRA
    # =========================================================================

    def dot(self, q: 'Quaternion'):
        """
        Sum of the components of the Hamilton product ``self * q``.

        Note this is NOT the Euclidean 4D dot product of the two component
        vectors. ``angle`` is defined in terms of it, so the two must change
        together if ever.
        """
        p = self * q
        return p.w + p.x + p.y + p.z

    def angle(self, q: 'Quaternion'):
        """
        Rotation angle between this quaternion and ``q`` (radians).

            angle = acos(|clamp(dot(q), -1, 1)|) * 2

        Inherits the semantics of ``dot``: ``q.angle(q)`` is zero only when
        the components of ``q * q`` sum to at least 1.
        """
        return np.arccos(abs(clamp(self.dot(q), -1.0, 1.0))) * 2

    def norm(self):
        """Euclidean norm sqrt(w^2 + x^2 + y^2 + z^2)."""
        w, x, y, z = self._q
        return np.sqrt(w * w + x * x + y * y + z * z)

    def __mul__(self, other: 'Quaternion') -> 'Quaternion':
        """
        Hamilton product ``self * other``.

        Not commutative. The Euler conversions above are derived for exactly
        this term order and sign convention.
        """
        if not isinstance(other, Quaternion):
            return NotImplemented

        w1, x1, y1, z1 = self._q
        w2, x2, y2, z2 = other._q

        w = w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2
        x = x1 * w2 + w1 * x2 + y1 * z2 - z1 * y2
        y = w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2
        z = w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2

        return type(self)(w, x, y, z)

    def __truediv__(self, scalar: float) -> 'Quaternion':
        """
        Component-wise division by a scalar.

        Division by zero is not checked: the result holds inf/nan.
        """
        if isinstance(scalar, Quaternion):
            return NotImplemented

        with np.errstate(divide='ignore', invalid='ignore'):
            q = self._q / scalar
        return type(self)(q[0], q[1], q[2], q[3])

    # =========================================================================
    # VALUE SEMANTICS
    # =========================================================================

    def copy(self) -> 'Quaternion':
        """Return an independent copy."""
        return type(self)(self)

    def __copy__(self) -> 'Quaternion':
        return self.copy()

    def __deepcopy__(self, memo) -> 'Quaternion':
        return self.copy()

    def __eq__(self, other: object) -> bool:
        """Exact component-wise equality."""
        if not isinstance(other, Quaternion):
            return NotImplemented
        return bool(np.array_equal(self._q, other._q))

    # from_euler_xyz mutates in place, so instances are not hashable.
    __hash__ = None

    def isclose(self, other: 'Quaternion', atol: float = DEFAULT_ATOL) -> bool:
        """
        True if every component differs from ``other`` by at most ``atol``.

        Unlike a rotation comparison, q and -q are NOT considered close.
        """
        diff = self._q.astype(np.float64) - other._q.astype(np.float64)
        return bool(np.all(np.abs(diff) <= atol))

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(w={self.w:+.8f}, x={self.x:+.8f}, "
                f"y={self.y:+.8f}, z={self.z:+.8f})")


class QuaternionF(Quaternion):
    """Single-precision Quaternion."""

    dtype = np.float32
    _vector_type = Vector3F


QuaternionLF = Quaternion
Quat64 = Quaternion
Quat32 = QuaternionF
Quat = QuaternionF
