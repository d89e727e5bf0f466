"""
===============================================================================
ROTMATH - Three-Component Vector
===============================================================================

Plain fixed-size numeric tuple used as the input/output shape for rotation
axes and Euler angle triples. It carries no vector algebra on purpose: it is
storage with component access, in the precision of the owning type.

Two precisions are provided:

    Vector3   - numpy.float64 components
    Vector3F  - numpy.float32 components
===============================================================================
"""

import numpy as np
from typing import Iterator, Sequence, Union

from rotmath.constants import DEFAULT_ATOL


class Vector3:
    """
    Three-component vector with value semantics.

    Attributes
    ----------
    x, y, z : numpy scalar
        Components in the class dtype.

    Examples
    --------
    >>> v = Vector3(0.0, 0.0, 1.0)
    >>> v.z
    1.0
    """

    dtype = np.float64

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self._v = np.array([x, y, z], dtype=self.dtype)

    @classmethod
    def of(cls, value: Union['Vector3', Sequence[float], np.ndarray]) -> 'Vector3':
        """
        Coerce a Vector3 or any 3-element sequence into this class.

        Raises
        ------
        ValueError
            If ``value`` does not hold exactly three components.
        """
        if type(value) is cls:
            return value
        if isinstance(value, Vector3):
            return cls(*value._v)

        arr = np.asarray(value, dtype=cls.dtype)
        if arr.shape != (3,):
            raise ValueError(
                f"Expected 3 components, got shape {arr.shape}"
            )
        return cls(arr[0], arr[1], arr[2])

    # =========================================================================
    # COMPONENT ACCESS
    # =========================================================================

    @property
    def x(self):
        return self._v[0]

    @property
    def y(self):
        return self._v[1]

    @property
    def z(self):
        return self._v[2]

    @property
    def components(self) -> np.ndarray:
        """Copy of the components as a 3-element array [x, y, z]."""
        return self._v.copy()

    def __getitem__(self, index: int):
        if not -3 <= index < 3:
            raise IndexError(f"Vector3 index out of range: {index}")
        return self._v[index]

    def __iter__(self) -> Iterator:
        return iter(self._v)

    def __len__(self) -> int:
        return 3

    # =========================================================================
    # COMPARISON / DISPLAY
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    # Mutable container semantics: not hashable.
    __hash__ = None

    def isclose(self, other: 'Vector3', atol: float = DEFAULT_ATOL) -> bool:
        """True if every component differs from ``other`` by at most ``atol``."""
        other = Vector3.of(other)
        return bool(np.all(np.abs(self._v.astype(np.float64) - other._v) <= atol))

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(x={self.x:+.8f}, y={self.y:+.8f}, "
                f"z={self.z:+.8f})")


class Vector3F(Vector3):
    """Single-precision Vector3."""

    dtype = np.float32
