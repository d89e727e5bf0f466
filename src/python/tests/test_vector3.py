"""
===============================================================================
ROTMATH - Vector3 and clamp Test Suite
===============================================================================
Tests for the Vector3 component storage (both precisions) and the scalar
clamp helper used to guard the inverse trigonometric functions.
===============================================================================
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import numpy as np
import pytest
from numpy.testing import assert_allclose

from rotmath.util import clamp
from rotmath.vector3 import Vector3, Vector3F


# =============================================================================
# Test: Vector3
# =============================================================================

class TestVector3:

    def test_default_is_zero(self):
        assert_allclose(Vector3().components, [0.0, 0.0, 0.0], atol=0)

    def test_components(self):
        v = Vector3(1.0, 2.0, 3.0)
        assert (v.x, v.y, v.z) == (1.0, 2.0, 3.0)
        assert [v[0], v[1], v[2]] == [1.0, 2.0, 3.0]
        assert list(v) == [1.0, 2.0, 3.0]
        assert len(v) == 3

    def test_components_is_a_copy(self):
        v = Vector3(1.0, 2.0, 3.0)
        arr = v.components
        arr[0] = 99.0
        assert v.x == 1.0

    @pytest.mark.parametrize("index", [3, -4])
    def test_index_out_of_range(self, index):
        with pytest.raises(IndexError):
            Vector3()[index]

    def test_equality(self):
        assert Vector3(1.0, 2.0, 3.0) == Vector3(1.0, 2.0, 3.0)
        assert Vector3(1.0, 2.0, 3.0) != Vector3(1.0, 2.0, 3.5)
        assert Vector3() != (0.0, 0.0, 0.0)

    def test_isclose(self):
        assert Vector3(1.0, 2.0, 3.0).isclose([1.0, 2.0, 3.0 + 1e-12])
        assert not Vector3(1.0, 2.0, 3.0).isclose([1.0, 2.0, 3.1])

    def test_repr(self):
        assert repr(Vector3(1.0, -2.0, 0.5)) == (
            "Vector3(x=+1.00000000, y=-2.00000000, z=+0.50000000)")


class TestVector3Of:
    """Coercion of sequences and other vectors."""

    def test_of_list(self):
        v = Vector3.of([0.1, 0.2, 0.3])
        assert isinstance(v, Vector3)
        assert_allclose(v.components, [0.1, 0.2, 0.3], atol=0)

    def test_of_ndarray(self):
        v = Vector3.of(np.array([1, 2, 3]))
        assert v.components.dtype == np.float64

    def test_of_same_type_is_identity(self):
        v = Vector3(1.0, 2.0, 3.0)
        assert Vector3.of(v) is v

    def test_of_converts_precision(self):
        v = Vector3F.of(Vector3(0.1, 0.2, 0.3))
        assert type(v) is Vector3F
        assert v.components.dtype == np.float32

    @pytest.mark.parametrize("value", [[1.0, 2.0], [1.0, 2.0, 3.0, 4.0], [[1.0, 2.0, 3.0]]])
    def test_of_bad_shape(self, value):
        with pytest.raises(ValueError):
            Vector3.of(value)


class TestVector3F:

    def test_dtype(self):
        v = Vector3F(0.1, 0.2, 0.3)
        assert v.components.dtype == np.float32
        assert isinstance(v.x, np.float32)

    def test_repr_names_class(self):
        assert repr(Vector3F()).startswith("Vector3F(")


# =============================================================================
# Test: clamp
# =============================================================================

class TestClamp:

    @pytest.mark.parametrize("value,expected", [
        (-2.0, -1.0),
        (-1.0, -1.0),
        (0.25, 0.25),
        (1.0, 1.0),
        (1.0000001, 1.0),
    ])
    def test_clamp(self, value, expected):
        assert clamp(value, -1.0, 1.0) == expected

    def test_clamp_nan_passes_through(self):
        assert np.isnan(clamp(float('nan'), -1.0, 1.0))
        assert np.isnan(clamp(np.float64('nan'), -1.0, 1.0))

    def test_clamp_keeps_numpy_dtype(self):
        result = clamp(np.float32(1.5), -1.0, 1.0)
        assert isinstance(result, np.float32)
        assert result == 1.0

    def test_clamp_numpy_scalar_in_range(self):
        assert clamp(np.float64(0.5), -1.0, 1.0) == 0.5
