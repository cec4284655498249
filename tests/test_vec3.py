"""Tests for Vec3 class and the point/vector helpers."""

import pytest
import math
import numpy as np

from sphere_caster.vec3 import Vec3, Point3, subtract, dot


class TestVec3Creation:
    """Test Vec3 construction."""

    def test_default_constructor(self):
        v = Vec3()
        assert v.x == 0.0
        assert v.y == 0.0
        assert v.z == 0.0

    def test_value_constructor(self):
        v = Vec3(1.0, 2.0, 3.0)
        assert v.x == 1.0
        assert v.y == 2.0
        assert v.z == 3.0

    def test_from_array_copies(self):
        arr = np.array([1.0, 2.0, 3.0])
        v = Vec3.from_array(arr)
        arr[0] = 99.0
        assert v.x == 1.0


class TestVec3Immutability:
    """Vec3 values cannot be changed after construction."""

    def test_no_component_setter(self):
        v = Vec3(1, 2, 3)
        with pytest.raises(AttributeError):
            v.x = 5

    def test_backing_array_is_read_only(self):
        v = Vec3(1, 2, 3)
        with pytest.raises(ValueError):
            v._data[0] = 5

    def test_to_array_is_independent(self):
        v = Vec3(1, 2, 3)
        arr = v.to_array()
        arr[0] = 5
        assert v.x == 1


class TestSubtract:
    """Test subtract(a, b)."""

    def test_componentwise(self):
        result = subtract(Point3(5, 7, 9), Point3(1, 2, 3))
        assert result == Vec3(4, 5, 6)

    def test_same_point_is_zero(self):
        p = Point3(-1, 1, 10)
        assert subtract(p, p) == Vec3(0, 0, 0)

    def test_matches_operator(self):
        a = Point3(1, -1, 4)
        b = Point3(0.5, 2, -3)
        assert subtract(a, b) == a - b

    def test_nan_propagates(self):
        result = subtract(Point3(float('nan'), 0, 0), Point3(0, 0, 0))
        assert math.isnan(result.x)
        assert result.y == 0


class TestDot:
    """Test dot(a, b)."""

    def test_orthogonal(self):
        assert dot(Vec3(1, 0, 0), Vec3(0, 1, 0)) == 0

    def test_parallel(self):
        assert dot(Vec3(1, 2, 3), Vec3(1, 2, 3)) == 14

    def test_general(self):
        assert dot(Vec3(1, 2, 3), Vec3(4, -5, 6)) == 12

    def test_returns_python_float(self):
        assert type(dot(Vec3(1, 2, 3), Vec3(4, 5, 6))) is float

    def test_infinity_propagates(self):
        assert dot(Vec3(float('inf'), 0, 0), Vec3(1, 0, 0)) == float('inf')

    def test_method_agrees(self):
        a = Vec3(0.3, -0.2, 0.9)
        b = Vec3(1.5, 2.5, -0.5)
        assert a.dot(b) == dot(a, b)


class TestVec3Operations:
    """Test the remaining vector operations."""

    def test_addition(self):
        assert Vec3(1, 2, 3) + Vec3(4, 5, 6) == Vec3(5, 7, 9)

    def test_scalar_multiply_both_sides(self):
        v = Vec3(1, 2, 3)
        assert v * 2 == Vec3(2, 4, 6)
        assert 2 * v == Vec3(2, 4, 6)

    def test_division(self):
        assert Vec3(2, 4, 6) / 2 == Vec3(1, 2, 3)

    def test_componentwise_multiply(self):
        assert Vec3(1, 2, 3) * Vec3(4, 5, 6) == Vec3(4, 10, 18)

    def test_componentwise_divide(self):
        assert Vec3(4, 10, 18) / Vec3(4, 5, 6) == Vec3(1, 2, 3)

    def test_negation(self):
        assert -Vec3(1, -2, 3) == Vec3(-1, 2, -3)

    def test_length(self):
        assert Vec3(3, 4, 0).length() == 5.0

    def test_length_squared(self):
        assert Vec3(1, 2, 3).length_squared() == 14.0

    def test_normalize(self):
        n = Vec3(0, 3, 4).normalize()
        assert abs(n.length() - 1.0) < 1e-12
        assert n == Vec3(0, 0.6, 0.8)

    def test_normalize_zero(self):
        assert Vec3(0, 0, 0).normalize() == Vec3(0, 0, 0)

    def test_cross(self):
        assert Vec3(1, 0, 0).cross(Vec3(0, 1, 0)) == Vec3(0, 0, 1)

    def test_getitem(self):
        v = Vec3(1, 2, 3)
        assert v[0] == 1 and v[1] == 2 and v[2] == 3

    def test_equality_with_other_type(self):
        assert Vec3(1, 2, 3) != (1, 2, 3)

    def test_equal_vectors_are_unhashable(self):
        # Approximate equality rules out a consistent hash
        with pytest.raises(TypeError):
            hash(Vec3(1, 2, 3))
        assert Vec3(1, 2, 3) == Vec3(1, 2, 3 + 1e-12)

    def test_repr(self):
        assert repr(Vec3(1, 2, 3)) == "Vec3(1.0000, 2.0000, 3.0000)"
