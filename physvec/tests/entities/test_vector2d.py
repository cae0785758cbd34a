import math

import numpy as np
import pytest

from physvec.entities.array_vector import ArrayVector
from physvec.entities.errors import (
    ComponentIndexError,
    DimensionMismatchError,
    UnsupportedOperationError,
)
from physvec.entities.vector2d import Vector2D
from physvec.entities.vector3d import Vector3D


def test_vector2d_operations():
    v1 = Vector2D(3, 4)
    v2 = Vector2D(1, 2)

    # Test addition
    v3 = v1.plus(v2)
    assert v3.x == 4 and v3.y == 6

    # Test subtraction
    v4 = v1.minus(v2)
    assert v4.x == 2 and v4.y == 2

    # Test scalar multiplication
    v5 = v1.times(2)
    assert v5.x == 6 and v5.y == 8

    # Test dot product
    assert v1.dot_product(v2) == 11
    assert np.dot(v1, v2) == 11

    # Test pointwise product
    v6 = v1.pointwise_product(v2)
    assert v6.x == 3 and v6.y == 8

    assert v1.negative() == Vector2D(-3, -4)
    assert math.isclose(v1.magnitude(), 5.0)

    norm = v1.normalized()
    assert math.isclose(norm.x, 3 / 5) and math.isclose(norm.y, 4 / 5)


def test_vector2d_operators():
    v1 = Vector2D(3, 4)
    v2 = Vector2D(1, 2)

    assert v1 + v2 == Vector2D(4, 6)
    assert v1 - v2 == Vector2D(2, 2)
    assert v1 * 2 == Vector2D(6, 8)
    assert 2 * v1 == Vector2D(6, 8)
    assert v1 / 2 == Vector2D(1.5, 2)
    assert -v1 == Vector2D(-3, -4)
    assert v1 @ v2 == 11
    assert abs(v1) == 5.0
    assert len(v1) == 2
    assert list(v1) == [3.0, 4.0]
    assert v1[1] == 4.0


def test_vector2d_fast_paths_match_generic():
    v1 = Vector2D(3, 4)
    v2 = Vector2D(1, 2)
    assert v1.plus2d(v2) == v1.plus(v2)
    assert v1.minus2d(v2) == v1.minus(v2)
    assert v1.dot2d(v2) == v1.dot_product(v2)
    assert v1.pointwise2d(v2) == v1.pointwise_product(v2)


def test_vector2d_with_other_implementations():
    v1 = Vector2D(3, 4)
    other = ArrayVector(1, 2)

    result = v1.plus(other)
    assert isinstance(result, Vector2D)
    assert result == Vector2D(4, 6)
    assert v1.minus(other) == Vector2D(2, 2)
    assert v1.dot_product(other) == 11
    assert v1.pointwise_product(other) == Vector2D(3, 8)
    assert math.isclose(v1.angle_with(other), Vector2D(3, 4).angle_with(Vector2D(1, 2)))


def test_vector2d_components_and_get():
    v = Vector2D(3, 4)
    assert v.dimension() == 2
    assert v.components() == (3.0, 4.0)
    assert v.get(0) == 3.0 and v.get(1) == 4.0

    with pytest.raises(ComponentIndexError):
        v.get(2)
    with pytest.raises(IndexError):
        v.get(-1)


def test_vector2d_construction():
    assert Vector2D((1, 2)) == Vector2D(1, 2)
    assert Vector2D([1, 2]) == Vector2D(1, 2)
    assert Vector2D(np.array([1, 2])) == Vector2D(1, 2)
    assert isinstance(Vector2D(1, 2).x, float)

    with pytest.raises(TypeError):
        Vector2D(1, 2, 3)
    with pytest.raises(TypeError):
        Vector2D([1, 2, 3])
    with pytest.raises(TypeError):
        Vector2D(1)


def test_vector2d_cross_product_unsupported():
    with pytest.raises(UnsupportedOperationError):
        Vector2D(1, 2).cross_product(Vector2D(3, 4))
    # Not a dimension problem, so it must not be reported as one
    with pytest.raises(UnsupportedOperationError) as exc_info:
        Vector2D(1, 2).cross_product(Vector3D(3, 4, 5))
    assert not isinstance(exc_info.value, DimensionMismatchError)


@pytest.mark.parametrize(
    "operation",
    [
        lambda a, b: a.plus(b),
        lambda a, b: a.minus(b),
        lambda a, b: a.dot_product(b),
        lambda a, b: a.pointwise_product(b),
        lambda a, b: a.angle_with(b),
    ],
)
def test_vector2d_dimension_mismatch(operation):
    other = Vector3D(1, 2, 3)
    with pytest.raises(DimensionMismatchError) as exc_info:
        operation(Vector2D(1, 2), other)
    assert exc_info.value.vector is other
    assert exc_info.value.expected == 2


def test_vector2d_angle_with():
    # (1, 2) and (2, -1) are exactly orthogonal
    assert math.isclose(Vector2D(1, 2).angle_with(Vector2D(2, -1)), math.pi / 2)
    assert math.isclose(Vector2D(1, 0).angle_with(Vector2D(-1, 0)), math.pi)
    assert math.isclose(Vector2D(1, 1).angle_with(Vector2D(0, 1)), math.pi / 4)


def test_vector2d_is_immutable():
    v = Vector2D(1, 2)
    with pytest.raises(AttributeError):
        v.x = 5
    v.plus(Vector2D(1, 1))
    assert v == Vector2D(1, 2)


def test_vector2d_repr():
    assert repr(Vector2D(1, 2)) == "Vector2D(x=1.0, y=2.0)"
    assert str(Vector2D(1, 2)) == "[1.0, 2.0]"


@pytest.mark.parametrize("vector", [Vector2D(1, 2), Vector3D(1, 2, 3), ArrayVector(1, 2)])
@pytest.mark.parametrize("index", [0.0, 1.5, "1"])
def test_get_rejects_non_integer_index(vector, index):
    with pytest.raises(TypeError):
        vector.get(index)
