import math

import pytest

from physvec.entities.array_vector import ArrayVector
from physvec.entities.vector2d import Vector2D
from physvec.entities.vector3d import Vector3D
from physvec.entities.vector_base import double_to_bits, hash_components


def test_double_to_bits():
    assert double_to_bits(0.0) == 0
    assert double_to_bits(-0.0) == -(2**63)
    assert double_to_bits(1.0) == 0x3FF0000000000000
    assert double_to_bits(float("nan")) == double_to_bits(-float("nan")) == 0x7FF8000000000000


def test_hash_matches_reference_formula():
    # result = 31 * result + (int)(bits ^ (bits >>> 32)), starting from 1
    assert hash(ArrayVector()) == 1
    assert hash(Vector2D(0.0, 0.0)) == 31 * 31
    assert hash(ArrayVector(1.0)) == 31 + 0x3FF00000
    assert hash_components([0.0, 0.0]) == hash(Vector2D(0.0, 0.0))


@pytest.mark.parametrize(
    "a, b",
    [
        (Vector2D(1, 2), ArrayVector(1, 2)),
        (Vector3D(1, 2, 3), ArrayVector(1, 2, 3)),
        (Vector3D(-0.5, 1e300, 7), ArrayVector([-0.5, 1e300, 7])),
    ],
)
def test_equal_across_implementations(a, b):
    assert a == b
    assert b == a
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


def test_unequal_dimensions():
    assert Vector2D(1, 2) != ArrayVector(1, 2, 0)
    assert ArrayVector(1, 2, 0) != Vector2D(1, 2)
    assert Vector3D(1, 2, 0) != Vector2D(1, 2)
    assert ArrayVector() != ArrayVector(0)


def test_equality_is_bitwise():
    # No tolerance
    assert Vector2D(0.1 + 0.2, 0) != Vector2D(0.3, 0)
    # Signed zeros differ
    assert Vector3D(0.0, 0, 0) != Vector3D(-0.0, 0, 0)
    assert ArrayVector(-0.0) != ArrayVector(0.0)
    # NaN equals itself, keeping equality reflexive for hashing
    nan = float("nan")
    assert Vector2D(nan, 1) == Vector2D(nan, 1)
    assert ArrayVector(nan, 1) == Vector2D(nan, 1)
    assert hash(Vector2D(nan, 1)) == hash(ArrayVector(nan, 1))
    assert math.isnan(Vector2D(nan, 1).x)


def test_not_equal_to_other_types():
    assert Vector2D(1, 2) != (1.0, 2.0)
    assert ArrayVector(1, 2) != [1.0, 2.0]
    assert Vector3D(1, 2, 3) != "Vector3D(x=1.0, y=2.0, z=3.0)"


def test_operators_reject_wrong_operand_types():
    v = Vector2D(1, 2)
    with pytest.raises(TypeError):
        v + 1
    with pytest.raises(TypeError):
        v - (1, 2)
    with pytest.raises(TypeError):
        v * v
    with pytest.raises(TypeError):
        v @ 2
    with pytest.raises(ZeroDivisionError):
        v / 0
