import logging
import math
import operator
from typing import Iterator, Sequence

import numpy as np

from physvec.config.settings import HASH_SEED
from physvec.entities.errors import ComponentIndexError, DimensionMismatchError
from physvec.entities.vector2d import Vector2D
from physvec.entities.vector_base import (
    Vector,
    clamp_cosine,
    double_to_bits,
    ieee_divide,
    mix_hash,
)

logger = logging.getLogger(__name__)


class Vector3D(Vector):
    """Three-dimensional vector stored in three named fields.

    Same dispatch as ``Vector2D``: a ``Vector3D`` operand takes the ``*3d`` fast path with direct field
    arithmetic, any other ``Vector`` is dimension-checked and read through ``get``.
    """

    __slots__ = ("_x", "_y", "_z")

    DIMENSION = 3

    def __init__(self, *coords):
        # Handle (1, 2, 3), ((1, 2, 3)), [1, 2, 3], np.array([1, 2, 3])
        if len(coords) == 1:
            c = coords[0]
            if isinstance(c, (tuple, list, np.ndarray)):
                if len(c) != 3:
                    raise TypeError(f"Vector3D requires 3 coordinates, got {len(c)}")
                self._x = float(c[0])
                self._y = float(c[1])
                self._z = float(c[2])
            else:
                raise TypeError(f"Invalid single argument type for Vector3D: {type(c)}")
        elif len(coords) == 3:
            self._x = float(coords[0])
            self._y = float(coords[1])
            self._z = float(coords[2])
        else:
            raise TypeError(f"Vector3D requires 3 coordinates, got {len(coords)}")

    @classmethod
    def _instance(cls, components: Sequence[float]) -> "Vector3D":
        return cls(components[0], components[1], components[2])

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def z(self) -> float:
        return self._z

    def get(self, index: int) -> float:
        index = operator.index(index)
        if index == 0:
            return self._x
        elif index == 1:
            return self._y
        elif index == 2:
            return self._z
        raise ComponentIndexError(index, self.DIMENSION)

    def dimension(self) -> int:
        return self.DIMENSION

    def components(self) -> tuple[float, float, float]:
        return (self._x, self._y, self._z)

    def magnitude(self) -> float:
        return math.sqrt(self._x * self._x + self._y * self._y + self._z * self._z)

    def normalized(self) -> "Vector3D":
        mag = self.magnitude()
        if mag == 0:
            logger.warning("Normalizing zero-magnitude vector %s", self)
        return Vector3D(ieee_divide(self._x, mag), ieee_divide(self._y, mag), ieee_divide(self._z, mag))

    def negative(self) -> "Vector3D":
        return Vector3D(-self._x, -self._y, -self._z)

    def plus(self, addend: Vector) -> "Vector3D":
        if isinstance(addend, Vector3D):
            return self.plus3d(addend)
        self._check_dimension(addend)
        return Vector3D(self._x + addend.get(0), self._y + addend.get(1), self._z + addend.get(2))

    def plus3d(self, addend: "Vector3D") -> "Vector3D":
        return Vector3D(self._x + addend._x, self._y + addend._y, self._z + addend._z)

    def minus(self, subtrahend: Vector) -> "Vector3D":
        if isinstance(subtrahend, Vector3D):
            return self.minus3d(subtrahend)
        self._check_dimension(subtrahend)
        return Vector3D(self._x - subtrahend.get(0), self._y - subtrahend.get(1), self._z - subtrahend.get(2))

    def minus3d(self, subtrahend: "Vector3D") -> "Vector3D":
        return Vector3D(self._x - subtrahend._x, self._y - subtrahend._y, self._z - subtrahend._z)

    def times(self, scalar: float) -> "Vector3D":
        return Vector3D(self._x * scalar, self._y * scalar, self._z * scalar)

    def dot_product(self, other: Vector) -> float:
        if isinstance(other, Vector3D):
            return self.dot3d(other)
        self._check_dimension(other)
        return self._x * other.get(0) + self._y * other.get(1) + self._z * other.get(2)

    def dot3d(self, other: "Vector3D") -> float:
        return self._x * other._x + self._y * other._y + self._z * other._z

    def cross_product(self, other: Vector) -> "Vector3D":
        if isinstance(other, Vector3D):
            return self.cross3d(other)
        if other.dimension() != self.DIMENSION:
            raise DimensionMismatchError(other, self.DIMENSION)
        b0, b1, b2 = other.get(0), other.get(1), other.get(2)
        return Vector3D(
            self._y * b2 - self._z * b1,
            self._z * b0 - self._x * b2,
            self._x * b1 - self._y * b0,
        )

    def cross3d(self, other: "Vector3D") -> "Vector3D":
        return Vector3D(
            self._y * other._z - self._z * other._y,
            self._z * other._x - self._x * other._z,
            self._x * other._y - self._y * other._x,
        )

    def pointwise_product(self, other: Vector) -> "Vector3D":
        if isinstance(other, Vector3D):
            return self.pointwise3d(other)
        self._check_dimension(other)
        return Vector3D(self._x * other.get(0), self._y * other.get(1), self._z * other.get(2))

    def pointwise3d(self, other: "Vector3D") -> "Vector3D":
        return Vector3D(self._x * other._x, self._y * other._y, self._z * other._z)

    def angle_with(self, other: Vector) -> float:
        cosine = ieee_divide(self.dot_product(other), self.magnitude() * other.magnitude())
        return math.acos(clamp_cosine(cosine))

    def to_2d(self) -> Vector2D:
        return Vector2D(self._x, self._y)

    def __iter__(self) -> Iterator[float]:
        yield self._x
        yield self._y
        yield self._z

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Vector):
            return NotImplemented
        if other.dimension() != self.DIMENSION:
            return False
        return (
            double_to_bits(self._x) == double_to_bits(other.get(0))
            and double_to_bits(self._y) == double_to_bits(other.get(1))
            and double_to_bits(self._z) == double_to_bits(other.get(2))
        )

    def __hash__(self) -> int:
        return mix_hash(mix_hash(mix_hash(HASH_SEED, self._x), self._y), self._z)

    def __array__(self, dtype=None, copy=None):
        return np.array([self._x, self._y, self._z], dtype=dtype if dtype is not None else np.float64)

    def __repr__(self):
        return f"Vector3D(x={self.x}, y={self.y}, z={self.z})"
