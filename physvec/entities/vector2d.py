import logging
import math
import operator
from typing import Iterator, Sequence

import numpy as np

from physvec.config.settings import HASH_SEED
from physvec.entities.errors import ComponentIndexError, UnsupportedOperationError
from physvec.entities.vector_base import (
    Vector,
    clamp_cosine,
    double_to_bits,
    ieee_divide,
    mix_hash,
)

logger = logging.getLogger(__name__)


class Vector2D(Vector):
    """Two-dimensional vector stored in two named fields instead of an array.

    Every operation is written out on the fields. When the operand is also a ``Vector2D`` the generic methods
    delegate to the ``*2d`` fast paths; any other ``Vector`` is dimension-checked and read through ``get``.
    """

    __slots__ = ("_x", "_y")

    DIMENSION = 2

    def __init__(self, *coords):
        # Handle (1, 2), ((1, 2)), [1, 2], np.array([1, 2])
        if len(coords) == 1:
            c = coords[0]
            if isinstance(c, (tuple, list, np.ndarray)):
                if len(c) != 2:
                    raise TypeError(f"Vector2D requires 2 coordinates, got {len(c)}")
                self._x = float(c[0])
                self._y = float(c[1])
            else:
                raise TypeError(f"Invalid single argument type for Vector2D: {type(c)}")
        elif len(coords) == 2:
            self._x = float(coords[0])
            self._y = float(coords[1])
        else:
            raise TypeError(f"Vector2D requires 2 coordinates, got {len(coords)}")

    @classmethod
    def _instance(cls, components: Sequence[float]) -> "Vector2D":
        return cls(components[0], components[1])

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    def get(self, index: int) -> float:
        index = operator.index(index)
        if index == 0:
            return self._x
        elif index == 1:
            return self._y
        raise ComponentIndexError(index, self.DIMENSION)

    def dimension(self) -> int:
        return self.DIMENSION

    def components(self) -> tuple[float, float]:
        return (self._x, self._y)

    def magnitude(self) -> float:
        return math.sqrt(self._x * self._x + self._y * self._y)

    def normalized(self) -> "Vector2D":
        mag = self.magnitude()
        if mag == 0:
            logger.warning("Normalizing zero-magnitude vector %s", self)
        return Vector2D(ieee_divide(self._x, mag), ieee_divide(self._y, mag))

    def negative(self) -> "Vector2D":
        return Vector2D(-self._x, -self._y)

    def plus(self, addend: Vector) -> "Vector2D":
        if isinstance(addend, Vector2D):
            return self.plus2d(addend)
        self._check_dimension(addend)
        return Vector2D(self._x + addend.get(0), self._y + addend.get(1))

    def plus2d(self, addend: "Vector2D") -> "Vector2D":
        return Vector2D(self._x + addend._x, self._y + addend._y)

    def minus(self, subtrahend: Vector) -> "Vector2D":
        if isinstance(subtrahend, Vector2D):
            return self.minus2d(subtrahend)
        self._check_dimension(subtrahend)
        return Vector2D(self._x - subtrahend.get(0), self._y - subtrahend.get(1))

    def minus2d(self, subtrahend: "Vector2D") -> "Vector2D":
        return Vector2D(self._x - subtrahend._x, self._y - subtrahend._y)

    def times(self, scalar: float) -> "Vector2D":
        return Vector2D(self._x * scalar, self._y * scalar)

    def dot_product(self, other: Vector) -> float:
        if isinstance(other, Vector2D):
            return self.dot2d(other)
        self._check_dimension(other)
        return self._x * other.get(0) + self._y * other.get(1)

    def dot2d(self, other: "Vector2D") -> float:
        return self._x * other._x + self._y * other._y

    def cross_product(self, other: Vector) -> "Vector2D":
        raise UnsupportedOperationError("The cross product is not defined for two dimensions")

    def pointwise_product(self, other: Vector) -> "Vector2D":
        if isinstance(other, Vector2D):
            return self.pointwise2d(other)
        self._check_dimension(other)
        return Vector2D(self._x * other.get(0), self._y * other.get(1))

    def pointwise2d(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self._x * other._x, self._y * other._y)

    def angle_with(self, other: Vector) -> float:
        cosine = ieee_divide(self.dot_product(other), self.magnitude() * other.magnitude())
        return math.acos(clamp_cosine(cosine))

    def __iter__(self) -> Iterator[float]:
        yield self._x
        yield self._y

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Vector):
            return NotImplemented
        if other.dimension() != self.DIMENSION:
            return False
        return double_to_bits(self._x) == double_to_bits(other.get(0)) and (
            double_to_bits(self._y) == double_to_bits(other.get(1))
        )

    def __hash__(self) -> int:
        return mix_hash(mix_hash(HASH_SEED, self._x), self._y)

    def __array__(self, dtype=None, copy=None):
        return np.array([self._x, self._y], dtype=dtype if dtype is not None else np.float64)

    def __repr__(self):
        return f"Vector2D(x={self.x}, y={self.y})"
