import logging
import math
import operator
import struct
from abc import ABC, abstractmethod
from numbers import Real
from typing import Iterable, Iterator, Sequence, Type, TypeVar

import numpy as np

from physvec.config.settings import (
    CANONICAL_NAN_BITS,
    COSINE_MAX,
    COSINE_MIN,
    HASH_PRIME,
    HASH_SEED,
)
from physvec.entities.errors import ComponentIndexError, DimensionMismatchError
from physvec.entities.formatting import format_vector

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="Vector")

_DOUBLE = struct.Struct("<d")
_LONG = struct.Struct("<q")


def double_to_bits(value: float) -> int:
    """Return the IEEE 754 bit pattern of ``value`` as a signed 64-bit integer.

    All NaNs map to the same canonical pattern, so ``nan`` equals ``nan`` while ``0.0`` and ``-0.0`` differ.
    """
    if math.isnan(value):
        return CANONICAL_NAN_BITS
    return _LONG.unpack(_DOUBLE.pack(value))[0]


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def mix_hash(result: int, value: float) -> int:
    """Fold one component into a running hash: ``31 * result + (int)(bits ^ (bits >>> 32))`` in 32-bit arithmetic."""
    bits = double_to_bits(value) & 0xFFFFFFFFFFFFFFFF
    return _to_int32(HASH_PRIME * result + ((bits ^ (bits >> 32)) & 0xFFFFFFFF))


def hash_components(components: Iterable[float]) -> int:
    result = HASH_SEED
    for component in components:
        result = mix_hash(result, component)
    return result


def ieee_divide(numerator: float, denominator: float) -> float:
    """Divide without raising on a zero denominator: ``x / 0`` gives ``±inf`` and ``0 / 0`` gives ``nan``."""
    if denominator:
        return numerator / denominator
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))


def clamp_cosine(cosine: float) -> float:
    """Pull a cosine that drifted outside [-1, 1] through rounding back onto the boundary. NaN passes through."""
    if cosine < COSINE_MIN:
        return COSINE_MIN
    elif cosine > COSINE_MAX:
        return COSINE_MAX
    return cosine


class Vector(ABC):
    """A quantity with magnitude and direction, represented by a fixed-order sequence of real components.

    Vectors are immutable: every operation returns a new instance or a scalar.
    Concrete types only need ``get``, ``dimension`` and ``_instance``; every other operation has a default
    implementation here which loops over ``get(i)``, so its speed is bounded by how cheap those accessors are.
    """

    __slots__ = ()

    # Keep numpy scalars from broadcasting over __array__ so they fall back to __rmul__
    __array_ufunc__ = None

    @abstractmethod
    def get(self, index: int) -> float:
        """Return the component at zero-based ``index``.

        Raises:
            ComponentIndexError: If ``index`` is negative or not lower than ``dimension()``.
        """
        ...

    @abstractmethod
    def dimension(self) -> int:
        """Return the number of components."""
        ...

    @classmethod
    @abstractmethod
    def _instance(cls: Type[T], components: Sequence[float]) -> T:
        """Build a new vector of this type from ``components``."""
        ...

    def components(self) -> tuple[float, ...]:
        return tuple(self.get(i) for i in range(self.dimension()))

    def magnitude(self) -> float:
        """Euclidean norm: ``sqrt(a^2 + b^2 + ... + n^2)``."""
        square = 0.0
        for i in range(self.dimension()):
            component = self.get(i)
            square += component * component
        return math.sqrt(square)

    def normalized(self: T) -> T:
        """Return the vector with the same direction and magnitude one.

        A zero vector is not guarded against: its components come out as ``nan``.
        """
        magnitude = self.magnitude()
        if magnitude == 0:
            logger.warning("Normalizing zero-magnitude vector %s", self)
        return self.times(ieee_divide(1.0, magnitude))

    def negative(self: T) -> T:
        return self.times(-1.0)

    def plus(self: T, addend: "Vector") -> T:
        self._check_dimension(addend)
        return self._instance([self.get(i) + addend.get(i) for i in range(self.dimension())])

    def minus(self: T, subtrahend: "Vector") -> T:
        self._check_dimension(subtrahend)
        return self._instance([self.get(i) - subtrahend.get(i) for i in range(self.dimension())])

    def times(self: T, scalar: float) -> T:
        return self._instance([self.get(i) * scalar for i in range(self.dimension())])

    def dot_product(self, other: "Vector") -> float:
        self._check_dimension(other)
        result = 0.0
        for i in range(self.dimension()):
            result += self.get(i) * other.get(i)
        return result

    def cross_product(self: T, other: "Vector") -> T:
        """Return ``self x other``. Both vectors must be three-dimensional."""
        if self.dimension() != 3:
            raise DimensionMismatchError(self, 3)
        self._check_dimension(other, 3)
        a0, a1, a2 = self.get(0), self.get(1), self.get(2)
        b0, b1, b2 = other.get(0), other.get(1), other.get(2)
        return self._instance(
            [
                a1 * b2 - a2 * b1,
                a2 * b0 - a0 * b2,
                a0 * b1 - a1 * b0,
            ]
        )

    def pointwise_product(self: T, other: "Vector") -> T:
        """Hadamard product: ``[a1 * b1, a2 * b2, ..., an * bn]``."""
        self._check_dimension(other)
        return self._instance([self.get(i) * other.get(i) for i in range(self.dimension())])

    def angle_with(self, other: "Vector") -> float:
        """Smallest angle between the two vectors in radians, in [0, pi].

        Uses ``arccos((self . other) / (|self| * |other|))``. Rounding can push the cosine marginally past 1 in
        absolute value, so it is clamped; the size of that error is not checked.
        """
        cosine = ieee_divide(self.dot_product(other), self.magnitude() * other.magnitude())
        return math.acos(clamp_cosine(cosine))

    def to_array(self) -> np.ndarray:
        return np.array(self)

    def _check_dimension(self, other: "Vector", expected: int | None = None) -> None:
        if expected is None:
            expected = self.dimension()
        if other.dimension() != expected:
            raise DimensionMismatchError(other, expected)

    def _check_index(self, index: int) -> int:
        index = operator.index(index)
        if not 0 <= index < self.dimension():
            raise ComponentIndexError(index, self.dimension())
        return index

    # --- Python protocol ---

    def __getitem__(self, index: int) -> float:
        return self.get(index)

    def __len__(self) -> int:
        return self.dimension()

    def __iter__(self) -> Iterator[float]:
        return iter(self.components())

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.minus(other)

    def __mul__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return self.times(scalar)

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def __truediv__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return self.times(1 / scalar)

    def __matmul__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.dot_product(other)

    def __neg__(self):
        return self.negative()

    def __abs__(self) -> float:
        return self.magnitude()

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Vector):
            return NotImplemented
        if self.dimension() != other.dimension():
            return False
        for i in range(self.dimension()):
            if double_to_bits(self.get(i)) != double_to_bits(other.get(i)):
                return False
        return True

    def __hash__(self) -> int:
        return hash_components(self.get(i) for i in range(self.dimension()))

    def __array__(self, dtype=None, copy=None):
        return np.array(self.components(), dtype=dtype if dtype is not None else np.float64)

    def __str__(self) -> str:
        return format_vector(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(c) for c in self.components())})"
