from typing import Sequence

import numpy as np

from physvec.entities.vector_base import Vector


class ArrayVector(Vector):
    """A vector of any dimension backed by a private, read-only ``float64`` array.

    Accepts the components either unpacked or as a single sequence:
    ``ArrayVector(1, 2, 3)``, ``ArrayVector([1, 2, 3])``, ``ArrayVector(np.array([1, 2, 3]))``.
    The input is always copied, so later changes to the caller's sequence do not reach the vector.
    """

    __slots__ = ("_value",)

    def __init__(self, *components):
        if len(components) == 1 and isinstance(components[0], (tuple, list, np.ndarray, Vector)):
            components = components[0]
        value = np.array(components, dtype=np.float64)
        if value.ndim != 1:
            raise ValueError(f"ArrayVector requires a flat sequence of components, got shape {value.shape}")
        value.flags.writeable = False
        self._value = value

    @classmethod
    def _instance(cls, components: Sequence[float]) -> "ArrayVector":
        return cls(components)

    def get(self, index: int) -> float:
        return float(self._value[self._check_index(index)])

    def dimension(self) -> int:
        return self._value.shape[0]

    def components(self) -> tuple[float, ...]:
        return tuple(self._value.tolist())

    def __array__(self, dtype=None, copy=None):
        return np.array(self._value, dtype=dtype if dtype is not None else np.float64)
