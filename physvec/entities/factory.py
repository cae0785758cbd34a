import numpy as np

from physvec.entities.array_vector import ArrayVector
from physvec.entities.vector2d import Vector2D
from physvec.entities.vector3d import Vector3D
from physvec.entities.vector_base import Vector


def vector_of(*components) -> Vector:
    """Return a vector holding ``components`` in the most specialized type available.

    Two components give a ``Vector2D``, three a ``Vector3D``; every other dimension falls back to ``ArrayVector``.
    A single tuple, list or array is unpacked, the same way the constructors accept it.
    """
    if len(components) == 1 and isinstance(components[0], (tuple, list, np.ndarray)):
        components = tuple(components[0])
    if len(components) == Vector2D.DIMENSION:
        return Vector2D(*components)
    elif len(components) == Vector3D.DIMENSION:
        return Vector3D(*components)
    return ArrayVector(components)


def zero_vector(dimension: int) -> Vector:
    if dimension < 0:
        raise ValueError("dimension should not be negative")
    return vector_of((0.0,) * dimension)
