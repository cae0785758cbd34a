from .entities.array_vector import ArrayVector
from .entities.errors import (
    ComponentIndexError,
    DimensionMismatchError,
    UnsupportedOperationError,
    VectorError,
)
from .entities.factory import vector_of, zero_vector
from .entities.formatting import (
    BracketFormatter,
    NumpyFormatter,
    VectorFormatter,
    format_vector,
)
from .entities.vector2d import Vector2D
from .entities.vector3d import Vector3D
from .entities.vector_base import Vector

__all__ = [
    "Vector",
    "ArrayVector",
    "Vector2D",
    "Vector3D",
    "vector_of",
    "zero_vector",
    "VectorError",
    "DimensionMismatchError",
    "ComponentIndexError",
    "UnsupportedOperationError",
    "VectorFormatter",
    "BracketFormatter",
    "NumpyFormatter",
    "format_vector",
]
