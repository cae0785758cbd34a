class VectorError(Exception):
    """Base class for every failure raised by a vector operation."""


class DimensionMismatchError(VectorError, ValueError):
    """Raised when an operand does not have the dimension an operation requires.

    Attributes:
        vector: The vector whose dimension was rejected.
        expected (int): The dimension the operation required.
    """

    def __init__(self, vector, expected: int):
        self.vector = vector
        self.expected = expected
        super().__init__(f"Invalid dimension of vector {vector}: {vector.dimension()} (expected {expected})")


class ComponentIndexError(VectorError, IndexError):
    def __init__(self, index: int, dimension: int):
        self.index = index
        self.dimension = dimension
        super().__init__(f"Invalid vector component index: {index} (dimension {dimension})")


class UnsupportedOperationError(VectorError, ArithmeticError):
    """Raised for operations that are not defined for a vector type at all."""
