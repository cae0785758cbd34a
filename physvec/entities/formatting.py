from typing import TYPE_CHECKING, Optional, Protocol

import numpy as np

if TYPE_CHECKING:
    from physvec.entities.vector_base import Vector


class VectorFormatter(Protocol):
    """Turns a vector into a string. Presentation only: formatters never change the algebra."""

    def format(self, vector: "Vector") -> str: ...


class BracketFormatter:
    """Bracketed, comma separated component list, e.g. ``[1.0, 2.0, 3.0]``.

    Args:
        precision (int, optional): Digits after the decimal point. ``None`` prints ``repr``-exact floats.
        separator (str, optional): Placed between components. Defaults to ``", "``.
    """

    def __init__(self, precision: Optional[int] = None, separator: str = ", "):
        if precision is not None and precision < 0:
            raise ValueError("precision should not be negative")
        self.precision = precision
        self.separator = separator

    def _format_component(self, component: float) -> str:
        if self.precision is None:
            return repr(float(component))
        return f"{component:.{self.precision}f}"

    def format(self, vector: "Vector") -> str:
        return "[" + self.separator.join(self._format_component(c) for c in vector.components()) + "]"


class NumpyFormatter:
    """Formats through ``numpy.array2string``, which suppresses noise and aligns columns."""

    def __init__(self, precision: int = 8, suppress_small: bool = True):
        self.precision = precision
        self.suppress_small = suppress_small

    def format(self, vector: "Vector") -> str:
        return np.array2string(
            np.array(vector.components(), dtype=np.float64),
            precision=self.precision,
            suppress_small=self.suppress_small,
            separator=", ",
        )


_DEFAULT_FORMATTER = BracketFormatter()


def format_vector(vector: "Vector", formatter: Optional[VectorFormatter] = None) -> str:
    """Format ``vector`` with ``formatter``, falling back to the bracketed component list."""
    return (formatter or _DEFAULT_FORMATTER).format(vector)
