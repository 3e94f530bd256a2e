"""Basic scalar types shared across the library."""

import functools
from typing import Optional, Union

import numpy as np

from .errors import InfiniteCardinalityError

# Default element types for commonly used data
FE2O3_INT = np.int32
FE2O3_FLOAT = np.float64

# Types used when the library allocates data itself; see set_default_types
_default_types = {"element": np.dtype(FE2O3_FLOAT), "handle": np.dtype(FE2O3_INT)}


def default_element_type() -> np.dtype:
    """Element type of scalar data the library allocates."""
    return _default_types["element"]


def default_handle_type() -> np.dtype:
    """Type of handles (indices into sets) the library allocates."""
    return _default_types["handle"]


def set_default_types(element_type=FE2O3_FLOAT, handle_type=FE2O3_INT) -> None:
    """
    Set the types used for data the library allocates.

    Args:
        element_type: Scalar element type, e.g. for empty sets
        handle_type: Integer type of handles, e.g. in generated cells

    Raises:
        ValueError: handle_type is not an integer type
    """
    element_type = np.dtype(element_type)
    handle_type = np.dtype(handle_type)
    if not np.issubdtype(handle_type, np.integer):
        raise ValueError(f"Handle type must be an integer type, got {handle_type}")
    _default_types["element"] = element_type
    _default_types["handle"] = handle_type


@functools.total_ordering
class Cardinality:
    """
    Size of a set: either a finite natural number or infinity.

    Infinity compares unequal to every finite value (zero included) and
    orders after all of them.
    """

    __slots__ = ("_value",)

    def __init__(self, value: Optional[int] = None):
        """
        Args:
            value: Number of elements, or None for an infinite cardinality
        """
        if value is not None:
            value = int(value)
            if value < 0:
                raise ValueError(f"Cardinality must be non-negative, got {value}")
        self._value = value

    @classmethod
    def finite(cls, value: int) -> 'Cardinality':
        return cls(value)

    @classmethod
    def coerce(cls, value: Union['Cardinality', int]) -> 'Cardinality':
        """Accept either a Cardinality or a plain int."""
        if isinstance(value, Cardinality):
            return value
        return cls(value)

    @property
    def is_finite(self) -> bool:
        return self._value is not None

    @property
    def is_infinite(self) -> bool:
        return self._value is None

    @property
    def value(self) -> int:
        """The finite size; raises if the cardinality is infinite."""
        if self._value is None:
            raise InfiniteCardinalityError("read a finite value from")
        return self._value

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __eq__(self, other) -> bool:
        if isinstance(other, Cardinality):
            return self._value == other._value
        if isinstance(other, (int, np.integer)) and not isinstance(other, bool):
            return self._value is not None and self._value == other
        return NotImplemented

    def __lt__(self, other) -> bool:
        if isinstance(other, (int, np.integer)) and not isinstance(other, bool):
            other = Cardinality(other)
        if not isinstance(other, Cardinality):
            return NotImplemented
        if self._value is None:
            return False
        if other._value is None:
            return True
        return self._value < other._value

    def __hash__(self) -> int:
        # Finite values hash like the ints they compare equal to
        if self._value is None:
            return hash(("Cardinality", None))
        return hash(self._value)

    def __str__(self) -> str:
        return "Infinity" if self._value is None else str(self._value)

    def __repr__(self) -> str:
        if self._value is None:
            return "Cardinality.INFINITY"
        return f"Cardinality.finite({self._value})"


Cardinality.INFINITY = Cardinality(None)
