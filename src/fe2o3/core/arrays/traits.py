"""Capabilities shared by every multi-dimensional array realization.

All realizations store a flat, contiguous 1-D numpy buffer together with a
shape tuple. The layout is row-major: the last dimension varies fastest, so
for data ``v0 | v1 | ... | vn`` and dimensions ``d0 | d1`` the
multi-dimensional view of the data is::

    v0          | ... | v(d1-1)
    v(d1)       | ... | v(2d1-1)
                  ...
    v((d0-1)d1) | ... | vn

``DataContainer`` provides read access and reshaping, ``DataMutator`` adds
write access and ``DataAllocator`` adds resizing. The indexing algorithm is
implemented once here and reused by all three realizations.
"""

from abc import ABC, abstractmethod
import numbers
import operator
from typing import Any, Iterable, Iterator, List, Sequence, Tuple, Union

import numpy as np

from ..errors import (
    DimensionCountError,
    IndexOutOfBoundsError,
    ShapeMismatchError,
)
from .borrow import get_registry

Shape = Tuple[int, ...]
ShapeLike = Union[int, Iterable[int]]


def normalize_shape(shape: ShapeLike) -> Shape:
    """Convenience function to normalize a shape argument to a tuple of ints."""
    if shape is None:
        raise TypeError('shape is None')

    # handle 1D convenience form
    if isinstance(shape, numbers.Integral):
        shape = (int(shape),)

    shape = tuple(int(s) for s in shape)
    if any(s < 0 for s in shape):
        raise ValueError(f"Shape entries must be non-negative, got {shape}")
    return shape


def shape_size(shape: Sequence[int]) -> int:
    """Number of elements held by an array of the given shape."""
    size = 1
    for s in shape:
        size *= s
    return size


def compute_flat_index(shape: Shape, index: Sequence[int]) -> int:
    """
    Row-major flat offset of ``index`` in an array of ``shape``.

    Raises:
        DimensionCountError: index does not have one entry per dimension
        IndexOutOfBoundsError: some entry is not an integer, is negative or is
            not below its size
    """
    if len(index) != len(shape):
        raise DimensionCountError(len(shape), len(index))
    try:
        entries = [operator.index(idx) for idx in index]
    except TypeError:
        raise IndexOutOfBoundsError(tuple(index), shape) from None
    for size, idx in zip(shape, entries):
        if idx < 0 or idx >= size:
            raise IndexOutOfBoundsError(tuple(index), shape)

    flat = 0
    last = len(shape) - 1
    for k, idx in enumerate(entries):
        flat += idx
        if k != last:
            flat *= shape[k + 1]
    return flat


class DataContainer(ABC):
    """
    Read-only operations on multi-dimensional data.

    Subclasses set ``self._data`` (a 1-D ndarray) and ``self._shape``.
    """

    _data: np.ndarray
    _shape: Shape

    def _init_shape(self, shape: ShapeLike) -> None:
        shape = normalize_shape(shape)
        if shape_size(shape) != self._data.size:
            raise ShapeMismatchError(shape, shape_size(shape), self._data.size)
        self._shape = shape

    def dimensions(self) -> Shape:
        """Current shape of the data."""
        return self._shape

    @property
    def ndim(self) -> int:
        return len(self._shape)

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    def reshape(self, new_shape: ShapeLike) -> None:
        """
        Reinterpret the buffer with a new shape.

        The buffer is untouched; only the shape changes.

        Raises:
            ShapeMismatchError: new shape does not hold exactly len(self) elements
        """
        self._init_shape(new_shape)

    def flat_index(self, index: Sequence[int]) -> int:
        """Offset in the flat buffer of the element at ``index``."""
        return compute_flat_index(self._shape, tuple(index))

    def multi_index(self, index: Sequence[int]) -> Any:
        """Value of the element at ``index``."""
        return self._data[self.flat_index(index)]

    def as_array(self) -> np.ndarray:
        """The flat 1-D buffer backing this array."""
        return self._data

    def to_list(self) -> List[Any]:
        return self._data.tolist()

    def __len__(self) -> int:
        return self._data.size

    def __getitem__(self, flat: int) -> Any:
        return self._data[flat]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __repr__(self) -> str:
        # Construction may have failed before both attributes were set
        data = getattr(self, '_data', None)
        values = None if data is None else data.tolist()
        return (f"{self.__class__.__name__}({values!r}, "
                f"shape={getattr(self, '_shape', None)!r})")


class DataMutator(DataContainer):
    """
    Write operations on multi-dimensional data.

    Every write first asks the borrow registry whether the buffer may change.
    """

    # True for realizations that hold the exclusive borrow of their buffer
    _holds_exclusive_borrow = False

    def _check_write(self, action: str) -> None:
        get_registry().check_write(self._data, action, self._holds_exclusive_borrow)

    def multi_index_mut(self, index: Sequence[int]) -> np.ndarray:
        """
        Writable 0-d view onto the element at ``index``.

        Assigning ``view[...] = value`` writes through to the buffer. The
        borrow check happens when the view is taken, not when it is assigned.
        """
        flat = self.flat_index(index)
        self._check_write("take a mutable element of")
        return self._data[flat, ...]

    def set_multi_index(self, index: Sequence[int], value: Any) -> None:
        flat = self.flat_index(index)
        self._check_write("write to")
        self._data[flat] = value

    def __setitem__(self, flat: int, value: Any) -> None:
        self._check_write("write to")
        self._data[flat] = value


class DataAllocator(DataMutator):
    """Allocation operations on multi-dimensional data."""

    @abstractmethod
    def resize(self, new_shape: ShapeLike, value: Any) -> None:
        """
        Set the buffer length to the size of ``new_shape`` then reshape.

        The buffer is truncated or padded with ``value`` at its tail. Data is
        not re-laid out, so the old element-to-multi-index mapping only holds
        when the leading dimension alone changes.
        """
