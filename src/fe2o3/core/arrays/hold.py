"""Owned multi-dimensional array."""

import logging
from typing import Any, Optional

import numpy as np

from .traits import DataAllocator, ShapeLike, normalize_shape, shape_size

logger = logging.getLogger(__name__)


class DataHold(DataAllocator):
    """
    Multi-dimensional data with write access and control over allocation.

    A DataHold owns its buffer exclusively: construction always copies the
    input, and ``as_array`` only hands out read-only views, so nothing else
    writes to the data. Writes and resizes are refused while a view or a set
    iterator borrows the buffer. It is the only realization that can grow
    or shrink.

    See ``fe2o3.core.arrays.traits`` for layout details.
    """

    def __init__(
        self,
        data: Any = (),
        shape: Optional[ShapeLike] = None,
        dtype: Optional[np.dtype] = None
    ):
        """
        Initialize an owned array.

        Args:
            data: Values to copy in; nested sequences and ndarrays are flattened
                in row-major order
            shape: Shape of the array (default: the shape of ``data``)
            dtype: Element type (default: inferred from ``data``)
        """
        array = np.array(data, dtype=dtype)
        if shape is None:
            shape = array.shape
        self._data = array.ravel(order='C')
        self._init_shape(shape)

    @classmethod
    def filled(cls, shape: ShapeLike, value: Any, dtype: Optional[np.dtype] = None) -> 'DataHold':
        """Create an array of ``shape`` with every element set to ``value``."""
        shape = normalize_shape(shape)
        return cls(np.full(shape_size(shape), value, dtype=dtype), shape)

    def resize(self, new_shape: ShapeLike, value: Any) -> None:
        new_shape = normalize_shape(new_shape)
        self._check_write("resize")
        new_size = shape_size(new_shape)
        old_size = self._data.size

        if new_size <= old_size:
            self._data = self._data[:new_size].copy()
        else:
            padding = np.full(new_size - old_size, value, dtype=self._data.dtype)
            self._data = np.concatenate((self._data, padding))

        self.reshape(new_shape)
        logger.debug(f"Resized DataHold: {old_size} -> {new_size} elements, shape={new_shape}")

    def as_array(self) -> np.ndarray:
        """
        Read-only view of the flat buffer.

        Writes must go through the DataHold so the borrow registry sees them.
        """
        view = self._data.view()
        view.flags.writeable = False
        return view

    def copy(self) -> 'DataHold':
        return DataHold(self._data, self._shape)
