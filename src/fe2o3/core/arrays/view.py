"""Borrowed, read-only multi-dimensional array."""

from typing import Any, Optional

import numpy as np

from .borrow import BorrowedArrayMixin, BorrowMode
from .traits import DataContainer, ShapeLike


class DataView(BorrowedArrayMixin, DataContainer):
    """
    Multi-dimensional data without write access.

    The view keeps a read-only numpy view of the lender's buffer, so any
    attempt to write through it fails. Any number of views of the same buffer
    may coexist, but none may coexist with a ``DataWrap`` of it, and the
    ``DataHold`` owning the buffer refuses writes while a view is alive.

    See ``fe2o3.core.arrays.traits`` for layout details.
    """

    def __init__(self, buffer: Any, shape: Optional[ShapeLike] = None):
        """
        Args:
            buffer: C-contiguous ndarray to borrow; other sequences are
                converted once into a new array
            shape: Shape to view the buffer with (default: the buffer's shape)
        """
        source = np.asarray(buffer)
        if not source.flags.c_contiguous:
            raise ValueError("DataView needs a C-contiguous buffer")
        flat = source.reshape(-1).view()
        flat.flags.writeable = False

        self._data = flat
        self._init_shape(source.shape if shape is None else shape)
        self._take_borrow(source, BorrowMode.SHARED)
