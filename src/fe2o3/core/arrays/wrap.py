"""Borrowed, writable multi-dimensional array."""

from typing import Optional

import numpy as np

from .borrow import BorrowedArrayMixin, BorrowMode
from .traits import DataMutator, ShapeLike


class DataWrap(BorrowedArrayMixin, DataMutator):
    """
    Multi-dimensional data with write access but no control over allocation.

    A DataWrap writes straight into a buffer owned by someone else, so its
    length is fixed by the lender. It takes an exclusive borrow of the buffer
    for as long as it lives: no other view or wrap of the same memory may be
    created until it is released. While a set iterator reads through the
    wrap, writes through it are refused.

    See ``fe2o3.core.arrays.traits`` for layout details.
    """

    _holds_exclusive_borrow = True

    def __init__(self, buffer: np.ndarray, shape: Optional[ShapeLike] = None):
        """
        Args:
            buffer: Writable, C-contiguous ndarray to borrow (not copied)
            shape: Shape to view the buffer with (default: ``buffer.shape``)
        """
        if not isinstance(buffer, np.ndarray):
            raise TypeError(f"DataWrap needs a numpy array to borrow, got {type(buffer).__name__}")
        if not buffer.flags.c_contiguous:
            raise ValueError("DataWrap needs a C-contiguous buffer")
        if not buffer.flags.writeable:
            raise ValueError("DataWrap needs a writeable buffer")

        self._data = buffer.reshape(-1)
        self._init_shape(buffer.shape if shape is None else shape)
        self._take_borrow(buffer, BorrowMode.EXCLUSIVE)
