"""Multi-dimensional arrays with owned, borrowed-mutable and borrowed-immutable storage."""

from .traits import DataContainer, DataMutator, DataAllocator, normalize_shape, shape_size
from .view import DataView
from .wrap import DataWrap
from .hold import DataHold
from .mix import DataMix, DataKind
from .borrow import BorrowMode, BorrowRegistry, get_registry, set_enforcement

__all__ = [
    "DataContainer",
    "DataMutator",
    "DataAllocator",
    "DataView",
    "DataWrap",
    "DataHold",
    "DataMix",
    "DataKind",
    "BorrowMode",
    "BorrowRegistry",
    "get_registry",
    "set_enforcement",
    "normalize_shape",
    "shape_size",
]
