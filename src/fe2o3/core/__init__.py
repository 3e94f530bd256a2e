"""Core building blocks shared by every other layer."""

from .types import (
    Cardinality,
    FE2O3_INT,
    FE2O3_FLOAT,
    default_element_type,
    default_handle_type,
    set_default_types,
)
from .errors import (
    ContractViolationError,
    ShapeMismatchError,
    CellShapeError,
    DimensionCountError,
    IndexOutOfBoundsError,
    InfiniteCardinalityError,
    ReadOnlyArrayError,
    NotAllocatableError,
    BorrowConflictError,
)
from .arrays import DataView, DataWrap, DataHold, DataMix, DataKind

__all__ = [
    "Cardinality",
    "FE2O3_INT",
    "FE2O3_FLOAT",
    "default_element_type",
    "default_handle_type",
    "set_default_types",
    "ContractViolationError",
    "ShapeMismatchError",
    "CellShapeError",
    "DimensionCountError",
    "IndexOutOfBoundsError",
    "InfiniteCardinalityError",
    "ReadOnlyArrayError",
    "NotAllocatableError",
    "BorrowConflictError",
    "DataView",
    "DataWrap",
    "DataHold",
    "DataMix",
    "DataKind",
]
