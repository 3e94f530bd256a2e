"""
fe2o3

Data substrate of a finite-element library: multi-dimensional arrays with
owned, borrowed-mutable and borrowed-immutable storage, and the sets and
topology bases built on top of them.
"""

# Version information
from ._version import __version__

from .core import (
    Cardinality,
    FE2O3_INT,
    FE2O3_FLOAT,
    ContractViolationError,
    ShapeMismatchError,
    CellShapeError,
    DimensionCountError,
    IndexOutOfBoundsError,
    InfiniteCardinalityError,
    ReadOnlyArrayError,
    NotAllocatableError,
    BorrowConflictError,
    DataView,
    DataWrap,
    DataHold,
    DataMix,
    DataKind,
)
from .spaces import (
    Set,
    InfiniteSet,
    FiniteSet,
    FiniteSetIterator,
    NumberSet,
    TopologyBasis,
    ImplicitTopologyBasis,
    ExplicitTopologyBasis,
    structured_line_basis,
    structured_quad_basis,
    materialize,
)
from .config import Fe2O3Config

__all__ = [
    "__version__",
    "Cardinality",
    "FE2O3_INT",
    "FE2O3_FLOAT",
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
    "Set",
    "InfiniteSet",
    "FiniteSet",
    "FiniteSetIterator",
    "NumberSet",
    "TopologyBasis",
    "ImplicitTopologyBasis",
    "ExplicitTopologyBasis",
    "structured_line_basis",
    "structured_quad_basis",
    "materialize",
    "Fe2O3Config",
]
