"""Sets and topologies built on top of the array layer."""

from .sets import Set, InfiniteSet, FiniteSet, FiniteSetIterator
from .numbers import NumberSet
from .topology import (
    TopologyBasis,
    ImplicitTopologyBasis,
    ImplicitTopologyBasisIterator,
    ExplicitTopologyBasis,
)
from .grids import (
    line_cells,
    quad_cells,
    structured_line_basis,
    structured_quad_basis,
    materialize,
)

__all__ = [
    "Set",
    "InfiniteSet",
    "FiniteSet",
    "FiniteSetIterator",
    "NumberSet",
    "TopologyBasis",
    "ImplicitTopologyBasis",
    "ImplicitTopologyBasisIterator",
    "ExplicitTopologyBasis",
    "line_cells",
    "quad_cells",
    "structured_line_basis",
    "structured_quad_basis",
    "materialize",
]
