"""Topology bases.

A topology is by nature a very large set, the set of all open sets of a
space, and holding one is much too costly in memory. Holding a minimal basis
for it (a minimal set of sets from which the whole topology can be built by
union, intersection and subsetting) is doable and sufficient.

Each cell of a basis is returned as an owned ``DataHold`` whose values are
handles into some base set, e.g. the vertex indices of a mesh cell.
"""

from abc import abstractmethod
import logging
import operator
from typing import Callable, Optional, Union

from ..core.arrays import DataHold
from ..core.errors import IndexOutOfBoundsError, InfiniteCardinalityError
from ..core.types import Cardinality
from .sets import FiniteSet, FiniteSetIterator, Set

logger = logging.getLogger(__name__)

CellMapper = Callable[[int], Optional[DataHold]]


class TopologyBasis(Set):
    """
    A topology basis.

    Implementations need only provide ``get_element``, which retrieves one
    cell of the basis, on top of the ``Set`` cardinality.
    """

    @abstractmethod
    def get_element(self, handle: int) -> Optional[DataHold]:
        """
        Get a cell from the topology basis.

        Returns:
            The cell, or None if ``handle`` does not name one
        """
        pass


class ImplicitTopologyBasis(TopologyBasis):
    """
    A low-memory topology basis encoded in a single function.

    When the topology has an underlying structure, its cells can be built on
    the fly instead of stored. The topology of a structured grid is typically
    well suited to this description.

    The mapping function must be pure: the same handle must always give an
    equal cell, since callers may cache cells by handle. It is only ever
    called with handles below a finite cardinality.
    """

    def __init__(self, cardinality: Union[Cardinality, int], mapper: CellMapper):
        """
        Initialize implicit topology basis.

        Args:
            cardinality: Number of cells (finite or ``Cardinality.INFINITY``)
            mapper: Pure function from a handle to its cell
        """
        if not callable(mapper):
            raise TypeError(f"mapper must be callable, got {type(mapper).__name__}")

        self._cardinality = Cardinality.coerce(cardinality)
        self._mapper = mapper

        logger.debug(f"Created ImplicitTopologyBasis: cardinality={self._cardinality}")

    def cardinality(self) -> Cardinality:
        return self._cardinality

    @property
    def mapper(self) -> CellMapper:
        return self._mapper

    def get_element(self, handle: int) -> Optional[DataHold]:
        handle = operator.index(handle)
        if handle < 0:
            raise IndexOutOfBoundsError(handle, (str(self._cardinality),))
        if self._cardinality.is_finite and handle < self._cardinality.value:
            return self._mapper(handle)
        return None

    def iter(self) -> 'ImplicitTopologyBasisIterator':
        """Iterator over the cells; only finite bases can be iterated."""
        return ImplicitTopologyBasisIterator(self)

    def __iter__(self) -> 'ImplicitTopologyBasisIterator':
        return self.iter()

    def __repr__(self) -> str:
        return f"ImplicitTopologyBasis(cardinality={self._cardinality!r}, mapper={self._mapper!r})"


class ImplicitTopologyBasisIterator:
    """Iterator over a finite ``ImplicitTopologyBasis``."""

    def __init__(self, basis: ImplicitTopologyBasis):
        if basis.cardinality().is_infinite:
            raise InfiniteCardinalityError("iterate over")
        self._basis = basis
        self._handle = 0

    def __iter__(self) -> 'ImplicitTopologyBasisIterator':
        return self

    def __next__(self) -> DataHold:
        # Iteration ends at the first handle without a cell, which for a
        # well-formed mapper is the cardinality.
        cell = self._basis.get_element(self._handle)
        if cell is None:
            raise StopIteration
        self._handle += 1
        return cell


class ExplicitTopologyBasis(TopologyBasis):
    """
    A topology basis stored in memory.

    Each cell is one element of a ``FiniteSet``; its data should be handles
    to elements of a base set. Unstructured grids use this representation
    for their topology.
    """

    def __init__(self, basis: FiniteSet):
        if not isinstance(basis, FiniteSet):
            raise TypeError(f"ExplicitTopologyBasis needs a FiniteSet, got {type(basis).__name__}")
        self._basis = basis

        logger.debug(f"Created ExplicitTopologyBasis: cardinality={basis.cardinality()}")

    @property
    def basis(self) -> FiniteSet:
        return self._basis

    def cardinality(self) -> Cardinality:
        return self._basis.cardinality()

    def get_element(self, handle: int) -> Optional[DataHold]:
        return self._basis.get_element(handle)

    def iter(self) -> FiniteSetIterator:
        """Iterator over the cells."""
        return self._basis.iter()

    def __iter__(self) -> FiniteSetIterator:
        return self.iter()

    def __repr__(self) -> str:
        return f"ExplicitTopologyBasis({self._basis!r})"
