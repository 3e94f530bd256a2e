"""Finite and infinite sets."""

from abc import ABC, abstractmethod
import logging
import operator
from typing import Optional, Union
import weakref

from ..core.arrays import DataHold, DataKind, DataMix, DataView, DataWrap
from ..core.arrays.borrow import BorrowMode, get_registry
from ..core.arrays.traits import Shape, shape_size
from ..core.errors import DimensionCountError, IndexOutOfBoundsError, InfiniteCardinalityError
from ..core.types import Cardinality

logger = logging.getLogger(__name__)


class Set(ABC):
    """
    A set.

    The only thing that can reliably be asked of a set is its size, so that
    is the only method implementations must provide.
    """

    @abstractmethod
    def cardinality(self) -> Cardinality:
        """Number of elements in the set."""
        pass


class InfiniteSet(Set):
    """
    A set with infinitely many members.

    It holds no data since its members would not fit in memory.
    """

    def cardinality(self) -> Cardinality:
        return Cardinality.INFINITY

    def __repr__(self) -> str:
        return "InfiniteSet()"


class FiniteSet(Set):
    """
    A finite set of elements stored in a ``DataMix``.

    The first dimension of the data is the cardinality; the remaining
    dimensions are the shape of one element. A set of 3 points in 2-D is for
    instance stored with shape ``(3, 2)``.
    """

    def __init__(self, elements: Union[DataMix, DataView, DataWrap, DataHold]):
        """
        Args:
            elements: Backing data; a bare realization is tagged with its own kind
        """
        if not isinstance(elements, DataMix):
            elements = DataMix.of(elements)
        if len(elements.dimensions()) == 0:
            raise DimensionCountError(1, 0)

        self.elements = elements
        logger.debug(f"Created FiniteSet: cardinality={self.cardinality()}, "
                     f"element_shape={self.element_shape()}, kind={elements.kind.value}")

    def cardinality(self) -> Cardinality:
        return Cardinality.finite(self.elements.dimensions()[0])

    def element_size(self) -> int:
        """Number of scalars making up one element."""
        return shape_size(self.elements.dimensions()[1:])

    def element_shape(self) -> Shape:
        """Shape of one element; scalar elements have shape ``(1,)``."""
        trailing = tuple(self.elements.dimensions()[1:])
        if shape_size(trailing) == 1:
            return (1,)
        return trailing

    def get_element(self, handle: int) -> Optional[DataHold]:
        """
        Copy of the element at position ``handle``.

        Returns:
            An owned array with the element's data, or None when ``handle`` is
            past the end of the set
        """
        card = self.cardinality()
        if card.is_infinite:
            raise InfiniteCardinalityError("get an element of")

        handle = operator.index(handle)
        if handle < 0:
            raise IndexOutOfBoundsError(handle, (card.value,))
        if handle >= card.value:
            return None

        return self._copy_element(handle, self.element_size(), self.element_shape())

    def _copy_element(self, handle: int, size: int, shape: Shape) -> DataHold:
        start = handle * size
        return DataHold(self.elements.as_array()[start:start + size], shape)

    def iter(self) -> 'FiniteSetIterator':
        """Fresh iterator over the elements of the set."""
        return FiniteSetIterator(self)

    def __iter__(self) -> 'FiniteSetIterator':
        return self.iter()

    def __repr__(self) -> str:
        return f"FiniteSet({self.elements!r})"


class FiniteSetIterator:
    """
    Forward-only iterator over a ``FiniteSet``.

    Elements are yielded as owned copies in ascending handle order. The
    iterator cannot be restarted; ask the set for a new one instead. While it
    is alive it holds a shared borrow of the set's buffer, released once the
    iterator is exhausted or closed. Meanwhile the set's data can be
    neither written to nor resized.
    """

    def __init__(self, finite_set: FiniteSet):
        card = finite_set.cardinality()
        if card.is_infinite:
            raise InfiniteCardinalityError("iterate over")

        self._set = finite_set
        self._n_elements = card.value
        self._element_size = finite_set.element_size()
        self._element_shape = finite_set.element_shape()
        self._handle = 0

        # Reading through a wrap reborrows its exclusive borrow
        self._borrow = get_registry().acquire(
            finite_set.elements.as_array(), BorrowMode.SHARED,
            reborrow=finite_set.elements.kind is DataKind.WRAP,
        )
        weakref.finalize(self, self._borrow.release)

    @property
    def handle(self) -> int:
        """Handle of the next element to be yielded."""
        return self._handle

    def __iter__(self) -> 'FiniteSetIterator':
        return self

    def __next__(self) -> DataHold:
        if self._handle >= self._n_elements:
            self.close()
            raise StopIteration
        element = self._set._copy_element(self._handle, self._element_size, self._element_shape)
        self._handle += 1
        return element

    def close(self) -> None:
        """Release the borrow early; the iterator yields nothing afterwards."""
        self._handle = self._n_elements
        self._borrow.release()
