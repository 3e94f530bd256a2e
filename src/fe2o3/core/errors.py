"""Exceptions raised on contract violations.

A contract violation is a programmer error: a malformed shape, an index with
the wrong number of dimensions, a write through a read-only borrow. These are
never meant to be caught and recovered from, which is why they all derive
from ``AssertionError``. Expected negative outcomes (such as looking up a
handle past the end of a finite set) are reported with ``None`` instead.
"""


class ContractViolationError(AssertionError):
    """Base class for all contract violations."""
    _msg = "{0}"

    def __init__(self, *args):
        super().__init__(self._msg.format(*args))


class ShapeMismatchError(ContractViolationError):
    _msg = "shape {0!r} holds {1} elements but the buffer has {2}"


class CellShapeError(ShapeMismatchError):
    _msg = "cell {0} has shape {1!r}, expected {2!r}"


class DimensionCountError(ContractViolationError):
    _msg = "expected an index with {0} dimension(s), got {1}"


class IndexOutOfBoundsError(ContractViolationError):
    _msg = "index {0!r} is out of bounds for shape {1!r}"


class InfiniteCardinalityError(ContractViolationError):
    _msg = "cannot {0} a set of infinite cardinality"


class ReadOnlyArrayError(ContractViolationError):
    _msg = "cannot {0} through a read-only view"


class NotAllocatableError(ContractViolationError):
    _msg = "cannot {0} a borrowed array; only owned arrays can be resized"


class BorrowConflictError(ContractViolationError):
    _msg = "cannot {0} buffer {1:#x}: {2}"
