"""Runtime enforcement of the single-writer/multi-reader aliasing rule.

Borrowed arrays (``DataView`` and ``DataWrap``) do not own their buffer. To
keep them from silently corrupting each other, every borrow is recorded in a
process-wide registry keyed by the root owner of the buffer (the end of the
ndarray ``.base`` chain):

- a SHARED borrow (read-only view) may coexist with other SHARED borrows;
- an EXCLUSIVE borrow (mutable wrap) must be the only borrow of its buffer;
- writes and resizes of an owned array are refused while its buffer has a
  live borrow, and a wrap cannot write while a set iterator reborrows it.

A borrow ends when ``release()`` is called, when the borrower is used as a
context manager and the block exits, or when the borrower is garbage
collected.

Only accesses made through this library are tracked. Writing to a buffer
through the lender's own ndarray while a view of it is alive bypasses the
registry; doing so is unchecked and the results are undefined.
"""

from enum import Enum
import logging
from typing import Any, Dict
import weakref

import numpy as np

from ..errors import BorrowConflictError

logger = logging.getLogger(__name__)


class BorrowMode(Enum):
    """Access mode of a borrow."""
    SHARED = "shared"
    EXCLUSIVE = "exclusive"


def buffer_root(buffer: Any) -> Any:
    """Follow the ndarray ``.base`` chain to the object that owns the memory."""
    root = buffer
    while isinstance(root, np.ndarray) and root.base is not None:
        root = root.base
    return root


class Borrow:
    """Token for one live borrow; release it exactly once."""

    __slots__ = ("_registry", "key", "mode", "active", "__weakref__")

    def __init__(self, registry: 'BorrowRegistry', key: int, mode: BorrowMode, active: bool):
        self._registry = registry
        self.key = key
        self.mode = mode
        self.active = active

    def release(self) -> None:
        if self.active:
            self.active = False
            self._registry._release(self.key, self.mode)

    def __repr__(self) -> str:
        state = "active" if self.active else "released"
        return f"Borrow(key={self.key:#x}, mode={self.mode.value}, {state})"


class BorrowRegistry:
    """Bookkeeping of live borrows per root buffer."""

    def __init__(self, enforce: bool = True):
        self.enforce = enforce
        self._shared: Dict[int, int] = {}
        self._exclusive: Dict[int, int] = {}

    def acquire(self, buffer: Any, mode: BorrowMode, reborrow: bool = False) -> Borrow:
        """
        Record a new borrow of ``buffer``.

        Args:
            buffer: Array whose root owner is borrowed
            mode: Access mode of the borrow
            reborrow: Shared borrow taken through the holder of the exclusive
                borrow; it coexists with that borrow and freezes its writes

        Raises:
            BorrowConflictError: the borrow would break the aliasing rule
        """
        key = id(buffer_root(buffer))
        if not self.enforce:
            return Borrow(self, key, mode, active=False)

        action = f"take a {mode.value} borrow of"
        if self._exclusive.get(key, 0) and not (reborrow and mode is BorrowMode.SHARED):
            logger.warning(f"Borrow conflict on buffer {key:#x}: already mutably borrowed")
            raise BorrowConflictError(action, key, "buffer is already mutably borrowed")
        if mode is BorrowMode.EXCLUSIVE and self._shared.get(key, 0):
            logger.warning(f"Borrow conflict on buffer {key:#x}: "
                           f"{self._shared[key]} shared borrow(s) alive")
            raise BorrowConflictError(action, key, "buffer has live shared borrows")

        table = self._exclusive if mode is BorrowMode.EXCLUSIVE else self._shared
        table[key] = table.get(key, 0) + 1
        logger.debug(f"Acquired {mode.value} borrow of buffer {key:#x}")
        return Borrow(self, key, mode, active=True)

    def _release(self, key: int, mode: BorrowMode) -> None:
        table = self._exclusive if mode is BorrowMode.EXCLUSIVE else self._shared
        count = table.get(key, 0) - 1
        if count > 0:
            table[key] = count
        else:
            table.pop(key, None)
        logger.debug(f"Released {mode.value} borrow of buffer {key:#x}")

    def check_write(self, buffer: Any, action: str, holds_exclusive: bool = False) -> None:
        """
        Check that ``buffer`` may be modified right now.

        Writes are refused while any shared borrow is alive, and while someone
        else holds the exclusive borrow.

        Args:
            buffer: Array about to be modified
            action: What the caller is doing, for the error message
            holds_exclusive: The caller is the holder of the exclusive borrow

        Raises:
            BorrowConflictError: the buffer is borrowed by someone else
        """
        if not self.enforce:
            return
        key = id(buffer_root(buffer))
        shared = self._shared.get(key, 0)
        if shared:
            logger.warning(f"Write conflict on buffer {key:#x}: {shared} shared borrow(s) alive")
            raise BorrowConflictError(action, key, f"{shared} shared borrow(s) alive")
        if not holds_exclusive and self._exclusive.get(key, 0):
            logger.warning(f"Write conflict on buffer {key:#x}: mutably borrowed elsewhere")
            raise BorrowConflictError(action, key, "buffer is mutably borrowed")

    def shared_count(self, buffer: Any) -> int:
        return self._shared.get(id(buffer_root(buffer)), 0)

    def is_mutably_borrowed(self, buffer: Any) -> bool:
        return self._exclusive.get(id(buffer_root(buffer)), 0) > 0

    def clear(self) -> None:
        """Forget every recorded borrow."""
        self._shared.clear()
        self._exclusive.clear()


_registry = BorrowRegistry()


def get_registry() -> BorrowRegistry:
    return _registry


def set_enforcement(enabled: bool) -> None:
    """Turn borrow checking on or off for borrows taken from now on."""
    _registry.enforce = bool(enabled)
    logger.info(f"Borrow enforcement {'enabled' if enabled else 'disabled'}")


class BorrowedArrayMixin:
    """Lifetime management shared by the borrowed realizations."""

    _borrow: Borrow

    def _take_borrow(self, buffer: Any, mode: BorrowMode) -> None:
        self._borrow = _registry.acquire(buffer, mode)
        weakref.finalize(self, self._borrow.release)

    def release(self) -> None:
        """End the borrow; the array must not be used afterwards."""
        self._borrow.release()

    @property
    def is_borrow_active(self) -> bool:
        return self._borrow.active

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.release()
