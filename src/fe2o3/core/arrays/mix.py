"""A single handle over the three array realizations."""

from enum import Enum
from typing import Any, Iterator, List, Sequence, Union

import numpy as np

from ..errors import NotAllocatableError, ReadOnlyArrayError
from .hold import DataHold
from .traits import Shape, ShapeLike
from .view import DataView
from .wrap import DataWrap

Realization = Union[DataView, DataWrap, DataHold]


class DataKind(Enum):
    """Which realization a DataMix holds."""
    VIEW = "view"
    WRAP = "wrap"
    HOLD = "hold"


_KIND_OF = {DataView: DataKind.VIEW, DataWrap: DataKind.WRAP, DataHold: DataKind.HOLD}


class DataMix:
    """
    Closed choice over ``DataView``, ``DataWrap`` and ``DataHold``.

    Upper layers that do not care about ownership can hold a DataMix and use
    the shape contract uniformly. The kind is fixed at construction. Writes
    through a VIEW and resizes through anything but a HOLD fail at the call
    site with a contract violation.
    """

    __slots__ = ("_kind", "_inner")

    def __init__(self, kind: DataKind, inner: Realization):
        if not isinstance(kind, DataKind):
            raise TypeError(f"kind must be a DataKind, got {type(kind).__name__}")
        if _KIND_OF.get(type(inner)) is not kind:
            raise TypeError(f"Cannot tag a {type(inner).__name__} as {kind.name}")
        self._kind = kind
        self._inner = inner

    @classmethod
    def view(cls, inner: DataView) -> 'DataMix':
        return cls(DataKind.VIEW, inner)

    @classmethod
    def wrap(cls, inner: DataWrap) -> 'DataMix':
        return cls(DataKind.WRAP, inner)

    @classmethod
    def hold(cls, inner: DataHold) -> 'DataMix':
        return cls(DataKind.HOLD, inner)

    @classmethod
    def of(cls, inner: Realization) -> 'DataMix':
        """Tag a realization with its own kind."""
        kind = _KIND_OF.get(type(inner))
        if kind is None:
            raise TypeError(f"Not an array realization: {type(inner).__name__}")
        return cls(kind, inner)

    @property
    def kind(self) -> DataKind:
        return self._kind

    @property
    def inner(self) -> Realization:
        return self._inner

    @property
    def is_writable(self) -> bool:
        if self._kind is DataKind.VIEW:
            return False
        elif self._kind is DataKind.WRAP or self._kind is DataKind.HOLD:
            return True
        raise AssertionError(f"Unhandled DataKind: {self._kind}")

    @property
    def is_allocatable(self) -> bool:
        if self._kind is DataKind.HOLD:
            return True
        elif self._kind is DataKind.VIEW or self._kind is DataKind.WRAP:
            return False
        raise AssertionError(f"Unhandled DataKind: {self._kind}")

    # Read access, available on every kind

    def dimensions(self) -> Shape:
        return self._inner.dimensions()

    def reshape(self, new_shape: ShapeLike) -> None:
        self._inner.reshape(new_shape)

    def flat_index(self, index: Sequence[int]) -> int:
        return self._inner.flat_index(index)

    def multi_index(self, index: Sequence[int]) -> Any:
        return self._inner.multi_index(index)

    def as_array(self) -> np.ndarray:
        return self._inner.as_array()

    def to_list(self) -> List[Any]:
        return self._inner.to_list()

    @property
    def dtype(self) -> np.dtype:
        return self._inner.dtype

    def __len__(self) -> int:
        return len(self._inner)

    def __getitem__(self, flat: int) -> Any:
        return self._inner[flat]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._inner)

    # Write access

    def _writer(self, action: str) -> Union[DataWrap, DataHold]:
        if self._kind is DataKind.VIEW:
            raise ReadOnlyArrayError(action)
        elif self._kind is DataKind.WRAP or self._kind is DataKind.HOLD:
            return self._inner
        raise AssertionError(f"Unhandled DataKind: {self._kind}")

    def multi_index_mut(self, index: Sequence[int]) -> np.ndarray:
        return self._writer("take a mutable element").multi_index_mut(index)

    def set_multi_index(self, index: Sequence[int], value: Any) -> None:
        self._writer("write an element").set_multi_index(index, value)

    def __setitem__(self, flat: int, value: Any) -> None:
        self._writer("write an element")[flat] = value

    # Allocation

    def resize(self, new_shape: ShapeLike, value: Any) -> None:
        if self._kind is DataKind.HOLD:
            self._inner.resize(new_shape, value)
        elif self._kind is DataKind.VIEW:
            raise ReadOnlyArrayError("resize")
        elif self._kind is DataKind.WRAP:
            raise NotAllocatableError("resize")
        else:
            raise AssertionError(f"Unhandled DataKind: {self._kind}")

    def __repr__(self) -> str:
        return f"DataMix.{self._kind.value}({self._inner!r})"
