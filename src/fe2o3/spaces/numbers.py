"""The classic number sets."""

from enum import Enum

import numpy as np

from ..core.arrays import DataHold
from ..core.types import Cardinality, default_element_type
from .sets import FiniteSet, InfiniteSet, Set


class NumberSet(Enum):
    """Tag for the usual sets of numbers, plus the empty set."""
    NATURALS = "naturals"
    INTEGERS = "integers"
    RATIONALS = "rationals"
    REALS = "reals"
    EMPTY = "empty"

    def as_set(self) -> Set:
        if self is NumberSet.EMPTY:
            return FiniteSet(DataHold(np.empty(0, dtype=default_element_type()), (0,)))
        return InfiniteSet()

    def cardinality(self) -> Cardinality:
        return self.as_set().cardinality()
