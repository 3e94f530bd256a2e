"""Unit tests for the array realizations and the shape contract."""

import itertools

import numpy as np
import pytest
import sys
from pathlib import Path

# Add src to Python path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from fe2o3.core.arrays import DataHold, DataView, DataWrap
from fe2o3.core.arrays.traits import compute_flat_index, normalize_shape, shape_size
from fe2o3.core.errors import (
    ContractViolationError,
    DimensionCountError,
    IndexOutOfBoundsError,
    ShapeMismatchError,
)
from tests import TEST_SHAPES, arange_buffer


class TestShapeHelpers:
    """Test cases for shape normalization and flat indexing."""

    def test_normalize_shape(self):
        """Test shapes given as ints, lists and numpy ints."""
        assert normalize_shape(8) == (8,)
        assert normalize_shape([4, 2]) == (4, 2)
        assert normalize_shape((np.int64(3), 2)) == (3, 2)
        assert normalize_shape(()) == ()

    def test_normalize_shape_invalid(self):
        """Test rejection of missing or negative shapes."""
        with pytest.raises(TypeError, match="shape is None"):
            normalize_shape(None)
        with pytest.raises(ValueError, match="non-negative"):
            normalize_shape((2, -1))

    def test_shape_size(self):
        """Test element counts of shapes."""
        assert shape_size((6, 3, 5)) == 90
        assert shape_size((4, 0)) == 0
        assert shape_size(()) == 1

    @pytest.mark.parametrize("shape", TEST_SHAPES)
    def test_flat_index_is_bijection(self, shape):
        """Test that valid multi-indices map one-to-one onto [0, size)."""
        offsets = [compute_flat_index(shape, idx)
                   for idx in itertools.product(*(range(s) for s in shape))]

        assert sorted(offsets) == list(range(shape_size(shape)))

    @pytest.mark.parametrize("shape", TEST_SHAPES)
    def test_flat_index_matches_numpy_row_major(self, shape):
        """Test agreement with numpy's C-order layout."""
        for idx in itertools.product(*(range(s) for s in shape)):
            assert compute_flat_index(shape, idx) == np.ravel_multi_index(idx, shape)

    def test_flat_index_zero_dimensional(self):
        """Test that the only element of a 0-d array sits at offset 0."""
        assert compute_flat_index((), ()) == 0

    def test_flat_index_rejects_non_integers(self):
        """Test that fractional or non-numeric entries are contract violations."""
        with pytest.raises(IndexOutOfBoundsError):
            compute_flat_index((4, 2), (1.5, 0))
        with pytest.raises(IndexOutOfBoundsError):
            compute_flat_index((4, 2), ("1", 0))
        with pytest.raises(IndexOutOfBoundsError):
            DataHold(arange_buffer(8), [4, 2]).flat_index([1.5, 0])

        assert compute_flat_index((4, 2), (np.int64(3), np.int32(1))) == 7


class TestDataHold:
    """Test cases for the owned realization."""

    def test_hold_index(self):
        """Test flat indexing of owned data."""
        hold = DataHold([0, 1, 2, 3, 4, 5, 6, 7], [8])
        assert hold[0] == 0
        assert hold[5] == 5
        assert len(hold) == 8

        hold = DataHold([0.0, 0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7], [8])
        assert hold[0] == 0.0
        assert hold[5] == 0.5

    def test_hold_shape_defaults_to_data_shape(self):
        """Test that nested data keeps its shape."""
        hold = DataHold([[0, 1], [2, 3], [4, 5]])

        assert hold.dimensions() == (3, 2)
        assert hold.to_list() == [0, 1, 2, 3, 4, 5]

    def test_hold_copies_input(self):
        """Test that an owned array never aliases its input."""
        source = arange_buffer(8)
        hold = DataHold(source, (4, 2))

        source[0] = 100
        assert hold[0] == 0
        assert not np.shares_memory(source, hold.as_array())

    def test_hold_construction_shape_mismatch(self):
        """Test construction with inconsistent shape."""
        with pytest.raises(ShapeMismatchError):
            DataHold([0, 1, 2], (2, 2))

    def test_hold_bad_reshape(self):
        """Test reshape to an incompatible shape."""
        hold = DataHold([0, 1, 2, 3, 4, 5, 6, 7], [8])

        with pytest.raises(ShapeMismatchError, match="holds 20 elements but the buffer has 8"):
            hold.reshape([4, 5])
        assert hold.dimensions() == (8,)

    def test_hold_reshape(self):
        """Test reshape to a compatible shape."""
        hold = DataHold([0, 1, 2, 3, 4, 5, 6, 7], [8])
        hold.reshape([4, 2])

        assert hold.dimensions()[1] == 2
        assert hold.dimensions() == (4, 2)

    def test_hold_multi_access(self):
        """Test reading through multi-indices."""
        hold = DataHold([0, 1, 2, 3, 4, 5, 6, 7], [8])
        hold.reshape([4, 2])

        assert hold.flat_index([2, 1]) == 5
        assert hold.flat_index([3, 0]) == 6
        assert hold.multi_index([0, 1]) == 1
        assert hold.multi_index([3, 0]) == 6
        assert hold.multi_index([1, 1]) == 3

    def test_hold_bad_multi_access(self):
        """Test out-of-range and wrong-rank multi-indices."""
        hold = DataHold([0, 1, 2, 3, 4, 5, 6, 7], [4, 2])

        with pytest.raises(IndexOutOfBoundsError):
            hold.multi_index([2, 3])
        with pytest.raises(IndexOutOfBoundsError):
            hold.multi_index([-1, 0])
        with pytest.raises(DimensionCountError, match="2 dimension"):
            hold.multi_index([1])

    def test_contract_violations_are_assertions(self):
        """Test that contract violations are fatal assertion errors."""
        hold = DataHold([0, 1, 2, 3], [4])

        with pytest.raises(AssertionError):
            hold.reshape([3])
        assert issubclass(ShapeMismatchError, ContractViolationError)

    def test_hold_iteration(self):
        """Test iteration over the flat buffer."""
        hold = DataHold([0, 1, 2, 3, 4, 5, 6, 7], [8])

        for iv, val in enumerate(hold):
            assert val == iv

    def test_hold_write(self):
        """Test flat writes."""
        hold = DataHold([0, 1, 2, 3, 4, 5, 6, 7], [8])
        hold[4] = 0

        assert hold[4] == 0

    def test_hold_multi_index_write(self):
        """Test writes through a mutable element view."""
        hold = DataHold([0, 1, 2, 3, 4, 5, 6, 7], [2, 4])

        element = hold.multi_index_mut([0, 3])
        element[...] = 0
        assert hold[3] == 0

        hold.set_multi_index([1, 0], 42)
        assert hold[4] == 42

    def test_hold_resize(self):
        """Test resizing an empty owned array."""
        hold = DataHold()
        hold.resize([6, 3, 5], 0)

        assert len(hold) == 6 * 3 * 5
        assert hold.dimensions() == (6, 3, 5)
        assert np.all(hold.as_array() == 0)

    def test_hold_resize_pads_and_truncates_tail(self):
        """Test that resize keeps the head of the buffer."""
        hold = DataHold([0, 1, 2, 3, 4, 5], [3, 2])

        hold.resize([4, 2], -1)
        assert hold.to_list() == [0, 1, 2, 3, 4, 5, -1, -1]
        assert hold.multi_index([1, 0]) == 2

        hold.resize([2, 2], -1)
        assert hold.to_list() == [0, 1, 2, 3]

    def test_hold_resize_does_not_relayout(self):
        """Test that resize changes length only, not the placement of data."""
        hold = DataHold([[0, 1], [2, 3]])
        hold.resize([2, 3], 9)

        # Row 1 used to start with 2; the flat buffer is just padded at its tail
        assert hold.to_list() == [0, 1, 2, 3, 9, 9]
        assert hold.multi_index([1, 0]) == 3

    def test_hold_filled(self):
        """Test the filled constructor."""
        hold = DataHold.filled((2, 3), 7.5)

        assert hold.dimensions() == (2, 3)
        assert hold.to_list() == [7.5] * 6

    def test_hold_copy(self):
        """Test that copies are independent."""
        hold = DataHold([1, 2, 3], [3])
        other = hold.copy()
        other[0] = 10

        assert hold[0] == 1
        assert other.dimensions() == (3,)

    def test_hold_buffer_is_read_only_outside(self):
        """Test that the owned buffer is only writable through the hold."""
        hold = DataHold([0, 1, 2, 3], [4])

        with pytest.raises(ValueError):
            hold.as_array()[0] = 1
        with pytest.raises(ValueError, match="writeable"):
            DataWrap(hold.as_array())

        hold[0] = 1
        assert hold.as_array()[0] == 1

    def test_repr_before_shape_is_set(self):
        """Test repr of an array whose construction did not finish."""
        hold = DataHold.__new__(DataHold)
        assert repr(hold) == "DataHold(None, shape=None)"

        hold._data = arange_buffer(3)
        assert repr(hold) == "DataHold([0, 1, 2], shape=None)"
        assert repr(DataHold([1, 2], [2])) == "DataHold([1, 2], shape=(2,))"


class TestDataWrap:
    """Test cases for the borrowed mutable realization."""

    def test_wrap_write(self):
        """Test flat writes land in the lender's buffer."""
        base = arange_buffer(8)
        wrap = DataWrap(base, [8])
        wrap[4] = 0

        assert wrap[4] == 0
        assert base[4] == 0

    def test_wrap_multi_index_write(self):
        """Test multi-index writes land in the lender's buffer."""
        base = arange_buffer(8)
        wrap = DataWrap(base, [2, 4])
        wrap.multi_index_mut([0, 3])[...] = 0

        assert wrap[3] == 0
        assert base[3] == 0

    def test_wrap_iterator_write(self):
        """Test filling the buffer element by element."""
        base = np.zeros(8, dtype=np.int64)
        wrap = DataWrap(base, [2, 4])
        for iv in range(len(wrap)):
            wrap[iv] = iv

        for iv, it in enumerate(wrap):
            assert it == iv
        np.testing.assert_array_equal(base, np.arange(8))

    def test_wrap_keeps_lender_shape(self):
        """Test that the default shape comes from the lender."""
        base = np.zeros((3, 2))
        wrap = DataWrap(base)

        assert wrap.dimensions() == (3, 2)
        wrap.set_multi_index([2, 1], 1.0)
        assert base[2, 1] == 1.0

    def test_wrap_has_no_resize(self):
        """Test that a borrowed array cannot be resized."""
        wrap = DataWrap(arange_buffer(4))
        assert not hasattr(wrap, "resize")

    def test_wrap_bad_reshape(self):
        """Test reshape to an incompatible shape."""
        wrap = DataWrap(arange_buffer(8), [8])
        with pytest.raises(ShapeMismatchError):
            wrap.reshape([4, 5])

    def test_wrap_rejects_bad_buffers(self):
        """Test buffer validation."""
        with pytest.raises(TypeError, match="numpy array"):
            DataWrap([0, 1, 2])

        read_only = arange_buffer(4)
        read_only.flags.writeable = False
        with pytest.raises(ValueError, match="writeable"):
            DataWrap(read_only)

        strided = arange_buffer(8)[::2]
        with pytest.raises(ValueError, match="contiguous"):
            DataWrap(strided)


class TestDataView:
    """Test cases for the borrowed read-only realization."""

    def test_view_index(self):
        """Test flat indexing."""
        view = DataView(arange_buffer(8), [8])
        assert view[0] == 0
        assert view[5] == 5

        view = DataView(np.array([0.0, 0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7]), [8])
        assert view[0] == 0.0
        assert view[5] == 0.5

    def test_view_bad_reshape(self):
        """Test reshape to an incompatible shape."""
        view = DataView(arange_buffer(8), [8])
        with pytest.raises(ShapeMismatchError):
            view.reshape([4, 5])

    def test_view_reshape(self):
        """Test reshape to a compatible shape."""
        view = DataView(arange_buffer(8), [8])
        view.reshape([4, 2])
        assert view.dimensions()[1] == 2

    def test_view_multi_access(self):
        """Test reading through multi-indices."""
        view = DataView(arange_buffer(8), [8])
        view.reshape([4, 2])

        assert view.multi_index([0, 1]) == 1
        assert view.multi_index([3, 0]) == 6
        assert view.multi_index([1, 1]) == 3

        with pytest.raises(IndexOutOfBoundsError):
            view.multi_index([2, 3])

    def test_view_iteration(self):
        """Test iteration over the flat buffer."""
        view = DataView(arange_buffer(8))
        for iv, val in enumerate(view):
            assert val == iv

    def test_view_aliases_lender(self):
        """Test that a view sees the lender's data without copying."""
        base = arange_buffer(8)
        view = DataView(base, (2, 4))

        assert np.shares_memory(base, view.as_array())

    def test_view_is_read_only(self):
        """Test that no write path exists through a view."""
        view = DataView(arange_buffer(8), [8])

        assert not hasattr(view, "multi_index_mut")
        assert not hasattr(view, "resize")
        with pytest.raises(TypeError):
            view[0] = 1
        with pytest.raises(ValueError):
            view.as_array()[0] = 1

    def test_view_rejects_non_contiguous_buffers(self):
        """Test that a view never silently reads a copy of its lender."""
        with pytest.raises(ValueError, match="contiguous"):
            DataView(arange_buffer(8)[::2])
        with pytest.raises(ValueError, match="contiguous"):
            DataView(arange_buffer(8).reshape(2, 4).T)

    def test_view_accepts_sequences(self):
        """Test views of plain Python sequences."""
        view = DataView([[1, 2], [3, 4]])
        assert view.dimensions() == (2, 2)
        assert view.multi_index([1, 0]) == 3
