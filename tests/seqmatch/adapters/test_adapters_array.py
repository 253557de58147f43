import warnings

import numpy as np
import pytest

from seqmatch.adapters.array import from_array


def test_int_arrays():
    m = from_array(np.array([1, 2, 3, 4, 1, 2, 3, 5]), np.array([1, 2, 3]))
    assert m.index_of(0) == 0
    assert m.index_of(1) == 4
    assert m.last_index_of(0, 8) == 4


def test_bool_arrays():
    m = from_array(np.array([True, False, False, True, False]),
                   np.array([False, True]))
    assert m.index_of(0) == 2


def test_float_nan_matches_nan():
    subject = np.array([1.0, np.nan, 2.0, 1.0, np.nan, 3.0])
    m = from_array(subject, np.array([1.0, np.nan]))
    assert m.index_of(0) == 0
    assert m.last_index_of(0, 6) == 3
    assert from_array(subject, np.array([np.nan, 3.0])).index_of(0) == 4


def test_signed_zeros_differ():
    subject = np.array([1.0, -0.0, 0.0, -0.0])
    assert from_array(subject, np.array([0.0])).index_of(0) == 2
    assert from_array(subject, np.array([-0.0])).index_of(0) == 1
    assert from_array(subject, np.array([-0.0])).last_index_of(0, 4) == 3
    assert from_array(subject, np.array([0.0, -0.0])).index_of(0) == 2

    z = np.array([complex(0.0, 0.0), complex(0.0, -0.0)])
    assert from_array(z, np.array([complex(0.0, -0.0)])).index_of(0) == 1

    # NaN rule unaffected
    assert from_array(np.array([-0.0, np.nan]), np.array([np.nan])).index_of(0) == 1


def test_custom_equals_overrides_nan_rule():
    subject = np.array([1.0, np.nan, 2.0])
    m = from_array(subject, np.array([np.nan]), equals=lambda a, b: a == b)
    assert m.index_of(0) is None


def test_object_arrays():
    m = from_array(np.array(["x", "a", "b"], dtype=object),
                   np.array(["a", "b"], dtype=object))
    assert m.index_of(0) == 1


def test_accepts_lists_and_scalars():
    assert from_array([4, 5, 6], 5).index_of(0) == 1


def test_none_is_empty():
    assert from_array(None, [1]).index_of(0) is None
    assert from_array([1], None).index_of(0) is None


def test_rejects_2d():
    with pytest.raises(ValueError, match="must be a 1D array"):
        from_array(np.zeros((2, 2)), np.zeros(2))


def test_warns_on_kind_mismatch():
    with pytest.warns(UserWarning, match="different kinds"):
        m = from_array(np.array([1, 2, 3]), np.array([2.0, 3.0]))
    assert m.index_of(0) == 1


def test_no_warning_on_matching_kinds():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        from_array(np.array([1, 2, 3], dtype=np.int32), np.array([2], dtype=np.int64))


def test_non_contiguous_view():
    base = np.arange(10)
    view = base[::-1]
    assert from_array(view, np.array([6, 5, 4])).index_of(0) == 3
