import pandas as pd
import pytest

from seqmatch.adapters.series import from_series


def test_positional_not_label_access():
    subject = pd.Series(["wt", "A1G", "wt", "A1G", "C3T"], index=[10, 20, 30, 40, 50])
    m = from_series(subject, ["wt", "A1G"])
    assert m.index_of(0) == 0
    assert m.index_of(1) == 2
    assert m.last_index_of(0, 5) == 2
    assert subject.index[m.last_index_of(0, 5)] == 30


def test_series_pattern():
    subject = pd.Series([1, 2, 3, 4])
    assert from_series(subject, pd.Series([3, 4], index=["a", "b"])).index_of(0) == 2


def test_equals():
    subject = pd.Series(["A", "b", "C"])
    m = from_series(subject, ["B", "C"], equals=lambda a, b: a.upper() == b)
    assert m.index_of(0) == 1


def test_none_and_empty():
    assert from_series(None, [1]).index_of(0) is None
    assert from_series(pd.Series([1, 2]), []).index_of(0) is None


def test_bad_pattern():
    with pytest.raises(TypeError, match="could not be converted"):
        from_series(pd.Series([1, 2]), {1, 2})
