import numpy as np
import pytest

from seqmatch.util.validation.check import (
    check_index,
    check_flag
)

# ----------------------------------------------------------------------------
# test check_index
# ----------------------------------------------------------------------------

@pytest.mark.parametrize("value, kwargs, expected", [
    (5, {}, 5),
    (-3, {}, -3),
    (0, {}, 0),
    (np.int64(7), {}, 7),
    (4.0, {}, 4),
    ("12", {}, 12),
    (" -2 ", {}, -2),
    ("1e2", {}, 100),
    (None, {"allow_none": True}, None),
])
def test_check_index_success(value, kwargs, expected):
    result = check_index(value, **kwargs)
    assert result == expected
    if result is not None:
        assert isinstance(result, int)


@pytest.mark.parametrize("value, kwargs, match", [
    (None, {}, "cannot be None"),
    (None, {"param_name": "start"}, "start cannot be None"),
    ([1, 2], {}, "Value must be a scalar"),
    (True, {}, "not a bool"),
    (2.5, {}, "whole number"),
    ("abc", {}, "could not convert string to float"),
    (float("nan"), {}, "whole number"),
])
def test_check_index_failures(value, kwargs, match):
    with pytest.raises(ValueError, match=match):
        check_index(value, **kwargs)


# ----------------------------------------------------------------------------
# test check_flag
# ----------------------------------------------------------------------------

@pytest.mark.parametrize("value, expected", [
    (True, True),
    (False, False),
    (np.bool_(True), True),
    ("yes", True),
    ("False", False),
    (" 1 ", True),
    ("no", False),
])
def test_check_flag_success(value, expected):
    assert check_flag(value) is expected


@pytest.mark.parametrize("value", [1, 0, "maybe", None, 2.0])
def test_check_flag_failures(value):
    with pytest.raises(ValueError, match="must be a boolean"):
        check_flag(value, "reverse")
