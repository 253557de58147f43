import pytest

from seqmatch.matcher.failure import (
    build_failure_function,
    build_reverse_failure_function
)


def _char_equals(pattern):
    return lambda i, j: pattern[i] == pattern[j]


# ----------------------------------------------------------------------------
# test build_failure_function
# ----------------------------------------------------------------------------

@pytest.mark.parametrize("pattern, expected", [
    ("ABABC", [-1, 0, 0, 1, 2]),
    ("A", [-1]),
    ("AB", [-1, 0]),
    ("AAAA", [-1, 0, 1, 2]),
    ("ABCDABD", [-1, 0, 0, 0, 0, 1, 2]),
    ("AABAAAB", [-1, 0, 1, 0, 1, 2, 2]),
])
def test_build_failure_function(pattern, expected):
    """Table entries are the longest proper border of each prefix."""
    table = build_failure_function(len(pattern), _char_equals(pattern))
    assert table == expected


def test_empty_pattern():
    """An empty pattern gives an empty table and never compares anything."""
    def equals_at(i, j):
        raise AssertionError("should not be called")

    assert build_failure_function(0, equals_at) == []


def test_custom_predicate():
    """The predicate defines what counts as a border."""
    pattern = "AbaB"
    table = build_failure_function(
        len(pattern),
        lambda i, j: pattern[i].lower() == pattern[j].lower()
    )
    assert table == [-1, 0, 0, 1]


def test_comparisons_are_linear():
    """The builder does at most 2m comparisons."""
    pattern = "AAAAAAAAAB" * 5
    calls = []

    def equals_at(i, j):
        calls.append((i, j))
        return pattern[i] == pattern[j]

    build_failure_function(len(pattern), equals_at)
    assert len(calls) <= 2*len(pattern)

    # always called with the later index first
    assert all(0 <= j < i < len(pattern) for i, j in calls)


def test_deterministic():
    pattern = "ABACABAB"
    first = build_failure_function(len(pattern), _char_equals(pattern))
    second = build_failure_function(len(pattern), _char_equals(pattern))
    assert first == second


# ----------------------------------------------------------------------------
# test build_reverse_failure_function
# ----------------------------------------------------------------------------

@pytest.mark.parametrize("pattern", ["ABABC", "ABAB", "AAAB", "A", "", "XYZXY"])
def test_reverse_matches_reversed_pattern(pattern):
    """The reverse table is the forward table of the reversed pattern."""
    reverse = build_reverse_failure_function(len(pattern), _char_equals(pattern))
    backwards = pattern[::-1]
    expected = build_failure_function(len(backwards), _char_equals(backwards))
    assert reverse == expected


def test_reverse_values():
    pattern = "ABAB"
    table = build_reverse_failure_function(len(pattern), _char_equals(pattern))
    assert table == [-1, 0, 0, 1]


def test_reverse_comparison_order():
    """The reverse builder passes the earlier pattern index first."""
    pattern = "ABAB"
    calls = []

    def equals_at(i, j):
        calls.append((i, j))
        return pattern[i] == pattern[j]

    build_reverse_failure_function(len(pattern), equals_at)
    assert calls == [(2, 3), (1, 3)]

    pattern = "AAAAAAAAAB" * 5
    calls = []
    build_reverse_failure_function(len(pattern), equals_at)
    assert len(calls) <= 2*len(pattern)
    assert all(0 <= i < j < len(pattern) for i, j in calls)
