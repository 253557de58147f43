from typing import Callable, List


def build_failure_function(length: int,
                           equals_at: Callable[[int, int], bool]) -> List[int]:
    """
    Build the KMP failure ("next") table for a pattern.

    Parameters
    ----------
    length : int
        Length of the pattern.
    equals_at : Callable[[int, int], bool]
        ``equals_at(i, j)`` returns True if pattern element ``i`` matches
        pattern element ``j``. Only called with ``0 <= j < i < length``.

    Returns
    -------
    list of int
        Table of size `length`. ``table[0]`` is -1 (restart from the start
        of the pattern); ``table[k]`` is the length of the longest proper
        border of ``pattern[0:k]``.

    Examples
    --------
    >>> p = "ABABC"
    >>> build_failure_function(len(p), lambda i, j: p[i] == p[j])
    [-1, 0, 0, 1, 2]
    """

    if length <= 0:
        return []

    table = [0]*length
    table[0] = -1

    i = 0
    j = -1
    while i < length - 1:
        if j == -1 or equals_at(i, j):
            i += 1
            j += 1
            table[i] = j
        else:
            j = table[j]

    return table


def build_reverse_failure_function(length: int,
                                   equals_at: Callable[[int, int], bool]) -> List[int]:
    """
    Failure table of the reversed pattern.

    ``table[k]`` is the longest proper border of the last ``k`` pattern
    elements. `equals_at` takes indexes into the original (unreversed)
    pattern and, since the pattern is walked from its end, is only called
    with ``0 <= i < j < length``.
    """
    last = length - 1
    return build_failure_function(length,
                                  lambda i, j: equals_at(last - i, last - j))
