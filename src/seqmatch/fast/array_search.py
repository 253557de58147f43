import numpy as np

import numba

from seqmatch.matcher.bounds import clamp_search_range

from typing import Optional, Tuple


@numba.jit(nopython=True)
def _failure_table(search_for: np.ndarray) -> np.ndarray:
    """
    KMP failure table of `search_for` using exact equality.
    """

    m = search_for.size
    table = np.zeros(m, dtype=np.int64)
    table[0] = -1

    i = 0
    j = -1
    while i < m - 1:
        if j == -1 or search_for[i] == search_for[j]:
            i += 1
            j += 1
            table[i] = j
        else:
            j = table[j]

    return table


@numba.jit(nopython=True)
def _forward_scan(search_in: np.ndarray,
                  search_for: np.ndarray,
                  start: int,
                  end: int) -> int:

    m = search_for.size
    table = _failure_table(search_for)

    i = start
    j = 0
    while i < end and j < m:
        if j == -1 or search_in[i] == search_for[j]:
            i += 1
            j += 1
        else:
            j = table[j]

    if j == m:
        return i - j
    return -1


@numba.jit(nopython=True)
def _reverse_scan(search_in: np.ndarray,
                  search_for: np.ndarray,
                  start: int,
                  end: int) -> int:

    # search_for arrives already reversed
    m = search_for.size
    table = _failure_table(search_for)

    i = end - 1
    j = 0
    while i >= start and j < m:
        if j == -1 or search_in[i] == search_for[j]:
            i -= 1
            j += 1
        else:
            j = table[j]

    if j == m:
        return i + 1
    return -1


def _prepare(search_in, search_for) -> Tuple[np.ndarray, np.ndarray]:
    """
    Cast both arrays to a shared numeric dtype and make them contiguous.
    """

    search_in = np.asarray(search_in)
    search_for = np.asarray(search_for)

    for name, arr in [("search_in", search_in), ("search_for", search_for)]:
        if arr.ndim != 1:
            raise ValueError(f"{name} must be a 1D array. It has shape {arr.shape}.")
        if arr.size > 0 and arr.dtype.kind not in "biuf":
            raise ValueError(
                f"{name} must be a boolean, integer or float array, not "
                f"'{arr.dtype}'. Use seqmatch.from_array for other dtypes."
            )

    dtype = np.result_type(search_in.dtype, search_for.dtype)
    search_in = np.ascontiguousarray(search_in, dtype=dtype)
    search_for = np.ascontiguousarray(search_for, dtype=dtype)

    return search_in, search_for


def strict_array_search(search_in: np.ndarray,
                        search_for: np.ndarray,
                        start: int = 0,
                        end: Optional[int] = None) -> int:
    """
    Finds the start index of the first occurrence of a sequence within a
    NumPy array.

    Elements are compared with ``==`` (so NaN never matches). The scan is a
    compiled Knuth-Morris-Pratt pass.

    Parameters
    ----------
    search_in : numpy.ndarray
        1D numeric array to search IN.
    search_for : numpy.ndarray
        1D numeric array to search FOR.
    start : int, default: 0
        First index at which a match may start. Negative values are
        clamped to 0.
    end : int, optional
        The match must end before this index. Defaults to ``search_in.size``.

    Returns
    -------
    int
        The starting index of the first match, or -1 if no match is found.

    Raises
    ------
    ValueError
        If either array is not 1D or not numeric.
    """

    search_in, search_for = _prepare(search_in, search_for)
    if end is None:
        end = search_in.size

    bounds = clamp_search_range(start, end, search_in.size, search_for.size)
    if bounds is None:
        return -1

    return int(_forward_scan(search_in, search_for, bounds[0], bounds[1]))


def strict_array_rsearch(search_in: np.ndarray,
                         search_for: np.ndarray,
                         start: int = 0,
                         end: Optional[int] = None) -> int:
    """
    Finds the start index of the last occurrence of a sequence within a
    NumPy array.

    Parameters
    ----------
    search_in : numpy.ndarray
        1D numeric array to search IN.
    search_for : numpy.ndarray
        1D numeric array to search FOR.
    start : int, default: 0
        Smallest index at which a match may start.
    end : int, optional
        The match must end before this index. Defaults to ``search_in.size``.

    Returns
    -------
    int
        The starting index of the last match inside ``[start, end)``, or -1.
    """

    search_in, search_for = _prepare(search_in, search_for)
    if end is None:
        end = search_in.size

    bounds = clamp_search_range(start, end, search_in.size, search_for.size)
    if bounds is None:
        return -1

    reversed_for = np.ascontiguousarray(search_for[::-1])

    return int(_reverse_scan(search_in, reversed_for, bounds[0], bounds[1]))
