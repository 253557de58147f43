import numpy as np

import warnings

from seqmatch.matcher import Matcher

from typing import Any, Callable, Optional


def _float_equals(a, b):
    # NaN equals NaN; 0.0 and -0.0 differ
    if a != a or b != b:
        return a != a and b != b
    if a != b:
        return False
    return (np.signbit(np.real(a)) == np.signbit(np.real(b)) and
            np.signbit(np.imag(a)) == np.signbit(np.imag(b)))


def _check_1d(arr: np.ndarray, name: str) -> np.ndarray:

    arr = np.asarray(arr)
    if arr.ndim == 0:
        arr = arr.reshape(1)
    if arr.ndim != 1:
        raise ValueError(
            f"{name} must be a 1D array. It has shape {arr.shape}."
        )
    return arr


def from_array(subject,
               pattern,
               equals: Optional[Callable[[Any, Any], bool]] = None) -> Matcher:
    """
    Build a Matcher over two 1D numpy arrays.

    Parameters
    ----------
    subject : numpy.ndarray or array-like
        1D array to search IN. None is treated as an empty array.
    pattern : numpy.ndarray or array-like
        1D array to search FOR. None is treated as an empty array.
    equals : Callable, optional
        Element predicate. If not given, floating point and complex arrays
        compare with NaN equal to NaN and 0.0 distinct from -0.0;
        everything else uses ``==``.

    Returns
    -------
    Matcher

    Raises
    ------
    ValueError
        If either array has more than one dimension.
    """

    subject = _check_1d(np.array([]) if subject is None else subject, "subject")
    pattern = _check_1d(np.array([]) if pattern is None else pattern, "pattern")

    kinds = (subject.dtype.kind, pattern.dtype.kind)
    if subject.size > 0 and pattern.size > 0 and kinds[0] != kinds[1]:
        warnings.warn(
            f"subject dtype '{subject.dtype}' and pattern dtype "
            f"'{pattern.dtype}' are of different kinds. Elements will be "
            "compared without casting."
        )

    if equals is None and ("f" in kinds or "c" in kinds):
        equals = _float_equals

    return Matcher.of(subject, pattern, equals=equals)
