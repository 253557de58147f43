from typing import Optional, Tuple


def clamp_search_range(start: int,
                       end: int,
                       subject_length: int,
                       pattern_length: int) -> Optional[Tuple[int, int]]:
    """
    Validate and clamp a requested search range.

    Bad or empty ranges are not errors: they simply cannot contain a match,
    so they come back as None.

    Parameters
    ----------
    start : int
        Requested inclusive start. Negative values are clamped to 0.
    end : int
        Requested exclusive end. Values past the subject are clamped to
        `subject_length`.
    subject_length : int
        Number of elements in the subject.
    pattern_length : int
        Number of elements in the pattern.

    Returns
    -------
    tuple of (int, int) or None
        The clamped ``(start, end)``, or None if no match can fit.
    """

    if start >= end:
        return None

    if subject_length <= 0 or pattern_length <= 0:
        return None
    if pattern_length > subject_length:
        return None

    if end <= 0 or start >= subject_length:
        return None

    start = max(0, start)
    end = min(subject_length, end)

    if pattern_length > end - start:
        return None

    return start, end
