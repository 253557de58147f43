import pandas as pd

from seqmatch.matcher import (
    Matcher,
    SequenceAccess
)

from typing import Any, Callable, Optional


def _series_access(values, name) -> SequenceAccess:
    """
    Positional access to a pandas Series. Lists and arrays are converted.
    """

    if values is None:
        values = pd.Series([], dtype=object)
    elif not isinstance(values, pd.Series):
        try:
            values = pd.Series(values)
        except (TypeError, ValueError) as e:
            raise TypeError(
                f"{name} could not be converted to a pandas Series: {e}"
            ) from e

    return SequenceAccess(length=lambda: len(values),
                          element_at=values.iloc.__getitem__)


def from_series(subject,
                pattern,
                equals: Optional[Callable[[Any, Any], bool]] = None) -> Matcher:
    """
    Build a Matcher over pandas Series.

    Elements are accessed by position (``.iloc``), so returned indexes are
    positions, not index labels. Use ``subject.index[result]`` to get the
    label.

    Parameters
    ----------
    subject : pandas.Series
        Series to search IN.
    pattern : pandas.Series, list or array-like
        Values to search FOR.
    equals : Callable, optional
        Element predicate. Defaults to ``==``.

    Returns
    -------
    Matcher
    """

    return Matcher.of(_series_access(subject, "subject"),
                      _series_access(pattern, "pattern"),
                      equals=equals)
