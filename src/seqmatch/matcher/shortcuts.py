from seqmatch.matcher.matcher import Matcher

from typing import Any, Callable, Optional


def index_of(subject: Any,
             pattern: Any,
             start: int = 0,
             end: Optional[int] = None,
             equals: Optional[Callable[[Any, Any], bool]] = None) -> Optional[int]:
    """
    One-shot forward search. Same as
    ``Matcher.of(subject, pattern, equals).index_of(start, end)``.
    """
    return Matcher.of(subject, pattern, equals=equals).index_of(start, end)


def last_index_of(subject: Any,
                  pattern: Any,
                  offset: Optional[int] = None,
                  *,
                  start: int = 0,
                  end: Optional[int] = None,
                  equals: Optional[Callable[[Any, Any], bool]] = None) -> Optional[int]:
    """
    One-shot backward search.

    Parameters
    ----------
    subject, pattern : sequence-like
        Anything accepted by `as_access`.
    offset : int, optional
        Last subject index a match may cover, as in the one-argument
        ``Matcher.last_index_of(offset)``. Cannot be combined with `end`.
    start : int, default: 0
        Smallest acceptable start index (inclusive), as in `index_of`.
    end : int, optional
        The match must end before this index (exclusive). Defaults to the
        length of the subject.
    equals : Callable[[Any, Any], bool], optional
        Element predicate; defaults to ``==``.

    Returns
    -------
    int or None
        Greatest start of a match inside the range, or None.
    """

    if offset is not None and end is not None:
        raise ValueError("give either offset or end, not both")

    matcher = Matcher.of(subject, pattern, equals=equals)

    if offset is not None:
        end = offset + 1
    elif end is None:
        end = matcher.subject_length()

    return matcher.last_index_of(start, end)
