"""
Knuth-Morris-Pratt search over any pair of random-access sequences.
"""
import operator
from dataclasses import dataclass, field, replace
from typing import Any, Callable, List, Optional

from seqmatch.matcher.sequence import (
    SequenceAccess,
    as_access
)
from seqmatch.matcher.failure import (
    build_failure_function,
    build_reverse_failure_function
)
from seqmatch.matcher.bounds import clamp_search_range


@dataclass(frozen=True)
class Matcher:
    """
    Immutable KMP search configuration.

    Parameters
    ----------
    subject : SequenceAccess or sequence-like
        The sequence searched IN. Anything accepted by `as_access` works.
    pattern : SequenceAccess or sequence-like
        The sequence searched FOR.
    equals : Callable[[Any, Any], bool], default: operator.eq
        Element predicate. During scanning it is always called as
        ``equals(subject_element, pattern_element)``. While building the
        failure table it compares two pattern elements, passing the one
        reached later in scan order first: ``equals(pattern[i], pattern[j])``
        with ``i > j`` for `index_of`, and with ``i < j`` for
        `last_index_of`, which matches the pattern right to left. It does
        not have to be an equivalence relation, but results for asymmetric
        or non-transitive predicates depend on this call order.

    Notes
    -----
    Searches never raise for empty inputs or bad ranges; they return None.
    The failure table is rebuilt on every call, so a Matcher holds no
    mutable state and can be shared freely as long as the accessors and the
    predicate can be.
    """

    subject: SequenceAccess
    pattern: SequenceAccess
    equals: Callable[[Any, Any], bool] = field(default=operator.eq)

    def __post_init__(self):

        # frozen dataclass, so bypass __setattr__ for the coercion
        object.__setattr__(self, "subject", as_access(self.subject))
        object.__setattr__(self, "pattern", as_access(self.pattern))

        if self.equals is None:
            object.__setattr__(self, "equals", operator.eq)

        if not callable(self.equals):
            raise TypeError("equals must be callable")

        for name in ["subject", "pattern"]:
            access = getattr(self, name)
            if not callable(access.length) or not callable(access.element_at):
                raise TypeError(
                    f"{name} must provide callable 'length' and 'element_at'"
                )

    @classmethod
    def of(cls,
           subject: Any,
           pattern: Any,
           equals: Optional[Callable[[Any, Any], bool]] = None) -> "Matcher":
        """
        Build a Matcher in one step. `equals` defaults to ``==``.
        """
        return cls(subject=subject, pattern=pattern, equals=equals)

    def with_subject(self, subject: Any) -> "Matcher":
        return replace(self, subject=subject)

    def with_pattern(self, pattern: Any) -> "Matcher":
        return replace(self, pattern=pattern)

    def with_equals(self, equals: Callable[[Any, Any], bool]) -> "Matcher":
        return replace(self, equals=equals)

    def subject_length(self) -> int:
        return self.subject.length()

    def pattern_length(self) -> int:
        return self.pattern.length()

    def failure_table(self, reverse: bool = False) -> List[int]:
        """
        Failure table for the current pattern (see build_failure_function).
        With `reverse`, the table of the reversed pattern used by
        last_index_of.
        """
        pattern_at = self.pattern.element_at
        equals = self.equals
        builder = build_reverse_failure_function if reverse else build_failure_function
        return builder(
            self.pattern.length(),
            lambda i, j: equals(pattern_at(i), pattern_at(j))
        )

    def index_of(self, start: int, end: Optional[int] = None) -> Optional[int]:
        """
        Find the first occurrence of the pattern.

        Parameters
        ----------
        start : int
            Smallest acceptable start index (inclusive).
        end : int, optional
            The match must end before this index (exclusive). Defaults to
            the length of the subject.

        Returns
        -------
        int or None
            Start index of the first match in ``[start, end)``, or None.
        """

        subject_length = self.subject.length()
        pattern_length = self.pattern.length()
        if end is None:
            end = subject_length

        bounds = clamp_search_range(start, end, subject_length, pattern_length)
        if bounds is None:
            return None
        start, end = bounds

        subject_at = self.subject.element_at
        pattern_at = self.pattern.element_at
        equals = self.equals

        table = self.failure_table()

        i = start
        j = 0
        while i < end and j < pattern_length:
            if j == -1 or equals(subject_at(i), pattern_at(j)):
                i += 1
                j += 1
            else:
                j = table[j]

        if j == pattern_length:
            return i - j

        return None

    def last_index_of(self, start: int, end: Optional[int] = None) -> Optional[int]:
        """
        Find the last occurrence of the pattern.

        Called with one argument, ``last_index_of(offset)`` is the same as
        ``last_index_of(0, offset + 1)``: `offset` is the last subject index
        a match may cover. Called with two arguments it returns the greatest
        start of a match lying entirely inside ``[start, end)``.

        Returns
        -------
        int or None
            Start index of the last match, or None.
        """

        if end is None:
            start, end = 0, start + 1

        subject_length = self.subject.length()
        pattern_length = self.pattern.length()

        bounds = clamp_search_range(start, end, subject_length, pattern_length)
        if bounds is None:
            return None
        start, end = bounds

        subject_at = self.subject.element_at
        pattern_at = self.pattern.element_at
        equals = self.equals
        last = pattern_length - 1

        # Scan right to left, matching the pattern from its last element
        # back to its first. That needs the borders of the reversed pattern.
        table = self.failure_table(reverse=True)

        i = end - 1
        j = 0
        while i >= start and j < pattern_length:
            if j == -1 or equals(subject_at(i), pattern_at(last - j)):
                i -= 1
                j += 1
            else:
                j = table[j]

        if j == pattern_length:
            return i + 1

        return None
