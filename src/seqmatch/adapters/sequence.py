from seqmatch.matcher import Matcher

from typing import Any, Callable, Optional, Sequence, Union


def from_sequence(subject: Optional[Sequence],
                  pattern: Optional[Sequence],
                  equals: Optional[Callable[[Any, Any], bool]] = None) -> Matcher:
    """
    Build a Matcher over two Python sequences (list, tuple, range, ...).

    Parameters
    ----------
    subject : Sequence or None
        Sequence to search IN. None behaves like an empty sequence.
    pattern : Sequence or None
        Sequence to search FOR. None behaves like an empty sequence.
    equals : Callable, optional
        Element predicate, called as ``equals(subject_elem, pattern_elem)``.
        Defaults to ``==``.

    Returns
    -------
    Matcher
    """
    return Matcher.of(subject, pattern, equals=equals)


def _casefold_equals(a, b):
    return a.casefold() == b.casefold()


def _ascii_lower(byte):
    if 65 <= byte <= 90:
        return byte + 32
    return byte


def _bytes_nocase_equals(a, b):
    return _ascii_lower(a) == _ascii_lower(b)


def from_text(subject: Union[str, bytes, None],
              pattern: Union[str, bytes, None],
              ignore_case: bool = False) -> Matcher:
    """
    Build a Matcher over two strings or two byte strings.

    Parameters
    ----------
    subject : str or bytes
        Text to search IN.
    pattern : str or bytes
        Text to search FOR. Must be the same type as `subject`.
    ignore_case : bool, default: False
        Compare characters case-insensitively (``str.casefold`` for text,
        ASCII letters only for bytes).

    Returns
    -------
    Matcher

    Raises
    ------
    TypeError
        If `subject` and `pattern` are not both str or both bytes.
    """

    kinds = {type(x) for x in (subject, pattern) if x is not None}
    if not kinds.issubset({str}) and not kinds.issubset({bytes, bytearray}):
        raise TypeError(
            "subject and pattern must both be str or both be bytes, not "
            f"'{type(subject).__name__}' and '{type(pattern).__name__}'"
        )

    equals = None
    if ignore_case:
        if kinds.issubset({str}):
            equals = _casefold_equals
        else:
            equals = _bytes_nocase_equals

    return Matcher.of(subject, pattern, equals=equals)
