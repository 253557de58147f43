from typing import Any, Callable, NamedTuple


class SequenceAccess(NamedTuple):
    """
    The two capabilities the matcher needs from a sequence.

    Attributes
    ----------
    length : Callable[[], int]
        Returns the (non-negative) number of elements.
    element_at : Callable[[int], Any]
        Returns the element at an index in ``[0, length())``.
    """

    length: Callable[[], int]
    element_at: Callable[[int], Any]


def _empty_element_at(index):
    raise IndexError(f"index {index} out of range for an empty sequence")


EMPTY = SequenceAccess(length=lambda: 0, element_at=_empty_element_at)


def as_access(obj: Any) -> SequenceAccess:
    """
    Coerce an object into a SequenceAccess.

    Parameters
    ----------
    obj : SequenceAccess, sequence-like or None
        An existing SequenceAccess is returned unchanged. Anything that
        supports ``len()`` and integer indexing (list, tuple, str, bytes,
        numpy array, ...) is wrapped. None is treated as an empty sequence.
        pandas Series index by label here; use `from_series` to search
        them by position.

    Returns
    -------
    SequenceAccess

    Raises
    ------
    TypeError
        If `obj` does not support ``len()`` and ``[]``.
    """

    if isinstance(obj, SequenceAccess):
        return obj

    if obj is None:
        return EMPTY

    if not (hasattr(obj, "__len__") and hasattr(obj, "__getitem__")):
        raise TypeError(
            f"cannot search an object of type '{type(obj).__name__}'. It "
            "must support len() and integer indexing, or be wrapped in a "
            "SequenceAccess."
        )

    return SequenceAccess(length=lambda: len(obj),
                          element_at=obj.__getitem__)
