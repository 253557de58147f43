"""
seqmatch package initialization.

Knuth-Morris-Pratt search over any random-access sequence, with adapters for
Python sequences, text, numpy arrays and pandas Series.
"""

__version__ = "0.1.0"

from .matcher import (
    SequenceAccess,
    as_access,
    Matcher,
    build_failure_function,
    index_of,
    last_index_of
)

from .adapters import (
    from_sequence,
    from_text,
    from_array,
    from_series
)

from .fast import (
    strict_array_search,
    strict_array_rsearch
)

from . import util
