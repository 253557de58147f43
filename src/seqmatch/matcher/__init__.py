
from .sequence import (
    SequenceAccess,
    as_access
)

from .failure import (
    build_failure_function,
    build_reverse_failure_function
)

from .bounds import (
    clamp_search_range
)

from .matcher import (
    Matcher
)

from .shortcuts import (
    index_of,
    last_index_of
)
