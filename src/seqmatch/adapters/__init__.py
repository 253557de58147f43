
from .sequence import (
    from_sequence,
    from_text
)

from .array import (
    from_array
)

from .series import (
    from_series
)
