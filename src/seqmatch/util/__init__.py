
from .validation import (
    check_index,
    check_flag
)

from .io import (
    read_yaml,
    read_search_config,
    read_column
)

from .cli import (
    generalized_main
)
