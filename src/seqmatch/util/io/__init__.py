
from .read_yaml import (
    read_yaml,
    read_search_config
)

from .read_column import (
    read_column
)
