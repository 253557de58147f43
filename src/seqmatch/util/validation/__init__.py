
from .check import (
    check_index,
    check_flag
)
