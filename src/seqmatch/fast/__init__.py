
from .array_search import (
    strict_array_search,
    strict_array_rsearch
)
