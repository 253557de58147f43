
from .generalized_main import (
    generalized_main,
    build_parser
)
