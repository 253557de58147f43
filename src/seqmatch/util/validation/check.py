import numpy as np
from typing import Any, Optional


def check_index(
    value: Any,
    param_name: Optional[str] = None,
    allow_none: bool = False,
) -> Optional[int]:
    """
    Validate and cast a search bound to an integer.

    Any integer is accepted, including negative values (the matcher clamps
    bounds into the subject). Whole-number floats and numeric strings, as
    they come out of YAML files or the command line, are cast to int.

    Parameters
    ----------
    value : Any
        The value to validate.
    param_name : str, optional
        The name of the parameter being checked, used for clearer error messages.
    allow_none : bool, default: False
        If True, a `value` of None is permissible and will be returned as None.

    Returns
    -------
    int or None
        The cast value, or None if the input was None and `allow_none` was True.

    Raises
    ------
    ValueError
        If the value is None (and not `allow_none`), is not a scalar, is a
        bool, or does not represent a whole number.
    """

    if value is None:
        if allow_none:
            return None
        else:
            raise ValueError(f'{param_name} cannot be None')

    try:
        if not np.isscalar(value):
            raise TypeError("Value must be a scalar.")

        if isinstance(value, (bool, np.bool_)):
            raise TypeError("Value must be an integer, not a bool.")

        if isinstance(value, (int, np.integer)):
            v_cast = int(value)
        else:
            v_float = float(value.strip() if isinstance(value, str) else value)
            if not v_float.is_integer():
                raise ValueError("Value must be a whole number.")
            v_cast = int(v_float)

    except (ValueError, TypeError) as e:
        raise ValueError(
            f"Could not process parameter '{param_name}' with value '{value}'.\n"
            f"Reason: {e}"
        ) from e

    return v_cast


def check_flag(value: Any, param_name: Optional[str] = None) -> bool:
    """
    Validate a boolean option. Accepts bools and the strings true/false,
    yes/no, 1/0 (case-insensitive).
    """

    if isinstance(value, (bool, np.bool_)):
        return bool(value)

    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ["true", "yes", "1"]:
            return True
        if lowered in ["false", "no", "0"]:
            return False

    raise ValueError(
        f"Could not process parameter '{param_name}' with value '{value}'.\n"
        "Reason: Value must be a boolean."
    )
