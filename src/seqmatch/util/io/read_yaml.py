import yaml
import re

import warnings

from seqmatch.util.validation.check import (
    check_index,
    check_flag
)

# Keys recognized in a search configuration, with their defaults.
SEARCH_DEFAULTS = {
    "pattern": None,
    "start": 0,
    "end": None,
    "ignore_case": False,
    "reverse": False,
    "column": None,
    "encoding": "utf-8",
}

# Values under these keys are searched for literally and never converted.
_LITERAL_KEYS = {"pattern"}


def _normalize_types(node, literal_keys=()):
    """
    Recursively processes data to:
    1. Convert strings in scientific notation to numbers (float or int).
    2. Convert floats that are whole numbers (e.g., 12.0) to integers.

    Dictionary values stored under a key in `literal_keys` are left alone.
    """

    sci_notation_pattern = re.compile(r'^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)$')

    if isinstance(node, dict):
        return {k: (v if k in literal_keys else _normalize_types(v, literal_keys))
                for k, v in node.items()}
    if isinstance(node, list):
        return [_normalize_types(elem, literal_keys) for elem in node]

    if isinstance(node, str):
        if sci_notation_pattern.match(node):
            node = float(node)
        else:
            return node

    if isinstance(node, float):
        if node.is_integer():
            return int(node)
        return node

    return node


def read_yaml(cf: str | dict,
              override_keys: dict | None=None,
              literal_keys=()) -> dict:
    """
    Loads a YAML configuration file from the specified path.

    Parameters
    ----------
    cf : str or dict
        If string, this is the path to the YAML configuration file. If a dict,
        pass through (assume its already read).
    override_keys : dict, optional
        Values that replace keys already present in the configuration.
    literal_keys : iterable of str, optional
        Top-level keys whose values should not be type-normalized.

    Returns
    -------
    config : dict
        A dictionary containing the configuration parameters.

    Raises
    ------
    ValueError
        If the file does not exist, cannot be parsed, does not hold a
        mapping, or `override_keys` names a key not in the configuration.
    """

    if issubclass(type(cf), dict):
        return cf

    try:
        with open(cf, 'r') as f:
            config = yaml.safe_load(f)
    except FileNotFoundError:
        raise ValueError(f"Configuration file not found at '{cf}'")
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML file '{cf}': {e}") from e

    if config is None:
        config = {}
    if not isinstance(config, dict):
        raise ValueError(
            f"Configuration file '{cf}' must contain a mapping of keys to values."
        )

    config = _normalize_types(config, literal_keys=set(literal_keys))

    # Replace keys from the configuration with keyword arguments passed in.
    if override_keys is not None:
        for k in override_keys:
            if k not in config:
                err = f"override_keys has a key '{k}' that was not in configuration."
                raise ValueError(err)
            config[k] = override_keys[k]

    return config


def read_search_config(cf: str | dict | None,
                       override_keys: dict | None=None) -> dict:
    """
    Load and validate a search configuration.

    Parameters
    ----------
    cf : str, dict or None
        Path to a YAML file, an already-loaded dictionary, or None to start
        from the defaults.
    override_keys : dict, optional
        Values (usually from the command line) that take precedence over the
        file. Keys must be recognized search options.

    Returns
    -------
    dict
        Every key in ``SEARCH_DEFAULTS``, validated.

    Raises
    ------
    ValueError
        For unrecognized keys, a missing pattern, or invalid values.
    """

    if cf is None:
        loaded = {}
    else:
        loaded = dict(read_yaml(cf, literal_keys=_LITERAL_KEYS))

    if override_keys is None:
        override_keys = {}

    for source in [loaded, override_keys]:
        unknown = sorted(set(source) - set(SEARCH_DEFAULTS))
        if unknown:
            raise ValueError(
                f"Unrecognized search option(s): {unknown}. Allowed options "
                f"are: {list(SEARCH_DEFAULTS)}"
            )

    config = dict(SEARCH_DEFAULTS)
    config.update(loaded)

    for k, v in override_keys.items():
        if k in loaded and loaded[k] != v:
            warnings.warn(
                f"Overriding configuration value for '{k}' ({loaded[k]!r}) with {v!r}"
            )
        config[k] = v

    pattern = config["pattern"]
    if pattern is None or (hasattr(pattern, "__len__") and len(pattern) == 0):
        raise ValueError("A non-empty 'pattern' must be specified.")
    if not isinstance(pattern, (str, list)):
        config["pattern"] = str(pattern)

    config["start"] = check_index(config["start"], "start")
    config["end"] = check_index(config["end"], "end", allow_none=True)
    config["ignore_case"] = check_flag(config["ignore_case"], "ignore_case")
    config["reverse"] = check_flag(config["reverse"], "reverse")

    for k in ["column", "encoding"]:
        if config[k] is not None and not isinstance(config[k], str):
            raise ValueError(f"'{k}' must be a string, not {config[k]!r}")

    return config
