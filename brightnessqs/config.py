"""
Configuration loading for the brightnessqs command line tool.
"""

import copy
from typing import Any, Optional

import yaml

from .exceptions import ConfigurationError


class Const:

    # Logging
    LOG_LEVEL = "WARNING"
    LOG_MAX_BYTES = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT = 5

    # Conversion table
    TABLE_STEP = 5
    TABLE_START = 0
    TABLE_STOP = 100


DEFAULTS: dict[str, dict[str, Any]] = {
    "logging": {
        "level": Const.LOG_LEVEL,
        "file": None,
        "max_bytes": Const.LOG_MAX_BYTES,
        "backup_count": Const.LOG_BACKUP_COUNT,
    },
    "table": {
        "step": Const.TABLE_STEP,
        "start": Const.TABLE_START,
        "stop": Const.TABLE_STOP,
    },
    "output": {
        "colour": True,
    },
}

# Accepted types per key; None is only allowed where listed
SCHEMA: dict[str, dict[str, tuple[type, ...]]] = {
    "logging": {
        "level": (str,),
        "file": (str, type(None)),
        "max_bytes": (int,),
        "backup_count": (int,),
    },
    "table": {
        "step": (int,),
        "start": (int,),
        "stop": (int,),
    },
    "output": {
        "colour": (bool,),
    },
}


def _check_value(section: str, key: str, value: Any) -> None:
    allowed = SCHEMA[section][key]
    # bool is a subclass of int
    if not isinstance(value, allowed) or (isinstance(value, bool) and bool not in allowed):
        raise ConfigurationError(f"{section}.{key} must be {' or '.join(t.__name__ for t in allowed)}, got {value!r}")


def merge_config(overrides: Optional[dict[str, Any]]) -> dict[str, Any]:
    """Validate a parsed configuration mapping and merge it over the defaults."""
    config = copy.deepcopy(DEFAULTS)
    if overrides is None:
        return config
    if not isinstance(overrides, dict):
        raise ConfigurationError(f"Configuration must be a mapping, got {type(overrides).__name__}")

    for section, values in overrides.items():
        if section not in SCHEMA:
            raise ConfigurationError(f"Unknown configuration section '{section}'")
        if values is None:
            continue
        if not isinstance(values, dict):
            raise ConfigurationError(f"Configuration section '{section}' must be a mapping")
        for key, value in values.items():
            if key not in SCHEMA[section]:
                raise ConfigurationError(f"Unknown configuration key '{section}.{key}'")
            _check_value(section, key, value)
            config[section][key] = value

    return config


def load_config(path: Optional[str] = None) -> dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        path: File to read. With no path the defaults are returned.

    Returns:
        The full configuration, every section and key present.

    Raises:
        ConfigurationError: If the file cannot be read or is not valid.
    """
    if path is None:
        return merge_config(None)
    try:
        with open(path, encoding="utf-8") as f:
            overrides = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read configuration file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
    return merge_config(overrides)
