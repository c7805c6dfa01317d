"""
Configuration validation utilities.

Typed readers for environment variables, plus the range and path checks
applied to TroubleshootConfig before the engine starts.
"""
import os
import warnings
from typing import Optional, Tuple

from .exceptions import ConfigurationError

PLACEHOLDER_MARKERS = ("your_", "placeholder", "xxx", "replace", "todo")


def get_optional_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """
    Read an environment variable, falling back to ``default``.

    Values copied unchanged from an example .env file (``your_kb_path``,
    ``REPLACE_ME``) are treated as unset and reported with a UserWarning.
    """
    value = os.getenv(key)
    if value is None or value == "":
        return default

    if _is_placeholder(value):
        warnings.warn(
            f"{key}={value!r} looks like a placeholder; using {default!r} instead.",
            UserWarning
        )
        return default

    return value


def get_float_env(key: str, default: float) -> float:
    """
    Get float environment variable.

    :raises: ConfigurationError if the value is not a number
    """
    raw = get_optional_env(key, str(default))
    try:
        return float(raw)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{key} must be a number, got {raw!r}")


def get_int_env(key: str, default: int) -> int:
    """
    Get integer environment variable.

    :raises: ConfigurationError if the value is not an integer
    """
    raw = get_optional_env(key, str(default))
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{key} must be an integer, got {raw!r}")


def get_bool_env(key: str, default: bool) -> bool:
    """Get boolean environment variable ("true" is the only truthy value)."""
    raw = get_optional_env(key, "true" if default else "false")
    return (raw or "").lower() == "true"


def get_list_env(key: str, default: Tuple[str, ...]) -> Tuple[str, ...]:
    """Get a comma-separated environment variable as a tuple of non-empty items."""
    raw = get_optional_env(key)
    if raw is None:
        return tuple(default)
    return tuple(item.strip() for item in raw.split(",") if item.strip())


def validate_threshold(value: float, name: str) -> float:
    """
    Validate a confidence threshold.

    :param value: Threshold value
    :param name: Name of the setting (for error messages)
    :return: Validated threshold
    :raises: ConfigurationError if outside [0.0, 1.0]
    """
    if not 0.0 <= value <= 1.0:
        raise ConfigurationError(
            f"{name} must be between 0.0 and 1.0, got {value}"
        )
    return value


def _is_placeholder(value: str) -> bool:
    lowered = value.lower()
    return any(marker in lowered for marker in PLACEHOLDER_MARKERS)


def validate_path(path: str, name: str, must_exist: bool = False) -> str:
    """
    Check a configured file path.

    :param path: Path as configured
    :param name: Setting name used in error messages
    :param must_exist: Require the file to be present
    :raises: ConfigurationError if the path is empty or missing
    """
    if not path:
        raise ConfigurationError(f"{name} is required.")

    if must_exist and not os.path.exists(path):
        raise ConfigurationError(
            f"{name} does not exist: {path}. "
            f"Set it to an existing JSON file."
        )

    return path
