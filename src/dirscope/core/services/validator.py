from __future__ import annotations

"""
Configuration Validation Service.

Gatekeeper between the CLI and the core: ensures the configuration
dictionary conforms to the expected schema. Handles type coercion and
default value injection so the builder and renderer receive clean values.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from dirscope.domain.config import get_default_config
from dirscope.domain.constants import COLOR_CHOICES

logger = logging.getLogger(__name__)

_BOOL_FIELDS = (
    "recursive", "sort_entries", "fail_fast",
    "long_format", "verbose",
)

_STRING_FIELDS = ("input_path", "log_file")


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Fills missing keys with domain defaults and coerces loosely typed
    values. Invalid values fall back to defaults with a warning.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions on invalid values instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    for name in _STRING_FIELDS:
        merged[name] = _as_str(merged.get(name), defaults[name], name, warnings, strict)

    for name in _BOOL_FIELDS:
        merged[name] = _as_bool(merged.get(name), defaults[name], name, warnings, strict)

    merged["color"] = _as_choice(
        merged.get("color"), defaults["color"], "color", COLOR_CHOICES, warnings, strict
    )
    merged["workers"] = _as_workers(merged.get("workers"), warnings, strict)

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        return value
    msg = f"Invalid type for '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(msg)
    return str(value)


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Convert booleans, 0/1 and common truthy strings."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("1", "true", "yes", "on"):
            return True
        if lowered in ("0", "false", "no", "off"):
            return False

    msg = f"Invalid value for '{field}': {value!r} is not a boolean. Using {fallback}."
    if strict:
        raise TypeError(msg)
    warnings.append(msg)
    return fallback


def _as_choice(
        value: Any,
        fallback: str,
        field: str,
        choices: Tuple[str, ...],
        warnings: List[str],
        strict: bool,
) -> str:
    """Restrict a string field to a fixed set of choices."""
    if value is None:
        return fallback
    normalized = str(value).strip().lower()
    if normalized in choices:
        return normalized

    msg = f"Invalid value for '{field}': {value!r} (expected one of {', '.join(choices)})."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using '{fallback}'.")
    return fallback


def _as_workers(value: Any, warnings: List[str], strict: bool) -> Optional[int]:
    """Worker pool bound: a positive int, or None for the executor default."""
    if value is None or value == "":
        return None
    try:
        workers = int(value)
    except (TypeError, ValueError):
        workers = 0

    if workers >= 1 and not isinstance(value, bool):
        return workers

    msg = f"Invalid value for 'workers': {value!r} (must be a positive integer)."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using the default pool size.")
    return None
