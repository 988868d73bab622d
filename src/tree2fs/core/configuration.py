from __future__ import annotations

"""
Configuration Validation Service.

Acts as the gatekeeper between untrusted inputs (CLI overrides, programmatic
dictionaries) and the immutable RunConfig. Handles type coercion, path
normalization, alias resolution and default value injection.
"""

import logging
import os
from typing import Any, Dict, List, Optional, Sequence, Tuple

from tree2fs.domain.config import (
    CLASSIFICATION_POLICIES,
    COMMAND_ALIASES,
    COMMANDS,
    FORMAT_STYLES,
    RunConfig,
    get_default_config,
)
from tree2fs.infra.fs import normalize_path

logger = logging.getLogger(__name__)

_BOOL_FIELDS = (
    "force", "verbose", "strip_comments", "keep_going",
    "strict", "relative", "json_output", "color",
)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def resolve_command(name: str) -> str:
    """
    Map a command name or shorthand to its canonical form.

    Raises:
        ValueError: If the command is unknown.
    """
    key = (name or "").strip().lower()
    key = COMMAND_ALIASES.get(key, key)
    if key not in COMMANDS:
        raise ValueError(f"Unknown command: {name!r}")
    return key


def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[RunConfig, List[str]]:
    """
    Validate and normalize a raw configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions on type mismatch instead of coercing.

    Returns:
        Tuple[RunConfig, List[str]]: The immutable configuration and a list
                                     of warnings.

    Raises:
        ValueError: If the command is unknown (always fatal).
        TypeError: On invalid field types in strict mode.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    # 1. Base Type Validation
    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        config = {}

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in config.items() if v is not None})

    # 2. Field Processing & Normalization
    command = resolve_command(str(merged.get("command", "")))
    base_dir = normalize_path(_as_str(merged.get("base_dir"), "", "base_dir", warnings, strict), os.getcwd())

    flags = {
        field: _as_bool(merged.get(field), defaults[field], field, warnings, strict)
        for field in _BOOL_FIELDS
    }

    policy = _as_choice(merged.get("policy"), CLASSIFICATION_POLICIES, defaults["policy"], "policy", warnings, strict)
    style = _as_choice(merged.get("style"), FORMAT_STYLES, defaults["style"], "style", warnings, strict)
    indent_unit = _as_positive_int(merged.get("indent_unit"), "indent_unit", warnings, strict)

    log_file = _as_str(merged.get("log_file"), "", "log_file", warnings, strict) or None
    if log_file:
        log_file = normalize_path(log_file, log_file)

    return RunConfig(
        command=command,
        base_dir=base_dir,
        policy=policy,
        indent_unit=indent_unit,
        style=style,
        log_file=log_file,
        **flags,
    ), warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_choice(
        value: Any,
        choices: Sequence[str],
        fallback: str,
        field: str,
        warnings: List[str],
        strict: bool,
) -> str:
    """Restrict a string field to a closed set of values."""
    if value is None:
        return fallback
    if isinstance(value, str) and value.strip().lower() in choices:
        return value.strip().lower()

    msg = f"Invalid field '{field}': {value!r} is not one of {', '.join(choices)}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using '{fallback}'.")
    return fallback


def _as_positive_int(value: Any, field: str, warnings: List[str], strict: bool) -> Optional[int]:
    """Accept a strictly positive integer; None and 0 mean auto-detection."""
    if value is None or value == 0:
        return None
    if isinstance(value, bool):
        value = None
    elif isinstance(value, str) and value.strip().isdigit():
        value = int(value.strip())

    if isinstance(value, int) and value > 0:
        return value

    msg = f"Invalid field '{field}': expected a positive integer."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Auto-detection enabled.")
    return None
