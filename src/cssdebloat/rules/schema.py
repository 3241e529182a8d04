"""Strict validation for raw allow entries.

Raises ConfigError on the first violation.
"""

from __future__ import annotations

import re
from typing import Any

from cssdebloat.constants.rules import (
    ALLOW_TYPE_ANY,
    ALLOW_TYPES_REQUIRING_CLASS,
    ALLOWED_ENTRY_KEYS,
    VALID_ALLOW_TYPES,
)
from cssdebloat.exceptions import ConfigError


def validate_allow_entry(entry: Any, location: str) -> None:
    """Validate one raw allow entry. Raises ConfigError on any violation."""
    if not isinstance(entry, dict):
        raise ConfigError(f"{location}: allow entry must be a mapping, got {type(entry).__name__}")

    unknown = set(entry) - ALLOWED_ENTRY_KEYS
    if unknown:
        raise ConfigError(f"{location}: unknown allow entry keys: {sorted(unknown)}")

    entry_type = entry.get("type", ALLOW_TYPE_ANY)
    if entry_type not in VALID_ALLOW_TYPES:
        raise ConfigError(f"{location}: 'type' must be one of {sorted(VALID_ALLOW_TYPES)}, got {entry_type!r}")

    if entry_type in ALLOW_TYPES_REQUIRING_CLASS:
        class_name = entry.get("class")
        if not isinstance(class_name, str) or not class_name.strip():
            raise ConfigError(f"{location}: '{entry_type}' entries require a non-empty 'class'")
    elif "class" in entry and not isinstance(entry["class"], str):
        raise ConfigError(f"{location}: 'class' must be a string")

    if "search" in entry:
        _validate_string_or_list(entry["search"], "search", location)

    if "search_regex" in entry:
        _validate_regex(entry["search_regex"], location)

    if "sheet" in entry:
        _validate_string_or_list(entry["sheet"], "sheet", location)


def _validate_string_or_list(value: Any, key: str, location: str) -> None:
    if isinstance(value, str):
        return
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{location}: '{key}' must be a string or a list of strings")


def _validate_regex(value: Any, location: str) -> None:
    if not isinstance(value, str):
        raise ConfigError(f"{location}: 'search_regex' must be a string")
    try:
        re.compile(value)
    except re.error as exc:
        raise ConfigError(f"{location}: 'search_regex' is not a valid regex: {exc}") from exc
