"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "debloat.yaml"
DEFAULT_PRESERVE_CRITICAL: bool = True

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset({"allow_selectors", "exclude_sheets", "preserve_critical"})
MARKUP_KEYS: tuple[str, ...] = ("classes", "tags", "ids")
