"""Config loading and normalization for cssdebloat."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from cssdebloat.config.model import DebloatConfig
from cssdebloat.constants.config import CONFIG_FILENAME, DEFAULT_PRESERVE_CRITICAL
from cssdebloat.exceptions import ConfigError
from cssdebloat.rules.schema import validate_allow_entry


def load_config(root: Path, config_path: Path | None = None) -> DebloatConfig:
    """Load and validate config from ``debloat.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return DebloatConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    allow_raw = raw.get("allow_selectors", [])
    if allow_raw is None:
        allow_raw = []
    if not isinstance(allow_raw, list):
        raise ConfigError("allow_selectors must be a list of allow entries")
    for index, entry in enumerate(allow_raw):
        validate_allow_entry(entry, f"allow_selectors[{index}]")

    preserve_critical = raw.get("preserve_critical", DEFAULT_PRESERVE_CRITICAL)
    if not isinstance(preserve_critical, bool):
        raise ConfigError("preserve_critical must be a boolean")

    return DebloatConfig(
        allow_selectors=tuple(allow_raw),
        exclude_sheets=tuple(
            pattern.strip()
            for pattern in _ensure_string_list(raw.get("exclude_sheets", []), "exclude_sheets")
            if pattern.strip()
        ),
        preserve_critical=preserve_critical,
    )


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)
