"""Loading used-markup profiles from YAML or JSON files."""

from __future__ import annotations

from pathlib import Path

import yaml

from cssdebloat.exceptions import ConfigError
from cssdebloat.model import UsedMarkup


def load_used_markup(path: Path) -> UsedMarkup:
    """Load a ``{classes, tags, ids}`` mapping from a YAML or JSON file."""
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Cannot read used-markup file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid used-markup file at {path}: {exc}") from exc

    if raw is None:
        return UsedMarkup()
    if not isinstance(raw, dict):
        raise ConfigError(f"Used-markup file at {path} must be a mapping of classes, tags and ids")
    return UsedMarkup.from_mapping(raw)
