"""Configuration loading, validation, and normalization for cssdebloat.

This package facade re-exports all public names so callers can use
``from cssdebloat.config import ...``.
"""

from __future__ import annotations

from cssdebloat.config.loader import load_config
from cssdebloat.config.model import DebloatConfig
from cssdebloat.config.validator import validate_config_file

__all__ = [
    "DebloatConfig",
    "load_config",
    "validate_config_file",
]
