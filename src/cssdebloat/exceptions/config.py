"""Configuration-related exceptions."""

from __future__ import annotations

from cssdebloat.exceptions.base import DebloatError


class ConfigError(DebloatError, ValueError):
    """Raised when configuration or an allow entry is invalid."""
