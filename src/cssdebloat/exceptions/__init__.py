"""Shared exception hierarchy for cssdebloat."""

from __future__ import annotations

from .base import DebloatError
from .config import ConfigError
from .parsing import CssParseError, SelectorDecompositionError
from .sanitize import AllowRuleError, RenderError

__all__ = [
    "AllowRuleError",
    "ConfigError",
    "CssParseError",
    "DebloatError",
    "RenderError",
    "SelectorDecompositionError",
]
