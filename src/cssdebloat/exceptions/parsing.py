"""Parsing-related exceptions."""

from __future__ import annotations

from cssdebloat.exceptions.base import DebloatError


class CssParseError(DebloatError, ValueError):
    """Raised when a stylesheet cannot be parsed into a rule tree."""


class SelectorDecompositionError(DebloatError, ValueError):
    """Raised when a selector cannot be split into its identifiers."""
