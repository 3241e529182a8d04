"""Exceptions raised while deciding and rendering retained rules."""

from __future__ import annotations

from cssdebloat.exceptions.base import DebloatError


class AllowRuleError(DebloatError, ValueError):
    """Raised when an allow entry cannot be compiled into a matcher."""


class RenderError(DebloatError, RuntimeError):
    """Raised when the rule tree holds a node the renderer does not know."""
