"""Root exception for cssdebloat."""

from __future__ import annotations


class DebloatError(Exception):
    """Base class for all cssdebloat errors."""
