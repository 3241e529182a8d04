"""Shared type aliases for cssdebloat."""

from .entries import AllowType, RawAllowEntry, RawUsedMarkup, ScopeMatcher

__all__ = [
    "AllowType",
    "RawAllowEntry",
    "RawUsedMarkup",
    "ScopeMatcher",
]
