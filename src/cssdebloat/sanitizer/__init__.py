"""Inclusion decisions, tree rendering and sanitize orchestration."""

from .decision import should_include
from .orchestrator import DEFAULT_CATALOG, sanitize, sanitize_stylesheets
from .render import render_tree

__all__ = [
    "DEFAULT_CATALOG",
    "render_tree",
    "sanitize",
    "sanitize_stylesheets",
    "should_include",
]
