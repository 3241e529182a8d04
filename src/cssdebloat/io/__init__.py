"""Shared file I/O helpers."""

from .files import read_stylesheet, write_text_atomic
from .markup import load_used_markup

__all__ = ["load_used_markup", "read_stylesheet", "write_text_atomic"]
