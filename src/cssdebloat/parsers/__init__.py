"""Stylesheet, selector and URL parsing."""

from .css import parse_stylesheet
from .selectors import decompose_selector
from .urls import absolutize_stylesheet_url, rewrite_url, stylesheet_base_url

__all__ = [
    "absolutize_stylesheet_url",
    "decompose_selector",
    "parse_stylesheet",
    "rewrite_url",
    "stylesheet_base_url",
]
