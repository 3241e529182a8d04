"""cssdebloat: remove CSS rules whose selectors match no markup on the page."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version

from cssdebloat.model import Stylesheet, UsedMarkup
from cssdebloat.sanitizer import sanitize, sanitize_stylesheets

__all__ = ["Stylesheet", "UsedMarkup", "__version__", "sanitize", "sanitize_stylesheets"]

try:
    __version__ = version("cssdebloat")
except PackageNotFoundError:
    __version__ = "0.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
