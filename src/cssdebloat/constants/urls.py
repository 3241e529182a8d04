"""Patterns for relative asset URL rewriting."""

from __future__ import annotations

import re

ABSOLUTE_SCHEME_PATTERN: re.Pattern[str] = re.compile(r"^(https?|data):", re.IGNORECASE)

# Last path segment plus any query string or fragment.
LAST_SEGMENT_PATTERN: re.Pattern[str] = re.compile(r"[^/]*([?#].*)?$")
