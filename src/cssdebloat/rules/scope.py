"""Stylesheet scope matching for allow entries and exclusions."""

from __future__ import annotations

from fnmatch import fnmatchcase

from cssdebloat.constants.rules import GLOB_WILDCARD
from cssdebloat.model import Stylesheet
from cssdebloat.types import ScopeMatcher


def scope_matches(matcher: ScopeMatcher, sheet: Stylesheet) -> bool:
    """Return True when any pattern in ``matcher`` selects ``sheet``.

    A pattern matches when it equals the stylesheet id, when it is a glob
    matching the id or URL, or when it is a substring of the URL.
    """
    patterns = [matcher] if isinstance(matcher, str) else list(matcher)
    return any(_pattern_matches(pattern.strip(), sheet) for pattern in patterns if pattern.strip())


def _pattern_matches(pattern: str, sheet: Stylesheet) -> bool:
    if pattern == sheet.id:
        return True
    if GLOB_WILDCARD in pattern:
        return fnmatchcase(sheet.id, pattern) or fnmatchcase(sheet.url, pattern)
    return bool(sheet.url) and pattern in sheet.url
