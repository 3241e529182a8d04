"""Selector decomposition into class, id, tag and attribute names."""

from __future__ import annotations

import re

from cssdebloat.constants.parsing import (
    ATTRIBUTE_PATTERN,
    CLASS_PATTERN,
    ESCAPE_PATTERN,
    ID_PATTERN,
    MAX_CODE_POINT,
    PSEUDO_PATTERN,
    REPLACEMENT_CHARACTER,
    SELECTOR_BRACKET_PAIRS,
    TAG_PATTERN,
)
from cssdebloat.exceptions import SelectorDecompositionError
from cssdebloat.model import SelectorDescriptor


def decompose_selector(selector_text: str) -> SelectorDescriptor:
    """Split one selector into the identifiers it references.

    Extractors run in a fixed order over a shrinking working copy: pseudo
    classes are discarded, then attribute, class and id tokens are captured
    and removed, and whatever names remain are tags.

    Raises SelectorDecompositionError for empty selectors and selectors with
    unbalanced brackets.
    """
    selector = selector_text.strip()
    if not selector:
        raise SelectorDecompositionError("empty selector")
    _check_balanced(selector)

    remaining = PSEUDO_PATTERN.sub("", selector)
    attrs, remaining = _extract(ATTRIBUTE_PATTERN, remaining)
    classes, remaining = _extract(CLASS_PATTERN, remaining, unescape=True)
    ids, remaining = _extract(ID_PATTERN, remaining, unescape=True)
    tags = TAG_PATTERN.findall(remaining)

    return SelectorDescriptor(
        selector=selector,
        classes=tuple(classes) or None,
        ids=tuple(ids) or None,
        tags=tuple(tags) or None,
        attrs=tuple(attrs) or None,
    )


def opaque_descriptor(selector_text: str) -> SelectorDescriptor:
    """Descriptor for a selector that could not be decomposed."""
    return SelectorDescriptor(selector=selector_text.strip(), opaque=True)


def _extract(pattern: re.Pattern[str], text: str, *, unescape: bool = False) -> tuple[list[str], str]:
    found: list[str] = []

    def _capture(match: re.Match[str]) -> str:
        name = match.group(1)
        found.append(unescape_name(name) if unescape else name)
        return ""

    return found, pattern.sub(_capture, text)


def _check_balanced(selector: str) -> None:
    for opening, closing in SELECTOR_BRACKET_PAIRS:
        depth = 0
        escaped = False
        quote: str | None = None
        for char in selector:
            if escaped:
                escaped = False
                continue
            if char == "\\":
                escaped = True
            elif quote is not None:
                if char == quote:
                    quote = None
            elif char in "\"'":
                quote = char
            elif char == opening:
                depth += 1
            elif char == closing:
                depth -= 1
                if depth < 0:
                    break
        if depth != 0:
            raise SelectorDecompositionError(f"unbalanced {opening}{closing} in selector {selector!r}")


def unescape_name(name: str) -> str:
    """Decode CSS escapes in an identifier, e.g. ``\\32 xl\\:flex`` to ``2xl:flex``."""
    return ESCAPE_PATTERN.sub(_decode_escape, name)


def _decode_escape(match: re.Match[str]) -> str:
    digits, char = match.groups()
    if digits is None:
        return char
    code_point = int(digits, 16)
    if code_point == 0 or code_point > MAX_CODE_POINT or 0xD800 <= code_point <= 0xDFFF:
        return REPLACEMENT_CHARACTER
    return chr(code_point)
