"""Regex patterns and at-rule sets for CSS and selector parsing."""

from __future__ import annotations

import re

BYTE_ORDER_MARK: str = "\ufeff"

# Selector extraction runs in this order; each pattern only sees what the
# previous ones left behind.
PSEUDO_PATTERN: re.Pattern[str] = re.compile(r"(?<!\\)::?[a-zA-Z0-9_-]+(\(.+?\))?")
ATTRIBUTE_PATTERN: re.Pattern[str] = re.compile(r"\[([A-Za-z0-9_:-]+)(\W?=[^\]]+)?\]")
CLASS_PATTERN: re.Pattern[str] = re.compile(r"\.((?:[a-zA-Z0-9_-]+|\\[0-9a-fA-F]{1,6}[ \t\n]?|\\.)+)")
ID_PATTERN: re.Pattern[str] = re.compile(r"#((?:[a-zA-Z0-9_-]+|\\[0-9a-fA-F]{1,6}[ \t\n]?|\\.)+)")
TAG_PATTERN: re.Pattern[str] = re.compile(r"[a-zA-Z0-9_-]+")
# A hex escape takes up to six digits and swallows one following whitespace.
ESCAPE_PATTERN: re.Pattern[str] = re.compile(r"\\(?:([0-9a-fA-F]{1,6})[ \t\n]?|(.))")
MAX_CODE_POINT: int = 0x10FFFF
REPLACEMENT_CHARACTER: str = "\ufffd"

SELECTOR_BRACKET_PAIRS: tuple[tuple[str, str], ...] = (("[", "]"), ("(", ")"))

# At-rules whose block holds a rule list that is filtered recursively.
CONDITIONAL_AT_RULES: frozenset[str] = frozenset(
    {
        "media",
        "supports",
        "document",
        "-moz-document",
        "container",
        "layer",
        "scope",
        "starting-style",
    }
)

# At-rules whose block holds qualified rules that are rendered as-is.
KEYFRAMES_AT_RULES: frozenset[str] = frozenset(
    {"keyframes", "-webkit-keyframes", "-moz-keyframes", "-o-keyframes"}
)

# At-rules whose prelude may carry a URL that needs rewriting.
URL_PRELUDE_AT_RULES: frozenset[str] = frozenset({"import"})
