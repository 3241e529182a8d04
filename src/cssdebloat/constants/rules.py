"""Allow-rule types and glob translation fragments."""

from __future__ import annotations

from typing import Final

ALLOW_TYPE_ANY: Final[str] = "any"
ALLOW_TYPE_CLASS: Final[str] = "class"
ALLOW_TYPE_PREFIX: Final[str] = "prefix"

VALID_ALLOW_TYPES: frozenset[str] = frozenset({ALLOW_TYPE_ANY, ALLOW_TYPE_CLASS, ALLOW_TYPE_PREFIX})
ALLOW_TYPES_REQUIRING_CLASS: frozenset[str] = frozenset({ALLOW_TYPE_CLASS, ALLOW_TYPE_PREFIX})

ALLOWED_ENTRY_KEYS: frozenset[str] = frozenset({"type", "search", "search_regex", "class", "sheet"})

GLOB_WILDCARD: Final[str] = "*"

# Selector characters that terminate a matched name.
BOUNDARY_LOOKAHEAD: Final[str] = r"(?=\s|\.|:|,|\[|$)"

# A glob without a leading wildcard is anchored at the selector start,
# tolerating one class or id sigil.
GLOB_START_ANCHOR: Final[str] = r"^[.#]?"
GLOB_INTERIOR: Final[str] = ".*?"
GLOB_TRAILING: Final[str] = ".*?" + BOUNDARY_LOOKAHEAD
