"""Compiler: turn raw allow entries into matchers scoped to one stylesheet."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from typing import Any

from cssdebloat.constants.rules import (
    ALLOW_TYPE_ANY,
    BOUNDARY_LOOKAHEAD,
    GLOB_INTERIOR,
    GLOB_START_ANCHOR,
    GLOB_TRAILING,
    GLOB_WILDCARD,
)
from cssdebloat.exceptions import AllowRuleError
from cssdebloat.model import CompiledAllowRule, Stylesheet
from cssdebloat.rules.schema import validate_allow_entry
from cssdebloat.rules.scope import scope_matches

logger = logging.getLogger(__name__)


def glob_to_regex(term: str) -> str:
    """Translate a search term containing ``*`` into a regex.

    Without a leading ``*`` the match is anchored at the selector start
    (after an optional ``.`` or ``#``). A trailing ``*`` matches up to the
    next selector boundary; interior wildcards match lazily.
    """
    term = term.strip()
    anchored = not term.startswith(GLOB_WILDCARD)
    body = term if anchored else term[1:]
    trailing = body.endswith(GLOB_WILDCARD)
    if trailing:
        body = body[:-1]
    pattern = GLOB_INTERIOR.join(re.escape(piece) for piece in body.split(GLOB_WILDCARD))
    if trailing:
        pattern += GLOB_TRAILING
    return (GLOB_START_ANCHOR if anchored else "") + pattern


def compile_search_regex(entry: Mapping[str, Any]) -> str | None:
    """Combine an entry's raw regex and search terms into one alternation."""
    terms = [term for term in _as_list(entry.get("search")) if term.strip()]
    alternatives: list[str] = []

    raw_regex = entry.get("search_regex")
    if raw_regex:
        alternatives.append(raw_regex)

    alternatives.extend(glob_to_regex(term) for term in terms if _is_glob(term))

    literals = [re.escape(term) for term in terms if not _is_glob(term)]
    if literals:
        alternatives.append(f"(?:{'|'.join(literals)}){BOUNDARY_LOOKAHEAD}")

    if not alternatives:
        return None
    if len(alternatives) == 1:
        return alternatives[0]
    return "|".join(f"(?:{alternative})" for alternative in alternatives)


def compile_allow_rules(
    entries: Iterable[Mapping[str, Any]],
    sheet: Stylesheet,
) -> tuple[CompiledAllowRule, ...]:
    """Compile the entries that apply to ``sheet``, preserving order.

    Raises ConfigError for malformed entries and AllowRuleError when the
    combined pattern does not compile.
    """
    compiled: list[CompiledAllowRule] = []
    for index, entry in enumerate(entries):
        location = f"allow_selectors[{index}]"
        validate_allow_entry(entry, location)
        if "sheet" in entry and not scope_matches(entry["sheet"], sheet):
            logger.debug("Skipping %s: scoped away from stylesheet %s", location, sheet.id)
            continue

        regex = compile_search_regex(entry)
        try:
            pattern = re.compile(regex) if regex else None
        except re.error as exc:
            raise AllowRuleError(f"{location}: pattern {regex!r} does not compile: {exc}") from exc

        compiled.append(
            CompiledAllowRule(
                type=entry.get("type", ALLOW_TYPE_ANY),
                class_name=entry.get("class"),
                pattern=pattern,
                source=entry,
            )
        )
    return tuple(compiled)


def _as_list(value: str | list[str] | tuple[str, ...] | None) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)


def _is_glob(term: str) -> bool:
    # A lone `*` is the universal selector, not a wildcard.
    return GLOB_WILDCARD in term and term.strip() != GLOB_WILDCARD
