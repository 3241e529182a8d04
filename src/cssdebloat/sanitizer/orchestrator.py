"""Sanitize orchestration for one stylesheet and for a page's stylesheets.

``sanitize`` is the fail-open boundary: any error raised while parsing,
compiling allow rules, deciding or rendering is logged and the original CSS
is returned in place of a partial result.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from functools import partial
from typing import Any

from cssdebloat.config.model import DebloatConfig
from cssdebloat.model import PreservedCatalog, Stylesheet, UsedMarkup
from cssdebloat.parsers.css import parse_stylesheet
from cssdebloat.rules.compiler import compile_allow_rules
from cssdebloat.rules.scope import scope_matches
from cssdebloat.sanitizer.decision import should_include
from cssdebloat.sanitizer.render import render_tree

logger = logging.getLogger(__name__)

DEFAULT_CATALOG = PreservedCatalog()


def sanitize(
    sheet: Stylesheet,
    used_markup: UsedMarkup,
    allow_entries: Iterable[Mapping[str, Any]] = (),
    *,
    catalog: PreservedCatalog = DEFAULT_CATALOG,
) -> str:
    """Return ``sheet``'s CSS without rules that match no used markup.

    Never raises: on failure the original raw CSS is returned. The result is
    also stored on ``sheet.content``.
    """
    try:
        result = _sanitize(sheet, used_markup, allow_entries, catalog)
    except Exception as exc:
        logger.warning("CSS sanitizer error for stylesheet %s, keeping original CSS: %s", sheet.id, exc)
        result = sheet.raw_css
    sheet.content = result
    return result


def _sanitize(
    sheet: Stylesheet,
    used_markup: UsedMarkup,
    allow_entries: Iterable[Mapping[str, Any]],
    catalog: PreservedCatalog,
) -> str:
    if sheet.parsed is None:
        sheet.parsed = parse_stylesheet(sheet.raw_css, sheet.url)
    else:
        logger.debug("Reusing cached rule tree for stylesheet %s", sheet.id)

    profile = used_markup.merged_with(catalog)
    allow_rules = compile_allow_rules(allow_entries, sheet)
    include = partial(should_include, used_markup=profile, allow_rules=allow_rules, catalog=catalog)
    return render_tree(sheet.parsed, include)


def sanitize_stylesheets(
    sheets: Iterable[Stylesheet],
    used_markup: UsedMarkup,
    config: DebloatConfig | None = None,
    *,
    catalog: PreservedCatalog = DEFAULT_CATALOG,
) -> dict[str, str]:
    """Sanitize a page's stylesheets in order and return CSS keyed by id.

    Stylesheets matching ``exclude_sheets`` pass through unchanged. A failure
    in one stylesheet does not affect the others.
    """
    config = config or DebloatConfig()
    allow_entries = config.effective_allow_entries
    results: dict[str, str] = {}

    for sheet in sheets:
        if config.exclude_sheets and scope_matches(config.exclude_sheets, sheet):
            logger.debug("Stylesheet %s is excluded from optimization", sheet.id)
            sheet.content = sheet.raw_css
        else:
            sanitize(sheet, used_markup, allow_entries, catalog=catalog)
            logger.info(
                "Stylesheet %s: %d -> %d bytes",
                sheet.id,
                len(sheet.raw_css),
                len(sheet.content or ""),
            )
        results[sheet.id] = sheet.content or ""

    return results
