"""Tests for sanitize orchestration."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

import pytest

from cssdebloat.config import DebloatConfig, load_config
from cssdebloat.io import load_used_markup, read_stylesheet
from cssdebloat.model import PreservedCatalog, Stylesheet, UsedMarkup
from cssdebloat.sanitizer import orchestrator, sanitize, sanitize_stylesheets

SheetFactory = Callable[..., Stylesheet]


def test_empty_stylesheet_yields_empty_output(make_sheet: SheetFactory, used_markup: UsedMarkup) -> None:
    sheet = make_sheet("")

    assert sanitize(sheet, used_markup) == ""
    assert sheet.content == ""


def test_unused_rule_is_removed(make_sheet: SheetFactory, used_markup: UsedMarkup) -> None:
    sheet = make_sheet(".used{color:red} .unused{color:blue}")

    assert sanitize(sheet, used_markup) == ".used{color:red}"
    assert sheet.content == ".used{color:red}"


def test_media_block_keeps_only_used_children(make_sheet: SheetFactory, used_markup: UsedMarkup) -> None:
    sheet = make_sheet("@media (max-width:600px){.used{color:red} .unused{color:blue}}")

    assert sanitize(sheet, used_markup) == "@media (max-width:600px) { .used{color:red} }"


def test_media_block_without_used_children_disappears(make_sheet: SheetFactory, used_markup: UsedMarkup) -> None:
    sheet = make_sheet("@media print{.unused{color:red}}.used{color:blue}")

    assert sanitize(sheet, used_markup) == ".used{color:blue}"


def test_selector_list_kept_when_any_member_used(make_sheet: SheetFactory, used_markup: UsedMarkup) -> None:
    sheet = make_sheet(".unused, .used { margin: 0 }")

    assert sanitize(sheet, used_markup) == ".unused,.used{margin:0}"


def test_relative_urls_rewritten_in_output(make_sheet: SheetFactory, used_markup: UsedMarkup) -> None:
    sheet = make_sheet(".card{background:url(img/bg.png)}")

    assert sanitize(sheet, used_markup) == ".card{background:url(http://example.com/wp-content/themes/x/img/bg.png)}"


def test_sanitize_is_idempotent_and_reuses_parsed_tree(
    make_sheet: SheetFactory,
    used_markup: UsedMarkup,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    calls: list[str] = []
    real_parse = orchestrator.parse_stylesheet

    def counting_parse(raw_css: str, sheet_url: str):
        calls.append(sheet_url)
        return real_parse(raw_css, sheet_url)

    monkeypatch.setattr(orchestrator, "parse_stylesheet", counting_parse)
    sheet = make_sheet(".used{color:red} .unused{color:blue} .card .btn{x:y}")

    first = sanitize(sheet, used_markup)
    second = sanitize(sheet, used_markup)

    assert first == second == ".used{color:red}.card .btn{x:y}"
    assert len(calls) == 1
    assert sheet.parsed is not None


def test_parse_failure_returns_original_css(
    make_sheet: SheetFactory,
    used_markup: UsedMarkup,
    caplog: pytest.LogCaptureFixture,
) -> None:
    raw = ".used{color:red} .broken"
    sheet = make_sheet(raw, sheet_id="broken-sheet")

    with caplog.at_level(logging.WARNING, logger="cssdebloat"):
        result = sanitize(sheet, used_markup)

    assert result == raw
    assert sheet.content == raw
    assert "broken-sheet" in caplog.text
    assert "keeping original CSS" in caplog.text


def test_malformed_allow_entry_returns_original_css(make_sheet: SheetFactory, used_markup: UsedMarkup) -> None:
    raw = ".used{color:red} .unused{color:blue}"

    assert sanitize(make_sheet(raw), used_markup, [{"type": "bogus"}]) == raw


def test_allow_entry_scoped_to_other_sheet_is_ignored(make_sheet: SheetFactory, used_markup: UsedMarkup) -> None:
    entries = [{"search": "promo", "sheet": "promo-css"}]
    css = ".promo{display:none}"

    assert sanitize(make_sheet(css, sheet_id="theme"), used_markup, entries) == ""
    assert sanitize(make_sheet(css, sheet_id="promo-css"), used_markup, entries) == css


def test_glob_allow_entry_keeps_matching_selectors(make_sheet: SheetFactory, used_markup: UsedMarkup) -> None:
    sheet = make_sheet(".btn-primary{a:b} .card .btn-x{c:d} .other{e:f}")

    assert sanitize(sheet, used_markup, [{"search": "btn-*"}]) == ".btn-primary{a:b}"


def test_catalog_classes_and_tags_are_kept(make_sheet: SheetFactory, used_markup: UsedMarkup) -> None:
    sheet = make_sheet(".active{a:b} div{c:d} .wp-block{e:f}")

    assert sanitize(sheet, used_markup) == ".active{a:b}div{c:d}"


def test_custom_catalog_replaces_defaults(make_sheet: SheetFactory, used_markup: UsedMarkup) -> None:
    catalog = PreservedCatalog(classes=frozenset({"wp-block"}), tags=frozenset())
    sheet = make_sheet(".active{a:b} div{c:d} .wp-block{e:f}")

    assert sanitize(sheet, used_markup, catalog=catalog) == ".wp-block{e:f}"


def test_sanitize_stylesheets_skips_excluded_and_isolates_failures(
    make_sheet: SheetFactory,
    used_markup: UsedMarkup,
) -> None:
    sheets = [
        make_sheet(".unused{a:b}", sheet_id="admin-bar"),
        make_sheet(".used{a:b} .broken", sheet_id="broken"),
        make_sheet(".used{a:b} .unused{c:d}", sheet_id="theme"),
    ]
    config = DebloatConfig(exclude_sheets=("admin-bar",), preserve_critical=False)

    results = sanitize_stylesheets(sheets, used_markup, config)

    assert list(results) == ["admin-bar", "broken", "theme"]
    assert results["admin-bar"] == ".unused{a:b}"
    assert results["broken"] == ".used{a:b} .broken"
    assert results["theme"] == ".used{a:b}"


@pytest.mark.parametrize(
    ("preserve_critical", "expected"),
    [(True, ".modal{a:b}"), (False, "")],
    ids=["critical_on", "critical_off"],
)
def test_sanitize_stylesheets_critical_selectors(
    make_sheet: SheetFactory,
    preserve_critical: bool,
    expected: str,
) -> None:
    sheet = make_sheet(".modal{a:b} .unused{c:d}")

    results = sanitize_stylesheets([sheet], UsedMarkup(), DebloatConfig(preserve_critical=preserve_critical))

    assert results == {"theme": expected}


def test_sanitize_stylesheets_defaults_to_critical_selectors(make_sheet: SheetFactory) -> None:
    results = sanitize_stylesheets([make_sheet(".modal{a:b}")], UsedMarkup())

    assert results["theme"] == ".modal{a:b}"


def test_fixture_theme_end_to_end(theme_root: Path) -> None:
    config = load_config(theme_root)
    used = load_used_markup(theme_root / "markup.yaml")
    sheet = read_stylesheet(
        theme_root / "style.css",
        url="http://example.com/wp-content/themes/x/style.css?ver=3",
        sheet_id="theme",
    )

    css = sanitize_stylesheets([sheet], used, config)["theme"]

    assert '@charset "utf-8";' in css
    assert '@import url("http://example.com/wp-content/themes/x/parts/print.css") print;' in css
    assert (
        '@font-face{font-family:"Theme Sans";'
        'src:url(http://example.com/wp-content/themes/x/fonts/theme-sans.woff2) format("woff2")}'
    ) in css
    assert ".card{padding:1rem;background:url(http://example.com/wp-content/themes/x/img/card-bg.png) no-repeat}" in css
    assert ".card .card-title,.legacy-title{font-weight:bold}" in css
    assert "#main > .card{margin:0 auto}" in css
    assert "@media (max-width: 600px) { .card{padding:.5rem} }" in css
    assert "@keyframes fade{from{opacity:0}to{opacity:1}}" in css
    assert "promo-banner" not in css
    assert "#sidebar" not in css
    assert "@media print" not in css


def test_declaration_hacks_do_not_disable_filtering(make_sheet: SheetFactory) -> None:
    css = ".used{color:red}.unused{color:blue}.legacy{*zoom:1;color:green}"

    assert sanitize(make_sheet(css), UsedMarkup(classes={"used"})) == ".used{color:red}"
    assert (
        sanitize(make_sheet(css), UsedMarkup(classes={"used", "legacy"}))
        == ".used{color:red}.legacy{*zoom:1;color:green}"
    )


@pytest.mark.parametrize(
    ("used", "expected"),
    [({"2xl:flex"}, True), (set(), False)],
    ids=["used", "unused"],
)
def test_hex_escaped_class_names_match_markup(make_sheet: SheetFactory, used: set[str], expected: bool) -> None:
    result = sanitize(make_sheet(r".\32xl\:flex{display:flex}"), UsedMarkup(classes=used))

    assert result.endswith("{display:flex}") is expected
    assert (result == "") is not expected
