"""Tests for allow entry validation."""

from __future__ import annotations

from typing import Any

import pytest

from cssdebloat.exceptions import ConfigError
from cssdebloat.rules import validate_allow_entry


@pytest.mark.parametrize(
    "entry",
    [
        {"search": "modal"},
        {"type": "any", "search": ["a", "b*"], "search_regex": r"^\.x"},
        {"type": "class", "class": "has-menu", "search": ".menu"},
        {"type": "prefix", "class": "swiper", "sheet": ["swiper-*"]},
    ],
    ids=["implicit_any", "any_full", "class", "prefix"],
)
def test_valid_entries_pass(entry: dict[str, Any]) -> None:
    validate_allow_entry(entry, "allow_selectors[0]")


@pytest.mark.parametrize(
    ("entry", "message"),
    [
        ("modal", "must be a mapping"),
        ({"search": "a", "selector": "b"}, "unknown allow entry keys"),
        ({"type": "regex"}, "'type' must be one of"),
        ({"type": "class", "search": "a"}, "require a non-empty 'class'"),
        ({"type": "prefix", "class": "  "}, "require a non-empty 'class'"),
        ({"search": 3}, "'search' must be a string or a list of strings"),
        ({"search": ["a", 1]}, "'search' must be a string or a list of strings"),
        ({"search_regex": "("}, "not a valid regex"),
        ({"search_regex": ["a"]}, "'search_regex' must be a string"),
        ({"search": "a", "sheet": {"id": "x"}}, "'sheet' must be a string or a list of strings"),
        ({"search": "a", "class": 5}, "'class' must be a string"),
    ],
    ids=[
        "not_mapping",
        "unknown_key",
        "bad_type",
        "class_missing",
        "prefix_blank_class",
        "search_int",
        "search_mixed_list",
        "regex_invalid",
        "regex_not_string",
        "sheet_mapping",
        "class_not_string",
    ],
)
def test_invalid_entries_raise(entry: Any, message: str) -> None:
    with pytest.raises(ConfigError, match=message) as exc_info:
        validate_allow_entry(entry, "allow_selectors[4]")

    assert str(exc_info.value).startswith("allow_selectors[4]:")
