"""Typed shapes for externally supplied allow entries and markup profiles."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Literal, NotRequired, TypedDict

AllowType = Literal["any", "class", "prefix"]

ScopeMatcher = str | list[str] | tuple[str, ...]


# `class` is a keyword, so the functional syntax is required here.
RawAllowEntry = TypedDict(
    "RawAllowEntry",
    {
        "type": NotRequired[AllowType],
        "search": NotRequired[str | list[str]],
        "search_regex": NotRequired[str],
        "class": NotRequired[str],
        "sheet": NotRequired[ScopeMatcher],
    },
)


class RawUsedMarkup(TypedDict, total=False):
    """Used-markup payload as supplied by a markup provider."""

    classes: Iterable[str]
    tags: Iterable[str]
    ids: Iterable[str]
