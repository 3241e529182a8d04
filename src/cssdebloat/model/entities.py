"""Domain entities for stylesheets, rule trees, markup profiles and allow rules."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from cssdebloat.constants.catalog import (
    PRESERVED_CLASSES,
    PRESERVED_PSEUDO,
    PRESERVED_TAGS,
    STRUCTURAL_SELECTORS,
)
from cssdebloat.constants.config import MARKUP_KEYS
from cssdebloat.exceptions import ConfigError
from cssdebloat.types import AllowType, RawUsedMarkup


@dataclass(frozen=True)
class SelectorDescriptor:
    """Identifiers referenced by one comma-separated selector.

    Categories without identifiers are ``None``. An ``opaque`` descriptor
    belongs to a selector that could not be decomposed and is never dropped.
    """

    selector: str
    classes: tuple[str, ...] | None = None
    ids: tuple[str, ...] | None = None
    tags: tuple[str, ...] | None = None
    attrs: tuple[str, ...] | None = None
    opaque: bool = False

    @property
    def is_attribute_only(self) -> bool:
        """True when the selector references attributes and nothing else."""
        return bool(self.attrs) and not (self.classes or self.ids or self.tags)


@dataclass(frozen=True)
class DeclarationLeaf:
    """A compact-rendered construct kept or dropped as a whole.

    ``selectors`` is ``None`` for constructs without a selector list
    (``@font-face``, ``@import``, ``@keyframes``), which always render.
    """

    css: str
    selectors: tuple[SelectorDescriptor, ...] | None = None


@dataclass(frozen=True)
class AtRuleContainer:
    """A conditional at-rule (``@media``, ``@supports``) wrapping child rules."""

    at_rule: str
    children: tuple[RuleNode, ...] = ()


RuleNode = DeclarationLeaf | AtRuleContainer


@dataclass
class Stylesheet:
    """One stylesheet handled by a sanitize pass.

    ``parsed`` caches the rule tree after the first parse and is reused by
    later passes over the same instance.
    """

    id: str
    url: str
    raw_css: str
    parsed: tuple[RuleNode, ...] | None = None
    content: str | None = None


def _name_set(values: Iterable[str] | None, key_name: str) -> frozenset[str]:
    if values is None:
        return frozenset()
    if isinstance(values, str) or not all(isinstance(item, str) for item in values):
        raise ConfigError(f"{key_name} must be a collection of strings")
    return frozenset(values)


@dataclass(frozen=True)
class PreservedCatalog:
    """Selectors, classes, tags and pseudo-classes that are never eliminated."""

    classes: frozenset[str] = frozenset(PRESERVED_CLASSES)
    tags: frozenset[str] = frozenset(PRESERVED_TAGS)
    pseudo: tuple[str, ...] = PRESERVED_PSEUDO
    structural: frozenset[str] = STRUCTURAL_SELECTORS


@dataclass(frozen=True)
class UsedMarkup:
    """Class, tag and id names known to exist in rendered markup."""

    classes: frozenset[str] = frozenset()
    tags: frozenset[str] = frozenset()
    ids: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        # Accept lists and sets from callers, normalize for internal use.
        for key in MARKUP_KEYS:
            value = getattr(self, key)
            if not isinstance(value, frozenset):
                object.__setattr__(self, key, frozenset(value))

    @classmethod
    def from_mapping(cls, raw: RawUsedMarkup | Mapping[str, Iterable[str]] | None) -> UsedMarkup:
        """Build a profile from a ``{classes, tags, ids}`` mapping; missing keys are empty."""
        if raw is None:
            return cls()
        unknown = set(raw) - set(MARKUP_KEYS)
        if unknown:
            raise ConfigError(f"unknown used-markup keys: {sorted(unknown)}")
        return cls(**{key: _name_set(raw.get(key), key) for key in MARKUP_KEYS})

    def extend(
        self,
        *,
        classes: Iterable[str] = (),
        tags: Iterable[str] = (),
        ids: Iterable[str] = (),
    ) -> UsedMarkup:
        """Return a new profile with the given names added."""
        return UsedMarkup(
            classes=self.classes | frozenset(classes),
            tags=self.tags | frozenset(tags),
            ids=self.ids | frozenset(ids),
        )

    def merged_with(self, catalog: PreservedCatalog) -> UsedMarkup:
        """Return this profile unioned with the catalog's classes and tags."""
        return self.extend(classes=catalog.classes, tags=catalog.tags)


@dataclass(frozen=True)
class CompiledAllowRule:
    """An allow entry scoped to one stylesheet, with its derived matcher."""

    type: AllowType
    class_name: str | None = None
    pattern: re.Pattern[str] | None = None
    source: Mapping[str, object] = field(default_factory=dict, compare=False)

    def matches(self, selector: str) -> bool:
        """Return True when the compiled pattern is found in ``selector``."""
        return self.pattern is not None and self.pattern.search(selector) is not None
