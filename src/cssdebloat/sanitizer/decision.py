"""Keep/drop decision for a single decomposed selector."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from cssdebloat.constants.rules import ALLOW_TYPE_CLASS, ALLOW_TYPE_PREFIX
from cssdebloat.model import CompiledAllowRule, PreservedCatalog, SelectorDescriptor, UsedMarkup


def should_include(
    descriptor: SelectorDescriptor,
    used_markup: UsedMarkup,
    allow_rules: Sequence[CompiledAllowRule] = (),
    *,
    catalog: PreservedCatalog | None = None,
) -> bool:
    """Decide whether a selector references markup that may be on the page.

    ``used_markup`` is expected to already include the catalog's classes
    and tags. Checks run in order and the first positive one wins: at-rule
    passthrough, preserved pseudo-classes, structural selectors,
    attribute-only selectors, allow rules, and finally the requirement that
    every class, id and tag referenced is in use.
    """
    catalog = catalog or PreservedCatalog()
    selector = descriptor.selector

    if descriptor.opaque or selector.startswith("@"):
        return True
    if any(pseudo in selector for pseudo in catalog.pseudo):
        return True
    if selector in catalog.structural:
        return True
    if descriptor.is_attribute_only:
        return True

    descriptor, allowed = _apply_allow_rules(descriptor, used_markup, allow_rules)
    if allowed:
        return True
    return _all_used(descriptor, used_markup)


def _apply_allow_rules(
    descriptor: SelectorDescriptor,
    used_markup: UsedMarkup,
    allow_rules: Sequence[CompiledAllowRule],
) -> tuple[SelectorDescriptor, bool]:
    """Run allow rules in order; a prefix hit drops that one class and stops."""
    selector = descriptor.selector
    for rule in allow_rules:
        if rule.type == ALLOW_TYPE_PREFIX:
            if selector == f".{rule.class_name}":
                return descriptor, True
            if _leads_with_class(descriptor, rule.class_name):
                # Remaining identifiers still have to be in use.
                return _without_class(descriptor, rule.class_name or ""), False
            continue

        if rule.type == ALLOW_TYPE_CLASS and rule.class_name not in used_markup.classes:
            continue

        if rule.matches(selector):
            return descriptor, True
    return descriptor, False


def _leads_with_class(descriptor: SelectorDescriptor, class_name: str | None) -> bool:
    return descriptor.selector.startswith(".") and bool(descriptor.classes) and descriptor.classes[0] == class_name


def _without_class(descriptor: SelectorDescriptor, class_name: str) -> SelectorDescriptor:
    remaining = tuple(name for name in descriptor.classes or () if name != class_name)
    return replace(descriptor, classes=remaining or None)


def _all_used(descriptor: SelectorDescriptor, used_markup: UsedMarkup) -> bool:
    checks = (
        (descriptor.classes, used_markup.classes),
        (descriptor.ids, used_markup.ids),
        (descriptor.tags, used_markup.tags),
    )
    return all(not names or used.issuperset(names) for names, used in checks)
