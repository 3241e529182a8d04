"""Core data models for cssdebloat."""

from .entities import (
    AtRuleContainer,
    CompiledAllowRule,
    DeclarationLeaf,
    PreservedCatalog,
    RuleNode,
    SelectorDescriptor,
    Stylesheet,
    UsedMarkup,
)

__all__ = [
    "AtRuleContainer",
    "CompiledAllowRule",
    "DeclarationLeaf",
    "PreservedCatalog",
    "RuleNode",
    "SelectorDescriptor",
    "Stylesheet",
    "UsedMarkup",
]
