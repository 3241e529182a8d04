"""Render the retained subset of a rule tree back to CSS text."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from cssdebloat.exceptions import RenderError
from cssdebloat.model import AtRuleContainer, DeclarationLeaf, RuleNode, SelectorDescriptor

SelectorPredicate = Callable[[SelectorDescriptor], bool]


def render_tree(nodes: Sequence[RuleNode], include: SelectorPredicate) -> str:
    """Render leaves with at least one included selector; drop empty at-rules."""
    rendered: list[str] = []
    for node in nodes:
        if isinstance(node, DeclarationLeaf):
            if node.selectors is None or any(include(selector) for selector in node.selectors):
                rendered.append(node.css)
        elif isinstance(node, AtRuleContainer):
            children = render_tree(node.children, include)
            if children:
                rendered.append(f"{node.at_rule} {{ {children} }}")
        else:
            raise RenderError(f"Unknown rule node: {type(node).__name__}")
    return "".join(rendered)
