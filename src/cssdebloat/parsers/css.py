"""Structural stylesheet parser built on tinycss2.

Turns raw CSS into a tree of :class:`DeclarationLeaf` and
:class:`AtRuleContainer` nodes. Leaves carry compact-rendered CSS with
relative asset URLs already rewritten against the stylesheet location, so
the tree never has to be re-serialized through tinycss2 again.
"""

from __future__ import annotations

import logging
from typing import Any

import tinycss2
from tinycss2.ast import (
    AtRule,
    Comment,
    CurlyBracketsBlock,
    FunctionBlock,
    LiteralToken,
    ParenthesesBlock,
    ParseError,
    QualifiedRule,
    SquareBracketsBlock,
    StringToken,
    URLToken,
    WhitespaceToken,
)
from tinycss2.serializer import serialize_string_value, serialize_url

from cssdebloat.constants.parsing import (
    BYTE_ORDER_MARK,
    CONDITIONAL_AT_RULES,
    KEYFRAMES_AT_RULES,
    URL_PRELUDE_AT_RULES,
)
from cssdebloat.exceptions import CssParseError, SelectorDecompositionError
from cssdebloat.model import AtRuleContainer, DeclarationLeaf, RuleNode, SelectorDescriptor
from cssdebloat.parsers.selectors import decompose_selector, opaque_descriptor
from cssdebloat.parsers.urls import rewrite_url, stylesheet_base_url

logger = logging.getLogger(__name__)

_BLOCK_TYPES = (ParenthesesBlock, SquareBracketsBlock, CurlyBracketsBlock)


def parse_stylesheet(raw_css: str, sheet_url: str) -> tuple[RuleNode, ...]:
    """Parse raw CSS into a rule tree, rewriting relative URLs once.

    Raises CssParseError when tinycss2 reports a syntax error it could not
    recover from.
    """
    css = raw_css.lstrip(BYTE_ORDER_MARK)
    base_url = stylesheet_base_url(sheet_url)
    nodes = tinycss2.parse_stylesheet(css, skip_comments=True, skip_whitespace=True)
    tree = _transform(nodes, base_url)
    logger.debug("Parsed %d top-level rules from %s", len(tree), sheet_url or "<inline>")
    return tree


def _transform(nodes: list[Any], base_url: str) -> tuple[RuleNode, ...]:
    items: list[RuleNode] = []
    for node in nodes:
        _raise_for_error(node)
        if isinstance(node, AtRule) and node.lower_at_keyword in CONDITIONAL_AT_RULES and node.content is not None:
            children = tinycss2.parse_rule_list(node.content, skip_comments=True, skip_whitespace=True)
            items.append(
                AtRuleContainer(
                    at_rule=_at_rule_header(node, base_url),
                    children=_transform(children, base_url),
                )
            )
        elif isinstance(node, QualifiedRule):
            selectors = _split_selectors(node.prelude)
            items.append(
                DeclarationLeaf(
                    css=f"{','.join(selectors)}{{{_render_block(node.content, base_url)}}}",
                    selectors=tuple(_describe(selector) for selector in selectors),
                )
            )
        elif isinstance(node, AtRule):
            items.append(DeclarationLeaf(css=_render_at_rule(node, base_url)))
    return tuple(items)


def _describe(selector: str) -> SelectorDescriptor:
    try:
        return decompose_selector(selector)
    except SelectorDecompositionError as exc:
        logger.debug("Keeping undecomposable selector %r: %s", selector, exc)
        return opaque_descriptor(selector)


def _raise_for_error(node: Any) -> None:
    if isinstance(node, ParseError):
        raise CssParseError(f"{node.kind} at line {node.source_line}, column {node.source_column}: {node.message}")


def _split_selectors(prelude: list[Any]) -> list[str]:
    """Split a rule prelude on top-level commas into compact selector strings."""
    groups: list[list[Any]] = [[]]
    for token in prelude:
        if isinstance(token, LiteralToken) and token.value == ",":
            groups.append([])
        else:
            groups[-1].append(token)
    return [_compact(group) for group in groups]


def _at_rule_header(node: AtRule, base_url: str) -> str:
    prelude_base = base_url if node.lower_at_keyword in URL_PRELUDE_AT_RULES else ""
    prelude = _compact(node.prelude, prelude_base)
    return f"@{node.at_keyword} {prelude}" if prelude else f"@{node.at_keyword}"


def _render_at_rule(node: AtRule, base_url: str) -> str:
    header = _at_rule_header(node, base_url)
    if node.content is None:
        return f"{header};"
    if node.lower_at_keyword in KEYFRAMES_AT_RULES:
        frames = tinycss2.parse_rule_list(node.content, skip_comments=True, skip_whitespace=True)
        body = "".join(_render_qualified(frame, base_url) for frame in frames)
    else:
        body = _render_block(node.content, base_url)
    return f"{header}{{{body}}}"


def _render_qualified(node: Any, base_url: str) -> str:
    _raise_for_error(node)
    if isinstance(node, AtRule):
        return _render_at_rule(node, base_url)
    selectors = ",".join(_split_selectors(node.prelude))
    return f"{selectors}{{{_render_block(node.content, base_url)}}}"


def _render_block(content: list[Any], base_url: str) -> str:
    """Render a block's declarations and nested rules compactly.

    A block holding declarations tinycss2 could not parse (``*zoom:1`` style
    hacks) is kept as written, minus comments and extra whitespace.
    """
    items = tinycss2.parse_blocks_contents(content, skip_comments=True, skip_whitespace=True)
    invalid = [item for item in items if isinstance(item, ParseError)]
    if invalid:
        logger.debug(
            "Keeping block with unparsed declarations verbatim (line %d): %s",
            invalid[0].source_line,
            invalid[0].message,
        )
        return _compact(content, base_url)

    parts: list[str] = []
    for item in items:
        if isinstance(item, (QualifiedRule, AtRule)):
            parts.append(_render_qualified(item, base_url))
            continue
        value = _compact(item.value, base_url)
        important = "!important" if item.important else ""
        parts.append(f"{item.name}:{value}{important}")
    return ";".join(parts)


def _compact(tokens: list[Any], base_url: str = "") -> str:
    return tinycss2.serialize(_normalize(tokens, base_url)).strip()


def _normalize(tokens: list[Any], base_url: str) -> list[Any]:
    """Collapse whitespace, drop comments and rewrite URLs in a token list."""
    result: list[Any] = []
    for token in tokens:
        _raise_for_error(token)
        if isinstance(token, Comment):
            continue
        if isinstance(token, WhitespaceToken):
            if result and isinstance(result[-1], WhitespaceToken):
                continue
            result.append(WhitespaceToken(token.source_line, token.source_column, " "))
        elif isinstance(token, URLToken):
            result.append(_rewrite_url_token(token, base_url))
        elif isinstance(token, FunctionBlock):
            if token.lower_name == "url":
                token.arguments = [_rewrite_string_token(arg, base_url) for arg in token.arguments]
            else:
                token.arguments = _normalize(token.arguments, base_url)
            result.append(token)
        elif isinstance(token, _BLOCK_TYPES):
            token.content = _normalize(token.content, base_url)
            result.append(token)
        else:
            result.append(token)
    return result


def _rewrite_url_token(token: URLToken, base_url: str) -> URLToken:
    url = rewrite_url(token.value, base_url)
    if url == token.value:
        return token
    return URLToken(token.source_line, token.source_column, url, f"url({serialize_url(url)})")


def _rewrite_string_token(token: Any, base_url: str) -> Any:
    if not isinstance(token, StringToken):
        return token
    url = rewrite_url(token.value, base_url)
    if url == token.value:
        return token
    return StringToken(token.source_line, token.source_column, url, f'"{serialize_string_value(url)}"')
