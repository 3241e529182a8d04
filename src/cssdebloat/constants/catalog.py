"""Preserved catalog defaults and critical selectors.

Classes in ``PRESERVED_CLASSES`` are matched as literal names, including the
entries that look like prefixes (``wp-``, ``menu-``).
"""

from __future__ import annotations

PRESERVED_CLASSES: tuple[str, ...] = (
    "current-menu-item",
    "active",
    "current",
    "selected",
    "hover",
    "focus",
    "visited",
    "disabled",
    "enabled",
    "checked",
    "first",
    "last",
    "odd",
    "even",
    "visible",
    "hidden",
    "collapsed",
    "expanded",
    "dropdown",
    "menu-item",
    "sub-menu",
    "submenu",
    "sticky",
    "fixed",
    "absolute",
    "relative",
    "wp-",
    "menu-",
    "post-",
    "page-",
    "widget-",
    "sidebar-",
    "comment-",
    "header-",
    "footer-",
    "nav-",
)

PRESERVED_TAGS: tuple[str, ...] = (
    "html",
    "body",
    "div",
    "span",
    "p",
    "a",
    "img",
    "button",
    "input",
    "form",
    "header",
    "footer",
    "nav",
    "main",
    "article",
    "section",
    "aside",
    "ul",
    "ol",
    "li",
    "table",
    "tr",
    "td",
    "th",
)

PRESERVED_PSEUDO: tuple[str, ...] = (
    ":hover",
    ":focus",
    ":active",
    ":visited",
    ":disabled",
    ":enabled",
    ":checked",
    ":first-child",
    ":last-child",
    ":nth-child",
    ":not",
    ":before",
    ":after",
)

STRUCTURAL_SELECTORS: frozenset[str] = frozenset({"html", "body", "*", ":root"})

# Added as `any` allow entries when `preserve_critical` is enabled.
CRITICAL_ALLOW_SEARCHES: tuple[str, ...] = (
    "body",
    "html",
    ":root",
    ".container",
    ".wrapper",
    ".row",
    ".header",
    ".footer",
    ".content",
    ".navigation",
    ".menu",
    ".nav",
    ".button",
    ".btn",
    ".sidebar",
    ".widget",
    ".post",
    ".page",
    ".entry",
    ".article",
    ".main",
    ".site-header",
    ".site-footer",
    ".site-content",
    ".site-main",
    '[class*="wp-"]',
    '[class*="menu"]',
    ".current-",
    ".active",
    ".selected",
    ".show",
    ".hide",
    ".hidden",
    ".visible",
    ".invisible",
    ".collapse",
    ".expand",
    ".open",
    ".close",
    ".dropdown",
    ".modal",
    ".fade",
    ".slide",
    "@media",
    "@keyframes",
    "@font-face",
)
