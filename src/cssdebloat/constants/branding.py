"""CLI branding strings."""

from __future__ import annotations

CLI_PROG: str = "cssdebloat"
CLI_DESCRIPTION: str = (
    "Remove CSS rules whose selectors match no markup on the page.\n"
    "Unused rules are dropped; at-rule nesting and asset URLs are preserved."
)
