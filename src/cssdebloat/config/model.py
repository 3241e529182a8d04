"""Config data model for cssdebloat."""

from __future__ import annotations

from dataclasses import dataclass

from cssdebloat.constants.catalog import CRITICAL_ALLOW_SEARCHES
from cssdebloat.constants.config import DEFAULT_PRESERVE_CRITICAL
from cssdebloat.types import RawAllowEntry


@dataclass(frozen=True)
class DebloatConfig:
    """Resolved optimizer config."""

    allow_selectors: tuple[RawAllowEntry, ...] = ()
    exclude_sheets: tuple[str, ...] = ()
    preserve_critical: bool = DEFAULT_PRESERVE_CRITICAL

    @property
    def effective_allow_entries(self) -> tuple[RawAllowEntry, ...]:
        """Configured allow entries plus the critical-selector entry when enabled."""
        if not self.preserve_critical:
            return self.allow_selectors
        critical: RawAllowEntry = {"type": "any", "search": list(CRITICAL_ALLOW_SEARCHES)}
        return (*self.allow_selectors, critical)
