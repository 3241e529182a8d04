"""Shared pytest fixtures for stylesheets, markup profiles and test data."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from cssdebloat.model import Stylesheet, UsedMarkup

THEME_URL = "http://example.com/wp-content/themes/x/style.css?ver=3"


@pytest.fixture(scope="session")
def fixtures_root() -> Path:
    """Return root directory for test fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def theme_root(fixtures_root: Path) -> Path:
    """Return the fixture theme directory (stylesheet, markup and config)."""
    return fixtures_root / "theme"


@pytest.fixture
def make_sheet() -> Callable[..., Stylesheet]:
    """Build a Stylesheet from CSS text with a theme-like URL."""

    def _make(css: str, *, sheet_id: str = "theme", url: str = THEME_URL) -> Stylesheet:
        return Stylesheet(id=sheet_id, url=url, raw_css=css)

    return _make


@pytest.fixture
def used_markup() -> UsedMarkup:
    """A small profile as a markup provider would supply it."""
    return UsedMarkup(classes={"used", "card", "btn"}, tags={"section"}, ids={"main"})
