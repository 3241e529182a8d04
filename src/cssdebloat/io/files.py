"""Stylesheet reading and atomic output writing."""

from __future__ import annotations

import os
import tempfile
from contextlib import suppress
from pathlib import Path

from cssdebloat.model import Stylesheet
from cssdebloat.parsers.urls import absolutize_stylesheet_url


def read_stylesheet(
    path: Path,
    *,
    url: str | None = None,
    sheet_id: str | None = None,
    site_url: str | None = None,
) -> Stylesheet:
    """Read a CSS file into a Stylesheet; id defaults to the file stem.

    Without a ``url`` relative asset URLs are left as written. A ``url``
    without a host is resolved against ``site_url`` when one is given.
    """
    if url and site_url:
        url = absolutize_stylesheet_url(url, site_url)
    return Stylesheet(
        id=sheet_id or path.stem,
        url=url or "",
        raw_css=path.read_text(encoding="utf-8"),
    )


def write_text_atomic(path: Path, text: str, *, temp_prefix: str = ".cssdebloat-") -> None:
    """Persist text atomically by writing to a temp file then renaming."""
    path.parent.mkdir(parents=True, exist_ok=True)

    temp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=path.parent,
            prefix=temp_prefix,
            suffix=path.suffix,
            delete=False,
        ) as handle:
            temp_name = handle.name
            handle.write(text)
    except Exception:
        if temp_name:
            with suppress(FileNotFoundError):
                Path(temp_name).unlink()
        raise

    assert temp_name is not None
    os.replace(temp_name, path)
