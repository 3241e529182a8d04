"""Relative asset URL rewriting against a stylesheet's location."""

from __future__ import annotations

from urllib.parse import urljoin, urlsplit

from cssdebloat.constants.urls import ABSOLUTE_SCHEME_PATTERN, LAST_SEGMENT_PATTERN


def stylesheet_base_url(sheet_url: str) -> str:
    """Return the directory part of a stylesheet URL.

    The last path segment is always dropped, with or without a query string,
    so ``css/main.css`` and ``css/main.css?ver=1`` both resolve assets
    against ``css/``.
    """
    parts = urlsplit(sheet_url)
    if parts.netloc and not parts.path:
        return f"{parts.scheme}://{parts.netloc}/" if parts.scheme else f"//{parts.netloc}/"
    return LAST_SEGMENT_PATTERN.sub("", sheet_url, count=1)


def rewrite_url(url: str, base_url: str) -> str:
    """Prefix a document-relative URL with ``base_url``.

    Absolute (``http:``, ``https:``, ``data:``), host-qualified and
    root-relative URLs are returned unchanged, as are malformed ones.
    """
    if not base_url or ABSOLUTE_SCHEME_PATTERN.match(url):
        return url
    try:
        parsed = urlsplit(url)
    except ValueError:
        return url
    if parsed.netloc or not parsed.path or parsed.path.startswith("/"):
        return url
    return base_url + url


def absolutize_stylesheet_url(src: str, site_url: str) -> str:
    """Resolve a stylesheet ``src`` without a host against the site URL."""
    if "//" in src:
        return src
    return urljoin(site_url.rstrip("/") + "/", src.lstrip("/"))
