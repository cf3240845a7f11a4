"""
core/favicon.py

Best-effort check for a site's /favicon.ico.  Returns the icon URL or None;
never raises, since a missing favicon is not an error for a link preview.
"""
from __future__ import annotations

import logging
import urllib.parse
from typing import Optional

import httpx

from .config import FAVICON_TIMEOUT_MS
from .fetcher import fetch

logger = logging.getLogger(__name__)

DEFAULT_PORTS = {"http": 80, "https": 443}


def favicon_url_for(page_url: str) -> str:
    """Return ``{scheme}://{host}[:port]/favicon.ico`` for the page's origin."""
    parsed = urllib.parse.urlsplit(page_url)
    if parsed.scheme not in ("http", "https") or not parsed.hostname:
        raise ValueError(f"Not an http(s) URL: {page_url!r}")
    scheme = parsed.scheme
    host = parsed.hostname  # lower-cased, userinfo and brackets stripped
    if ":" in host:
        host = f"[{host}]"
    port = parsed.port  # raises ValueError on a malformed port
    if port is not None and port != DEFAULT_PORTS[scheme]:
        host = f"{host}:{port}"
    return f"{scheme}://{host}/favicon.ico"


async def probe_favicon(
    client: httpx.AsyncClient,
    page_url: str,
    timeout_ms: int = FAVICON_TIMEOUT_MS,
) -> Optional[str]:
    try:
        candidate = favicon_url_for(page_url)
        result = await fetch(client, candidate, timeout_ms)
    except Exception as exc:
        logger.debug("Favicon probe failed for %s: %s", page_url, exc)
        return None

    if not result.status_ok:
        logger.debug("No favicon at %s (HTTP %d)", candidate, result.status_code)
        return None
    return candidate
