"""
tools/preview.py

MCP tool: fetch_link_preview

Fetch a page and return its social-preview metadata (OpenGraph, Twitter
Card, HTML fallbacks) plus the site favicon when one is served.
"""
from __future__ import annotations

from typing import Any

import httpx

from ..core.config import PAGE_TIMEOUT_MS
from ..core.extractor import parse_html
from ..core.favicon import probe_favicon
from ..core.fetcher import fetch
from ..core.preview import extract_preview
from .common import require_url


async def handle_fetch_link_preview(arguments: dict[str, Any], client: httpx.AsyncClient) -> dict:
    """
    Input schema:
        url  (str) required

    Returns LinkPreview as dict; absent fields are omitted:
        {url, contentType?, language?, title?, description?, image?,
         siteName?, type?, urlCanonical?, twitterCard?, favicon?}
    """
    url = require_url(arguments)

    page = await fetch(client, url, PAGE_TIMEOUT_MS)
    doc = parse_html(page.body_text)
    favicon = await probe_favicon(client, url)

    return extract_preview(doc, url, page.headers, favicon=favicon).to_dict()
