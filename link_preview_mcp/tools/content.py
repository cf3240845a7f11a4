"""
tools/content.py

MCP tool: get_page_content

Fetch a single URL and return its readable text, boilerplate removed.
"""
from __future__ import annotations

from typing import Any

import httpx

from ..core.config import DEFAULT_MAX_LENGTH, PAGE_TIMEOUT_MS
from ..core.extractor import extract_content, parse_html
from ..core.fetcher import fetch
from .common import int_argument, require_url


async def handle_get_page_content(arguments: dict[str, Any], client: httpx.AsyncClient) -> str:
    """
    Input schema:
        url        (str) required
        maxLength  (int) optional: max chars (default 5000)

    Returns the extracted text as a plain string.
    """
    url = require_url(arguments)
    max_length = int_argument(arguments, "maxLength", DEFAULT_MAX_LENGTH)

    page = await fetch(client, url, PAGE_TIMEOUT_MS)
    return extract_content(parse_html(page.body_text), max_length).text
