"""
tools/search.py

MCP tool: search_web

Fetch the DuckDuckGo HTML results page for a query and return
{title, url, snippet} records in page order.
"""
from __future__ import annotations

from typing import Any

import httpx

from ..core.config import DEFAULT_NUM_RESULTS, MAX_NUM_RESULTS, SEARCH_TIMEOUT_MS
from ..core.ddg import build_search_url, extract_search_results
from ..core.extractor import parse_html
from ..core.fetcher import fetch
from .common import int_argument, require_str


async def handle_search_web(arguments: dict[str, Any], client: httpx.AsyncClient) -> list:
    """
    Input schema:
        query       (str) required: search query
        numResults  (int) optional: max results (default 10, max 50; 0 gives [])

    Returns:
        [ {"title": str, "url": str, "snippet": str}, ... ]
    """
    query = require_str(arguments, "query")

    num_results = int_argument(arguments, "numResults", DEFAULT_NUM_RESULTS)
    num_results = max(0, min(num_results, MAX_NUM_RESULTS))
    if num_results == 0:
        return []

    page = await fetch(client, build_search_url(query), SEARCH_TIMEOUT_MS)
    results = extract_search_results(parse_html(page.body_text), num_results)
    return [r.to_dict() for r in results]
