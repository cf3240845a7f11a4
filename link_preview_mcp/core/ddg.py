"""
core/ddg.py

DuckDuckGo HTML results page: URL builder and result parser.

The lightweight endpoint (html.duckduckgo.com/html/) serves plain markup,
one ``.result`` block per hit.  Result links usually point at DDG's redirect
service (``//duckduckgo.com/l/?uddg=<target>``); they are unwrapped here so
callers get the real destination.
"""
from __future__ import annotations

import logging
import urllib.parse
from typing import List, Optional

from bs4 import BeautifulSoup

from .config import DEFAULT_NUM_RESULTS, SEARCH_REGION, SearchResult
from .extractor import normalize_whitespace

logger = logging.getLogger(__name__)

SEARCH_ENDPOINT = "https://html.duckduckgo.com/html/"


def _is_valid_url(url: str) -> bool:
    try:
        r = urllib.parse.urlparse(url)
        return r.scheme in ("http", "https") and bool(r.netloc)
    except ValueError:
        return False


def build_search_url(query: str, region: str = SEARCH_REGION) -> str:
    return f"{SEARCH_ENDPOINT}?{urllib.parse.urlencode({'q': query, 'kl': region})}"


def resolve_result_url(href: str) -> Optional[str]:
    """Return the absolute destination of a result link, or None."""
    href = (href or "").strip()
    if not href:
        return None
    url = urllib.parse.urljoin(SEARCH_ENDPOINT, href)
    parsed = urllib.parse.urlparse(url)
    if parsed.netloc.endswith("duckduckgo.com") and parsed.path.startswith("/l/"):
        target = urllib.parse.parse_qs(parsed.query).get("uddg")
        url = target[0] if target else ""
    return url if _is_valid_url(url) else None


def extract_search_results(
    doc: BeautifulSoup,
    num_results: int = DEFAULT_NUM_RESULTS,
) -> List[SearchResult]:
    """
    Read up to *num_results* hits from a results page, in page order.

    Blocks without a usable link or without title text are skipped.
    """
    results: List[SearchResult] = []
    if num_results <= 0:
        return results

    for block in doc.select(".result"):
        link = block.select_one(".result__title a") or block.select_one("a.result__a")
        if link is None:
            continue
        url = resolve_result_url(link.get("href", ""))
        title = normalize_whitespace(link.get_text(" "))
        if not url or not title:
            continue

        snippet_el = block.select_one(".result__snippet")
        snippet = normalize_whitespace(snippet_el.get_text(" ")) if snippet_el else ""
        results.append(SearchResult(title=title, url=url, snippet=snippet))
        if len(results) >= num_results:
            break

    logger.debug("Parsed %d search results", len(results))
    return results
