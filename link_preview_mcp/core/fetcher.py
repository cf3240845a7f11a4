"""
core/fetcher.py

Bounded async HTTP GET:
  - Every request carries a hard time budget (asyncio.wait_for around the
    whole exchange, plus the same value as the httpx per-operation timeout)
  - Fixed browser-like header set
  - Content-length guard (2 MB hard cap, also enforced while streaming)
  - Non-2xx responses are returned, not raised
  - Transport failures mapped onto FetchTimeoutError / NetworkError
"""
from __future__ import annotations

import asyncio
import logging
from typing import Dict, List, Tuple

import httpx

from .config import HTTP_MAX_CONNECTIONS, VERIFY_TLS, FetchResult
from .errors import ContentTooLargeError, FetchTimeoutError, InputError, NetworkError

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

MAX_CONTENT_BYTES = 2_000_000  # 2 MB hard cap

DEFAULT_HEADERS: Dict[str, str] = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
}


# ---------------------------------------------------------------------------
# Core async fetch
# ---------------------------------------------------------------------------

async def _get_capped(
    client: httpx.AsyncClient,
    url: str,
    timeout: float,
) -> Tuple[httpx.Response, bytes]:
    """Stream the response body, giving up once it passes MAX_CONTENT_BYTES."""
    async with client.stream(
        "GET",
        url,
        headers=DEFAULT_HEADERS,
        timeout=timeout,
        follow_redirects=True,
    ) as resp:
        # Size guard (header-based, free check)
        cl = resp.headers.get("content-length", "")
        if cl.isdigit() and int(cl) > MAX_CONTENT_BYTES:
            raise ContentTooLargeError(f"Content too large: {url} declares {cl} bytes")

        chunks: List[bytes] = []
        size = 0
        async for chunk in resp.aiter_bytes():
            size += len(chunk)
            if size > MAX_CONTENT_BYTES:
                raise ContentTooLargeError(
                    f"Content too large: {url} exceeds {MAX_CONTENT_BYTES} bytes"
                )
            chunks.append(chunk)
    return resp, b"".join(chunks)


async def fetch(client: httpx.AsyncClient, url: str, timeout_ms: int) -> FetchResult:
    """
    GET *url* and return its FetchResult.

    Raises FetchTimeoutError if nothing complete arrives within *timeout_ms*,
    NetworkError for connection-level failures, ContentTooLargeError when the
    body passes MAX_CONTENT_BYTES.  HTTP error statuses are not failures:
    check ``result.status_ok``.
    """
    if timeout_ms <= 0:
        raise ValueError(f"timeout_ms must be positive, got {timeout_ms}")
    timeout = timeout_ms / 1000

    try:
        resp, body = await asyncio.wait_for(_get_capped(client, url, timeout), timeout=timeout)
    except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
        raise FetchTimeoutError(f"Timed out after {timeout_ms} ms fetching {url}") from exc
    except httpx.InvalidURL as exc:
        raise InputError(f"Invalid URL {url!r}: {exc}") from exc
    except httpx.RequestError as exc:
        logger.debug("Request error for %s: %r", url, exc)
        raise NetworkError(f"Request to {url} failed: {str(exc) or type(exc).__name__}") from exc

    result = FetchResult(
        url=str(resp.url),
        status_code=resp.status_code,
        body_text=body.decode(resp.encoding or "utf-8", errors="replace"),
        headers={k.lower(): v for k, v in resp.headers.items()},
    )
    if not result.status_ok:
        logger.info("HTTP %d for %s", resp.status_code, url)
    return result


# ---------------------------------------------------------------------------
# Shared async client factory
# ---------------------------------------------------------------------------

def build_http_client(max_connections: int = HTTP_MAX_CONNECTIONS) -> httpx.AsyncClient:
    """
    Build the process-wide httpx.AsyncClient.

    Use as an async context manager:
        async with build_http_client() as client:
            ...
    """
    return httpx.AsyncClient(
        verify=VERIFY_TLS,
        http2=True,
        limits=httpx.Limits(
            max_connections=max_connections,
            max_keepalive_connections=max_connections,
            keepalive_expiry=30.0,
        ),
    )
