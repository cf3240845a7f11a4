"""
core/config.py

Runtime settings (from environment) and the shared dataclasses:
FetchResult, LinkPreview, ContentDigest, SearchResult.

Environment variables:
  PAGE_TIMEOUT_MS       Budget for page fetches          (default: 15000)
  FAVICON_TIMEOUT_MS    Budget for the favicon probe     (default: 3000)
  SEARCH_TIMEOUT_MS     Budget for the search page fetch (default: 10000)
  SEARCH_REGION         DuckDuckGo region code           (default: us-en)
  VERIFY_TLS            Verify certificates, 0 disables  (default: 1)
  HTTP_MAX_CONNECTIONS  Shared client pool size          (default: 20)
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict, Optional

# ---------------------------------------------------------------------------
# Configuration from environment
# ---------------------------------------------------------------------------

PAGE_TIMEOUT_MS      = int(os.getenv("PAGE_TIMEOUT_MS",      "15000"))
FAVICON_TIMEOUT_MS   = int(os.getenv("FAVICON_TIMEOUT_MS",   "3000"))
SEARCH_TIMEOUT_MS    = int(os.getenv("SEARCH_TIMEOUT_MS",    "10000"))
SEARCH_REGION        = os.getenv("SEARCH_REGION", "us-en")
VERIFY_TLS           = os.getenv("VERIFY_TLS", "1").lower() not in ("0", "false", "no")
HTTP_MAX_CONNECTIONS = int(os.getenv("HTTP_MAX_CONNECTIONS", "20"))

DEFAULT_MAX_LENGTH  = 5000
DEFAULT_NUM_RESULTS = 10
MAX_NUM_RESULTS     = 50


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

@dataclass
class FetchResult:
    """One HTTP response, headers keyed by lower-cased name."""
    url: str
    status_code: int
    body_text: str = ""
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def status_ok(self) -> bool:
        return 200 <= self.status_code < 300


# Attribute name -> JSON key, in output order.
_PREVIEW_WIRE_NAMES = (
    ("url", "url"),
    ("content_type", "contentType"),
    ("language", "language"),
    ("title", "title"),
    ("description", "description"),
    ("image", "image"),
    ("site_name", "siteName"),
    ("type", "type"),
    ("url_canonical", "urlCanonical"),
    ("twitter_card", "twitterCard"),
    ("favicon", "favicon"),
)


@dataclass(frozen=True)
class LinkPreview:
    """Social-preview metadata for a single page. Only ``url`` is required."""
    url: str
    content_type: Optional[str] = None
    language: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    site_name: Optional[str] = None
    type: Optional[str] = None
    url_canonical: Optional[str] = None
    twitter_card: Optional[str] = None
    favicon: Optional[str] = None

    def to_dict(self) -> dict:
        d: dict = {}
        for attr, key in _PREVIEW_WIRE_NAMES:
            value = getattr(self, attr)
            if value:
                d[key] = value
        return d


@dataclass(frozen=True)
class ContentDigest:
    text: str
    max_length: int


@dataclass(frozen=True)
class SearchResult:
    title: str
    url: str
    snippet: str = ""

    def to_dict(self) -> dict:
        return {"title": self.title, "url": self.url, "snippet": self.snippet}
