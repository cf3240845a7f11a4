"""
core/preview.py

Link-preview metadata extraction.

Each output field has an ordered list of candidate sources; the first
non-empty candidate wins and later ones are never consulted:

  title        og:title, twitter:title, <title>
  description  og:description, twitter:description, meta[name=description]
  image        og:image, twitter:image
  site_name    og:site_name
  type         og:type
  url_canonical og:url
  twitter_card twitter:card
  content_type Content-Type response header
  language     <html lang>
"""
from __future__ import annotations

from typing import Dict, Mapping, Optional

from bs4 import BeautifulSoup

from .config import LinkPreview

OG_FIELDS: Dict[str, str] = {
    "og:title": "title",
    "og:description": "description",
    "og:image": "image",
    "og:site_name": "site_name",
    "og:type": "type",
    "og:url": "url_canonical",
}

TWITTER_FIELDS: Dict[str, str] = {
    "twitter:title": "title",
    "twitter:description": "description",
    "twitter:image": "image",
    "twitter:card": "twitter_card",
}


def _first(*candidates: Optional[str]) -> Optional[str]:
    for value in candidates:
        if value:
            return value
    return None


def _attr(el, name: str) -> str:
    value = el.get(name) if el is not None else None
    if isinstance(value, list):  # multi-valued attributes come back as lists
        value = " ".join(value)
    return (value or "").strip()


def _scan_meta(doc: BeautifulSoup, selector: str, key_attr: str, fields: Dict[str, str]) -> Dict[str, str]:
    """Map field -> first non-empty content among recognised meta tags."""
    found: Dict[str, str] = {}
    for el in doc.select(selector):
        field = fields.get(_attr(el, key_attr))
        content = _attr(el, "content")
        if field and content and field not in found:
            found[field] = content
    return found


def _title_text(doc: BeautifulSoup) -> Optional[str]:
    el = doc.find("title")
    return el.get_text().strip() if el is not None else None


def _meta_description(doc: BeautifulSoup) -> Optional[str]:
    for el in doc.select('meta[name="description"]'):
        content = _attr(el, "content")
        if content:
            return content
    return None


def extract_preview(
    doc: BeautifulSoup,
    url: str,
    headers: Optional[Mapping[str, str]] = None,
    favicon: Optional[str] = None,
) -> LinkPreview:
    """Build a LinkPreview for *url* from its parsed page and response headers."""
    headers = headers or {}
    og = _scan_meta(doc, 'meta[property^="og:"]', "property", OG_FIELDS)
    twitter = _scan_meta(doc, 'meta[name^="twitter:"]', "name", TWITTER_FIELDS)

    return LinkPreview(
        url=url,
        content_type=_first(headers.get("content-type")),
        language=_first(_attr(doc.find("html"), "lang")),
        title=_first(og.get("title"), twitter.get("title"), _title_text(doc)),
        description=_first(
            og.get("description"), twitter.get("description"), _meta_description(doc)
        ),
        image=_first(og.get("image"), twitter.get("image")),
        site_name=_first(og.get("site_name")),
        type=_first(og.get("type")),
        url_canonical=_first(og.get("url_canonical")),
        twitter_card=_first(twitter.get("twitter_card")),
        favicon=_first(favicon),
    )
