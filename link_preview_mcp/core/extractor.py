"""
core/extractor.py

HTML parsing and HTML → clean readable text extraction.
"""
from __future__ import annotations

import copy
import re
from typing import Tuple

from bs4 import BeautifulSoup

from .config import DEFAULT_MAX_LENGTH, ContentDigest

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

RE_WHITESPACE = re.compile(r"\s+")

BOILERPLATE_SELECTOR = (
    "script, style, nav, header, footer, iframe, noscript, aside, form, button"
)

# Candidate containers for the main text, highest priority first.
CONTENT_CONTAINERS: Tuple[str, ...] = ("article", "main", "body")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_html(html: str) -> BeautifulSoup:
    return BeautifulSoup(html or "", "lxml")


def normalize_whitespace(text: str) -> str:
    return RE_WHITESPACE.sub(" ", text).strip()


def _container_text(doc: BeautifulSoup, name: str) -> str:
    # Nested matches (article inside article) would repeat their text.
    outermost = [el for el in doc.find_all(name) if el.find_parent(name) is None]
    return normalize_whitespace(" ".join(el.get_text(" ") for el in outermost))


def extract_content(doc: BeautifulSoup, max_length: int = DEFAULT_MAX_LENGTH) -> ContentDigest:
    """
    Extract the readable text of a parsed page.

    Pipeline:
      1. Drop boilerplate elements (scripts, navigation, forms, ...) from a
         copy of *doc*; the caller's document is left untouched
      2. Take the text of the first non-empty container: article, main, body
      3. Collapse whitespace runs to single spaces and trim
      4. Hard cut at *max_length* characters
    """
    max_length = max(0, max_length)
    doc = copy.copy(doc)

    for el in doc.select(BOILERPLATE_SELECTOR):
        if not el.decomposed:  # already gone with a removed ancestor
            el.decompose()

    text = ""
    for name in CONTENT_CONTAINERS:
        text = _container_text(doc, name)
        if text:
            break

    return ContentDigest(text=text[:max_length], max_length=max_length)
