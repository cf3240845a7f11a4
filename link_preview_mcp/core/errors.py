"""
core/errors.py

Error taxonomy for tool calls.

Only the tool boundary (server.dispatch) catches these; everything below it
lets them propagate.  Extractors never raise them for missing page fields.
"""
from __future__ import annotations


class LinkPreviewError(Exception):
    """Base class for every error reported back to the MCP client."""


class InputError(LinkPreviewError):
    """A required argument is missing or malformed."""


class FetchError(LinkPreviewError):
    """An outbound request did not produce a response."""


class FetchTimeoutError(FetchError, TimeoutError):
    """The request exceeded its time budget and was cancelled."""


class NetworkError(FetchError):
    """DNS, connection, TLS or protocol failure."""


class UnknownToolError(LinkPreviewError):
    """The dispatcher received a tool name it does not serve."""


class ContentTooLargeError(FetchError):
    """The response body is larger than the fetcher's size cap."""
