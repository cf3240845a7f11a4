"""
tools/common.py

Argument parsing shared by the tool handlers.  Every helper raises
InputError so the dispatcher reports bad arguments like any other failure.
"""
from __future__ import annotations

import urllib.parse
from typing import Any

from ..core.errors import InputError


def require_str(arguments: dict[str, Any], name: str) -> str:
    value = arguments.get(name)
    value = "" if value is None else str(value).strip()
    if not value:
        raise InputError(f"{name} is required")
    return value


def require_url(arguments: dict[str, Any], name: str = "url") -> str:
    url = require_str(arguments, name)
    try:
        parsed = urllib.parse.urlsplit(url)
        parsed.port  # raises ValueError on a malformed port
    except ValueError as exc:
        raise InputError(f"Invalid URL {url!r}: {exc}") from exc
    if parsed.scheme not in ("http", "https") or not parsed.hostname:
        raise InputError(f"Invalid URL {url!r}: expected an absolute http(s) URL")
    return url


def int_argument(arguments: dict[str, Any], name: str, default: int) -> int:
    """Read an optional numeric argument; floats are truncated."""
    value = arguments.get(name)
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        raise InputError(f"{name} must be a number")
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError) as exc:
        raise InputError(f"{name} must be a number, got {value!r}") from exc
