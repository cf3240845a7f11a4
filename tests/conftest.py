"""Shared helpers: httpx clients backed by MockTransport, no real network."""
from typing import Callable

import httpx
import pytest


@pytest.fixture
def make_client() -> Callable[..., httpx.AsyncClient]:
    def _make(handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return _make
