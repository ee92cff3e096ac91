"""Shared test fixtures for ZNS lookup tests."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from zns_lookup.config import get_settings


SAMPLE_ADDRESS = "0x1234567890123456789012345678901234567890"


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Drop cached settings and any ZNS_* overrides from the environment."""
    for key in ("ZNS_API_BASE_URL", "ZNS_REQUEST_TIMEOUT", "ZNS_USER_AGENT", "ZNS_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def sample_address() -> str:
    return SAMPLE_ADDRESS


@pytest.fixture()
def make_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.AsyncClient]:
    """Build an AsyncClient whose requests are answered by ``handler``."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _make
