"""Shared pytest fixtures and configuration for the fakestore-cli test suite.

Guidelines
----------
* No internet access in any test.
* httpx is exercised through ``httpx.MockTransport`` only.
* Core tests must be pure — the executor is a ``MagicMock``.
"""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from fakestore_cli.config import ClientConfig
from fakestore_cli.infra.http_executor import HttpRequestExecutor

BASE_URL = "https://api.test"

Handler = Callable[[httpx.Request], httpx.Response]


def sample_product(**overrides: object) -> dict[str, object]:
    """A product shaped like the FakeStore API returns it."""
    product: dict[str, object] = {
        "id": 1,
        "title": "Backpack",
        "price": 109.95,
        "description": "Fits 15 inch laptops",
        "category": "men's clothing",
        "image": "https://img.test/1.jpg",
        "rating": {"rate": 3.9, "count": 120},
    }
    product.update(overrides)
    return product


@pytest.fixture
def make_executor() -> Callable[[Handler], HttpRequestExecutor]:
    """Factory building an executor whose requests are answered by *handler*."""

    def _make(handler: Handler) -> HttpRequestExecutor:
        client = httpx.Client(transport=httpx.MockTransport(handler))
        return HttpRequestExecutor(ClientConfig(base_url=BASE_URL), client=client)

    return _make
