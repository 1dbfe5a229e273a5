# -*- coding: utf-8 -*-

"""
Shared fixtures for Discogs Service tests.
"""

from typing import List

import httpx
import pytest

from discogs_service.models import Product


@pytest.fixture
def consumer_key() -> str:
    """A valid 20-letter consumer key."""
    return "aAbBcCdDeEfFgGhHiIjJ"


@pytest.fixture
def consumer_secret() -> str:
    """A valid 32-letter consumer secret."""
    return "aAbBcCdDeEfFgGhHiIjJkKlLmMnNoOpP"


@pytest.fixture
def user_token() -> str:
    """A valid 40-letter user token."""
    return "aAbBcCdDeEfFgGhHiIjJkKlLmMnNoOpPqQrRsStT"


@pytest.fixture
def product() -> Product:
    """A valid product identity."""
    return Product(name="SomeApp", version="0.0.1", url="http://www.some.app")


@pytest.fixture
def captured_requests() -> List[httpx.Request]:
    """Requests received by mock_transport, in order."""
    return []


@pytest.fixture
def mock_transport(captured_requests) -> httpx.MockTransport:
    """httpx transport that records requests and answers 200 with an empty JSON object."""

    def handler(request: httpx.Request) -> httpx.Response:
        captured_requests.append(request)
        return httpx.Response(200, json={})

    return httpx.MockTransport(handler)
