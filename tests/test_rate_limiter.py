"""Tests for app/managers/rate_limiter.py module."""

from unittest.mock import MagicMock

import pytest
from orjson import loads

from app.managers.rate_limiter import get_identifier, rate_limit_exceeded_handler


def _request(headers: dict[str, str], client_host: str = "10.0.0.5") -> MagicMock:
    request = MagicMock()
    request.headers = headers
    request.client.host = client_host
    request.url.path = "/api/posts"
    return request


def test_identifier_uses_peer_address() -> None:
    assert get_identifier(_request({})) == "ip:10.0.0.5"


def test_identifier_prefers_forwarded_for() -> None:
    request = _request({"X-Forwarded-For": "203.0.113.7, 10.0.0.1"})
    assert get_identifier(request) == "ip:203.0.113.7"


@pytest.mark.asyncio
async def test_rate_limit_exceeded_handler() -> None:
    exc = MagicMock()
    exc.detail = "120 per 1 minute"

    response = await rate_limit_exceeded_handler(_request({}), exc)

    assert response.status_code == 429
    assert loads(response.body) == {"message": "Rate limit exceeded", "error": "120 per 1 minute"}
