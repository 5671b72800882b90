"""Tests for FastAPI endpoints."""

import pytest
from httpx import AsyncClient

from app.db import MongoStore
from app.main import app
from tests.fakes import FakeDatabase, FakeMongoClient


@pytest.mark.asyncio
async def test_root_endpoint(client: AsyncClient) -> None:
    """Test root endpoint."""
    response = await client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "Welcome to Blog Content API"}


@pytest.mark.asyncio
async def test_health_check_with_database(client: AsyncClient, fake_db: FakeDatabase) -> None:
    """Test health check endpoint with a reachable store."""
    app.state.store = MongoStore(client=FakeMongoClient(fake_db))  # type: ignore[arg-type]
    try:
        response = await client.get("/health")
    finally:
        del app.state.store

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["database"] == "connected"
    assert data["version"] == "1.0.0"
    assert "timestamp" in data


@pytest.mark.asyncio
async def test_health_check_without_database(client: AsyncClient) -> None:
    """Test health check endpoint before the store is connected."""
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "degraded"
    assert response.json()["database"] == "unreachable"


@pytest.mark.asyncio
async def test_request_id_is_echoed(client: AsyncClient) -> None:
    response = await client.get("/", headers={"X-Request-ID": "abc123"})
    assert response.headers["X-Request-ID"] == "abc123"


@pytest.mark.asyncio
async def test_request_id_is_generated(client: AsyncClient) -> None:
    response = await client.get("/")
    assert len(response.headers["X-Request-ID"]) == 32


@pytest.mark.asyncio
async def test_security_headers(client: AsyncClient) -> None:
    response = await client.get("/api/tags")

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"
    assert response.headers["Referrer-Policy"] == "strict-origin-when-cross-origin"


@pytest.mark.asyncio
async def test_unknown_route(client: AsyncClient) -> None:
    response = await client.get("/api/unknown")
    assert response.status_code == 404
