# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os

# Must happen before the app is imported anywhere
os.environ["ENVIRONMENT"] = "test"
os.environ["RATE_LIMIT_ENABLED"] = "false"

from collections.abc import AsyncGenerator
from io import BytesIO

import pytest
from httpx import ASGITransport, AsyncClient
from PIL import Image

from app.db import get_database
from app.main import app
from app.managers.rate_limiter import limiter
from app.repositories import PostRepository, TagRepository
from tests.fakes import FakeDatabase


@pytest.fixture
def fake_db() -> FakeDatabase:
    """Empty in-memory database."""
    return FakeDatabase()


@pytest.fixture
def tag_repo(fake_db: FakeDatabase) -> TagRepository:
    return TagRepository(fake_db)  # type: ignore[arg-type]


@pytest.fixture
def post_repo(fake_db: FakeDatabase, tag_repo: TagRepository) -> PostRepository:
    return PostRepository(fake_db, tags=tag_repo)  # type: ignore[arg-type]


@pytest.fixture
async def client(fake_db: FakeDatabase) -> AsyncGenerator[AsyncClient]:
    """Async HTTP client bound to the app with the in-memory database."""
    app.dependency_overrides[get_database] = lambda: fake_db
    limiter.enabled = False
    async with AsyncClient(
        base_url="http://test",
        transport=ASGITransport(app=app),
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def valid_jpeg_bytes() -> bytes:
    """Create valid JPEG image bytes."""
    img = Image.new("RGB", (64, 64), color="red")
    buffer = BytesIO()
    img.save(buffer, format="JPEG")
    return buffer.getvalue()


@pytest.fixture
def valid_png_bytes() -> bytes:
    """Create valid PNG image bytes."""
    img = Image.new("RGBA", (64, 64), color="blue")
    buffer = BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()
