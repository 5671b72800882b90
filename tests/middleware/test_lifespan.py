# tests/middleware/test_lifespan.py
"""Tests for the lifespan handler in app/middleware/middleware.py."""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi import FastAPI

from app.db import MongoStore
from app.errors import DatabaseConnectionError
from app.middleware import lifespan
from tests.fakes import FakeMongoClient


@pytest.mark.asyncio
async def test_unreachable_database_exits_process() -> None:
    """Test startup aborts with exit code 1 when MongoDB cannot be reached."""
    app = FastAPI()
    failing_init = AsyncMock(side_effect=DatabaseConnectionError(error="no servers"))

    with (
        patch("app.middleware.middleware.configure_logging"),
        patch("app.middleware.middleware.init_db", failing_init),
        pytest.raises(SystemExit) as exc_info,
    ):
        async with lifespan(app):
            pytest.fail("application started without a database")

    assert exc_info.value.code == 1
    assert not hasattr(app.state, "store")
    failing_init.assert_awaited_once()


@pytest.mark.asyncio
async def test_store_is_opened_and_closed() -> None:
    """Test a successful start exposes the store and closes it on shutdown."""
    app = FastAPI()
    client = FakeMongoClient()
    store = MongoStore(client=client)  # type: ignore[arg-type]

    with (
        patch("app.middleware.middleware.configure_logging"),
        patch("app.middleware.middleware.init_db", AsyncMock(return_value=store)),
    ):
        async with lifespan(app):
            assert app.state.store is store
            assert client.closed is False

    assert client.closed is True
