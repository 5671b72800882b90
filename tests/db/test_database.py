"""Tests for app/db/database.py module."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from pymongo import ASCENDING
from pymongo.errors import PyMongoError, ServerSelectionTimeoutError

from app.db import MongoStore, close_db, get_database
from app.errors import DatabaseConnectionError
from tests.fakes import FakeDatabase, FakeMongoClient


@pytest.fixture
def store(fake_db: FakeDatabase) -> MongoStore:
    return MongoStore(client=FakeMongoClient(fake_db))  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_connect_creates_indexes(store: MongoStore, fake_db: FakeDatabase) -> None:
    await store.connect()

    assert fake_db["tags"].indexes == [[("name", ASCENDING)]]
    assert fake_db["posts"].indexes == [[("createdAt", ASCENDING)], [("tags", ASCENDING)]]


@pytest.mark.asyncio
async def test_connect_failure(store: MongoStore, fake_db: FakeDatabase) -> None:
    fake_db.command = AsyncMock(side_effect=ServerSelectionTimeoutError("no servers"))  # type: ignore[method-assign]

    with pytest.raises(DatabaseConnectionError) as exc_info:
        await store.connect()

    assert exc_info.value.error == "no servers"


@pytest.mark.asyncio
async def test_ping(store: MongoStore, fake_db: FakeDatabase) -> None:
    assert await store.ping() is True

    fake_db.command = AsyncMock(side_effect=PyMongoError("down"))  # type: ignore[method-assign]
    assert await store.ping() is False


@pytest.mark.asyncio
async def test_close_db(store: MongoStore) -> None:
    await close_db(store)
    assert store.client.closed is True  # type: ignore[attr-defined]

    await close_db(None)


def test_get_database(store: MongoStore) -> None:
    request = MagicMock()
    request.app.state.store = store
    assert get_database(request) is store.db
