# tests/routes/test_tags.py
"""Tests for the tag endpoints."""

from unittest.mock import MagicMock

import pytest
from bson import ObjectId
from httpx import AsyncClient
from pymongo.errors import PyMongoError

from tests.fakes import FakeDatabase


async def _create_tag(client: AsyncClient, name: str) -> dict:
    response = await client.post("/api/tags", json={"name": name})
    assert response.status_code == 201
    return response.json()


@pytest.mark.asyncio
async def test_create_tag(client: AsyncClient) -> None:
    response = await client.post("/api/tags", json={"name": "  Technology "})

    assert response.status_code == 201
    body = response.json()
    assert body["name"] == "Technology"
    assert ObjectId.is_valid(body["id"])
    assert "_id" not in body


@pytest.mark.asyncio
async def test_create_tag_allows_duplicates(client: AsyncClient) -> None:
    first = await _create_tag(client, "Python")
    second = await _create_tag(client, "Python")

    assert first["id"] != second["id"]


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [{}, {"name": ""}, {"name": "   "}, {"name": 42}])
async def test_create_tag_invalid(client: AsyncClient, payload: dict) -> None:
    response = await client.post("/api/tags", json=payload)

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid request"


@pytest.mark.asyncio
async def test_list_tags(client: AsyncClient) -> None:
    assert (await client.get("/api/tags")).json() == []

    tech = await _create_tag(client, "Technology")
    art = await _create_tag(client, "Art")

    response = await client.get("/api/tags")

    assert response.status_code == 200
    assert response.json() == [tech, art]


@pytest.mark.asyncio
async def test_get_tag(client: AsyncClient) -> None:
    tech = await _create_tag(client, "Technology")

    response = await client.get(f"/api/tags/{tech['id']}")

    assert response.status_code == 200
    assert response.json() == tech


@pytest.mark.asyncio
@pytest.mark.parametrize("tag_id", [str(ObjectId()), "not-an-id"])
async def test_get_tag_not_found(client: AsyncClient, tag_id: str) -> None:
    response = await client.get(f"/api/tags/{tag_id}")

    assert response.status_code == 404
    assert response.json() == {"message": "Tag not found", "error": "Tag not found"}


@pytest.mark.asyncio
async def test_tags_by_condition(client: AsyncClient) -> None:
    tech = await _create_tag(client, "Technology")
    art = await _create_tag(client, "Art")
    await _create_tag(client, "Music")

    single = await client.post("/api/tags/condition", json={"condition": {"name": "Art"}})
    several = await client.post(
        "/api/tags/condition",
        json={"condition": {"name": ["Technology", "Art", "Unknown"]}},
    )
    everything = await client.post("/api/tags/condition", json={"condition": {}})

    assert single.status_code == 200
    assert single.json() == [art]
    assert several.json() == [tech, art]
    assert len(everything.json()) == 3


@pytest.mark.asyncio
async def test_tags_by_condition_rejects_unknown_fields(client: AsyncClient) -> None:
    response = await client.post("/api/tags/condition", json={"condition": {"color": "red"}})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_update_tag(client: AsyncClient) -> None:
    tag = await _create_tag(client, "Tech")

    response = await client.put(f"/api/tags/{tag['id']}", json={"name": "Technology"})

    assert response.status_code == 200
    assert response.json() == {"id": tag["id"], "name": "Technology"}


@pytest.mark.asyncio
async def test_update_tag_not_found(client: AsyncClient) -> None:
    response = await client.put(f"/api/tags/{ObjectId()}", json={"name": "Technology"})

    assert response.status_code == 404
    assert response.json()["message"] == "Tag not found"


@pytest.mark.asyncio
async def test_delete_tag(client: AsyncClient) -> None:
    tag = await _create_tag(client, "Temporary")

    response = await client.delete(f"/api/tags/{tag['id']}")

    assert response.status_code == 200
    assert response.json() == {"message": "Tag deleted successfully"}
    assert (await client.get(f"/api/tags/{tag['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_delete_nonexistent_tag(client: AsyncClient) -> None:
    response = await client.delete(f"/api/tags/{ObjectId()}")

    assert response.status_code == 404
    assert response.json()["message"] == "Tag not found"


@pytest.mark.asyncio
async def test_store_failure(client: AsyncClient, fake_db: FakeDatabase) -> None:
    fake_db["tags"].find = MagicMock(side_effect=PyMongoError("connection refused"))

    response = await client.get("/api/tags")

    assert response.status_code == 500
    assert response.json() == {"message": "Error fetching tags", "error": "connection refused"}
