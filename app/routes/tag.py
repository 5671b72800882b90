# app/routes/tag.py

"""
Tag Routes.

Provides CRUD endpoints for tags plus a lookup by condition.

Summary
-------
Endpoints include:
  - List tags
  - Get tag by id
  - Find tags by condition
  - Create tag
  - Update tag
  - Delete tag
"""

from typing import Annotated

from fastapi import APIRouter, Body
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_201_CREATED

from app.configs import TAG_NOT_FOUND
from app.dependencies import TagRepoDep
from app.errors import RecordNotFoundError
from app.monitoring import get_logger
from app.schemas import (
    ErrorResponse,
    MessageResponse,
    TagConditionRequest,
    TagCreate,
    TagResponse,
    TagUpdate,
)

router = APIRouter(prefix="/api/tags", tags=["🏷️ Tags"])

logger = get_logger(__name__)

TAG_EXAMPLE = {"id": "66f0c0ffee0000000000beef", "name": "Technology"}
NOT_FOUND_RESPONSE = {
    "model": ErrorResponse,
    "description": "Not found",
    "content": {"application/json": {"example": {"message": TAG_NOT_FOUND, "error": TAG_NOT_FOUND}}},
}
SERVER_ERROR_RESPONSE = {
    "model": ErrorResponse,
    "description": "Store failure",
    "content": {
        "application/json": {
            "example": {"message": "Error fetching tags", "error": "connection refused"},
        },
    },
}


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[TagResponse],
    summary="List tags",
    responses={
        200: {"content": {"application/json": {"example": [TAG_EXAMPLE]}}},
        500: SERVER_ERROR_RESPONSE,
    },
    operation_id="tags_list",
)
async def list_tags(repo: TagRepoDep) -> list[TagResponse]:
    """Return every tag."""
    return [TagResponse.from_db(tag) for tag in await repo.get_tags()]


@router.get(
    "/{tag_id}",
    response_class=ORJSONResponse,
    response_model=TagResponse,
    summary="Get tag by ID",
    responses={
        200: {"content": {"application/json": {"example": TAG_EXAMPLE}}},
        404: NOT_FOUND_RESPONSE,
        500: SERVER_ERROR_RESPONSE,
    },
    operation_id="tags_get_by_id",
)
async def get_tag(tag_id: str, repo: TagRepoDep) -> TagResponse:
    """Retrieve a tag by ID."""
    tag = await repo.get_tag(tag_id)
    if tag is None:
        raise RecordNotFoundError(TAG_NOT_FOUND)
    return TagResponse.from_db(tag)


@router.post(
    "/condition",
    response_class=ORJSONResponse,
    response_model=list[TagResponse],
    summary="Find tags by condition",
    description="`name` matches one name exactly, or any of a list of names.",
    responses={
        200: {"content": {"application/json": {"example": [TAG_EXAMPLE]}}},
        500: SERVER_ERROR_RESPONSE,
    },
    operation_id="tags_by_condition",
)
async def get_tags_by_condition(
    body: Annotated[
        TagConditionRequest,
        Body(examples=[{"condition": {"name": ["Technology", "Science"]}}]),
    ],
    repo: TagRepoDep,
) -> list[TagResponse]:
    """
    Find tags matching a condition.

    Parameters
    ----------
    body : TagConditionRequest
        The `condition` filter. An empty condition matches every tag.
    repo : TagRepository
        Repository dependency.

    Returns
    -------
    list[TagResponse]
        Matching tags.
    """
    tags = await repo.find_by_condition(body.condition.to_query())
    return [TagResponse.from_db(tag) for tag in tags]


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=TagResponse,
    status_code=HTTP_201_CREATED,
    summary="Create a new tag",
    responses={
        201: {"content": {"application/json": {"example": TAG_EXAMPLE}}},
        500: SERVER_ERROR_RESPONSE,
    },
    operation_id="tags_create",
)
async def create_tag(
    tag: Annotated[TagCreate, Body(examples=[{"name": "Technology"}])],
    repo: TagRepoDep,
) -> TagResponse:
    """Create a tag. Names are not required to be unique."""
    created = await repo.create(tag.name)
    logger.info("Tag created", tag_id=str(created.id), name=created.name)
    return TagResponse.from_db(created)


@router.put(
    "/{tag_id}",
    response_class=ORJSONResponse,
    response_model=TagResponse,
    summary="Update a tag",
    responses={404: NOT_FOUND_RESPONSE, 500: SERVER_ERROR_RESPONSE},
    operation_id="tags_update",
)
async def update_tag(
    tag_id: str,
    tag: Annotated[TagUpdate, Body(examples=[{"name": "Science"}])],
    repo: TagRepoDep,
) -> TagResponse:
    """Rename a tag."""
    updated = await repo.update_name(tag_id, tag.name)
    if updated is None:
        raise RecordNotFoundError(TAG_NOT_FOUND)
    return TagResponse.from_db(updated)


@router.delete(
    "/{tag_id}",
    response_class=ORJSONResponse,
    response_model=MessageResponse,
    summary="Delete a tag",
    description="Posts keep their reference to the deleted tag; reads skip it.",
    responses={
        200: {"content": {"application/json": {"example": {"message": "Tag deleted successfully"}}}},
        404: NOT_FOUND_RESPONSE,
        500: SERVER_ERROR_RESPONSE,
    },
    operation_id="tags_delete",
)
async def delete_tag(tag_id: str, repo: TagRepoDep) -> MessageResponse:
    """Delete a tag by ID."""
    if await repo.delete_tag(tag_id) is None:
        raise RecordNotFoundError(TAG_NOT_FOUND)
    logger.info("Tag deleted", tag_id=tag_id)
    return MessageResponse(message="Tag deleted successfully")
