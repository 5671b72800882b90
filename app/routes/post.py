# app/routes/post.py

"""
Post Routes.

Provides CRUD endpoints and the filtered listing for blog posts.

Summary
-------
Endpoints include:
  - List posts (keyword, tag, sort, page, limit)
  - Get post by id
  - Create post (multipart, with image upload)
  - Update post
  - Delete post

Dependencies
------------
  - `PostRepoDep`: Post repository bound to the application database.
  - `ImageDep`: The validated, in-memory image upload.
"""

from typing import Annotated

from fastapi import APIRouter, Body, Form, Request
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_201_CREATED

from app.configs import POST_NOT_FOUND
from app.dependencies import ImageDep, PostRepoDep
from app.errors import MissingImageError, RecordNotFoundError
from app.monitoring import get_logger
from app.schemas import ErrorResponse, MessageResponse, PostDetailResponse, PostResponse, PostUpdate
from app.schemas.post import parse_tag_names
from app.services import build_post_query

router = APIRouter(prefix="/api/posts", tags=["📝 Posts"])

logger = get_logger(__name__)

ERROR_EXAMPLE = {"message": "Error fetching posts", "error": "connection refused"}
NOT_FOUND_RESPONSE = {
    "model": ErrorResponse,
    "description": "Not found",
    "content": {"application/json": {"example": {"message": POST_NOT_FOUND, "error": POST_NOT_FOUND}}},
}
SERVER_ERROR_RESPONSE = {
    "model": ErrorResponse,
    "description": "Store failure",
    "content": {"application/json": {"example": ERROR_EXAMPLE}},
}
POST_EXAMPLE = {
    "id": "66f0c0ffee0000000000abcd",
    "title": "Hello world",
    "desc": "First post",
    "image": "data:image/png;base64,iVBORw0KGgo...",
    "tags": [{"id": "66f0c0ffee0000000000beef", "name": "Technology"}],
    "createdAt": "2025-01-01T00:00:00Z",
    "updatedAt": "2025-01-01T00:00:00Z",
}


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[PostDetailResponse],
    summary="List posts",
    description=(
        "List posts filtered by `keyword` (title or description) and `tag` (name), "
        "sorted by `sort` (prefix `-` for descending) and paginated by `page`/`limit`."
    ),
    responses={
        200: {"content": {"application/json": {"example": [POST_EXAMPLE]}}},
        400: {
            "description": "Unsupported query parameter",
            "content": {
                "application/json": {
                    "example": {
                        "message": "Invalid parameters: author",
                        "error": "Invalid parameters provided.",
                    },
                },
            },
        },
        500: SERVER_ERROR_RESPONSE,
    },
    operation_id="posts_list",
)
async def list_posts(request: Request, repo: PostRepoDep) -> list[PostDetailResponse]:
    """
    List posts matching the query parameters.

    Parameters
    ----------
    request : Request
        Current request; its query parameters are validated as a whole.
    repo : PostRepository
        Repository dependency.

    Returns
    -------
    list[PostDetailResponse]
        One page of posts with their tags expanded.

    Raises
    ------
    InvalidParametersError
        If a query parameter other than keyword, tag, sort, page or limit is sent.
    """
    query = await build_post_query(request.query_params, posts=repo, tags=repo.tags)
    posts = await repo.list_posts(query)
    return [PostDetailResponse.from_db(post) for post in posts]


@router.get(
    "/{post_id}",
    response_class=ORJSONResponse,
    response_model=PostDetailResponse,
    summary="Get post by ID",
    responses={
        200: {"content": {"application/json": {"example": POST_EXAMPLE}}},
        404: NOT_FOUND_RESPONSE,
        500: SERVER_ERROR_RESPONSE,
    },
    operation_id="posts_get_by_id",
)
async def get_post(post_id: str, repo: PostRepoDep) -> PostDetailResponse:
    """Retrieve a post with its tags expanded."""
    post = await repo.get_post(post_id)
    if post is None:
        raise RecordNotFoundError(POST_NOT_FOUND)
    return PostDetailResponse.from_db(post)


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=PostResponse,
    status_code=HTTP_201_CREATED,
    summary="Create a new post",
    description=(
        "Create a post from a multipart form. `tags` holds tag names, either as a "
        "repeated field or a JSON-encoded array; unknown names are ignored."
    ),
    responses={
        400: {
            "description": "Missing image or invalid fields",
            "content": {
                "application/json": {
                    "example": {
                        "message": "Image file is required.",
                        "error": "Image file is required.",
                    },
                },
            },
        },
        500: SERVER_ERROR_RESPONSE,
    },
    operation_id="posts_create",
)
async def create_post(
    repo: PostRepoDep,
    image: ImageDep,
    title: Annotated[str, Form(min_length=1, description="Post title")],
    desc: Annotated[str, Form(min_length=1, description="Post description")],
    tags: Annotated[
        list[str] | None,
        Form(description="Tag names, repeated or as a JSON-encoded array"),
    ] = None,
) -> PostResponse:
    """
    Create a new post.

    Parameters
    ----------
    repo : PostRepository
        Repository dependency.
    image : UploadedImage | None
        Validated upload; required.
    title : str
        Post title.
    desc : str
        Post description.
    tags : list[str] | None
        Tag names.

    Returns
    -------
    PostResponse
        The stored post, with tag identifiers.

    Raises
    ------
    MissingImageError
        If no image was attached.
    """
    if image is None:
        raise MissingImageError()

    post = await repo.create(
        title=title,
        desc=desc,
        image=image.to_data_uri(),
        tag_names=parse_tag_names(tags),
    )
    logger.info("Post created", post_id=str(post.id), tags=len(post.tags), image_bytes=image.size)
    return PostResponse.from_db(post)


@router.put(
    "/{post_id}",
    response_class=ORJSONResponse,
    response_model=PostResponse,
    summary="Update a post",
    description="Replace the supplied fields. `tags` takes tag identifiers.",
    responses={404: NOT_FOUND_RESPONSE, 500: SERVER_ERROR_RESPONSE},
    operation_id="posts_update",
)
async def update_post(
    post_id: str,
    repo: PostRepoDep,
    update: Annotated[
        PostUpdate,
        Body(
            examples=[{"title": "Updated title", "tags": ["66f0c0ffee0000000000beef"]}],
        ),
    ],
) -> PostResponse:
    """Update a post by ID."""
    post = await repo.update_post(post_id, update)
    if post is None:
        raise RecordNotFoundError(POST_NOT_FOUND)
    return PostResponse.from_db(post)


@router.delete(
    "/{post_id}",
    response_class=ORJSONResponse,
    response_model=MessageResponse,
    summary="Delete a post",
    responses={
        200: {"content": {"application/json": {"example": {"message": "Post deleted successfully"}}}},
        404: NOT_FOUND_RESPONSE,
        500: SERVER_ERROR_RESPONSE,
    },
    operation_id="posts_delete",
)
async def delete_post(post_id: str, repo: PostRepoDep) -> MessageResponse:
    """Delete a post by ID."""
    post = await repo.delete_post(post_id)
    if post is None:
        raise RecordNotFoundError(POST_NOT_FOUND)
    logger.info("Post deleted", post_id=post_id)
    return MessageResponse(message="Post deleted successfully")
