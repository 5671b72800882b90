# app/dependencies/__init__.py

from app.dependencies.dependencies import (
    DatabaseDep,
    ImageDep,
    MediaDep,
    PostRepoDep,
    TagRepoDep,
    get_media_service,
    get_post_repository,
    get_tag_repository,
    image_upload,
)

__all__ = [
    "DatabaseDep",
    "ImageDep",
    "MediaDep",
    "PostRepoDep",
    "TagRepoDep",
    "get_media_service",
    "get_post_repository",
    "get_tag_repository",
    "image_upload",
]
