# app/dependencies/dependencies.py

"""Application dependencies: repositories and the image upload."""

from typing import Annotated

from fastapi import Depends, File, UploadFile
from pymongo.asynchronous.database import AsyncDatabase

from app.configs import IMAGE_FIELD_NAME
from app.db import get_database
from app.repositories import PostRepository, TagRepository
from app.services import MediaService, UploadedImage

DatabaseDep = Annotated[AsyncDatabase, Depends(get_database)]


def get_tag_repository(db: DatabaseDep) -> TagRepository:
    """Resolve the `TagRepository` bound to the application database."""
    return TagRepository(db)


TagRepoDep = Annotated[TagRepository, Depends(get_tag_repository)]


def get_post_repository(db: DatabaseDep, tags: TagRepoDep) -> PostRepository:
    """Resolve the `PostRepository`, sharing the request's tag repository."""
    return PostRepository(db, tags=tags)


PostRepoDep = Annotated[PostRepository, Depends(get_post_repository)]


def get_media_service() -> MediaService:
    return MediaService()


MediaDep = Annotated[MediaService, Depends(get_media_service)]


async def image_upload(
    media: MediaDep,
    image: Annotated[
        UploadFile | None,
        File(alias=IMAGE_FIELD_NAME, description="Image file (max 5MB, image/*)"),
    ] = None,
) -> UploadedImage | None:
    """
    Buffer the optional image upload before the handler runs.

    Returns:
        UploadedImage | None: The validated image, or None when no file was sent.

    Raises:
        UnsupportedImageTypeError: If the file is not an image.
        ImageTooLargeError: If the file exceeds the size limit.
    """
    if image is None:
        return None
    try:
        return await media.read_image(image)
    finally:
        await image.close()


ImageDep = Annotated[UploadedImage | None, Depends(image_upload)]
