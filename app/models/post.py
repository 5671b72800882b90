"""
Post document models.

A stored post references its tags by identifier only. `PostWithTags`
is the expanded form assembled by the repository after fetching the
referenced tags.
"""

from datetime import datetime

from pydantic import Field

from app.models.base import DocumentModel, PyObjectId
from app.models.tag import TagDB
from app.utils.helpers import utc_now


class PostDB(DocumentModel):
    """A blog post as stored in the `posts` collection."""

    title: str
    desc: str
    image: str
    tags: list[PyObjectId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utc_now, alias="createdAt")
    updated_at: datetime = Field(default_factory=utc_now, alias="updatedAt")


class PostWithTags(PostDB):
    """A post whose tag identifiers have been replaced by the tag documents."""

    tags: list[TagDB] = Field(default_factory=list)  # type: ignore[assignment]
