"""Document models for the application."""

from app.models.base import DocumentModel, PyObjectId, parse_object_id, to_object_id
from app.models.post import PostDB, PostWithTags
from app.models.tag import TagDB

__all__ = [
    "DocumentModel",
    "PostDB",
    "PostWithTags",
    "PyObjectId",
    "TagDB",
    "parse_object_id",
    "to_object_id",
]
