"""Tag document model."""

from app.models.base import DocumentModel


class TagDB(DocumentModel):
    """A named label referenced by posts."""

    name: str
