"""Repository layer for document store operations."""

from app.repositories.post import PostRepository
from app.repositories.tag import TagRepository

__all__ = ["PostRepository", "TagRepository"]
