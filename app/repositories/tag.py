"""Tag repository for document store operations."""

from app.configs import TAGS_COLLECTION
from app.models import TagDB
from app.repositories.base import BaseRepository, Query, store_errors


class TagRepository(BaseRepository[TagDB]):
    """Repository for the `tags` collection."""

    model = TagDB
    collection_name = TAGS_COLLECTION

    async def create(self, name: str) -> TagDB:
        """Persist a new tag. Duplicate names are allowed."""
        with store_errors("creating tag"):
            return await self.insert(TagDB(name=name))

    async def get_tag(self, tag_id: str) -> TagDB | None:
        with store_errors("fetching tag"):
            return await self.get_by_id(tag_id)

    async def get_tags(self) -> list[TagDB]:
        with store_errors("fetching tags"):
            return await self.get_all()

    async def get_by_name(self, name: str) -> TagDB | None:
        """Exact, case-sensitive name lookup."""
        with store_errors("fetching tag"):
            return await self.find_one({"name": name})

    async def find_by_names(self, names: list[str]) -> list[TagDB]:
        """Get the tags whose name is in ``names``; unknown names are ignored."""
        if not names:
            return []
        with store_errors("fetching tags"):
            return await self.find({"name": {"$in": names}})

    async def find_by_condition(self, condition: Query) -> list[TagDB]:
        with store_errors("fetching tags by condition"):
            return await self.find(condition)

    async def update_name(self, tag_id: str, name: str) -> TagDB | None:
        with store_errors("updating tag"):
            return await self.update_fields(tag_id, {"name": name})

    async def delete_tag(self, tag_id: str) -> TagDB | None:
        with store_errors("deleting tag"):
            return await self.delete(tag_id)
