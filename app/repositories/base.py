"""Base repository for document store operations."""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any

from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from app.errors.database import DatabaseError
from app.models.base import DocumentModel, parse_object_id
from app.monitoring import get_logger
from app.utils.helpers import utc_now

logger = get_logger(__name__)

type Query = dict[str, Any]


@contextmanager
def store_errors(action: str) -> Iterator[None]:
    """
    Translate driver failures into `DatabaseError`.

    Args:
        action: What was being attempted, e.g. ``"fetching posts"``.

    Raises:
        DatabaseError: Wrapping any `PyMongoError` raised in the block.
    """
    try:
        yield
    except PyMongoError as e:
        logger.exception(f"Error {action}")
        raise DatabaseError(detail=f"Error {action}", error=str(e)) from e


class BaseRepository[ModelT: DocumentModel]:
    """
    Base repository implementing common CRUD operations over one collection.

    Attributes:
        model: The document model type.
        collection_name: The MongoDB collection holding the documents.
        timestamps: Whether updates stamp `updatedAt`.
    """

    model: type[ModelT]
    collection_name: str
    timestamps: bool = False

    def __init__(self, db: AsyncDatabase) -> None:
        """
        Initialize repository with a database handle.

        Args:
            db: Async database handle
        """
        self.db = db

    @property
    def collection(self) -> AsyncCollection:
        return self.db[self.collection_name]

    def _to_model(self, document: Mapping[str, Any]) -> ModelT:
        return self.model.model_validate(document)

    async def insert(self, record: ModelT) -> ModelT:
        """
        Insert a new document.

        Args:
            record: Model to persist

        Returns:
            ModelT: The stored model
        """
        await self.collection.insert_one(record.to_document())
        return record

    async def get_by_id(self, record_id: str | ObjectId) -> ModelT | None:
        """
        Get a document by its identifier.

        Args:
            record_id: Document identifier; malformed values never match

        Returns:
            ModelT | None: Document if found, None otherwise
        """
        oid = parse_object_id(record_id)
        if oid is None:
            return None
        document = await self.collection.find_one({"_id": oid})
        return self._to_model(document) if document else None

    async def get_by_ids(self, record_ids: list[ObjectId]) -> list[ModelT]:
        """Get every document whose identifier is in ``record_ids``."""
        if not record_ids:
            return []
        return await self.find({"_id": {"$in": record_ids}})

    async def find(self, query: Query) -> list[ModelT]:
        """
        Get every document matching a filter.

        Args:
            query: MongoDB filter document

        Returns:
            list[ModelT]: Matching documents in natural order
        """
        documents = await self.collection.find(query).to_list()
        return [self._to_model(document) for document in documents]

    async def find_one(self, query: Query) -> ModelT | None:
        document = await self.collection.find_one(query)
        return self._to_model(document) if document else None

    async def get_all(self) -> list[ModelT]:
        return await self.find({})

    async def update_fields(
        self,
        record_id: str | ObjectId,
        fields: Mapping[str, Any],
    ) -> ModelT | None:
        """
        Replace the supplied fields of a document.

        Args:
            record_id: Document identifier
            fields: Field values keyed by stored field name

        Returns:
            ModelT | None: Updated document if found, None otherwise
        """
        oid = parse_object_id(record_id)
        if oid is None:
            return None

        changes = dict(fields)
        if self.timestamps:
            changes["updatedAt"] = utc_now()

        document = await self.collection.find_one_and_update(
            {"_id": oid},
            {"$set": changes},
            return_document=ReturnDocument.AFTER,
        )
        return self._to_model(document) if document else None

    async def delete(self, record_id: str | ObjectId) -> ModelT | None:
        """
        Delete a document by identifier.

        Args:
            record_id: Document identifier

        Returns:
            ModelT | None: The removed document, None if not found
        """
        oid = parse_object_id(record_id)
        if oid is None:
            return None
        document = await self.collection.find_one_and_delete({"_id": oid})
        return self._to_model(document) if document else None
