"""Document store client and lifecycle management."""


from fastapi import Request
from pymongo import ASCENDING, AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from app.configs import POSTS_COLLECTION, TAGS_COLLECTION, settings
from app.errors.database import DatabaseConnectionError
from app.monitoring import get_logger

logger = get_logger(__name__)


class MongoStore:
    """
    Owns the MongoDB client for the lifetime of the application.

    The store is constructed once by the lifespan handler, kept on
    `app.state.store` and handed to repositories through dependencies.
    """

    def __init__(
        self,
        uri: str = settings.MONGODB_URI,
        default_db: str = settings.MONGODB_DEFAULT_DB,
        client: AsyncMongoClient | None = None,
    ) -> None:
        self.uri = uri
        self.client: AsyncMongoClient = client or AsyncMongoClient(
            uri,
            tz_aware=True,
            serverSelectionTimeoutMS=settings.MONGODB_SERVER_SELECTION_TIMEOUT_MS,
        )
        self.db: AsyncDatabase = self.client.get_default_database(default_db)

    async def ping(self) -> bool:
        """Return True when the server answers a `ping` command."""
        try:
            await self.db.command("ping")
        except PyMongoError:
            logger.warning("MongoDB ping failed", exc_info=True)
            return False
        return True

    async def connect(self) -> None:
        """
        Verify connectivity and create the indexes used by queries.

        Raises:
            DatabaseConnectionError: If the server cannot be reached.
        """
        try:
            await self.db.command("ping")
            await self.db[TAGS_COLLECTION].create_index([("name", ASCENDING)])
            await self.db[POSTS_COLLECTION].create_index([("createdAt", ASCENDING)])
            await self.db[POSTS_COLLECTION].create_index([("tags", ASCENDING)])
        except PyMongoError as e:
            raise DatabaseConnectionError(error=str(e)) from e
        logger.info("MongoDB connected successfully", database=self.db.name)

    async def close(self) -> None:
        await self.client.close()
        logger.info("MongoDB connection closed")


async def init_db() -> MongoStore:
    """
    Build the store and verify the connection.

    Returns:
        MongoStore: A connected store.

    Raises:
        DatabaseConnectionError: If MongoDB is unreachable.
    """
    store = MongoStore()
    try:
        await store.connect()
    except DatabaseConnectionError:
        await store.close()
        raise
    return store


async def close_db(store: MongoStore | None) -> None:
    if store is not None:
        await store.close()


def get_database(request: Request) -> AsyncDatabase:
    """
    Dependency returning the database handle bound to the running app.

    Tests override this dependency with an in-memory database.
    """
    store: MongoStore = request.app.state.store
    return store.db
