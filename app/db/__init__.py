"""Document store access."""

from app.db.database import MongoStore, close_db, get_database, init_db

__all__ = ["MongoStore", "close_db", "get_database", "init_db"]
