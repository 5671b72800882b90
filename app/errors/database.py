from starlette.status import HTTP_404_NOT_FOUND, HTTP_500_INTERNAL_SERVER_ERROR

from app.errors.base import BaseAppError, create_exception_handler
from app.monitoring import get_logger

logger = get_logger(__name__)


class DatabaseError(BaseAppError):
    """Base exception for document store errors."""

    def __init__(
        self,
        detail: str = "Database Error",
        status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
        error: str | None = None,
    ) -> None:
        super().__init__(detail, status_code, error)


class DatabaseConnectionError(DatabaseError):
    """Exception raised when the document store cannot be reached."""

    def __init__(
        self,
        detail: str = "Failed to connect to the database",
        error: str | None = None,
    ) -> None:
        super().__init__(detail, HTTP_500_INTERNAL_SERVER_ERROR, error)


class RecordNotFoundError(DatabaseError):
    """Exception raised when a record is not found."""

    def __init__(self, detail: str = "Record not found") -> None:
        super().__init__(detail, HTTP_404_NOT_FOUND)


database_exception_handler = create_exception_handler(logger)
