from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import Request
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR
from structlog.stdlib import BoundLogger

from app.configs.settings import DEFAULT_ERROR_MESSAGE
from app.utils.helpers import host


class BaseAppError(Exception):
    """Base exception class for application errors."""

    def __init__(
        self,
        detail: str = "Internal Server Error",
        status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
        error: Any = None,
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code
        self.error = error

    def __str__(self) -> str:
        return self.detail

    def to_content(self) -> dict[str, Any]:
        """Render the `{message, error}` response body."""
        return {"message": self.detail, "error": self.error if self.error is not None else self.detail}


def create_exception_handler(
    logger: BoundLogger,
) -> Callable[[Request, Exception], Awaitable[ORJSONResponse]]:
    """
    Create a standardized exception handler for the application.

    Args:
        logger: Logger instance to use for logging exceptions.

    Returns:
        A callable exception handler.
    """

    async def handler(request: Request, exc: Exception) -> ORJSONResponse:
        if isinstance(exc, BaseAppError):
            status_code = exc.status_code
            content = exc.to_content()
        else:
            status_code = HTTP_500_INTERNAL_SERVER_ERROR
            content = {"message": DEFAULT_ERROR_MESSAGE, "error": str(exc)}

        log = logger.error if status_code >= HTTP_500_INTERNAL_SERVER_ERROR else logger.warning
        log(
            content["message"],
            status_code=status_code,
            ip=host(request),
            endpoint=request.url.path,
        )

        return ORJSONResponse(content=content, status_code=status_code)

    return handler
