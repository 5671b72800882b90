"""Request validation errors mapped to 400 responses."""

from typing import Any, cast

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_400_BAD_REQUEST

from app.configs.settings import INVALID_PARAMETERS_MESSAGE
from app.errors.base import BaseAppError, create_exception_handler
from app.monitoring import get_logger
from app.utils.helpers import host

logger = get_logger(__name__)


class InvalidParametersError(BaseAppError):
    """Raised when a request carries unsupported parameters."""

    def __init__(self, keys: list[str]) -> None:
        super().__init__(
            detail=f"Invalid parameters: {', '.join(keys)}",
            status_code=HTTP_400_BAD_REQUEST,
            error=INVALID_PARAMETERS_MESSAGE,
        )
        self.keys = keys


class InvalidTagsError(BaseAppError):
    """Raised when the `tags` form field is neither a list nor a JSON array."""

    def __init__(self, error: str) -> None:
        super().__init__(
            detail="Tags must be an array or a JSON-encoded array of strings.",
            status_code=HTTP_400_BAD_REQUEST,
            error=error,
        )


def format_validation_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    """Flatten pydantic errors into `{field, message, type}` entries."""
    formatted_errors = []
    for error in exc.errors():
        formatted_errors.append(
            {
                "field": ".".join(str(loc) for loc in error.get("loc", [])[1:]),
                "message": error.get("msg", "Invalid value"),
                "type": error.get("type", "validation_error"),
            },
        )
    return formatted_errors


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Handle request validation errors as client input errors.

    Args:
        request: The incoming request.
        exc: The RequestValidationError exception.

    Returns:
        ORJSONResponse with a 400 status and the formatted field errors.
    """
    formatted_errors = format_validation_errors(cast(RequestValidationError, exc))

    logger.warning(
        "Validation error",
        ip=host(request),
        endpoint=request.url.path,
        errors=formatted_errors,
    )

    return ORJSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={"message": "Invalid request", "error": formatted_errors},
    )


validation_app_exception_handler = create_exception_handler(logger)
