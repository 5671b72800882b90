"""
Upload-related error classes.

This module defines custom exceptions for the single-image upload
accepted when creating a post.
"""

from starlette.status import HTTP_400_BAD_REQUEST

from app.errors.base import BaseAppError, create_exception_handler
from app.monitoring import get_logger

logger = get_logger(__name__)


class UploadError(BaseAppError):
    """Base exception for upload-related errors."""

    def __init__(
        self,
        detail: str = "Upload failed",
        status_code: int = HTTP_400_BAD_REQUEST,
    ) -> None:
        super().__init__(detail=detail, status_code=status_code)


class MissingImageError(UploadError):
    """Exception raised when a post is created without an image file."""

    def __init__(self) -> None:
        super().__init__(detail="Image file is required.")


class ImageTooLargeError(UploadError):
    """Exception raised when uploaded image exceeds size limit."""

    def __init__(
        self,
        max_size_mb: int = 5,
        actual_size_mb: float | None = None,
    ) -> None:
        detail = f"Image exceeds maximum size of {max_size_mb}MB."
        if actual_size_mb is not None:
            detail += f" Your file is {actual_size_mb:.1f}MB."
        super().__init__(detail=detail)
        self.max_size_mb = max_size_mb
        self.actual_size_mb = actual_size_mb


class UnsupportedImageTypeError(UploadError):
    """Exception raised when the uploaded file is not an image."""

    def __init__(self, content_type: str) -> None:
        super().__init__(
            detail=f"Invalid file type '{content_type}'. Only images are allowed.",
        )
        self.content_type = content_type


upload_exception_handler = create_exception_handler(logger)
