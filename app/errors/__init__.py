from app.errors.base import BaseAppError, create_exception_handler
from app.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    RecordNotFoundError,
    database_exception_handler,
)
from app.errors.upload import (
    ImageTooLargeError,
    MissingImageError,
    UnsupportedImageTypeError,
    UploadError,
    upload_exception_handler,
)
from app.errors.validation import (
    InvalidParametersError,
    InvalidTagsError,
    validation_app_exception_handler,
    validation_exception_handler,
)

__all__ = [
    "BaseAppError",
    "DatabaseConnectionError",
    "DatabaseError",
    "ImageTooLargeError",
    "InvalidParametersError",
    "InvalidTagsError",
    "MissingImageError",
    "RecordNotFoundError",
    "UnsupportedImageTypeError",
    "UploadError",
    "create_exception_handler",
    "database_exception_handler",
    "upload_exception_handler",
    "validation_app_exception_handler",
    "validation_exception_handler",
]
