"""
Image upload service.

Validates the single image attached to a new post and turns it into the
data URI stored in the post's `image` field. The whole file is kept in
memory; nothing is written to disk.
"""

from base64 import b64encode
from dataclasses import dataclass

from fastapi import UploadFile

from app.configs import IMAGE_MIME_PREFIX, settings
from app.errors.upload import ImageTooLargeError, UnsupportedImageTypeError


@dataclass(frozen=True)
class UploadedImage:
    """An in-memory image upload."""

    content_type: str
    data: bytes
    filename: str | None = None

    @property
    def size(self) -> int:
        return len(self.data)

    def to_data_uri(self) -> str:
        """Encode as ``data:<mime>;base64,<body>``."""
        return f"data:{self.content_type};base64,{b64encode(self.data).decode('ascii')}"


class MediaService:
    """Validates and buffers uploaded images."""

    def __init__(
        self,
        max_size_mb: int = settings.MEDIA_IMAGE_MAX_SIZE_MB,
        mime_prefix: str = IMAGE_MIME_PREFIX,
    ) -> None:
        """
        Initialize the media service.

        Args:
            max_size_mb: Largest accepted image, in MiB.
            mime_prefix: Required prefix of the declared content type.
        """
        self.max_size_mb = max_size_mb
        self.image_max_size_bytes = max_size_mb * 1024 * 1024
        self.mime_prefix = mime_prefix

    def _validate_image_type(self, content_type: str | None) -> None:
        """Validate image content type."""
        if not content_type or not content_type.startswith(self.mime_prefix):
            raise UnsupportedImageTypeError(content_type=content_type or "unknown")

    def _validate_image_size(self, file_data: bytes) -> None:
        """Validate image file size."""
        actual_size = len(file_data)
        if actual_size > self.image_max_size_bytes:
            raise ImageTooLargeError(
                max_size_mb=self.max_size_mb,
                actual_size_mb=actual_size / (1024 * 1024),
            )

    async def read_image(self, file: UploadFile) -> UploadedImage:
        """
        Validate and buffer an uploaded image.

        The declared type is checked before any byte is read, and at most
        one byte past the limit is read before the size check.

        Args:
            file: Uploaded file

        Returns:
            UploadedImage: MIME type and raw bytes

        Raises:
            UnsupportedImageTypeError: If the type does not start with ``image/``.
            ImageTooLargeError: If the file is larger than the limit.
        """
        self._validate_image_type(file.content_type)
        file_data = await file.read(self.image_max_size_bytes + 1)
        self._validate_image_size(file_data)
        return UploadedImage(
            content_type=file.content_type or "",
            data=file_data,
            filename=file.filename,
        )
