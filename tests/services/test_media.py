from base64 import b64decode
from unittest.mock import AsyncMock, MagicMock

import pytest

from app.errors.upload import ImageTooLargeError, UnsupportedImageTypeError
from app.services.media import MediaService, UploadedImage


def _upload(content_type: str | None, data: bytes, filename: str = "photo.png") -> MagicMock:
    file = MagicMock()
    file.content_type = content_type
    file.filename = filename
    file.read = AsyncMock(return_value=data)
    return file


@pytest.mark.asyncio
async def test_read_image_returns_buffered_upload(valid_png_bytes: bytes) -> None:
    service = MediaService()
    file = _upload("image/png", valid_png_bytes)

    image = await service.read_image(file)

    assert image.content_type == "image/png"
    assert image.data == valid_png_bytes
    assert image.filename == "photo.png"
    assert image.size == len(valid_png_bytes)
    file.read.assert_awaited_once_with(5 * 1024 * 1024 + 1)


@pytest.mark.asyncio
async def test_read_image_rejects_non_image_before_reading() -> None:
    service = MediaService()
    file = _upload("text/plain", b"hello")

    with pytest.raises(UnsupportedImageTypeError) as exc_info:
        await service.read_image(file)

    assert exc_info.value.status_code == 400
    assert "text/plain" in exc_info.value.detail
    file.read.assert_not_awaited()


@pytest.mark.asyncio
async def test_read_image_rejects_missing_content_type() -> None:
    service = MediaService()

    with pytest.raises(UnsupportedImageTypeError) as exc_info:
        await service.read_image(_upload(None, b"\x89PNG"))

    assert exc_info.value.content_type == "unknown"


@pytest.mark.asyncio
async def test_read_image_rejects_oversized_file() -> None:
    service = MediaService(max_size_mb=1)
    file = _upload("image/jpeg", b"0" * (1024 * 1024 + 1))

    with pytest.raises(ImageTooLargeError) as exc_info:
        await service.read_image(file)

    assert exc_info.value.max_size_mb == 1
    assert exc_info.value.status_code == 400


@pytest.mark.asyncio
async def test_read_image_accepts_file_at_limit() -> None:
    service = MediaService(max_size_mb=1)
    image = await service.read_image(_upload("image/jpeg", b"0" * (1024 * 1024)))
    assert image.size == 1024 * 1024


def test_to_data_uri(valid_jpeg_bytes: bytes) -> None:
    image = UploadedImage(content_type="image/jpeg", data=valid_jpeg_bytes)

    uri = image.to_data_uri()

    header, body = uri.split(",", 1)
    assert header == "data:image/jpeg;base64"
    assert b64decode(body) == valid_jpeg_bytes
