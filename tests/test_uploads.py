"""Tests for scan image upload validation."""

import io

import pytest
from fastapi import UploadFile
from starlette.datastructures import Headers

from pourfolio.services.uploads import (
    INVALID_FORMAT_MESSAGE,
    UploadValidationError,
    detect_image_type,
    get_media_type,
    read_image_upload,
)

MAX_BYTES = 1024


def make_upload(content: bytes, filename: str = "label.png", content_type: str | None = "image/png"):
    headers = Headers({"content-type": content_type}) if content_type else None
    return UploadFile(file=io.BytesIO(content), filename=filename, headers=headers)


class TestDetectImageType:
    """Tests for magic byte detection."""

    def test_png(self, sample_image_bytes):
        assert detect_image_type(sample_image_bytes) == "image/png"

    def test_jpeg(self):
        assert detect_image_type(b"\xff\xd8\xff\xe0" + b"\x00" * 16) == "image/jpeg"

    def test_gif(self):
        assert detect_image_type(b"GIF89a" + b"\x00" * 10) == "image/gif"

    def test_webp(self):
        assert detect_image_type(b"RIFF\x00\x00\x00\x00WEBPVP8 ") == "image/webp"

    def test_riff_without_webp(self):
        """A RIFF container that is not WebP (e.g. WAV) is rejected."""
        assert detect_image_type(b"RIFF\x00\x00\x00\x00WAVEfmt ") is None

    def test_too_short(self):
        assert detect_image_type(b"\x89PNG") is None

    def test_text(self):
        assert detect_image_type(b"this is not an image at all") is None


class TestGetMediaType:
    """Tests for declared media type resolution."""

    def test_content_type_header(self):
        assert get_media_type(make_upload(b"", content_type="image/JPEG")) == "image/jpeg"

    def test_falls_back_to_extension(self):
        upload = make_upload(b"", filename="receipt.webp", content_type="application/octet-stream")
        assert get_media_type(upload) == "image/webp"

    def test_unknown_extension(self):
        assert get_media_type(make_upload(b"", filename="notes.txt", content_type=None)) is None


class TestReadImageUpload:
    """Tests for read_image_upload."""

    @pytest.mark.asyncio
    async def test_valid_png(self, sample_image_bytes):
        content, media_type = await read_image_upload(
            make_upload(sample_image_bytes), "label", MAX_BYTES
        )
        assert content == sample_image_bytes
        assert media_type == "image/png"

    @pytest.mark.asyncio
    async def test_detected_type_wins_over_declared(self):
        """A JPEG sent as image/png is passed on as image/jpeg."""
        jpeg = b"\xff\xd8\xff\xe0" + b"\x00" * 16
        _, media_type = await read_image_upload(make_upload(jpeg), "label", MAX_BYTES)
        assert media_type == "image/jpeg"

    @pytest.mark.asyncio
    async def test_missing(self):
        with pytest.raises(UploadValidationError) as exc_info:
            await read_image_upload(None, "receipt", MAX_BYTES)
        assert exc_info.value.status_code == 400
        assert exc_info.value.detail == "No receipt image provided"

    @pytest.mark.asyncio
    async def test_disallowed_type(self):
        upload = make_upload(b"%PDF-1.7 ....", filename="receipt.pdf", content_type="application/pdf")
        with pytest.raises(UploadValidationError) as exc_info:
            await read_image_upload(upload, "receipt", MAX_BYTES)
        assert exc_info.value.status_code == 400
        assert exc_info.value.detail == INVALID_FORMAT_MESSAGE

    @pytest.mark.asyncio
    async def test_too_large(self, sample_image_bytes):
        upload = make_upload(sample_image_bytes + b"\x00" * MAX_BYTES)
        with pytest.raises(UploadValidationError) as exc_info:
            await read_image_upload(upload, "label", MAX_BYTES)
        assert exc_info.value.status_code == 413

    @pytest.mark.asyncio
    async def test_empty(self):
        with pytest.raises(UploadValidationError) as exc_info:
            await read_image_upload(make_upload(b""), "label", MAX_BYTES)
        assert exc_info.value.status_code == 400
        assert exc_info.value.detail == "Label image is empty"

    @pytest.mark.asyncio
    async def test_declared_image_but_not_image_bytes(self):
        upload = make_upload(b"<html><body>hello</body></html>")
        with pytest.raises(UploadValidationError) as exc_info:
            await read_image_upload(upload, "label", MAX_BYTES)
        assert exc_info.value.status_code == 400
        assert exc_info.value.detail == INVALID_FORMAT_MESSAGE
