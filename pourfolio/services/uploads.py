"""Validation of image uploads sent to the scan endpoints."""

import logging

from fastapi import UploadFile, status

logger = logging.getLogger(__name__)

# Allowed MIME types for image uploads
ALLOWED_MIME_TYPES = {
    "image/jpeg",
    "image/png",
    "image/gif",
    "image/webp",
}

# File extension to MIME type mapping
EXTENSION_MIME_MAP = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".webp": "image/webp",
}

# Magic byte signatures for image formats
# Each entry is (magic_bytes, offset, detected MIME type)
IMAGE_MAGIC_SIGNATURES = [
    # JPEG: starts with FF D8 FF
    (b"\xff\xd8\xff", 0, "image/jpeg"),
    # PNG: starts with 89 50 4E 47 0D 0A 1A 0A
    (b"\x89PNG\r\n\x1a\n", 0, "image/png"),
    # GIF87a and GIF89a
    (b"GIF87a", 0, "image/gif"),
    (b"GIF89a", 0, "image/gif"),
    # WebP: starts with RIFF....WEBP
    (b"RIFF", 0, "image/webp"),  # Additional check for WEBP at offset 8
]

INVALID_FORMAT_MESSAGE = "Invalid image format. Please upload a JPEG, PNG, GIF, or WebP image."


class UploadValidationError(Exception):
    """Raised when an uploaded image is missing, malformed or too large."""

    def __init__(self, status_code: int, detail: str) -> None:
        super().__init__(detail)
        self.status_code = status_code
        self.detail = detail


def detect_image_type(content: bytes) -> str | None:
    """Detect the image MIME type from file content using magic bytes."""
    if len(content) < 12:
        return None

    for magic, offset, mime in IMAGE_MAGIC_SIGNATURES:
        if content[offset:offset + len(magic)] == magic:
            # Special case for WebP: verify WEBP signature at offset 8
            if mime == "image/webp" and content[8:12] != b"WEBP":
                continue
            return mime

    return None


def get_media_type(upload: UploadFile) -> str | None:
    """Get the declared media type, falling back to the filename extension."""
    content_type = (upload.content_type or "").split(";")[0].strip().lower()
    if content_type and content_type != "application/octet-stream":
        return content_type
    if upload.filename and "." in upload.filename:
        ext = "." + upload.filename.lower().rsplit(".", 1)[-1]
        return EXTENSION_MIME_MAP.get(ext)
    return None


async def read_image_upload(
    upload: UploadFile | None,
    label: str,
    max_bytes: int,
) -> tuple[bytes, str]:
    """Validate an uploaded image and return its bytes and MIME type.

    Args:
        upload: The uploaded file, or None if the form field was absent.
        label: Human-readable field name for error messages.
        max_bytes: Maximum accepted size.

    Returns:
        Tuple of (content, media type detected from the content).

    Raises:
        UploadValidationError: 400 for a missing, empty or non-image upload,
            413 if the file exceeds ``max_bytes``.
    """
    if upload is None:
        raise UploadValidationError(
            status.HTTP_400_BAD_REQUEST, f"No {label} image provided"
        )

    declared = get_media_type(upload)
    if declared not in ALLOWED_MIME_TYPES:
        raise UploadValidationError(status.HTTP_400_BAD_REQUEST, INVALID_FORMAT_MESSAGE)

    content = await upload.read()
    if len(content) > max_bytes:
        max_mb = max_bytes / (1024 * 1024)
        raise UploadValidationError(
            status.HTTP_413_CONTENT_TOO_LARGE,
            f"{label.capitalize()} image exceeds maximum allowed size of {max_mb:.1f} MB",
        )
    if not content:
        raise UploadValidationError(
            status.HTTP_400_BAD_REQUEST, f"{label.capitalize()} image is empty"
        )

    detected = detect_image_type(content)
    if detected is None:
        logger.warning("Rejected %s upload: content is not a recognised image", label)
        raise UploadValidationError(status.HTTP_400_BAD_REQUEST, INVALID_FORMAT_MESSAGE)

    return content, detected
