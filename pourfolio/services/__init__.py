"""Services for Pourfolio application."""

from pourfolio.services.uploads import read_image_upload
from pourfolio.services.vision import ClaudeVisionService

__all__ = ["ClaudeVisionService", "read_image_upload"]
