"""Label and receipt scanning endpoints backed by Claude Vision.

Every outcome, including failures, is a JSON body with a ``success`` flag so
the client can fall back to manual entry. Checks run in this order: service
configured (503), caller authenticated (401), upload valid (400/413), model
call (500), reply parsing (200 with ``success: false``).
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, File, Request, UploadFile, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from pourfolio.config import settings
from pourfolio.rate_limit import limiter
from pourfolio.schemas.scan import LabelScanResult, ReceiptScanResult
from pourfolio.services.auth import CurrentUser
from pourfolio.services.uploads import UploadValidationError, read_image_upload
from pourfolio.services.vision import ClaudeVisionService

logger = logging.getLogger(__name__)

router = APIRouter()

_vision_service = ClaudeVisionService()


def get_vision_service() -> ClaudeVisionService:
    """Dependency returning the shared vision service."""
    return _vision_service


VisionService = Annotated[ClaudeVisionService, Depends(get_vision_service)]


def _respond(result: BaseModel, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=result.model_dump(mode="json"))


@limiter.limit(settings.scan_rate_limit)
async def scan_label(
    request: Request,
    current_user: CurrentUser,
    vision: VisionService,
    label: Annotated[UploadFile | None, File(description="Wine label image")] = None,
) -> JSONResponse:
    """Extract wine details from a bottle label photo."""
    if not vision.is_available():
        logger.error("Label scan requested but no Anthropic API key is configured")
        return _respond(
            LabelScanResult(success=False, error="Service not configured"),
            status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    if current_user is None:
        return _respond(
            LabelScanResult(success=False, error="Unauthorized"),
            status.HTTP_401_UNAUTHORIZED,
        )

    try:
        content, media_type = await read_image_upload(
            label, "label", settings.max_upload_size_bytes
        )
    except UploadValidationError as e:
        return _respond(LabelScanResult(success=False, error=e.detail), e.status_code)

    try:
        result = await vision.analyze_label(content, media_type)
    except Exception as e:
        logger.exception("Label scan failed for user %s", current_user.id)
        return _respond(
            LabelScanResult(success=False, error=str(e) or "Failed to scan label"),
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    logger.info("Label scanned for user %s (success=%s)", current_user.id, result.success)
    return _respond(result)


@limiter.limit(settings.scan_rate_limit)
async def scan_receipt(
    request: Request,
    current_user: CurrentUser,
    vision: VisionService,
    receipt: Annotated[UploadFile | None, File(description="Purchase receipt image")] = None,
) -> JSONResponse:
    """Extract vendor, totals and wine line items from a receipt photo."""
    if not vision.is_available():
        logger.error("Receipt scan requested but no Anthropic API key is configured")
        return _respond(
            ReceiptScanResult(success=False, error="Service not configured"),
            status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    if current_user is None:
        return _respond(
            ReceiptScanResult(success=False, error="Unauthorized"),
            status.HTTP_401_UNAUTHORIZED,
        )

    try:
        content, media_type = await read_image_upload(
            receipt, "receipt", settings.max_upload_size_bytes
        )
    except UploadValidationError as e:
        return _respond(ReceiptScanResult(success=False, error=e.detail), e.status_code)

    try:
        result = await vision.analyze_receipt(content, media_type)
    except Exception as e:
        logger.exception("Receipt scan failed for user %s", current_user.id)
        return _respond(
            ReceiptScanResult(success=False, error=str(e) or "Failed to scan receipt"),
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    logger.info(
        "Receipt scanned for user %s (success=%s, wines=%d)",
        current_user.id,
        result.success,
        len(result.wines),
    )
    return _respond(result)


router.add_api_route(
    "/label/scan",
    scan_label,
    methods=["POST"],
    response_model=LabelScanResult,
)
router.add_api_route(
    "/receipt/scan",
    scan_receipt,
    methods=["POST"],
    response_model=ReceiptScanResult,
)
