"""Common helpers for owner-scoped resource endpoints."""

import logging
from typing import TypeVar

from beanie import Document, PydanticObjectId
from bson.errors import InvalidId
from fastapi import HTTPException, status
from pydantic import ValidationError

from pourfolio.services.auth import RequestContext

logger = logging.getLogger(__name__)

DocumentT = TypeVar("DocumentT", bound=Document)


def parse_object_id(value: str | None) -> PydanticObjectId | None:
    """Parse an optional ObjectId string; invalid ids raise 422."""
    if value is None:
        return None
    try:
        return PydanticObjectId(value)
    except (InvalidId, TypeError) as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Invalid id: {value}",
        ) from e


async def get_owned_or_404(
    model: type[DocumentT],
    document_id: str,
    ctx: RequestContext,
    label: str,
) -> DocumentT:
    """Load a document owned by the caller, or raise 404.

    Documents that belong to another user are reported as missing.
    """
    try:
        document = await model.find_one(
            model.id == PydanticObjectId(document_id),
            model.owner_id == ctx.user_id,
        )
    except (InvalidId, ValidationError) as e:
        logger.debug("Invalid %s ID format: %s - %s", label, document_id, e)
        document = None

    if document is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{label.capitalize()} with ID {document_id} not found",
        )
    return document
