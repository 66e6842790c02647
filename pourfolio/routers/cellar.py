"""Cellar inventory endpoints: CRUD, consumption and portfolio value."""

import logging
from datetime import datetime, timezone
from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, status

from pourfolio.models import CellarItem, InventoryStatus, WineReference
from pourfolio.schemas.cellar import (
    CellarItemCreate,
    CellarItemResponse,
    CellarItemUpdate,
    CellarValueSummary,
)
from pourfolio.services.auth import Context
from pourfolio.services.valuation import summarize_cellar_value

from ._common import get_owned_or_404, parse_object_id

logger = logging.getLogger(__name__)

router = APIRouter()


async def list_cellar(
    ctx: Context,
    item_status: Annotated[InventoryStatus, Query(alias="status")] = InventoryStatus.IN_CELLAR,
    skip: int = 0,
    limit: Annotated[int, Query(ge=1, le=500)] = 100,
) -> list[CellarItemResponse]:
    """List the caller's cellar items, newest first."""
    items = await CellarItem.find(
        CellarItem.owner_id == ctx.user_id,
        CellarItem.status == item_status,
    ).sort(-CellarItem.created_at).skip(skip).limit(limit).to_list()
    return [CellarItemResponse.model_validate(item) for item in items]


async def get_cellar_value(ctx: Context) -> CellarValueSummary:
    """Summarize purchase and market value of the bottles in the cellar."""
    items = await CellarItem.find(
        CellarItem.owner_id == ctx.user_id,
        CellarItem.status == InventoryStatus.IN_CELLAR,
    ).to_list()

    reference_ids = list({item.wine_reference_id for item in items if item.wine_reference_id})
    wine_types = {}
    if reference_ids:
        references = await WineReference.find({"_id": {"$in": reference_ids}}).to_list()
        wine_types = {ref.id: ref.wine_type for ref in references}

    return summarize_cellar_value(items, wine_types)


async def add_cellar_item(
    ctx: Context,
    item_in: CellarItemCreate,
) -> CellarItemResponse:
    """Add a wine to the caller's cellar."""
    if not item_in.has_identity():
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Either wine_reference_id or custom_name is required",
        )

    data = item_in.model_dump()
    data["wine_reference_id"] = parse_object_id(item_in.wine_reference_id)
    item = CellarItem(owner_id=ctx.user_id, **data)
    if item.current_market_value_cents is not None:
        item.market_value_updated_at = datetime.now(timezone.utc)
    await item.insert()

    logger.info("Cellar item added (id=%s, owner=%s)", item.id, ctx.user_id)
    return CellarItemResponse.model_validate(item)


async def get_cellar_item(item_id: str, ctx: Context) -> CellarItemResponse:
    """Get one cellar item."""
    item = await get_owned_or_404(CellarItem, item_id, ctx, "cellar item")
    return CellarItemResponse.model_validate(item)


async def update_cellar_item(
    item_id: str,
    ctx: Context,
    item_update: CellarItemUpdate,
) -> CellarItemResponse:
    """Update only the provided fields of a cellar item."""
    item = await get_owned_or_404(CellarItem, item_id, ctx, "cellar item")

    update_data = item_update.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(item, field, value)

    now = datetime.now(timezone.utc)
    if "current_market_value_cents" in update_data:
        item.market_value_updated_at = now
    item.updated_at = now
    await item.save()

    return CellarItemResponse.model_validate(item)


async def consume_cellar_item(item_id: str, ctx: Context) -> CellarItemResponse:
    """Mark a cellar item as consumed."""
    item = await get_owned_or_404(CellarItem, item_id, ctx, "cellar item")

    now = datetime.now(timezone.utc)
    item.status = InventoryStatus.CONSUMED
    item.consumed_date = now
    item.quantity = 0
    item.updated_at = now
    await item.save()

    logger.info("Cellar item consumed (id=%s)", item.id)
    return CellarItemResponse.model_validate(item)


async def restore_cellar_item(
    item_id: str,
    ctx: Context,
    quantity: Annotated[int, Query(ge=1)] = 1,
) -> CellarItemResponse:
    """Put a consumed item back in the cellar."""
    item = await get_owned_or_404(CellarItem, item_id, ctx, "cellar item")

    item.status = InventoryStatus.IN_CELLAR
    item.consumed_date = None
    item.quantity = quantity
    item.updated_at = datetime.now(timezone.utc)
    await item.save()

    return CellarItemResponse.model_validate(item)


async def delete_cellar_item(item_id: str, ctx: Context) -> None:
    """Delete a cellar item."""
    item = await get_owned_or_404(CellarItem, item_id, ctx, "cellar item")
    await item.delete()
    logger.info("Cellar item deleted (id=%s)", item_id)


# /value must come before /{item_id} to avoid conflicts
router.add_api_route("", list_cellar, methods=["GET"])
router.add_api_route("", add_cellar_item, methods=["POST"], status_code=201)
router.add_api_route("/value", get_cellar_value, methods=["GET"])
router.add_api_route("/{item_id}", get_cellar_item, methods=["GET"])
router.add_api_route("/{item_id}", update_cellar_item, methods=["PATCH"])
router.add_api_route("/{item_id}", delete_cellar_item, methods=["DELETE"], status_code=204)
router.add_api_route("/{item_id}/consume", consume_cellar_item, methods=["POST"])
router.add_api_route("/{item_id}/restore", restore_cellar_item, methods=["POST"])
