"""Wishlist endpoints."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException, Query, status

from pourfolio.models import WishlistItem, WishlistStatus
from pourfolio.schemas.wishlist import (
    WishlistItemCreate,
    WishlistItemResponse,
    WishlistItemUpdate,
    WishlistPurchase,
    WishlistStats,
)
from pourfolio.services.auth import Context
from pourfolio.services.wishlist import compute_stats, sort_by_priority

from ._common import get_owned_or_404, parse_object_id

logger = logging.getLogger(__name__)

router = APIRouter()


async def list_wishlist(
    ctx: Context,
    item_status: WishlistStatus | None = Query(None, alias="status"),
) -> list[WishlistItemResponse]:
    """List wishlist items, highest priority first, then newest."""
    conditions = [WishlistItem.owner_id == ctx.user_id]
    if item_status is not None:
        conditions.append(WishlistItem.status == item_status)

    items = await WishlistItem.find(*conditions).to_list()
    return [WishlistItemResponse.model_validate(item) for item in sort_by_priority(items)]


async def get_wishlist_stats(ctx: Context) -> WishlistStats:
    """Counts by status and priority, plus the estimated cost of active items."""
    items = await WishlistItem.find(WishlistItem.owner_id == ctx.user_id).to_list()
    return compute_stats(items)


async def add_wishlist_item(ctx: Context, item_in: WishlistItemCreate) -> WishlistItemResponse:
    """Add a wine to the wishlist."""
    if not (item_in.wine_reference_id or (item_in.custom_name and item_in.custom_name.strip())):
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Either wine_reference_id or custom_name is required",
        )

    data = item_in.model_dump()
    data["wine_reference_id"] = parse_object_id(item_in.wine_reference_id)
    item = WishlistItem(owner_id=ctx.user_id, **data)
    await item.insert()

    logger.info("Wishlist item added (id=%s, priority=%s)", item.id, item.priority.value)
    return WishlistItemResponse.model_validate(item)


async def update_wishlist_item(
    item_id: str,
    ctx: Context,
    item_update: WishlistItemUpdate,
) -> WishlistItemResponse:
    """Update only the provided fields of a wishlist item."""
    item = await get_owned_or_404(WishlistItem, item_id, ctx, "wishlist item")

    for field, value in item_update.model_dump(exclude_unset=True).items():
        setattr(item, field, value)
    item.updated_at = datetime.now(timezone.utc)
    await item.save()

    return WishlistItemResponse.model_validate(item)


async def mark_purchased(
    item_id: str,
    ctx: Context,
    purchase: WishlistPurchase | None = None,
) -> WishlistItemResponse:
    """Mark a wishlist item as purchased today."""
    item = await get_owned_or_404(WishlistItem, item_id, ctx, "wishlist item")
    purchase = purchase or WishlistPurchase()

    now = datetime.now(timezone.utc)
    item.status = WishlistStatus.PURCHASED
    item.purchased_date = now
    item.purchased_price_cents = purchase.price_cents
    item.purchased_from = purchase.vendor
    item.updated_at = now
    await item.save()

    logger.info("Wishlist item purchased (id=%s)", item.id)
    return WishlistItemResponse.model_validate(item)


async def delete_wishlist_item(item_id: str, ctx: Context) -> None:
    """Delete a wishlist item."""
    item = await get_owned_or_404(WishlistItem, item_id, ctx, "wishlist item")
    await item.delete()


# /stats must come before /{item_id} to avoid conflicts
router.add_api_route("", list_wishlist, methods=["GET"])
router.add_api_route("", add_wishlist_item, methods=["POST"], status_code=201)
router.add_api_route("/stats", get_wishlist_stats, methods=["GET"])
router.add_api_route("/{item_id}", update_wishlist_item, methods=["PATCH"])
router.add_api_route("/{item_id}", delete_wishlist_item, methods=["DELETE"], status_code=204)
router.add_api_route("/{item_id}/purchased", mark_purchased, methods=["POST"])
