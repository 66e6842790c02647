"""Tasting rating endpoints."""

import logging
from datetime import datetime, timezone
from typing import Annotated

from fastapi import APIRouter, Query

from pourfolio.models import CellarItem, Rating
from pourfolio.schemas.rating import RatingCreate, RatingResponse
from pourfolio.services.auth import Context
from pourfolio.services.tasting import build_food_pairings, distinct_companions

from ._common import get_owned_or_404, parse_object_id

logger = logging.getLogger(__name__)

router = APIRouter()

# Ratings scanned for companion suggestions
COMPANION_SCAN_LIMIT = 50


async def add_rating(ctx: Context, rating_in: RatingCreate) -> RatingResponse:
    """Record a tasting rating, optionally linked to a cellar item."""
    wine_reference_id = parse_object_id(rating_in.wine_reference_id)
    inventory_id = None
    if rating_in.inventory_id:
        item = await get_owned_or_404(CellarItem, rating_in.inventory_id, ctx, "cellar item")
        inventory_id = item.id
        wine_reference_id = wine_reference_id or item.wine_reference_id

    data = rating_in.model_dump(
        exclude={"inventory_id", "wine_reference_id", "food_pairings", "tasting_date"}
    )
    rating = Rating(
        owner_id=ctx.user_id,
        inventory_id=inventory_id,
        wine_reference_id=wine_reference_id,
        food_pairings=build_food_pairings(rating_in.food_pairings),
        tasting_date=rating_in.tasting_date or datetime.now(timezone.utc),
        **data,
    )
    await rating.insert()

    logger.info("Rating added (id=%s, score=%d)", rating.id, rating.score)
    return RatingResponse.model_validate(rating)


async def list_ratings(
    ctx: Context,
    inventory_id: str | None = None,
    skip: int = 0,
    limit: Annotated[int, Query(ge=1, le=500)] = 100,
) -> list[RatingResponse]:
    """List the caller's ratings, newest first."""
    conditions = [Rating.owner_id == ctx.user_id]
    if inventory_id:
        conditions.append(Rating.inventory_id == parse_object_id(inventory_id))

    ratings = await Rating.find(*conditions).sort(-Rating.created_at).skip(skip).limit(limit).to_list()
    return [RatingResponse.model_validate(rating) for rating in ratings]


async def recent_companions(ctx: Context) -> list[str]:
    """Distinct companions from the caller's most recent ratings."""
    ratings = await Rating.find(
        Rating.owner_id == ctx.user_id,
        {"companions.0": {"$exists": True}},
    ).sort(-Rating.created_at).limit(COMPANION_SCAN_LIMIT).to_list()
    return distinct_companions(rating.companions for rating in ratings)


async def delete_rating(rating_id: str, ctx: Context) -> None:
    """Delete a rating."""
    rating = await get_owned_or_404(Rating, rating_id, ctx, "rating")
    await rating.delete()


router.add_api_route("", list_ratings, methods=["GET"])
router.add_api_route("", add_rating, methods=["POST"], status_code=201)
router.add_api_route("/companions", recent_companions, methods=["GET"])
router.add_api_route("/{rating_id}", delete_rating, methods=["DELETE"], status_code=204)
