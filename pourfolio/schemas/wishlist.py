"""Pydantic schemas for the wishlist."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pourfolio.models.enums import WineType, WishlistPriority, WishlistStatus


class WishlistItemCreate(BaseModel):
    """Schema for adding a wine to the wishlist."""

    wine_reference_id: str | None = None
    custom_name: str | None = Field(None, max_length=255)
    custom_producer: str | None = Field(None, max_length=255)
    custom_region: str | None = Field(None, max_length=255)
    custom_vintage: int | None = Field(None, ge=1800, le=2100)
    custom_wine_type: WineType | None = None
    priority: WishlistPriority = WishlistPriority.MEDIUM
    target_price_cents: int | None = Field(None, ge=0)
    max_price_cents: int | None = Field(None, ge=0)
    desired_quantity: int = Field(1, ge=1)
    source: str | None = Field(None, max_length=255)
    notes: str | None = Field(None, max_length=2000)


class WishlistItemUpdate(BaseModel):
    """Schema for a partial wishlist update."""

    custom_name: str | None = Field(None, max_length=255)
    custom_producer: str | None = Field(None, max_length=255)
    custom_region: str | None = Field(None, max_length=255)
    custom_vintage: int | None = Field(None, ge=1800, le=2100)
    custom_wine_type: WineType | None = None
    priority: WishlistPriority | None = None
    target_price_cents: int | None = Field(None, ge=0)
    max_price_cents: int | None = Field(None, ge=0)
    desired_quantity: int | None = Field(None, ge=1)
    source: str | None = Field(None, max_length=255)
    notes: str | None = Field(None, max_length=2000)
    status: WishlistStatus | None = None


class WishlistPurchase(BaseModel):
    """Details recorded when a wishlist wine is bought."""

    price_cents: int | None = Field(None, ge=0)
    vendor: str | None = Field(None, max_length=255)


class WishlistItemResponse(WishlistItemCreate):
    """Wishlist item as returned by the API."""

    id: str
    status: WishlistStatus
    purchased_date: datetime | None = None
    purchased_price_cents: int | None = None
    purchased_from: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_validator("id", "wine_reference_id", mode="before")
    @classmethod
    def _stringify_object_id(cls, value: Any) -> str | None:
        return str(value) if value is not None else None


class WishlistStats(BaseModel):
    """Counts over the caller's wishlist."""

    total: int
    active: int
    purchased: int
    by_priority: dict[str, int]
    estimated_cost_cents: int
