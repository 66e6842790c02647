"""Wishlist document model."""

from datetime import datetime, timezone
from typing import Optional

from beanie import Document, Indexed, PydanticObjectId
from pydantic import Field

from pourfolio.models.enums import WineType, WishlistPriority, WishlistStatus


class WishlistItem(Document):
    """A wine the user wants to buy."""

    owner_id: Indexed(PydanticObjectId)
    wine_reference_id: Optional[PydanticObjectId] = None

    custom_name: Optional[str] = None
    custom_producer: Optional[str] = None
    custom_region: Optional[str] = None
    custom_vintage: Optional[int] = None
    custom_wine_type: Optional[WineType] = None

    priority: WishlistPriority = WishlistPriority.MEDIUM
    target_price_cents: Optional[int] = Field(default=None, ge=0)
    max_price_cents: Optional[int] = Field(default=None, ge=0)
    desired_quantity: int = Field(default=1, ge=1)
    source: Optional[str] = None
    notes: Optional[str] = None

    status: WishlistStatus = WishlistStatus.ACTIVE
    purchased_date: Optional[datetime] = None
    purchased_price_cents: Optional[int] = Field(default=None, ge=0)
    purchased_from: Optional[str] = None

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    class Settings:
        name = "wishlist"
        indexes = [
            "owner_id",
            [("owner_id", 1), ("status", 1)],
        ]

    def __repr__(self) -> str:
        return f"<WishlistItem(id={self.id}, status={self.status})>"
