"""Cellar inventory document model."""

from datetime import datetime, timezone
from typing import Optional

from beanie import Document, Indexed, PydanticObjectId
from pydantic import Field

from pourfolio.models.enums import InventoryStatus, MarketValueSource


class CellarItem(Document):
    """One line of a user's cellar: a wine and how many bottles of it."""

    # Owner reference for data isolation
    owner_id: Indexed(PydanticObjectId)

    # Either a catalogue wine or custom fields (or both)
    wine_reference_id: Optional[PydanticObjectId] = None
    custom_name: Optional[str] = None
    custom_producer: Optional[str] = None
    vintage: Optional[int] = None

    quantity: int = Field(default=1, ge=0)
    bottle_size_ml: int = 750
    simple_location: Optional[str] = None

    # Purchase
    purchase_date: Optional[datetime] = None
    purchase_price_cents: Optional[int] = Field(default=None, ge=0)
    purchase_location: Optional[str] = None

    status: InventoryStatus = InventoryStatus.IN_CELLAR
    consumed_date: Optional[datetime] = None

    notes: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    low_stock_threshold: Optional[int] = None
    low_stock_alert_enabled: bool = False

    # Market value
    current_market_value_cents: Optional[int] = Field(default=None, ge=0)
    market_value_source: Optional[MarketValueSource] = None
    market_value_updated_at: Optional[datetime] = None

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    class Settings:
        name = "cellar_inventory"
        indexes = [
            "owner_id",
            [("owner_id", 1), ("status", 1)],
        ]

    def __repr__(self) -> str:
        return f"<CellarItem(id={self.id}, quantity={self.quantity}, status={self.status})>"
