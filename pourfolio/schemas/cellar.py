"""Pydantic schemas for cellar inventory."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pourfolio.models.enums import InventoryStatus, MarketValueSource


class CellarItemBase(BaseModel):
    """Fields a user can set on a cellar item."""

    wine_reference_id: str | None = None
    custom_name: str | None = Field(None, max_length=255)
    custom_producer: str | None = Field(None, max_length=255)
    vintage: int | None = Field(None, ge=1800, le=2100)
    quantity: int = Field(1, ge=0)
    bottle_size_ml: int = Field(750, gt=0)
    simple_location: str | None = Field(None, max_length=255)
    purchase_date: datetime | None = None
    purchase_price_cents: int | None = Field(None, ge=0)
    purchase_location: str | None = Field(None, max_length=255)
    notes: str | None = Field(None, max_length=2000)
    tags: list[str] = Field(default_factory=list)
    low_stock_threshold: int | None = Field(None, ge=0)
    low_stock_alert_enabled: bool = False
    current_market_value_cents: int | None = Field(None, ge=0)
    market_value_source: MarketValueSource | None = None


class CellarItemCreate(CellarItemBase):
    """Schema for adding a wine to the cellar.

    Either a catalogue reference or a custom name is required.
    """

    def has_identity(self) -> bool:
        return bool(self.wine_reference_id or (self.custom_name and self.custom_name.strip()))


class CellarItemUpdate(BaseModel):
    """Schema for a partial cellar item update."""

    custom_name: str | None = Field(None, max_length=255)
    custom_producer: str | None = Field(None, max_length=255)
    vintage: int | None = Field(None, ge=1800, le=2100)
    quantity: int | None = Field(None, ge=0)
    bottle_size_ml: int | None = Field(None, gt=0)
    simple_location: str | None = Field(None, max_length=255)
    purchase_date: datetime | None = None
    purchase_price_cents: int | None = Field(None, ge=0)
    purchase_location: str | None = Field(None, max_length=255)
    status: InventoryStatus | None = None
    notes: str | None = Field(None, max_length=2000)
    tags: list[str] | None = None
    low_stock_threshold: int | None = Field(None, ge=0)
    low_stock_alert_enabled: bool | None = None
    current_market_value_cents: int | None = Field(None, ge=0)
    market_value_source: MarketValueSource | None = None


class CellarItemResponse(CellarItemBase):
    """Cellar item as returned by the API."""

    id: str
    status: InventoryStatus
    consumed_date: datetime | None = None
    market_value_updated_at: datetime | None = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_validator("id", "wine_reference_id", mode="before")
    @classmethod
    def _stringify_object_id(cls, value: Any) -> str | None:
        return str(value) if value is not None else None


class TypeBreakdown(BaseModel):
    """Bottle count and value for one wine type."""

    bottles: int = 0
    purchase_cents: int = 0
    market_cents: int = 0


class CellarValueSummary(BaseModel):
    """Portfolio valuation of the bottles currently in the cellar."""

    total_bottles: int
    total_purchase_cents: int
    total_market_cents: int
    gain_loss_cents: int
    gain_loss_percentage: float
    by_type: dict[str, TypeBreakdown]
