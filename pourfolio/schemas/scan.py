"""Pydantic schemas for label and receipt scan results."""

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pourfolio.models.enums import WineType

VendorType = Literal["winery", "retailer", "auction", "private", "other"]

_VENDOR_TYPES = {"winery", "retailer", "auction", "private", "other"}


def normalize_wine_type(value: Any) -> WineType | None:
    """Map a model-supplied wine type to WineType; unknown values become None."""
    if not isinstance(value, str):
        return None
    cleaned = value.strip().lower().replace("é", "e")
    try:
        return WineType(cleaned)
    except ValueError:
        return None


class _ExtractedFields(BaseModel):
    model_config = ConfigDict(extra="ignore")

    @field_validator("wine_type", mode="before", check_fields=False)
    @classmethod
    def _normalize_wine_type(cls, value: Any) -> WineType | None:
        return normalize_wine_type(value)


class LabelWine(_ExtractedFields):
    """Wine details read from a bottle label."""

    name: Optional[str] = None
    producer: Optional[str] = None
    vintage: Optional[int] = None
    wine_type: Optional[WineType] = None
    region: Optional[str] = None
    sub_region: Optional[str] = None
    country: Optional[str] = None
    appellation: Optional[str] = None
    grape_varieties: Optional[list[str]] = None
    alcohol_percentage: Optional[float] = None
    confidence: Optional[float] = None


class LabelScanPayload(LabelWine):
    """Complete JSON object expected from the model for a label."""

    raw_text: Optional[str] = None


class LabelScanResult(BaseModel):
    """Response body of ``POST /api/label/scan``."""

    success: bool
    wine: Optional[LabelWine] = None
    raw_text: str = ""
    error: Optional[str] = None


class ReceiptLine(_ExtractedFields):
    """One wine line item as returned by the model."""

    name: Optional[str] = None
    producer: Optional[str] = None
    vintage: Optional[int] = None
    wine_type: Optional[WineType] = None
    quantity: int = 1
    price_cents: Optional[int] = None
    unit_price_cents: Optional[int] = None
    confidence: Optional[float] = None
    raw_text: Optional[str] = None
    region: Optional[str] = None
    country: Optional[str] = None

    @field_validator("quantity", mode="before")
    @classmethod
    def _default_quantity(cls, value: Any) -> Any:
        return 1 if value is None else value


class ExtractedWine(ReceiptLine):
    """A receipt line item with a client-side identifier."""

    id: str


class ReceiptScanPayload(BaseModel):
    """Complete JSON object expected from the model for a receipt."""

    model_config = ConfigDict(extra="ignore")

    vendor: Optional[str] = None
    vendor_type: Optional[VendorType] = None
    purchase_date: Optional[str] = None
    subtotal_cents: Optional[int] = None
    tax_cents: Optional[int] = None
    total_cents: Optional[int] = None
    wines: list[ReceiptLine] = Field(default_factory=list)
    raw_text: Optional[str] = None

    @field_validator("vendor_type", mode="before")
    @classmethod
    def _normalize_vendor_type(cls, value: Any) -> Optional[str]:
        if isinstance(value, str) and value.strip().lower() in _VENDOR_TYPES:
            return value.strip().lower()
        return None

    @field_validator("wines", mode="before")
    @classmethod
    def _wines_default(cls, value: Any) -> Any:
        return [] if value is None else value


class ReceiptScanResult(BaseModel):
    """Response body of ``POST /api/receipt/scan``."""

    success: bool
    vendor: Optional[str] = None
    vendor_type: Optional[VendorType] = None
    purchase_date: Optional[str] = None
    subtotal_cents: Optional[int] = None
    tax_cents: Optional[int] = None
    total_cents: Optional[int] = None
    wines: list[ExtractedWine] = Field(default_factory=list)
    raw_text: str = ""
    error: Optional[str] = None
