"""Pydantic schemas for tasting ratings."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pourfolio.models.enums import (
    AcidityLevel,
    BodyLevel,
    DishCategory,
    FinishLength,
    SweetnessLevel,
    TanninLevel,
)
from pourfolio.models.rating import FoodPairing


class FoodPairingInput(BaseModel):
    """A dish submitted with a rating; blank dish names are ignored."""

    dish_name: str = ""
    dish_category: DishCategory | None = None
    cuisine_type: str | None = None
    pairing_rating: int | None = Field(None, ge=1, le=5)
    pairing_notes: str | None = None
    would_recommend: bool = True


class RatingCreate(BaseModel):
    """Schema for adding a rating."""

    inventory_id: str | None = None
    wine_reference_id: str | None = None
    score: int = Field(..., ge=0, le=100)
    tasting_notes: str | None = Field(None, max_length=5000)
    appearance_notes: str | None = None
    nose_notes: str | None = None
    palate_notes: str | None = None
    body: BodyLevel | None = None
    tannins: TanninLevel | None = None
    acidity: AcidityLevel | None = None
    sweetness: SweetnessLevel | None = None
    finish: FinishLength | None = None
    occasion: str | None = None
    venue: str | None = None
    companions: list[str] = Field(default_factory=list)
    food_pairings: list[FoodPairingInput] = Field(default_factory=list)
    tasting_date: datetime | None = None


class RatingResponse(BaseModel):
    """Rating as returned by the API."""

    id: str
    inventory_id: str | None = None
    wine_reference_id: str | None = None
    score: int
    tasting_notes: str | None = None
    appearance_notes: str | None = None
    nose_notes: str | None = None
    palate_notes: str | None = None
    body: BodyLevel | None = None
    tannins: TanninLevel | None = None
    acidity: AcidityLevel | None = None
    sweetness: SweetnessLevel | None = None
    finish: FinishLength | None = None
    occasion: str | None = None
    venue: str | None = None
    companions: list[str] = Field(default_factory=list)
    food_pairings: list[FoodPairing] = Field(default_factory=list)
    tasting_date: datetime
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_validator("id", "inventory_id", "wine_reference_id", mode="before")
    @classmethod
    def _stringify_object_id(cls, value: Any) -> str | None:
        return str(value) if value is not None else None
