"""Tasting rating document model with embedded food pairings."""

from datetime import datetime, timezone
from typing import Optional

from beanie import Document, Indexed, PydanticObjectId
from pydantic import BaseModel, Field

from pourfolio.models.enums import (
    AcidityLevel,
    BodyLevel,
    DishCategory,
    FinishLength,
    SweetnessLevel,
    TanninLevel,
)


class FoodPairing(BaseModel):
    """Embedded subdocument for a dish tasted with the wine."""

    dish_name: str
    dish_category: Optional[DishCategory] = None
    cuisine_type: Optional[str] = None
    pairing_rating: Optional[int] = Field(default=None, ge=1, le=5)
    pairing_notes: Optional[str] = None
    would_recommend: bool = True


class Rating(Document):
    """A user's tasting note and score for a wine."""

    owner_id: Indexed(PydanticObjectId)
    inventory_id: Optional[Indexed(PydanticObjectId)] = None
    wine_reference_id: Optional[PydanticObjectId] = None

    score: int = Field(..., ge=0, le=100)
    tasting_notes: Optional[str] = None
    appearance_notes: Optional[str] = None
    nose_notes: Optional[str] = None
    palate_notes: Optional[str] = None

    # Structured tasting
    body: Optional[BodyLevel] = None
    tannins: Optional[TanninLevel] = None
    acidity: Optional[AcidityLevel] = None
    sweetness: Optional[SweetnessLevel] = None
    finish: Optional[FinishLength] = None

    occasion: Optional[str] = None
    venue: Optional[str] = None
    companions: list[str] = Field(default_factory=list)
    food_pairings: list[FoodPairing] = Field(default_factory=list)

    tasting_date: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    class Settings:
        name = "ratings"
        indexes = [
            "owner_id",
            "inventory_id",
        ]

    def __repr__(self) -> str:
        return f"<Rating(id={self.id}, score={self.score})>"
