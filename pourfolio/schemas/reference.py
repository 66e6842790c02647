"""Pydantic schemas for catalogue search results."""

from pydantic import BaseModel

from pourfolio.models.enums import WineType
from pourfolio.models.wine_reference import WineReference
from pourfolio.services.catalog.constants import CRITIC_SCORE_KEY


class WineSearchResult(BaseModel):
    """A catalogue wine reshaped for the search dropdown."""

    id: str
    name: str
    producer: str | None = None
    region: str | None = None
    country: str | None = None
    wine_type: WineType | None = None
    grape_variety: str | None = None
    rating: int | None = None
    description: str | None = None

    @classmethod
    def from_reference(cls, wine: WineReference) -> "WineSearchResult":
        scores = wine.critic_scores or {}
        return cls(
            id=str(wine.id),
            name=wine.name,
            producer=wine.producer,
            region=wine.region,
            country=wine.country,
            wine_type=wine.wine_type,
            grape_variety=wine.grape_varieties[0] if wine.grape_varieties else None,
            rating=scores.get(CRITIC_SCORE_KEY),
            description=scores.get("description"),
        )


class WineSearchResponse(BaseModel):
    """Body of ``GET /api/wines/search``."""

    wines: list[WineSearchResult]
    error: str | None = None
