"""Wine reference catalogue document model."""

from datetime import datetime, timezone
from typing import Any, Optional

from beanie import Document, Indexed
from pydantic import Field

from pourfolio.models.enums import WineType


class WineReference(Document):
    """A catalogue wine, shared by all users.

    Seeded from the critic-review dataset by ``pourfolio-seed`` and never
    updated by the seeding run afterwards.
    """

    name: Indexed(str)
    producer: Optional[Indexed(str)] = None
    region: Optional[str] = None
    sub_region: Optional[str] = None
    country: Optional[Indexed(str)] = None
    appellation: Optional[str] = None
    grape_varieties: list[str] = Field(default_factory=list)
    wine_type: Optional[WineType] = None
    alcohol_percentage: Optional[float] = None
    barcode: Optional[str] = None

    # Open map: score value, review text, taster
    critic_scores: dict[str, Any] = Field(default_factory=dict)

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    class Settings:
        name = "wine_reference"
        indexes = [
            "name",
            "producer",
            "country",
            "wine_type",
            [
                ("name", "text"),
                ("producer", "text"),
            ],
        ]

    def __repr__(self) -> str:
        return f"<WineReference(id={self.id}, name={self.name}, producer={self.producer})>"
