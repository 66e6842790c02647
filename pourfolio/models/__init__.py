"""MongoDB document models for Pourfolio."""

from pourfolio.models.cellar import CellarItem
from pourfolio.models.enums import (
    AcidityLevel,
    BodyLevel,
    DishCategory,
    FinishLength,
    InventoryStatus,
    MarketValueSource,
    SweetnessLevel,
    TanninLevel,
    WineType,
    WishlistPriority,
    WishlistStatus,
)
from pourfolio.models.rating import FoodPairing, Rating
from pourfolio.models.user import User
from pourfolio.models.wine_reference import WineReference
from pourfolio.models.wishlist import WishlistItem

__all__ = [
    # Documents
    "User",
    "WineReference",
    "CellarItem",
    "Rating",
    "WishlistItem",
    # Embedded subdocuments
    "FoodPairing",
    # Enumerations
    "WineType",
    "InventoryStatus",
    "MarketValueSource",
    "WishlistPriority",
    "WishlistStatus",
    "BodyLevel",
    "TanninLevel",
    "AcidityLevel",
    "SweetnessLevel",
    "FinishLength",
    "DishCategory",
]
