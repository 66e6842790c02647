"""Pydantic schemas for API requests and responses."""

from pourfolio.schemas.cellar import (
    CellarItemCreate,
    CellarItemResponse,
    CellarItemUpdate,
    CellarValueSummary,
    TypeBreakdown,
)
from pourfolio.schemas.rating import FoodPairingInput, RatingCreate, RatingResponse
from pourfolio.schemas.reference import WineSearchResponse, WineSearchResult
from pourfolio.schemas.scan import (
    ExtractedWine,
    LabelScanResult,
    LabelWine,
    ReceiptScanResult,
)
from pourfolio.schemas.wishlist import (
    WishlistItemCreate,
    WishlistItemResponse,
    WishlistItemUpdate,
    WishlistPurchase,
    WishlistStats,
)

__all__ = [
    # Cellar
    "CellarItemCreate",
    "CellarItemUpdate",
    "CellarItemResponse",
    "CellarValueSummary",
    "TypeBreakdown",
    # Ratings
    "FoodPairingInput",
    "RatingCreate",
    "RatingResponse",
    # Reference
    "WineSearchResponse",
    "WineSearchResult",
    # Scan
    "LabelWine",
    "LabelScanResult",
    "ExtractedWine",
    "ReceiptScanResult",
    # Wishlist
    "WishlistItemCreate",
    "WishlistItemUpdate",
    "WishlistItemResponse",
    "WishlistPurchase",
    "WishlistStats",
]
