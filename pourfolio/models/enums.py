"""Enumerations shared by Pourfolio documents and schemas."""

from enum import Enum


class WineType(str, Enum):
    """Closed set of wine style categories."""

    RED = "red"
    WHITE = "white"
    ROSE = "rose"
    SPARKLING = "sparkling"
    DESSERT = "dessert"
    FORTIFIED = "fortified"


class InventoryStatus(str, Enum):
    """Lifecycle of a bottle entry in the cellar."""

    IN_CELLAR = "in_cellar"
    CONSUMED = "consumed"
    GIFTED = "gifted"
    SOLD = "sold"


class MarketValueSource(str, Enum):
    """Where a bottle's current market value came from."""

    MANUAL = "manual"
    WINE_SEARCHER = "wine-searcher"
    VIVINO = "vivino"
    ESTIMATE = "estimate"


class WishlistPriority(str, Enum):
    """Wishlist priority, lowest first."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    MUST_HAVE = "must-have"

    @property
    def rank(self) -> int:
        return list(WishlistPriority).index(self)


class WishlistStatus(str, Enum):
    """Status of a wishlist entry."""

    ACTIVE = "active"
    PURCHASED = "purchased"
    UNAVAILABLE = "unavailable"
    REMOVED = "removed"


class BodyLevel(str, Enum):
    LIGHT = "light"
    MEDIUM_LIGHT = "medium-light"
    MEDIUM = "medium"
    MEDIUM_FULL = "medium-full"
    FULL = "full"


class TanninLevel(str, Enum):
    NONE = "none"
    LOW = "low"
    MEDIUM_LOW = "medium-low"
    MEDIUM = "medium"
    MEDIUM_HIGH = "medium-high"
    HIGH = "high"


class AcidityLevel(str, Enum):
    LOW = "low"
    MEDIUM_LOW = "medium-low"
    MEDIUM = "medium"
    MEDIUM_HIGH = "medium-high"
    HIGH = "high"


class SweetnessLevel(str, Enum):
    BONE_DRY = "bone-dry"
    DRY = "dry"
    OFF_DRY = "off-dry"
    MEDIUM_SWEET = "medium-sweet"
    SWEET = "sweet"


class FinishLength(str, Enum):
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"
    VERY_LONG = "very-long"


class DishCategory(str, Enum):
    """Food pairing dish categories."""

    APPETIZER = "appetizer"
    SOUP = "soup"
    SALAD = "salad"
    PASTA = "pasta"
    SEAFOOD = "seafood"
    POULTRY = "poultry"
    BEEF = "beef"
    PORK = "pork"
    LAMB = "lamb"
    GAME = "game"
    VEGETARIAN = "vegetarian"
    CHEESE = "cheese"
    DESSERT = "dessert"
    OTHER = "other"
