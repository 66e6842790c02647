"""API routers for Pourfolio."""

from pourfolio.routers import auth, cellar, ratings, reference, scan, wishlist

__all__ = ["auth", "cellar", "ratings", "reference", "scan", "wishlist"]
