"""Wishlist ordering and statistics."""

from collections.abc import Iterable

from pourfolio.models.enums import WishlistPriority, WishlistStatus
from pourfolio.models.wishlist import WishlistItem
from pourfolio.schemas.wishlist import WishlistStats


def sort_by_priority(items: Iterable[WishlistItem]) -> list[WishlistItem]:
    """Order items by priority (must-have first), then newest first."""
    return sorted(
        items,
        key=lambda item: (item.priority.rank, item.created_at),
        reverse=True,
    )


def compute_stats(items: Iterable[WishlistItem]) -> WishlistStats:
    """Count items by status and active items by priority.

    The estimated cost sums target prices of active items.
    """
    items = list(items)
    active = [item for item in items if item.status == WishlistStatus.ACTIVE]
    by_priority = {priority.value: 0 for priority in reversed(WishlistPriority)}
    for item in active:
        by_priority[item.priority.value] += 1

    return WishlistStats(
        total=len(items),
        active=len(active),
        purchased=sum(1 for item in items if item.status == WishlistStatus.PURCHASED),
        by_priority=by_priority,
        estimated_cost_cents=sum(item.target_price_cents or 0 for item in active),
    )
