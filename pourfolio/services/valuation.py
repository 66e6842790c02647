"""Cellar portfolio valuation."""

from collections.abc import Iterable, Mapping

from beanie import PydanticObjectId

from pourfolio.models.cellar import CellarItem
from pourfolio.models.enums import WineType
from pourfolio.schemas.cellar import CellarValueSummary, TypeBreakdown

UNKNOWN_TYPE = "unknown"


def bottle_values(item: CellarItem) -> tuple[int, int]:
    """Return (purchase, market) value in cents for all bottles of an item.

    The market value falls back to the purchase price when unset.
    """
    purchase = (item.purchase_price_cents or 0) * item.quantity
    market_unit = item.current_market_value_cents or item.purchase_price_cents or 0
    return purchase, market_unit * item.quantity


def summarize_cellar_value(
    items: Iterable[CellarItem],
    wine_types: Mapping[PydanticObjectId, WineType | None],
) -> CellarValueSummary:
    """Aggregate bottle counts and values over cellar items.

    Args:
        items: In-cellar items to value.
        wine_types: Wine type of each linked catalogue wine, by reference id.

    Returns:
        Totals, gain/loss and a per-type breakdown.
    """
    total_bottles = 0
    total_purchase = 0
    total_market = 0
    by_type: dict[str, TypeBreakdown] = {}

    for item in items:
        purchase, market = bottle_values(item)
        total_bottles += item.quantity
        total_purchase += purchase
        total_market += market

        wine_type = wine_types.get(item.wine_reference_id) if item.wine_reference_id else None
        key = wine_type.value if wine_type else UNKNOWN_TYPE
        bucket = by_type.setdefault(key, TypeBreakdown())
        bucket.bottles += item.quantity
        bucket.purchase_cents += purchase
        bucket.market_cents += market

    gain_loss = total_market - total_purchase
    percentage = (gain_loss / total_purchase * 100) if total_purchase > 0 else 0.0

    return CellarValueSummary(
        total_bottles=total_bottles,
        total_purchase_cents=total_purchase,
        total_market_cents=total_market,
        gain_loss_cents=gain_loss,
        gain_loss_percentage=percentage,
        by_type=by_type,
    )
