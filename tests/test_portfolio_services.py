"""Tests for valuation, tasting and wishlist helpers (no database needed)."""

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

from beanie import PydanticObjectId

from pourfolio.models.enums import DishCategory, WineType, WishlistPriority, WishlistStatus
from pourfolio.schemas.rating import FoodPairingInput
from pourfolio.services.tasting import MAX_COMPANIONS, build_food_pairings, distinct_companions
from pourfolio.services.valuation import bottle_values, summarize_cellar_value
from pourfolio.services.wishlist import compute_stats, sort_by_priority

RED_REF = PydanticObjectId("000000000000000000000001")
WHITE_REF = PydanticObjectId("000000000000000000000002")


def cellar_item(quantity=1, purchase=None, market=None, reference=None):
    return SimpleNamespace(
        quantity=quantity,
        purchase_price_cents=purchase,
        current_market_value_cents=market,
        wine_reference_id=reference,
    )


def wishlist_item(priority, status=WishlistStatus.ACTIVE, target=None, age_days=0):
    return SimpleNamespace(
        priority=priority,
        status=status,
        target_price_cents=target,
        created_at=datetime(2024, 1, 10, tzinfo=timezone.utc) - timedelta(days=age_days),
    )


class TestValuation:
    """Tests for cellar valuation."""

    def test_bottle_values_multiplies_quantity(self):
        assert bottle_values(cellar_item(quantity=3, purchase=2000, market=3000)) == (6000, 9000)

    def test_market_falls_back_to_purchase(self):
        assert bottle_values(cellar_item(quantity=2, purchase=1500)) == (3000, 3000)

    def test_no_prices(self):
        assert bottle_values(cellar_item(quantity=4)) == (0, 0)

    def test_summary(self):
        items = [
            cellar_item(quantity=2, purchase=2000, market=5000, reference=RED_REF),
            cellar_item(quantity=1, purchase=1000, reference=WHITE_REF),
            cellar_item(quantity=3, purchase=1000, market=500),
        ]
        wine_types = {RED_REF: WineType.RED, WHITE_REF: WineType.WHITE}

        summary = summarize_cellar_value(items, wine_types)

        assert summary.total_bottles == 6
        assert summary.total_purchase_cents == 4000 + 1000 + 3000
        assert summary.total_market_cents == 10000 + 1000 + 1500
        assert summary.gain_loss_cents == 12500 - 8000
        assert summary.gain_loss_percentage == (4500 / 8000) * 100
        assert summary.by_type["red"].bottles == 2
        assert summary.by_type["white"].market_cents == 1000
        assert summary.by_type["unknown"].purchase_cents == 3000

    def test_reference_without_type_is_unknown(self):
        summary = summarize_cellar_value([cellar_item(reference=RED_REF)], {RED_REF: None})
        assert set(summary.by_type) == {"unknown"}

    def test_empty_cellar(self):
        summary = summarize_cellar_value([], {})
        assert summary.total_bottles == 0
        assert summary.gain_loss_percentage == 0.0
        assert summary.by_type == {}


class TestTasting:
    """Tests for food pairings and companions."""

    def test_blank_dish_names_dropped(self):
        pairings = build_food_pairings([
            FoodPairingInput(dish_name="  Lamb shank ", dish_category=DishCategory.LAMB, pairing_rating=5),
            FoodPairingInput(dish_name="   "),
            FoodPairingInput(),
        ])

        assert len(pairings) == 1
        assert pairings[0].dish_name == "Lamb shank"
        assert pairings[0].dish_category == DishCategory.LAMB
        assert pairings[0].would_recommend is True

    def test_distinct_companions_keeps_first_seen_order(self):
        result = distinct_companions([["Ana", "Ben"], None, ["Ben", "", "Cleo"], []])
        assert result == ["Ana", "Ben", "Cleo"]

    def test_distinct_companions_limit(self):
        lists = [[f"Friend {i}", f"Friend {i + 1}"] for i in range(0, 60, 2)]
        result = distinct_companions(lists)
        assert len(result) == MAX_COMPANIONS
        assert result[0] == "Friend 0"


class TestWishlistHelpers:
    """Tests for wishlist ordering and stats."""

    def test_sort_by_priority_then_newest(self):
        low = wishlist_item(WishlistPriority.LOW)
        must_old = wishlist_item(WishlistPriority.MUST_HAVE, age_days=5)
        must_new = wishlist_item(WishlistPriority.MUST_HAVE)
        medium = wishlist_item(WishlistPriority.MEDIUM)
        high = wishlist_item(WishlistPriority.HIGH)

        ordered = sort_by_priority([low, must_old, medium, must_new, high])

        assert ordered == [must_new, must_old, high, medium, low]

    def test_compute_stats(self):
        items = [
            wishlist_item(WishlistPriority.HIGH, target=3000),
            wishlist_item(WishlistPriority.HIGH, target=2000),
            wishlist_item(WishlistPriority.LOW),
            wishlist_item(WishlistPriority.MUST_HAVE, status=WishlistStatus.PURCHASED, target=9000),
            wishlist_item(WishlistPriority.MEDIUM, status=WishlistStatus.REMOVED, target=100),
        ]

        stats = compute_stats(items)

        assert stats.total == 5
        assert stats.active == 3
        assert stats.purchased == 1
        assert stats.by_priority == {"must-have": 0, "high": 2, "medium": 0, "low": 1}
        assert stats.estimated_cost_cents == 5000

    def test_empty_stats(self):
        stats = compute_stats([])
        assert stats.total == 0
        assert stats.estimated_cost_cents == 0
        assert list(stats.by_priority) == ["must-have", "high", "medium", "low"]
