"""Tests for the wishlist endpoints."""

from datetime import datetime, timedelta, timezone

import pytest
from httpx import AsyncClient

from pourfolio.models import WishlistItem, WishlistPriority

pytestmark = pytest.mark.mongodb


async def add_wish(client: AsyncClient, **fields) -> dict:
    payload = {"custom_name": "Barolo", **fields}
    response = await client.post("/api/wishlist", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


class TestWishlistCrud:
    """Create, update and delete wishlist items."""

    @pytest.mark.asyncio
    async def test_add(self, client: AsyncClient):
        data = await add_wish(client, priority="high", target_price_cents=6000, custom_wine_type="red")

        assert data["status"] == "active"
        assert data["priority"] == "high"
        assert data["desired_quantity"] == 1
        assert data["custom_wine_type"] == "red"

    @pytest.mark.asyncio
    async def test_add_requires_identity(self, client: AsyncClient):
        response = await client.post("/api/wishlist", json={"priority": "low"})
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_invalid_priority(self, client: AsyncClient):
        response = await client.post("/api/wishlist", json={"custom_name": "X", "priority": "urgent"})
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_update(self, client: AsyncClient):
        item = await add_wish(client, notes="Ask the shop")

        response = await client.patch(f"/api/wishlist/{item['id']}", json={"priority": "must-have"})

        assert response.status_code == 200
        assert response.json()["priority"] == "must-have"
        assert response.json()["notes"] == "Ask the shop"

    @pytest.mark.asyncio
    async def test_delete(self, client: AsyncClient):
        item = await add_wish(client)

        assert (await client.delete(f"/api/wishlist/{item['id']}")).status_code == 204
        assert (await client.get("/api/wishlist")).json() == []

    @pytest.mark.asyncio
    async def test_private(self, client: AsyncClient, other_client: AsyncClient):
        item = await add_wish(client)

        assert (await other_client.get("/api/wishlist")).json() == []
        response = await other_client.post(f"/api/wishlist/{item['id']}/purchased")
        assert response.status_code == 404


class TestPurchase:
    """Tests for POST /api/wishlist/{id}/purchased."""

    @pytest.mark.asyncio
    async def test_mark_purchased_with_details(self, client: AsyncClient):
        item = await add_wish(client)

        response = await client.post(
            f"/api/wishlist/{item['id']}/purchased",
            json={"price_cents": 5500, "vendor": "Enoteca"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "purchased"
        assert data["purchased_price_cents"] == 5500
        assert data["purchased_from"] == "Enoteca"
        assert data["purchased_date"] is not None

    @pytest.mark.asyncio
    async def test_mark_purchased_without_body(self, client: AsyncClient):
        item = await add_wish(client)

        response = await client.post(f"/api/wishlist/{item['id']}/purchased")

        assert response.status_code == 200
        assert response.json()["status"] == "purchased"
        assert response.json()["purchased_price_cents"] is None


class TestListingAndStats:
    """Ordering, filtering and statistics."""

    @pytest.mark.asyncio
    async def test_priority_order(self, client: AsyncClient, test_user):
        now = datetime.now(timezone.utc)
        for name, priority, age in [
            ("Low", WishlistPriority.LOW, 0),
            ("Must old", WishlistPriority.MUST_HAVE, 3),
            ("Medium", WishlistPriority.MEDIUM, 1),
            ("Must new", WishlistPriority.MUST_HAVE, 0),
            ("High", WishlistPriority.HIGH, 2),
        ]:
            await WishlistItem(
                owner_id=test_user.id,
                custom_name=name,
                priority=priority,
                created_at=now - timedelta(days=age),
            ).insert()

        response = await client.get("/api/wishlist")

        assert [item["custom_name"] for item in response.json()] == [
            "Must new", "Must old", "High", "Medium", "Low",
        ]

    @pytest.mark.asyncio
    async def test_status_filter(self, client: AsyncClient):
        bought = await add_wish(client, custom_name="Bought")
        await add_wish(client, custom_name="Still wanted")
        await client.post(f"/api/wishlist/{bought['id']}/purchased")

        response = await client.get("/api/wishlist", params={"status": "active"})

        assert [item["custom_name"] for item in response.json()] == ["Still wanted"]

    @pytest.mark.asyncio
    async def test_stats(self, client: AsyncClient):
        await add_wish(client, priority="high", target_price_cents=3000)
        await add_wish(client, priority="low", target_price_cents=1000)
        bought = await add_wish(client, priority="must-have", target_price_cents=9000)
        await client.post(f"/api/wishlist/{bought['id']}/purchased")

        response = await client.get("/api/wishlist/stats")

        assert response.status_code == 200
        assert response.json() == {
            "total": 3,
            "active": 2,
            "purchased": 1,
            "by_priority": {"must-have": 0, "high": 1, "medium": 0, "low": 1},
            "estimated_cost_cents": 4000,
        }
