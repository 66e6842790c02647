"""Tests for the tasting rating endpoints."""

from datetime import datetime, timedelta, timezone

import pytest
from httpx import AsyncClient

from pourfolio.models import Rating, WineReference

pytestmark = pytest.mark.mongodb


class TestAddRating:
    """Tests for POST /api/ratings."""

    @pytest.mark.asyncio
    async def test_add_rating_for_cellar_item(self, client: AsyncClient, init_test_db):
        """A rating on a cellar item inherits the item's catalogue wine."""
        ref = WineReference(name="Monte Bello", producer="Ridge")
        await ref.insert()
        item = (await client.post("/api/cellar", json={"wine_reference_id": str(ref.id)})).json()

        response = await client.post(
            "/api/ratings",
            json={
                "inventory_id": item["id"],
                "score": 94,
                "tasting_notes": "Cassis, graphite, long finish.",
                "body": "full",
                "tannins": "medium-high",
                "companions": ["Ana", "Ben"],
                "food_pairings": [
                    {"dish_name": " Ribeye ", "dish_category": "beef", "pairing_rating": 5},
                    {"dish_name": ""},
                ],
            },
        )

        assert response.status_code == 201, response.text
        data = response.json()
        assert data["score"] == 94
        assert data["inventory_id"] == item["id"]
        assert data["wine_reference_id"] == str(ref.id)
        assert data["body"] == "full"
        assert len(data["food_pairings"]) == 1
        assert data["food_pairings"][0]["dish_name"] == "Ribeye"
        assert data["tasting_date"] is not None

    @pytest.mark.asyncio
    async def test_add_standalone_rating(self, client: AsyncClient):
        response = await client.post("/api/ratings", json={"score": 80})
        assert response.status_code == 201
        assert response.json()["inventory_id"] is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("score", [-1, 101])
    async def test_score_bounds(self, client: AsyncClient, score):
        response = await client.post("/api/ratings", json={"score": score})
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_invalid_enum(self, client: AsyncClient):
        response = await client.post("/api/ratings", json={"score": 80, "body": "chewy"})
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_cannot_rate_someone_elses_item(self, client: AsyncClient, other_client: AsyncClient):
        item = (await client.post("/api/cellar", json={"custom_name": "Mine"})).json()

        response = await other_client.post(
            "/api/ratings", json={"inventory_id": item["id"], "score": 50}
        )

        assert response.status_code == 404


class TestListRatings:
    """Tests for listing and deleting ratings."""

    @pytest.mark.asyncio
    async def test_filter_by_inventory(self, client: AsyncClient):
        item = (await client.post("/api/cellar", json={"custom_name": "Mine"})).json()
        await client.post("/api/ratings", json={"inventory_id": item["id"], "score": 90})
        await client.post("/api/ratings", json={"score": 70})

        all_ratings = (await client.get("/api/ratings")).json()
        filtered = (await client.get("/api/ratings", params={"inventory_id": item["id"]})).json()

        assert len(all_ratings) == 2
        assert [rating["score"] for rating in filtered] == [90]

    @pytest.mark.asyncio
    async def test_ratings_are_private(self, client: AsyncClient, other_client: AsyncClient):
        created = (await client.post("/api/ratings", json={"score": 88})).json()

        assert (await other_client.get("/api/ratings")).json() == []
        assert (await other_client.delete(f"/api/ratings/{created['id']}")).status_code == 404

    @pytest.mark.asyncio
    async def test_delete(self, client: AsyncClient):
        created = (await client.post("/api/ratings", json={"score": 88})).json()

        response = await client.delete(f"/api/ratings/{created['id']}")

        assert response.status_code == 204
        assert (await client.get("/api/ratings")).json() == []


class TestCompanions:
    """Tests for GET /api/ratings/companions."""

    @pytest.mark.asyncio
    async def test_distinct_newest_first(self, client: AsyncClient, test_user):
        now = datetime.now(timezone.utc)
        await Rating(owner_id=test_user.id, score=80, companions=["Ana", "Ben"],
                     created_at=now - timedelta(days=2)).insert()
        await Rating(owner_id=test_user.id, score=85, companions=["Cleo", "Ana"],
                     created_at=now - timedelta(days=1)).insert()
        await Rating(owner_id=test_user.id, score=90, created_at=now).insert()

        response = await client.get("/api/ratings/companions")

        assert response.status_code == 200
        assert response.json() == ["Cleo", "Ana", "Ben"]

    @pytest.mark.asyncio
    async def test_empty(self, client: AsyncClient):
        response = await client.get("/api/ratings/companions")
        assert response.json() == []
