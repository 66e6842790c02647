"""Helpers for tasting ratings: food pairings and companion suggestions."""

from collections.abc import Iterable

from pourfolio.models.rating import FoodPairing
from pourfolio.schemas.rating import FoodPairingInput

MAX_COMPANIONS = 20


def build_food_pairings(pairings: Iterable[FoodPairingInput]) -> list[FoodPairing]:
    """Convert submitted pairings, dropping those with a blank dish name."""
    return [
        FoodPairing(**{**pairing.model_dump(), "dish_name": pairing.dish_name.strip()})
        for pairing in pairings
        if pairing.dish_name.strip()
    ]


def distinct_companions(
    companion_lists: Iterable[list[str] | None],
    limit: int = MAX_COMPANIONS,
) -> list[str]:
    """Flatten companion lists (newest rating first) into distinct names.

    Order of first appearance is kept; empty names are skipped.
    """
    seen: set[str] = set()
    result: list[str] = []
    for companions in companion_lists:
        for name in companions or []:
            if not name or name in seen:
                continue
            seen.add(name)
            result.append(name)
            if len(result) >= limit:
                return result
    return result
