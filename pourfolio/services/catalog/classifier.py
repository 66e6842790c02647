"""Wine style classification from a grape variety string."""

from collections.abc import Callable

from pourfolio.models.enums import WineType

from .constants import (
    DESSERT_INDICATORS,
    GENERIC_RED_INDICATORS,
    GENERIC_WHITE_INDICATORS,
    RED_GRAPES,
    ROSE_EXACT,
    ROSE_INDICATORS,
    SPARKLING_INDICATORS,
    WHITE_GRAPES,
)


def _contains_any(needles: tuple[str, ...]) -> Callable[[str], bool]:
    return lambda variety: any(needle in variety for needle in needles)


def _rose(variety: str) -> bool:
    return any(needle in variety for needle in ROSE_INDICATORS) or variety in ROSE_EXACT


# Evaluated top to bottom; the first matching rule wins. Several rules
# overlap ("white port", "sparkling rosé"), so the order is significant.
CLASSIFICATION_RULES: list[tuple[Callable[[str], bool], WineType]] = [
    (_contains_any(SPARKLING_INDICATORS), WineType.SPARKLING),
    (_rose, WineType.ROSE),
    (_contains_any(DESSERT_INDICATORS), WineType.DESSERT),
    (_contains_any(WHITE_GRAPES), WineType.WHITE),
    (_contains_any(RED_GRAPES), WineType.RED),
    (_contains_any(GENERIC_RED_INDICATORS), WineType.RED),
    (_contains_any(GENERIC_WHITE_INDICATORS), WineType.WHITE),
]


def infer_wine_type(variety: str | None) -> WineType | None:
    """Guess the wine style from a grape variety label.

    Matching is case-insensitive substring containment. Returns None when
    no rule matches, including for an empty or missing variety.

    Examples:
        >>> infer_wine_type("Sparkling Blend")
        <WineType.SPARKLING: 'sparkling'>
        >>> infer_wine_type("Pinot Noir")
        <WineType.RED: 'red'>
        >>> infer_wine_type("Xinomavro") is None
        True
    """
    normalized = (variety or "").lower()
    for matches, wine_type in CLASSIFICATION_RULES:
        if matches(normalized):
            return wine_type
    return None
