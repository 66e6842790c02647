"""Title parsing for catalogue records: vintage year and clean wine name."""

import re

from .constants import VINTAGE_PATTERN

# ASCII digits and word boundaries, so "Rosé2015" still yields 2015
_VINTAGE_RE = re.compile(VINTAGE_PATTERN, re.ASCII)
_WHITESPACE_RE = re.compile(r"\s+")


def extract_vintage(title: str) -> int | None:
    """Return the first 19xx/20xx year token in the title, or None."""
    match = _VINTAGE_RE.search(title)
    return int(match.group(0)) if match else None


def extract_name(title: str, winery: str | None) -> str:
    """Strip the vintage and a leading producer name from a title.

    Only the first year token is removed. The producer prefix is matched
    case-insensitively. If nothing is left, the original title is returned
    unchanged.

    Examples:
        >>> extract_name("Château Margaux 2015 Grand Vin", "Château Margaux")
        'Grand Vin'
        >>> extract_name("2015", "Unrelated Winery")
        '2015'
    """
    name = _VINTAGE_RE.sub("", title, count=1).strip()
    winery = winery or ""
    if name.lower().startswith(winery.lower()):
        name = name[len(winery):].strip()
    name = _WHITESPACE_RE.sub(" ", name).strip()
    return name or title
