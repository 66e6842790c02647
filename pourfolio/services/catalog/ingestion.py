"""Catalogue ingestion: normalize dataset rows, deduplicate and bulk insert.

The pipeline runs in three steps:

1. ``normalize_record`` maps each raw row to a ``NormalizedWine``.
2. ``deduplicate`` keeps the first wine seen per (name, producer, country).
3. ``persist_batches`` submits fixed-size batches one after another. A
   failing batch is counted as errors and the run carries on.
"""

import csv
import logging
import re
from collections.abc import Awaitable, Callable, Iterable, Iterator, Sequence
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pourfolio.models.enums import WineType
from pourfolio.models.wine_reference import WineReference

from .classifier import infer_wine_type
from .constants import CRITIC_SCORE_KEY
from .titles import extract_name

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 500
DEFAULT_PROGRESS_EVERY = 10

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")

InsertBatch = Callable[[list["NormalizedWine"]], Awaitable[Any]]


class WineRecord(BaseModel):
    """One row of the Winemag review dataset."""

    model_config = ConfigDict(extra="ignore")

    title: str = ""
    winery: str = ""
    variety: str = ""
    country: str = ""
    province: str = ""
    region_1: str = ""
    region_2: str = ""
    points: str = ""
    description: str = ""
    taster_name: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _blank_for_missing(cls, value: Any) -> str:
        if value is None:
            return ""
        return str(value)


class NormalizedWine(BaseModel):
    """Canonical catalogue record as stored in ``wine_reference``."""

    name: str
    producer: Optional[str] = None
    region: Optional[str] = None
    sub_region: Optional[str] = None
    country: Optional[str] = None
    grape_varieties: list[str] = Field(default_factory=list)
    wine_type: Optional[WineType] = None
    critic_scores: dict[str, Any] = Field(default_factory=dict)

    @property
    def dedupe_key(self) -> str:
        return f"{self.name}|{self.producer or ''}|{self.country or ''}".lower()

    def to_document(self) -> WineReference:
        return WineReference(**self.model_dump())


class IngestionSummary(BaseModel):
    """Outcome of one ingestion run."""

    records_read: int = 0
    unique: int = 0
    batches: int = 0
    inserted: int = 0
    errors: int = 0


def parse_points(points: str) -> int | None:
    """Parse a critic score, reading leading digits like ``"87"`` or ``"87.5"``.

    Zero and unparseable values count as no score.
    """
    match = _LEADING_INT_RE.match(points or "")
    if not match:
        return None
    value = int(match.group(1))
    return value or None


def normalize_record(record: WineRecord) -> NormalizedWine | None:
    """Map a dataset row to a NormalizedWine, or None for a row without a title."""
    if not record.title.strip():
        return None

    points = parse_points(record.points)
    critic_scores: dict[str, Any] = {}
    if points is not None:
        critic_scores = {
            CRITIC_SCORE_KEY: points,
            "description": record.description or None,
            "taster": record.taster_name or None,
        }

    return NormalizedWine(
        name=extract_name(record.title, record.winery),
        producer=record.winery or None,
        region=record.region_1 or record.province or None,
        sub_region=record.region_2 or None,
        country=record.country or None,
        grape_varieties=[record.variety] if record.variety else [],
        wine_type=infer_wine_type(record.variety),
        critic_scores=critic_scores,
    )


def deduplicate(wines: Iterable[NormalizedWine]) -> list[NormalizedWine]:
    """Keep the first wine per case-insensitive (name, producer, country)."""
    seen: set[str] = set()
    unique: list[NormalizedWine] = []
    for wine in wines:
        key = wine.dedupe_key
        if key in seen:
            continue
        seen.add(key)
        unique.append(wine)
    return unique


def iter_batches(items: Sequence[Any], batch_size: int) -> Iterator[list[Any]]:
    """Yield consecutive slices of at most ``batch_size`` items."""
    if batch_size <= 0:
        raise ValueError("batch_size must be positive")
    for start in range(0, len(items), batch_size):
        yield list(items[start : start + batch_size])


async def insert_wine_references(batch: list[NormalizedWine]) -> None:
    """Bulk insert one batch into the ``wine_reference`` collection."""
    await WineReference.insert_many([wine.to_document() for wine in batch])


async def persist_batches(
    wines: Sequence[NormalizedWine],
    insert_batch: InsertBatch = insert_wine_references,
    batch_size: int = DEFAULT_BATCH_SIZE,
    progress_every: int = DEFAULT_PROGRESS_EVERY,
) -> IngestionSummary:
    """Insert wines in sequential batches with per-batch failure isolation.

    Each batch is one ``insert_batch`` call. When a call raises, the whole
    batch is counted as errors and the next batch is attempted; failed
    batches are not retried.

    Args:
        wines: Deduplicated wines, in insertion order.
        insert_batch: Coroutine function persisting one batch.
        batch_size: Maximum number of wines per call.
        progress_every: Log progress every this many batches.

    Returns:
        Summary with batch, inserted and error counts.
    """
    summary = IngestionSummary(unique=len(wines))
    total = len(wines)

    for index, batch in enumerate(iter_batches(wines, batch_size)):
        summary.batches += 1
        try:
            await insert_batch(batch)
        except Exception as e:
            summary.errors += len(batch)
            logger.error("Batch %d failed (%d wines): %s", index + 1, len(batch), e)
        else:
            summary.inserted += len(batch)

        if progress_every > 0 and index % progress_every == 0:
            done = index * batch_size
            logger.info(
                "Progress: %.1f%% (%d inserted, %d errors)",
                done / total * 100 if total else 100.0,
                summary.inserted,
                summary.errors,
            )

    return summary


def read_dataset(path: Path) -> Iterator[WineRecord]:
    """Stream rows from a Winemag CSV file as WineRecord instances."""
    with open(path, newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        for row in reader:
            if not any((value or "").strip() for value in row.values() if isinstance(value, str)):
                continue
            yield WineRecord.model_validate(row)


def prepare_wines(records: Iterable[WineRecord]) -> tuple[int, list[NormalizedWine]]:
    """Normalize and deduplicate records.

    Returns:
        Tuple of (records read, unique normalized wines).
    """
    count = 0
    normalized: list[NormalizedWine] = []
    for record in records:
        count += 1
        wine = normalize_record(record)
        if wine is None:
            logger.debug("Skipping row %d without a title", count)
            continue
        normalized.append(wine)
    return count, deduplicate(normalized)


async def run_ingestion(
    records: Iterable[WineRecord],
    insert_batch: InsertBatch = insert_wine_references,
    batch_size: int = DEFAULT_BATCH_SIZE,
    progress_every: int = DEFAULT_PROGRESS_EVERY,
) -> IngestionSummary:
    """Run the full pipeline over dataset records.

    Deduplication finishes before the first batch is submitted.
    """
    records_read, unique = prepare_wines(records)
    logger.info("Parsed %d wine records", records_read)
    logger.info("%d unique wines after deduplication", len(unique))

    summary = await persist_batches(
        unique,
        insert_batch=insert_batch,
        batch_size=batch_size,
        progress_every=progress_every,
    )
    summary.records_read = records_read
    return summary
