"""Catalogue services: wine style classification, title parsing and ingestion."""

from .classifier import CLASSIFICATION_RULES, infer_wine_type
from .ingestion import (
    DEFAULT_BATCH_SIZE,
    IngestionSummary,
    NormalizedWine,
    WineRecord,
    deduplicate,
    insert_wine_references,
    iter_batches,
    normalize_record,
    parse_points,
    persist_batches,
    prepare_wines,
    read_dataset,
    run_ingestion,
)
from .titles import extract_name, extract_vintage

__all__ = [
    # Classification
    "CLASSIFICATION_RULES",
    "infer_wine_type",
    # Titles
    "extract_name",
    "extract_vintage",
    # Ingestion
    "DEFAULT_BATCH_SIZE",
    "IngestionSummary",
    "NormalizedWine",
    "WineRecord",
    "deduplicate",
    "insert_wine_references",
    "iter_batches",
    "normalize_record",
    "parse_points",
    "persist_batches",
    "prepare_wines",
    "read_dataset",
    "run_ingestion",
]
