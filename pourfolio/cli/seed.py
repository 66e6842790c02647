"""Seed the wine reference catalogue from the Winemag review dataset.

Usage:
    pourfolio-seed

The dataset path and the MongoDB URL come from config.toml or the
environment (POURFOLIO_INGESTION_DATASET_PATH, POURFOLIO_MONGODB_URL). The
database URL must be set explicitly; the built-in localhost default is not
used for seeding.
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from pydantic import ValidationError
from pymongo.errors import PyMongoError

from pourfolio.config import settings
from pourfolio.database import close_db, init_db
from pourfolio.services.catalog import IngestionSummary, read_dataset, run_ingestion

logger = logging.getLogger("pourfolio.cli.seed")


class ConfigurationError(Exception):
    """Required configuration for seeding is missing."""


def preflight() -> Path:
    """Check configuration before touching the database.

    Returns:
        Path of the dataset file.

    Raises:
        ValueError: If a configuration value cannot be parsed or validated.
        ConfigurationError: If the MongoDB URL is not configured or the
            dataset file does not exist.
    """
    if not settings.mongodb_url_configured:
        raise ConfigurationError(
            "Missing MongoDB URL. Set POURFOLIO_MONGODB_URL or "
            "[database] mongodb_url in config.toml"
        )

    dataset_path = settings.dataset_path
    if not dataset_path.is_file():
        raise ConfigurationError(f"CSV file not found at: {dataset_path.resolve()}")

    return dataset_path


async def seed(dataset_path: Path) -> IngestionSummary:
    """Run the ingestion pipeline against the configured database."""
    await init_db()
    try:
        dataset_path = preflight()
    except ConfigurationError as e:
        logger.error("%s", e)
        return 1
    except (ValueError, ValidationError) as e:
        logger.error("Invalid configuration: %s", e)
        return 1

    try:
        summary = asyncio.run(seed(dataset_path))
    except PyMongoError as e:
        logger.error("Database error: %s", e)
        return 1
    except UnicodeDecodeError as e:
        logger.error("CSV file %s is not valid UTF-8: %s", dataset_path, e)
        return 1

    logger.info("Seeding complete!")
    logger.info("  Records read: %d", summary.records_read)
    logger.info("  Unique wines: %d", summary.unique)
    logger.info("  Inserted: %d", summary.inserted)
    logger.info("  Errors: %d", summary.errors)
    return 0


if __name__ == "__main__":
    sys.exit(main())
