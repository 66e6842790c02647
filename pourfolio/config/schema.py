"""Pydantic models for Pourfolio configuration.

These models define the structure of config.toml and secrets.env files.
"""

from pathlib import Path

from pydantic import BaseModel, Field


class ServerConfig(BaseModel):
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False
    rate_limit_per_minute: int = 60
    # CORS configuration - empty list means same-origin only
    cors_origins: list[str] = []


class DatabaseConfig(BaseModel):
    """MongoDB database configuration."""

    mongodb_url: str = "mongodb://localhost:27017"
    mongodb_database: str = "pourfolio"
    min_pool_size: int = 10
    max_pool_size: int = 100


class StorageConfig(BaseModel):
    """Upload limits."""

    max_upload_mb: int = 10

    @property
    def max_upload_bytes(self) -> int:
        """Get max upload size in bytes."""
        return self.max_upload_mb * 1024 * 1024


class VisionConfig(BaseModel):
    """Claude Vision configuration for label and receipt scanning."""

    model: str = "claude-sonnet-4-20250514"
    label_max_tokens: int = 2048
    receipt_max_tokens: int = 4096
    scan_rate_limit: str = "10/minute"


class AuthConfig(BaseModel):
    """Authentication configuration."""

    registration_enabled: bool = True
    auth_rate_limit_per_minute: int = 30


class IngestionConfig(BaseModel):
    """Reference catalogue seeding configuration."""

    dataset_path: Path = Field(
        default_factory=lambda: Path("archive/winemag-data-130k-v2.csv")
    )
    batch_size: int = Field(default=500, gt=0)
    progress_every: int = Field(default=10, gt=0)


class PourfolioConfig(BaseModel):
    """Main Pourfolio configuration loaded from config.toml."""

    app_name: str = "Pourfolio"
    server: ServerConfig = Field(default_factory=ServerConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    vision: VisionConfig = Field(default_factory=VisionConfig)
    auth: AuthConfig = Field(default_factory=AuthConfig)
    ingestion: IngestionConfig = Field(default_factory=IngestionConfig)


class SecretsConfig(BaseModel):
    """Secrets loaded from secrets.env file.

    These are sensitive values that should not be stored in config.toml.
    """

    secret_key: str | None = None
    anthropic_api_key: str | None = None
