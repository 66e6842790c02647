"""Global settings instance for Pourfolio.

Combines configuration from config.toml, secrets from secrets.env and
environment variable overrides behind a flat property interface.
"""

import logging
import secrets as secrets_module
from pathlib import Path

from pourfolio.config.loader import load_config, load_secrets
from pourfolio.config.schema import PourfolioConfig, SecretsConfig

logger = logging.getLogger(__name__)


class Settings:
    """Unified settings object combining config and secrets."""

    def __init__(
        self,
        config: PourfolioConfig | None = None,
        secrets: SecretsConfig | None = None,
    ):
        """Initialize settings.

        Args:
            config: Optional PourfolioConfig instance. If not provided, loads from file.
            secrets: Optional SecretsConfig instance. If not provided, loads from file.
        """
        self._config = config or load_config()
        self._secrets = secrets or load_secrets()

    @property
    def config(self) -> PourfolioConfig:
        """Get the full configuration object."""
        return self._config

    @property
    def secrets(self) -> SecretsConfig:
        """Get the secrets configuration object."""
        return self._secrets

    # Application
    @property
    def app_name(self) -> str:
        return self._config.app_name

    @property
    def debug(self) -> bool:
        return self._config.server.debug

    # Server
    @property
    def host(self) -> str:
        return self._config.server.host

    @property
    def port(self) -> int:
        return self._config.server.port

    @property
    def rate_limit_per_minute(self) -> int:
        return self._config.server.rate_limit_per_minute

    @property
    def cors_origins(self) -> list[str]:
        return self._config.server.cors_origins

    # Database
    @property
    def mongodb_url(self) -> str:
        return self._config.database.mongodb_url

    @property
    def mongodb_url_configured(self) -> bool:
        """Whether the database URL was set explicitly rather than defaulted."""
        return "mongodb_url" in self._config.database.model_fields_set

    @property
    def mongodb_database(self) -> str:
        return self._config.database.mongodb_database

    @property
    def min_pool_size(self) -> int:
        return self._config.database.min_pool_size

    @property
    def max_pool_size(self) -> int:
        return self._config.database.max_pool_size

    # Storage
    @property
    def max_upload_size_bytes(self) -> int:
        return self._config.storage.max_upload_bytes

    # Vision
    @property
    def vision_model(self) -> str:
        return self._config.vision.model

    @property
    def label_max_tokens(self) -> int:
        return self._config.vision.label_max_tokens

    @property
    def receipt_max_tokens(self) -> int:
        return self._config.vision.receipt_max_tokens

    @property
    def scan_rate_limit(self) -> str:
        return self._config.vision.scan_rate_limit

    # Auth
    @property
    def registration_enabled(self) -> bool:
        return self._config.auth.registration_enabled

    @property
    def auth_rate_limit_per_minute(self) -> int:
        return self._config.auth.auth_rate_limit_per_minute

    # Ingestion
    @property
    def dataset_path(self) -> Path:
        return self._config.ingestion.dataset_path

    @property
    def ingestion_batch_size(self) -> int:
        return self._config.ingestion.batch_size

    @property
    def ingestion_progress_every(self) -> int:
        return self._config.ingestion.progress_every

    # Secrets
    @property
    def secret_key(self) -> str:
        """JWT signing key; a random one is generated on first use if none is set."""
        if not self._secrets.secret_key:
            self._secrets.secret_key = secrets_module.token_urlsafe(32)
            logger.warning(
                "SECURITY WARNING: No secret key configured. "
                "A random secret key has been generated. JWT tokens will be invalidated "
                "when the server restarts. Set POURFOLIO_SECRET_KEY for production use."
            )
        return self._secrets.secret_key

    @property
    def anthropic_api_key(self) -> str | None:
        return self._secrets.anthropic_api_key


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance, loading it on first use."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset the global settings instance so the next access reloads it."""
    global _settings
    _settings = None


class _SettingsProxy:
    """Proxy object that lazily loads settings on first access."""

    def __getattr__(self, name: str):
        return getattr(get_settings(), name)

    def __repr__(self) -> str:
        return repr(get_settings())


settings = _SettingsProxy()
