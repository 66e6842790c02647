"""Configuration loader for Pourfolio.

Loads configuration from TOML files and secrets from .env files.
Environment variables can override any configuration value.
"""

import logging
import os
from pathlib import Path
from typing import Any

from pourfolio.config.schema import PourfolioConfig, SecretsConfig

logger = logging.getLogger(__name__)

try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore[import-not-found]


# Environment variable -> (section, key)
ENV_MAPPINGS: dict[str, tuple[str, str]] = {
    # Server
    "POURFOLIO_SERVER_HOST": ("server", "host"),
    "POURFOLIO_SERVER_PORT": ("server", "port"),
    "POURFOLIO_SERVER_DEBUG": ("server", "debug"),
    "POURFOLIO_DEBUG": ("server", "debug"),  # Shorthand
    "POURFOLIO_HOST": ("server", "host"),  # Shorthand
    "POURFOLIO_PORT": ("server", "port"),  # Shorthand
    # Database
    "POURFOLIO_DATABASE_MONGODB_URL": ("database", "mongodb_url"),
    "POURFOLIO_DATABASE_MONGODB_DATABASE": ("database", "mongodb_database"),
    "POURFOLIO_MONGODB_URL": ("database", "mongodb_url"),  # Shorthand
    "POURFOLIO_MONGODB_DATABASE": ("database", "mongodb_database"),  # Shorthand
    # Storage
    "POURFOLIO_STORAGE_MAX_UPLOAD_MB": ("storage", "max_upload_mb"),
    # Vision
    "POURFOLIO_VISION_MODEL": ("vision", "model"),
    "POURFOLIO_VISION_SCAN_RATE_LIMIT": ("vision", "scan_rate_limit"),
    # Auth
    "POURFOLIO_AUTH_REGISTRATION_ENABLED": ("auth", "registration_enabled"),
    "POURFOLIO_REGISTRATION_ENABLED": ("auth", "registration_enabled"),  # Shorthand
    # Ingestion
    "POURFOLIO_INGESTION_DATASET_PATH": ("ingestion", "dataset_path"),
    "POURFOLIO_INGESTION_BATCH_SIZE": ("ingestion", "batch_size"),
}

INT_KEYS = {"port", "max_upload_mb", "batch_size", "progress_every"}
BOOL_KEYS = {"debug", "registration_enabled"}

# Secrets file / environment key -> SecretsConfig field
SECRET_KEYS: dict[str, str] = {
    "POURFOLIO_SECRET_KEY": "secret_key",
    "POURFOLIO_ANTHROPIC_API_KEY": "anthropic_api_key",
}


def get_config_search_paths() -> list[Path]:
    """Get the list of paths to search for configuration files.

    Returns paths in priority order (first found wins):
    1. ./config.toml (project root - for development)
    2. ~/.config/pourfolio/config.toml (user config)
    3. /etc/pourfolio/config.toml (system config)
    """
    return [
        Path.cwd() / "config.toml",
        Path.home() / ".config" / "pourfolio" / "config.toml",
        Path("/etc/pourfolio/config.toml"),
    ]


def get_secrets_search_paths() -> list[Path]:
    """Get the list of paths to search for secrets files, in priority order."""
    return [
        Path.cwd() / "secrets.env",
        Path.home() / ".config" / "pourfolio" / "secrets.env",
        Path("/etc/pourfolio/secrets.env"),
    ]


def find_config_file() -> Path | None:
    """Find the first existing config file from search paths."""
    for path in get_config_search_paths():
        if path.exists() and path.is_file():
            logger.debug("Found config file: %s", path)
            return path
    return None


def find_secrets_file() -> Path | None:
    """Find the first existing secrets file from search paths."""
    for path in get_secrets_search_paths():
        if path.exists() and path.is_file():
            logger.debug("Found secrets file: %s", path)
            return path
    return None


def load_toml_file(path: Path) -> dict[str, Any]:
    """Load a TOML file and return its contents as a dictionary."""
    with open(path, "rb") as f:
        return tomllib.load(f)


def parse_env_file(path: Path) -> dict[str, str]:
    """Parse a simple .env file into a dictionary.

    Supports KEY=value, KEY="quoted value", # comments and empty lines.
    """
    env_vars: dict[str, str] = {}

    with open(path) as f:
        for line in f:
            line = line.strip()

            if not line or line.startswith("#"):
                continue
            if "=" not in line:
                continue

            key, value = line.split("=", 1)
            key = key.strip()
            value = value.strip()

            if (value.startswith('"') and value.endswith('"')) or (
                value.startswith("'") and value.endswith("'")
            ):
                value = value[1:-1]

            env_vars[key] = value

    return env_vars


def apply_env_overrides(config_dict: dict[str, Any]) -> None:
    """Apply environment variable overrides to configuration dictionary.

    Note: This modifies config_dict in place.
    """
    for env_var, (section, key) in ENV_MAPPINGS.items():
        value = os.environ.get(env_var)
        if value is None:
            continue

        section_dict = config_dict.setdefault(section, {})

        if key in INT_KEYS:
            section_dict[key] = int(value)
        elif key in BOOL_KEYS:
            section_dict[key] = value.lower() in ("true", "1", "yes")
        else:
            section_dict[key] = value


def load_secrets(secrets_file: Path | None = None) -> SecretsConfig:
    """Load secrets from environment variables and optional secrets.env file.

    Environment variables take precedence over file values.
    """
    secrets_dict: dict[str, str | None] = {}

    if secrets_file is None:
        secrets_file = find_secrets_file()

    if secrets_file and secrets_file.exists():
        logger.info("Loading secrets from: %s", secrets_file)
        file_secrets = parse_env_file(secrets_file)
        for file_key, config_key in SECRET_KEYS.items():
            if file_key in file_secrets:
                secrets_dict[config_key] = file_secrets[file_key]

    env_mapping = dict(SECRET_KEYS)
    env_mapping["ANTHROPIC_API_KEY"] = "anthropic_api_key"  # Also check common name

    for env_var, config_key in env_mapping.items():
        value = os.environ.get(env_var)
        if value:
            secrets_dict[config_key] = value

    return SecretsConfig(**secrets_dict)


def load_config(config_file: Path | None = None) -> PourfolioConfig:
    """Load configuration from TOML file with environment variable overrides.

    Args:
        config_file: Optional path to config file. If not provided,
                     searches default locations.

    Returns:
        PourfolioConfig instance with all settings loaded.
    """
    config_dict: dict[str, Any] = {}

    if config_file is None:
        config_file = find_config_file()

    if config_file and config_file.exists():
        logger.info("Loading config from: %s", config_file)
        config_dict = load_toml_file(config_file)
    else:
        logger.info("No config file found, using defaults with env overrides")

    apply_env_overrides(config_dict)

    return PourfolioConfig(**config_dict)
