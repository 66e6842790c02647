"""Pourfolio configuration module.

This module provides TOML-based configuration with environment variable overrides.

Configuration is loaded from the following locations (in order of priority):
1. Environment variables (highest priority)
2. ./config.toml (project root - for development)
3. ~/.config/pourfolio/config.toml (user config)
4. /etc/pourfolio/config.toml (system config)

Secrets are loaded from secrets.env files in the same directories.
"""

from pourfolio.config.schema import (
    AuthConfig,
    DatabaseConfig,
    IngestionConfig,
    PourfolioConfig,
    SecretsConfig,
    ServerConfig,
    StorageConfig,
    VisionConfig,
)
from pourfolio.config.settings import get_settings, reset_settings, settings

__all__ = [
    "AuthConfig",
    "DatabaseConfig",
    "IngestionConfig",
    "PourfolioConfig",
    "SecretsConfig",
    "ServerConfig",
    "StorageConfig",
    "VisionConfig",
    "get_settings",
    "reset_settings",
    "settings",
]
