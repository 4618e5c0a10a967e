"""Application configuration helpers."""

from __future__ import annotations

from .blobs import HttpBlobConfig, LocalBlobConfig, get_blob_store_config
from .env import require_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .logging import configure_logging
from .storage import DatabaseConfig, StorageConfig, get_database_config, get_storage_config

__all__ = [
    "ConfigurationError",
    "DatabaseConfig",
    "HttpBlobConfig",
    "LocalBlobConfig",
    "MissingConfigurationError",
    "StorageConfig",
    "configure_logging",
    "get_blob_store_config",
    "get_database_config",
    "get_storage_config",
    "require_env_var",
    "require_env_vars",
]
