"""Blob store configuration values."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .env import float_env_var, optional_env_var, require_env_var
from .errors import ConfigurationError
from .storage import StorageConfig, get_storage_config

BLOB_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True, slots=True)
class LocalBlobConfig:
    root: Path


@dataclass(frozen=True, slots=True)
class HttpBlobConfig:
    base_url: str
    token: str | None = None
    timeout_seconds: float = BLOB_TIMEOUT_SECONDS


type BlobStoreConfig = LocalBlobConfig | HttpBlobConfig


def get_blob_store_config(*, storage: StorageConfig | None = None) -> BlobStoreConfig:
    """Select the blob backend from ``STOCKPILE_BLOB_BACKEND`` (``local`` by default)."""

    backend = (optional_env_var("STOCKPILE_BLOB_BACKEND") or "local").lower()
    if backend == "local":
        blob_dir = optional_env_var("STOCKPILE_BLOB_DIR")
        if blob_dir is not None:
            return LocalBlobConfig(root=Path(blob_dir).expanduser().resolve())
        storage_config = storage or get_storage_config()
        return LocalBlobConfig(root=storage_config.blob_dir())
    if backend == "http":
        return HttpBlobConfig(
            base_url=require_env_var("STOCKPILE_BLOB_URL").strip().rstrip("/"),
            token=optional_env_var("STOCKPILE_BLOB_TOKEN"),
            timeout_seconds=float_env_var(
                "STOCKPILE_BLOB_TIMEOUT", default=BLOB_TIMEOUT_SECONDS
            ),
        )
    raise ConfigurationError(f"Unsupported blob backend: {backend!r}")
