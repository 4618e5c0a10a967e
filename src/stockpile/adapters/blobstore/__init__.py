"""Blob store adapters for item photos."""

from __future__ import annotations

from typing import TYPE_CHECKING

from stockpile.config import HttpBlobConfig, LocalBlobConfig

from .http import HttpBlobStore
from .local import LocalBlobStore

if TYPE_CHECKING:
    from stockpile.config.blobs import BlobStoreConfig
    from stockpile.domain.ports.storage import BlobStore


def build_blob_store(config: BlobStoreConfig) -> BlobStore:
    """Instantiate the blob store selected by ``config``."""

    if isinstance(config, HttpBlobConfig):
        return HttpBlobStore(config=config)
    if isinstance(config, LocalBlobConfig):
        return LocalBlobStore(root=config.root)
    raise TypeError(f"Unsupported blob store config: {config!r}")


__all__ = ["HttpBlobStore", "LocalBlobStore", "build_blob_store"]
