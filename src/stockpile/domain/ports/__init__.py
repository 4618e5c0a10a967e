"""Domain port definitions for adapters."""

from __future__ import annotations

from .capture import CameraDevice, CameraStream
from .persistence import ItemLookup, ItemRepository
from .storage import BlobStore
from .unit_of_work import (
    InventoryRepositories,
    InventoryUnitOfWork,
    RepositoryCollection,
    UnitOfWork,
)

__all__ = [
    "BlobStore",
    "CameraDevice",
    "CameraStream",
    "InventoryRepositories",
    "InventoryUnitOfWork",
    "ItemLookup",
    "ItemRepository",
    "RepositoryCollection",
    "UnitOfWork",
]
