"""Ports for persisting inventory records."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from stockpile.domain.model import InventoryItem, ItemRecord, RecordPatch


@runtime_checkable
class ItemLookup(Protocol):
    """Read-only view used while planning writes."""

    def get(self, key: str) -> ItemRecord | None: ...


@runtime_checkable
class ItemRepository(ItemLookup, Protocol):
    """Document collection keyed by item identity.

    Implementations raise ``RepositoryError`` for any transport, permission or
    storage failure.
    """

    def put(self, key: str, record: ItemRecord) -> None:
        """Store ``record`` under ``key``, replacing any existing document."""
        ...

    def merge(self, key: str, fields: RecordPatch) -> None:
        """Update the given fields of the document stored under ``key``.

        Raises ``RepositoryError`` when nothing is stored under ``key``.
        """
        ...

    def delete(self, key: str) -> None:
        """Remove the document under ``key``; deleting a missing key is not an error."""
        ...

    def list_items(self) -> list[InventoryItem]: ...
