"""Public domain model surface."""

from __future__ import annotations

from stockpile.domain.model.enums import AddMethod, SubmissionIntent
from stockpile.domain.model.item import InventoryItem, ItemRecord, ItemSubmission, RecordPatch

__all__ = [
    "AddMethod",
    "InventoryItem",
    "ItemRecord",
    "ItemSubmission",
    "RecordPatch",
    "SubmissionIntent",
]
