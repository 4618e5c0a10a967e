"""Inventory items, stored records and submissions."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TypedDict

from .enums import AddMethod, SubmissionIntent


@dataclass(frozen=True, slots=True, kw_only=True)
class ItemRecord:
    """Document stored under an item's identity."""

    count: int
    add_method: AddMethod = AddMethod.MANUAL
    image: str | None = None


class RecordPatch(TypedDict, total=False):
    """Partial document applied by ``ItemRepository.merge``.

    Absent keys are left untouched; an explicit ``image=None`` clears the image.
    """

    count: int
    add_method: AddMethod
    image: str | None


@dataclass(frozen=True, slots=True)
class InventoryItem:
    name: str
    count: int
    add_method: AddMethod = AddMethod.MANUAL
    image: str | None = None

    @property
    def identity(self) -> str:
        return self.name

    def record(self) -> ItemRecord:
        return ItemRecord(count=self.count, add_method=self.add_method, image=self.image)

    @classmethod
    def from_record(cls, name: str, record: ItemRecord) -> InventoryItem:
        return cls(name=name, count=record.count, add_method=record.add_method, image=record.image)


@dataclass(frozen=True, slots=True, kw_only=True)
class ItemSubmission:
    """Candidate item collected by the presentation layer."""

    name: str
    count: int
    intent: SubmissionIntent = SubmissionIntent.NEW_ENTRY
    prior_identity: str | None = None
    add_method: AddMethod = AddMethod.MANUAL
    image: str | None = None
    clear_image: bool = False

    @property
    def identity(self) -> str:
        return self.name.strip()

    @property
    def is_rename(self) -> bool:
        return self.prior_identity is not None and self.prior_identity != self.identity

    def record(self) -> ItemRecord:
        image = None if self.clear_image else self.image
        return ItemRecord(count=self.count, add_method=self.add_method, image=image)

    def with_image(self, image: str) -> ItemSubmission:
        return replace(self, image=image, clear_image=False)

    @classmethod
    def edit_of(cls, item: InventoryItem, **changes: object) -> ItemSubmission:
        """Prefill an edit from a stored item, overriding the given fields."""

        base = cls(
            name=item.name,
            count=item.count,
            intent=SubmissionIntent.EDIT,
            prior_identity=item.identity,
            add_method=item.add_method,
            image=item.image,
        )
        return replace(base, **changes)
