"""Wire schema for inventory documents keyed by item name.

``{"Apple": {"count": 3, "image": "https://...", "addMethod": "Manual"}}``
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from stockpile.domain.errors import ValidationError
from stockpile.domain.model import AddMethod, InventoryItem

if TYPE_CHECKING:
    from collections.abc import Iterable


class ItemDocument(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    count: int = Field(ge=0, strict=True)
    image: str | None = None
    add_method: AddMethod = Field(default=AddMethod.MANUAL, alias="addMethod")

    @classmethod
    def from_item(cls, item: InventoryItem) -> ItemDocument:
        return cls(count=item.count, image=item.image, add_method=item.add_method)

    def to_item(self, name: str) -> InventoryItem:
        return InventoryItem(
            name=name, count=self.count, add_method=self.add_method, image=self.image
        )


_COLLECTION = TypeAdapter(dict[str, ItemDocument])


def dump_documents(items: Iterable[InventoryItem]) -> dict[str, dict[str, Any]]:
    return {
        item.name: ItemDocument.from_item(item).model_dump(
            mode="json", by_alias=True, exclude_none=True
        )
        for item in items
    }


def parse_documents(payload: bytes | str) -> list[InventoryItem]:
    """Parse a JSON collection of documents, raising ``ValidationError`` when malformed."""

    try:
        documents = _COLLECTION.validate_json(payload)
    except PydanticValidationError as exc:
        raise ValidationError(f"Invalid inventory document collection: {exc}") from exc
    return [document.to_item(name) for name, document in documents.items()]
