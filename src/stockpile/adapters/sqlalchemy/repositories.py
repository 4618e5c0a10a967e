"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError

from stockpile.adapters.sqlalchemy.mappings import inventory_item_table
from stockpile.domain.errors import RepositoryError
from stockpile.domain.model import InventoryItem, ItemRecord

if TYPE_CHECKING:
    from sqlalchemy import Executable, Result, RowMapping
    from sqlalchemy.orm import Session

    from stockpile.domain.model import RecordPatch


class SqlAlchemyItemRepository:
    """Inventory documents stored as rows keyed by item name."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, key: str) -> ItemRecord | None:
        stmt = select(inventory_item_table).where(inventory_item_table.c.name == key)
        row = self._execute(stmt, action=f"read {key!r}").mappings().one_or_none()
        return None if row is None else _record_from_row(row)

    def put(self, key: str, record: ItemRecord) -> None:
        values = {
            "count": record.count,
            "image": record.image,
            "add_method": record.add_method,
        }
        stmt = update(inventory_item_table).where(inventory_item_table.c.name == key)
        result = self._execute(stmt.values(**values), action=f"write {key!r}")
        if _rowcount(result) == 0:
            self._execute(
                insert(inventory_item_table).values(name=key, **values),
                action=f"write {key!r}",
            )

    def merge(self, key: str, fields: RecordPatch) -> None:
        values: dict[str, Any] = dict(fields)
        if not values:
            if self.get(key) is None:
                raise RepositoryError(f"No item stored under {key!r}")
            return
        stmt = (
            update(inventory_item_table)
            .where(inventory_item_table.c.name == key)
            .values(**values)
        )
        result = self._execute(stmt, action=f"update {key!r}")
        if _rowcount(result) == 0:
            raise RepositoryError(f"No item stored under {key!r}")

    def delete(self, key: str) -> None:
        stmt = delete(inventory_item_table).where(inventory_item_table.c.name == key)
        self._execute(stmt, action=f"delete {key!r}")

    def list_items(self) -> list[InventoryItem]:
        stmt = select(inventory_item_table).order_by(inventory_item_table.c.name)
        rows = self._execute(stmt, action="list items").mappings().all()
        return [InventoryItem.from_record(row["name"], _record_from_row(row)) for row in rows]

    def _execute(self, stmt: Executable, *, action: str) -> Result[Any]:
        try:
            return self.session.execute(stmt)
        except SQLAlchemyError as exc:
            raise RepositoryError(f"Failed to {action}: {exc}") from exc


def _record_from_row(row: RowMapping) -> ItemRecord:
    return ItemRecord(count=row["count"], add_method=row["add_method"], image=row["image"])


def _rowcount(result: Result[Any]) -> int:
    return getattr(result, "rowcount", 0)


if TYPE_CHECKING:
    from typing import cast

    from stockpile.domain.ports.persistence import ItemRepository

    _session_stub = cast("Session", object())
    _repo_check: ItemRepository = SqlAlchemyItemRepository(_session_stub)
