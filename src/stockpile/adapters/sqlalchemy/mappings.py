"""SQLAlchemy table metadata for stored inventory records."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, Column, Integer, MetaData, String, Table, TypeDecorator

from stockpile.domain.model import AddMethod

if TYPE_CHECKING:
    from sqlalchemy import Dialect


class AddMethodType(TypeDecorator[AddMethod]):
    """Store ``AddMethod`` by its wire value; unknown or missing values read as manual."""

    impl = String(16)
    cache_ok = True

    def process_bind_param(self, value: AddMethod | None, dialect: Dialect) -> str | None:
        _ = dialect
        if value is None:
            return None
        return AddMethod(value).value

    def process_result_value(self, value: str | None, dialect: Dialect) -> AddMethod:
        _ = dialect
        if value is None:
            return AddMethod.MANUAL
        try:
            return AddMethod(value)
        except ValueError:
            return AddMethod.MANUAL


metadata = MetaData(
    naming_convention={
        "ix": "ix_%(column_0_label)s",
        "uq": "uq_%(table_name)s_%(column_0_label)s",
        "ck": "ck_%(table_name)s_%(constraint_name)s",
        "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
        "pk": "pk_%(table_name)s",
    }
)

inventory_item_table = Table(
    "inventory_item",
    metadata,
    Column("name", String(255), primary_key=True),
    Column("count", Integer, nullable=False),
    Column("image", String(2048), nullable=True),
    Column("add_method", AddMethodType(), nullable=False, default=AddMethod.MANUAL),
    CheckConstraint("count >= 0", name="count_not_negative"),
)
