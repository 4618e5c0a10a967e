"""SQLAlchemy adapter package for stockpile."""

from __future__ import annotations

from .mappings import AddMethodType, inventory_item_table, metadata
from .repositories import SqlAlchemyItemRepository
from .unit_of_work import SqlAlchemyUnitOfWork, StartupError, shutdown, startup

__all__ = [
    "AddMethodType",
    "SqlAlchemyItemRepository",
    "SqlAlchemyUnitOfWork",
    "StartupError",
    "inventory_item_table",
    "metadata",
    "shutdown",
    "startup",
]
