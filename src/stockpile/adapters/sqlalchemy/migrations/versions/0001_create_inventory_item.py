"""Create the inventory_item table.

Revision ID: 0001_create_inventory_item
Revises:
Create Date: 2026-10-19
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "0001_create_inventory_item"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "inventory_item",
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("count", sa.Integer(), nullable=False),
        sa.Column("image", sa.String(length=2048), nullable=True),
        sa.Column("add_method", sa.String(length=16), nullable=False, server_default="Manual"),
        sa.CheckConstraint("count >= 0", name=op.f("ck_inventory_item_count_not_negative")),
        sa.PrimaryKeyConstraint("name", name=op.f("pk_inventory_item")),
    )


def downgrade() -> None:
    op.drop_table("inventory_item")
