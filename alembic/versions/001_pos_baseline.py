"""Baseline schema: the `pos` table.

Revision ID: 001_pos_baseline
Revises: None
Create Date: 2026-10-19
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision: str = "001_pos_baseline"
down_revision: str | None = None
branch_labels: tuple[str, ...] | None = None
depends_on: tuple[str, ...] | None = None


def upgrade() -> None:
    # SQLite has no sequences; AUTOINCREMENT covers id generation there.
    if op.get_bind().dialect.supports_sequences:
        op.execute(sa.schema.CreateSequence(sa.Sequence("pos_seq", start=1)))
    op.create_table(
        "pos",
        sa.Column("id", sa.Integer, sa.Sequence("pos_seq"), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("type", sa.String(32), nullable=False),
        sa.Column("campus", sa.String(32), nullable=False),
        sa.Column("street", sa.String(255), nullable=False),
        sa.Column("house_number", sa.String(16), nullable=False),
        sa.Column("postal_code", sa.Integer, nullable=False),
        sa.Column("city", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime, nullable=False),
        sa.Column("updated_at", sa.DateTime, nullable=False),
        sa.PrimaryKeyConstraint("id", name="pos_pkey"),
        sa.UniqueConstraint("name", name="pos_name_key"),
        sqlite_autoincrement=True,
    )


def downgrade() -> None:
    op.drop_table("pos")
    if op.get_bind().dialect.supports_sequences:
        op.execute(sa.schema.DropSequence(sa.Sequence("pos_seq")))
