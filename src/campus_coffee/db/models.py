"""
campus_coffee.db.models

Persistence schema for points of sale.

Responsibilities:
- Define the `PosEntity` ORM model on table `pos`.
- Own the storage-managed timestamps (`created_at`, `updated_at`).
- Name the unique constraint on `pos.name` so violations can be recognised.
"""

from __future__ import annotations

import enum
from datetime import UTC, datetime

from sqlalchemy import Enum, Integer, Sequence, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from campus_coffee.db.base import Base
from campus_coffee.domain.models import CampusType, PosType

POS_TABLE = "pos"
POS_ID_SEQUENCE = "pos_seq"
POS_NAME_CONSTRAINT = "pos_name_key"


def _utcnow() -> datetime:
    # Naive UTC; SQLite has no timezone-aware datetime type.
    return datetime.now(UTC).replace(tzinfo=None)


def _enum_column(enum_cls: type[enum.StrEnum]) -> Enum:
    # Store the enum *values* ("CAFE") as plain strings, not member names or a native type.
    return Enum(
        enum_cls,
        native_enum=False,
        length=32,
        values_callable=lambda members: [m.value for m in members],
    )


class PosEntity(Base):
    __tablename__ = POS_TABLE

    # Sequence is used on PostgreSQL; SQLite falls back to AUTOINCREMENT.
    id: Mapped[int] = mapped_column(
        Integer, Sequence(POS_ID_SEQUENCE, start=1), primary_key=True, autoincrement=True
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    type: Mapped[PosType] = mapped_column(_enum_column(PosType), nullable=False)
    campus: Mapped[CampusType] = mapped_column(_enum_column(CampusType), nullable=False)

    street: Mapped[str] = mapped_column(String(255), nullable=False)
    house_number: Mapped[str] = mapped_column(String(16), nullable=False)
    postal_code: Mapped[int] = mapped_column(Integer, nullable=False)
    city: Mapped[str] = mapped_column(String(255), nullable=False)

    created_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow, onupdate=_utcnow)

    __table_args__ = (
        UniqueConstraint("name", name=POS_NAME_CONSTRAINT),
        {"sqlite_autoincrement": True},
    )


# --- Module Notes -----------------------------------------------------------
# Keep POS_NAME_CONSTRAINT in sync with `alembic/versions/001_pos_baseline.py`
# and with the rules in `db.constraints`.
