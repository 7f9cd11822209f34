"""
campus_coffee.db.base

SQLAlchemy declarative base.
"""

from __future__ import annotations

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

# Mirror PostgreSQL's default constraint names (`<table>_<column>_key`, `<table>_pkey`).
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "%(table_name)s_%(column_0_name)s_key",
    "pk": "%(table_name)s_pkey",
}


class Base(DeclarativeBase):
    metadata = MetaData(naming_convention=NAMING_CONVENTION)


# --- Module Notes -----------------------------------------------------------
# All ORM models inherit from `Base` so Alembic and `init_db` see them.
