"""
campus_coffee.db.init_db

DB initialization helpers (dev/test convenience).

Responsibilities:
- Create the `pos` table for local development and tests.
- Keep the production migration workflow separate (Alembic).
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine

from campus_coffee.db import models  # noqa: F401  # register PosEntity on Base.metadata
from campus_coffee.db.base import Base


async def init_db(engine: AsyncEngine) -> None:
    """
    Create tables if they don't exist. Production runs `alembic upgrade head` instead.
    """

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


# --- Module Notes -----------------------------------------------------------
# Not used when `Settings.env == "prod"`.
