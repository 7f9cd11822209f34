"""
campus_coffee.api.routers.health

Health and readiness endpoints.

Responsibilities:
- Provide liveness check (`/healthz`).
- Provide readiness check (`/readyz`) that round-trips to the database.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from campus_coffee.api.deps import db_session
from campus_coffee.db.models import PosEntity

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(session: AsyncSession = Depends(db_session)) -> dict[str, str | int]:
    # Counting rows also proves the `pos` table exists (migrations ran).
    count = (await session.execute(select(func.count()).select_from(PosEntity))).scalar_one()
    return {"status": "ready", "pos_count": count}


# --- Module Notes -----------------------------------------------------------
# /readyz fails with 500 until the schema is in place.
