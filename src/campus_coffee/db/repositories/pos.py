"""
campus_coffee.db.repositories.pos

Repository for `PosEntity` rows.

Responsibilities:
- Query POS rows by id, by exact name, or all of them.
- Insert/update with an immediate flush so constraint violations surface in the call.
- Bulk-delete rows and reset the id sequence.
"""

from __future__ import annotations

from sqlalchemy import delete, select, text
from sqlalchemy.ext.asyncio import AsyncSession

from campus_coffee.db import mapper
from campus_coffee.db.models import POS_ID_SEQUENCE, POS_TABLE, PosEntity
from campus_coffee.domain.models import Pos


class PosRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_all(self) -> list[PosEntity]:
        stmt = select(PosEntity).order_by(PosEntity.id)
        return list((await self._session.execute(stmt)).scalars().all())

    async def find_by_id(self, pos_id: int) -> PosEntity | None:
        return await self._session.get(PosEntity, pos_id)

    async def find_by_name(self, name: str) -> PosEntity | None:
        stmt = select(PosEntity).where(PosEntity.name == name)
        return (await self._session.execute(stmt)).scalar_one_or_none()

    async def save_and_flush(self, entity: PosEntity, snapshot: Pos | None = None) -> PosEntity:
        # The complete `snapshot` is written onto the row in one pass just before
        # the flush; a failed flush rolls the whole transaction back.
        if snapshot is not None:
            for key, value in mapper.entity_values(snapshot).items():
                setattr(entity, key, value)
        self._session.add(entity)
        await self._session.flush()
        # Reload server/ORM-assigned columns (id, timestamps) without lazy IO later.
        await self._session.refresh(entity)
        return entity

    async def delete_all(self) -> None:
        await self._session.execute(delete(PosEntity))
        await self._session.flush()

    async def reset_sequence(self) -> None:
        conn = await self._session.connection()
        dialect = conn.dialect.name
        if dialect == "postgresql":
            await conn.execute(text(f"ALTER SEQUENCE {POS_ID_SEQUENCE} RESTART WITH 1"))
        elif dialect == "sqlite":
            # AUTOINCREMENT tables keep their high-water mark in sqlite_sequence.
            await conn.execute(
                text("DELETE FROM sqlite_sequence WHERE name = :name"), {"name": POS_TABLE}
            )
        else:
            raise NotImplementedError(f"Sequence reset is not supported for dialect {dialect!r}")


# --- Module Notes -----------------------------------------------------------
# The caller owns the transaction; nothing here commits.
