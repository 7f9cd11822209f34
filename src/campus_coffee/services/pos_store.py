"""
campus_coffee.services.pos_store

POS persistence adapter (implements `domain.ports.PosDataService`).

Responsibilities:
- Run each operation in its own short transaction.
- Map rows to immutable `Pos` snapshots.
- Enforce name uniqueness at the boundary by translating integrity violations
  into `DuplicatePosName`; unrelated violations propagate unchanged.
"""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from campus_coffee.db import mapper
from campus_coffee.db.constraints import translate_integrity_error
from campus_coffee.db.repositories.pos import PosRepo
from campus_coffee.domain.errors import PosError, PosNotFound
from campus_coffee.domain.models import Pos
from campus_coffee.domain.result import Err, Ok, Result


class PosStore:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def clear(self) -> None:
        async with self._session_factory.begin() as session:
            repo = PosRepo(session)
            await repo.delete_all()
            await repo.reset_sequence()

    async def get_all(self) -> list[Pos]:
        async with self._session_factory() as session:
            return [mapper.from_entity(e) for e in await PosRepo(session).find_all()]

    async def filter_by_name(self, name: str) -> Result[Pos, PosNotFound]:
        # An empty name is a caller bug, not a lookup miss.
        if not name:
            raise ValueError("POS name must be a non-empty string")
        async with self._session_factory() as session:
            entity = await PosRepo(session).find_by_name(name)
        if entity is None:
            return Err(PosNotFound(name))
        return Ok(mapper.from_entity(entity))

    async def get_by_id(self, id: int) -> Result[Pos, PosNotFound]:
        async with self._session_factory() as session:
            entity = await PosRepo(session).find_by_id(id)
        if entity is None:
            return Err(PosNotFound(id))
        return Ok(mapper.from_entity(entity))

    async def upsert(self, pos: Pos) -> Result[Pos, PosError]:
        try:
            async with self._session_factory.begin() as session:
                repo = PosRepo(session)
                if pos.id is None:
                    entity = await repo.save_and_flush(mapper.to_entity(pos))
                    return Ok(mapper.from_entity(entity))

                existing = await repo.find_by_id(pos.id)
                if existing is None:
                    return Err(PosNotFound(pos.id))

                # Timestamps are refreshed by the ORM's onupdate hook, not here.
                merged = mapper.merge(mapper.from_entity(existing), pos)
                entity = await repo.save_and_flush(existing, merged)
                return Ok(mapper.from_entity(entity))
        except IntegrityError as exc:
            error = translate_integrity_error(exc, pos)
            if error is None:
                raise
            return Err(error)


# --- Module Notes -----------------------------------------------------------
# Concurrent inserts of one name are serialised by the database's unique
# constraint alone: the loser's flush raises and is translated above.
