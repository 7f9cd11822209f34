"""
campus_coffee.domain.ports

Port implemented by the persistence adapter.

Responsibilities:
- Define the POS data operations the domain layer depends on, independent of
  the storage technology.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from campus_coffee.domain.errors import PosError, PosNotFound
from campus_coffee.domain.models import Pos
from campus_coffee.domain.result import Result


@runtime_checkable
class PosDataService(Protocol):
    async def clear(self) -> None:
        """Delete every POS and reset id generation. Destructive; meant for tests/admin."""
        ...

    async def get_all(self) -> list[Pos]:
        """Return all POS; never None, possibly empty."""
        ...

    async def filter_by_name(self, name: str) -> Result[Pos, PosNotFound]:
        """Return the POS whose name equals `name` exactly."""
        ...

    async def get_by_id(self, id: int) -> Result[Pos, PosNotFound]:
        ...

    async def upsert(self, pos: Pos) -> Result[Pos, PosError]:
        """
        Create `pos` when it has no id, otherwise update the stored record with that id.

        Returns `PosNotFound` for an update of an unknown id and `DuplicatePosName`
        when the name is already taken.
        """
        ...


# --- Module Notes -----------------------------------------------------------
# `services.pos_store.PosStore` is the SQLAlchemy-backed implementation.
