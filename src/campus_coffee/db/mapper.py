"""
campus_coffee.db.mapper

Mapping between the `Pos` domain object and the `PosEntity` ORM row.

Responsibilities:
- Convert rows to immutable domain snapshots and back.
- Merge an incoming update onto a stored snapshot without touching the row.
"""

from __future__ import annotations

import dataclasses
from typing import Any

from campus_coffee.db.models import PosEntity
from campus_coffee.domain.models import Pos

# Fields a caller may change; id and timestamps belong to the storage layer.
MUTABLE_FIELDS: tuple[str, ...] = (
    "name",
    "description",
    "type",
    "campus",
    "street",
    "house_number",
    "postal_code",
    "city",
)


def from_entity(entity: PosEntity) -> Pos:
    return Pos(
        id=entity.id,
        created_at=entity.created_at,
        updated_at=entity.updated_at,
        name=entity.name,
        description=entity.description,
        type=entity.type,
        campus=entity.campus,
        street=entity.street,
        house_number=entity.house_number,
        postal_code=entity.postal_code,
        city=entity.city,
    )


def entity_values(pos: Pos) -> dict[str, Any]:
    return {field: getattr(pos, field) for field in MUTABLE_FIELDS}


def to_entity(pos: Pos) -> PosEntity:
    # id/timestamps are left unset so the database and ORM defaults assign them.
    return PosEntity(**entity_values(pos))


def merge(current: Pos, incoming: Pos) -> Pos:
    """
    Return a new snapshot: identity and timestamps from `current`, every
    mutable field from `incoming`.
    """

    return dataclasses.replace(current, **entity_values(incoming))


# --- Module Notes -----------------------------------------------------------
# Adding a column to PosEntity means adding it to `Pos`, `MUTABLE_FIELDS` and `from_entity`.
