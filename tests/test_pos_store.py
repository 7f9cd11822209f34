"""
tests.test_pos_store

PosStore behaviour against a real SQLite database.
"""

from __future__ import annotations

import asyncio

import pytest
from sqlalchemy.exc import IntegrityError

from campus_coffee.db.mapper import MUTABLE_FIELDS
from campus_coffee.domain.errors import DuplicatePosName, PosNotFound
from campus_coffee.domain.models import CampusType, PosType
from campus_coffee.domain.ports import PosDataService
from campus_coffee.domain.result import Err, Ok
from campus_coffee.services.pos_store import PosStore
from tests.factories import make_pos


@pytest.mark.asyncio
async def test_store_implements_port(store: PosStore) -> None:
    assert isinstance(store, PosDataService)


@pytest.mark.asyncio
async def test_get_all_is_empty_list_without_records(store: PosStore) -> None:
    assert await store.get_all() == []


@pytest.mark.asyncio
async def test_insert_then_get_by_id_round_trips_fields(store: PosStore) -> None:
    pos = make_pos()

    created = await store.upsert(pos)

    assert isinstance(created, Ok)
    assert created.value.id is not None
    assert created.value.created_at is not None
    assert created.value.updated_at is not None

    fetched = await store.get_by_id(created.value.id)
    assert isinstance(fetched, Ok)
    for field in MUTABLE_FIELDS:
        assert getattr(fetched.value, field) == getattr(pos, field)


@pytest.mark.asyncio
async def test_duplicate_name_insert_returns_duplicate_error(store: PosStore) -> None:
    first = await store.upsert(make_pos(name="Café A"))
    second = await store.upsert(make_pos(name="Café A", street="Hauptstraße"))

    assert isinstance(first, Ok)
    assert second == Err(DuplicatePosName("Café A"))
    assert [p.name for p in await store.get_all()] == ["Café A"]


@pytest.mark.asyncio
async def test_update_to_taken_name_returns_duplicate_error(store: PosStore) -> None:
    await store.upsert(make_pos(name="Café A"))
    other = await store.upsert(make_pos(name="Bakery B", type=PosType.bakery))
    assert isinstance(other, Ok)

    result = await store.upsert(make_pos(id=other.value.id, name="Café A"))

    assert result == Err(DuplicatePosName("Café A"))
    unchanged = await store.get_by_id(other.value.id)
    assert isinstance(unchanged, Ok)
    assert unchanged.value.name == "Bakery B"


@pytest.mark.asyncio
async def test_concurrent_inserts_of_same_name_yield_one_winner(store: PosStore) -> None:
    results = await asyncio.gather(
        store.upsert(make_pos(name="Race")),
        store.upsert(make_pos(name="Race", street="Plöck")),
    )

    assert sum(isinstance(r, Ok) for r in results) == 1
    assert Err(DuplicatePosName("Race")) in results
    assert len(await store.get_all()) == 1


@pytest.mark.asyncio
async def test_get_by_unknown_id_returns_not_found(store: PosStore) -> None:
    assert await store.get_by_id(99) == Err(PosNotFound(99))


@pytest.mark.asyncio
async def test_filter_by_name(store: PosStore) -> None:
    await store.upsert(make_pos(name="Café A"))
    await store.upsert(make_pos(name="Vending INF", type=PosType.vending_machine, campus=CampusType.inf))

    found = await store.filter_by_name("Vending INF")
    assert isinstance(found, Ok)
    assert found.value.campus is CampusType.inf

    assert await store.filter_by_name("Café") == Err(PosNotFound("Café"))


@pytest.mark.asyncio
async def test_filter_by_empty_name_is_rejected(store: PosStore) -> None:
    with pytest.raises(ValueError):
        await store.filter_by_name("")


@pytest.mark.asyncio
async def test_whitespace_name_can_be_stored_and_found(store: PosStore) -> None:
    created = await store.upsert(make_pos(name=" "))
    assert isinstance(created, Ok)

    found = await store.filter_by_name(" ")

    assert found == Ok(created.value)
    assert await store.filter_by_name("  ") == Err(PosNotFound("  "))


@pytest.mark.asyncio
async def test_update_of_unknown_id_returns_not_found_and_creates_nothing(store: PosStore) -> None:
    result = await store.upsert(make_pos(id=42))

    assert result == Err(PosNotFound(42))
    assert await store.get_all() == []


@pytest.mark.asyncio
async def test_update_replaces_mutable_fields_and_keeps_identity(store: PosStore) -> None:
    created = await store.upsert(make_pos())
    assert isinstance(created, Ok)
    original = created.value

    updated = await store.upsert(
        make_pos(id=original.id, name="Café A2", campus=CampusType.bergheim, postal_code=69115)
    )

    assert isinstance(updated, Ok)
    assert updated.value.id == original.id
    assert updated.value.name == "Café A2"
    assert updated.value.campus is CampusType.bergheim
    assert updated.value.postal_code == 69115
    assert updated.value.created_at == original.created_at
    assert updated.value.updated_at >= original.updated_at


@pytest.mark.asyncio
async def test_update_ignores_caller_supplied_timestamps(store: PosStore) -> None:
    created = await store.upsert(make_pos())
    assert isinstance(created, Ok)

    stale = make_pos(id=created.value.id, name="Renamed", created_at=None, updated_at=None)
    updated = await store.upsert(stale)

    assert isinstance(updated, Ok)
    assert updated.value.created_at == created.value.created_at


@pytest.mark.asyncio
async def test_clear_removes_all_and_resets_ids(store: PosStore) -> None:
    for name in ("A", "B", "C"):
        await store.upsert(make_pos(name=name))

    await store.clear()

    assert await store.get_all() == []
    again = await store.upsert(make_pos(name="A"))
    assert isinstance(again, Ok)
    assert again.value.id == 1


@pytest.mark.asyncio
async def test_clear_on_empty_store(store: PosStore) -> None:
    await store.clear()
    first = await store.upsert(make_pos())
    assert isinstance(first, Ok)
    assert first.value.id == 1


@pytest.mark.asyncio
async def test_unrelated_integrity_error_propagates(store: PosStore) -> None:
    # NOT NULL on `city` is not a translated constraint.
    with pytest.raises(IntegrityError):
        await store.upsert(make_pos(city=None))  # type: ignore[arg-type]
    assert await store.get_all() == []


@pytest.mark.asyncio
async def test_cafe_scenario(store: PosStore) -> None:
    first = await store.upsert(make_pos(name="Café A"))
    assert isinstance(first, Ok)
    assert first.value.id == 1

    assert await store.upsert(make_pos(name="Café A")) == Err(DuplicatePosName("Café A"))
    assert len(await store.get_all()) == 1

    renamed = await store.upsert(make_pos(id=1, name="Café A2"))
    assert isinstance(renamed, Ok)
    fetched = await store.get_by_id(1)
    assert isinstance(fetched, Ok)
    assert fetched.value.name == "Café A2"

    assert await store.get_by_id(99) == Err(PosNotFound(99))


# --- Module Notes -----------------------------------------------------------
# Ids are asserted as literal values; each test starts from an empty database.
