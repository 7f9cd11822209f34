"""
campus_coffee.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for settings, DB sessions and the POS store.
- Encapsulate app.state access patterns (engine/sessionmaker).
"""

from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from campus_coffee.domain.ports import PosDataService
from campus_coffee.services.pos_store import PosStore
from campus_coffee.settings import Settings, get_settings


def settings_dep() -> Settings:
    return get_settings()


def sessionmaker_from_app(request: Request) -> async_sessionmaker[AsyncSession]:
    # Created in the app lifespan (`campus_coffee.api.app.create_app`).
    return request.app.state.sessionmaker  # type: ignore[attr-defined]


async def db_session(
    session_factory: async_sessionmaker[AsyncSession] = Depends(sessionmaker_from_app),
) -> AsyncIterator[AsyncSession]:
    async with session_factory() as session:
        yield session


def pos_data_service(
    session_factory: async_sessionmaker[AsyncSession] = Depends(sessionmaker_from_app),
) -> PosDataService:
    # PosStore opens its own per-call transactions; it only needs the factory.
    return PosStore(session_factory)


# --- Module Notes -----------------------------------------------------------
# Routers depend on the `PosDataService` port, so tests can override
# `pos_data_service` with a fake via `app.dependency_overrides`.
