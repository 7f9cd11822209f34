"""
tests.conftest

Shared fixtures: a throwaway SQLite database per test.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from pathlib import Path

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine

from campus_coffee.db.init_db import init_db
from campus_coffee.db.session import create_engine, create_sessionmaker
from campus_coffee.services.pos_store import PosStore
from campus_coffee.settings import Settings


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    # File-backed DB: every pooled connection must see the same data.
    return Settings(env="test", database_url=f"sqlite+aiosqlite:///{tmp_path / 'pos.db'}")


@pytest_asyncio.fixture
async def engine(settings: Settings) -> AsyncIterator[AsyncEngine]:
    engine = create_engine(settings)
    await init_db(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest_asyncio.fixture
async def store(engine: AsyncEngine) -> PosStore:
    return PosStore(create_sessionmaker(engine))



# --- Module Notes -----------------------------------------------------------
# Each test gets its own database file under tmp_path; nothing is shared between tests.
