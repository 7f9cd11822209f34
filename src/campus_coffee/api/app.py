"""
campus_coffee.api.app

FastAPI app factory for the Campus Coffee service.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Initialize and dispose shared infrastructure (DB engine/session factory).
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from campus_coffee import __version__
from campus_coffee.api.routers.health import router as health_router
from campus_coffee.api.routers.pos import router as pos_router
from campus_coffee.db.init_db import init_db
from campus_coffee.db.session import create_engine, create_sessionmaker
from campus_coffee.observability.logging import configure_logging, get_logger
from campus_coffee.observability.middleware import RequestContextMiddleware
from campus_coffee.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env)
        engine = create_engine(settings)
        app.state.engine = engine
        app.state.sessionmaker = create_sessionmaker(engine)
        if settings.env in ("dev", "test"):
            # Prod schemas are managed by Alembic (`alembic upgrade head`).
            await init_db(engine)
        try:
            yield
        finally:
            await engine.dispose()
            log.info("shutdown")

    app = FastAPI(
        title="Campus Coffee",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(pos_router)

    return app


# --- Module Notes -----------------------------------------------------------
# App composition only; POS persistence rules live in `services.pos_store`.
