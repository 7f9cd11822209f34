"""
tests.test_smoke

Boot the app and hit the health endpoints.

Responsibilities:
- Ensure the FastAPI app starts, creates the schema in test mode and serves the health endpoints.
"""

from __future__ import annotations

import httpx
import pytest

from campus_coffee.api.app import create_app
from campus_coffee.settings import Settings


@pytest.mark.asyncio
async def test_health_endpoints(settings: Settings) -> None:
    app = create_app(settings=settings)

    # httpx's ASGITransport does not run the lifespan; drive it explicitly.
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            r = await client.get("/healthz")
            assert r.status_code == 200
            assert r.json()["status"] == "ok"
            assert r.headers["x-request-id"]

            r = await client.get("/readyz", headers={"x-request-id": "abc123"})
            assert r.status_code == 200
            assert r.json() == {"status": "ready", "pos_count": 0}
            assert r.headers["x-request-id"] == "abc123"


# --- Module Notes -----------------------------------------------------------
# Endpoint-level POS behaviour lives in test_pos_api.py.
