"""Storage failures surface as an opaque 500 envelope."""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.pool import StaticPool

from undangan.db.engine import Database
from undangan.main import create_app


@pytest.mark.asyncio
async def test_storage_error_is_opaque():
    """A query against a database with no tables must not leak the SQL error."""
    db = Database("sqlite+aiosqlite://", poolclass=StaticPool)
    app = create_app(db)
    try:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
            r = await c.get("/api/invitation/any-slug")
        assert r.status_code == 500
        assert r.json() == {"error": "Internal server error"}
        assert "no such table" not in r.text
    finally:
        await db.dispose()
