"""Test fixtures — a fresh in-memory database per test.

Each test gets its own SQLite database (aiosqlite, StaticPool so every
session shares the one in-memory connection), its own app built around
it with create_app(database), and an httpx client speaking ASGI to it.
Nothing is shared between tests, so no cleanup is needed.

bcrypt rounds are lowered before the app is imported; hashing at the
production work factor would dominate the suite's runtime.
"""

import os

os.environ.setdefault("UNDANGAN_BCRYPT_ROUNDS", "4")

import uuid  # noqa: E402

import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from undangan.db.engine import Database  # noqa: E402
from undangan.main import create_app  # noqa: E402

TEST_DB_URL = "sqlite+aiosqlite://"


@pytest_asyncio.fixture()
async def database():
    """Empty schema in a private in-memory database."""
    db = Database(TEST_DB_URL, poolclass=StaticPool)
    await db.create_all()
    try:
        yield db
    finally:
        await db.dispose()


@pytest_asyncio.fixture()
async def db_session(database):
    """Direct session for service-level tests."""
    async with database.session() as session:
        yield session


@pytest_asyncio.fixture()
async def client(database):
    """HTTP client running the real app (real auth pipeline)."""
    app = create_app(database)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture()
async def make_user(client):
    """Factory: register + login a fresh user, return auth headers and id.

    Usage: alice = await make_user(); alice["headers"], alice["id_user"]
    """

    async def _make(name: str = "Test User", password: str = "password_123") -> dict:
        email = f"user-{uuid.uuid4().hex[:8]}@example.com"
        r = await client.post(
            "/api/auth/register",
            json={"name": name, "email": email, "password": password},
        )
        assert r.status_code == 201, r.text
        user = r.json()

        r = await client.post(
            "/api/auth/login", json={"email": email, "password": password}
        )
        assert r.status_code == 200, r.text
        token = r.json()["token"]
        return {
            "id_user": user["id_user"],
            "email": email,
            "token": token,
            "headers": {"Authorization": f"Bearer {token}"},
        }

    return _make


@pytest_asyncio.fixture()
async def auth_headers(make_user):
    """Authorization headers for one freshly registered user."""
    user = await make_user()
    return user["headers"]
