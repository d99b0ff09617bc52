"""Async SQLAlchemy engine and session factory.

The Database handle owns one engine (and therefore one connection pool)
plus the session factory built on it. It is constructed by the app
factory and stored on app.state; nothing in the package opens its own
connections. Request handlers get a session through the get_db dependency.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from undangan.db.models import Base


def _pool_options(url: str) -> dict:
    """Pool sizing for server databases. SQLite manages its own pool."""
    if make_url(url).get_backend_name() == "sqlite":
        return {}
    return {"pool_size": 5, "max_overflow": 15}


class Database:
    """Engine + session factory for one database URL."""

    def __init__(self, url: str, *, echo: bool = False, **engine_kwargs):
        options = _pool_options(url)
        options.update(engine_kwargs)
        self.url = url
        self.engine = create_async_engine(url, echo=echo, **options)
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        async with self.session_factory() as session:
            try:
                yield session
            finally:
                await session.close()

    async def create_all(self) -> None:
        """Create every table that does not exist yet."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def ping(self) -> None:
        """Run a trivial query. Raises if the database is unreachable."""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def dispose(self) -> None:
        await self.engine.dispose()


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """FastAPI dependency — yields a session per request, auto-closes."""
    database: Database = request.app.state.db
    async with database.session() as session:
        yield session
