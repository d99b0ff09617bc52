"""Shared persistence helpers for the ownership-scoped services."""

from sqlalchemy.ext.asyncio import AsyncSession

from undangan.db.models import Base
from undangan.services.ownership import scoped


class ScopedService:
    """Base for services whose reads are filtered by the caller's ownership chain."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _save(self, row: Base) -> Base:
        # Refresh so the caller sees the row as stored, not as passed in
        self.db.add(row)
        await self.db.commit()
        await self.db.refresh(row)
        return row

    async def _list(self, model: type[Base], user_id: int) -> list:
        result = await self.db.execute(scoped(model, user_id))
        return list(result.scalars().all())
