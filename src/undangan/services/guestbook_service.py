"""Guestbook service — RSVPs and wishes.

Both are written by wedding guests, who have no account. Submissions
are accepted for any existing guest id without an ownership check; the
couple reads them back through the usual ownership-scoped lists.
"""

from typing import Optional

import structlog

from undangan.db.models import Guest, Rsvp, Wish
from undangan.services.base import ScopedService
from undangan.services.errors import NotFoundError

logger = structlog.get_logger()


class GuestbookService(ScopedService):
    """Business logic for guest-submitted RSVPs and wishes."""

    async def _require_guest(self, id_guest: int) -> None:
        if await self.db.get(Guest, id_guest) is None:
            raise NotFoundError("Guest not found")

    # ─── RSVP ───────────────────────────────────────────

    async def submit_rsvp(
        self,
        id_guest: int,
        attendance: str,
        total_guest: int = 1,
        message: Optional[str] = None,
    ) -> Rsvp:
        await self._require_guest(id_guest)
        rsvp = await self._save(
            Rsvp(
                id_guest=id_guest,
                attendance=attendance,
                total_guest=total_guest,
                message=message,
            )
        )

        logger.info(
            "rsvp.submitted",
            id_rsvp=rsvp.id_rsvp,
            id_guest=id_guest,
            attendance=attendance,
        )
        return rsvp

    async def list_rsvps(self, user_id: int) -> list[Rsvp]:
        return await self._list(Rsvp, user_id)

    # ─── Wishes ─────────────────────────────────────────

    async def submit_wish(self, id_guest: int, message: str) -> Wish:
        await self._require_guest(id_guest)
        wish = await self._save(Wish(id_guest=id_guest, message=message))

        logger.info("wish.submitted", id_wish=wish.id_wish, id_guest=id_guest)
        return wish

    async def list_wishes(self, user_id: int) -> list[Wish]:
        return await self._list(Wish, user_id)
