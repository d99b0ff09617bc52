"""Invitation service — invitations, their public slugs, and guest lists.

Invitations hang off a wedding and guests hang off an invitation, so
creating either checks the parent against the caller's ownership chain.
The slug lookup is the one public read: anyone holding the link can
open the invitation.
"""

from typing import Optional

import structlog
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from undangan.db.models import Guest, Invitation, Wedding
from undangan.services.base import ScopedService
from undangan.services.errors import ConflictError, NotFoundError
from undangan.services.ownership import owns

logger = structlog.get_logger()


class InvitationService(ScopedService):
    """Business logic for invitations and guests."""

    # ─── Invitations ────────────────────────────────────

    async def create_invitation(
        self,
        user_id: int,
        id_wedding: int,
        slug: str,
        theme: Optional[str] = None,
        cover_text: Optional[str] = None,
        background_music: Optional[str] = None,
        status: str = "draft",
    ) -> Invitation:
        if not await owns(self.db, Wedding, id_wedding, user_id):
            raise NotFoundError("Wedding not found")

        invitation = Invitation(
            id_wedding=id_wedding,
            slug=slug,
            theme=theme,
            cover_text=cover_text,
            background_music=background_music,
            status=status,
        )
        try:
            await self._save(invitation)
        except IntegrityError:
            # Uniqueness lives in the slug column constraint
            await self.db.rollback()
            raise ConflictError(f"Slug '{slug}' is already taken")

        logger.info(
            "invitation.created",
            id_invitation=invitation.id_invitation,
            id_wedding=id_wedding,
            slug=slug,
        )
        return invitation

    async def list_invitations(self, user_id: int) -> list[Invitation]:
        return await self._list(Invitation, user_id)

    async def get_by_slug(self, slug: str) -> Invitation:
        """Public lookup. Exact match on the slug, no ownership filter."""
        result = await self.db.execute(
            select(Invitation).where(Invitation.slug == slug)
        )
        invitation = result.scalars().first()
        if not invitation:
            raise NotFoundError("Invitation not found")
        return invitation

    # ─── Guests ─────────────────────────────────────────

    async def create_guest(
        self,
        user_id: int,
        id_invitation: int,
        guest_name: str,
        phone: Optional[str] = None,
        address: Optional[str] = None,
        invitation_type: Optional[str] = None,
    ) -> Guest:
        if not await owns(self.db, Invitation, id_invitation, user_id):
            raise NotFoundError("Invitation not found")

        guest = await self._save(
            Guest(
                id_invitation=id_invitation,
                guest_name=guest_name,
                phone=phone,
                address=address,
                invitation_type=invitation_type,
            )
        )

        logger.info("guest.created", id_guest=guest.id_guest, id_invitation=id_invitation)
        return guest

    async def list_guests(self, user_id: int) -> list[Guest]:
        return await self._list(Guest, user_id)
