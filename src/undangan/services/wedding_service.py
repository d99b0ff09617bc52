"""Wedding service — weddings and the resources hanging directly off them.

Gallery items, love-story entries and gift accounts all belong to a
wedding. Creating one checks that the target wedding is owned by the
caller before inserting; a wedding owned by someone else is reported
exactly like a missing one.
"""

from datetime import date, datetime
from typing import Optional

import structlog

from undangan.db.models import Gallery, Gift, LoveStory, Wedding
from undangan.services.base import ScopedService
from undangan.services.errors import NotFoundError
from undangan.services.ownership import owns

logger = structlog.get_logger()


class WeddingService(ScopedService):
    """Business logic for weddings, galleries, love stories and gifts."""

    async def _require_wedding(self, user_id: int, id_wedding: int) -> None:
        if not await owns(self.db, Wedding, id_wedding, user_id):
            raise NotFoundError("Wedding not found")

    # ─── Weddings ───────────────────────────────────────

    async def create_wedding(
        self,
        user_id: int,
        groom_name: str,
        bride_name: str,
        wedding_date: Optional[date] = None,
        akad_date: Optional[datetime] = None,
        reception_date: Optional[datetime] = None,
        location: Optional[str] = None,
        google_maps_link: Optional[str] = None,
    ) -> Wedding:
        wedding = await self._save(
            Wedding(
                id_user=user_id,
                groom_name=groom_name,
                bride_name=bride_name,
                wedding_date=wedding_date,
                akad_date=akad_date,
                reception_date=reception_date,
                location=location,
                google_maps_link=google_maps_link,
            )
        )
        logger.info("wedding.created", id_wedding=wedding.id_wedding, user_id=user_id)
        return wedding

    async def list_weddings(self, user_id: int) -> list[Wedding]:
        return await self._list(Wedding, user_id)

    # ─── Gallery ────────────────────────────────────────

    async def create_gallery_item(
        self,
        user_id: int,
        id_wedding: int,
        media_type: str,
        file_url: str,
        caption: Optional[str] = None,
    ) -> Gallery:
        await self._require_wedding(user_id, id_wedding)
        item = await self._save(
            Gallery(
                id_wedding=id_wedding,
                media_type=media_type,
                file_url=file_url,
                caption=caption,
            )
        )
        logger.info("gallery.created", id_gallery=item.id_gallery, id_wedding=id_wedding)
        return item

    async def list_gallery(self, user_id: int) -> list[Gallery]:
        return await self._list(Gallery, user_id)

    # ─── Love story ─────────────────────────────────────

    async def create_love_story(
        self,
        user_id: int,
        id_wedding: int,
        title: str,
        description: Optional[str] = None,
        story_date: Optional[date] = None,
    ) -> LoveStory:
        await self._require_wedding(user_id, id_wedding)
        story = await self._save(
            LoveStory(
                id_wedding=id_wedding,
                title=title,
                description=description,
                story_date=story_date,
            )
        )
        logger.info("love_story.created", id_story=story.id_story, id_wedding=id_wedding)
        return story

    async def list_love_stories(self, user_id: int) -> list[LoveStory]:
        return await self._list(LoveStory, user_id)

    # ─── Gifts ──────────────────────────────────────────

    async def create_gift(
        self,
        user_id: int,
        id_wedding: int,
        bank_name: str,
        account_name: str,
        account_number: str,
    ) -> Gift:
        await self._require_wedding(user_id, id_wedding)
        gift = await self._save(
            Gift(
                id_wedding=id_wedding,
                bank_name=bank_name,
                account_name=account_name,
                account_number=account_number,
            )
        )
        logger.info("gift.created", id_gift=gift.id_gift, id_wedding=id_wedding)
        return gift

    async def list_gifts(self, user_id: int) -> list[Gift]:
        return await self._list(Gift, user_id)
