"""Wedding, Gallery, Love Story and Gift API routes.

Every route here is authenticated and every list is scoped to the
caller. Creates under a wedding answer 404 when the wedding is not
the caller's.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from undangan.auth.dependencies import CurrentIdentity, get_current_user
from undangan.db.engine import get_db
from undangan.schemas.wedding import (
    GalleryCreate,
    GalleryRead,
    GiftCreate,
    GiftRead,
    LoveStoryCreate,
    LoveStoryRead,
    WeddingCreate,
    WeddingRead,
)
from undangan.services.errors import NotFoundError
from undangan.services.wedding_service import WeddingService

router = APIRouter()


def _svc(db: AsyncSession = Depends(get_db)) -> WeddingService:
    return WeddingService(db)


# ─── Weddings ───────────────────────────────────────────

@router.post("/wedding", response_model=WeddingRead, status_code=201)
async def create_wedding(
    body: WeddingCreate,
    identity: CurrentIdentity = Depends(get_current_user),
    svc: WeddingService = Depends(_svc),
):
    """Create a wedding owned by the caller."""
    return await svc.create_wedding(user_id=identity.user_id, **body.model_dump())


@router.get("/wedding", response_model=list[WeddingRead])
async def list_weddings(
    identity: CurrentIdentity = Depends(get_current_user),
    svc: WeddingService = Depends(_svc),
):
    return await svc.list_weddings(identity.user_id)


# ─── Gallery ────────────────────────────────────────────

@router.post("/gallery", response_model=GalleryRead, status_code=201)
async def create_gallery_item(
    body: GalleryCreate,
    identity: CurrentIdentity = Depends(get_current_user),
    svc: WeddingService = Depends(_svc),
):
    try:
        return await svc.create_gallery_item(
            user_id=identity.user_id, **body.model_dump()
        )
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/gallery", response_model=list[GalleryRead])
async def list_gallery(
    identity: CurrentIdentity = Depends(get_current_user),
    svc: WeddingService = Depends(_svc),
):
    return await svc.list_gallery(identity.user_id)


# ─── Love story ─────────────────────────────────────────

@router.post("/love-story", response_model=LoveStoryRead, status_code=201)
async def create_love_story(
    body: LoveStoryCreate,
    identity: CurrentIdentity = Depends(get_current_user),
    svc: WeddingService = Depends(_svc),
):
    try:
        return await svc.create_love_story(
            user_id=identity.user_id, **body.model_dump()
        )
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/love-story", response_model=list[LoveStoryRead])
async def list_love_stories(
    identity: CurrentIdentity = Depends(get_current_user),
    svc: WeddingService = Depends(_svc),
):
    return await svc.list_love_stories(identity.user_id)


# ─── Gifts ──────────────────────────────────────────────

@router.post("/gift", response_model=GiftRead, status_code=201)
async def create_gift(
    body: GiftCreate,
    identity: CurrentIdentity = Depends(get_current_user),
    svc: WeddingService = Depends(_svc),
):
    try:
        return await svc.create_gift(user_id=identity.user_id, **body.model_dump())
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/gift", response_model=list[GiftRead])
async def list_gifts(
    identity: CurrentIdentity = Depends(get_current_user),
    svc: WeddingService = Depends(_svc),
):
    return await svc.list_gifts(identity.user_id)
