"""RSVP and Wishes API routes.

POST is open to wedding guests (no account, no token). GET is for the
couple and only returns entries from their own guests.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from undangan.auth.dependencies import CurrentIdentity, get_current_user
from undangan.db.engine import get_db
from undangan.schemas.guestbook import RsvpCreate, RsvpRead, WishCreate, WishRead
from undangan.services.errors import NotFoundError
from undangan.services.guestbook_service import GuestbookService

router = APIRouter()


def _svc(db: AsyncSession = Depends(get_db)) -> GuestbookService:
    return GuestbookService(db)


# ─── RSVP ───────────────────────────────────────────────

@router.post("/rsvp", response_model=RsvpRead, status_code=201)
async def submit_rsvp(body: RsvpCreate, svc: GuestbookService = Depends(_svc)):
    try:
        return await svc.submit_rsvp(**body.model_dump())
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/rsvp", response_model=list[RsvpRead])
async def list_rsvps(
    identity: CurrentIdentity = Depends(get_current_user),
    svc: GuestbookService = Depends(_svc),
):
    return await svc.list_rsvps(identity.user_id)


# ─── Wishes ─────────────────────────────────────────────

@router.post("/wishes", response_model=WishRead, status_code=201)
async def submit_wish(body: WishCreate, svc: GuestbookService = Depends(_svc)):
    try:
        return await svc.submit_wish(**body.model_dump())
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/wishes", response_model=list[WishRead])
async def list_wishes(
    identity: CurrentIdentity = Depends(get_current_user),
    svc: GuestbookService = Depends(_svc),
):
    return await svc.list_wishes(identity.user_id)
