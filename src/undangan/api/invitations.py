"""Invitation and Guest API routes.

GET /invitation/{slug} is public: it is the link guests open. Every
other route needs a bearer token and is scoped to the caller.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from undangan.auth.dependencies import CurrentIdentity, get_current_user
from undangan.db.engine import get_db
from undangan.schemas.invitation import (
    GuestCreate,
    GuestRead,
    InvitationCreate,
    InvitationRead,
)
from undangan.services.errors import ConflictError, NotFoundError
from undangan.services.invitation_service import InvitationService

router = APIRouter()


def _svc(db: AsyncSession = Depends(get_db)) -> InvitationService:
    return InvitationService(db)


# ─── Invitations ────────────────────────────────────────

@router.post("/invitation", response_model=InvitationRead, status_code=201)
async def create_invitation(
    body: InvitationCreate,
    identity: CurrentIdentity = Depends(get_current_user),
    svc: InvitationService = Depends(_svc),
):
    """Create an invitation for one of the caller's weddings."""
    try:
        return await svc.create_invitation(
            user_id=identity.user_id, **body.model_dump()
        )
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.get("/invitation", response_model=list[InvitationRead])
async def list_invitations(
    identity: CurrentIdentity = Depends(get_current_user),
    svc: InvitationService = Depends(_svc),
):
    return await svc.list_invitations(identity.user_id)


@router.get("/invitation/{slug}", response_model=InvitationRead)
async def get_invitation_by_slug(
    slug: str,
    svc: InvitationService = Depends(_svc),
):
    """Public lookup by slug. No auth."""
    try:
        return await svc.get_by_slug(slug)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


# ─── Guests ─────────────────────────────────────────────

@router.post("/guest", response_model=GuestRead, status_code=201)
async def create_guest(
    body: GuestCreate,
    identity: CurrentIdentity = Depends(get_current_user),
    svc: InvitationService = Depends(_svc),
):
    try:
        return await svc.create_guest(user_id=identity.user_id, **body.model_dump())
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/guest", response_model=list[GuestRead])
async def list_guests(
    identity: CurrentIdentity = Depends(get_current_user),
    svc: InvitationService = Depends(_svc),
):
    return await svc.list_guests(identity.user_id)
