"""Pydantic schemas for invitations and guests."""

from typing import Optional

from pydantic import BaseModel, Field

from undangan.schemas.common import RowId


# ─── Invitations ────────────────────────────────────────

class InvitationCreate(BaseModel):
    id_wedding: RowId
    slug: str = Field(..., min_length=1, max_length=150, pattern=r"^[a-z0-9-]+$")
    theme: Optional[str] = Field(None, max_length=50)
    cover_text: Optional[str] = None
    background_music: Optional[str] = None
    status: str = Field(default="draft", max_length=20)


class InvitationRead(BaseModel):
    id_invitation: int
    id_wedding: int
    slug: str
    theme: Optional[str] = None
    cover_text: Optional[str] = None
    background_music: Optional[str] = None
    status: str

    model_config = {"from_attributes": True}


# ─── Guests ─────────────────────────────────────────────

class GuestCreate(BaseModel):
    id_invitation: RowId
    guest_name: str = Field(..., min_length=1, max_length=150)
    phone: Optional[str] = Field(None, max_length=30)
    address: Optional[str] = None
    invitation_type: Optional[str] = Field(None, max_length=50)


class GuestRead(BaseModel):
    id_guest: int
    id_invitation: int
    guest_name: str
    phone: Optional[str] = None
    address: Optional[str] = None
    invitation_type: Optional[str] = None

    model_config = {"from_attributes": True}
