"""Pydantic schemas for guest-submitted RSVPs and wishes."""

from typing import Optional

from pydantic import BaseModel, Field

from undangan.schemas.common import RowId


class RsvpCreate(BaseModel):
    id_guest: RowId
    attendance: str = Field(..., min_length=1, max_length=20)
    total_guest: int = Field(default=1, ge=0, le=50)
    message: Optional[str] = Field(None, max_length=2000)


class RsvpRead(BaseModel):
    id_rsvp: int
    id_guest: int
    attendance: str
    total_guest: int
    message: Optional[str] = None

    model_config = {"from_attributes": True}


class WishCreate(BaseModel):
    id_guest: RowId
    message: str = Field(..., min_length=1, max_length=2000)


class WishRead(BaseModel):
    id_wish: int
    id_guest: int
    message: str

    model_config = {"from_attributes": True}
