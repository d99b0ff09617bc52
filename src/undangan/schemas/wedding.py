"""Pydantic schemas for weddings, gallery items, love stories and gifts.

Separate "Create" schemas (input) from "Read" schemas (output). Field
names match the table columns, parent ids included.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field

from undangan.schemas.common import RowId


# ─── Weddings ───────────────────────────────────────────

class WeddingCreate(BaseModel):
    groom_name: str = Field(..., min_length=1, max_length=100)
    bride_name: str = Field(..., min_length=1, max_length=100)
    wedding_date: Optional[date] = None
    akad_date: Optional[datetime] = None
    reception_date: Optional[datetime] = None
    location: Optional[str] = None
    google_maps_link: Optional[str] = None


class WeddingRead(BaseModel):
    id_wedding: int
    id_user: int
    groom_name: str
    bride_name: str
    wedding_date: Optional[date] = None
    akad_date: Optional[datetime] = None
    reception_date: Optional[datetime] = None
    location: Optional[str] = None
    google_maps_link: Optional[str] = None

    model_config = {"from_attributes": True}


# ─── Gallery ────────────────────────────────────────────

class GalleryCreate(BaseModel):
    id_wedding: RowId
    media_type: str = Field(..., min_length=1, max_length=20)
    file_url: str = Field(..., min_length=1)
    caption: Optional[str] = None


class GalleryRead(BaseModel):
    id_gallery: int
    id_wedding: int
    media_type: str
    file_url: str
    caption: Optional[str] = None

    model_config = {"from_attributes": True}


# ─── Love story ─────────────────────────────────────────

class LoveStoryCreate(BaseModel):
    id_wedding: RowId
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    story_date: Optional[date] = None


class LoveStoryRead(BaseModel):
    id_story: int
    id_wedding: int
    title: str
    description: Optional[str] = None
    story_date: Optional[date] = None

    model_config = {"from_attributes": True}


# ─── Gifts ──────────────────────────────────────────────

class GiftCreate(BaseModel):
    id_wedding: RowId
    bank_name: str = Field(..., min_length=1, max_length=100)
    account_name: str = Field(..., min_length=1, max_length=150)
    account_number: str = Field(..., min_length=1, max_length=50)


class GiftRead(BaseModel):
    id_gift: int
    id_wedding: int
    bank_name: str
    account_name: str
    account_number: str

    model_config = {"from_attributes": True}
