"""SQLAlchemy ORM models — single source of truth for the database schema.

Declarative ORM mapping with SQLAlchemy 2.0 style (Mapped[] + mapped_column).
Each class = one table. Alembic migrations are generated from these models.

Ownership forms a tree rooted at users:

    users ─┬─ wedding ─┬─ invitation ── guest ─┬─ rsvp
           │           │                       └─ wishes
           │           ├─ gallery
           │           ├─ love_story
           │           └─ gift

Every non-user row has exactly one parent foreign key. Column names
(id_user, id_wedding, ...) double as the JSON field names of the API.
"""

from datetime import date, datetime, timezone
from typing import Optional

from sqlalchemy import (
    Date,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    TypeDecorator,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all models."""
    pass


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Convert to UTC. Naive values are taken to already be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class UTCDateTime(TypeDecorator):
    """Timestamp stored in UTC and always read back timezone-aware.

    SQLite keeps no offset at all, so the value is normalised on the way
    in and tagged as UTC on the way out.
    """

    impl = DateTime
    cache_ok = True

    def process_bind_param(self, value, dialect):
        return as_utc(value) if value is not None else None

    def process_result_value(self, value, dialect):
        return as_utc(value) if value is not None else None


class User(Base):
    """An account holder. Root of every ownership chain."""

    __tablename__ = "users"

    id_user: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)  # bcrypt hash
    role: Mapped[str] = mapped_column(String(20), nullable=False, default="user")
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(timezone=True), default=utcnow
    )


class Wedding(Base):
    """A wedding owned by one user. A user may own several."""

    __tablename__ = "wedding"

    id_wedding: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id_user: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id_user"), nullable=False, index=True
    )
    groom_name: Mapped[str] = mapped_column(String(100), nullable=False)
    bride_name: Mapped[str] = mapped_column(String(100), nullable=False)
    wedding_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    akad_date: Mapped[Optional[datetime]] = mapped_column(
        UTCDateTime(timezone=True), nullable=True
    )
    reception_date: Mapped[Optional[datetime]] = mapped_column(
        UTCDateTime(timezone=True), nullable=True
    )
    location: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    google_maps_link: Mapped[Optional[str]] = mapped_column(Text, nullable=True)


class Invitation(Base):
    """A digital invitation page for a wedding.

    The slug is the public key guests use to open the invitation,
    so it is unique across all weddings, not just within one.
    """

    __tablename__ = "invitation"

    id_invitation: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id_wedding: Mapped[int] = mapped_column(
        Integer, ForeignKey("wedding.id_wedding"), nullable=False, index=True
    )
    slug: Mapped[str] = mapped_column(String(150), unique=True, nullable=False)
    theme: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    cover_text: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    background_music: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="draft")


class Guest(Base):
    __tablename__ = "guest"

    id_guest: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id_invitation: Mapped[int] = mapped_column(
        Integer, ForeignKey("invitation.id_invitation"), nullable=False, index=True
    )
    guest_name: Mapped[str] = mapped_column(String(150), nullable=False)
    phone: Mapped[Optional[str]] = mapped_column(String(30), nullable=True)
    address: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    invitation_type: Mapped[Optional[str]] = mapped_column(
        String(50), nullable=True
    )  # category label, e.g. family, vip, colleague


class Rsvp(Base):
    """A guest's attendance answer. Submitted by the guest, not the owner."""

    __tablename__ = "rsvp"

    id_rsvp: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id_guest: Mapped[int] = mapped_column(
        Integer, ForeignKey("guest.id_guest"), nullable=False, index=True
    )
    attendance: Mapped[str] = mapped_column(String(20), nullable=False)
    total_guest: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    message: Mapped[Optional[str]] = mapped_column(Text, nullable=True)


class Gallery(Base):
    __tablename__ = "gallery"

    id_gallery: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id_wedding: Mapped[int] = mapped_column(
        Integer, ForeignKey("wedding.id_wedding"), nullable=False, index=True
    )
    media_type: Mapped[str] = mapped_column(String(20), nullable=False)  # photo, video
    file_url: Mapped[str] = mapped_column(Text, nullable=False)
    caption: Mapped[Optional[str]] = mapped_column(Text, nullable=True)


class LoveStory(Base):
    __tablename__ = "love_story"

    id_story: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id_wedding: Mapped[int] = mapped_column(
        Integer, ForeignKey("wedding.id_wedding"), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    story_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)


class Gift(Base):
    """A bank account guests can send gifts to."""

    __tablename__ = "gift"

    id_gift: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id_wedding: Mapped[int] = mapped_column(
        Integer, ForeignKey("wedding.id_wedding"), nullable=False, index=True
    )
    bank_name: Mapped[str] = mapped_column(String(100), nullable=False)
    account_name: Mapped[str] = mapped_column(String(150), nullable=False)
    account_number: Mapped[str] = mapped_column(String(50), nullable=False)


class Wish(Base):
    __tablename__ = "wishes"

    id_wish: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id_guest: Mapped[int] = mapped_column(
        Integer, ForeignKey("guest.id_guest"), nullable=False, index=True
    )
    message: Mapped[str] = mapped_column(Text, nullable=False)
