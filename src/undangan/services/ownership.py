"""Ownership resolver — which rows belong to which user.

Every resource reaches its owning user through a chain of foreign keys:

    wedding.id_user
    invitation.id_wedding → wedding
    guest.id_invitation   → invitation → wedding
    rsvp.id_guest, wishes.id_guest → guest → invitation → wedding
    gallery / love_story / gift .id_wedding → wedding

Each hop is expressed as an IN (subquery) rather than a join, so a
scoped list is still a single SELECT on the resource's own table and
returns exactly its own columns.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from undangan.db.models import (
    Base,
    Gallery,
    Gift,
    Guest,
    Invitation,
    LoveStory,
    Rsvp,
    Wedding,
    Wish,
)


def owned_wedding_ids(user_id: int) -> Select:
    return select(Wedding.id_wedding).where(Wedding.id_user == user_id)


def owned_invitation_ids(user_id: int) -> Select:
    return select(Invitation.id_invitation).where(
        Invitation.id_wedding.in_(owned_wedding_ids(user_id))
    )


def owned_guest_ids(user_id: int) -> Select:
    return select(Guest.id_guest).where(
        Guest.id_invitation.in_(owned_invitation_ids(user_id))
    )


def ownership_predicate(model: type[Base], user_id: int):
    """WHERE clause restricting `model` to rows reachable from `user_id`."""
    if model is Wedding:
        return Wedding.id_user == user_id
    if model is Invitation:
        return Invitation.id_wedding.in_(owned_wedding_ids(user_id))
    if model is Guest:
        return Guest.id_invitation.in_(owned_invitation_ids(user_id))
    if model in (Rsvp, Wish):
        return model.id_guest.in_(owned_guest_ids(user_id))
    if model in (Gallery, LoveStory, Gift):
        return model.id_wedding.in_(owned_wedding_ids(user_id))
    raise ValueError(f"No ownership chain for {model.__name__}")


def _primary_key(model: type[Base]):
    return model.__mapper__.primary_key[0]


def scoped(model: type[Base], user_id: int) -> Select:
    """SELECT every row of `model` owned by `user_id`, ordered by id."""
    return (
        select(model)
        .where(ownership_predicate(model, user_id))
        .order_by(_primary_key(model))
    )


async def owns(
    db: AsyncSession, model: type[Base], row_id: int, user_id: int
) -> bool:
    """True if the row `row_id` of `model` exists and belongs to `user_id`."""
    pk = _primary_key(model)
    result = await db.execute(
        select(pk).where(pk == row_id, ownership_predicate(model, user_id))
    )
    return result.first() is not None
