"""initial schema: users, weddings and everything owned by them

Revision ID: 3f1c2a9d7e10
Revises:
Create Date: 2026-10-19 10:12:44.512031
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c2a9d7e10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id_user", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=20), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id_user"),
        sa.UniqueConstraint("email"),
    )
    op.create_table(
        "wedding",
        sa.Column("id_wedding", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("id_user", sa.Integer(), nullable=False),
        sa.Column("groom_name", sa.String(length=100), nullable=False),
        sa.Column("bride_name", sa.String(length=100), nullable=False),
        sa.Column("wedding_date", sa.Date(), nullable=True),
        sa.Column("akad_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("reception_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("location", sa.Text(), nullable=True),
        sa.Column("google_maps_link", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(["id_user"], ["users.id_user"]),
        sa.PrimaryKeyConstraint("id_wedding"),
    )
    op.create_index("ix_wedding_id_user", "wedding", ["id_user"])

    op.create_table(
        "invitation",
        sa.Column("id_invitation", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("id_wedding", sa.Integer(), nullable=False),
        sa.Column("slug", sa.String(length=150), nullable=False),
        sa.Column("theme", sa.String(length=50), nullable=True),
        sa.Column("cover_text", sa.Text(), nullable=True),
        sa.Column("background_music", sa.Text(), nullable=True),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.ForeignKeyConstraint(["id_wedding"], ["wedding.id_wedding"]),
        sa.PrimaryKeyConstraint("id_invitation"),
        sa.UniqueConstraint("slug"),
    )
    op.create_index("ix_invitation_id_wedding", "invitation", ["id_wedding"])

    op.create_table(
        "guest",
        sa.Column("id_guest", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("id_invitation", sa.Integer(), nullable=False),
        sa.Column("guest_name", sa.String(length=150), nullable=False),
        sa.Column("phone", sa.String(length=30), nullable=True),
        sa.Column("address", sa.Text(), nullable=True),
        sa.Column("invitation_type", sa.String(length=50), nullable=True),
        sa.ForeignKeyConstraint(["id_invitation"], ["invitation.id_invitation"]),
        sa.PrimaryKeyConstraint("id_guest"),
    )
    op.create_index("ix_guest_id_invitation", "guest", ["id_invitation"])

    op.create_table(
        "rsvp",
        sa.Column("id_rsvp", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("id_guest", sa.Integer(), nullable=False),
        sa.Column("attendance", sa.String(length=20), nullable=False),
        sa.Column("total_guest", sa.Integer(), nullable=False),
        sa.Column("message", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(["id_guest"], ["guest.id_guest"]),
        sa.PrimaryKeyConstraint("id_rsvp"),
    )
    op.create_index("ix_rsvp_id_guest", "rsvp", ["id_guest"])

    op.create_table(
        "wishes",
        sa.Column("id_wish", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("id_guest", sa.Integer(), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.ForeignKeyConstraint(["id_guest"], ["guest.id_guest"]),
        sa.PrimaryKeyConstraint("id_wish"),
    )
    op.create_index("ix_wishes_id_guest", "wishes", ["id_guest"])

    # ─── Wedding detail tables ───────────────────────────
    op.create_table(
        "gallery",
        sa.Column("id_gallery", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("id_wedding", sa.Integer(), nullable=False),
        sa.Column("media_type", sa.String(length=20), nullable=False),
        sa.Column("file_url", sa.Text(), nullable=False),
        sa.Column("caption", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(["id_wedding"], ["wedding.id_wedding"]),
        sa.PrimaryKeyConstraint("id_gallery"),
    )
    op.create_index("ix_gallery_id_wedding", "gallery", ["id_wedding"])

    op.create_table(
        "love_story",
        sa.Column("id_story", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("id_wedding", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("story_date", sa.Date(), nullable=True),
        sa.ForeignKeyConstraint(["id_wedding"], ["wedding.id_wedding"]),
        sa.PrimaryKeyConstraint("id_story"),
    )
    op.create_index("ix_love_story_id_wedding", "love_story", ["id_wedding"])

    op.create_table(
        "gift",
        sa.Column("id_gift", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("id_wedding", sa.Integer(), nullable=False),
        sa.Column("bank_name", sa.String(length=100), nullable=False),
        sa.Column("account_name", sa.String(length=150), nullable=False),
        sa.Column("account_number", sa.String(length=50), nullable=False),
        sa.ForeignKeyConstraint(["id_wedding"], ["wedding.id_wedding"]),
        sa.PrimaryKeyConstraint("id_gift"),
    )
    op.create_index("ix_gift_id_wedding", "gift", ["id_wedding"])


def downgrade() -> None:
    for table in (
        "gift",
        "love_story",
        "gallery",
        "wishes",
        "rsvp",
        "guest",
        "invitation",
        "wedding",
    ):
        op.drop_index(f"ix_{table}_{_parent_column(table)}", table_name=table)
        op.drop_table(table)
    op.drop_table("users")


def _parent_column(table: str) -> str:
    return {
        "wedding": "id_user",
        "invitation": "id_wedding",
        "guest": "id_invitation",
        "rsvp": "id_guest",
        "wishes": "id_guest",
    }.get(table, "id_wedding")
