"""create matching and booking tables

Revision ID: 4b1f0c2a9d31
Revises:
Create Date: 2026-10-18 10:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "4b1f0c2a9d31"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list:
    return [
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "users",
        *_timestamps(),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=20), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)
    op.create_index("ix_users_role", "users", ["role"], unique=False)
    op.create_index("ix_users_is_active", "users", ["is_active"], unique=False)

    op.create_table(
        "au_pair_profiles",
        *_timestamps(),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("first_name", sa.String(length=100), nullable=False),
        sa.Column("last_name", sa.String(length=100), nullable=False),
        sa.Column("languages", postgresql.ARRAY(sa.String()), nullable=False),
        sa.Column("preferred_countries", postgresql.ARRAY(sa.String()), nullable=False),
        sa.Column("date_of_birth", sa.Date(), nullable=True),
        sa.Column("available_from", sa.DateTime(timezone=True), nullable=True),
        sa.Column("available_to", sa.DateTime(timezone=True), nullable=True),
        sa.Column("hourly_rate", sa.Numeric(10, 2), nullable=True),
        sa.Column("currency", sa.String(length=3), nullable=False),
        sa.Column("profile_photo_url", sa.String(length=500), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id"),
    )

    op.create_table(
        "host_family_profiles",
        *_timestamps(),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("family_name", sa.String(length=150), nullable=False),
        sa.Column("contact_person_name", sa.String(length=150), nullable=True),
        sa.Column("country", sa.String(length=100), nullable=True),
        sa.Column("preferred_languages", postgresql.ARRAY(sa.String()), nullable=False),
        sa.Column("children_ages", postgresql.ARRAY(sa.Integer()), nullable=False),
        sa.Column("max_budget", sa.Numeric(10, 2), nullable=True),
        sa.Column("currency", sa.String(length=3), nullable=False),
        sa.Column("profile_photo_url", sa.String(length=500), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id"),
    )
    op.create_index(
        "ix_host_family_profiles_country", "host_family_profiles", ["country"], unique=False
    )

    op.create_table(
        "matches",
        *_timestamps(),
        sa.Column("host_id", sa.Uuid(), nullable=False),
        sa.Column("au_pair_id", sa.Uuid(), nullable=False),
        sa.Column("match_score", sa.Integer(), nullable=False),
        sa.Column("initiated_by", sa.String(length=20), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(["host_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["au_pair_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("host_id", "au_pair_id", name="uq_matches_host_au_pair"),
    )
    op.create_index("idx_matches_au_pair_status", "matches", ["au_pair_id", "status"], unique=False)
    op.create_index("idx_matches_host_status", "matches", ["host_id", "status"], unique=False)

    op.create_table(
        "bookings",
        *_timestamps(),
        sa.Column("au_pair_id", sa.Uuid(), nullable=False),
        sa.Column("host_id", sa.Uuid(), nullable=False),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("total_hours", sa.Numeric(8, 2), nullable=True),
        sa.Column("hourly_rate", sa.Numeric(10, 2), nullable=True),
        sa.Column("total_amount", sa.Numeric(12, 2), nullable=True),
        sa.Column("currency", sa.String(length=3), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.CheckConstraint("end_date > start_date", name="ck_bookings_window"),
        sa.ForeignKeyConstraint(["au_pair_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["host_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_bookings_status", "bookings", ["status"], unique=False)
    op.create_index(
        "idx_bookings_au_pair_status_start",
        "bookings",
        ["au_pair_id", "status", "start_date"],
        unique=False,
    )
    op.create_index("idx_bookings_host_start", "bookings", ["host_id", "start_date"], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_bookings_host_start", table_name="bookings")
    op.drop_index("idx_bookings_au_pair_status_start", table_name="bookings")
    op.drop_index("ix_bookings_status", table_name="bookings")
    op.drop_table("bookings")

    op.drop_index("idx_matches_host_status", table_name="matches")
    op.drop_index("idx_matches_au_pair_status", table_name="matches")
    op.drop_table("matches")

    op.drop_index("ix_host_family_profiles_country", table_name="host_family_profiles")
    op.drop_table("host_family_profiles")
    op.drop_table("au_pair_profiles")

    op.drop_index("ix_users_is_active", table_name="users")
    op.drop_index("ix_users_role", table_name="users")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
