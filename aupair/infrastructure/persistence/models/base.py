"""Shared columns for SQLModel table definitions."""

from datetime import datetime, timezone
from uuid import UUID, uuid4

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TimestampedTable(SQLModel):
    """Base for tables keyed by UUID with creation and update timestamps."""

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        description="Primary key"
    )
    created_at: datetime = Field(
        default_factory=utcnow,
        sa_type=DateTime(timezone=True),
        nullable=False,
        description="Record creation timestamp"
    )
    updated_at: datetime = Field(
        default_factory=utcnow,
        sa_type=DateTime(timezone=True),
        nullable=False,
        description="Record last update timestamp"
    )
