"""SQLModel table for match requests."""

from typing import Optional
from uuid import UUID

from sqlalchemy import Column, ForeignKey, Index, Integer, String, Text, UniqueConstraint, Uuid
from sqlmodel import Field

from aupair.infrastructure.persistence.models.base import TimestampedTable


class MatchTable(TimestampedTable, table=True):
    """One row per host family / au pair pair."""
    __tablename__ = "matches"

    __table_args__ = (
        UniqueConstraint("host_id", "au_pair_id", name="uq_matches_host_au_pair"),
        Index("idx_matches_au_pair_status", "au_pair_id", "status"),
        Index("idx_matches_host_status", "host_id", "status"),
    )

    host_id: UUID = Field(
        sa_column=Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    )
    au_pair_id: UUID = Field(
        sa_column=Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    )
    match_score: int = Field(
        default=0,
        sa_column=Column(Integer, nullable=False, default=0),
        description="Compatibility score at request time (0-100)"
    )
    initiated_by: str = Field(
        sa_column=Column(String(20), nullable=False),
        description="Role of the member who sent the request"
    )
    status: str = Field(
        default="PENDING",
        sa_column=Column(String(20), nullable=False, default="PENDING")
    )
    notes: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True)
    )
