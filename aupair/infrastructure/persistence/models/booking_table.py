"""SQLModel table for bookings."""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Index, Numeric, String, Text, Uuid
from sqlmodel import Field

from aupair.infrastructure.persistence.models.base import TimestampedTable


class BookingTable(TimestampedTable, table=True):
    """Scheduled engagement between an au pair and a host family."""
    __tablename__ = "bookings"

    __table_args__ = (
        CheckConstraint("end_date > start_date", name="ck_bookings_window"),
        Index("idx_bookings_au_pair_status_start", "au_pair_id", "status", "start_date"),
        Index("idx_bookings_host_start", "host_id", "start_date"),
    )

    au_pair_id: UUID = Field(
        sa_column=Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    )
    host_id: UUID = Field(
        sa_column=Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    )
    start_date: datetime = Field(
        sa_column=Column(DateTime(timezone=True), nullable=False)
    )
    end_date: datetime = Field(
        sa_column=Column(DateTime(timezone=True), nullable=False)
    )
    total_hours: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(8, 2), nullable=True)
    )
    hourly_rate: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(10, 2), nullable=True)
    )
    total_amount: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(12, 2), nullable=True)
    )
    currency: str = Field(
        default="USD",
        sa_column=Column(String(3), nullable=False, default="USD")
    )
    notes: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True)
    )
    status: str = Field(
        default="PENDING",
        sa_column=Column(String(20), nullable=False, default="PENDING", index=True)
    )
