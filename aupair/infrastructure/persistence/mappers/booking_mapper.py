"""
Mapper between Booking domain entities and BookingTable persistence models.
"""

from __future__ import annotations

from aupair.domain.clock import ensure_utc
from aupair.domain.entities.booking import Booking, BookingStatus
from aupair.domain.value_objects import BookingId, UserId
from aupair.infrastructure.persistence.models.base import utcnow
from aupair.infrastructure.persistence.models.booking_table import BookingTable


class BookingMapper:
    """Maps between Booking domain entities and BookingTable rows."""

    @staticmethod
    def to_domain(table: BookingTable) -> Booking:
        return Booking(
            id=BookingId(table.id),
            au_pair_id=UserId(table.au_pair_id),
            host_id=UserId(table.host_id),
            start_date=ensure_utc(table.start_date),
            end_date=ensure_utc(table.end_date),
            status=BookingStatus(table.status),
            total_hours=table.total_hours,
            hourly_rate=table.hourly_rate,
            total_amount=table.total_amount,
            currency=table.currency,
            notes=table.notes,
            created_at=table.created_at,
            updated_at=table.updated_at,
        )

    @staticmethod
    def to_table(entity: Booking) -> BookingTable:
        now = utcnow()
        return BookingTable(
            id=entity.id.value,
            au_pair_id=entity.au_pair_id.value,
            host_id=entity.host_id.value,
            start_date=entity.start_date,
            end_date=entity.end_date,
            status=entity.status.value,
            total_hours=entity.total_hours,
            hourly_rate=entity.hourly_rate,
            total_amount=entity.total_amount,
            currency=entity.currency,
            notes=entity.notes,
            created_at=entity.created_at or now,
            updated_at=entity.updated_at or now,
        )

    @staticmethod
    def update_table_from_domain(table: BookingTable, entity: Booking) -> None:
        """Copy the mutable fields of a booking onto an existing row."""
        table.start_date = entity.start_date
        table.end_date = entity.end_date
        table.status = entity.status.value
        table.total_hours = entity.total_hours
        table.hourly_rate = entity.hourly_rate
        table.total_amount = entity.total_amount
        table.currency = entity.currency
        table.notes = entity.notes
        table.updated_at = entity.updated_at or utcnow()
