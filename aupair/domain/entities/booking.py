"""Pure domain representation of booking aggregates and scheduling values."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import FrozenSet, Optional

from aupair.domain.exceptions import ValidationError
from aupair.domain.value_objects import BookingId, UserId


class BookingStatus(str, Enum):
    """Lifecycle status for a booking."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"


ACTIVE_BOOKING_STATUSES: FrozenSet[BookingStatus] = frozenset(
    {BookingStatus.PENDING, BookingStatus.APPROVED}
)

# Targets accepted by a status update; PENDING is only ever set on creation.
UPDATABLE_BOOKING_STATUSES: FrozenSet[BookingStatus] = frozenset(
    {
        BookingStatus.APPROVED,
        BookingStatus.REJECTED,
        BookingStatus.CANCELLED,
        BookingStatus.COMPLETED,
    }
)

DELETABLE_BOOKING_STATUSES: FrozenSet[BookingStatus] = frozenset(
    {BookingStatus.PENDING, BookingStatus.REJECTED, BookingStatus.CANCELLED}
)


@dataclass(frozen=True)
class ProposedInterval:
    """A time span someone wants to reserve for a party."""

    start: datetime
    end: datetime
    party_id: Optional[UserId] = None


@dataclass(frozen=True)
class ExistingReservation:
    """A time span already reserved for a party."""

    start: datetime
    end: datetime
    status: BookingStatus
    party_id: Optional[UserId] = None

    @property
    def is_active(self) -> bool:
        return self.status in ACTIVE_BOOKING_STATUSES


def validate_booking_window(start: datetime, end: datetime, now: datetime) -> None:
    """Reject windows that end before they start or start in the past."""
    if start >= end:
        raise ValidationError("End date must be after start date")
    if start < now:
        raise ValidationError("Start date cannot be in the past")


def calculate_total_amount(
    total_hours: Optional[Decimal], hourly_rate: Optional[Decimal]
) -> Optional[Decimal]:
    if not total_hours or not hourly_rate:
        return None
    return Decimal(total_hours) * Decimal(hourly_rate)


@dataclass
class Booking:
    """A scheduled engagement between an au pair and a host family."""

    id: BookingId
    au_pair_id: UserId
    host_id: UserId
    start_date: datetime
    end_date: datetime
    status: BookingStatus = BookingStatus.PENDING
    total_hours: Optional[Decimal] = None
    hourly_rate: Optional[Decimal] = None
    total_amount: Optional[Decimal] = None
    currency: str = "USD"
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def involves(self, user_id: UserId) -> bool:
        return user_id in (self.au_pair_id, self.host_id)

    @property
    def is_active(self) -> bool:
        return self.status in ACTIVE_BOOKING_STATUSES

    def as_interval(self) -> ProposedInterval:
        return ProposedInterval(start=self.start_date, end=self.end_date, party_id=self.au_pair_id)

    def as_reservation(self) -> ExistingReservation:
        return ExistingReservation(
            start=self.start_date,
            end=self.end_date,
            status=self.status,
            party_id=self.au_pair_id,
        )

    def transition_to(self, status: BookingStatus, now: datetime, notes: Optional[str] = None) -> None:
        """Apply a status update requested by one of the participants."""
        if status not in UPDATABLE_BOOKING_STATUSES:
            raise ValidationError("Status must be APPROVED, REJECTED, CANCELLED, or COMPLETED")
        if status == BookingStatus.COMPLETED and self.end_date > now:
            raise ValidationError("Cannot mark booking as completed before end date")
        if status == BookingStatus.APPROVED and self.start_date < now:
            raise ValidationError("Cannot approve a booking that has already started")

        self.status = status
        self.notes = notes or self.notes
        self.updated_at = now

    def reschedule(
        self,
        now: datetime,
        *,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
        total_hours: Optional[Decimal] = None,
        hourly_rate: Optional[Decimal] = None,
        currency: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> None:
        """Change the details of a pending booking."""
        if self.status != BookingStatus.PENDING:
            raise ValidationError("Can only update pending bookings")
        if start_date and end_date and start_date >= end_date:
            raise ValidationError("End date must be after start date")
        if start_date and start_date < now:
            raise ValidationError("Start date cannot be in the past")

        new_start = start_date or self.start_date
        new_end = end_date or self.end_date
        if new_start >= new_end:
            raise ValidationError("End date must be after start date")

        if total_hours and hourly_rate:
            self.total_amount = calculate_total_amount(total_hours, hourly_rate)
        self.start_date = new_start
        self.end_date = new_end
        if total_hours:
            self.total_hours = total_hours
        if hourly_rate:
            self.hourly_rate = hourly_rate
        if currency:
            self.currency = currency
        if notes is not None:
            self.notes = notes
        self.updated_at = now

    def ensure_deletable(self) -> None:
        if self.status not in DELETABLE_BOOKING_STATUSES:
            raise ValidationError("Can only delete pending, rejected, or cancelled bookings")


__all__ = [
    "BookingStatus",
    "ACTIVE_BOOKING_STATUSES",
    "UPDATABLE_BOOKING_STATUSES",
    "DELETABLE_BOOKING_STATUSES",
    "ProposedInterval",
    "ExistingReservation",
    "Booking",
    "validate_booking_window",
    "calculate_total_amount",
]
