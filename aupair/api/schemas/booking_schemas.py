"""Booking API schemas and DTOs."""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from aupair.domain.entities.booking import Booking, BookingStatus


def _as_float(value: Optional[Decimal]) -> Optional[float]:
    return float(value) if value is not None else None


class BookingCreate(BaseModel):
    """Body of a booking request."""

    target_user_id: Optional[UUID] = Field(None, description="Matched counterpart")
    start_date: Optional[datetime] = Field(None, description="Start of the engagement")
    end_date: Optional[datetime] = Field(None, description="End of the engagement")
    total_hours: Optional[Decimal] = Field(None, ge=0)
    hourly_rate: Optional[Decimal] = Field(None, ge=0)
    currency: Optional[str] = Field(None, min_length=3, max_length=3)
    notes: Optional[str] = Field(None, max_length=2000)


class BookingUpdate(BaseModel):
    """Changes to a pending booking. Omitted fields keep their value."""

    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    total_hours: Optional[Decimal] = Field(None, ge=0)
    hourly_rate: Optional[Decimal] = Field(None, ge=0)
    currency: Optional[str] = Field(None, min_length=3, max_length=3)
    notes: Optional[str] = Field(None, max_length=2000)


class BookingStatusUpdate(BaseModel):
    status: BookingStatus = Field(..., description="APPROVED, REJECTED, CANCELLED or COMPLETED")
    notes: Optional[str] = Field(None, max_length=2000)


class BookingResponse(BaseModel):
    id: str
    au_pair_id: str
    host_id: str
    start_date: datetime
    end_date: datetime
    status: BookingStatus
    total_hours: Optional[float] = None
    hourly_rate: Optional[float] = None
    total_amount: Optional[float] = None
    currency: str
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, booking: Booking) -> "BookingResponse":
        return cls(
            id=str(booking.id),
            au_pair_id=str(booking.au_pair_id),
            host_id=str(booking.host_id),
            start_date=booking.start_date,
            end_date=booking.end_date,
            status=booking.status,
            total_hours=_as_float(booking.total_hours),
            hourly_rate=_as_float(booking.hourly_rate),
            total_amount=_as_float(booking.total_amount),
            currency=booking.currency,
            notes=booking.notes,
            created_at=booking.created_at,
            updated_at=booking.updated_at,
        )


class BookedSlot(BaseModel):
    """A period in which an au pair is already reserved."""

    id: str
    start_date: datetime
    end_date: datetime
    status: BookingStatus

    @classmethod
    def from_domain(cls, booking: Booking) -> "BookedSlot":
        return cls(
            id=str(booking.id),
            start_date=booking.start_date,
            end_date=booking.end_date,
            status=booking.status,
        )


class BookingListResponse(BaseModel):
    bookings: List[BookingResponse]


class BookingEnvelope(BaseModel):
    message: Optional[str] = None
    booking: BookingResponse


class AvailabilityResponse(BaseModel):
    au_pair_id: str
    booked_slots: List[BookedSlot]


__all__ = [
    "BookingCreate",
    "BookingUpdate",
    "BookingStatusUpdate",
    "BookingResponse",
    "BookedSlot",
    "BookingListResponse",
    "BookingEnvelope",
    "AvailabilityResponse",
]
