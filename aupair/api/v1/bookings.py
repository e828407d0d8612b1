"""
Booking API Endpoints

Booking requests between matched members, their status lifecycle and the
au pair availability view.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

import structlog
from fastapi import APIRouter, HTTPException, Path, Query, status

from aupair.api.dependencies import (
    BookingServiceDep,
    CurrentUserDep,
    map_domain_exception_to_http,
)
from aupair.api.schemas.booking_schemas import (
    AvailabilityResponse,
    BookedSlot,
    BookingCreate,
    BookingEnvelope,
    BookingListResponse,
    BookingResponse,
    BookingStatusUpdate,
    BookingUpdate,
)
from aupair.api.schemas.match_schemas import MessageResponse
from aupair.domain.entities.booking import BookingStatus
from aupair.domain.exceptions import DomainException

logger = structlog.get_logger(__name__)
router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.post("", response_model=BookingEnvelope, status_code=status.HTTP_201_CREATED)
async def create_booking(
    request: BookingCreate,
    current_user: CurrentUserDep,
    booking_service: BookingServiceDep,
) -> BookingEnvelope:
    """
    Request a booking with a member the caller has an approved match with.

    The window must be in the future and must not overlap any pending or
    approved booking of the au pair.
    """
    try:
        booking = await booking_service.create_booking(
            current_user.user_id,
            str(request.target_user_id) if request.target_user_id else None,
            request.start_date,
            request.end_date,
            total_hours=request.total_hours,
            hourly_rate=request.hourly_rate,
            currency=request.currency,
            notes=request.notes,
        )
        return BookingEnvelope(
            message="Booking request created successfully",
            booking=BookingResponse.from_domain(booking),
        )

    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
    except Exception as e:
        logger.error("Failed to create booking", error=str(e))
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/my-bookings", response_model=BookingListResponse)
async def get_my_bookings(
    current_user: CurrentUserDep,
    booking_service: BookingServiceDep,
    status_filter: Optional[BookingStatus] = Query(None, alias="status", description="Filter by status"),
    upcoming: bool = Query(False, description="Only bookings starting from now"),
) -> BookingListResponse:
    try:
        bookings = await booking_service.list_bookings(
            current_user.user_id, status=status_filter, upcoming=upcoming
        )
        return BookingListResponse(
            bookings=[BookingResponse.from_domain(booking) for booking in bookings]
        )

    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.get("/au-pair/{au_pair_id}/availability", response_model=AvailabilityResponse)
async def get_au_pair_availability(
    current_user: CurrentUserDep,
    booking_service: BookingServiceDep,
    au_pair_id: UUID = Path(..., description="Au pair identifier"),
    start_date: Optional[datetime] = Query(None, description="Window start"),
    end_date: Optional[datetime] = Query(None, description="Window end"),
) -> AvailabilityResponse:
    """Pending and approved bookings of an au pair."""
    try:
        bookings = await booking_service.get_availability(str(au_pair_id), start_date, end_date)
        return AvailabilityResponse(
            au_pair_id=str(au_pair_id),
            booked_slots=[BookedSlot.from_domain(booking) for booking in bookings],
        )

    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.get("/{booking_id}", response_model=BookingEnvelope)
async def get_booking(
    current_user: CurrentUserDep,
    booking_service: BookingServiceDep,
    booking_id: UUID = Path(..., description="Booking identifier"),
) -> BookingEnvelope:
    try:
        booking = await booking_service.get_booking(current_user.user_id, str(booking_id))
        return BookingEnvelope(booking=BookingResponse.from_domain(booking))

    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.put("/{booking_id}/status", response_model=BookingEnvelope)
async def update_booking_status(
    update: BookingStatusUpdate,
    current_user: CurrentUserDep,
    booking_service: BookingServiceDep,
    booking_id: UUID = Path(..., description="Booking identifier"),
) -> BookingEnvelope:
    try:
        booking = await booking_service.update_booking_status(
            current_user.user_id, str(booking_id), update.status, update.notes
        )
        return BookingEnvelope(
            message="Booking status updated successfully",
            booking=BookingResponse.from_domain(booking),
        )

    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.put("/{booking_id}", response_model=BookingEnvelope)
async def update_booking(
    update: BookingUpdate,
    current_user: CurrentUserDep,
    booking_service: BookingServiceDep,
    booking_id: UUID = Path(..., description="Booking identifier"),
) -> BookingEnvelope:
    try:
        booking = await booking_service.update_booking_details(
            current_user.user_id,
            str(booking_id),
            start_date=update.start_date,
            end_date=update.end_date,
            total_hours=update.total_hours,
            hourly_rate=update.hourly_rate,
            currency=update.currency,
            notes=update.notes,
        )
        return BookingEnvelope(
            message="Booking updated successfully",
            booking=BookingResponse.from_domain(booking),
        )

    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.delete("/{booking_id}", response_model=MessageResponse)
async def delete_booking(
    current_user: CurrentUserDep,
    booking_service: BookingServiceDep,
    booking_id: UUID = Path(..., description="Booking identifier"),
) -> MessageResponse:
    try:
        await booking_service.delete_booking(current_user.user_id, str(booking_id))
        return MessageResponse(message="Booking deleted successfully")

    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
