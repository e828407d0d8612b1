"""Application layer orchestrator for booking scheduling."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

import structlog

from aupair.application.dependencies.booking_dependencies import BookingDependencies
from aupair.domain.clock import as_instant
from aupair.domain.entities.booking import (
    Booking,
    BookingStatus,
    ProposedInterval,
    calculate_total_amount,
)
from aupair.domain.entities.match import MatchStatus
from aupair.domain.entities.profile import pair_roles
from aupair.domain.exceptions import (
    BookingConflictError,
    BookingNotFoundError,
    MemberNotFoundError,
    NotParticipantError,
    ValidationError,
)
from aupair.domain.value_objects import BookingId, UserId

logger = structlog.get_logger(__name__)


class BookingApplicationService:
    """Coordinates booking requests between matched members.

    Conflicts are checked here for a clear error, then again by the
    repository inside the insert transaction.
    """

    def __init__(self, dependencies: BookingDependencies) -> None:
        self._deps = dependencies
        self._logger = logger

    async def create_booking(
        self,
        user_id: str,
        target_user_id: Optional[str],
        start_date: Optional[datetime],
        end_date: Optional[datetime],
        total_hours: Optional[Decimal] = None,
        hourly_rate: Optional[Decimal] = None,
        currency: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> Booking:
        """Request a booking with a member the user has an approved match with."""
        if not target_user_id or start_date is None or end_date is None:
            raise ValidationError("Target user, start date, and end date are required")

        start, end = as_instant(start_date), as_instant(end_date)
        self._deps.conflict_service.validate_window(start, end)

        requester = await self._deps.member_repository.get_by_id(UserId(user_id))
        if requester is None:
            raise MemberNotFoundError("User not found")
        target = await self._deps.member_repository.get_by_id(UserId(target_user_id))
        if target is None or not target.is_active:
            raise MemberNotFoundError("Target user not found or inactive")
        if not requester.is_counterpart_of(target):
            raise ValidationError("Bookings can only be made between au pairs and host families")

        host_id, au_pair_id = pair_roles(requester, target)
        match = await self._deps.match_repository.find_between(
            host_id, au_pair_id, status=MatchStatus.APPROVED
        )
        if match is None:
            raise NotParticipantError(
                "You can only create bookings with users you have an approved match with"
            )

        await self._ensure_no_conflict(ProposedInterval(start=start, end=end, party_id=au_pair_id))

        now = self._deps.clock.now()
        booking = Booking(
            id=BookingId.generate(),
            au_pair_id=au_pair_id,
            host_id=host_id,
            start_date=start,
            end_date=end,
            status=BookingStatus.PENDING,
            total_hours=total_hours or None,
            hourly_rate=hourly_rate or None,
            total_amount=calculate_total_amount(total_hours, hourly_rate),
            currency=currency or self._deps.default_currency,
            notes=notes,
            created_at=now,
            updated_at=now,
        )
        booking = await self._deps.booking_repository.add_if_available(booking)

        self._logger.info(
            "Booking request created",
            booking_id=str(booking.id),
            au_pair_id=str(au_pair_id),
            host_id=str(host_id),
            start_date=start.isoformat(),
            end_date=end.isoformat(),
        )
        return booking

    async def list_bookings(
        self,
        user_id: str,
        status: Optional[BookingStatus] = None,
        upcoming: bool = False,
    ) -> List[Booking]:
        starting_from = self._deps.clock.now() if upcoming else None
        return await self._deps.booking_repository.list_for_member(
            UserId(user_id), status=status, starting_from=starting_from
        )

    async def get_booking(self, user_id: str, booking_id: str) -> Booking:
        return await self._require_participation(user_id, booking_id, "view")

    async def update_booking_status(
        self,
        user_id: str,
        booking_id: str,
        status: BookingStatus,
        notes: Optional[str] = None,
    ) -> Booking:
        booking = await self._require_participation(user_id, booking_id, "update")
        booking.transition_to(status, self._deps.clock.now(), notes)
        booking = await self._deps.booking_repository.save(booking)

        self._logger.info("Booking status updated", booking_id=booking_id, status=status.value)
        return booking

    async def update_booking_details(
        self,
        user_id: str,
        booking_id: str,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
        total_hours: Optional[Decimal] = None,
        hourly_rate: Optional[Decimal] = None,
        currency: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> Booking:
        """Change a pending booking; a new window must still be free."""
        booking = await self._require_participation(user_id, booking_id, "update")
        previous_window = (booking.start_date, booking.end_date)

        booking.reschedule(
            self._deps.clock.now(),
            start_date=as_instant(start_date) if start_date else None,
            end_date=as_instant(end_date) if end_date else None,
            total_hours=total_hours,
            hourly_rate=hourly_rate,
            currency=currency,
            notes=notes,
        )
        if (booking.start_date, booking.end_date) != previous_window:
            await self._ensure_no_conflict(booking.as_interval(), ignore=booking.id)
            booking = await self._deps.booking_repository.update_if_available(booking)
        else:
            booking = await self._deps.booking_repository.save(booking)

        self._logger.info("Booking updated", booking_id=booking_id)
        return booking

    async def delete_booking(self, user_id: str, booking_id: str) -> None:
        booking = await self._require_participation(user_id, booking_id, "delete")
        booking.ensure_deletable()
        await self._deps.booking_repository.delete(booking.id)
        self._logger.info("Booking deleted", booking_id=booking_id, user_id=user_id)

    async def get_availability(
        self,
        au_pair_id: str,
        window_start: Optional[datetime] = None,
        window_end: Optional[datetime] = None,
    ) -> List[Booking]:
        """Slots already held by an au pair, inside a window or from now on."""
        au_pair = await self._deps.member_repository.get_by_id(UserId(au_pair_id))
        if au_pair is None or not au_pair.is_au_pair or not au_pair.is_active:
            raise MemberNotFoundError("Au pair not found or inactive")

        if window_start is not None and window_end is not None:
            return await self._deps.booking_repository.list_active_for_au_pair(
                au_pair.id,
                window_start=as_instant(window_start),
                window_end=as_instant(window_end),
            )
        return await self._deps.booking_repository.list_active_for_au_pair(
            au_pair.id, starting_from=self._deps.clock.now()
        )

    async def _ensure_no_conflict(
        self, proposed: ProposedInterval, ignore: Optional[BookingId] = None
    ) -> None:
        existing = await self._deps.booking_repository.list_active_for_au_pair(proposed.party_id)
        reservations = [booking.as_reservation() for booking in existing if booking.id != ignore]
        if self._deps.conflict_service.has_conflict(proposed, reservations):
            self._logger.info(
                "Booking conflict detected",
                au_pair_id=str(proposed.party_id),
                start_date=proposed.start.isoformat(),
                end_date=proposed.end.isoformat(),
            )
            raise BookingConflictError("There is a conflicting booking for this time period")

    async def _require_participation(self, user_id: str, booking_id: str, action: str) -> Booking:
        booking = await self._deps.booking_repository.get_by_id(BookingId(booking_id))
        if booking is None:
            raise BookingNotFoundError("Booking not found")
        if not booking.involves(UserId(user_id)):
            raise NotParticipantError(f"You can only {action} bookings you are part of")
        return booking


__all__ = ["BookingApplicationService"]
