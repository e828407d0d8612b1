"""Domain repository contract for booking aggregates."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from aupair.domain.entities.booking import Booking, BookingStatus
from aupair.domain.value_objects import BookingId, UserId


class IBookingRepository(ABC):
    """Domain-facing abstraction for booking persistence operations."""

    @abstractmethod
    async def get_by_id(self, booking_id: BookingId) -> Optional[Booking]:
        raise NotImplementedError

    @abstractmethod
    async def list_for_member(
        self,
        user_id: UserId,
        status: Optional[BookingStatus] = None,
        starting_from: Optional[datetime] = None,
    ) -> List[Booking]:
        """Bookings the member takes part in, earliest start first."""
        raise NotImplementedError

    @abstractmethod
    async def list_active_for_au_pair(
        self,
        au_pair_id: UserId,
        window_start: Optional[datetime] = None,
        window_end: Optional[datetime] = None,
        starting_from: Optional[datetime] = None,
    ) -> List[Booking]:
        """Pending and approved bookings of an au pair, earliest start first.

        With both window bounds, only bookings overlapping the window are
        returned; ``starting_from`` keeps bookings starting at or after it.
        """
        raise NotImplementedError

    @abstractmethod
    async def add_if_available(self, booking: Booking) -> Booking:
        """Insert a booking after re-checking conflicts in the same transaction.

        Raises ``BookingConflictError`` when an active booking of the same au
        pair overlaps, closing the race between the service-level check and
        the write.
        """
        raise NotImplementedError

    @abstractmethod
    async def update_if_available(self, booking: Booking) -> Booking:
        """Persist a rescheduled booking under the same lock and re-check.

        The booking itself is left out of the conflict check.
        """
        raise NotImplementedError

    @abstractmethod
    async def save(self, booking: Booking) -> Booking:
        """Update an existing booking."""
        raise NotImplementedError

    @abstractmethod
    async def delete(self, booking_id: BookingId) -> bool:
        raise NotImplementedError
