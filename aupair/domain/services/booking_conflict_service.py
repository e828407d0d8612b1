"""Domain service detecting overlaps between a proposed booking and existing ones."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Iterable, List, Optional

from aupair.domain.clock import Clock, SystemClock, as_instant
from aupair.domain.entities.booking import (
    ACTIVE_BOOKING_STATUSES,
    ExistingReservation,
    ProposedInterval,
    validate_booking_window,
)


def overlaps(proposed: ProposedInterval, existing: ExistingReservation) -> bool:
    """Inclusive-bounds overlap; intervals touching at one instant overlap."""
    p_start, p_end = as_instant(proposed.start), as_instant(proposed.end)
    e_start, e_end = as_instant(existing.start), as_instant(existing.end)

    # Existing booking covers the proposed start
    if e_start <= p_start and e_end >= p_start:
        return True
    # Existing booking covers the proposed end
    if e_start <= p_end and e_end >= p_end:
        return True
    # Existing booking sits inside the proposed interval
    if e_start >= p_start and e_end <= p_end:
        return True
    return False


def active_reservations(existing: Iterable[ExistingReservation]) -> List[ExistingReservation]:
    return [reservation for reservation in existing if reservation.status in ACTIVE_BOOKING_STATUSES]


def find_conflicts(
    proposed: ProposedInterval, existing: Iterable[ExistingReservation]
) -> List[ExistingReservation]:
    """Active reservations overlapping the proposed interval, in input order."""
    return [
        reservation
        for reservation in active_reservations(existing)
        if overlaps(proposed, reservation)
    ]


def has_conflict(proposed: ProposedInterval, existing: Iterable[ExistingReservation]) -> bool:
    return any(overlaps(proposed, reservation) for reservation in active_reservations(existing))


class IBookingConflictService(ABC):
    """Domain service interface for booking schedule checks."""

    @abstractmethod
    def has_conflict(
        self, proposed: ProposedInterval, existing: Iterable[ExistingReservation]
    ) -> bool:
        """Whether the proposed interval collides with an active reservation."""
        pass

    @abstractmethod
    def validate_window(self, start: datetime, end: datetime) -> None:
        """Raise ``ValidationError`` for windows a booking may not use."""
        pass


class BookingConflictService(IBookingConflictService):
    """Conflict checks plus the scheduling rules that depend on the clock."""

    def __init__(self, clock: Optional[Clock] = None):
        self._clock = clock or SystemClock()

    def has_conflict(
        self, proposed: ProposedInterval, existing: Iterable[ExistingReservation]
    ) -> bool:
        return has_conflict(proposed, existing)

    def find_conflicts(
        self, proposed: ProposedInterval, existing: Iterable[ExistingReservation]
    ) -> List[ExistingReservation]:
        return find_conflicts(proposed, existing)

    def validate_window(self, start: datetime, end: datetime) -> None:
        validate_booking_window(as_instant(start), as_instant(end), self._clock.now())


__all__ = [
    "IBookingConflictService",
    "BookingConflictService",
    "overlaps",
    "active_reservations",
    "find_conflicts",
    "has_conflict",
]
