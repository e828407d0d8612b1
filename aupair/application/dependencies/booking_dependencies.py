"""Dependency container for the booking application service."""

from dataclasses import dataclass

from aupair.domain.clock import Clock
from aupair.domain.repositories.booking_repository import IBookingRepository
from aupair.domain.repositories.match_repository import IMatchRepository
from aupair.domain.repositories.member_repository import IMemberRepository
from aupair.domain.services.booking_conflict_service import IBookingConflictService


@dataclass
class BookingDependencies:
    """Container for booking service dependencies."""

    member_repository: IMemberRepository
    match_repository: IMatchRepository
    booking_repository: IBookingRepository
    conflict_service: IBookingConflictService
    clock: Clock
    default_currency: str = "USD"


__all__ = ["BookingDependencies"]
