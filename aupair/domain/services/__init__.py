"""Domain services package."""

from .booking_conflict_service import BookingConflictService, IBookingConflictService
from .matching_service import IMatchingService, MatchingService

__all__ = [
    "IBookingConflictService",
    "BookingConflictService",
    "IMatchingService",
    "MatchingService",
]
