"""Domain entities exposed for application layer use."""

from .booking import (
    ACTIVE_BOOKING_STATUSES,
    Booking,
    BookingStatus,
    ExistingReservation,
    ProposedInterval,
    validate_booking_window,
)
from .match import Match, MatchStatus
from .profile import (
    AuPairProfile,
    CandidateProfile,
    CounterpartyPreferences,
    HostFamilyProfile,
    Member,
    UserRole,
)

__all__ = [
    # Booking
    "ACTIVE_BOOKING_STATUSES",
    "Booking",
    "BookingStatus",
    "ExistingReservation",
    "ProposedInterval",
    "validate_booking_window",
    # Match
    "Match",
    "MatchStatus",
    # Profile
    "AuPairProfile",
    "CandidateProfile",
    "CounterpartyPreferences",
    "HostFamilyProfile",
    "Member",
    "UserRole",
]
