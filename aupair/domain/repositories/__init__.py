"""Domain repository abstractions."""

from .booking_repository import IBookingRepository
from .match_repository import IMatchRepository
from .member_repository import IMemberRepository

__all__ = [
    "IBookingRepository",
    "IMatchRepository",
    "IMemberRepository",
]
