"""PostgreSQL repository adapters."""

from .booking_repository import PostgresBookingRepository
from .match_repository import PostgresMatchRepository
from .member_repository import PostgresMemberRepository

__all__ = [
    "PostgresBookingRepository",
    "PostgresMatchRepository",
    "PostgresMemberRepository",
]
