"""SQLModel table definitions; importing this package registers every table."""

from .booking_table import BookingTable
from .match_table import MatchTable
from .member_tables import AuPairProfileTable, HostFamilyProfileTable, UserTable

__all__ = [
    "AuPairProfileTable",
    "BookingTable",
    "HostFamilyProfileTable",
    "MatchTable",
    "UserTable",
]
