"""Mappers between domain entities and SQLModel rows."""

from .booking_mapper import BookingMapper
from .match_mapper import MatchMapper
from .member_mapper import MemberMapper

__all__ = ["BookingMapper", "MatchMapper", "MemberMapper"]
