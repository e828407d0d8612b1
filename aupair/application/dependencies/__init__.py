"""Dependency containers for application services."""

from .booking_dependencies import BookingDependencies
from .match_dependencies import MatchDependencies

__all__ = ["BookingDependencies", "MatchDependencies"]
