"""Injectable time source for age, availability and scheduling rules."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date, datetime, time, timezone
from typing import Union


def ensure_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC and normalize aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def as_instant(value: Union[date, datetime]) -> datetime:
    """Promote a calendar date to midnight UTC; pass datetimes through ensure_utc."""
    if isinstance(value, datetime):
        return ensure_utc(value)
    return datetime.combine(value, time.min, tzinfo=timezone.utc)


class Clock(ABC):
    """Source of the current instant."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current instant as an aware UTC datetime."""
        raise NotImplementedError


class SystemClock(Clock):
    """Wall clock."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock(Clock):
    """Clock pinned to a single instant, for tests and replays."""

    def __init__(self, instant: datetime):
        self._instant = ensure_utc(instant)

    def now(self) -> datetime:
        return self._instant

    def advance_to(self, instant: datetime) -> None:
        self._instant = ensure_utc(instant)


__all__ = ["Clock", "SystemClock", "FixedClock", "ensure_utc", "as_instant"]
