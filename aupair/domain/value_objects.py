"""Domain value objects used across aggregates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from uuid import UUID, uuid4


def _coerce_uuid(value: Any, *, field_name: str) -> UUID:
    """Convert strings to UUID instances while validating type."""
    if isinstance(value, UUID):
        return value
    if isinstance(value, str):
        return UUID(value)
    raise TypeError(f"{field_name} must be a UUID-compatible value")


@dataclass(frozen=True)
class UserId:
    """Identifier of a marketplace member (au pair, host family or admin)."""

    value: UUID

    def __init__(self, value: Any):
        object.__setattr__(self, "value", _coerce_uuid(value, field_name="user_id"))

    @classmethod
    def generate(cls) -> "UserId":
        return cls(uuid4())

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class MatchId:
    """Aggregate identifier for Match domain entities."""

    value: UUID

    def __init__(self, value: Any):
        object.__setattr__(self, "value", _coerce_uuid(value, field_name="match_id"))

    @classmethod
    def generate(cls) -> "MatchId":
        return cls(uuid4())

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class BookingId:
    """Aggregate identifier for Booking domain entities."""

    value: UUID

    def __init__(self, value: Any):
        object.__setattr__(self, "value", _coerce_uuid(value, field_name="booking_id"))

    @classmethod
    def generate(cls) -> "BookingId":
        return cls(uuid4())

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class MatchScore:
    """Value object representing a compatibility score on a 0-100 scale."""

    value: int

    def __post_init__(self):
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise TypeError("Match score must be an integer")
        if not 0 <= self.value <= 100:
            raise ValueError("Match score must be between 0 and 100")

    @property
    def is_good_match(self) -> bool:
        return self.value >= 70

    @property
    def is_excellent_match(self) -> bool:
        return self.value >= 90

    def __int__(self) -> int:
        return self.value


__all__ = [
    "UserId",
    "MatchId",
    "BookingId",
    "MatchScore",
]
