"""Pure domain representation of members and their marketplace profiles."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import FrozenSet, Iterable, Optional, Tuple, Union

from aupair.domain.value_objects import UserId

Amount = Union[int, float, Decimal]


class UserRole(str, Enum):
    """Role a member plays on the marketplace."""

    AU_PAIR = "AU_PAIR"
    HOST_FAMILY = "HOST_FAMILY"
    ADMIN = "ADMIN"


@dataclass(frozen=True)
class CandidateProfile:
    """Attributes of the party being scored."""

    languages: FrozenSet[str] = frozenset()
    preferred_countries: FrozenSet[str] = frozenset()
    date_of_birth: Optional[date] = None
    available_from: Optional[datetime] = None
    available_to: Optional[datetime] = None
    hourly_rate: Optional[Amount] = None
    currency: str = "USD"

    def __post_init__(self):
        object.__setattr__(self, "languages", frozenset(self.languages))
        object.__setattr__(self, "preferred_countries", frozenset(self.preferred_countries))


@dataclass(frozen=True)
class CounterpartyPreferences:
    """Preferences of the party the candidate is matched against."""

    preferred_languages: FrozenSet[str] = frozenset()
    country: Optional[str] = None
    children_ages: Tuple[int, ...] = ()
    max_budget: Optional[Amount] = None
    currency: str = "USD"

    def __post_init__(self):
        object.__setattr__(self, "preferred_languages", frozenset(self.preferred_languages))
        object.__setattr__(self, "children_ages", tuple(self.children_ages))


@dataclass
class AuPairProfile:
    """Profile data maintained by an au pair."""

    first_name: str
    last_name: str
    languages: list[str] = field(default_factory=list)
    preferred_countries: list[str] = field(default_factory=list)
    date_of_birth: Optional[date] = None
    available_from: Optional[datetime] = None
    available_to: Optional[datetime] = None
    hourly_rate: Optional[Decimal] = None
    currency: str = "USD"
    profile_photo_url: Optional[str] = None

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def to_candidate(self) -> CandidateProfile:
        return CandidateProfile(
            languages=frozenset(self.languages),
            preferred_countries=frozenset(self.preferred_countries),
            date_of_birth=self.date_of_birth,
            available_from=self.available_from,
            available_to=self.available_to,
            hourly_rate=self.hourly_rate,
            currency=self.currency,
        )


@dataclass
class HostFamilyProfile:
    """Profile data maintained by a host family."""

    family_name: str
    contact_person_name: Optional[str] = None
    country: Optional[str] = None
    preferred_languages: list[str] = field(default_factory=list)
    children_ages: list[int] = field(default_factory=list)
    max_budget: Optional[Decimal] = None
    currency: str = "USD"
    profile_photo_url: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.family_name

    def to_preferences(self) -> CounterpartyPreferences:
        return CounterpartyPreferences(
            preferred_languages=frozenset(self.preferred_languages),
            country=self.country,
            children_ages=tuple(self.children_ages),
            max_budget=self.max_budget,
            currency=self.currency,
        )


@dataclass
class Member:
    """A marketplace account together with its role-specific profile."""

    id: UserId
    email: str
    role: UserRole
    is_active: bool = True
    created_at: Optional[datetime] = None
    au_pair_profile: Optional[AuPairProfile] = None
    host_family_profile: Optional[HostFamilyProfile] = None

    @property
    def is_au_pair(self) -> bool:
        return self.role == UserRole.AU_PAIR

    @property
    def is_host_family(self) -> bool:
        return self.role == UserRole.HOST_FAMILY

    @property
    def has_profile(self) -> bool:
        """Whether the profile matching the member's role has been filled in."""
        if self.is_au_pair:
            return self.au_pair_profile is not None
        if self.is_host_family:
            return self.host_family_profile is not None
        return False

    @property
    def counterpart_role(self) -> Optional[UserRole]:
        if self.is_au_pair:
            return UserRole.HOST_FAMILY
        if self.is_host_family:
            return UserRole.AU_PAIR
        return None

    def is_counterpart_of(self, other: "Member") -> bool:
        """Au pairs pair only with host families and vice versa."""
        return self.counterpart_role is not None and other.role == self.counterpart_role

    @property
    def display_name(self) -> str:
        if self.au_pair_profile is not None:
            return self.au_pair_profile.display_name
        if self.host_family_profile is not None:
            return self.host_family_profile.display_name
        return self.email


def pair_roles(first: Member, second: Member) -> Tuple[UserId, UserId]:
    """Return (host_id, au_pair_id) for two counterpart members."""
    if first.is_host_family:
        return first.id, second.id
    return second.id, first.id


def exclude_member(members: Iterable[Member], user_id: UserId) -> list[Member]:
    return [member for member in members if member.id != user_id]


__all__ = [
    "UserRole",
    "CandidateProfile",
    "CounterpartyPreferences",
    "AuPairProfile",
    "HostFamilyProfile",
    "Member",
    "pair_roles",
    "exclude_member",
]
