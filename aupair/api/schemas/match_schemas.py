"""
Match API schemas and DTOs.

Pydantic models for match requests and responses. These are pure DTOs in
the API layer; conversion from domain entities happens in ``from_domain``.
"""

from datetime import date, datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from aupair.domain.entities.match import Match, MatchStatus
from aupair.domain.entities.profile import Member
from aupair.domain.services.matching_service import RankedMatch, ScoreBreakdown


class MatchRequest(BaseModel):
    """Body of a match request sent to another member."""

    target_user_id: Optional[UUID] = Field(None, description="Member to match with")
    notes: Optional[str] = Field(None, max_length=2000)


class MatchStatusUpdate(BaseModel):
    status: MatchStatus = Field(..., description="APPROVED or REJECTED")
    notes: Optional[str] = Field(None, max_length=2000)


class MatchResponse(BaseModel):
    id: str
    host_id: str
    au_pair_id: str
    match_score: int
    initiated_by: str
    status: MatchStatus
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, match: Match) -> "MatchResponse":
        return cls(
            id=str(match.id),
            host_id=str(match.host_id),
            au_pair_id=str(match.au_pair_id),
            match_score=match.match_score.value,
            initiated_by=match.initiated_by.value,
            status=match.status,
            notes=match.notes,
            created_at=match.created_at,
            updated_at=match.updated_at,
        )


class ScoreBreakdownResponse(BaseModel):
    """Per-factor sub-scores behind a compatibility score."""

    language: float
    country: int
    age: int
    availability: int
    budget: int

    @classmethod
    def from_domain(cls, breakdown: ScoreBreakdown) -> "ScoreBreakdownResponse":
        return cls(
            language=breakdown.language,
            country=breakdown.country,
            age=breakdown.age,
            availability=breakdown.availability,
            budget=breakdown.budget,
        )


class CounterpartSummary(BaseModel):
    """Public profile fields of a potential match."""

    user_id: str
    role: str
    display_name: str
    profile_photo_url: Optional[str] = None
    languages: List[str] = Field(default_factory=list)
    country: Optional[str] = None
    preferred_countries: List[str] = Field(default_factory=list)
    children_ages: List[int] = Field(default_factory=list)
    date_of_birth: Optional[date] = None
    available_from: Optional[datetime] = None
    available_to: Optional[datetime] = None
    hourly_rate: Optional[float] = None
    max_budget: Optional[float] = None
    currency: Optional[str] = None

    @classmethod
    def from_domain(cls, member: Member) -> "CounterpartSummary":
        summary = cls(
            user_id=str(member.id),
            role=member.role.value,
            display_name=member.display_name,
        )
        au_pair = member.au_pair_profile
        if au_pair is not None:
            summary.profile_photo_url = au_pair.profile_photo_url
            summary.languages = list(au_pair.languages)
            summary.preferred_countries = list(au_pair.preferred_countries)
            summary.date_of_birth = au_pair.date_of_birth
            summary.available_from = au_pair.available_from
            summary.available_to = au_pair.available_to
            summary.hourly_rate = float(au_pair.hourly_rate) if au_pair.hourly_rate is not None else None
            summary.currency = au_pair.currency
        host = member.host_family_profile
        if host is not None:
            summary.profile_photo_url = host.profile_photo_url
            summary.languages = list(host.preferred_languages)
            summary.country = host.country
            summary.children_ages = list(host.children_ages)
            summary.max_budget = float(host.max_budget) if host.max_budget is not None else None
            summary.currency = host.currency
        return summary


class PotentialMatchResponse(BaseModel):
    match_score: int
    breakdown: ScoreBreakdownResponse
    member: CounterpartSummary

    @classmethod
    def from_ranked(cls, ranked: RankedMatch[Member]) -> "PotentialMatchResponse":
        return cls(
            match_score=ranked.score.value,
            breakdown=ScoreBreakdownResponse.from_domain(ranked.breakdown),
            member=CounterpartSummary.from_domain(ranked.subject),
        )


class PotentialMatchesResponse(BaseModel):
    matches: List[PotentialMatchResponse]


class MatchListResponse(BaseModel):
    matches: List[MatchResponse]


class MatchEnvelope(BaseModel):
    message: str
    match: MatchResponse


class MessageResponse(BaseModel):
    message: str


__all__ = [
    "MatchRequest",
    "MatchStatusUpdate",
    "MatchResponse",
    "ScoreBreakdownResponse",
    "CounterpartSummary",
    "PotentialMatchResponse",
    "PotentialMatchesResponse",
    "MatchListResponse",
    "MatchEnvelope",
    "MessageResponse",
]
