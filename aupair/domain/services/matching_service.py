"""Domain service for au pair / host family compatibility scoring."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime
from typing import Generic, Iterable, List, Optional, Sequence, Tuple, TypeVar, Union

from aupair.domain.clock import Clock, SystemClock, as_instant
from aupair.domain.entities.profile import Amount, CandidateProfile, CounterpartyPreferences
from aupair.domain.value_objects import MatchScore

T = TypeVar("T")

LANGUAGE_WEIGHT = 0.3
COUNTRY_POINTS = 25
AGE_WEIGHT = 0.2
AVAILABILITY_WEIGHT = 0.15
BUDGET_WEIGHT = 0.1

NEUTRAL_SCORE = 50
DAYS_PER_YEAR = 365.25
SECONDS_PER_DAY = 24 * 60 * 60
DEFAULT_MATCH_LIMIT = 20

Instant = Union[date, datetime]


def language_score(candidate_languages: Iterable[str], preferred_languages: Iterable[str]) -> float:
    """Share of preferred languages the candidate speaks, 0-100.

    No preference means every candidate is acceptable. Every preferred entry
    counts toward the denominator, including case variants of one language.
    """
    preferred = [language for language in preferred_languages if language]
    if not preferred:
        return 100
    spoken = {language.lower() for language in candidate_languages if language}
    matched = spoken & {language.lower() for language in preferred}
    return min(100, (len(matched) / len(preferred)) * 100)


def country_points(preferred_countries: Iterable[str], country: Optional[str]) -> int:
    """25 raw points on a literal, case-sensitive hit, else nothing."""
    if country is not None and country in set(preferred_countries):
        return COUNTRY_POINTS
    return 0


def candidate_age(date_of_birth: Instant, now: datetime) -> int:
    """Whole years elapsed since birth, counting a year as 365.25 days."""
    elapsed = (as_instant(now) - as_instant(date_of_birth)).total_seconds()
    return math.floor(elapsed / (DAYS_PER_YEAR * SECONDS_PER_DAY))


def age_score(date_of_birth: Optional[Instant], children_ages: Sequence[int], now: datetime) -> int:
    if date_of_birth is None or not children_ages:
        return NEUTRAL_SCORE

    age = candidate_age(date_of_birth, now)
    has_young_children = any(child <= 10 for child in children_ages)
    has_teens = any(child >= 11 for child in children_ages)

    if has_young_children and 18 <= age <= 30:
        return 100
    if has_teens and 20 <= age <= 35:
        return 100
    if 18 <= age <= 35:
        return 70
    return 30


def availability_score(
    available_from: Optional[Instant],
    available_to: Optional[Instant],
    reference_start: Optional[Instant],
) -> int:
    if available_from is None or available_to is None or reference_start is None:
        return NEUTRAL_SCORE

    start = as_instant(available_from)
    end = as_instant(available_to)
    reference = as_instant(reference_start)
    if start <= reference <= end:
        return 100

    days_apart = abs((reference - start).total_seconds()) / SECONDS_PER_DAY
    if days_apart <= 30:
        return 80
    if days_apart <= 90:
        return 60
    if days_apart <= 180:
        return 30
    return 10


def budget_score(hourly_rate: Optional[Amount], max_budget: Optional[Amount]) -> int:
    # Zero counts as not provided.
    if not hourly_rate or not max_budget:
        return NEUTRAL_SCORE

    rate = float(hourly_rate)
    budget = float(max_budget)
    if rate <= budget:
        return 100

    over_budget_ratio = rate / budget
    if over_budget_ratio <= 1.2:
        return 70
    if over_budget_ratio <= 1.5:
        return 40
    return 10


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class ScoreBreakdown:
    """Per-factor sub-scores behind a match score.

    ``country`` is already on its 0-25 point scale; the other factors are
    normalized to 0-100 and weighted when totalled.
    """

    language: float
    country: int
    age: int
    availability: int
    budget: int

    @property
    def language_points(self) -> float:
        return self.language * LANGUAGE_WEIGHT

    @property
    def age_points(self) -> float:
        return self.age * AGE_WEIGHT

    @property
    def availability_points(self) -> float:
        return self.availability * AVAILABILITY_WEIGHT

    @property
    def budget_points(self) -> float:
        return self.budget * BUDGET_WEIGHT

    @property
    def weighted_total(self) -> float:
        # Summed in factor order; float addition is not associative.
        total = 0.0
        total += self.language_points
        total += self.country
        total += self.age_points
        total += self.availability_points
        total += self.budget_points
        return total

    @property
    def total(self) -> int:
        return min(100, max(0, round_half_up(self.weighted_total)))

    @property
    def score(self) -> MatchScore:
        return MatchScore(self.total)


def score_breakdown(
    candidate: CandidateProfile,
    preferences: CounterpartyPreferences,
    *,
    now: datetime,
    reference_start: Optional[Instant] = None,
) -> ScoreBreakdown:
    """Compute every sub-score for a candidate against counterparty preferences."""
    return ScoreBreakdown(
        language=language_score(candidate.languages, preferences.preferred_languages),
        country=country_points(candidate.preferred_countries, preferences.country),
        age=age_score(candidate.date_of_birth, preferences.children_ages, now),
        availability=availability_score(
            candidate.available_from, candidate.available_to, reference_start
        ),
        budget=budget_score(candidate.hourly_rate, preferences.max_budget),
    )


def calculate_match_score(
    candidate: CandidateProfile,
    preferences: CounterpartyPreferences,
    *,
    now: datetime,
    reference_start: Optional[Instant] = None,
) -> int:
    """Integer compatibility score in [0, 100]; total over every input."""
    return score_breakdown(
        candidate, preferences, now=now, reference_start=reference_start
    ).total


@dataclass(frozen=True)
class RankedMatch(Generic[T]):
    """A scored counterparty, carrying whatever the caller ranked."""

    subject: T
    breakdown: ScoreBreakdown

    @property
    def score(self) -> MatchScore:
        return self.breakdown.score


def rank_by_score(matches: Iterable[RankedMatch[T]], limit: int = DEFAULT_MATCH_LIMIT) -> List[RankedMatch[T]]:
    """Highest score first; equal scores keep their input order."""
    ordered = sorted(matches, key=lambda match: match.breakdown.total, reverse=True)
    return ordered[: max(limit, 0)]


class IMatchingService(ABC):
    """Domain service interface for au pair / host family matching."""

    @abstractmethod
    def calculate_match(
        self,
        candidate: CandidateProfile,
        preferences: CounterpartyPreferences,
        preferred_start: Optional[Instant] = None,
    ) -> ScoreBreakdown:
        """Score one candidate against one set of preferences."""
        pass

    @abstractmethod
    def rank(
        self,
        entries: Iterable[Tuple[T, CandidateProfile, CounterpartyPreferences]],
        limit: int = DEFAULT_MATCH_LIMIT,
    ) -> List[RankedMatch[T]]:
        """Score and rank several pairings, keeping the best ``limit``."""
        pass


class MatchingService(IMatchingService):
    """Matching service reading "now" from an injectable clock.

    When no preferred start is given the host family is assumed to want to
    start right away, so the clock's current instant is the reference.
    """

    def __init__(self, clock: Optional[Clock] = None):
        self._clock = clock or SystemClock()

    def calculate_match(
        self,
        candidate: CandidateProfile,
        preferences: CounterpartyPreferences,
        preferred_start: Optional[Instant] = None,
    ) -> ScoreBreakdown:
        now = self._clock.now()
        return score_breakdown(
            candidate,
            preferences,
            now=now,
            reference_start=preferred_start if preferred_start is not None else now,
        )

    def score(
        self,
        candidate: CandidateProfile,
        preferences: CounterpartyPreferences,
        preferred_start: Optional[Instant] = None,
    ) -> MatchScore:
        return self.calculate_match(candidate, preferences, preferred_start).score

    def rank(
        self,
        entries: Iterable[Tuple[T, CandidateProfile, CounterpartyPreferences]],
        limit: int = DEFAULT_MATCH_LIMIT,
    ) -> List[RankedMatch[T]]:
        scored = [
            RankedMatch(subject=subject, breakdown=self.calculate_match(candidate, preferences))
            for subject, candidate, preferences in entries
        ]
        return rank_by_score(scored, limit)


__all__ = [
    "IMatchingService",
    "MatchingService",
    "RankedMatch",
    "ScoreBreakdown",
    "DEFAULT_MATCH_LIMIT",
    "language_score",
    "country_points",
    "candidate_age",
    "age_score",
    "availability_score",
    "budget_score",
    "score_breakdown",
    "calculate_match_score",
    "rank_by_score",
]
