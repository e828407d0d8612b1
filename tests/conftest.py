"""Shared pytest fixtures: a pinned clock and in-memory repositories."""

from __future__ import annotations

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key-that-is-long-enough-for-hs256")
os.environ.setdefault("ENVIRONMENT", "test")

import pytest

from aupair.application.booking_service import BookingApplicationService
from aupair.application.dependencies import BookingDependencies, MatchDependencies
from aupair.application.match_service import MatchApplicationService
from aupair.domain.clock import FixedClock
from aupair.domain.services import BookingConflictService, MatchingService
from tests.fixtures.member_fixtures import NOW
from tests.mocks.mock_repositories import (
    MockBookingRepository,
    MockMatchRepository,
    MockMemberRepository,
)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(NOW)


@pytest.fixture
def member_repository() -> MockMemberRepository:
    return MockMemberRepository()


@pytest.fixture
def match_repository() -> MockMatchRepository:
    return MockMatchRepository()


@pytest.fixture
def booking_repository() -> MockBookingRepository:
    return MockBookingRepository()


@pytest.fixture
def match_service(clock, member_repository, match_repository) -> MatchApplicationService:
    return MatchApplicationService(
        MatchDependencies(
            member_repository=member_repository,
            match_repository=match_repository,
            matching_service=MatchingService(clock),
            clock=clock,
        )
    )


@pytest.fixture
def booking_service(
    clock, member_repository, match_repository, booking_repository
) -> BookingApplicationService:
    return BookingApplicationService(
        BookingDependencies(
            member_repository=member_repository,
            match_repository=match_repository,
            booking_repository=booking_repository,
            conflict_service=BookingConflictService(clock),
            clock=clock,
        )
    )
