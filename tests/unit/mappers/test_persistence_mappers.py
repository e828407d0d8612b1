"""
Conversions between domain entities and SQLModel rows.

Covers the cases the repositories rely on: enum and value object
unwrapping, naive timestamps coming back from the driver, profile rows
that may be missing, and in-place updates of already loaded rows.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from uuid import uuid4

import pytest

from aupair.domain.entities.booking import Booking, BookingStatus
from aupair.domain.entities.match import Match, MatchStatus
from aupair.domain.entities.profile import UserRole
from aupair.domain.value_objects import BookingId, MatchId, MatchScore, UserId
from aupair.infrastructure.persistence.mappers.booking_mapper import BookingMapper
from aupair.infrastructure.persistence.mappers.match_mapper import MatchMapper
from aupair.infrastructure.persistence.mappers.member_mapper import MemberMapper
from aupair.infrastructure.persistence.models.booking_table import BookingTable
from aupair.infrastructure.persistence.models.match_table import MatchTable
from aupair.infrastructure.persistence.models.member_tables import (
    AuPairProfileTable,
    HostFamilyProfileTable,
    UserTable,
)

NOW = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


# ========================================================================
# Test Fixtures
# ========================================================================

@pytest.fixture
def booking() -> Booking:
    return Booking(
        id=BookingId.generate(),
        au_pair_id=UserId.generate(),
        host_id=UserId.generate(),
        start_date=NOW + timedelta(days=3),
        end_date=NOW + timedelta(days=5),
        status=BookingStatus.PENDING,
        total_hours=Decimal("16"),
        hourly_rate=Decimal("15.50"),
        total_amount=Decimal("248.00"),
        currency="EUR",
        notes="Weekend",
        created_at=NOW,
        updated_at=NOW,
    )


@pytest.fixture
def match() -> Match:
    return Match(
        id=MatchId.generate(),
        host_id=UserId.generate(),
        au_pair_id=UserId.generate(),
        match_score=MatchScore(73),
        initiated_by=UserRole.AU_PAIR,
        status=MatchStatus.PENDING,
        notes="Hello",
        created_at=NOW,
        updated_at=NOW,
    )


# ========================================================================
# Booking
# ========================================================================

class TestBookingMapper:

    def test_to_table_unwraps_values(self, booking):
        table = BookingMapper.to_table(booking)

        assert table.id == booking.id.value
        assert table.au_pair_id == booking.au_pair_id.value
        assert table.host_id == booking.host_id.value
        assert table.status == "PENDING"
        assert table.total_amount == Decimal("248.00")
        assert table.currency == "EUR"
        assert table.created_at == NOW

    def test_to_domain_restores_entity(self, booking):
        restored = BookingMapper.to_domain(BookingMapper.to_table(booking))

        assert restored.id == booking.id
        assert restored.status is BookingStatus.PENDING
        assert restored.start_date == booking.start_date
        assert restored.notes == "Weekend"

    def test_naive_timestamps_are_read_as_utc(self, booking):
        table = BookingMapper.to_table(booking)
        table.start_date = datetime(2025, 3, 4, 9, 0)
        table.end_date = datetime(2025, 3, 4, 17, 0)

        restored = BookingMapper.to_domain(table)

        assert restored.start_date == datetime(2025, 3, 4, 9, 0, tzinfo=timezone.utc)
        assert restored.end_date.tzinfo is not None

    def test_update_table_keeps_identity(self, booking):
        table = BookingMapper.to_table(booking)
        booking.status = BookingStatus.APPROVED
        booking.notes = None
        booking.updated_at = NOW + timedelta(hours=1)

        BookingMapper.update_table_from_domain(table, booking)

        assert table.id == booking.id.value
        assert table.status == "APPROVED"
        assert table.notes is None
        assert table.updated_at == NOW + timedelta(hours=1)


# ========================================================================
# Match
# ========================================================================

class TestMatchMapper:

    def test_roundtrip_preserves_enums_and_score(self, match):
        table = MatchMapper.to_table(match)
        assert table.initiated_by == "AU_PAIR"
        assert table.match_score == 73

        restored = MatchMapper.to_domain(table)
        assert restored.initiated_by is UserRole.AU_PAIR
        assert restored.status is MatchStatus.PENDING
        assert restored.match_score == MatchScore(73)

    def test_update_table_copies_status_and_notes(self, match):
        table = MatchMapper.to_table(match)
        match.status = MatchStatus.APPROVED
        match.notes = "Welcome"

        MatchMapper.update_table_from_domain(table, match)

        assert table.status == "APPROVED"
        assert table.notes == "Welcome"
        assert table.host_id == match.host_id.value


# ========================================================================
# Member
# ========================================================================

class TestMemberMapper:

    @pytest.fixture
    def user_row(self) -> UserTable:
        return UserTable(id=uuid4(), email="anna@example.com", role="AU_PAIR", is_active=True, created_at=NOW)

    def test_account_without_profile(self, user_row):
        member = MemberMapper.to_domain(user_row)

        assert member.id == UserId(user_row.id)
        assert member.role is UserRole.AU_PAIR
        assert member.au_pair_profile is None
        assert member.host_family_profile is None

    def test_au_pair_profile(self, user_row):
        profile_row = AuPairProfileTable(
            user_id=user_row.id,
            first_name="Anna",
            last_name="Schmidt",
            languages=["German", "English"],
            preferred_countries=["USA"],
            date_of_birth=date(2001, 6, 15),
            hourly_rate=Decimal("15"),
        )

        member = MemberMapper.to_domain(user_row, au_pair=profile_row)

        profile = member.au_pair_profile
        assert profile.display_name == "Anna Schmidt"
        assert profile.languages == ["German", "English"]
        assert profile.hourly_rate == Decimal("15")
        assert profile.currency == "USD"

    def test_host_family_profile_with_null_arrays(self):
        user_row = UserTable(id=uuid4(), email="millers@example.com", role="HOST_FAMILY", created_at=NOW)
        profile_row = HostFamilyProfileTable(user_id=user_row.id, family_name="Millers", country="USA")
        profile_row.preferred_languages = None
        profile_row.children_ages = None

        member = MemberMapper.to_domain(user_row, host_family=profile_row)

        profile = member.host_family_profile
        assert profile.family_name == "Millers"
        assert profile.preferred_languages == []
        assert profile.children_ages == []
