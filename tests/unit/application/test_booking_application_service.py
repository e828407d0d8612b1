"""Application service tests for booking requests and their lifecycle."""

from datetime import date, timedelta
from decimal import Decimal

import pytest

from aupair.domain.entities.booking import Booking, BookingStatus
from aupair.domain.entities.match import Match, MatchStatus
from aupair.domain.entities.profile import UserRole
from aupair.domain.exceptions import (
    BookingConflictError,
    BookingNotFoundError,
    MemberNotFoundError,
    NotParticipantError,
    ValidationError,
)
from aupair.domain.value_objects import BookingId, MatchId, MatchScore, UserId
from tests.fixtures.member_fixtures import NOW, AuPairBuilder, HostFamilyBuilder


def days(n: int):
    return NOW + timedelta(days=n)


# ============================================================================
# Test Fixtures
# ============================================================================


@pytest.fixture
def au_pair():
    return AuPairBuilder().build()


@pytest.fixture
def host():
    return HostFamilyBuilder().build()


@pytest.fixture
def matched(member_repository, match_repository, au_pair, host):
    member_repository.add(au_pair, host)
    match = Match(
        id=MatchId.generate(),
        host_id=host.id,
        au_pair_id=au_pair.id,
        match_score=MatchScore(80),
        initiated_by=UserRole.AU_PAIR,
        status=MatchStatus.APPROVED,
        created_at=NOW,
        updated_at=NOW,
    )
    match_repository.matches[match.id] = match
    return match


def existing_booking(au_pair, host, start, end, status=BookingStatus.APPROVED) -> Booking:
    return Booking(
        id=BookingId.generate(),
        au_pair_id=au_pair.id,
        host_id=host.id,
        start_date=start,
        end_date=end,
        status=status,
        created_at=NOW,
        updated_at=NOW,
    )


# ============================================================================
# Creation
# ============================================================================


class TestCreateBooking:

    async def test_creates_pending_booking(self, booking_service, booking_repository, matched, au_pair, host):
        booking = await booking_service.create_booking(
            str(host.id),
            str(au_pair.id),
            days(10),
            days(12),
            total_hours=Decimal("16"),
            hourly_rate=Decimal("15"),
        )

        assert booking.status == BookingStatus.PENDING
        assert booking.au_pair_id == au_pair.id
        assert booking.host_id == host.id
        assert booking.total_amount == Decimal("240")
        assert booking.currency == "USD"
        assert booking.id in booking_repository.bookings

    async def test_accepts_calendar_dates(self, booking_service, matched, au_pair, host):
        booking = await booking_service.create_booking(
            str(au_pair.id), str(host.id), date(2025, 4, 1), date(2025, 4, 3)
        )
        assert booking.start_date.tzinfo is not None
        assert booking.total_amount is None

    async def test_required_fields(self, booking_service, matched, au_pair, host):
        with pytest.raises(ValidationError, match="Target user, start date, and end date are required"):
            await booking_service.create_booking(str(au_pair.id), str(host.id), days(1), None)
        with pytest.raises(ValidationError, match="required"):
            await booking_service.create_booking(str(au_pair.id), None, days(1), days(2))

    async def test_window_rules(self, booking_service, matched, au_pair, host):
        with pytest.raises(ValidationError, match="End date must be after start date"):
            await booking_service.create_booking(str(au_pair.id), str(host.id), days(5), days(4))
        with pytest.raises(ValidationError, match="Start date cannot be in the past"):
            await booking_service.create_booking(str(au_pair.id), str(host.id), days(-1), days(4))

    async def test_requires_approved_match(self, booking_service, match_repository, matched, au_pair, host):
        match_repository.matches[matched.id].status = MatchStatus.PENDING
        with pytest.raises(NotParticipantError, match="approved match"):
            await booking_service.create_booking(str(au_pair.id), str(host.id), days(1), days(2))

    async def test_target_must_be_counterpart(self, booking_service, member_repository, matched, au_pair):
        other = AuPairBuilder().build()
        member_repository.add(other)
        with pytest.raises(ValidationError, match="between au pairs and host families"):
            await booking_service.create_booking(str(au_pair.id), str(other.id), days(1), days(2))

    async def test_inactive_target(self, booking_service, member_repository, matched, au_pair):
        inactive = HostFamilyBuilder().inactive().build()
        member_repository.add(inactive)
        with pytest.raises(MemberNotFoundError):
            await booking_service.create_booking(str(au_pair.id), str(inactive.id), days(1), days(2))

    async def test_boundary_conflict(self, booking_service, booking_repository, matched, au_pair, host):
        booking_repository.add(existing_booking(au_pair, host, days(15), days(20)))
        with pytest.raises(BookingConflictError, match="conflicting booking"):
            await booking_service.create_booking(str(host.id), str(au_pair.id), days(10), days(15))

    async def test_conflicts_with_other_families(self, booking_service, booking_repository, matched, au_pair, host):
        other_host = HostFamilyBuilder().build()
        booking_repository.add(existing_booking(au_pair, other_host, days(11), days(12), BookingStatus.PENDING))
        with pytest.raises(BookingConflictError):
            await booking_service.create_booking(str(host.id), str(au_pair.id), days(10), days(15))

    async def test_closed_bookings_free_the_slot(self, booking_service, booking_repository, matched, au_pair, host):
        booking_repository.add(
            existing_booking(au_pair, host, days(11), days(12), BookingStatus.REJECTED),
            existing_booking(au_pair, host, days(13), days(14), BookingStatus.CANCELLED),
        )
        booking = await booking_service.create_booking(str(host.id), str(au_pair.id), days(10), days(15))
        assert booking.status == BookingStatus.PENDING

    async def test_repository_rechecks_on_insert(self, booking_repository, au_pair, host):
        first = existing_booking(au_pair, host, days(1), days(3), BookingStatus.PENDING)
        second = existing_booking(au_pair, host, days(2), days(4), BookingStatus.PENDING)
        await booking_repository.add_if_available(first)
        with pytest.raises(BookingConflictError):
            await booking_repository.add_if_available(second)
        assert second.id not in booking_repository.bookings


# ============================================================================
# Reading
# ============================================================================


class TestReadBookings:

    @pytest.fixture
    def stored(self, booking_repository, matched, au_pair, host):
        past = existing_booking(au_pair, host, days(-10), days(-8), BookingStatus.COMPLETED)
        later = existing_booking(au_pair, host, days(20), days(22))
        sooner = existing_booking(au_pair, host, days(5), days(6), BookingStatus.PENDING)
        booking_repository.add(past, later, sooner)
        return past, sooner, later

    async def test_list_ordered_by_start(self, booking_service, stored, host):
        past, sooner, later = stored
        bookings = await booking_service.list_bookings(str(host.id))
        assert [b.id for b in bookings] == [past.id, sooner.id, later.id]

    async def test_list_upcoming_and_status(self, booking_service, stored, au_pair):
        past, sooner, later = stored
        upcoming = await booking_service.list_bookings(str(au_pair.id), upcoming=True)
        assert [b.id for b in upcoming] == [sooner.id, later.id]

        pending = await booking_service.list_bookings(str(au_pair.id), status=BookingStatus.PENDING)
        assert [b.id for b in pending] == [sooner.id]

    async def test_get_booking_participants_only(self, booking_service, stored, au_pair):
        _, sooner, _ = stored
        assert (await booking_service.get_booking(str(au_pair.id), str(sooner.id))).id == sooner.id

        with pytest.raises(NotParticipantError, match="You can only view bookings you are part of"):
            await booking_service.get_booking(str(UserId.generate()), str(sooner.id))
        with pytest.raises(BookingNotFoundError):
            await booking_service.get_booking(str(au_pair.id), str(BookingId.generate()))

    async def test_availability_window(self, booking_service, stored, au_pair):
        _, sooner, later = stored
        slots = await booking_service.get_availability(str(au_pair.id), days(4), days(7))
        assert [b.id for b in slots] == [sooner.id]

        from_now = await booking_service.get_availability(str(au_pair.id))
        assert [b.id for b in from_now] == [sooner.id, later.id]

    async def test_availability_only_for_active_au_pairs(self, booking_service, stored, host):
        with pytest.raises(MemberNotFoundError, match="Au pair not found or inactive"):
            await booking_service.get_availability(str(host.id))
        with pytest.raises(MemberNotFoundError):
            await booking_service.get_availability(str(UserId.generate()))


# ============================================================================
# Changes
# ============================================================================


class TestChangeBookings:

    @pytest.fixture
    async def pending(self, booking_service, matched, au_pair, host):
        return await booking_service.create_booking(
            str(au_pair.id), str(host.id), days(10), days(12),
            total_hours=Decimal("10"), hourly_rate=Decimal("15"),
        )

    async def test_approve(self, booking_service, booking_repository, pending, host):
        updated = await booking_service.update_booking_status(str(host.id), str(pending.id), BookingStatus.APPROVED)
        assert updated.status == BookingStatus.APPROVED
        assert booking_repository.bookings[pending.id].status == BookingStatus.APPROVED

    async def test_failed_transition_is_not_persisted(self, booking_service, booking_repository, pending, host):
        with pytest.raises(ValidationError, match="before end date"):
            await booking_service.update_booking_status(str(host.id), str(pending.id), BookingStatus.COMPLETED)
        assert booking_repository.bookings[pending.id].status == BookingStatus.PENDING

    async def test_outsider_cannot_update(self, booking_service, pending):
        with pytest.raises(NotParticipantError, match="update bookings"):
            await booking_service.update_booking_status(
                str(UserId.generate()), str(pending.id), BookingStatus.CANCELLED
            )

    async def test_reschedule_over_own_window(self, booking_service, pending, au_pair):
        updated = await booking_service.update_booking_details(
            str(au_pair.id), str(pending.id), start_date=days(11), end_date=days(13),
            total_hours=Decimal("12"), hourly_rate=Decimal("15"),
        )
        assert updated.start_date == days(11)
        assert updated.total_amount == Decimal("180")

    async def test_reschedule_into_conflict(self, booking_service, booking_repository, pending, au_pair, host):
        booking_repository.add(existing_booking(au_pair, host, days(20), days(25)))
        with pytest.raises(BookingConflictError):
            await booking_service.update_booking_details(
                str(au_pair.id), str(pending.id), start_date=days(19), end_date=days(21)
            )
        assert booking_repository.bookings[pending.id].start_date == days(10)

    async def test_reschedule_is_rechecked_by_repository(self, booking_service, booking_repository, pending, au_pair):
        await booking_service.update_booking_details(
            str(au_pair.id), str(pending.id), start_date=days(30), end_date=days(31)
        )
        assert ("update_if_available", pending.id) in booking_repository.call_log

    async def test_notes_only_update_skips_recheck(self, booking_service, booking_repository, pending, au_pair):
        await booking_service.update_booking_details(str(au_pair.id), str(pending.id), notes="Bring a coat")
        assert ("update_if_available", pending.id) not in booking_repository.call_log
        assert booking_repository.bookings[pending.id].notes == "Bring a coat"

    async def test_repository_rejects_rescheduling_onto_a_concurrent_booking(
        self, booking_repository, pending, au_pair, host
    ):
        # Another request stored this booking after the service-level check ran.
        booking_repository.add(existing_booking(au_pair, host, days(20), days(25), BookingStatus.PENDING))
        moved = await booking_repository.get_by_id(pending.id)
        moved.start_date, moved.end_date = days(19), days(21)

        with pytest.raises(BookingConflictError):
            await booking_repository.update_if_available(moved)
        assert booking_repository.bookings[pending.id].start_date == days(10)

    async def test_repository_ignores_the_booking_being_moved(self, booking_repository, pending):
        moved = await booking_repository.get_by_id(pending.id)
        moved.start_date, moved.end_date = days(11), days(13)

        await booking_repository.update_if_available(moved)
        assert booking_repository.bookings[pending.id].end_date == days(13)

    async def test_delete_rules(self, booking_service, booking_repository, pending, host):
        await booking_service.update_booking_status(str(host.id), str(pending.id), BookingStatus.APPROVED)
        with pytest.raises(ValidationError, match="Can only delete"):
            await booking_service.delete_booking(str(host.id), str(pending.id))

        await booking_service.update_booking_status(str(host.id), str(pending.id), BookingStatus.CANCELLED)
        await booking_service.delete_booking(str(host.id), str(pending.id))
        assert pending.id not in booking_repository.bookings
