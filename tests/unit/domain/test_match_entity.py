"""Pure domain tests for the Match aggregate, member roles and MatchScore."""

from datetime import datetime, timezone

import pytest

from aupair.domain.entities.match import Match, MatchStatus
from aupair.domain.entities.profile import UserRole, pair_roles
from aupair.domain.exceptions import ValidationError
from aupair.domain.value_objects import MatchId, MatchScore, UserId
from tests.fixtures.member_fixtures import AuPairBuilder, HostFamilyBuilder, admin_member

NOW = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def match() -> Match:
    return Match(
        id=MatchId.generate(),
        host_id=UserId.generate(),
        au_pair_id=UserId.generate(),
        match_score=MatchScore(72),
        initiated_by=UserRole.AU_PAIR,
        notes="Hello!",
        created_at=NOW,
        updated_at=NOW,
    )


class TestMatchTransitions:

    def test_approve(self, match):
        match.transition_to(MatchStatus.APPROVED, NOW, "Welcome")
        assert match.is_approved
        assert match.notes == "Welcome"

    def test_reject_without_notes_keeps_previous(self, match):
        match.transition_to(MatchStatus.REJECTED, NOW)
        assert match.status == MatchStatus.REJECTED
        assert match.notes == "Hello!"

    def test_pending_is_rejected(self, match):
        with pytest.raises(ValidationError, match="Status must be APPROVED or REJECTED"):
            match.transition_to(MatchStatus.PENDING, NOW)

    def test_involves(self, match):
        assert match.involves(match.host_id)
        assert match.involves(match.au_pair_id)
        assert not match.involves(UserId.generate())


class TestMemberRoles:

    def test_counterparts(self):
        au_pair = AuPairBuilder().build()
        host = HostFamilyBuilder().build()
        assert au_pair.is_counterpart_of(host)
        assert host.is_counterpart_of(au_pair)
        assert not au_pair.is_counterpart_of(AuPairBuilder().build())

    def test_admin_has_no_counterpart(self):
        admin = admin_member()
        assert admin.counterpart_role is None
        assert not admin.is_counterpart_of(HostFamilyBuilder().build())

    def test_pair_roles_orders_host_first(self):
        au_pair = AuPairBuilder().build()
        host = HostFamilyBuilder().build()
        assert pair_roles(au_pair, host) == (host.id, au_pair.id)
        assert pair_roles(host, au_pair) == (host.id, au_pair.id)

    def test_display_name_falls_back_to_email(self):
        member = AuPairBuilder().without_profile().build()
        assert member.display_name == member.email
        assert AuPairBuilder().with_name("Lea", "Roth").build().display_name == "Lea Roth"


class TestMatchScore:

    def test_bounds(self):
        assert MatchScore(0).value == 0
        assert MatchScore(100).value == 100
        with pytest.raises(ValueError):
            MatchScore(101)
        with pytest.raises(ValueError):
            MatchScore(-1)

    def test_must_be_an_integer(self):
        with pytest.raises(TypeError):
            MatchScore(True)
        with pytest.raises(TypeError):
            MatchScore(50.5)

    def test_quality_thresholds(self):
        assert MatchScore(70).is_good_match
        assert not MatchScore(69).is_good_match
        assert MatchScore(90).is_excellent_match
        assert int(MatchScore(42)) == 42


def test_ids_accept_strings():
    raw = "6f1c1e1a-5d8e-4c55-9a52-2b1f5f0c7f11"
    assert str(UserId(raw)) == raw
    assert UserId(raw) == UserId(raw)
