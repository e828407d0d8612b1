"""Application layer orchestrator for the bidirectional matching workflow."""

from __future__ import annotations

from typing import List, Optional, Tuple

import structlog

from aupair.application.dependencies.match_dependencies import MatchDependencies
from aupair.domain.entities.match import Match, MatchStatus
from aupair.domain.entities.profile import (
    CandidateProfile,
    CounterpartyPreferences,
    Member,
    UserRole,
    pair_roles,
)
from aupair.domain.exceptions import (
    MatchAlreadyExistsError,
    MatchNotFoundError,
    MemberNotFoundError,
    NotParticipantError,
    ValidationError,
)
from aupair.domain.services.matching_service import DEFAULT_MATCH_LIMIT, RankedMatch
from aupair.domain.value_objects import MatchId, MatchScore, UserId

logger = structlog.get_logger(__name__)


class MatchApplicationService:
    """Coordinates match discovery and match requests between members.

    The au pair profile is always the scored candidate and the host family
    profile always supplies the preferences, whichever side is asking.
    """

    def __init__(self, dependencies: MatchDependencies) -> None:
        self._deps = dependencies
        self._logger = logger

    async def find_potential_matches(
        self, user_id: str, limit: int = DEFAULT_MATCH_LIMIT
    ) -> List[RankedMatch[Member]]:
        """Rank active counterparts of the member by compatibility."""
        member = await self._require_member(UserId(user_id), "User not found")

        entries: List[Tuple[Member, CandidateProfile, CounterpartyPreferences]] = []
        if member.is_au_pair and member.au_pair_profile is not None:
            candidate = member.au_pair_profile.to_candidate()
            hosts = await self._deps.member_repository.list_active_by_role(UserRole.HOST_FAMILY)
            entries = [
                (host, candidate, host.host_family_profile.to_preferences())
                for host in hosts
                if host.id != member.id and host.host_family_profile is not None
            ]
        elif member.is_host_family and member.host_family_profile is not None:
            preferences = member.host_family_profile.to_preferences()
            au_pairs = await self._deps.member_repository.list_active_by_role(UserRole.AU_PAIR)
            entries = [
                (au_pair, au_pair.au_pair_profile.to_candidate(), preferences)
                for au_pair in au_pairs
                if au_pair.id != member.id and au_pair.au_pair_profile is not None
            ]

        ranked = self._deps.matching_service.rank(entries, limit)
        self._logger.info(
            "Potential matches ranked",
            user_id=user_id,
            role=member.role.value,
            considered=len(entries),
            returned=len(ranked),
            top_score=ranked[0].breakdown.total if ranked else None,
        )
        return ranked

    async def request_match(
        self, user_id: str, target_user_id: Optional[str], notes: Optional[str] = None
    ) -> Match:
        """Send a match request to a counterpart member."""
        if not target_user_id:
            raise ValidationError("Target user ID is required")

        requester_id = UserId(user_id)
        target_id = UserId(target_user_id)
        if requester_id == target_id:
            raise ValidationError("Cannot match with yourself")

        requester = await self._require_member(requester_id, "User not found")
        target = await self._deps.member_repository.get_by_id(target_id)
        if target is None or not target.is_active:
            raise MemberNotFoundError("Target user not found or inactive")

        if not requester.is_counterpart_of(target):
            raise ValidationError("Can only match au pairs with host families")

        host_id, au_pair_id = pair_roles(requester, target)
        existing = await self._deps.match_repository.find_between(host_id, au_pair_id)
        if existing is not None:
            raise MatchAlreadyExistsError("Match already exists between these users")

        au_pair, host = (requester, target) if requester.is_au_pair else (target, requester)
        score = MatchScore(0)
        if au_pair.au_pair_profile is not None and host.host_family_profile is not None:
            score = self._deps.matching_service.calculate_match(
                au_pair.au_pair_profile.to_candidate(),
                host.host_family_profile.to_preferences(),
            ).score

        now = self._deps.clock.now()
        match = Match(
            id=MatchId.generate(),
            host_id=host_id,
            au_pair_id=au_pair_id,
            match_score=score,
            initiated_by=requester.role,
            status=MatchStatus.PENDING,
            notes=notes,
            created_at=now,
            updated_at=now,
        )
        match = await self._deps.match_repository.save(match)

        self._logger.info(
            "Match request created",
            match_id=str(match.id),
            initiated_by=requester.role.value,
            match_score=score.value,
        )
        return match

    async def list_matches(
        self, user_id: str, status: Optional[MatchStatus] = None
    ) -> List[Match]:
        return await self._deps.match_repository.list_for_member(UserId(user_id), status)

    async def update_match_status(
        self,
        user_id: str,
        match_id: str,
        status: MatchStatus,
        notes: Optional[str] = None,
    ) -> Match:
        """Approve or reject a match the member takes part in."""
        match = await self._require_participation(user_id, match_id, "update")
        match.transition_to(status, self._deps.clock.now(), notes)
        match = await self._deps.match_repository.save(match)

        self._logger.info("Match status updated", match_id=match_id, status=status.value)
        return match

    async def delete_match(self, user_id: str, match_id: str) -> None:
        await self._require_participation(user_id, match_id, "delete")
        await self._deps.match_repository.delete(MatchId(match_id))
        self._logger.info("Match deleted", match_id=match_id, user_id=user_id)

    async def _require_member(self, user_id: UserId, message: str) -> Member:
        member = await self._deps.member_repository.get_by_id(user_id)
        if member is None:
            raise MemberNotFoundError(message)
        return member

    async def _require_participation(self, user_id: str, match_id: str, action: str) -> Match:
        match = await self._deps.match_repository.get_by_id(MatchId(match_id))
        if match is None:
            raise MatchNotFoundError("Match not found")
        if not match.involves(UserId(user_id)):
            raise NotParticipantError(f"You can only {action} matches you are part of")
        return match


__all__ = ["MatchApplicationService"]
