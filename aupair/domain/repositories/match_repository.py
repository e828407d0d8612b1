"""Domain repository contract for match aggregates."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from aupair.domain.entities.match import Match, MatchStatus
from aupair.domain.value_objects import MatchId, UserId


class IMatchRepository(ABC):
    """Domain-facing abstraction for match persistence operations."""

    @abstractmethod
    async def get_by_id(self, match_id: MatchId) -> Optional[Match]:
        raise NotImplementedError

    @abstractmethod
    async def find_between(
        self,
        host_id: UserId,
        au_pair_id: UserId,
        status: Optional[MatchStatus] = None,
    ) -> Optional[Match]:
        """Find the match for a host / au pair pair, optionally by status."""
        raise NotImplementedError

    @abstractmethod
    async def list_for_member(
        self, user_id: UserId, status: Optional[MatchStatus] = None
    ) -> List[Match]:
        """Matches the member takes part in, newest first."""
        raise NotImplementedError

    @abstractmethod
    async def save(self, match: Match) -> Match:
        """Insert or update a match."""
        raise NotImplementedError

    @abstractmethod
    async def delete(self, match_id: MatchId) -> bool:
        raise NotImplementedError
