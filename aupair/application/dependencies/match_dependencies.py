"""Dependency container for the match application service."""

from dataclasses import dataclass

from aupair.domain.clock import Clock
from aupair.domain.repositories.match_repository import IMatchRepository
from aupair.domain.repositories.member_repository import IMemberRepository
from aupair.domain.services.matching_service import IMatchingService


@dataclass
class MatchDependencies:
    """Container for match service dependencies."""

    member_repository: IMemberRepository
    match_repository: IMatchRepository
    matching_service: IMatchingService
    clock: Clock


__all__ = ["MatchDependencies"]
