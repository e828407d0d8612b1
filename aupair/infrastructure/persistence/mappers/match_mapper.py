"""
Mapper between Match domain entities and MatchTable persistence models.
"""

from __future__ import annotations

from aupair.domain.entities.match import Match, MatchStatus
from aupair.domain.entities.profile import UserRole
from aupair.domain.value_objects import MatchId, MatchScore, UserId
from aupair.infrastructure.persistence.models.base import utcnow
from aupair.infrastructure.persistence.models.match_table import MatchTable


class MatchMapper:
    """Maps between Match domain entities and MatchTable rows."""

    @staticmethod
    def to_domain(table: MatchTable) -> Match:
        return Match(
            id=MatchId(table.id),
            host_id=UserId(table.host_id),
            au_pair_id=UserId(table.au_pair_id),
            match_score=MatchScore(int(table.match_score)),
            initiated_by=UserRole(table.initiated_by),
            status=MatchStatus(table.status),
            notes=table.notes,
            created_at=table.created_at,
            updated_at=table.updated_at,
        )

    @staticmethod
    def to_table(entity: Match) -> MatchTable:
        now = utcnow()
        return MatchTable(
            id=entity.id.value,
            host_id=entity.host_id.value,
            au_pair_id=entity.au_pair_id.value,
            match_score=entity.match_score.value,
            initiated_by=entity.initiated_by.value,
            status=entity.status.value,
            notes=entity.notes,
            created_at=entity.created_at or now,
            updated_at=entity.updated_at or now,
        )

    @staticmethod
    def update_table_from_domain(table: MatchTable, entity: Match) -> None:
        """Copy the mutable fields of a match onto an existing row."""
        table.status = entity.status.value
        table.notes = entity.notes
        table.match_score = entity.match_score.value
        table.updated_at = entity.updated_at or utcnow()
