"""PostgreSQL implementation of IMatchRepository using MatchMapper."""

from __future__ import annotations

from typing import List, Optional

import structlog
from sqlalchemy import desc, or_
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select

from aupair.domain.entities.match import Match, MatchStatus
from aupair.domain.repositories.match_repository import IMatchRepository
from aupair.domain.value_objects import MatchId, UserId
from aupair.infrastructure.database import DatabaseManager
from aupair.infrastructure.persistence.mappers.match_mapper import MatchMapper
from aupair.infrastructure.persistence.models.match_table import MatchTable

logger = structlog.get_logger(__name__)


class PostgresMatchRepository(IMatchRepository):
    """PostgreSQL adapter implementation of IMatchRepository."""

    def __init__(self, db_manager: DatabaseManager):
        self._db = db_manager

    async def get_by_id(self, match_id: MatchId) -> Optional[Match]:
        async with self._db.get_session() as session:
            row = await session.get(MatchTable, match_id.value)
            return MatchMapper.to_domain(row) if row else None

    async def find_between(
        self,
        host_id: UserId,
        au_pair_id: UserId,
        status: Optional[MatchStatus] = None,
    ) -> Optional[Match]:
        async with self._db.get_session() as session:
            stmt = select(MatchTable).where(
                MatchTable.host_id == host_id.value,
                MatchTable.au_pair_id == au_pair_id.value,
            )
            if status:
                stmt = stmt.where(MatchTable.status == status.value)

            result = await session.execute(stmt)
            row = result.scalars().first()
            return MatchMapper.to_domain(row) if row else None

    async def list_for_member(
        self, user_id: UserId, status: Optional[MatchStatus] = None
    ) -> List[Match]:
        async with self._db.get_session() as session:
            stmt = select(MatchTable).where(
                or_(MatchTable.host_id == user_id.value, MatchTable.au_pair_id == user_id.value)
            )
            if status:
                stmt = stmt.where(MatchTable.status == status.value)
            stmt = stmt.order_by(desc(MatchTable.created_at))

            result = await session.execute(stmt)
            return [MatchMapper.to_domain(row) for row in result.scalars().all()]

    async def save(self, match: Match) -> Match:
        try:
            async with self._db.get_session() as session:
                existing_row = await session.get(MatchTable, match.id.value)
                if existing_row:
                    MatchMapper.update_table_from_domain(existing_row, match)
                else:
                    session.add(MatchMapper.to_table(match))
            return match

        except SQLAlchemyError as e:
            logger.error("Failed to save match", match_id=str(match.id), error=str(e))
            raise

    async def delete(self, match_id: MatchId) -> bool:
        async with self._db.get_session() as session:
            row = await session.get(MatchTable, match_id.value)
            if row is None:
                return False
            await session.delete(row)
            return True
