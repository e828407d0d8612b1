"""PostgreSQL implementation of IMemberRepository."""

from __future__ import annotations

from typing import Dict, List, Optional
from uuid import UUID

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select

from aupair.domain.entities.profile import Member, UserRole
from aupair.domain.repositories.member_repository import IMemberRepository
from aupair.domain.value_objects import UserId
from aupair.infrastructure.database import DatabaseManager
from aupair.infrastructure.persistence.mappers.member_mapper import MemberMapper
from aupair.infrastructure.persistence.models.member_tables import (
    AuPairProfileTable,
    HostFamilyProfileTable,
    UserTable,
)

logger = structlog.get_logger(__name__)


class PostgresMemberRepository(IMemberRepository):
    """Loads accounts together with their profile rows."""

    def __init__(self, db_manager: DatabaseManager):
        self._db = db_manager

    async def get_by_id(self, user_id: UserId) -> Optional[Member]:
        try:
            async with self._db.get_session() as session:
                user = await session.get(UserTable, user_id.value)
                if user is None:
                    return None
                au_pairs = await self._au_pair_profiles(session, [user.id])
                host_families = await self._host_family_profiles(session, [user.id])

            return MemberMapper.to_domain(user, au_pairs.get(user.id), host_families.get(user.id))

        except SQLAlchemyError as e:
            logger.error("Failed to load member", user_id=str(user_id), error=str(e))
            raise

    async def list_active_by_role(self, role: UserRole) -> List[Member]:
        try:
            async with self._db.get_session() as session:
                stmt = (
                    select(UserTable)
                    .where(UserTable.role == role.value, UserTable.is_active.is_(True))
                    .order_by(UserTable.created_at, UserTable.id)
                )
                result = await session.execute(stmt)
                users = list(result.scalars().all())
                user_ids = [user.id for user in users]

                au_pairs: Dict[UUID, AuPairProfileTable] = {}
                host_families: Dict[UUID, HostFamilyProfileTable] = {}
                if role == UserRole.AU_PAIR:
                    au_pairs = await self._au_pair_profiles(session, user_ids)
                elif role == UserRole.HOST_FAMILY:
                    host_families = await self._host_family_profiles(session, user_ids)

            return [
                MemberMapper.to_domain(user, au_pairs.get(user.id), host_families.get(user.id))
                for user in users
            ]

        except SQLAlchemyError as e:
            logger.error("Failed to list members", role=role.value, error=str(e))
            raise

    @staticmethod
    async def _au_pair_profiles(session, user_ids: List[UUID]) -> Dict[UUID, AuPairProfileTable]:
        if not user_ids:
            return {}
        stmt = select(AuPairProfileTable).where(AuPairProfileTable.user_id.in_(user_ids))
        result = await session.execute(stmt)
        return {row.user_id: row for row in result.scalars().all()}

    @staticmethod
    async def _host_family_profiles(
        session, user_ids: List[UUID]
    ) -> Dict[UUID, HostFamilyProfileTable]:
        if not user_ids:
            return {}
        stmt = select(HostFamilyProfileTable).where(HostFamilyProfileTable.user_id.in_(user_ids))
        result = await session.execute(stmt)
        return {row.user_id: row for row in result.scalars().all()}
