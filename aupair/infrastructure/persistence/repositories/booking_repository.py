"""PostgreSQL implementation of IBookingRepository using BookingMapper."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

import structlog
from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select

from aupair.domain.entities.booking import ACTIVE_BOOKING_STATUSES, Booking, BookingStatus
from aupair.domain.exceptions import BookingConflictError, BookingNotFoundError
from aupair.domain.repositories.booking_repository import IBookingRepository
from aupair.domain.services.booking_conflict_service import has_conflict
from aupair.domain.value_objects import BookingId, UserId
from aupair.infrastructure.database import DatabaseManager
from aupair.infrastructure.persistence.mappers.booking_mapper import BookingMapper
from aupair.infrastructure.persistence.models.booking_table import BookingTable
from aupair.infrastructure.persistence.models.member_tables import UserTable

logger = structlog.get_logger(__name__)

ACTIVE_STATUS_VALUES = sorted(status.value for status in ACTIVE_BOOKING_STATUSES)


class PostgresBookingRepository(IBookingRepository):
    """PostgreSQL adapter implementation of IBookingRepository."""

    def __init__(self, db_manager: DatabaseManager):
        self._db = db_manager

    async def get_by_id(self, booking_id: BookingId) -> Optional[Booking]:
        async with self._db.get_session() as session:
            row = await session.get(BookingTable, booking_id.value)
            return BookingMapper.to_domain(row) if row else None

    async def list_for_member(
        self,
        user_id: UserId,
        status: Optional[BookingStatus] = None,
        starting_from: Optional[datetime] = None,
    ) -> List[Booking]:
        async with self._db.get_session() as session:
            stmt = select(BookingTable).where(
                or_(BookingTable.au_pair_id == user_id.value, BookingTable.host_id == user_id.value)
            )
            if status:
                stmt = stmt.where(BookingTable.status == status.value)
            if starting_from is not None:
                stmt = stmt.where(BookingTable.start_date >= starting_from)
            stmt = stmt.order_by(BookingTable.start_date)

            result = await session.execute(stmt)
            return [BookingMapper.to_domain(row) for row in result.scalars().all()]

    async def list_active_for_au_pair(
        self,
        au_pair_id: UserId,
        window_start: Optional[datetime] = None,
        window_end: Optional[datetime] = None,
        starting_from: Optional[datetime] = None,
    ) -> List[Booking]:
        async with self._db.get_session() as session:
            rows = await self._active_rows(
                session, au_pair_id, window_start, window_end, starting_from
            )
            return [BookingMapper.to_domain(row) for row in rows]

    async def add_if_available(self, booking: Booking) -> Booking:
        try:
            async with self._db.get_session() as session:
                await self._lock_and_check(session, booking)
                session.add(BookingMapper.to_table(booking))
            return booking

        except SQLAlchemyError as e:
            logger.error("Failed to insert booking", booking_id=str(booking.id), error=str(e))
            raise

    async def update_if_available(self, booking: Booking) -> Booking:
        try:
            async with self._db.get_session() as session:
                await self._lock_and_check(session, booking)
                existing_row = await session.get(BookingTable, booking.id.value)
                if existing_row is None:
                    raise BookingNotFoundError("Booking not found")
                BookingMapper.update_table_from_domain(existing_row, booking)
            return booking

        except SQLAlchemyError as e:
            logger.error("Failed to reschedule booking", booking_id=str(booking.id), error=str(e))
            raise

    @classmethod
    async def _lock_and_check(cls, session, booking: Booking) -> None:
        # Serialize concurrent writes for the same au pair on the account row.
        await session.execute(
            select(UserTable.id)
            .where(UserTable.id == booking.au_pair_id.value)
            .with_for_update()
        )
        rows = await cls._active_rows(session, booking.au_pair_id)
        reservations = [
            BookingMapper.to_domain(row).as_reservation()
            for row in rows
            if row.id != booking.id.value
        ]
        if has_conflict(booking.as_interval(), reservations):
            raise BookingConflictError("There is a conflicting booking for this time period")

    async def save(self, booking: Booking) -> Booking:
        try:
            async with self._db.get_session() as session:
                existing_row = await session.get(BookingTable, booking.id.value)
                if existing_row:
                    BookingMapper.update_table_from_domain(existing_row, booking)
                else:
                    session.add(BookingMapper.to_table(booking))
            return booking

        except SQLAlchemyError as e:
            logger.error("Failed to save booking", booking_id=str(booking.id), error=str(e))
            raise

    async def delete(self, booking_id: BookingId) -> bool:
        async with self._db.get_session() as session:
            row = await session.get(BookingTable, booking_id.value)
            if row is None:
                return False
            await session.delete(row)
            return True

    @staticmethod
    async def _active_rows(
        session,
        au_pair_id: UserId,
        window_start: Optional[datetime] = None,
        window_end: Optional[datetime] = None,
        starting_from: Optional[datetime] = None,
    ) -> List[BookingTable]:
        stmt = select(BookingTable).where(
            BookingTable.au_pair_id == au_pair_id.value,
            BookingTable.status.in_(ACTIVE_STATUS_VALUES),
        )
        if window_start is not None and window_end is not None:
            stmt = stmt.where(
                BookingTable.start_date <= window_end,
                BookingTable.end_date >= window_start,
            )
        if starting_from is not None:
            stmt = stmt.where(BookingTable.start_date >= starting_from)
        stmt = stmt.order_by(BookingTable.start_date)

        result = await session.execute(stmt)
        return list(result.scalars().all())
