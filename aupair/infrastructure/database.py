"""
SQLModel database engine and session management.

Async engine (asyncpg) plus session helpers for the repositories. Schema
changes go through Alembic; ``create_tables`` is for local development.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, Optional

import structlog
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.sql import text
from sqlmodel import SQLModel

from aupair.core.config import Settings

logger = structlog.get_logger(__name__)


def build_async_database_url(url: str) -> str:
    """Convert a plain PostgreSQL URL to the asyncpg dialect."""
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql+asyncpg://", 1)
    return url


class DatabaseManager:
    """
    SQLModel database manager with async session support.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self.engine: Optional[AsyncEngine] = None
        self.async_session_factory: Optional[sessionmaker] = None
        self._initialized = False

    @property
    def is_initialized(self) -> bool:
        return self._initialized and self.engine is not None

    async def initialize(self) -> None:
        """Create the engine and session factory and verify connectivity."""
        if self._initialized:
            logger.warning("Database manager already initialized")
            return

        database_url = build_async_database_url(self.settings.get_postgres_url())
        try:
            self.engine = create_async_engine(
                database_url,
                pool_size=self.settings.DATABASE_POOL_SIZE,
                max_overflow=self.settings.DATABASE_POOL_SIZE * 2,
                pool_timeout=30,
                pool_recycle=3600,
                pool_pre_ping=True,
                echo=self.settings.DEBUG,
                connect_args={
                    "server_settings": {
                        "application_name": "aupair-matching",
                    }
                }
            )

            self.async_session_factory = sessionmaker(
                bind=self.engine,
                class_=AsyncSession,
                expire_on_commit=False,
                autoflush=True,
            )

            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))

            self._initialized = True
            logger.info(
                "Database manager initialized",
                database_url=database_url.split("@")[-1]  # Hide credentials
            )

        except Exception as e:
            logger.error("Failed to initialize database manager", error=str(e))
            raise

    async def create_tables(self) -> None:
        """Create every registered table. Use Alembic outside development."""
        if not self.engine:
            raise RuntimeError("Database manager not initialized")

        import aupair.infrastructure.persistence.models  # noqa: F401  registers tables

        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)
        logger.info("Database tables created")

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Session that commits on success and rolls back on error.

        Usage:
            async with db_manager.get_session() as session:
                result = await session.execute(select(BookingTable))
        """
        if not self.async_session_factory:
            raise RuntimeError("Database manager not initialized")

        session = self.async_session_factory()
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def health_check(self) -> Dict[str, Any]:
        if not self.engine:
            return {
                "status": "unhealthy",
                "error": "Database manager not initialized"
            }

        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            pool = self.engine.pool
            return {
                "status": "healthy",
                "pool_size": pool.size(),
                "checked_out": pool.checkedout(),
            }
        except Exception as e:
            logger.error("Database health check failed", error=str(e))
            return {
                "status": "unhealthy",
                "error": str(e)
            }

    async def shutdown(self) -> None:
        if self.engine:
            try:
                await self.engine.dispose()
                logger.info("Database manager shut down")
            finally:
                self.engine = None
                self.async_session_factory = None
                self._initialized = False


_database_manager: Optional[DatabaseManager] = None


def get_database_manager(settings: Optional[Settings] = None) -> DatabaseManager:
    """Process-wide database manager, created on first use."""
    global _database_manager

    if _database_manager is None:
        if settings is None:
            from aupair.core.config import get_settings
            settings = get_settings()
        _database_manager = DatabaseManager(settings)

    return _database_manager


async def initialize_database(settings: Optional[Settings] = None) -> DatabaseManager:
    db_manager = get_database_manager(settings)
    await db_manager.initialize()
    return db_manager


async def shutdown_database() -> None:
    global _database_manager

    if _database_manager is not None:
        await _database_manager.shutdown()
        _database_manager = None


__all__ = [
    "DatabaseManager",
    "build_async_database_url",
    "get_database_manager",
    "initialize_database",
    "shutdown_database",
]
