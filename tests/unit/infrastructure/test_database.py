"""Database manager construction without a live PostgreSQL server."""

import pytest

from aupair.core.config import Settings
from aupair.infrastructure.database import DatabaseManager, build_async_database_url


@pytest.mark.parametrize(
    "url, expected",
    [
        ("postgresql://u:p@db:5432/aupair", "postgresql+asyncpg://u:p@db:5432/aupair"),
        ("postgres://u:p@db/aupair", "postgresql+asyncpg://u:p@db/aupair"),
        ("postgresql+asyncpg://u:p@db/aupair", "postgresql+asyncpg://u:p@db/aupair"),
    ],
)
def test_async_url(url, expected):
    assert build_async_database_url(url) == expected


def test_manager_starts_uninitialized():
    manager = DatabaseManager(Settings(SECRET_KEY="k" * 40, _env_file=None))
    assert not manager.is_initialized
