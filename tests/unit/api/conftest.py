"""Fixtures for HTTP-level tests: the app with in-memory repositories and signed tokens."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest
from fastapi.testclient import TestClient

from aupair.api.dependencies import (
    get_booking_repository,
    get_clock,
    get_match_repository,
    get_member_repository,
)
from aupair.core.config import get_settings
from aupair.main import create_app


@pytest.fixture
def app(clock, member_repository, match_repository, booking_repository):
    application = create_app()
    application.dependency_overrides[get_member_repository] = lambda: member_repository
    application.dependency_overrides[get_match_repository] = lambda: match_repository
    application.dependency_overrides[get_booking_repository] = lambda: booking_repository
    application.dependency_overrides[get_clock] = lambda: clock
    return application


@pytest.fixture
def client(app) -> TestClient:
    # Not entered as a context manager, so the lifespan never touches a database.
    return TestClient(app)


@pytest.fixture
def auth_headers():
    """Build bearer headers for a member, signed with the configured secret."""
    settings = get_settings()

    def _headers(member, **claims):
        payload = {
            "sub": str(member.id),
            "role": member.role.value,
            "exp": datetime.now(timezone.utc) + timedelta(hours=1),
        }
        payload.update(claims)
        token = jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)
        return {"Authorization": f"Bearer {token}"}

    return _headers
