"""
API-specific dependencies for application services with dependency injection.

Repositories, the clock and the authenticated caller are resolved here so
tests can swap any of them through ``app.dependency_overrides``.
"""

from typing import Annotated, Optional
from uuid import UUID

import structlog
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel

from aupair.application.booking_service import BookingApplicationService
from aupair.application.dependencies import BookingDependencies, MatchDependencies
from aupair.application.match_service import MatchApplicationService
from aupair.core.config import Settings, get_settings
from aupair.core.security import TokenVerifier
from aupair.domain.clock import Clock, SystemClock
from aupair.domain.exceptions import (
    AuthorizationError,
    ConfigurationError,
    ConflictError,
    DomainException,
    NotFoundError,
    ValidationError,
)
from aupair.domain.repositories import (
    IBookingRepository,
    IMatchRepository,
    IMemberRepository,
)
from aupair.domain.services import BookingConflictService, MatchingService
from aupair.infrastructure.database import get_database_manager
from aupair.infrastructure.persistence.repositories import (
    PostgresBookingRepository,
    PostgresMatchRepository,
    PostgresMemberRepository,
)

logger = structlog.get_logger(__name__)

security = HTTPBearer(auto_error=False)


class CurrentUser(BaseModel):
    """Caller identity taken from a verified bearer token."""

    user_id: str
    role: Optional[str] = None
    email: Optional[str] = None


def get_settings_dependency() -> Settings:
    """Get application settings"""
    return get_settings()


def get_clock() -> Clock:
    return SystemClock()


def get_member_repository() -> IMemberRepository:
    return PostgresMemberRepository(get_database_manager())


def get_match_repository() -> IMatchRepository:
    return PostgresMatchRepository(get_database_manager())


def get_booking_repository() -> IBookingRepository:
    return PostgresBookingRepository(get_database_manager())


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    settings: Settings = Depends(get_settings_dependency),
) -> CurrentUser:
    """Resolve the caller from the Authorization header."""
    if not credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    payload = TokenVerifier(settings).verify_token(credentials.credentials)
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        user_id = str(UUID(str(payload["sub"])))
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token subject",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return CurrentUser(user_id=user_id, role=payload.get("role"), email=payload.get("email"))


def get_match_service(
    member_repository: IMemberRepository = Depends(get_member_repository),
    match_repository: IMatchRepository = Depends(get_match_repository),
    clock: Clock = Depends(get_clock),
) -> MatchApplicationService:
    dependencies = MatchDependencies(
        member_repository=member_repository,
        match_repository=match_repository,
        matching_service=MatchingService(clock),
        clock=clock,
    )
    return MatchApplicationService(dependencies)


def get_booking_service(
    member_repository: IMemberRepository = Depends(get_member_repository),
    match_repository: IMatchRepository = Depends(get_match_repository),
    booking_repository: IBookingRepository = Depends(get_booking_repository),
    clock: Clock = Depends(get_clock),
    settings: Settings = Depends(get_settings_dependency),
) -> BookingApplicationService:
    dependencies = BookingDependencies(
        member_repository=member_repository,
        match_repository=match_repository,
        booking_repository=booking_repository,
        conflict_service=BookingConflictService(clock),
        clock=clock,
        default_currency=settings.DEFAULT_CURRENCY,
    )
    return BookingApplicationService(dependencies)


CurrentUserDep = Annotated[CurrentUser, Depends(get_current_user)]
SettingsDep = Annotated[Settings, Depends(get_settings_dependency)]
MatchServiceDep = Annotated[MatchApplicationService, Depends(get_match_service)]
BookingServiceDep = Annotated[BookingApplicationService, Depends(get_booking_service)]


def map_domain_exception_to_http(exception: Exception) -> HTTPException:
    """Map domain exceptions to appropriate HTTP responses."""

    # NotFoundError hierarchy - 404 Not Found
    if isinstance(exception, NotFoundError):
        return HTTPException(status_code=404, detail=str(exception))

    # ValidationError - 400 Bad Request
    elif isinstance(exception, ValidationError):
        return HTTPException(status_code=400, detail=str(exception))

    # AuthorizationError hierarchy - 403 Forbidden
    elif isinstance(exception, AuthorizationError):
        return HTTPException(status_code=403, detail=str(exception))

    # ConflictError hierarchy - 409 Conflict
    elif isinstance(exception, ConflictError):
        return HTTPException(status_code=409, detail=str(exception))

    # ConfigurationError - 500 Internal Server Error (configuration issues)
    elif isinstance(exception, ConfigurationError):
        logger.error("Configuration error", error=str(exception))
        return HTTPException(status_code=500, detail="Service configuration error")

    # Generic DomainException - 500 Internal Server Error
    elif isinstance(exception, DomainException):
        logger.error("Unhandled domain exception", exception_type=type(exception).__name__, error=str(exception))
        return HTTPException(status_code=500, detail="Domain operation failed")

    else:
        logger.error("Non-domain exception in mapping", exception_type=type(exception).__name__, error=str(exception))
        return HTTPException(status_code=500, detail="Internal server error")


__all__ = [
    "CurrentUser",
    "CurrentUserDep",
    "SettingsDep",
    "MatchServiceDep",
    "BookingServiceDep",
    "get_clock",
    "get_current_user",
    "get_member_repository",
    "get_match_repository",
    "get_booking_repository",
    "get_match_service",
    "get_booking_service",
    "get_settings_dependency",
    "map_domain_exception_to_http",
]
